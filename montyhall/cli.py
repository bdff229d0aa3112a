"""
Command-line interface for the Monty Hall simulator.
"""

import click
import json
import logging

from .types import ExperimentSettings
from .config import (
    GAME_PRESETS, DEFAULT_GAME_PRESET, DEFAULT_SETTINGS,
    load_game_from_json, load_settings_from_json
)
from .pipeline import run_experiment_series, series_to_frame
from .diagnostics import format_diagnostics


@click.command()
@click.option(
    '--preset', '-p',
    type=click.Choice(list(GAME_PRESETS.keys())),
    default=DEFAULT_GAME_PRESET,
    help=f'Use a preset game configuration (default: {DEFAULT_GAME_PRESET})'
)
@click.option(
    '--game-file', '-g',
    type=click.Path(exists=True),
    help='Game configuration JSON file (overrides --preset)'
)
@click.option(
    '--settings-file',
    type=click.Path(exists=True),
    help='Experiment series settings JSON file'
)
@click.option(
    '--factor',
    type=int,
    default=None,
    help=f'Trial count multiplier between experiments (default: {DEFAULT_SETTINGS.factor})'
)
@click.option(
    '--max-power',
    type=int,
    default=None,
    help=f'Largest experiment has factor**max_power trials (default: {DEFAULT_SETTINGS.max_power})'
)
@click.option(
    '--seed',
    type=int,
    help='Random seed for reproducibility'
)
@click.option(
    '--output', '-o',
    type=click.Path(),
    help='Output file for results (.json or .csv)'
)
@click.option(
    '--verbose/--quiet', '-v/-q',
    default=True,
    help='Verbose output'
)
def main(preset, game_file, settings_file, factor, max_power, seed, output, verbose):
    """
    Simulate the Monty Hall problem and compare win rates with theory.
    """
    if verbose:
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    # Load game configuration
    if game_file:
        try:
            config = load_game_from_json(game_file)
        except (ValueError, KeyError) as e:
            raise click.BadParameter(f"invalid game file: {e}", param_hint="'--game-file'")
    else:
        config = GAME_PRESETS[preset]

    # Load series settings, then apply overrides
    if settings_file:
        try:
            settings = load_settings_from_json(settings_file)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="'--settings-file'")
    else:
        settings = DEFAULT_SETTINGS

    try:
        settings = ExperimentSettings(
            factor=factor if factor is not None else settings.factor,
            max_power=max_power if max_power is not None else settings.max_power,
        )
    except ValueError as e:
        raise click.BadParameter(str(e))

    click.echo("Running experiments...")
    click.echo(f"  Game: {game_file or preset}")
    click.echo(f"  Doors: {config.total_doors}")
    click.echo(f"  Revealed doors: {config.revealed_doors}")
    click.echo(f"  Trial counts: {', '.join(str(n) for n in settings.trial_counts)}")
    if seed is not None:
        click.echo(f"  Seed: {seed}")

    results = run_experiment_series(
        config=config,
        settings=settings,
        seed=seed,
        verbose=verbose,
    )

    click.echo("\n" + format_diagnostics(results, config))

    if output:
        if output.endswith('.csv'):
            series_to_frame(results).to_csv(output, index=False)
        else:
            output_data = {
                'game': config.to_dict(),
                'settings': settings.to_dict(),
                'seed': seed,
                'results': [r.to_dict() for r in results],
            }
            with open(output, 'w') as f:
                json.dump(output_data, f, indent=2)
        click.echo(f"\nResults saved to {output}")


if __name__ == '__main__':
    main()
