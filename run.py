"""
One-button runner for the Monty Hall simulator.

Usage:
    python run.py

    # With another preset:
    python run.py --preset ten_doors

    # With custom game JSON:
    python run.py --game-file game.json

Runs 10, 100, ... 1,000,000 trials staying and switching and prints
the observed rates next to their deviation from theory.
"""

import argparse
import json
import logging

from montyhall.config import GAME_PRESETS, load_game_from_json, DEFAULT_SETTINGS
from montyhall.types import ExperimentSettings
from montyhall.pipeline import run_experiment_series
from montyhall.diagnostics import format_diagnostics

# Defaults — edit these to change the one-button run
DEFAULT_PRESET = "classic"
DEFAULT_SEED = 42


def main():
    parser = argparse.ArgumentParser(
        description="One-button Monty Hall experiment series"
    )
    parser.add_argument(
        "--preset", default=DEFAULT_PRESET,
        choices=list(GAME_PRESETS.keys()),
        help=f"Game preset (default: {DEFAULT_PRESET})"
    )
    parser.add_argument(
        "--game-file", default=None,
        help="Custom game JSON file (overrides --preset)"
    )
    parser.add_argument(
        "--max-power", type=int, default=DEFAULT_SETTINGS.max_power,
        help=f"Largest series has 10**max_power trials (default: {DEFAULT_SETTINGS.max_power})"
    )
    parser.add_argument(
        "--seed", type=int, default=DEFAULT_SEED,
        help=f"Random seed (default: {DEFAULT_SEED})"
    )
    parser.add_argument(
        "--output", "-o", default=None,
        help="Output JSON path (default: no file)"
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if args.game_file:
        config = load_game_from_json(args.game_file)
    else:
        config = GAME_PRESETS[args.preset]

    settings = ExperimentSettings(factor=DEFAULT_SETTINGS.factor, max_power=args.max_power)

    print(f"Game: {args.game_file or args.preset}")
    print(f"Seed: {args.seed}")
    print()

    results = run_experiment_series(
        config=config,
        settings=settings,
        seed=args.seed,
        verbose=True,
    )

    print("\n" + format_diagnostics(results, config))

    if args.output:
        with open(args.output, 'w') as f:
            json.dump([r.to_dict() for r in results], f, indent=2)
        print(f"\n  Results: {args.output}")


if __name__ == '__main__':
    main()
