"""Win/loss statistics against theoretical expectations."""

from .statistics import (
    calc_mean,
    calc_means,
    calc_deviation,
    compute_expectation,
    binomial_p_value,
)

__all__ = [
    'calc_mean',
    'calc_means',
    'calc_deviation',
    'compute_expectation',
    'binomial_p_value',
]
