"""
rnd: command-line random number generation.

This package separates parameter parsing (cli), distribution definitions
and the pure sample generator so the core can be used without the CLI.
"""

from .distributions import (
    ParameterError,
    NumberType,
    DistributionType,
    Distribution,
    UniformDistribution,
    NormalDistribution,
    ExponentialDistribution,
)
from .generator import SampleRequest, generate, make_rng
from .formatting import format_samples, format_value

__all__ = [
    'ParameterError',
    'NumberType',
    'DistributionType',
    'Distribution',
    'UniformDistribution',
    'NormalDistribution',
    'ExponentialDistribution',
    'SampleRequest',
    'generate',
    'make_rng',
    'format_samples',
    'format_value'
]
