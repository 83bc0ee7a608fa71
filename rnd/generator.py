"""
Sample generator that turns a parsed request into numbers.

This module holds the pure core of rnd: given a SampleRequest and a seed
it always returns the same array, and it never touches global RNG state.
"""

import numpy as np
from typing import Any, Dict, Optional

from .distributions import (
    Distribution,
    DistributionType,
    NumberType,
    ParameterError,
    Number,
)


class SampleRequest:
    """Represents one invocation: number type, distribution and count."""

    def __init__(self,
                 number_type: NumberType,
                 distribution: Distribution,
                 count: int):
        if count < 0:
            raise ParameterError("Error: Number not specified properly")
        self.number_type = number_type
        self.distribution = distribution
        self.count = count

    @classmethod
    def from_parameters(cls,
                        number_type: NumberType,
                        distribution_type: DistributionType,
                        count: int,
                        bound1: Optional[Number] = None,
                        bound2: Optional[Number] = None) -> "SampleRequest":
        """
        Build a request from already parsed positional values.

        Args:
            number_type: Float or int output
            distribution_type: Uniform, normal or exponential
            count: How many samples to generate
            bound1: min (uniform), stddev (normal) or scale (exponential)
            bound2: max (uniform), mean (normal) or shift (exponential)

        Returns:
            SampleRequest ready for generate()
        """
        distribution = Distribution.create(distribution_type, bound1, bound2)
        return cls(number_type, distribution, count)

    def to_dict(self) -> Dict[str, Any]:
        """Convert request to a dictionary for diagnostics."""
        return {
            "type": self.number_type.name.lower(),
            "distribution": self.distribution.to_string(),
            "count": self.count,
        }


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create a Generator, seeded from OS entropy when seed is None."""
    if seed is not None and seed < 0:
        raise ParameterError(f"Error: Seed ({seed}) cannot be negative")
    return np.random.default_rng(seed)


def generate(request: SampleRequest,
             seed: Optional[int] = None,
             rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """
    Generate the samples described by a request.

    Args:
        request: What to generate
        seed: Seed for a fresh Generator, ignored when rng is given
        rng: Existing Generator to draw from

    Returns:
        float64 array for float requests, int64 array for int requests
    """
    if rng is None:
        rng = make_rng(seed)

    if request.number_type is NumberType.INT:
        return request.distribution.sample_int(rng, request.count)
    return request.distribution.sample(rng, request.count)
