"""
Distribution definitions for random number generation.

Each distribution knows how to turn the two optional positional bounds
into its own parameters and how to draw samples from a numpy Generator.
"""

import warnings
import numpy as np
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Optional, Type, Union

Number = Union[int, float]

PARAMETER_ERROR_EXIT_CODE = 3
INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1


class ParameterError(ValueError):
    """Raised for any invalid command-line or generator parameter."""

    exit_code = PARAMETER_ERROR_EXIT_CODE


def is_finite(value: Number) -> bool:
    """Finite check that also accepts ints too large for a float."""
    try:
        return bool(np.isfinite(float(value)))
    except OverflowError:
        return False


def _checked_int64(values: np.ndarray) -> np.ndarray:
    if np.any(values < INT64_MIN) or np.any(values >= 2.0 ** 63):
        raise ParameterError("Error: Samples fall outside the 64-bit integer range")
    return values.astype(np.int64)


class NumberType(Enum):
    """Numeric type of the generated samples."""
    FLOAT = "f"
    INT = "i"

    @classmethod
    def from_tag(cls, tag: str) -> "NumberType":
        """Resolve 'f'/'float' or 'i'/'int' (case-insensitive)."""
        key = tag.strip().lower()
        for member in cls:
            if key in (member.value, member.name.lower()):
                return member
        raise ParameterError(
            "Error: First parameter is either 'f' for floats or 'i' for ints, "
            "or 2 letters combining type and distribution"
        )


class DistributionType(Enum):
    """Distribution types for sampling."""
    UNIFORM = "u"
    NORMAL = "n"
    EXPONENTIAL = "e"

    @classmethod
    def from_tag(cls, tag: str) -> "DistributionType":
        """Resolve a one-letter tag or full name (case-insensitive)."""
        key = tag.strip().lower()
        for member in cls:
            if key in (member.value, member.name.lower()):
                return member
        raise ParameterError(
            "Error: Need to specify uniform, normal or exponential distribution"
        )


class Distribution(ABC):
    """
    Abstract base class for the supported distributions.

    Subclasses register themselves by tag so that the CLI can go from a
    parsed DistributionType to a concrete class without a dispatch table.
    """

    _registry: Dict[str, Type["Distribution"]] = {}
    distribution_type: DistributionType

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls._registry[cls.distribution_type.value] = cls

    @abstractmethod
    def sample(self, rng: np.random.Generator, count: int) -> np.ndarray:
        """
        Draw samples as float64.

        Args:
            rng: Source of randomness
            count: Number of samples to draw

        Returns:
            1-D float64 array of length count
        """
        pass

    def to_int(self, values: np.ndarray) -> np.ndarray:
        """Truncate float samples toward zero."""
        return _checked_int64(np.trunc(values))

    def sample_int(self, rng: np.random.Generator, count: int) -> np.ndarray:
        """Draw samples as int64."""
        return self.to_int(self.sample(rng, count))

    @abstractmethod
    def to_string(self) -> str:
        """Human readable form, e.g. 'U(0,10)'."""
        pass

    @classmethod
    @abstractmethod
    def from_bounds(cls, bound1: Optional[Number] = None,
                    bound2: Optional[Number] = None) -> "Distribution":
        """Build the distribution from the positional min/stddev and max/mean."""
        pass

    @classmethod
    def create(cls, distribution_type: DistributionType,
               bound1: Optional[Number] = None,
               bound2: Optional[Number] = None) -> "Distribution":
        """
        Factory method to create a distribution from its type and bounds.

        Args:
            distribution_type: Which distribution to build
            bound1: min (uniform), stddev (normal) or scale (exponential)
            bound2: max (uniform), mean (normal) or shift (exponential)

        Returns:
            Distribution instance
        """
        if (bound1 is None) != (bound2 is None):
            raise ParameterError("Error: Specify both bounds (min/stddev and max/mean) or neither")

        distribution_class = cls._registry[distribution_type.value]
        return distribution_class.from_bounds(bound1, bound2)


class UniformDistribution(Distribution):
    """Uniform distribution on [low, high)."""

    distribution_type = DistributionType.UNIFORM

    def __init__(self, low: float = 0.0, high: float = 1.0):
        if not is_finite(low) or not is_finite(high):
            raise ParameterError("Error: Uniform bounds must be finite")
        if not high > low:
            raise ParameterError(f"Error: Maximum ({high}) must be greater than minimum ({low})")
        self.low = float(low)
        self.high = float(high)
        self.integer_bounds = None
        if isinstance(low, (int, np.integer)) and isinstance(high, (int, np.integer)):
            if low < INT64_MIN or high > INT64_MAX:
                raise ParameterError("Error: Uniform bounds fall outside the 64-bit integer range")
            self.integer_bounds = (int(low), int(high))

    def sample(self, rng: np.random.Generator, count: int) -> np.ndarray:
        """Rescale U[0,1) draws to [low, high)."""
        values = rng.random(count) * (self.high - self.low) + self.low
        # Rounding in the rescale can land exactly on high
        return np.minimum(values, np.nextafter(self.high, self.low))

    def to_int(self, values: np.ndarray) -> np.ndarray:
        # Floor keeps negative samples inside [low, high)
        return _checked_int64(np.floor(values))

    def sample_int(self, rng: np.random.Generator, count: int) -> np.ndarray:
        """Exact integer draws when both bounds are ints, floored floats otherwise."""
        if self.integer_bounds is None:
            return super().sample_int(rng, count)
        low, high = self.integer_bounds
        return rng.integers(low, high, size=count, dtype=np.int64)

    def to_string(self) -> str:
        return f"U({self.low:g},{self.high:g})"

    @classmethod
    def from_bounds(cls, bound1=None, bound2=None) -> "UniformDistribution":
        if bound1 is None:
            return cls()
        return cls(bound1, bound2)


class NormalDistribution(Distribution):
    """Normal distribution: standard draw * stddev + mean."""

    distribution_type = DistributionType.NORMAL

    def __init__(self, stddev: float = 1.0, mean: float = 0.0):
        if not is_finite(stddev) or not is_finite(mean):
            raise ParameterError("Error: Standard deviation and mean must be finite")
        if stddev < 0:
            raise ParameterError(f"Error: Standard deviation ({stddev}) cannot be negative")
        if stddev == 0:
            warnings.warn("Standard deviation is 0, every sample will equal the mean")
        self.stddev = float(stddev)
        self.mean = float(mean)

    def sample(self, rng: np.random.Generator, count: int) -> np.ndarray:
        return rng.standard_normal(count) * self.stddev + self.mean

    def to_string(self) -> str:
        return f"N({self.mean:g},{self.stddev:g})"

    @classmethod
    def from_bounds(cls, bound1=None, bound2=None) -> "NormalDistribution":
        if bound1 is None:
            return cls()
        return cls(stddev=bound1, mean=bound2)


class ExponentialDistribution(Distribution):
    """Exponential distribution: standard (rate 1) draw * scale + shift."""

    distribution_type = DistributionType.EXPONENTIAL

    def __init__(self, scale: float = 1.0, shift: float = 0.0):
        if not is_finite(scale) or not is_finite(shift):
            raise ParameterError("Error: Scale and shift must be finite")
        if scale < 0:
            raise ParameterError(f"Error: Scale ({scale}) cannot be negative")
        if scale == 0:
            warnings.warn("Scale is 0, every sample will equal the shift")
        self.scale = float(scale)
        self.shift = float(shift)

    def sample(self, rng: np.random.Generator, count: int) -> np.ndarray:
        return rng.standard_exponential(count) * self.scale + self.shift

    def to_string(self) -> str:
        return f"E({self.scale:g},{self.shift:g})"

    @classmethod
    def from_bounds(cls, bound1=None, bound2=None) -> "ExponentialDistribution":
        if bound1 is None:
            return cls()
        return cls(scale=bound1, shift=bound2)
