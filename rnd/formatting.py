"""Output formatting for generated samples."""

import numpy as np

SEPARATOR = ", "


def format_value(value) -> str:
    """Shortest round-tripping positional form for floats, base 10 for ints."""
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    return np.format_float_positional(value, unique=True, trim="-")


def format_samples(samples: np.ndarray) -> str:
    """
    Join samples into a single output line.

    Args:
        samples: 1-D array from generate()

    Returns:
        Comma separated values, or an empty string when there are none
    """
    return SEPARATOR.join(format_value(value) for value in samples)
