"""
colors.py - RGB color type and 8-bit quantization

Color channels are plain floats with no clamping during arithmetic, so
intermediate results may leave the [0, 1] range. Only quantization maps them
to 8-bit integers.

Project: rtkernel
"""

import numbers

import numpy as np
from typing import Tuple

from .config import EPSILON, MAX_COLOR_VALUE


def quantize(values) -> np.ndarray:
    """
    Convert float channel values to 8-bit integers.

    Each value is scaled by 255 and truncated toward zero. The cast
    saturates rather than wraps: results above 255 become 255, results
    below 0 become 0, and NaN becomes 0.

    Parameters
    ----------
    values : array-like
        Channel values of any shape (nominally in [0, 1])

    Returns
    -------
    np.ndarray
        Integer array of the same shape with values in [0, 255]

    Examples
    --------
    >>> quantize([1.5, 0.5, -0.5]).tolist()
    [255, 127, 0]
    """
    scaled = np.trunc(np.asarray(values, dtype=np.float64) * MAX_COLOR_VALUE)
    scaled = np.nan_to_num(scaled, nan=0.0)
    return np.clip(scaled, 0, MAX_COLOR_VALUE).astype(np.int64)


class Color:
    """
    RGB color with linear arithmetic.

    Attributes
    ----------
    data : np.ndarray
        Channels [r, g, b] as float64
    """

    def __init__(self, r: float, g: float, b: float):
        self.data = np.array([r, g, b], dtype=np.float64)

    @classmethod
    def from_array(cls, values) -> 'Color':
        r, g, b = values
        return cls(r, g, b)

    @property
    def r(self) -> float:
        return float(self.data[0])

    @property
    def g(self) -> float:
        return float(self.data[1])

    @property
    def b(self) -> float:
        return float(self.data[2])

    def __add__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return Color.from_array(self.data + other.data)

    def __sub__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return Color.from_array(self.data - other.data)

    def __mul__(self, other):
        # Color * Color is the Hadamard (channel-wise) product
        if isinstance(other, Color):
            return Color.from_array(self.data * other.data)
        if isinstance(other, numbers.Real):
            return Color.from_array(self.data * other)
        return NotImplemented

    def __rmul__(self, other):
        return self.__mul__(other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.equal_approx(other)

    __hash__ = None

    def equal_approx(self, other: 'Color') -> bool:
        return bool(np.all(np.abs(self.data - other.data) < EPSILON))

    def as_u8_tuple(self) -> Tuple[int, int, int]:
        """
        Quantize to an (r, g, b) tuple of 8-bit integers.

        See ``quantize`` for the exact cast rules.
        """
        r, g, b = quantize(self.data)
        return int(r), int(g), int(b)

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"

