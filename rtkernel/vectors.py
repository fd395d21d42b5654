"""
vectors.py - Homogeneous point/vector type for the ray tracer kernel

A GeometricVector carries four components (x, y, z, w):
    - w = 1.0 marks a point (a position in space)
    - w = 0.0 marks a free vector (a direction or displacement)

Because w takes part in the arithmetic, the same operators serve both roles:
    point  - point  = vector
    point  + vector = point
    vector + vector = vector

Equality is approximate, using the kernel-wide tolerance EPSILON.

Project: rtkernel
"""

import numbers

import numpy as np
from typing import Iterator

from .config import EPSILON, MAX_NORMALIZATION_STEPS, NORMALIZATION_NUDGE


def equal_approx(a: float, b: float) -> bool:
    """
    Compare two scalars with the kernel tolerance.

    Parameters
    ----------
    a : float
        First value
    b : float
        Second value

    Returns
    -------
    bool
        True if |a - b| < EPSILON
    """
    return bool(abs(a - b) < EPSILON)


class GeometricVector:
    """
    Four-component homogeneous point or vector.

    Attributes
    ----------
    data : np.ndarray
        Components [x, y, z, w] as float64

    Examples
    --------
    >>> p = GeometricVector.point(4, -4, 3)
    >>> v = GeometricVector.vector(1, -8, 2)
    >>> (p + v).is_point
    True
    """

    def __init__(self, x: float, y: float, z: float, w: float):
        self.data = np.array([x, y, z, w], dtype=np.float64)

    @classmethod
    def point(cls, x: float, y: float, z: float) -> 'GeometricVector':
        """Create a point (w = 1)."""
        return cls(x, y, z, 1.0)

    @classmethod
    def vector(cls, x: float, y: float, z: float) -> 'GeometricVector':
        """Create a free vector (w = 0)."""
        return cls(x, y, z, 0.0)

    @classmethod
    def from_array(cls, values: np.ndarray) -> 'GeometricVector':
        """Create from any 4-element sequence or array."""
        x, y, z, w = values
        return cls(x, y, z, w)

    @property
    def x(self) -> float:
        return float(self.data[0])

    @property
    def y(self) -> float:
        return float(self.data[1])

    @property
    def z(self) -> float:
        return float(self.data[2])

    @property
    def w(self) -> float:
        return float(self.data[3])

    @property
    def is_point(self) -> bool:
        """True if w == 1."""
        return bool(self.data[3] == 1.0)

    @property
    def is_vector(self) -> bool:
        """True if w == 0."""
        return bool(self.data[3] == 0.0)

    def as_array(self) -> np.ndarray:
        """Return a copy of the components as a numpy array."""
        return self.data.copy()

    def __iter__(self) -> Iterator[float]:
        return (float(value) for value in self.data)

    def __add__(self, other):
        if not isinstance(other, GeometricVector):
            return NotImplemented
        return GeometricVector.from_array(self.data + other.data)

    def __sub__(self, other):
        if not isinstance(other, GeometricVector):
            return NotImplemented
        return GeometricVector.from_array(self.data - other.data)

    def __mul__(self, scalar: float):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return GeometricVector.from_array(self.data * scalar)

    def __rmul__(self, scalar: float):
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return GeometricVector.from_array(self.data / scalar)

    def __neg__(self) -> 'GeometricVector':
        return GeometricVector.from_array(self.data * -1.0)

    def __eq__(self, other) -> bool:
        if not isinstance(other, GeometricVector):
            return NotImplemented
        return self.equal_approx(other)

    __hash__ = None

    def equal_approx(self, other: 'GeometricVector') -> bool:
        """True if every component differs by less than EPSILON."""
        return bool(np.all(np.abs(self.data - other.data) < EPSILON))

    def magnitude(self) -> float:
        """
        Euclidean length over all four components.

        Returns
        -------
        float
            sqrt(x² + y² + z² + w²)
        """
        return _magnitude(self.data)

    def normalized(self) -> 'GeometricVector':
        """
        Return a copy scaled to unit length.

        Dividing by the magnitude can leave the result a rounding step away
        from 1.0. The first non-zero axis of x, y, z is then nudged outward by
        NORMALIZATION_NUDGE; if that is still not enough, the largest of the
        four components is walked one representable float at a time until
        the magnitude is exactly 1.0.

        Returns
        -------
        GeometricVector
            Unit-length copy; this vector is unchanged

        Raises
        ------
        ValueError
            If the vector has zero magnitude
        """
        magnitude = self.magnitude()
        if magnitude == 0.0:
            raise ValueError("Cannot normalize zero vector")

        normed = self.data / magnitude
        if _magnitude(normed) != 1.0:
            _correct_to_unit(normed)
        return GeometricVector.from_array(normed)

    def dot(self, other: 'GeometricVector') -> float:
        """Dot product over all four components."""
        return float(np.dot(self.data, other.data))

    def cross(self, other: 'GeometricVector') -> 'GeometricVector':
        """
        Cross product of the x, y, z parts.

        The w components are ignored; the result is always a vector (w = 0).

        Parameters
        ----------
        other : GeometricVector
            Right-hand operand

        Returns
        -------
        GeometricVector
            self × other
        """
        x, y, z = np.cross(self.data[:3], other.data[:3])
        return GeometricVector.vector(x, y, z)

    def __repr__(self) -> str:
        return f"GeometricVector({self.x}, {self.y}, {self.z}, {self.w})"

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z}, {self.w})"


def _magnitude(values: np.ndarray) -> float:
    return float(np.sqrt(np.sum(values * values)))


def _correct_to_unit(values: np.ndarray) -> None:
    # values is modified in place
    nonzero = np.flatnonzero(values[:3])
    if nonzero.size == 0:
        return

    axis = nonzero[0]
    values[axis] += NORMALIZATION_NUDGE * np.sign(values[axis])

    dominant = int(np.argmax(np.abs(values)))
    for _ in range(MAX_NORMALIZATION_STEPS):
        magnitude = _magnitude(values)
        if magnitude == 1.0:
            return
        # Grow |component| when short of 1.0, shrink it when past
        if magnitude < 1.0:
            target = np.copysign(np.inf, values[dominant])
        else:
            target = 0.0
        values[dominant] = np.nextafter(values[dominant], target)


# =============================================================================
# Factory Functions
# =============================================================================

def point(x: float, y: float, z: float) -> GeometricVector:
    """Create a point (w = 1)."""
    return GeometricVector.point(x, y, z)


def vector(x: float, y: float, z: float) -> GeometricVector:
    """Create a free vector (w = 0)."""
    return GeometricVector.vector(x, y, z)
