"""
rays.py - Ray class for the ray tracer kernel

A ray is defined by:
    - Origin point P (a GeometricVector with w = 1)
    - Direction vector D (a GeometricVector with w = 0)

Points along the ray follow the parametric equation P(t) = P + t * D.
The direction is not normalized, so t measures distance in units of |D|.

Project: rtkernel
"""

from .matrices import Matrix4
from .vectors import GeometricVector


class Ray:
    """
    A half-line from an origin along a direction.

    Attributes
    ----------
    origin : GeometricVector
        Starting point
    direction : GeometricVector
        Direction of travel (any length)

    Examples
    --------
    >>> ray = Ray(GeometricVector.point(2, 3, 4), GeometricVector.vector(1, 0, 0))
    >>> ray.position(2.5)
    GeometricVector(4.5, 3.0, 4.0, 1.0)
    """

    def __init__(self, origin: GeometricVector, direction: GeometricVector):
        self.origin = origin
        self.direction = direction

    def position(self, t: float) -> GeometricVector:
        """
        Get the point along the ray at parameter t.

        Parameters
        ----------
        t : float
            Parameter value (multiples of the direction vector)

        Returns
        -------
        GeometricVector
            origin + t * direction
        """
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix4) -> 'Ray':
        """
        Apply a 4x4 transform to both origin and direction.

        Parameters
        ----------
        matrix : Matrix4
            Transform to apply

        Returns
        -------
        Ray
            New ray; this one is unchanged
        """
        return Ray(matrix @ self.origin, matrix @ self.direction)

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin!r}, direction={self.direction!r})"
