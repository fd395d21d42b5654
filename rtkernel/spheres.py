"""
spheres.py - Sphere primitive for the ray tracer kernel

Every sphere is the unit sphere (radius 1) centred on its own local origin.
Size, position and orientation come entirely from the attached 4x4
transform, which maps object space to world space.

Project: rtkernel
"""

from typing import Optional

from .matrices import Matrix4


class Sphere:
    """
    Unit sphere with an object-to-world transform.

    Attributes
    ----------
    identifier : int
        Label distinguishing instances; has no geometric effect
    transform : Matrix4
        Object-to-world transform (default: identity)
    """

    def __init__(self, identifier: int = 0, transform: Optional[Matrix4] = None):
        self.identifier = identifier
        self.transform = transform if transform is not None else Matrix4.identity()

    def set_transform(self, transform: Matrix4) -> None:
        """Replace the object-to-world transform."""
        self.transform = transform

    def inverse_transform(self) -> Matrix4:
        """
        World-to-object transform.

        Raises
        ------
        DegenerateMatrixError
            If the transform is not invertible
        """
        return self.transform.inverted()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Sphere):
            return NotImplemented
        return self.identifier == other.identifier and self.transform == other.transform

    __hash__ = None

    def __repr__(self) -> str:
        return f"Sphere(identifier={self.identifier}, transform={self.transform!r})"
