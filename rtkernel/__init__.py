"""
rtkernel - Geometry kernel for a toy ray tracer

Homogeneous points and vectors, fixed-size square matrices with cofactor
inversion, ray/sphere intersection, and a pixel canvas that serializes to
plain-text PPM.
"""

from .vectors import GeometricVector, equal_approx, point, vector
from .colors import Color, quantize
from .matrices import SquareMatrix, Matrix2, Matrix3, Matrix4
from .canvas import Canvas
from .ppm import PpmEncoder
from .rays import Ray
from .spheres import Sphere
from .intersector import intersect
from .config import EPSILON, PpmConfig
from .errors import RtKernelError, DegenerateMatrixError, PreconditionViolation

__version__ = "0.1.0"

__all__ = [
    # Vectors
    "GeometricVector",
    "equal_approx",
    "point",
    "vector",
    # Colors
    "Color",
    "quantize",
    # Matrices
    "SquareMatrix",
    "Matrix2",
    "Matrix3",
    "Matrix4",
    # Canvas
    "Canvas",
    "PpmEncoder",
    # Geometry
    "Ray",
    "Sphere",
    "intersect",
    # Configuration and errors
    "EPSILON",
    "PpmConfig",
    "RtKernelError",
    "DegenerateMatrixError",
    "PreconditionViolation",
]
