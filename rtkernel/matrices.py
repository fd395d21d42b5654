"""
matrices.py - Fixed-size square matrices for the ray tracer kernel

Matrix types:
    - Matrix2: 2x2, determinant computed directly (ad - bc)
    - Matrix3: 3x3, cofactor expansion down to Matrix2
    - Matrix4: 4x4, cofactor expansion down to Matrix3, plus affine
      transform builders and products with matrices and GeometricVectors

Each size is its own type so the cofactor recursion always ends at 2x2.
Sizes other than 2, 3 and 4 are not supported.

Equality (==) is exact element-wise float equality. Use equal_approx() for
comparisons with the kernel tolerance.

Project: rtkernel
"""

import numpy as np
from typing import Optional, Type

from .config import EPSILON
from .errors import DegenerateMatrixError, PreconditionViolation
from .vectors import GeometricVector


class SquareMatrix:
    """
    Base class for the fixed-size square matrices.

    Subclasses set ``size`` and, for sizes above 2, the type produced by
    ``submatrix``.

    Attributes
    ----------
    data : np.ndarray
        (size, size) array of float64 entries, indexed [row, col]
    """

    size: int = 0
    submatrix_type: Optional[Type['SquareMatrix']] = None

    def __init__(self, data):
        """
        Initialize a matrix from nested rows.

        Parameters
        ----------
        data : array-like
            ``size`` rows of ``size`` numbers each

        Raises
        ------
        ValueError
            If the data does not have shape (size, size)
        """
        values = np.array(data, dtype=np.float64)
        if values.shape != (self.size, self.size):
            raise ValueError(
                f"{self.__class__.__name__} requires shape "
                f"({self.size}, {self.size}), got {values.shape}"
            )
        self.data = values

    @classmethod
    def zeros(cls):
        """Matrix with every entry set to 0.0."""
        return cls(np.zeros((cls.size, cls.size)))

    def __getitem__(self, index):
        return self.data[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return type(self) is type(other) and bool(np.array_equal(self.data, other.data))

    __hash__ = None

    def equal_approx(self, other: 'SquareMatrix') -> bool:
        """True if the sizes match and every entry differs by less than EPSILON."""
        if type(self) is not type(other):
            return False
        return bool(np.all(np.abs(self.data - other.data) < EPSILON))

    def transposed(self):
        """Copy with data[i][j] and data[j][i] swapped."""
        return type(self)(self.data.T)

    def _check_index(self, row: int, col: int) -> None:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise PreconditionViolation(
                f"cannot exclude row {row} / col {col} from a "
                f"{self.size}x{self.size} matrix"
            )

    def submatrix(self, row: int, col: int) -> 'SquareMatrix':
        """
        Drop one row and one column, giving a matrix one size smaller.

        Parameters
        ----------
        row : int
            Row to exclude
        col : int
            Column to exclude

        Returns
        -------
        SquareMatrix
            Matrix of size ``size - 1``

        Raises
        ------
        PreconditionViolation
            If row or col lies outside the matrix
        """
        self._check_index(row, col)
        remaining = np.delete(np.delete(self.data, row, axis=0), col, axis=1)
        return self.submatrix_type(remaining)

    def minor(self, row: int, col: int) -> float:
        """Determinant of submatrix(row, col)."""
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        """Minor, negated when row + col is odd."""
        minor = self.minor(row, col)
        if (row + col) % 2 == 0:
            return minor
        return -minor

    def determinant(self) -> float:
        """
        Determinant by cofactor expansion along row 0.

        det = Σ data[0][j] * cofactor(0, j)
        """
        total = 0.0
        for col in range(self.size):
            total += self.data[0, col] * self.cofactor(0, col)
        return float(total)

    def inverted(self):
        """
        Inverse matrix built from cofactors.

        Each entry is cofactor(row, col) / det, written transposed:
        inv[col][row] = cofactor(row, col) / det

        Returns
        -------
        SquareMatrix
            Inverse of the same size

        Raises
        ------
        DegenerateMatrixError
            If the determinant is exactly 0.0
        """
        det = self.determinant()
        if det == 0.0:
            raise DegenerateMatrixError(
                "matrix has a determinant of 0 and cannot be inverted"
            )

        inverse = type(self).zeros()
        for row in range(self.size):
            for col in range(self.size):
                inverse.data[col, row] = self.cofactor(row, col) / det
        return inverse

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.data.tolist()})"


class Matrix2(SquareMatrix):
    """2x2 matrix; the base case of the cofactor recursion."""

    size = 2

    def submatrix(self, row: int, col: int) -> 'SquareMatrix':
        raise PreconditionViolation(
            "a 2x2 matrix has no submatrix; there is no 1x1 matrix type"
        )

    def minor(self, row: int, col: int) -> float:
        # Determinant of the 1x1 matrix left after dropping row and col
        self._check_index(row, col)
        return float(self.data[1 - row, 1 - col])

    def determinant(self) -> float:
        """ad - bc"""
        return float(self.data[0, 0] * self.data[1, 1] - self.data[0, 1] * self.data[1, 0])


class Matrix3(SquareMatrix):
    """3x3 matrix; submatrices are Matrix2."""

    size = 3
    submatrix_type = Matrix2


class Matrix4(SquareMatrix):
    """
    4x4 matrix for affine transforms of homogeneous points and vectors.

    The fluent builders (translate, scale, rotate_x, rotate_y, rotate_z,
    shear) post-multiply: ``m.translate(...)`` returns
    ``m @ Matrix4.translation(...)``. When the result is applied to a
    vector, the transform appended last in the chain acts first.

    Examples
    --------
    >>> m = Matrix4.identity().scale(2, 2, 1).translate(10, 5, 7)
    >>> m @ GeometricVector.point(1, 1, 1)     # translated, then scaled
    GeometricVector(22.0, 12.0, 8.0, 1.0)
    """

    size = 4
    submatrix_type = Matrix3

    @classmethod
    def identity(cls) -> 'Matrix4':
        return cls(np.identity(4))

    @classmethod
    def translation(cls, x: float, y: float, z: float) -> 'Matrix4':
        """Moves points by (x, y, z); leaves vectors unchanged."""
        return cls([[1.0, 0.0, 0.0, x],
                    [0.0, 1.0, 0.0, y],
                    [0.0, 0.0, 1.0, z],
                    [0.0, 0.0, 0.0, 1.0]])

    @classmethod
    def scaling(cls, x: float, y: float, z: float) -> 'Matrix4':
        return cls([[x, 0.0, 0.0, 0.0],
                    [0.0, y, 0.0, 0.0],
                    [0.0, 0.0, z, 0.0],
                    [0.0, 0.0, 0.0, 1.0]])

    @classmethod
    def rotation_x(cls, radians: float) -> 'Matrix4':
        c = np.cos(radians)
        s = np.sin(radians)
        return cls([[1.0, 0.0, 0.0, 0.0],
                    [0.0, c, -s, 0.0],
                    [0.0, s, c, 0.0],
                    [0.0, 0.0, 0.0, 1.0]])

    @classmethod
    def rotation_y(cls, radians: float) -> 'Matrix4':
        c = np.cos(radians)
        s = np.sin(radians)
        return cls([[c, 0.0, s, 0.0],
                    [0.0, 1.0, 0.0, 0.0],
                    [-s, 0.0, c, 0.0],
                    [0.0, 0.0, 0.0, 1.0]])

    @classmethod
    def rotation_z(cls, radians: float) -> 'Matrix4':
        c = np.cos(radians)
        s = np.sin(radians)
        return cls([[c, -s, 0.0, 0.0],
                    [s, c, 0.0, 0.0],
                    [0.0, 0.0, 1.0, 0.0],
                    [0.0, 0.0, 0.0, 1.0]])

    @classmethod
    def shearing(
        cls,
        xy: float,
        xz: float,
        yx: float,
        yz: float,
        zx: float,
        zy: float
    ) -> 'Matrix4':
        """
        Shear each axis in proportion to the other two.

        Parameters
        ----------
        xy, xz : float
            Contribution of y and z to x
        yx, yz : float
            Contribution of x and z to y
        zx, zy : float
            Contribution of x and y to z
        """
        return cls([[1.0, xy, xz, 0.0],
                    [yx, 1.0, yz, 0.0],
                    [zx, zy, 1.0, 0.0],
                    [0.0, 0.0, 0.0, 1.0]])

    def translate(self, x: float, y: float, z: float) -> 'Matrix4':
        return self @ Matrix4.translation(x, y, z)

    def scale(self, x: float, y: float, z: float) -> 'Matrix4':
        return self @ Matrix4.scaling(x, y, z)

    def rotate_x(self, radians: float) -> 'Matrix4':
        return self @ Matrix4.rotation_x(radians)

    def rotate_y(self, radians: float) -> 'Matrix4':
        return self @ Matrix4.rotation_y(radians)

    def rotate_z(self, radians: float) -> 'Matrix4':
        return self @ Matrix4.rotation_z(radians)

    def shear(
        self,
        xy: float,
        xz: float,
        yx: float,
        yz: float,
        zx: float,
        zy: float
    ) -> 'Matrix4':
        return self @ Matrix4.shearing(xy, xz, yx, yz, zx, zy)

    def __matmul__(self, other):
        """
        Matrix product with a Matrix4, or transform of a GeometricVector.

        Parameters
        ----------
        other : Matrix4 or GeometricVector
            Right-hand operand

        Returns
        -------
        Matrix4 or GeometricVector
            Row-by-column product
        """
        if isinstance(other, Matrix4):
            return Matrix4(self.data @ other.data)
        if isinstance(other, GeometricVector):
            return GeometricVector.from_array(self.data @ other.data)
        return NotImplemented
