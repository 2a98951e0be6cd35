# core/matrix.py
from typing import Iterable, List, Optional, Sequence, Tuple as TupleType
import numpy as np
from phongtracer.core.errors import DimensionMismatchError, SingularMatrixError
from phongtracer.core.tuple import Tuple
from phongtracer.core.utils import EPSILON


class Matrix:
    """
    A fixed-size grid of numbers.

    The elements are kept in a flat, row-major float64 array: element
    (row, column) lives at index row * columns + column. Subclasses fix the
    size; the ray tracer only needs 2x2, 3x3 and 4x4 matrices and only the
    4x4 one supports the full algebra (multiplication, transposition,
    inversion).
    """
    size: TupleType[int, int] = (0, 0)

    def __init__(self, rows: Optional[Sequence[Sequence[float]]] = None):
        n_rows, n_columns = self.size
        if rows is None:
            self.elements = np.zeros(n_rows * n_columns, dtype=np.float64)
            return
        if len(rows) != n_rows or any(len(row) != n_columns for row in rows):
            raise DimensionMismatchError(
                f"{type(self).__name__} expects {n_rows} rows of {n_columns} columns."
            )
        self.elements = np.array([value for row in rows for value in row], dtype=np.float64)

    @classmethod
    def from_elements(cls, elements: Iterable[float]):
        """Creates a matrix from a flat list of elements stored by rows."""
        n_rows, n_columns = cls.size
        data = np.array(elements, dtype=np.float64).reshape(-1)
        if data.size != n_rows * n_columns:
            raise DimensionMismatchError(
                f"{cls.__name__} expects {n_rows * n_columns} elements, got {data.size}."
            )
        m = cls.__new__(cls)
        m.elements = data
        return m

    def copy(self):
        return type(self).from_elements(self.elements.copy())

    def _index(self, row: int, column: int) -> int:
        n_rows, n_columns = self.size
        if not (0 <= row < n_rows and 0 <= column < n_columns):
            raise IndexError(f"Invalid index ({row},{column}) for a {n_rows}x{n_columns} matrix.")
        return row * n_columns + column

    def __getitem__(self, index: TupleType[int, int]) -> float:
        row, column = index
        return float(self.elements[self._index(row, column)])

    def __setitem__(self, index: TupleType[int, int], value: float):
        row, column = index
        self.elements[self._index(row, column)] = value

    def rows(self) -> List[List[float]]:
        return self._grid().tolist()

    def _grid(self) -> np.ndarray:
        return self.elements.reshape(self.size)

    def __eq__(self, other) -> bool:
        # Element-wise comparison with the same tolerance as tuples and colors.
        if type(self) is not type(other):
            return NotImplemented
        return bool(np.all(np.abs(self.elements - other.elements) < EPSILON))

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.rows()})"


class Matrix2x2(Matrix):
    size = (2, 2)

    @property
    def determinant(self) -> float:
        return self[0, 0] * self[1, 1] - self[0, 1] * self[1, 0]


class _ExpandableMatrix(Matrix):
    """
    Shared behaviour of the matrices whose determinant is computed by
    cofactor expansion over their submatrices (3x3 and 4x4).
    """
    submatrix_type = Matrix

    def submatrix(self, row: int, column: int):
        """
        Returns the next smaller matrix with the given row and column removed.
        """
        self._index(row, column)
        grid = np.delete(np.delete(self._grid(), row, axis=0), column, axis=1)
        return self.submatrix_type.from_elements(grid)

    def minor(self, row: int, column: int) -> float:
        return self.submatrix(row, column).determinant

    def cofactor(self, row: int, column: int) -> float:
        m = self.minor(row, column)
        return -m if (row + column) % 2 else m

    @property
    def determinant(self) -> float:
        det = 0.0
        for c in range(self.size[1]):
            det += self[0, c] * self.cofactor(0, c)
        return det


class Matrix3x3(_ExpandableMatrix):
    size = (3, 3)
    submatrix_type = Matrix2x2


class Matrix4x4(_ExpandableMatrix):
    size = (4, 4)
    submatrix_type = Matrix3x3

    def __mul__(self, other):
        if isinstance(other, Matrix4x4):
            return Matrix4x4.from_elements(self._grid() @ other._grid())
        if isinstance(other, Tuple):
            # The tuple acts as a column vector.
            x, y, z, w = self._grid() @ np.array([other.x, other.y, other.z, other.w])
            return Tuple(x, y, z, w)
        return NotImplemented

    __matmul__ = __mul__

    def transpose(self):
        """Transposes the matrix in place."""
        self.elements = self._grid().T.reshape(-1).copy()

    def transposed(self) -> "Matrix4x4":
        m = self.copy()
        m.transpose()
        return m

    @property
    def is_invertible(self) -> bool:
        return self.determinant != 0

    def invert(self):
        """
        Inverts the matrix in place.

        Check is_invertible first: a singular matrix isn't rejected, the
        division by its zero determinant fills the matrix with inf/nan.
        """
        det = np.float64(self.determinant)
        cofactors = np.array([[self.cofactor(r, c) for c in range(4)] for r in range(4)])
        # Writing cofactor (row, column) to (column, row) transposes in the same pass.
        with np.errstate(divide='ignore', invalid='ignore'):
            self.elements = (cofactors.T / det).reshape(-1)

    @property
    def inverse(self) -> "Matrix4x4":
        m = self.copy()
        m.invert()
        return m

    def inverse_checked(self) -> "Matrix4x4":
        """Same as inverse, but raises SingularMatrixError instead of producing non-finite values."""
        if not self.is_invertible:
            raise SingularMatrixError("The matrix has a determinant of 0 and can't be inverted.")
        return self.inverse


Matrix4x4.IDENTITY = Matrix4x4([
    [1, 0, 0, 0],
    [0, 1, 0, 0],
    [0, 0, 1, 0],
    [0, 0, 0, 1],
])
# Shared instance: use IDENTITY.copy() for a matrix that gets edited.
Matrix4x4.IDENTITY.elements.flags.writeable = False
