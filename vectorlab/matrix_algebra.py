# -*- coding: utf-8 -*-
"""
Matrix algebra for the small matrices the playground works with.

Shapes are limited to 2x2, 2x3, 3x2 and 3x3. A Matrix never changes after
construction; every operation below returns a new one (or a scalar).
"""
import logging

import numpy as np

from vectorlab import config
from vectorlab.errors import DimensionError

logger = logging.getLogger(__name__)


# ---------- Dimension tags ----------

def parse_dimension(dimension):
    """'3x2' -> (3, 2). Raises DimensionError for unsupported tags."""
    tag = str(dimension).strip().lower().replace("×", "x")
    if tag not in config.SUPPORTED_DIMENSIONS:
        raise DimensionError(
            f"Unsupported matrix dimension {dimension!r}; "
            f"expected one of {', '.join(config.SUPPORTED_DIMENSIONS)}"
        )
    rows, cols = tag.split("x")
    return int(rows), int(cols)


def format_dimension(rows, cols):
    return f"{rows}x{cols}"


# ---------- Matrix value type ----------

class Matrix:
    """Immutable rows x cols matrix of floats, rows and cols in {2, 3}."""

    __slots__ = ("_array",)

    def __init__(self, values):
        if isinstance(values, Matrix):
            arr = values.to_array()
        elif isinstance(values, np.ndarray):
            arr = np.array(values, dtype=float)
        else:
            try:
                rows = [list(row) for row in values]
            except TypeError as exc:
                raise DimensionError("A matrix is built from a sequence of rows") from exc
            widths = {len(row) for row in rows}
            if len(widths) > 1:
                raise DimensionError(
                    f"Every row of a matrix must have the same number of entries, got widths {sorted(widths)}"
                )
            arr = np.array(rows, dtype=float)

        if arr.ndim != 2:
            raise DimensionError(f"A matrix needs exactly two axes, got shape {arr.shape}")
        rows, cols = arr.shape
        if format_dimension(rows, cols) not in config.SUPPORTED_DIMENSIONS:
            raise DimensionError(f"Unsupported matrix shape {rows}x{cols}")

        arr.setflags(write=False)
        self._array = arr

    @classmethod
    def identity(cls, dimension=config.DEFAULT_DIMENSION):
        rows, cols = parse_dimension(dimension)
        return cls(np.eye(rows, cols))

    @property
    def rows(self):
        return self._array.shape[0]

    @property
    def cols(self):
        return self._array.shape[1]

    @property
    def shape(self):
        return self._array.shape

    @property
    def dimension(self):
        return format_dimension(self.rows, self.cols)

    @property
    def is_square(self):
        return self.rows == self.cols

    @property
    def array(self):
        """Read-only view of the entries."""
        return self._array

    @property
    def values(self):
        return tuple(tuple(float(x) for x in row) for row in self._array)

    def to_array(self):
        """Writable copy of the entries."""
        return np.array(self._array, dtype=float)

    def __getitem__(self, index):
        return float(self._array[index])

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._array, other._array)

    def __hash__(self):
        return hash((self.shape, self.values))

    def __repr__(self):
        return f"Matrix({[list(row) for row in self.values]})"


def as_matrix(value):
    if isinstance(value, Matrix):
        return value
    return Matrix(value)


def _require_square(matrix, operation):
    m = as_matrix(matrix)
    if not m.is_square:
        raise DimensionError(f"{operation} is only defined for square matrices, got {m.dimension}")
    return m


# ---------- Constructors ----------

def identity(dimension=config.DEFAULT_DIMENSION):
    return Matrix.identity(dimension)


def resize(matrix, dimension):
    """
    Identity of the new shape with the overlapping top-left block
    copied over from the old matrix.
    """
    m = as_matrix(matrix)
    rows, cols = parse_dimension(dimension)
    out = np.eye(rows, cols)
    r, c = min(rows, m.rows), min(cols, m.cols)
    out[:r, :c] = m.array[:r, :c]
    return Matrix(out)


def with_value(matrix, row, col, value):
    m = as_matrix(matrix)
    if not (0 <= row < m.rows and 0 <= col < m.cols):
        raise IndexError(f"Entry ({row}, {col}) is outside a {m.dimension} matrix")
    out = m.to_array()
    out[row, col] = float(value)
    return Matrix(out)


# ---------- Scalar invariants ----------

def determinant(matrix):
    m = _require_square(matrix, "determinant")
    A = m.array
    if m.rows == 2:
        return float(A[0, 0] * A[1, 1] - A[0, 1] * A[1, 0])

    a, b, c = A[0]
    d, e, f = A[1]
    g, h, i = A[2]
    return float(a*e*i + b*f*g + c*d*h - c*e*g - b*d*i - a*f*h)


def trace(matrix):
    m = _require_square(matrix, "trace")
    return float(sum(m.array[k, k] for k in range(m.rows)))


def is_invertible(matrix):
    return abs(determinant(matrix)) > config.EPSILON


# ---------- Products ----------

def transpose(matrix):
    m = as_matrix(matrix)
    return Matrix(m.array.T)


def multiply(left, right):
    a, b = as_matrix(left), as_matrix(right)
    if a.cols != b.rows:
        raise DimensionError(f"Cannot multiply {a.dimension} by {b.dimension}")
    return Matrix(a.array @ b.array)


def matrix_vector_product(matrix, vector):
    """M · v as a list of floats, length rows(M)."""
    m = as_matrix(matrix)
    v = np.asarray(vector, dtype=float)
    if v.ndim != 1 or v.shape[0] != m.cols:
        raise DimensionError(
            f"A {m.dimension} matrix needs a vector with {m.cols} components, got {v.shape[0] if v.ndim else 0}"
        )
    return [float(x) for x in m.array @ v]


# ---------- Row reduction ----------

def row_reduce(values, tol=config.EPSILON):
    """
    Reduced row echelon form with partial pivoting.

    Works on any 2-D array-like (not only Matrix), since the eigen solver
    feeds it M - λI. Returns (reduced array, list of pivot columns).
    Entries at or below `tol` are treated as zero when choosing pivots.
    """
    R = np.array(values.array if isinstance(values, Matrix) else values, dtype=float)
    n_rows, n_cols = R.shape
    pivots = []
    row = 0
    for col in range(n_cols):
        if row >= n_rows:
            break
        p = row + int(np.argmax(np.abs(R[row:, col])))
        if abs(R[p, col]) <= tol:
            R[row:, col] = 0.0
            continue
        if p != row:
            R[[row, p]] = R[[p, row]]
        R[row] = R[row] / R[row, col]
        for r in range(n_rows):
            if r != row and R[r, col] != 0.0:
                R[r] = R[r] - R[r, col] * R[row]
        pivots.append(col)
        row += 1
    return R, pivots


def rank(matrix):
    _, pivots = row_reduce(as_matrix(matrix))
    return len(pivots)


# ---------- Structural predicates ----------

def _square_array(matrix):
    m = as_matrix(matrix)
    return m.array if m.is_square else None


def is_diagonal(matrix):
    A = _square_array(matrix)
    if A is None:
        return False
    off = A - np.diag(np.diag(A))
    return bool(np.all(np.abs(off) <= config.EPSILON))


def is_identity(matrix):
    A = _square_array(matrix)
    if A is None:
        return False
    return bool(np.all(np.abs(A - np.eye(A.shape[0])) <= config.EPSILON))


def is_symmetric(matrix):
    A = _square_array(matrix)
    if A is None:
        return False
    return bool(np.all(np.abs(A - A.T) <= config.EPSILON))


def is_upper_triangular(matrix):
    A = _square_array(matrix)
    if A is None:
        return False
    return bool(np.all(np.abs(np.tril(A, k=-1)) <= config.EPSILON))


def is_lower_triangular(matrix):
    A = _square_array(matrix)
    if A is None:
        return False
    return bool(np.all(np.abs(np.triu(A, k=1)) <= config.EPSILON))


def is_orthogonal(matrix):
    """Columns are orthonormal: col_i · col_j == δ_ij within tolerance."""
    A = _square_array(matrix)
    if A is None:
        return False
    gram = A.T @ A
    return bool(np.all(np.abs(gram - np.eye(A.shape[0])) <= config.ORTHOGONALITY_TOLERANCE))


CLASSIFIERS = (
    ("diagonal", is_diagonal),
    ("identity", is_identity),
    ("symmetric", is_symmetric),
    ("upper_triangular", is_upper_triangular),
    ("lower_triangular", is_lower_triangular),
    ("orthogonal", is_orthogonal),
)


def classify(matrix):
    """Names of every structural class the matrix belongs to, in a fixed order."""
    m = as_matrix(matrix)
    if not m.is_square:
        return []
    return [name for name, predicate in CLASSIFIERS if predicate(m)]
