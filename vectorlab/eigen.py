# -*- coding: utf-8 -*-
"""
Real eigenvalues and eigenvectors of 2x2 and 3x3 matrices.

Eigenvalues come from the characteristic polynomial in closed form
(quadratic formula, trigonometric / Cardano cubic). Complex roots are never
approximated: a 2x2 with a negative discriminant has no real eigenvalues and
a 3x3 with one real root reports only that root.
"""
from dataclasses import dataclass
import logging
import math

import numpy as np

from vectorlab import config
from vectorlab.errors import DimensionError
from vectorlab.matrix_algebra import (
    as_matrix,
    determinant,
    is_symmetric,
    row_reduce,
    trace,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EigenPair:
    eigenvalue: float
    eigenvector: tuple


# ---------- Characteristic polynomial roots ----------

def _roots_2x2(m):
    A = m.array
    tr = trace(m)
    if is_symmetric(m):
        b = 0.5 * (A[0, 1] + A[1, 0])
        disc = (A[0, 0] - A[1, 1]) ** 2 + 4.0 * b * b
    else:
        disc = tr * tr - 4.0 * determinant(m)

    if disc < 0:
        return []
    root = math.sqrt(disc)
    return [(tr + root) / 2.0, (tr - root) / 2.0]


def characteristic_coefficients(matrix):
    """(p, q, r) of λ³ + pλ² + qλ + r for a 3x3 matrix."""
    m = as_matrix(matrix)
    A = m.array
    p = -trace(m)
    q = (A[0, 0]*A[1, 1] - A[0, 1]*A[1, 0]
         + A[0, 0]*A[2, 2] - A[0, 2]*A[2, 0]
         + A[1, 1]*A[2, 2] - A[1, 2]*A[2, 1])
    r = -determinant(m)
    return p, float(q), r


def _roots_3x3(m):
    p, q, r = characteristic_coefficients(m)

    # λ = t - p/3 turns the cubic into t³ + P t + Q = 0
    shift = -p / 3.0
    P = q - p * p / 3.0
    Q = 2.0 * p ** 3 / 27.0 - p * q / 3.0 + r

    size = float(np.max(np.abs(m.array)))
    triple_tol = config.TRIPLE_ROOT_TOLERANCE
    if abs(P) <= triple_tol * size ** 2 and abs(Q) <= triple_tol * size ** 3:
        return [shift, shift, shift]

    symmetric = is_symmetric(m)
    if symmetric and P >= 0:
        # Only rounding makes P non-negative for a symmetric matrix
        return [shift, shift, shift]

    # Relative to the cubic's own size, so small matrices are judged alike
    disc = 4.0 * P ** 3 + 27.0 * Q ** 2
    disc_tol = config.CUBIC_DISCRIMINANT_TOLERANCE * (4.0 * abs(P) ** 3 + 27.0 * Q ** 2)
    if P < 0 and (symmetric or disc <= disc_tol):
        amplitude = 2.0 * math.sqrt(-P / 3.0)
        arg = (3.0 * Q / (2.0 * P)) * math.sqrt(-3.0 / P)
        theta = math.acos(float(np.clip(arg, -1.0, 1.0))) / 3.0
        return [shift + amplitude * math.cos(theta - 2.0 * math.pi * k / 3.0) for k in range(3)]

    # One real root, two complex conjugates
    root = math.sqrt(max(0.0, disc) / 108.0)
    t = float(np.cbrt(-Q / 2.0 + root) + np.cbrt(-Q / 2.0 - root))
    logger.warning(
        "Matrix has complex eigenvalues; reporting the single real root %.6g only", shift + t
    )
    return [shift + t]


def _scale(m):
    return max(1.0, float(np.max(np.abs(m.array))))


def _cluster(values, tol):
    """Split descending values into runs whose spread stays within tol."""
    clusters = []
    for value in values:
        if clusters and clusters[-1][0] - value <= tol:
            clusters[-1].append(value)
        else:
            clusters.append([value])
    return clusters


def _snap(roots, tol):
    """Sort descending and replace near-equal roots by their mean."""
    roots = sorted((float(x) for x in roots), reverse=True)
    snapped = []
    for cluster in _cluster(roots, tol):
        snapped.extend([sum(cluster) / len(cluster)] * len(cluster))
    return snapped


def eigenvalues(matrix):
    """
    Real eigenvalues with algebraic multiplicity, largest first.

    An empty list (2x2) or a list shorter than the matrix size (3x3)
    means the remaining eigenvalues are complex.
    """
    m = as_matrix(matrix)
    if not m.is_square:
        raise DimensionError(f"Eigenvalues need a square matrix, got {m.dimension}")
    if m.rows == 2:
        roots, tol = _roots_2x2(m), config.EIGENVALUE_MERGE_TOLERANCE
    else:
        roots, tol = _roots_3x3(m), config.CUBIC_ROOT_MERGE_TOLERANCE
    return _snap(roots, tol * _scale(m))


# ---------- Eigenvectors ----------

def _normalize(v):
    v = np.asarray(v, dtype=float)
    norm = float(np.linalg.norm(v))
    if norm <= config.EPSILON:
        return None
    v = v / norm
    for x in v:
        if abs(x) > config.EPSILON:
            if x < 0:
                v = -v
            break
    # + 0.0 turns -0.0 into 0.0
    return tuple(float(x) + 0.0 for x in v)


def _fallback_null_vector(A):
    """
    One vector (almost) orthogonal to every row of A, for when row
    reduction finds full rank because λ carries rounding error.
    """
    if A.shape[1] == 2:
        a, b = max(A, key=lambda row: float(np.linalg.norm(row)))
        candidate = np.array([-b, a])
    else:
        candidates = [np.cross(A[i], A[j]) for i, j in ((0, 1), (0, 2), (1, 2))]
        candidate = max(candidates, key=lambda c: float(np.linalg.norm(c)))
    if np.linalg.norm(candidate) <= config.EPSILON:
        return []
    return [candidate]


def null_space(values, tol=None):
    """
    Basis of {x : A x = 0} read off the reduced row echelon form,
    one vector per free column.
    """
    A = np.asarray(values, dtype=float)
    if tol is None:
        tol = config.NULL_SPACE_TOLERANCE * max(1.0, float(np.max(np.abs(A))))
    R, pivots = row_reduce(A, tol)
    n = A.shape[1]

    basis = []
    for free in (c for c in range(n) if c not in pivots):
        v = np.zeros(n)
        v[free] = 1.0
        for row, col in enumerate(pivots):
            v[col] = -R[row, free]
        basis.append(v)
    return basis


def _eigenspace(m, value):
    shifted = m.to_array() - value * np.eye(m.rows)
    basis = null_space(shifted)
    if not basis:
        basis = _fallback_null_vector(shifted)
    return [v for v in (_normalize(b) for b in basis) if v is not None]


def _eigen_clusters(m):
    # eigenvalues() already snapped repeated roots to one value
    return _cluster(eigenvalues(m), 0.0)


def eigen_decomposition(matrix):
    """
    EigenPairs sorted by descending eigenvalue, one eigenvector per
    returned eigenvalue. Eigenvectors have unit length and their first
    non-negligible component positive.

    A repeated eigenvalue takes successive basis vectors of its eigenspace.
    If the eigenspace is smaller than the multiplicity (defective matrix),
    the last basis vector is repeated.
    """
    m = as_matrix(matrix)
    pairs = []
    for cluster in _eigen_clusters(m):
        center = sum(cluster) / len(cluster)
        vectors = _eigenspace(m, center)
        if not vectors:
            logger.warning("No eigenvector found for eigenvalue %.6g", center)
            continue
        if len(vectors) < len(cluster):
            logger.warning(
                "Defective matrix: eigenvalue %.6g has multiplicity %d but only %d independent eigenvector(s)",
                center, len(cluster), len(vectors),
            )
        for k, value in enumerate(cluster):
            pairs.append(EigenPair(value, vectors[min(k, len(vectors) - 1)]))
    return pairs


def is_defective(matrix):
    """True when some real eigenvalue has fewer eigenvectors than its multiplicity."""
    m = as_matrix(matrix)
    for cluster in _eigen_clusters(m):
        center = sum(cluster) / len(cluster)
        if len(_eigenspace(m, center)) < len(cluster):
            return True
    return False
