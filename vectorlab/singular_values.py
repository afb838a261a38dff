# -*- coding: utf-8 -*-
"""
Singular values via the eigenvalues of the Gram matrix AᵀA.
"""
import logging
import math

from vectorlab.eigen import eigenvalues
from vectorlab.matrix_algebra import Matrix, as_matrix, multiply, transpose

logger = logging.getLogger(__name__)


def gram_matrix(matrix):
    """AᵀA, a cols x cols symmetric positive-semidefinite matrix."""
    m = as_matrix(matrix)
    gram = multiply(transpose(m), m).to_array()
    # Symmetrize away rounding so the eigen solver stays on its real-root path
    return Matrix(0.5 * (gram + gram.T))


def singular_values(matrix):
    """
    Non-negative singular values, largest first, one per column.

    Eigenvalues of AᵀA that come out slightly negative through rounding
    are clamped to zero before the square root.
    """
    gram = gram_matrix(matrix)
    values = eigenvalues(gram)
    if len(values) != gram.rows:
        # Cannot happen for a symmetric Gram matrix
        raise ArithmeticError(f"Gram matrix produced {len(values)} real eigenvalues for size {gram.rows}")
    return sorted((math.sqrt(max(0.0, v)) for v in values), reverse=True)


def condition_number(matrix):
    """σ_max / σ_min, or inf when the smallest singular value is zero."""
    s = singular_values(matrix)
    if s[-1] == 0.0:
        return math.inf
    return s[0] / s[-1]
