# -*- coding: utf-8 -*-
"""
Core of the Vector Transformation Playground: matrix analysis (determinant,
trace, eigenvectors, singular values, structure) and the coordinator that
keeps transformed vectors in step with their sources.
"""
from vectorlab.errors import DimensionError
from vectorlab.matrix_algebra import Matrix
from vectorlab.eigen import EigenPair, eigen_decomposition, eigenvalues
from vectorlab.singular_values import singular_values
from vectorlab.transformation import (
    DerivedVector,
    IncompatibleTransform,
    SourceVector,
    transform,
)
from vectorlab.sync import SyncCoordinator, SyncState
from vectorlab.analysis import analyze_matrix, analyze_vectors

__version__ = "0.1.0"

__all__ = [
    "DimensionError",
    "Matrix",
    "EigenPair",
    "eigen_decomposition",
    "eigenvalues",
    "singular_values",
    "SourceVector",
    "DerivedVector",
    "IncompatibleTransform",
    "transform",
    "SyncCoordinator",
    "SyncState",
    "analyze_matrix",
    "analyze_vectors",
]
