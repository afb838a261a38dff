# -*- coding: utf-8 -*-
"""
Analysis panels: everything the UI shows about the current matrix and
vectors, recomputed from scratch on each query.
"""
from dataclasses import dataclass
from itertools import combinations
import math
from typing import Optional, Tuple

from vectorlab.eigen import EigenPair, eigen_decomposition, is_defective
from vectorlab.matrix_algebra import (
    as_matrix,
    classify,
    determinant,
    is_invertible,
    rank,
    trace,
)
from vectorlab.singular_values import condition_number, singular_values
from vectorlab.vector_algebra import (
    angle_between,
    cross_product,
    distance,
    dot_product,
    magnitude,
)


# ---------- Matrix panel ----------

@dataclass(frozen=True)
class MatrixAnalysis:
    """Square-only fields are None for rectangular matrices."""
    dimension: str
    is_square: bool
    rank: int
    singular_values: Tuple[float, ...]
    condition_number: float
    classification: Tuple[str, ...]
    determinant: Optional[float] = None
    trace: Optional[float] = None
    invertible: Optional[bool] = None
    eigenpairs: Optional[Tuple[EigenPair, ...]] = None
    defective: Optional[bool] = None

    @property
    def eigenvalues(self):
        if self.eigenpairs is None:
            return None
        return [pair.eigenvalue for pair in self.eigenpairs]

    @property
    def eigenvectors(self):
        if self.eigenpairs is None:
            return None
        return [pair.eigenvector for pair in self.eigenpairs]

    @property
    def complete_eigen_decomposition(self):
        """False when some eigenvalues are complex (fewer pairs than rows)."""
        if self.eigenpairs is None:
            return False
        size = int(self.dimension.split("x")[0])
        return len(self.eigenpairs) == size


def analyze_matrix(matrix):
    m = as_matrix(matrix)
    common = dict(
        dimension=m.dimension,
        is_square=m.is_square,
        rank=rank(m),
        singular_values=tuple(singular_values(m)),
        condition_number=condition_number(m),
        classification=tuple(classify(m)),
    )
    if not m.is_square:
        return MatrixAnalysis(**common)

    return MatrixAnalysis(
        determinant=determinant(m),
        trace=trace(m),
        invertible=is_invertible(m),
        eigenpairs=tuple(eigen_decomposition(m)),
        defective=is_defective(m),
        **common,
    )


# ---------- Vector panels ----------

@dataclass(frozen=True)
class VectorReport:
    source_id: str
    label: str
    color: str
    components: Tuple[float, ...]
    magnitude: float
    derived_components: Optional[Tuple[float, ...]] = None
    derived_magnitude: Optional[float] = None
    distance_from_original: Optional[float] = None


@dataclass(frozen=True)
class PairReport:
    first_id: str
    second_id: str
    dot: Optional[float]
    cross: Optional[Tuple[float, ...]]
    angle: Optional[float]
    distance: Optional[float]

    @property
    def angle_degrees(self):
        return None if self.angle is None else math.degrees(self.angle)


def analyze_vectors(sources, derived=()):
    """
    One VectorReport per source (with its derived vector, if any) and one
    PairReport per unordered pair of sources.
    """
    by_source = {d.source_id: d for d in derived}

    reports = []
    for source in sources:
        report = dict(
            source_id=source.id,
            label=source.label,
            color=source.color,
            components=tuple(source.components),
            magnitude=magnitude(source.components),
        )
        d = by_source.get(source.id)
        if d is not None:
            report.update(
                derived_components=d.components,
                derived_magnitude=magnitude(d.components),
                distance_from_original=distance(source.components, d.components),
            )
        reports.append(VectorReport(**report))

    pairs = []
    for v1, v2 in combinations(sources, 2):
        cross = cross_product(v1.components, v2.components)
        pairs.append(PairReport(
            first_id=v1.id,
            second_id=v2.id,
            dot=dot_product(v1.components, v2.components),
            cross=None if cross is None else tuple(cross),
            angle=angle_between(v1.components, v2.components),
            distance=distance(v1.components, v2.components),
        ))

    return reports, pairs
