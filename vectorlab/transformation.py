# -*- coding: utf-8 -*-
"""
Source vectors, derived (transformed) vectors and the matrix-vector step
between them.
"""
from dataclasses import dataclass
from typing import Tuple, Union

from vectorlab import config
from vectorlab.errors import DimensionError
from vectorlab.matrix_algebra import as_matrix, matrix_vector_product


def _components(values):
    components = tuple(float(c) for c in values)
    if len(components) not in (2, 3):
        raise DimensionError(f"Vectors have 2 or 3 components, got {len(components)}")
    return components


@dataclass
class SourceVector:
    """A user-entered vector. Edited in place by the coordinator."""
    id: str
    components: Tuple[float, ...]
    label: str = ""
    color: str = "#999999"
    visible: bool = True

    def __post_init__(self):
        self.components = _components(self.components)

    @property
    def dimension(self):
        return len(self.components)

    def snapshot(self):
        return (self.id, self.components, self.label, self.color, self.visible)


@dataclass(frozen=True)
class DerivedVector:
    """Result of applying the current matrix to one SourceVector. Read-only."""
    id: str
    components: Tuple[float, ...]
    label: str
    color: str
    visible: bool
    source_id: str
    derived: bool = True
    opacity: float = config.DERIVED_OPACITY

    @property
    def dimension(self):
        return len(self.components)


@dataclass(frozen=True)
class IncompatibleTransform:
    """
    The matrix has `required_dimension` columns but the vector has
    `vector_dimension` components. Falsy, so `if result:` reads naturally.
    """
    vector_id: str
    vector_dimension: int
    required_dimension: int

    def __bool__(self):
        return False

    @property
    def message(self):
        return (
            f"Vector {self.vector_id!r} has {self.vector_dimension} components "
            f"but the matrix needs {self.required_dimension}"
        )


def derived_id(source_id):
    return f"{config.DERIVED_ID_PREFIX}{source_id}"


def derived_label(label):
    return f"{label}{config.DERIVED_LABEL_SUFFIX}"


def is_compatible(matrix, source):
    return as_matrix(matrix).cols == len(source.components)


def transform(matrix, source) -> Union[DerivedVector, IncompatibleTransform]:
    """
    M · v for one source vector. No side effects and no caching.

    Colour, label and visibility are inherited from the source; the id is
    derived from the source id so that equal inputs give equal results.
    """
    m = as_matrix(matrix)
    if m.cols != len(source.components):
        return IncompatibleTransform(source.id, len(source.components), m.cols)

    return DerivedVector(
        id=derived_id(source.id),
        components=tuple(matrix_vector_product(m, source.components)),
        label=derived_label(source.label),
        color=source.color,
        visible=source.visible,
        source_id=source.id,
    )
