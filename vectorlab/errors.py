# -*- coding: utf-8 -*-
"""Exceptions raised by the algebra modules."""


class DimensionError(ValueError):
    """
    A square-only operation got a non-square matrix, or two vectors
    (or a matrix and a vector) have incompatible lengths.
    """
