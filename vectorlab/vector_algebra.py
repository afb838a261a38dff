# -*- coding: utf-8 -*-
"""
Vector helpers used by the analysis panels.

Operations that need matching lengths return None on a mismatch instead
of raising, so a panel can show "N/A" directly.
"""
import math

import numpy as np

from vectorlab.errors import DimensionError


def _as_vector(v):
    return np.asarray(v, dtype=float).ravel()


def require_same_length(v1, v2):
    """Typed counterpart of the None results below."""
    a, b = _as_vector(v1), _as_vector(v2)
    if a.shape != b.shape:
        raise DimensionError(f"Vectors have different lengths: {a.shape[0]} and {b.shape[0]}")
    return a, b


def magnitude(v):
    return float(np.sqrt(np.sum(_as_vector(v) ** 2)))


def dot_product(v1, v2):
    try:
        a, b = require_same_length(v1, v2)
    except DimensionError:
        return None
    return float(np.dot(a, b))


def cross_product(v1, v2):
    """Only defined for two 3-component vectors."""
    a, b = _as_vector(v1), _as_vector(v2)
    if a.shape[0] != 3 or b.shape[0] != 3:
        return None
    return [
        float(a[1] * b[2] - a[2] * b[1]),
        float(a[2] * b[0] - a[0] * b[2]),
        float(a[0] * b[1] - a[1] * b[0]),
    ]


def distance(v1, v2):
    try:
        a, b = require_same_length(v1, v2)
    except DimensionError:
        return None
    return magnitude(a - b)


def angle_between(v1, v2):
    """Angle in radians, or None for mismatched lengths or a zero vector."""
    dot = dot_product(v1, v2)
    if dot is None:
        return None

    mag1, mag2 = magnitude(v1), magnitude(v2)
    if mag1 == 0 or mag2 == 0:
        return None

    # Rounding can push the ratio just past ±1
    cos_theta = float(np.clip(dot / (mag1 * mag2), -1.0, 1.0))
    return math.acos(cos_theta)
