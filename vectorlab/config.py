# -*- coding: utf-8 -*-
"""
Global constants for the vector playground.

Tolerances are fixed; nothing here adapts to the conditioning of the input.
"""
import os


# ---------- Numerical tolerances ----------

EPSILON = 1e-10                      # determinant / structural predicates
ORTHOGONALITY_TOLERANCE = 1e-8       # column dot products accumulate more error
EIGENVALUE_MERGE_TOLERANCE = 1e-9    # 2x2 roots closer than this are one repeated root
CUBIC_ROOT_MERGE_TOLERANCE = 1e-7    # 3x3: a double root of the cubic is only good to ~sqrt(machine eps)
NULL_SPACE_TOLERANCE = 1e-8          # pivot threshold for (M - λI), relative to max |entry|
CUBIC_DISCRIMINANT_TOLERANCE = 1e-9  # 4P³ + 27Q² <= tol * (4|P|³ + 27Q²), P < 0  ->  three real roots
TRIPLE_ROOT_TOLERANCE = 1e-12        # |P| <= tol * max|a|², |Q| <= tol * max|a|³  ->  one triple root


# ---------- Matrix shapes ----------

SUPPORTED_DIMENSIONS = ("2x2", "2x3", "3x2", "3x3")
DEFAULT_DIMENSION = "3x3"


# ---------- Derived vectors ----------

DERIVED_ID_PREFIX = "transformed-"
DERIVED_LABEL_SUFFIX = " - T"
DERIVED_OPACITY = 0.6


# ---------- Logging ----------

LOG_LEVEL = os.environ.get("VECTORLAB_LOG_LEVEL", "INFO").upper()
