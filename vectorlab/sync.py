# -*- coding: utf-8 -*-
"""
Keeps the derived (transformed) vectors in step with the source vectors and
the current matrix.

The coordinator owns all mutable state: the matrix, the ordered source
vectors, the derived collection and the fingerprint of the inputs that
produced it. Every mutation entry point ends in `sync()`, which recomputes
only when the fingerprint changed. Calling `sync()` again with the same
inputs (for example from a listener, or from a Streamlit rerun) is a no-op.
"""
from contextlib import contextmanager
from dataclasses import replace
from enum import Enum
import itertools
import logging

from vectorlab import config
from vectorlab.colors import next_color
from vectorlab.matrix_algebra import Matrix, as_matrix, resize, transpose, with_value
from vectorlab.transformation import SourceVector, transform

logger = logging.getLogger(__name__)


class SyncState(Enum):
    IDLE = "idle"
    DIRTY = "dirty"
    RECOMPUTING = "recomputing"


class SyncCoordinator:
    """Central store for vectors and matrix, with derived-vector sync."""

    def __init__(self, matrix=None, derived_display=True):
        self._matrix = as_matrix(matrix) if matrix is not None else Matrix.identity(config.DEFAULT_DIMENSION)
        self._sources = []
        self._derived = ()
        self._incompatible = ()
        self._derived_display = bool(derived_display)

        self._fingerprint = None
        self._recompute_count = 0
        self._state = SyncState.DIRTY
        self._batch_depth = 0
        self._listeners = []
        self._ids = itertools.count(1)

        self.sync()

    # ---------- Read-only queries ----------

    @property
    def matrix(self):
        return self._matrix

    @property
    def sources(self):
        return tuple(replace(s) for s in self._sources)

    @property
    def derived(self):
        return self._derived

    @property
    def incompatible(self):
        """IncompatibleTransform records from the last recompute."""
        return self._incompatible

    @property
    def derived_display(self):
        return self._derived_display

    @property
    def state(self):
        return self._state

    @property
    def fingerprint(self):
        return self._fingerprint

    @property
    def recompute_count(self):
        return self._recompute_count

    def source(self, vector_id):
        return replace(self._find(vector_id))

    def derived_for(self, source_id):
        for vector in self._derived:
            if vector.source_id == source_id:
                return vector
        return None

    def analysis(self):
        from vectorlab.analysis import analyze_matrix
        return analyze_matrix(self._matrix)

    def vector_analysis(self):
        from vectorlab.analysis import analyze_vectors
        return analyze_vectors(self.sources, self._derived)

    # ---------- Listeners ----------

    def subscribe(self, callback):
        """
        Call `callback(coordinator)` after every recompute or clear.
        Returns a function that removes the callback again.
        """
        self._listeners.append(callback)

        def unsubscribe():
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def _notify(self):
        for callback in list(self._listeners):
            callback(self)

    # ---------- Source vector mutations ----------

    def _find(self, vector_id):
        for vector in self._sources:
            if vector.id == vector_id:
                return vector
        raise KeyError(f"No source vector with id {vector_id!r}")

    def _new_id(self):
        existing = {s.id for s in self._sources}
        while True:
            candidate = f"vector-{next(self._ids)}"
            if candidate not in existing:
                return candidate

    def add_source_vector(self, components, label=None, color=None, visible=True, vector_id=None):
        if vector_id is None:
            vector_id = self._new_id()
        if any(s.id == vector_id for s in self._sources):
            raise ValueError(f"A source vector with id {vector_id!r} already exists")

        vector = SourceVector(
            id=vector_id,
            components=components,
            label=label if label is not None else f"v{len(self._sources) + 1}",
            color=color or next_color([s.color for s in self._sources]),
            visible=visible,
        )
        self._sources.append(vector)
        logger.debug("Added source vector %s %s", vector.id, vector.components)
        self._changed()
        return replace(vector)

    def remove_source_vector(self, vector_id):
        vector = self._find(vector_id)
        self._sources.remove(vector)
        logger.debug("Removed source vector %s", vector_id)
        self._changed()

    def update_components(self, vector_id, components):
        vector = self._find(vector_id)
        # Validates through SourceVector before touching the stored one
        vector.components = SourceVector(vector_id, components).components
        self._changed()

    def set_label(self, vector_id, label):
        self._find(vector_id).label = str(label)
        self._changed()

    def set_visible(self, vector_id, visible):
        self._find(vector_id).visible = bool(visible)
        self._changed()

    def toggle_visible(self, vector_id):
        vector = self._find(vector_id)
        self.set_visible(vector_id, not vector.visible)

    def set_color(self, vector_id, color):
        self._find(vector_id).color = color
        self._changed()

    # ---------- Matrix mutations ----------

    def set_matrix(self, matrix):
        self._matrix = as_matrix(matrix)
        self._changed()

    def set_matrix_dimension(self, dimension):
        old = self._matrix.dimension
        self._matrix = resize(self._matrix, dimension)
        if self._matrix.dimension != old:
            logger.info("Matrix dimension changed from %s to %s", old, self._matrix.dimension)
        self._changed()

    def set_matrix_value(self, row, col, value):
        self._matrix = with_value(self._matrix, row, col, value)
        self._changed()

    def transpose_matrix(self):
        old = self._matrix.dimension
        self._matrix = transpose(self._matrix)
        logger.info("Transposed matrix from %s to %s", old, self._matrix.dimension)
        self._changed()

    # ---------- Derived display ----------

    def set_derived_display(self, enabled):
        enabled = bool(enabled)
        if enabled == self._derived_display:
            self.sync()
            return
        self._derived_display = enabled
        logger.info("Derived vectors %s", "shown" if enabled else "hidden")

        if enabled:
            self._changed()
            return

        # Reset to the sentinel so re-enabling always recomputes
        self._derived = ()
        self._incompatible = ()
        self._fingerprint = None
        self._state = SyncState.IDLE
        self._notify()

    # ---------- Recompute ----------

    def compute_fingerprint(self):
        """Value snapshot of everything the derived collection depends on."""
        return (
            tuple(s.snapshot() for s in self._sources),
            (self._matrix.dimension, self._matrix.values),
        )

    def _changed(self):
        if self._derived_display:
            self._state = SyncState.DIRTY
        if self._batch_depth == 0:
            self.sync()

    @contextmanager
    def batch(self):
        """
        Defer `sync()` until the outermost batch exits. Mutations made
        before an exception in the block stay applied and are synced too.
        """
        self._batch_depth += 1
        try:
            yield self
        finally:
            self._batch_depth -= 1
            if self._batch_depth == 0:
                self.sync()

    def sync(self):
        """
        Recompute the derived collection if the inputs changed.

        Returns True when a recompute happened, False for a no-op.
        """
        if self._state is SyncState.RECOMPUTING:
            logger.debug("sync() requested during a recompute; ignored")
            return False
        if not self._derived_display:
            self._state = SyncState.IDLE
            return False

        fingerprint = self.compute_fingerprint()
        if fingerprint == self._fingerprint:
            self._state = SyncState.IDLE
            logger.debug("Inputs unchanged; skipping recompute")
            return False

        self._state = SyncState.RECOMPUTING
        try:
            derived = []
            incompatible = []
            for source in self._sources:
                # Visibility comes from the source as it is now
                result = transform(self._matrix, source)
                if result:
                    derived.append(result)
                else:
                    incompatible.append(result)

            self._derived = tuple(derived)
            self._incompatible = tuple(incompatible)
            self._fingerprint = fingerprint
            self._recompute_count += 1
        finally:
            self._state = SyncState.IDLE

        logger.debug(
            "Recomputed %d derived vector(s) with %s matrix (%d incompatible)",
            len(derived), self._matrix.dimension, len(incompatible),
        )
        for record in incompatible:
            logger.debug(record.message)

        self._notify()
        return True
