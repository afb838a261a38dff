# -*- coding: utf-8 -*-
"""
Streamlit glue: one SyncCoordinator per browser session.

Streamlit reruns the page script on every widget interaction. Keeping the
coordinator in st.session_state means those reruns reuse its fingerprint, so
a rerun that changes nothing does not recompute the derived vectors.
"""
import logging

import streamlit as st

from vectorlab.logging_config import setup_logging
from vectorlab.sync import SyncCoordinator

COORDINATOR_KEY = "vectorlab_coordinator"

# Axis vectors every new session starts with
DEFAULT_VECTORS = [
    ([3.0, 0.0, 0.0], "X", "#FF0000"),
    ([0.0, 3.0, 0.0], "Y", "#00FF00"),
    ([0.0, 0.0, 3.0], "Z", "#0000FF"),
]


@st.cache_resource(show_spinner=False)
def _init_logging():
    # Once per server process, not once per rerun
    return setup_logging()


def get_coordinator() -> SyncCoordinator:
    _init_logging()
    if COORDINATOR_KEY not in st.session_state:
        coordinator = SyncCoordinator()
        with coordinator.batch():
            for components, label, color in DEFAULT_VECTORS:
                coordinator.add_source_vector(components, label=label, color=color)
        st.session_state[COORDINATOR_KEY] = coordinator
        logging.getLogger(__name__).info("Created a new vector session")
    return st.session_state[COORDINATOR_KEY]


def fmt(value, digits=4):
    """Number formatting for the panels; None becomes 'N/A'."""
    if value is None:
        return "N/A"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(fmt(v, digits) for v in value) + "]"
    return f"{value:.{digits}f}"
