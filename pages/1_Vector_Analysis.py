# -*- coding: utf-8 -*-
"""
Vector page: add and edit source vectors, see their transformed
counterparts and how the vectors relate to each other.
"""
import streamlit as st

from vectorlab.colors import lighter_color, next_color
from vectorlab.session import fmt, get_coordinator


# ---------- Widget callbacks ----------

def on_component_change(coordinator, vector_id, keys):
    coordinator.update_components(vector_id, [st.session_state[k] for k in keys])


def on_label_change(coordinator, vector_id, key):
    coordinator.set_label(vector_id, st.session_state[key])


def on_color_change(coordinator, vector_id, key):
    coordinator.set_color(vector_id, st.session_state[key])


def on_visible_change(coordinator, vector_id, key):
    coordinator.set_visible(vector_id, st.session_state[key])


def on_remove(coordinator, vector_id):
    coordinator.remove_source_vector(vector_id)


# ---------- Sidebar: new vector ----------

def add_vector_form(coordinator):
    st.sidebar.header("Add a vector")
    n = st.sidebar.radio("Components", [2, 3], index=1, horizontal=True)

    with st.sidebar.form("add_vector", clear_on_submit=True):
        cols = st.columns(n)
        components = [cols[k].number_input("xyz"[k], value=1.0 if k == 0 else 0.0, step=0.1)
                      for k in range(n)]
        label = st.text_input("Label", value="")
        color = st.color_picker("Colour", value=next_color([s.color for s in coordinator.sources]))
        if st.form_submit_button("Add vector"):
            coordinator.add_source_vector(components, label=label or None, color=color)


# ---------- Panels ----------

def source_vector_editor(coordinator, vector):
    with st.expander(f"{vector.label}  ({vector.dimension}D)", expanded=False):
        keys = [f"comp_{vector.id}_{k}" for k in range(vector.dimension)]
        cols = st.columns(vector.dimension)
        for k, key in enumerate(keys):
            st.session_state.setdefault(key, vector.components[k])
            cols[k].number_input("xyz"[k], step=0.1, key=key,
                                 on_change=on_component_change, args=(coordinator, vector.id, keys))

        c1, c2, c3, c4 = st.columns([3, 1, 1, 1])
        label_key, color_key, visible_key = (f"{name}_{vector.id}" for name in ("label", "color", "visible"))
        st.session_state.setdefault(label_key, vector.label)
        st.session_state.setdefault(color_key, vector.color)
        st.session_state.setdefault(visible_key, vector.visible)
        c1.text_input("Label", key=label_key, on_change=on_label_change,
                      args=(coordinator, vector.id, label_key))
        c2.color_picker("Colour", key=color_key, on_change=on_color_change,
                        args=(coordinator, vector.id, color_key))
        c3.checkbox("Visible", key=visible_key, on_change=on_visible_change,
                    args=(coordinator, vector.id, visible_key))
        c4.button("Remove", key=f"remove_{vector.id}", on_click=on_remove,
                  args=(coordinator, vector.id))


def swatch_html(color, text):
    return (
        f"<span style='display:inline-block;width:0.9em;height:0.9em;"
        f"background:{color};border-radius:2px;margin-right:0.4em;'></span>{text}"
    )


def derived_legend(coordinator):
    """Transformed vectors in a lighter shade of their source colour."""
    shown = [d for d in coordinator.derived if d.visible]
    if not shown:
        return
    st.subheader("Transformed vectors")
    for d in shown:
        st.markdown(
            swatch_html(lighter_color(d.color), f"{d.label}: {fmt(list(d.components), 2)}"),
            unsafe_allow_html=True,
        )


def vector_reports_panel(coordinator):
    reports, pairs = coordinator.vector_analysis()

    st.subheader("Vectors")
    if not reports:
        st.write("Add vectors to see analysis here.")
        return

    st.dataframe(
        [
            {
                "Label": r.label,
                "Components": fmt(list(r.components), 2),
                "Magnitude": fmt(r.magnitude),
                "Transformed": fmt(None if r.derived_components is None else list(r.derived_components), 2),
                "Transformed magnitude": fmt(r.derived_magnitude),
                "Distance from original": fmt(r.distance_from_original),
            }
            for r in reports
        ],
    )

    for record in coordinator.incompatible:
        st.warning(
            f"{coordinator.source(record.vector_id).label}: {record.vector_dimension} components, "
            f"but a {coordinator.matrix.dimension} matrix needs {record.required_dimension}."
        )

    if pairs:
        labels = {r.source_id: r.label for r in reports}
        st.subheader("Vector relationships")
        st.dataframe(
            [
                {
                    "Pair": f"{labels[p.first_id]} · {labels[p.second_id]}",
                    "Dot product": fmt(p.dot),
                    "Cross product": fmt(None if p.cross is None else list(p.cross)),
                    "Angle (°)": fmt(p.angle_degrees, 2),
                    "Distance": fmt(p.distance),
                }
                for p in pairs
            ],
        )


def main():
    st.set_page_config(page_title="Vector Analysis", layout="wide")
    st.title("Vector Analysis")

    coordinator = get_coordinator()
    add_vector_form(coordinator)

    st.subheader("Source vectors")
    for vector in coordinator.sources:
        source_vector_editor(coordinator, vector)

    derived_legend(coordinator)
    vector_reports_panel(coordinator)

    if not coordinator.derived_display:
        st.caption("Transformed vectors are hidden; turn them on from the Home page.")


if __name__ == "__main__":
    main()
