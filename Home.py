# -*- coding: utf-8 -*-
"""
Home page of the Vector Transformation Playground: matrix controls and the
matrix analysis panel.
"""
import streamlit as st

from vectorlab import config
from vectorlab.session import fmt, get_coordinator


# ---------- Display helpers ----------

def matrix_latex(values, digits=3):
    rows = [" & ".join(f"{x:.{digits}f}" for x in row) for row in values]
    return r"\begin{bmatrix}" + r" \\ ".join(rows) + r"\end{bmatrix}"


CLASS_DESCRIPTIONS = {
    "diagonal": "Diagonal matrix (only diagonal elements are non-zero)",
    "identity": "Identity matrix (diagonal elements are 1, others are 0)",
    "symmetric": "Symmetric matrix (equal to its transpose)",
    "upper_triangular": "Upper triangular matrix (all elements below diagonal are 0)",
    "lower_triangular": "Lower triangular matrix (all elements above diagonal are 0)",
    "orthogonal": "Orthogonal matrix (inverse equals transpose)",
}


# ---------- Widget callbacks ----------

def _bump_revision():
    # New widget keys, so the entry inputs pick up the reshaped matrix
    st.session_state.matrix_revision = st.session_state.get("matrix_revision", 0) + 1


def on_dimension_change(coordinator):
    coordinator.set_matrix_dimension(st.session_state.matrix_dimension)
    _bump_revision()


def on_transpose(coordinator):
    coordinator.transpose_matrix()
    st.session_state.matrix_dimension = coordinator.matrix.dimension
    _bump_revision()


def on_entry_change(coordinator, row, col, key):
    coordinator.set_matrix_value(row, col, st.session_state[key])


def on_derived_toggle(coordinator):
    coordinator.set_derived_display(st.session_state.derived_display)


# ---------- Sidebar ----------

def matrix_controls(coordinator):
    st.sidebar.header("Transformation matrix A")

    st.session_state.setdefault("matrix_dimension", coordinator.matrix.dimension)
    st.sidebar.selectbox(
        "Matrix dimension",
        config.SUPPORTED_DIMENSIONS,
        key="matrix_dimension",
        on_change=on_dimension_change,
        args=(coordinator,),
    )

    matrix = coordinator.matrix
    revision = st.session_state.get("matrix_revision", 0)
    cols = st.sidebar.columns(matrix.cols)
    for i in range(matrix.rows):
        for j in range(matrix.cols):
            key = f"entry_{revision}_{i}_{j}"
            st.session_state.setdefault(key, matrix[i, j])
            cols[j].number_input(
                f"a{i + 1}{j + 1}",
                step=0.1,
                key=key,
                on_change=on_entry_change,
                args=(coordinator, i, j, key),
            )

    st.sidebar.button("Transpose", on_click=on_transpose, args=(coordinator,))

    st.sidebar.markdown("---")
    st.session_state.setdefault("derived_display", coordinator.derived_display)
    st.sidebar.toggle(
        "Show transformed vectors",
        key="derived_display",
        on_change=on_derived_toggle,
        args=(coordinator,),
    )


# ---------- Analysis panel ----------

def matrix_analysis_panel(coordinator):
    matrix = coordinator.matrix
    result = coordinator.analysis()

    st.subheader("Transformation matrix A")
    st.latex("A = " + matrix_latex(matrix.values))

    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Dimension", matrix.dimension.replace("x", "×"))
    c2.metric("Rank", result.rank)
    if result.is_square:
        c3.metric("Determinant", fmt(result.determinant))
        c4.metric("Trace", fmt(result.trace))
        st.write("Invertible: **%s**" % ("Yes" if result.invertible else "No (singular)"))
    else:
        c3.metric("Determinant", "N/A")
        c4.metric("Trace", "N/A")

    if result.is_square:
        st.subheader("Eigenvalue decomposition")
        if not result.eigenpairs:
            st.write("Eigenvalues are complex; real eigenvectors do not exist.")
        else:
            for pair in result.eigenpairs:
                st.latex(r"\lambda = %.4f,\quad v = %s" % (
                    pair.eigenvalue, matrix_latex([[x] for x in pair.eigenvector], digits=4)))
            if not result.complete_eigen_decomposition:
                st.info("The remaining eigenvalues are complex and are not shown.")
            if result.defective:
                st.warning("Repeated eigenvalue without a full set of eigenvectors (defective matrix).")

    st.subheader("Singular values")
    st.write(fmt(list(result.singular_values)))
    st.caption(
        "Singular values are the scaling factors along the principal directions. "
        "The number of non-zero singular values equals the rank of the matrix."
    )

    if result.is_square:
        st.subheader("Matrix classification")
        if result.classification:
            for name in result.classification:
                st.markdown(f"- ✓ {CLASS_DESCRIPTIONS[name]}")
        else:
            st.write("No special structure.")


def main():
    st.set_page_config(page_title="Vector Transformation Playground", layout="wide")
    st.title("Vector Transformation Playground")

    coordinator = get_coordinator()
    matrix_controls(coordinator)
    matrix_analysis_panel(coordinator)

    st.markdown("---")
    st.write(
        f"{len(coordinator.sources)} source vector(s), "
        f"{len(coordinator.derived)} transformed, "
        f"{len(coordinator.incompatible)} incompatible with the {coordinator.matrix.dimension} matrix."
    )
    if st.button("Go to Vector Analysis"):
        st.switch_page("pages/1_Vector_Analysis.py")


if __name__ == "__main__":
    main()
