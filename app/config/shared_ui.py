from __future__ import annotations
from typing import List
import streamlit as st
from twin_exit.levels import LEVEL_REGISTRY
from twin_exit.renderer.frame import DEFAULT_RESOLUTION
from twin_exit.state import DEFAULT_BOX_SIZE, DEFAULT_STEP_SIZE


def level_section(current: str, key: str) -> str:
    st.subheader("Level")
    names: List[str] = list(LEVEL_REGISTRY.keys())
    # Fall back to the first level if the stored name disappeared (hot reload)
    index = names.index(current) if current in names else 0
    return st.selectbox("Level", names, index=index, key=key)


def step_size_section(current: int, key: str) -> int:
    st.subheader("Movement")
    return int(
        st.number_input(
            "Step size (px per key press)",
            min_value=1,
            max_value=DEFAULT_BOX_SIZE,
            value=current or DEFAULT_STEP_SIZE,
            key=key,
        )
    )


def resolution_section(current: int, key: str) -> int:
    st.subheader("Rendering")
    return int(
        st.slider(
            "Resolution (px)",
            200,
            1000,
            current or DEFAULT_RESOLUTION,
            step=50,
            key=key,
        )
    )


__all__ = ["level_section", "step_size_section", "resolution_section"]
