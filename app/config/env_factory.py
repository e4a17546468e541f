from __future__ import annotations

import logging

import streamlit as st

from twin_exit.input import KeyboardController
from twin_exit.levels import build_level
from twin_exit.renderer.frame import Renderer
from twin_exit.state import State

from .types import AppConfig

logger = logging.getLogger(__name__)


def _on_state_change(state: State) -> None:
    if state.solved and not st.session_state.get("celebrated", False):
        st.session_state["celebrate"] = True


def make_game_and_reset(config: AppConfig) -> None:
    """Build a fresh controller & renderer for ``config`` in session_state.

    Centralizes session_state bookkeeping (controller, renderer, processed
    key-event watermark, celebration flags) so the page code only reads them.
    """
    try:
        state = build_level(config.level_name, config.step_size)
        renderer = Renderer(resolution=config.render_resolution)
    except ValueError as e:
        st.error(f"Level creation failed: {e}")
        return
    controller = KeyboardController(state)
    controller.subscribe(_on_state_change)
    st.session_state["controller"] = controller
    st.session_state["renderer"] = renderer
    st.session_state["celebrate"] = False
    st.session_state["celebrated"] = False
    # Events that arrived before this reset belong to the previous game
    st.session_state["reset_pending"] = True
    logger.info("Started level %s", config.level_name)
