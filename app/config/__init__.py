import streamlit as st
from twin_exit.levels import DEFAULT_LEVEL
from twin_exit.renderer.frame import DEFAULT_RESOLUTION
from twin_exit.state import DEFAULT_STEP_SIZE

from .env_factory import make_game_and_reset
from .shared_ui import level_section, resolution_section, step_size_section
from .types import AppConfig, GameConfig

__all__ = [
    "AppConfig",
    "GameConfig",
    "make_game_and_reset",
    "set_default_config",
    "get_config_from_widgets",
]


def _initial_config() -> AppConfig:
    return GameConfig(
        level_name=DEFAULT_LEVEL,
        step_size=DEFAULT_STEP_SIZE,
        render_resolution=DEFAULT_RESOLUTION,
    )


def set_default_config() -> None:
    if "config" not in st.session_state:
        st.session_state["config"] = _initial_config()


def get_config_from_widgets() -> AppConfig:
    current: AppConfig = st.session_state["config"]
    level_name = level_section(current.level_name, key="level_select")
    step_size = step_size_section(current.step_size, key="step_size")
    resolution = resolution_section(current.render_resolution, key="resolution")
    return GameConfig(
        level_name=level_name, step_size=step_size, render_resolution=resolution
    )
