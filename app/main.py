import logging
import os
import streamlit as st

from pyrsistent import thaw

from config import (
    AppConfig,
    set_default_config,
    get_config_from_widgets,
    make_game_and_reset,
)
from components import (
    display_characters,
    display_controls,
    display_solved,
    direction_pad,
    pump_keyboard_events,
)
from twin_exit.gym_env import env_config_observation_dict, env_status_observation_dict
from twin_exit.input import InputPhase, KeyboardController
from twin_exit.renderer.frame import Renderer
from twin_exit.types import CharacterID

script_dir: str = os.path.dirname(os.path.realpath(__file__))

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

st.set_page_config(layout="wide", page_title="Twin Exit")

with open(os.path.join(script_dir, "styles.css")) as f:
    st.markdown(f"<style>{f.read()}</style>", unsafe_allow_html=True)


# --------- Main App ---------

set_default_config()
tab_game, tab_config, tab_state = st.tabs(["Game", "Config", "State"])

with tab_config:
    config: AppConfig = get_config_from_widgets()

    if st.button("Save", key="save_config_btn", use_container_width=True):
        st.session_state["config"] = config
        make_game_and_reset(config)
    st.divider()

with tab_game:
    if "controller" not in st.session_state:
        make_game_and_reset(st.session_state["config"])

    st.title("Fireboy and Watergirl")
    left_col, middle_col, right_col = st.columns([0.25, 0.5, 0.25])

    with right_col:
        if st.button("🔁 Restart", key="restart_btn", use_container_width=True):
            make_game_and_reset(st.session_state["config"])

        # Need to put after restart
        controller: KeyboardController = st.session_state["controller"]
        renderer: Renderer = st.session_state["renderer"]

        pump_keyboard_events(controller)

        if controller.phase == InputPhase.ACTIVE:
            st.divider()
            st.text("Fireboy")
            direction_pad(controller, CharacterID.FIRE)
            st.text("Watergirl")
            direction_pad(controller, CharacterID.WATER)

    with left_col:
        if controller.phase == InputPhase.ACTIVE:
            display_characters(controller)
            display_controls()

    with middle_col:
        state = controller.state
        if state.solved:
            display_solved(state)
            if st.session_state.get("celebrate", False):
                st.balloons()
                st.session_state["celebrate"] = False
                st.session_state["celebrated"] = True
        else:
            img = renderer.render(state)
            st.image(img, use_container_width=True)
        st.json(
            {
                "status": env_status_observation_dict(state),
                "config": env_config_observation_dict(state),
            },
            expanded=1,
        )

with tab_state:
    st.json(thaw(st.session_state["controller"].state.description), expanded=1)
