from typing import Dict, List

import streamlit as st

from keydown import keydown
from twin_exit.actions import Action
from twin_exit.gym_env import characters_observation_dict
from twin_exit.input import KeyboardController, KeyEventBus, pending_key_events
from twin_exit.renderer.frame import CONTROLS_HELP
from twin_exit.state import State
from twin_exit.systems.terminal import SOLVED_MESSAGE
from twin_exit.types import CharacterID

CHARACTER_ICONS: Dict[CharacterID, str] = {
    CharacterID.FIRE: "🔥",
    CharacterID.WATER: "💧",
}

BUTTONS: Dict[CharacterID, Dict[str, Action]] = {
    CharacterID.FIRE: {
        "up": Action.FIRE_UP,
        "left": Action.FIRE_LEFT,
        "down": Action.FIRE_DOWN,
        "right": Action.FIRE_RIGHT,
    },
    CharacterID.WATER: {
        "up": Action.WATER_UP,
        "left": Action.WATER_LEFT,
        "down": Action.WATER_DOWN,
        "right": Action.WATER_RIGHT,
    },
}


def pump_keyboard_events(controller: KeyboardController) -> int:
    """Feed key-down events that arrived since the last rerun to ``controller``.

    Returns the number of events delivered.
    """
    events = keydown(key="game_keys")
    last_id: int = st.session_state.get("last_key_event_id", -1)
    if st.session_state.get("reset_pending", False):
        # Skip everything buffered before the game was (re)built
        st.session_state["reset_pending"] = False
        if events:
            st.session_state["last_key_event_id"] = max(int(e["id"]) for e in events)
        return 0

    fresh = pending_key_events(events, last_id)
    if not fresh:
        return 0

    bus = KeyEventBus()
    with controller.listening(bus):
        for event in fresh:
            bus.emit(str(event["key"]))
    st.session_state["last_key_event_id"] = int(fresh[-1]["id"])
    return len(fresh)


def direction_pad(controller: KeyboardController, cid: CharacterID) -> None:
    actions = BUTTONS[cid]
    _, up_col, _ = st.columns([1, 1, 1])
    with up_col:
        if st.button("⬆️", key=f"{cid}_up_btn", use_container_width=True):
            controller.apply(actions["up"])
    left_col, down_col, right_col = st.columns([1, 1, 1])
    with left_col:
        if st.button("⬅️", key=f"{cid}_left_btn", use_container_width=True):
            controller.apply(actions["left"])
    with down_col:
        if st.button("⬇️", key=f"{cid}_down_btn", use_container_width=True):
            controller.apply(actions["down"])
    with right_col:
        if st.button("➡️", key=f"{cid}_right_btn", use_container_width=True):
            controller.apply(actions["right"])


def display_characters(controller: KeyboardController) -> None:
    characters = characters_observation_dict(controller.state)
    for cid in CharacterID:
        info = characters.get(cid.value)
        if info is None:
            continue
        text = f"**{info['name']}** at ({info['x']}, {info['y']})"
        if info["inside_goal"]:
            st.success(f"{text}: at the door", icon=CHARACTER_ICONS[cid])
        else:
            st.info(text, icon=CHARACTER_ICONS[cid])


def display_controls() -> None:
    lines: List[str] = [f"- {who}: {keys}" for who, keys in CONTROLS_HELP]
    st.markdown("**Controls**\n" + "\n".join(lines))


def display_solved(state: State) -> None:
    message = state.message or SOLVED_MESSAGE
    st.markdown(f'<h2 class="solved-message">{message}</h2>', unsafe_allow_html=True)
