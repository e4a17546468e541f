import os
from typing import List, Optional
import streamlit.components.v1 as components

from twin_exit.input import KeyEvent

script_dir: str = os.path.dirname(os.path.realpath(__file__))
component_name: str = os.path.split(script_dir)[-1]
frontend_dir: str = os.path.join(script_dir, "frontend")

component = components.declare_component(component_name, path=frontend_dir)


def keydown(
    default_text: str = "Click here to focus the game",
    focused_text: str = "Listening for keys",
    key: Optional[str] = None,
    buffer_size: int = 64,
) -> List[KeyEvent]:
    """Return the most recent key-down events seen by the page.

    Streamlit only keeps the *latest* value sent by a component, and several
    key presses can arrive while a rerun is in progress. The frontend
    therefore sends a rolling buffer of the last ``buffer_size`` events, each
    ``{"id": int, "key": str}`` with strictly increasing ids. Callers keep a
    watermark of the last id they processed and handle only newer events;
    see :func:`twin_exit.input.pending_key_events`.

    The frontend registers its ``keydown`` listener when mounted and removes
    it when the iframe is torn down.

    Args:
        default_text: str
            Text shown when the component is not focused.
        focused_text: str
            Text shown when the component has focus.
        key: Optional[str]
            Streamlit widget key (unrelated to keyboard key pressed).
        buffer_size: int
            Number of recent events resent on every update.
    """
    value = component(
        default_text=default_text,
        focused_text=focused_text,
        buffer_size=buffer_size,
        key=key,
        default=[],
    )
    return list(value or [])


