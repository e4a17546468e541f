"""Keyboard input handling.

Maps key-down events to directional intents and feeds them through the
reducer. Fireboy uses the arrow keys, Watergirl uses ``w``/``a``/``s``/``d``
(case-insensitive). Unrecognised keys are ignored without comment.

The controller is a two-phase state machine, ``ACTIVE -> SOLVED``. While
active every key-down event (auto-repeat included) produces exactly one
step; once solved every event is ignored and there is no way back.

Event delivery is decoupled through the :class:`KeySource` protocol so the
same controller works against the browser component in ``app/`` and the
in-process :class:`KeyEventBus` used in tests. Subscriptions are scoped with
:meth:`KeyboardController.listening`, which always releases the listener on
exit.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from enum import StrEnum, auto
from typing import Any, Callable, Dict, Iterator, List, Optional, Protocol

from twin_exit.actions import Action
from twin_exit.state import State
from twin_exit.step import step

logger = logging.getLogger(__name__)


ARROW_BINDINGS: Dict[str, Action] = {
    "ArrowUp": Action.FIRE_UP,
    "ArrowDown": Action.FIRE_DOWN,
    "ArrowLeft": Action.FIRE_LEFT,
    "ArrowRight": Action.FIRE_RIGHT,
}

LETTER_BINDINGS: Dict[str, Action] = {
    "w": Action.WATER_UP,
    "s": Action.WATER_DOWN,
    "a": Action.WATER_LEFT,
    "d": Action.WATER_RIGHT,
}


def action_for_key(key: Optional[str]) -> Optional[Action]:
    """Translate a DOM-style ``KeyboardEvent.key`` value into an ``Action``.

    Arrow keys match exactly; letters match regardless of case. Returns
    ``None`` for anything else.
    """
    if not key:
        return None
    if key in ARROW_BINDINGS:
        return ARROW_BINDINGS[key]
    return LETTER_BINDINGS.get(key.lower())


class InputPhase(StrEnum):
    """Whether the controller still accepts input."""

    ACTIVE = auto()
    SOLVED = auto()


def phase_of(state: State) -> InputPhase:
    return InputPhase.SOLVED if state.solved else InputPhase.ACTIVE


KeyEvent = Dict[str, Any]
"""Browser key-down record: ``{"id": int, "key": str}`` with increasing ids."""


def pending_key_events(events: List[KeyEvent], last_id: int) -> List[KeyEvent]:
    """Events with ``id`` greater than ``last_id``, oldest first.

    The browser resends a rolling buffer of recent events on every update;
    this picks out the ones not yet handled.
    """
    return sorted(
        (event for event in events if int(event.get("id", -1)) > last_id),
        key=lambda event: int(event["id"]),
    )


KeyListener = Callable[[str], None]
StateObserver = Callable[[State], None]
Reducer = Callable[[State, Action], State]


class KeySource(Protocol):
    """Anything that can deliver key-down events to registered listeners."""

    def add_listener(self, listener: KeyListener) -> None: ...
    def remove_listener(self, listener: KeyListener) -> None: ...


class KeyEventBus:
    """Minimal synchronous ``KeySource``.

    ``emit`` delivers the key to every listener in registration order and
    returns only when all of them are done.
    """

    def __init__(self) -> None:
        self._listeners: List[KeyListener] = []

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def add_listener(self, listener: KeyListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: KeyListener) -> None:
        self._listeners.remove(listener)

    def emit(self, key: str) -> None:
        for listener in list(self._listeners):
            listener(key)


class KeyboardController:
    """Owns the current ``State`` and applies key-down events to it.

    Observers registered with :meth:`subscribe` are called with the new state
    after every event that changed it; this is where derived views (renderer,
    UI) hook in.
    """

    def __init__(self, state: State, reducer: Reducer = step) -> None:
        self._state = state
        self._reducer = reducer
        self._observers: List[StateObserver] = []

    @property
    def state(self) -> State:
        return self._state

    @property
    def phase(self) -> InputPhase:
        return phase_of(self._state)

    def subscribe(self, observer: StateObserver) -> Callable[[], None]:
        """Register ``observer``; returns a callable that unregisters it."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def handle_key(self, key: str) -> State:
        """Process one key-down event to completion and return the new state."""
        if self.phase == InputPhase.SOLVED:
            logger.debug("Ignoring key %r: level already solved", key)
            return self._state

        action = action_for_key(key)
        if action is None:
            logger.debug("Ignoring unbound key %r", key)
            return self._state

        return self.apply(action)

    def apply(self, action: Action) -> State:
        """Apply an already-translated intent (on-screen buttons use this)."""
        if self.phase == InputPhase.SOLVED:
            return self._state

        new_state = self._reducer(self._state, action)
        if new_state is not self._state:
            self._state = new_state
            for observer in list(self._observers):
                observer(new_state)
        return self._state

    @contextmanager
    def listening(self, source: KeySource) -> Iterator["KeyboardController"]:
        """Subscribe to ``source`` for the duration of the ``with`` block."""
        listener: KeyListener = self._on_key
        source.add_listener(listener)
        try:
            yield self
        finally:
            source.remove_listener(listener)

    def _on_key(self, key: str) -> None:
        self.handle_key(key)
