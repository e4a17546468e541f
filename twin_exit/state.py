"""Core immutable ``State`` dataclass.

This module defines the frozen :class:`State` object that represents the
whole puzzle at a single moment. Systems are pure functions that take a
previous ``State`` plus an input (an ``Action``) and return a *new*
``State``; nothing is mutated in place. Re-running the reducer on the same
inputs always yields the same snapshot, which keeps tests trivial.

Design notes:

* Per-character data lives in **persistent maps** (``pyrsistent.PMap``)
    keyed by :class:`twin_exit.types.CharacterID`.
* Obstacles are a persistent vector of :class:`Rect`; they and the goal
    never change during a session.
* ``solved`` is monotonic: once set by the terminal system it is never
    cleared, and the reducer short-circuits on it.

See :mod:`twin_exit.step` for how the reducer orchestrates systems.
"""

from dataclasses import dataclass
from typing import Any, Optional
from pyrsistent import PMap, PVector, pmap, pvector

from twin_exit.components import Appearance, Position, Rect
from twin_exit.types import CharacterID, MoveFn, ObjectiveFn


DEFAULT_FIELD_SIZE = 500
DEFAULT_BOX_SIZE = 40
DEFAULT_STEP_SIZE = 10


@dataclass(frozen=True)
class State:
    """Immutable puzzle state.

    Attributes:
        width (int): Field width in pixels.
        height (int): Field height in pixels.
        move_fn (MoveFn): Proposes the target position for a directional intent.
        objective_fn (ObjectiveFn): Predicate evaluated after every move to set ``solved``.
        goal (Rect): Region both characters must occupy to win.
        obstacles (PVector[Rect]): Static blocks no character may overlap.
        position (PMap[CharacterID, Position]): Top-left corner of each character.
        appearance (PMap[CharacterID, Appearance]): Display name and colour per character.
        box_size (int): Edge length of every character's square bounding box.
        step_size (int): Pixels travelled per accepted intent.
        turn (int): Number of intents processed (accepted or rejected).
        solved (bool): True once the objective has been met. Never reset.
        message (str | None): Optional informational / terminal message.
        level_name (str | None): Name of the level this state was built from.
    """

    # Level
    width: int
    height: int
    move_fn: "MoveFn"
    objective_fn: "ObjectiveFn"
    goal: Rect

    obstacles: PVector[Rect] = pvector()

    # Characters
    position: PMap[CharacterID, Position] = pmap()
    appearance: PMap[CharacterID, Appearance] = pmap()
    box_size: int = DEFAULT_BOX_SIZE
    step_size: int = DEFAULT_STEP_SIZE

    # Status
    turn: int = 0
    solved: bool = False
    message: Optional[str] = None
    level_name: Optional[str] = None

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of populated fields.

        Skips empty persistent collections and ``None`` scalars, which keeps
        the debug view in the UI short.

        Returns:
            PMap[str, Any]: Persistent map of field name to value.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if isinstance(value, (type(pmap()), type(pvector()))) and len(value) == 0:
                continue
            if value is None:
                continue
            description = description.set(field, value)
        return description
