"""Authored levels.

Each builder returns a fresh initial :class:`State`. ``LEVEL_REGISTRY`` maps
the UI label of a level to its builder, in the order shown to the player.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Mapping, Optional

from pyrsistent import pmap, pvector

from twin_exit.components import Appearance, Position, Rect
from twin_exit.moves import default_move_fn
from twin_exit.objectives import default_objective_fn
from twin_exit.state import (
    DEFAULT_BOX_SIZE,
    DEFAULT_FIELD_SIZE,
    DEFAULT_STEP_SIZE,
    State,
)
from twin_exit.types import CharacterID, MoveFn, ObjectiveFn

# -------------------------
# Characters
# -------------------------
FIRE_COLOR = (239, 68, 68)
WATER_COLOR = (59, 130, 246)

DEFAULT_APPEARANCE: Dict[CharacterID, Appearance] = {
    CharacterID.FIRE: Appearance(name="Fireboy", color=FIRE_COLOR),
    CharacterID.WATER: Appearance(name="Watergirl", color=WATER_COLOR),
}

# -------------------------
# Layout
# -------------------------
# A vertical barrier split by a 50px gap between y=150 and y=200.
TWIN_DOOR_OBSTACLES = (
    Rect(250, 0, 20, 150),
    Rect(250, 200, 20, 300),
)
DOOR = Rect(400, 400, 50, 50)
FIRE_START = Position(400, 400)
WATER_START = Position(50, 50)


def build_state(
    goal: Rect,
    starts: Mapping[CharacterID, Position],
    obstacles: Iterable[Rect] = (),
    width: int = DEFAULT_FIELD_SIZE,
    height: int = DEFAULT_FIELD_SIZE,
    box_size: int = DEFAULT_BOX_SIZE,
    step_size: int = DEFAULT_STEP_SIZE,
    move_fn: MoveFn = default_move_fn,
    objective_fn: ObjectiveFn = default_objective_fn,
    level_name: Optional[str] = None,
) -> State:
    """Assemble an initial state.

    Raises:
        ValueError: If the field cannot hold a character box or the step size
            is not positive or larger than the box.
    """
    if width < box_size or height < box_size:
        raise ValueError(f"Field {width}x{height} is smaller than box {box_size}")
    if step_size <= 0:
        raise ValueError(f"Step size must be positive, got {step_size}")
    if step_size > box_size:
        # Consecutive boxes must touch or overlap so no obstacle can be stepped over
        raise ValueError(f"Step size {step_size} exceeds box size {box_size}")

    return State(
        width=width,
        height=height,
        move_fn=move_fn,
        objective_fn=objective_fn,
        goal=goal,
        obstacles=pvector(obstacles),
        position=pmap(starts),
        appearance=pmap({cid: DEFAULT_APPEARANCE[cid] for cid in starts}),
        box_size=box_size,
        step_size=step_size,
        level_name=level_name,
    )


def build_level_twin_door(step_size: int = DEFAULT_STEP_SIZE) -> State:
    """Barrier with a gap; Fireboy already waits at the door."""
    return build_state(
        goal=DOOR,
        starts={CharacterID.FIRE: FIRE_START, CharacterID.WATER: WATER_START},
        obstacles=TWIN_DOOR_OBSTACLES,
        step_size=step_size,
        level_name="Twin Door",
    )


def build_level_open_field(step_size: int = DEFAULT_STEP_SIZE) -> State:
    """No obstacles; both characters start in opposite corners."""
    return build_state(
        goal=Rect(230, 230, 50, 50),
        starts={
            CharacterID.FIRE: Position(0, 0),
            CharacterID.WATER: Position(DEFAULT_FIELD_SIZE - DEFAULT_BOX_SIZE, 0),
        },
        step_size=step_size,
        level_name="Open Field",
    )


LEVEL_REGISTRY: Dict[str, Callable[[int], State]] = {
    "Twin Door": build_level_twin_door,
    "Open Field": build_level_open_field,
}

DEFAULT_LEVEL = "Twin Door"


def build_level(name: str, step_size: int = DEFAULT_STEP_SIZE) -> State:
    builder = LEVEL_REGISTRY.get(name)
    if builder is None:
        raise ValueError(f"Unknown level: {name}")
    return builder(step_size)
