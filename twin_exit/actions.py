"""Action enumerations.

Each character has its own four directional intents. :class:`Action` is the
human readable string enum used by the reducer; :class:`GymAction` is the
stable integer mapping for Gymnasium ``Discrete`` spaces.

``ACTION_CHARACTER`` and ``ACTION_DELTA`` are the canonical lookups: which
character an intent moves and the unit direction it moves in.
"""

from enum import IntEnum, StrEnum, auto
from typing import Dict, Tuple

from twin_exit.types import CharacterID


class Action(StrEnum):
    """String enum of directional intents, four per character."""

    FIRE_UP = auto()
    FIRE_DOWN = auto()
    FIRE_LEFT = auto()
    FIRE_RIGHT = auto()
    WATER_UP = auto()
    WATER_DOWN = auto()
    WATER_LEFT = auto()
    WATER_RIGHT = auto()


ACTION_CHARACTER: Dict[Action, CharacterID] = {
    Action.FIRE_UP: CharacterID.FIRE,
    Action.FIRE_DOWN: CharacterID.FIRE,
    Action.FIRE_LEFT: CharacterID.FIRE,
    Action.FIRE_RIGHT: CharacterID.FIRE,
    Action.WATER_UP: CharacterID.WATER,
    Action.WATER_DOWN: CharacterID.WATER,
    Action.WATER_LEFT: CharacterID.WATER,
    Action.WATER_RIGHT: CharacterID.WATER,
}

ACTION_DELTA: Dict[Action, Tuple[int, int]] = {
    Action.FIRE_UP: (0, -1),
    Action.FIRE_DOWN: (0, 1),
    Action.FIRE_LEFT: (-1, 0),
    Action.FIRE_RIGHT: (1, 0),
    Action.WATER_UP: (0, -1),
    Action.WATER_DOWN: (0, 1),
    Action.WATER_LEFT: (-1, 0),
    Action.WATER_RIGHT: (1, 0),
}


class GymAction(IntEnum):
    """Stable integer mapping for integration with Gymnasium ``Discrete`` spaces."""

    FIRE_UP = 0  # start at 0 for explicitness
    FIRE_DOWN = auto()
    FIRE_LEFT = auto()
    FIRE_RIGHT = auto()
    WATER_UP = auto()
    WATER_DOWN = auto()
    WATER_LEFT = auto()
    WATER_RIGHT = auto()
