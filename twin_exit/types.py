"""Common type aliases and enumerations.

``MoveFn`` and ``ObjectiveFn`` are the pluggable extension points carried by
the ``State``: the first proposes where a character wants to go for a given
intent, the second decides whether the level is solved.
"""

from enum import StrEnum, auto
from typing import Callable, TYPE_CHECKING


# Forward declarations to avoid circular imports:
if TYPE_CHECKING:
    from twin_exit.state import State
    from twin_exit.actions import Action
    from twin_exit.components import Position


class CharacterID(StrEnum):
    """The two playable characters."""

    FIRE = auto()
    WATER = auto()


MoveFn = Callable[["State", CharacterID, "Action"], "Position"]
ObjectiveFn = Callable[["State"], bool]

RGB = tuple[int, int, int]
