"""Position component.

Integer pixel coordinates of a character's top-left corner. Stored in
``State.position`` keyed by :class:`twin_exit.types.CharacterID`.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Top-left corner of a character's bounding box.

    Attributes:
        x: Pixels from the left edge of the field.
        y: Pixels from the top edge of the field.
    """

    x: int
    y: int
