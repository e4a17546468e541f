"""Movement & collision system.

Resolves a proposed move for one character:

1. Clamp the target so the character's box stays inside the field.
2. Build the candidate bounding box at the clamped target.
3. If it overlaps any obstacle the move is rejected outright and the
    character keeps its current position. There is no sliding along edges
    and no partial move.

Rejections are silent for the player; they are only visible in DEBUG logs.
"""

import logging
from dataclasses import replace
from typing import Iterable

from twin_exit.components import Position, Rect
from twin_exit.state import State
from twin_exit.types import CharacterID

logger = logging.getLogger(__name__)


def clamp_position(pos: Position, width: int, height: int, box_size: int) -> Position:
    """Clamp ``pos`` to ``[0, width - box_size] x [0, height - box_size]``."""
    return Position(
        max(0, min(pos.x, width - box_size)),
        max(0, min(pos.y, height - box_size)),
    )


def character_rect(pos: Position, box_size: int) -> Rect:
    """Bounding box of a character whose top-left corner is ``pos``."""
    return Rect(pos.x, pos.y, box_size, box_size)


def resolve_move(
    current: Position,
    target: Position,
    obstacles: Iterable[Rect],
    width: int,
    height: int,
    box_size: int,
) -> Position:
    """Return the accepted position for a move from ``current`` to ``target``.

    Args:
        current (Position): Position before the move.
        target (Position): Proposed position, possibly outside the field.
        obstacles (Iterable[Rect]): Static rectangles that may not be overlapped.
        width (int): Field width.
        height (int): Field height.
        box_size (int): Edge length of the character box.

    Returns:
        Position: The clamped target, or ``current`` itself if the clamped
            box intersects an obstacle.
    """
    clamped = clamp_position(target, width, height, box_size)
    candidate = character_rect(clamped, box_size)
    for obstacle in obstacles:
        if candidate.intersects(obstacle):
            logger.debug("Move to %s rejected: overlaps obstacle %s", clamped, obstacle)
            return current
    if clamped != target:
        logger.debug("Move to %s clamped to %s", target, clamped)
    return clamped


def collision_system(state: State, character_id: CharacterID, target: Position) -> State:
    """Move a character to ``target`` if allowed.

    Args:
        state (State): Current state.
        character_id (CharacterID): Character to move.
        target (Position): Desired destination.

    Returns:
        State: Same state object if the position would not change, otherwise
            a new state with the character's position updated.
    """
    current = state.position.get(character_id)
    if current is None:
        return state

    accepted = resolve_move(
        current,
        target,
        state.obstacles,
        state.width,
        state.height,
        state.box_size,
    )
    if accepted == current:
        return state

    return replace(state, position=state.position.set(character_id, accepted))
