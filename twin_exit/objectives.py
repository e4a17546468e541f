"""Objective predicate functions.

Each objective function answers: *"Is the puzzle solved?"* They are pure
predicates over a :class:`State`. The reducer runs the terminal system after
every position change, which calls ``state.objective_fn`` to decide whether
to set ``state.solved``.
"""

from twin_exit.components import Position, Rect
from twin_exit.state import State
from twin_exit.systems.collision import character_rect


def is_inside_goal(pos: Position, goal: Rect, box_size: int) -> bool:
    """The whole ``box_size`` square at ``pos`` fits inside ``goal``.

    Equivalent to the top-left corner lying in
    ``[goal.x, goal.right - box_size] x [goal.y, goal.bottom - box_size]``.
    """
    return goal.contains(character_rect(pos, box_size))


def default_objective_fn(state: State) -> bool:
    """Every character stands fully inside the goal at the same time."""
    if len(state.position) == 0:
        return False
    return all(
        is_inside_goal(pos, state.goal, state.box_size)
        for pos in state.position.values()
    )
