"""State reducer and step orchestration.

This module wires the systems together to implement a single *turn*
transition for one directional ``Action``. The exported :func:`step` is the
only public entry point for gameplay progression and is pure: it returns a
*new* :class:`twin_exit.state.State`.

Ordering:

1. ``state.move_fn`` proposes the target for the acting character.
2. ``collision_system`` clamps and accepts or rejects it.
3. ``win_system`` re-evaluates the objective after the position change.
4. The turn counter is bumped.
"""

from dataclasses import replace
from twin_exit.actions import ACTION_CHARACTER, Action
from twin_exit.state import State
from twin_exit.systems.collision import collision_system
from twin_exit.systems.terminal import win_system


def step(state: State, action: Action) -> State:
    """Advance the simulation by one directional intent.

    Args:
        state (State): Previous immutable state.
        action (Action): Directional intent to apply.

    Returns:
        State: Next state snapshot. If the input state is already solved the
            same object is returned unchanged.

    Raises:
        ValueError: If the action is not recognized.
    """
    if state.solved:
        return state

    if action not in ACTION_CHARACTER:
        raise ValueError("Action is not valid")

    character_id = ACTION_CHARACTER[action]
    if character_id in state.position:
        target = state.move_fn(state, character_id, action)
        state = collision_system(state, character_id, target)
        state = win_system(state)

    return replace(state, turn=state.turn + 1)
