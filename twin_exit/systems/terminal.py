"""Terminal condition system.

Sets ``state.solved`` exactly once, the first time the objective holds.
The flag is a one-way latch; other systems short-circuit on it.
"""

import logging
from dataclasses import replace
from twin_exit.state import State

logger = logging.getLogger(__name__)

SOLVED_MESSAGE = (
    "You made it together! Whatever the obstacle, the important part is "
    "to wait while the other gets there."
)


def win_system(state: State) -> State:
    """Set ``solved`` if the objective function returns True.

    Skips evaluation if the state is already solved.
    """
    if state.solved:
        return state

    if state.objective_fn(state):
        logger.info("Level %s solved on turn %d", state.level_name, state.turn)
        return replace(state, solved=True, message=SOLVED_MESSAGE)
    return state
