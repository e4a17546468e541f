"""Built-in movement generator functions.

A *move function* maps (state, character id, action) -> the target
``Position`` the character would like to reach for one directional intent.
It does not check bounds or obstacles; the collision system decides whether
the target is accepted. This indirection lets a level plug in a different
movement rule without touching the reducer.

Contract (``MoveFn``):

* Must return exactly one ``Position``.
* Should not mutate ``State``.
"""

from twin_exit.actions import ACTION_DELTA, Action
from twin_exit.components import Position
from twin_exit.state import State
from twin_exit.types import CharacterID


def default_move_fn(state: State, cid: CharacterID, action: Action) -> Position:
    """Fixed-magnitude step along one axis.

    Translates the character by ``state.step_size`` in the direction of
    ``action``. Caller handles clamping and blocking.
    """
    pos = state.position[cid]
    dx, dy = ACTION_DELTA[action]
    return Position(pos.x + dx * state.step_size, pos.y + dy * state.step_size)
