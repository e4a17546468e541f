import itertools
import random
import pytest
from typing import List, Tuple

from twin_exit.actions import Action
from twin_exit.levels import build_level_twin_door
from twin_exit.step import step
from twin_exit.types import CharacterID
from tests.test_utils import (
    assert_character_positions,
    assert_within_field_and_clear,
    make_twin_state,
)


def run(state, actions: List[Action]):  # type: ignore[no-untyped-def]
    for action in actions:
        state = step(state, action)
    return state


def test_water_reaches_goal_and_level_is_solved() -> None:
    state = build_level_twin_door()
    # 35 right and 35 down steps, interleaved to pass through the barrier gap
    actions = (
        [Action.WATER_DOWN] * 10 + [Action.WATER_RIGHT] * 35 + [Action.WATER_DOWN] * 25
    )
    solved_at = None
    for i, action in enumerate(actions):
        state = step(state, action)
        assert_within_field_and_clear(state)
        if state.solved and solved_at is None:
            solved_at = i
    assert state.solved
    assert solved_at == len(actions) - 1
    assert_character_positions(
        state, {CharacterID.FIRE: (400, 400), CharacterID.WATER: (400, 400)}
    )


def test_straight_run_right_stops_at_barrier() -> None:
    state = run(build_level_twin_door(), [Action.WATER_RIGHT] * 35)
    assert_character_positions(state, {CharacterID.WATER: (210, 50)})
    state = run(state, [Action.WATER_DOWN] * 45)
    # Left of the barrier all the way down, clamped at the bottom
    assert_character_positions(state, {CharacterID.WATER: (210, 460)})
    assert not state.solved


@pytest.mark.parametrize("step_size", [10, 25, 40])
def test_largest_steps_still_stop_at_barrier(step_size: int) -> None:
    state = run(build_level_twin_door(step_size), [Action.WATER_RIGHT] * 20)
    water = state.position[CharacterID.WATER]
    assert water.x + state.box_size <= 250
    assert_within_field_and_clear(state)


def test_rejected_move_from_right_edge_of_barrier() -> None:
    state = make_twin_state(fire_pos=(270, 50))
    new_state = step(state, Action.FIRE_LEFT)
    assert new_state.position[CharacterID.FIRE] is state.position[CharacterID.FIRE]
    assert new_state.turn == state.turn + 1


@pytest.mark.parametrize(
    "start, action, expected",
    [
        ((5, 5), Action.FIRE_UP, (5, 0)),
        ((0, 0), Action.FIRE_UP, (0, 0)),
        ((0, 0), Action.FIRE_LEFT, (0, 0)),
        ((455, 300), Action.FIRE_RIGHT, (460, 300)),
        ((460, 460), Action.FIRE_RIGHT, (460, 460)),
        ((460, 460), Action.FIRE_DOWN, (460, 460)),
    ],
)
def test_edges_clamp(
    start: Tuple[int, int], action: Action, expected: Tuple[int, int]
) -> None:
    state = make_twin_state(fire_pos=start, obstacles=())
    assert_character_positions(step(state, action), {CharacterID.FIRE: expected})


def test_solved_state_is_terminal() -> None:
    state = make_twin_state(fire_pos=(400, 400), water_pos=(400, 390))
    state = step(state, Action.WATER_DOWN)
    assert state.solved
    for action in Action:
        assert step(state, action) is state


def test_invalid_action_raises() -> None:
    with pytest.raises(ValueError):
        step(make_twin_state(), "jump")  # type: ignore[arg-type]


def test_missing_character_only_bumps_turn() -> None:
    state = make_twin_state(water_pos=None)
    new_state = step(state, Action.WATER_UP)
    assert new_state.position == state.position
    assert new_state.turn == 1


def test_random_walk_keeps_invariants() -> None:
    rng = random.Random(1234)
    state = build_level_twin_door()
    actions = list(Action)
    for _ in range(2000):
        prev = state
        state = step(state, rng.choice(actions))
        assert_within_field_and_clear(state)
        if prev.solved:
            assert state.solved


@pytest.mark.parametrize(
    "fire_pos, water_pos, action",
    [
        # Clamped at the field edges
        ((0, 0), (460, 460), Action.FIRE_UP),
        ((0, 0), (460, 460), Action.FIRE_LEFT),
        ((0, 0), (460, 460), Action.WATER_DOWN),
        ((0, 0), (460, 460), Action.WATER_RIGHT),
        # Blocked by the barrier
        ((270, 50), (50, 50), Action.FIRE_LEFT),
        ((400, 400), (210, 250), Action.WATER_RIGHT),
    ],
)
def test_rejected_moves_leave_positions_identical(
    fire_pos: Tuple[int, int], water_pos: Tuple[int, int], action: Action
) -> None:
    state = make_twin_state(fire_pos=fire_pos, water_pos=water_pos)
    first = step(state, action)
    assert first.position is state.position
    again = step(first, action)
    assert again.position is state.position
    assert again.turn == state.turn + 2


def test_interleaved_characters_are_independent() -> None:
    state = make_twin_state(fire_pos=(300, 300), water_pos=(100, 300), obstacles=())
    actions = list(
        itertools.chain.from_iterable(
            zip([Action.FIRE_UP] * 5, [Action.WATER_DOWN] * 5)
        )
    )
    state = run(state, actions)
    assert_character_positions(
        state, {CharacterID.FIRE: (300, 250), CharacterID.WATER: (100, 350)}
    )
