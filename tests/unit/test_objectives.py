import pytest
from dataclasses import replace

from pyrsistent import pmap

from twin_exit.components import Position, Rect
from twin_exit.objectives import default_objective_fn, is_inside_goal
from twin_exit.types import CharacterID
from tests.test_utils import make_twin_state

GOAL = Rect(400, 400, 50, 50)


@pytest.mark.parametrize(
    "pos, expected",
    [
        ((400, 400), True),
        ((410, 410), True),
        ((405, 400), True),
        ((411, 400), False),  # box would stick out on the right
        ((400, 411), False),
        ((399, 400), False),
        ((400, 399), False),
        ((0, 0), False),
    ],
)
def test_is_inside_goal(pos: tuple[int, int], expected: bool) -> None:
    assert is_inside_goal(Position(*pos), GOAL, 40) is expected


def test_objective_requires_both_characters() -> None:
    state = make_twin_state(fire_pos=(400, 400), water_pos=(50, 50))
    assert not default_objective_fn(state)
    state = make_twin_state(fire_pos=(400, 400), water_pos=(410, 410))
    assert default_objective_fn(state)


def test_objective_false_without_characters() -> None:
    state = make_twin_state(fire_pos=None, water_pos=None)
    assert not default_objective_fn(state)


def test_objective_uses_state_box_size() -> None:
    state = make_twin_state(fire_pos=(400, 400), water_pos=(400, 400))
    assert default_objective_fn(state)
    assert not default_objective_fn(replace(state, box_size=60))


def test_objective_reads_positions_only() -> None:
    state = make_twin_state(fire_pos=(50, 50), water_pos=(50, 50))
    state = replace(
        state,
        position=pmap(
            {CharacterID.FIRE: Position(400, 400), CharacterID.WATER: Position(400, 410)}
        ),
    )
    assert default_objective_fn(state)
