import pytest
from typing import Tuple

from twin_exit.components import Position, Rect
from twin_exit.systems.collision import (
    character_rect,
    clamp_position,
    collision_system,
    resolve_move,
)
from twin_exit.types import CharacterID
from tests.test_utils import make_twin_state

OBSTACLES = (Rect(250, 0, 20, 150), Rect(250, 200, 20, 300))


@pytest.mark.parametrize(
    "pos, expected",
    [
        ((-10, 50), (0, 50)),
        ((50, -10), (50, 0)),
        ((470, 50), (460, 50)),
        ((50, 470), (50, 460)),
        ((-5, 999), (0, 460)),
        ((460, 460), (460, 460)),
        ((0, 0), (0, 0)),
    ],
)
def test_clamp_position(pos: Tuple[int, int], expected: Tuple[int, int]) -> None:
    assert clamp_position(Position(*pos), 500, 500, 40) == Position(*expected)


def test_character_rect() -> None:
    assert character_rect(Position(3, 4), 40) == Rect(3, 4, 40, 40)


def test_accepts_free_move() -> None:
    current = Position(50, 50)
    assert resolve_move(current, Position(60, 50), OBSTACLES, 500, 500, 40) == Position(60, 50)


def test_rejects_move_into_obstacle_from_the_right() -> None:
    current = Position(270, 50)
    # Box at x=260 spans [260, 300], overlapping the barrier's [250, 270]
    accepted = resolve_move(current, Position(260, 50), OBSTACLES, 500, 500, 40)
    assert accepted is current


def test_rejects_move_into_obstacle_from_the_left() -> None:
    current = Position(210, 50)
    accepted = resolve_move(current, Position(220, 50), OBSTACLES, 500, 500, 40)
    assert accepted is current


def test_touching_obstacle_edge_is_allowed() -> None:
    # Box [210, 250] touches the barrier at x=250 without overlapping
    current = Position(200, 50)
    assert resolve_move(current, Position(210, 50), OBSTACLES, 500, 500, 40) == Position(210, 50)


def test_gap_in_barrier_is_passable() -> None:
    current = Position(210, 150)
    assert resolve_move(current, Position(260, 150), OBSTACLES, 500, 500, 40) == Position(260, 150)
    current = Position(210, 160)
    assert resolve_move(current, Position(260, 160), OBSTACLES, 500, 500, 40) == Position(260, 160)
    current = Position(210, 161)
    assert resolve_move(current, Position(260, 161), OBSTACLES, 500, 500, 40) is current


def test_clamps_instead_of_leaving_field() -> None:
    assert resolve_move(Position(5, 5), Position(5, -5), (), 500, 500, 40) == Position(5, 0)
    assert resolve_move(Position(455, 5), Position(465, 5), (), 500, 500, 40) == Position(460, 5)


def test_clamped_target_is_still_collision_checked() -> None:
    obstacles = (Rect(470, 0, 30, 30),)
    current = Position(450, 0)
    # Target x=470 clamps to 460; box [460, 500] overlaps [470, 500]
    assert resolve_move(current, Position(470, 0), obstacles, 500, 500, 40) is current


def test_no_sliding_along_obstacles() -> None:
    obstacle = (Rect(100, 100, 100, 100),)
    current = Position(50, 90)
    # Diagonal target overlapping the block is rejected outright, not adjusted
    assert resolve_move(current, Position(70, 100), obstacle, 500, 500, 40) is current


def test_collision_system_updates_only_the_mover() -> None:
    state = make_twin_state(fire_pos=(400, 400), water_pos=(50, 50))
    new_state = collision_system(state, CharacterID.WATER, Position(60, 50))
    assert new_state.position[CharacterID.WATER] == Position(60, 50)
    assert new_state.position[CharacterID.FIRE] == Position(400, 400)


def test_collision_system_returns_same_state_when_rejected() -> None:
    state = make_twin_state(water_pos=(210, 50))
    assert collision_system(state, CharacterID.WATER, Position(220, 50)) is state


def test_collision_system_returns_same_state_when_clamped_to_current() -> None:
    state = make_twin_state(water_pos=(0, 0))
    assert collision_system(state, CharacterID.WATER, Position(-10, 0)) is state


def test_collision_system_ignores_missing_character() -> None:
    state = make_twin_state(water_pos=None)
    assert collision_system(state, CharacterID.WATER, Position(10, 10)) is state


def test_characters_do_not_block_each_other() -> None:
    state = make_twin_state(fire_pos=(100, 100), water_pos=(110, 100), obstacles=())
    new_state = collision_system(state, CharacterID.WATER, Position(100, 100))
    assert new_state.position[CharacterID.WATER] == Position(100, 100)
