import pytest

from twin_exit.components import Rect


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (Rect(0, 0, 10, 10), Rect(5, 5, 10, 10), True),
        (Rect(0, 0, 10, 10), Rect(2, 2, 2, 2), True),  # nested
        # Shared edges do not count as overlap
        (Rect(0, 0, 10, 10), Rect(10, 0, 10, 10), False),
        (Rect(0, 0, 10, 10), Rect(0, 10, 10, 10), False),
        # Separated on one axis only
        (Rect(0, 0, 10, 10), Rect(20, 0, 10, 10), False),
        (Rect(0, 0, 10, 10), Rect(0, 20, 10, 10), False),
        (Rect(210, 50, 40, 40), Rect(250, 0, 20, 150), False),
        (Rect(220, 50, 40, 40), Rect(250, 0, 20, 150), True),
    ],
)
def test_intersects(a: Rect, b: Rect, expected: bool) -> None:
    assert a.intersects(b) is expected
    assert b.intersects(a) is expected


def test_contains_is_edge_inclusive() -> None:
    goal = Rect(400, 400, 50, 50)
    assert goal.contains(Rect(400, 400, 40, 40))
    assert goal.contains(Rect(410, 410, 40, 40))
    assert not goal.contains(Rect(411, 410, 40, 40))
    assert not goal.contains(Rect(399, 400, 40, 40))


def test_right_and_bottom() -> None:
    rect = Rect(250, 200, 20, 300)
    assert rect.right == 270
    assert rect.bottom == 500
