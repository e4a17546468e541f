"""twin_exit.components
=======================

Import surface for the immutable value objects the simulation is built
from. They carry no behaviour beyond small geometric predicates; systems in
:mod:`twin_exit.systems` turn them into new ``State`` snapshots::

    from twin_exit.components import Position, Rect
"""

from .appearance import Appearance
from .position import Position
from .rect import Rect

__all__ = [
    "Appearance",
    "Position",
    "Rect",
]
