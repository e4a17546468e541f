"""Rendering appearance component.

``Appearance`` carries what the renderer and the UI need to draw a
character: a display name and a fill colour.
"""

from dataclasses import dataclass

from twin_exit.types import RGB


@dataclass(frozen=True)
class Appearance:
    """Visual rendering metadata.

    Attributes:
        name: Label shown in the UI (e.g. "Fireboy").
        color: Fill colour as an RGB triple.
    """

    name: str
    color: RGB
