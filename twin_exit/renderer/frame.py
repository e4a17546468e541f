import textwrap
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import List, Optional, Tuple

from PIL import Image, ImageDraw

from twin_exit.components import Rect
from twin_exit.state import State
from twin_exit.systems.collision import character_rect
from twin_exit.systems.terminal import SOLVED_MESSAGE
from twin_exit.types import RGB


DEFAULT_RESOLUTION = 500
BORDER_WIDTH = 2

FIELD_COLOR: RGB = (229, 231, 235)
BORDER_COLOR: RGB = (0, 0, 0)
GOAL_COLOR: RGB = (34, 197, 94)
GOAL_ALPHA = 128
OBSTACLE_COLOR: RGB = (75, 85, 99)
SOLVED_BACKGROUND: RGB = (255, 255, 255)
SOLVED_TEXT_COLOR: RGB = (107, 114, 128)

CONTROLS_HELP: Tuple[Tuple[str, str], ...] = (
    ("Fireboy (red)", "Arrow keys"),
    ("Watergirl (blue)", "WASD keys"),
)


class ElementKind(StrEnum):
    FIELD = auto()
    GOAL = auto()
    OBSTACLE = auto()
    CHARACTER = auto()


@dataclass(frozen=True)
class FrameElement:
    """One filled rectangle of the board, in field coordinates."""

    kind: ElementKind
    rect: Rect
    color: RGB
    alpha: int = 255
    label: Optional[str] = None


def frame_elements(state: State) -> List[FrameElement]:
    """Board contents in paint order: field, goal, obstacles, characters.

    Returns an empty list once the level is solved; the solved view replaces
    the board.
    """
    if state.solved:
        return []

    elements: List[FrameElement] = [
        FrameElement(ElementKind.FIELD, Rect(0, 0, state.width, state.height), FIELD_COLOR),
        FrameElement(ElementKind.GOAL, state.goal, GOAL_COLOR, alpha=GOAL_ALPHA),
    ]
    for obstacle in state.obstacles:
        elements.append(FrameElement(ElementKind.OBSTACLE, obstacle, OBSTACLE_COLOR))
    for cid, pos in state.position.items():
        appearance = state.appearance.get(cid)
        elements.append(
            FrameElement(
                ElementKind.CHARACTER,
                character_rect(pos, state.box_size),
                appearance.color if appearance else BORDER_COLOR,
                label=appearance.name if appearance else str(cid),
            )
        )
    return elements


def _scaled_box(rect: Rect, scale: float) -> Tuple[int, int, int, int]:
    # PIL rectangles are inclusive of the far corner
    x0 = round(rect.x * scale)
    y0 = round(rect.y * scale)
    x1 = max(x0, round(rect.right * scale) - 1)
    y1 = max(y0, round(rect.bottom * scale) - 1)
    return x0, y0, x1, y1


def render_solved(size: Tuple[int, int], message: str = SOLVED_MESSAGE) -> Image.Image:
    img = Image.new("RGBA", size, SOLVED_BACKGROUND + (255,))
    draw = ImageDraw.Draw(img)
    text = "\n".join(textwrap.wrap(message, width=max(10, size[0] // 8)))
    left, top, right, bottom = draw.multiline_textbbox((0, 0), text, align="center")
    x = (size[0] - (right - left)) // 2
    y = (size[1] - (bottom - top)) // 2
    draw.multiline_text((x, y), text, fill=SOLVED_TEXT_COLOR + (255,), align="center")
    return img


def render(state: State, resolution: int = DEFAULT_RESOLUTION) -> Image.Image:
    """
    Paints the state as a PIL image ``resolution`` pixels wide.
    """
    scale = resolution / state.width
    size = (resolution, round(state.height * scale))

    if state.solved:
        return render_solved(size, state.message or SOLVED_MESSAGE)

    img = Image.new("RGBA", size, (0, 0, 0, 0))
    for element in frame_elements(state):
        box = _scaled_box(element.rect, scale)
        if element.alpha == 255:
            ImageDraw.Draw(img).rectangle(box, fill=element.color + (255,))
            continue
        # ImageDraw overwrites alpha; translucent fills go through a layer
        layer = Image.new("RGBA", size, (0, 0, 0, 0))
        ImageDraw.Draw(layer).rectangle(box, fill=element.color + (element.alpha,))
        img.alpha_composite(layer)

    ImageDraw.Draw(img).rectangle(
        (0, 0, size[0] - 1, size[1] - 1), outline=BORDER_COLOR + (255,), width=BORDER_WIDTH
    )
    return img


class Renderer:
    resolution: int

    def __init__(self, resolution: int = DEFAULT_RESOLUTION):
        if resolution <= 0:
            raise ValueError(f"Resolution must be positive, got {resolution}")
        self.resolution = resolution

    def elements(self, state: State) -> List[FrameElement]:
        return frame_elements(state)

    def render(self, state: State) -> Image.Image:
        return render(state, resolution=self.resolution)
