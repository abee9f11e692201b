"""Grid line color, chosen from a small fixed palette."""

from __future__ import annotations

from typing import List, NamedTuple

from PIL import ImageColor

from preview_options.errors import UnknownGridColorError
from preview_options.target import CameraOptions, CameraTarget

from .base import Option


def argb(alpha: int, red: int, green: int, blue: int) -> int:
    """Pack channels into an unsigned 32-bit ARGB integer."""
    return ((alpha & 0xFF) << 24) | ((red & 0xFF) << 16) | ((green & 0xFF) << 8) | (blue & 0xFF)


def named_color(name: str, alpha: int = 255) -> int:
    """Resolve a CSS color name (``"yellow"``, ``"#ff0"``) to ARGB."""
    red, green, blue = ImageColor.getrgb(name)[:3]
    return argb(alpha, red, green, blue)


class GridColorChoice(NamedTuple):
    color: int
    label: str


GRID_COLORS: List[GridColorChoice] = [
    GridColorChoice(argb(160, 255, 255, 255), "default"),
    GridColorChoice(named_color("white"), "white"),
    GridColorChoice(named_color("black"), "black"),
    GridColorChoice(named_color("yellow"), "yellow"),
]

DEFAULT_GRID_COLOR = GRID_COLORS[0].color


class GridColor(Option[GridColorChoice]):
    """Grid color option. The camera's color must always be in the palette."""

    def __init__(self) -> None:
        super().__init__("Grid Color")

    def get_all(self, view: CameraTarget, options: CameraOptions) -> List[GridColorChoice]:
        return list(GRID_COLORS)

    def get(self, view: CameraTarget) -> GridColorChoice:
        current = view.grid_color & 0xFFFFFFFF
        for choice in GRID_COLORS:
            if choice.color == current:
                return choice
        raise UnknownGridColorError(current)

    def set(self, view: CameraTarget, value: GridColorChoice) -> None:
        view.set_grid_color(value.color)

    def to_string(self, value: GridColorChoice) -> str:
        return value.label


__all__ = [
    "DEFAULT_GRID_COLOR",
    "GRID_COLORS",
    "GridColor",
    "GridColorChoice",
    "argb",
    "named_color",
]
