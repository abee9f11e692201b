"""Width and Height options backed by the camera view's layout params."""

from __future__ import annotations

from typing import List

from preview_options.defaults import DEFAULT_BOUNDARY, DEFAULT_DIVISIONS
from preview_options.target import MATCH_PARENT, WRAP_CONTENT, CameraOptions, CameraTarget

from .base import Option


def size_steps(extent: int, *, default_boundary: int = DEFAULT_BOUNDARY, divisions: int = DEFAULT_DIVISIONS) -> List[int]:
    """Sentinels followed by evenly spaced sizes strictly below the boundary.

    An extent of 0 means the parent has not been measured yet, in which case
    ``default_boundary`` stands in for it.
    """
    boundary = extent or default_boundary
    step = boundary // divisions
    # "fill available space" is offered before "size to content"
    values = [MATCH_PARENT, WRAP_CONTENT]
    if step > 0:
        values.extend(range(step, boundary, step))
    return values


class _DimensionOption(Option[int]):
    axis = ""

    def __init__(
        self,
        name: str,
        *,
        default_boundary: int = DEFAULT_BOUNDARY,
        divisions: int = DEFAULT_DIVISIONS,
    ) -> None:
        super().__init__(name)
        self._default_boundary = default_boundary
        self._divisions = divisions

    def get_all(self, view: CameraTarget, options: CameraOptions) -> List[int]:
        parent = view.parent
        extent = getattr(parent, self.axis) if parent is not None else 0
        return size_steps(extent, default_boundary=self._default_boundary, divisions=self._divisions)

    def get(self, view: CameraTarget) -> int:
        return getattr(view.layout_params, self.axis)

    def set(self, view: CameraTarget, value: int) -> None:
        params = view.layout_params
        setattr(params, self.axis, int(value))
        view.set_layout_params(params)

    def to_string(self, value: int) -> str:
        if value == MATCH_PARENT:
            return "match parent"
        if value == WRAP_CONTENT:
            return "wrap content"
        return super().to_string(value)


class Width(_DimensionOption):
    axis = "width"

    def __init__(self, **kwargs) -> None:
        super().__init__("Width", **kwargs)


class Height(_DimensionOption):
    axis = "height"

    def __init__(self, **kwargs) -> None:
        super().__init__("Height", **kwargs)


__all__ = ["Height", "Width", "size_steps"]
