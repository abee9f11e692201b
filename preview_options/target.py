"""Collaborator contracts consumed by the options.

The camera view, its parent container, the capability snapshot and overlay
views are provided by the host application. Options only talk to them through
the protocols below.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Protocol, Type, TypeVar, runtime_checkable

from .controls import Control, Engine, Gesture, GestureAction, Preview

MATCH_PARENT = -1
WRAP_CONTENT = -2

C = TypeVar("C", bound=Control)


@dataclass(slots=True)
class LayoutParams:
    """Mutable layout record of a view. Dimensions are pixels or a sentinel."""

    width: int = MATCH_PARENT
    height: int = MATCH_PARENT


@dataclass(slots=True)
class OverlayLayoutParams(LayoutParams):
    """Layout record of an overlay child, with per-target draw flags."""

    draw_on_preview: bool = False
    draw_on_picture_snapshot: bool = False
    draw_on_video_snapshot: bool = False


@runtime_checkable
class CameraListener(Protocol):
    def on_camera_closed(self) -> None:
        ...


@runtime_checkable
class ViewParent(Protocol):
    """Container holding the camera view among its siblings."""

    @property
    def width(self) -> int:
        ...

    @property
    def height(self) -> int:
        ...

    @property
    def child_count(self) -> int:
        ...

    def index_of_child(self, view: Any) -> int:
        ...

    def remove_view(self, view: Any) -> None:
        ...

    def add_view(self, view: Any, index: int, params: LayoutParams) -> None:
        ...


@runtime_checkable
class CameraOptions(Protocol):
    """Snapshot of what the current camera supports."""

    def supported_controls(self, control_type: Type[C]) -> Iterable[C]:
        ...

    def supports(self, action: GestureAction) -> bool:
        ...


@runtime_checkable
class CameraTarget(Protocol):
    """The camera preview component the options read and mutate."""

    layout_params: LayoutParams
    parent: Optional[ViewParent]
    grid_color: int

    def is_opened(self) -> bool:
        ...

    def open(self) -> None:
        ...

    def close(self) -> None:
        ...

    def add_camera_listener(self, listener: CameraListener) -> None:
        ...

    def remove_camera_listener(self, listener: CameraListener) -> None:
        ...

    def get_control(self, control_type: Type[C]) -> C:
        ...

    def set_control(self, value: Control) -> None:
        ...

    def get_gesture_action(self, gesture: Gesture) -> GestureAction:
        ...

    def map_gesture(self, gesture: Gesture, action: GestureAction) -> None:
        ...

    def set_layout_params(self, params: LayoutParams) -> None:
        ...

    def set_grid_color(self, color: int) -> None:
        ...

    def set_engine(self, engine: Engine) -> None:
        ...

    def set_preview(self, preview: Preview) -> None:
        ...


@runtime_checkable
class OverlayView(Protocol):
    layout_params: OverlayLayoutParams

    def set_layout_params(self, params: OverlayLayoutParams) -> None:
        ...


def ordered_supported(capabilities: CameraOptions, control_type: Type[C]) -> List[C]:
    """Supported members of ``control_type`` in declaration order."""
    supported = set(capabilities.supported_controls(control_type))
    return [value for value in control_type if value in supported]


__all__ = [
    "MATCH_PARENT",
    "WRAP_CONTENT",
    "CameraListener",
    "CameraOptions",
    "CameraTarget",
    "LayoutParams",
    "OverlayLayoutParams",
    "OverlayView",
    "ViewParent",
    "ordered_supported",
]
