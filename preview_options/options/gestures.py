"""Options binding gesture slots to camera actions."""

from __future__ import annotations

from typing import List

from preview_options.controls import Gesture, GestureAction
from preview_options.target import CameraOptions, CameraTarget

from .base import Option


class GestureOption(Option[GestureAction]):
    """Action mapped to one gesture slot.

    Only actions of the slot's gesture type (plus ``NONE``) that the current
    camera supports are offered, in declaration order.
    """

    def __init__(self, gesture: Gesture, name: str) -> None:
        super().__init__(name)
        self._gesture = gesture

    @property
    def gesture(self) -> Gesture:
        return self._gesture

    def get(self, view: CameraTarget) -> GestureAction:
        return view.get_gesture_action(self._gesture)

    def get_all(self, view: CameraTarget, options: CameraOptions) -> List[GestureAction]:
        return [
            action
            for action in GestureAction
            if self._gesture.is_assignable_to(action) and options.supports(action)
        ]

    def set(self, view: CameraTarget, value: GestureAction) -> None:
        view.map_gesture(self._gesture, value)


class Pinch(GestureOption):
    def __init__(self) -> None:
        super().__init__(Gesture.PINCH, "Pinch")


class HorizontalScroll(GestureOption):
    def __init__(self) -> None:
        super().__init__(Gesture.SCROLL_HORIZONTAL, "Horizontal Scroll")


class VerticalScroll(GestureOption):
    def __init__(self) -> None:
        super().__init__(Gesture.SCROLL_VERTICAL, "Vertical Scroll")


class Tap(GestureOption):
    def __init__(self) -> None:
        super().__init__(Gesture.TAP, "Tap")


class LongTap(GestureOption):
    def __init__(self) -> None:
        super().__init__(Gesture.LONG_TAP, "Long Tap")


__all__ = [
    "GestureOption",
    "HorizontalScroll",
    "LongTap",
    "Pinch",
    "Tap",
    "VerticalScroll",
]
