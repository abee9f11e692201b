"""Boolean options toggling where an overlay view gets drawn."""

from __future__ import annotations

from typing import List

from preview_options.controls import OverlayTarget
from preview_options.target import CameraOptions, CameraTarget, OverlayView

from .base import Option

_FLAG_FIELDS = {
    OverlayTarget.PREVIEW: "draw_on_preview",
    OverlayTarget.PICTURE_SNAPSHOT: "draw_on_picture_snapshot",
    OverlayTarget.VIDEO_SNAPSHOT: "draw_on_video_snapshot",
}


class OverlayOption(Option[bool]):
    """Draw flag of one overlay for one render target.

    The flag lives in the overlay's own layout params, so the option is bound
    to the overlay view at construction.
    """

    def __init__(self, target: OverlayTarget, name: str, overlay: OverlayView) -> None:
        super().__init__(name)
        self._target = target
        self._overlay = overlay
        self._field = _FLAG_FIELDS[target]

    @property
    def target(self) -> OverlayTarget:
        return self._target

    def get_all(self, view: CameraTarget, options: CameraOptions) -> List[bool]:
        return [True, False]

    def get(self, view: CameraTarget) -> bool:
        return bool(getattr(self._overlay.layout_params, self._field))

    def set(self, view: CameraTarget, value: bool) -> None:
        params = self._overlay.layout_params
        setattr(params, self._field, bool(value))
        self._overlay.set_layout_params(params)


class OverlayInPreview(OverlayOption):
    def __init__(self, overlay: OverlayView) -> None:
        super().__init__(OverlayTarget.PREVIEW, "Overlay in Preview", overlay)


class OverlayInPictureSnapshot(OverlayOption):
    def __init__(self, overlay: OverlayView) -> None:
        super().__init__(OverlayTarget.PICTURE_SNAPSHOT, "Overlay in Picture Snapshot", overlay)


class OverlayInVideoSnapshot(OverlayOption):
    def __init__(self, overlay: OverlayView) -> None:
        super().__init__(OverlayTarget.VIDEO_SNAPSHOT, "Overlay in Video Snapshot", overlay)


__all__ = [
    "OverlayInPictureSnapshot",
    "OverlayInPreview",
    "OverlayInVideoSnapshot",
    "OverlayOption",
]
