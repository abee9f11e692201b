"""Options that delegate to the camera's generic control getter/setter."""

from __future__ import annotations

from typing import Generic, List, Type, TypeVar

from preview_options import controls
from preview_options.target import CameraOptions, CameraTarget, ordered_supported

from .base import Option

C = TypeVar("C", bound=controls.Control)


class ControlOption(Option[C], Generic[C]):
    """Option bound to one control enumeration.

    The supported set depends on other settings (engine, mode), so it is read
    from the capability snapshot on every call.
    """

    def __init__(self, control_type: Type[C], name: str) -> None:
        super().__init__(name)
        self._control_type = control_type

    @property
    def control_type(self) -> Type[C]:
        return self._control_type

    def get(self, view: CameraTarget) -> C:
        return view.get_control(self._control_type)

    def get_all(self, view: CameraTarget, options: CameraOptions) -> List[C]:
        return ordered_supported(options, self._control_type)

    def set(self, view: CameraTarget, value: C) -> None:
        view.set_control(value)


class Mode(ControlOption[controls.Mode]):
    def __init__(self) -> None:
        super().__init__(controls.Mode, "Mode")


class Flash(ControlOption[controls.Flash]):
    def __init__(self) -> None:
        super().__init__(controls.Flash, "Flash")


class WhiteBalance(ControlOption[controls.WhiteBalance]):
    def __init__(self) -> None:
        super().__init__(controls.WhiteBalance, "White Balance")


class Hdr(ControlOption[controls.Hdr]):
    def __init__(self) -> None:
        super().__init__(controls.Hdr, "HDR")


class VideoCodec(ControlOption[controls.VideoCodec]):
    def __init__(self) -> None:
        super().__init__(controls.VideoCodec, "Video Codec")


class AudioCodec(ControlOption[controls.AudioCodec]):
    def __init__(self) -> None:
        super().__init__(controls.AudioCodec, "Audio Codec")


class Audio(ControlOption[controls.Audio]):
    def __init__(self) -> None:
        super().__init__(controls.Audio, "Audio")


class Grid(ControlOption[controls.Grid]):
    def __init__(self) -> None:
        super().__init__(controls.Grid, "Grid Lines")


class PictureFormat(ControlOption[controls.PictureFormat]):
    def __init__(self) -> None:
        super().__init__(controls.PictureFormat, "Picture Format")


__all__ = [
    "Audio",
    "AudioCodec",
    "ControlOption",
    "Flash",
    "Grid",
    "Hdr",
    "Mode",
    "PictureFormat",
    "VideoCodec",
    "WhiteBalance",
]
