"""Closed enumerations for camera controls, gestures and overlay targets.

Each control enum is a distinct type so an option can be bound to exactly one
of them at construction time.
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple, Type


class Control(Enum):
    """Base for the camera control enumerations."""

    @classmethod
    def default(cls) -> "Control":
        return next(iter(cls))


class Mode(Control):
    PICTURE = "picture"
    VIDEO = "video"


class Engine(Control):
    CAMERA1 = "camera1"
    CAMERA2 = "camera2"


class Preview(Control):
    """Render strategy used for the live output."""

    GL_SURFACE = "gl_surface"
    SURFACE = "surface"
    TEXTURE = "texture"


class Flash(Control):
    OFF = "off"
    ON = "on"
    AUTO = "auto"
    TORCH = "torch"


class WhiteBalance(Control):
    AUTO = "auto"
    INCANDESCENT = "incandescent"
    FLUORESCENT = "fluorescent"
    DAYLIGHT = "daylight"
    CLOUDY = "cloudy"


class Hdr(Control):
    OFF = "off"
    ON = "on"


class VideoCodec(Control):
    DEVICE_DEFAULT = "device_default"
    H_263 = "h_263"
    H_264 = "h_264"


class AudioCodec(Control):
    DEVICE_DEFAULT = "device_default"
    AAC = "aac"
    HE_AAC = "he_aac"
    AAC_ELD = "aac_eld"


class Audio(Control):
    OFF = "off"
    ON = "on"
    MONO = "mono"
    STEREO = "stereo"


class Grid(Control):
    OFF = "off"
    DRAW_3X3 = "draw_3x3"
    DRAW_4X4 = "draw_4x4"
    DRAW_PHI = "draw_phi"


class PictureFormat(Control):
    JPEG = "jpeg"
    DNG = "dng"


ALL_CONTROLS: Tuple[Type[Control], ...] = (
    Mode,
    Engine,
    Preview,
    Flash,
    WhiteBalance,
    Hdr,
    VideoCodec,
    AudioCodec,
    Audio,
    Grid,
    PictureFormat,
)


# ---------------------------------------------------------------------------
# Gestures


class GestureType(Enum):
    ONE_SHOT = "one_shot"
    CONTINUOUS = "continuous"


class GestureAction(Enum):
    """Action a gesture slot can trigger. ``NONE`` fits every slot."""

    NONE = ("none", None)
    AUTO_FOCUS = ("auto_focus", GestureType.ONE_SHOT)
    TAKE_PICTURE = ("take_picture", GestureType.ONE_SHOT)
    TAKE_PICTURE_SNAPSHOT = ("take_picture_snapshot", GestureType.ONE_SHOT)
    ZOOM = ("zoom", GestureType.CONTINUOUS)
    EXPOSURE_CORRECTION = ("exposure_correction", GestureType.CONTINUOUS)
    FILTER_CONTROL_1 = ("filter_control_1", GestureType.CONTINUOUS)
    FILTER_CONTROL_2 = ("filter_control_2", GestureType.CONTINUOUS)

    @property
    def gesture_type(self):
        return self.value[1]


class Gesture(Enum):
    PINCH = ("pinch", GestureType.CONTINUOUS)
    TAP = ("tap", GestureType.ONE_SHOT)
    LONG_TAP = ("long_tap", GestureType.ONE_SHOT)
    SCROLL_HORIZONTAL = ("scroll_horizontal", GestureType.CONTINUOUS)
    SCROLL_VERTICAL = ("scroll_vertical", GestureType.CONTINUOUS)

    @property
    def gesture_type(self) -> GestureType:
        return self.value[1]

    def is_assignable_to(self, action: GestureAction) -> bool:
        return action is GestureAction.NONE or action.gesture_type is self.gesture_type


# ---------------------------------------------------------------------------
# Overlays


class OverlayTarget(Enum):
    PREVIEW = "preview"
    PICTURE_SNAPSHOT = "picture_snapshot"
    VIDEO_SNAPSHOT = "video_snapshot"


__all__ = [
    "ALL_CONTROLS",
    "Audio",
    "AudioCodec",
    "Control",
    "Engine",
    "Flash",
    "Gesture",
    "GestureAction",
    "GestureType",
    "Grid",
    "Hdr",
    "Mode",
    "OverlayTarget",
    "PictureFormat",
    "Preview",
    "VideoCodec",
    "WhiteBalance",
]
