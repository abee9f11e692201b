"""Camera option descriptors."""

from .base import Option
from .catalog import OptionSection, build_sections, index_by_name, iter_options
from .controls import (
    Audio,
    AudioCodec,
    ControlOption,
    Flash,
    Grid,
    Hdr,
    Mode,
    PictureFormat,
    VideoCodec,
    WhiteBalance,
)
from .dimensions import Height, Width, size_steps
from .gestures import GestureOption, HorizontalScroll, LongTap, Pinch, Tap, VerticalScroll
from .grid_color import GRID_COLORS, GridColor, GridColorChoice
from .guarded import Engine, GuardedControlOption, GuardedMutation, Preview, pending_mutation
from .overlays import OverlayInPictureSnapshot, OverlayInPreview, OverlayInVideoSnapshot, OverlayOption

__all__ = [
    "Audio",
    "AudioCodec",
    "ControlOption",
    "Engine",
    "Flash",
    "GRID_COLORS",
    "GestureOption",
    "Grid",
    "GridColor",
    "GridColorChoice",
    "GuardedControlOption",
    "GuardedMutation",
    "Hdr",
    "Height",
    "HorizontalScroll",
    "LongTap",
    "Mode",
    "Option",
    "OptionSection",
    "OverlayInPictureSnapshot",
    "OverlayInPreview",
    "OverlayInVideoSnapshot",
    "OverlayOption",
    "PictureFormat",
    "Pinch",
    "Preview",
    "Tap",
    "VerticalScroll",
    "VideoCodec",
    "WhiteBalance",
    "Width",
    "build_sections",
    "index_by_name",
    "iter_options",
    "pending_mutation",
    "size_steps",
]
