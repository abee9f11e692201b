"""Default set of options, grouped the way a control panel lists them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from preview_options.config import OptionsConfig
from preview_options.core.logging_utils import LoggerLike
from preview_options.target import OverlayView

from . import controls, dimensions, gestures, guarded, overlays
from .base import Option
from .grid_color import GridColor


@dataclass(slots=True, frozen=True)
class OptionSection:
    title: str
    options: Tuple[Option, ...]


def build_sections(
    config: Optional[OptionsConfig] = None,
    *,
    overlay: Optional[OverlayView] = None,
    logger: LoggerLike = None,
) -> List[OptionSection]:
    """Create every option. Overlay flags are only offered when ``overlay`` is given."""

    config = config or OptionsConfig()
    size_kwargs = {
        "default_boundary": config.dimensions.default_boundary,
        "divisions": config.dimensions.divisions,
    }
    guard_kwargs = {"overlap_policy": config.guard.overlap_policy, "logger": logger}

    sections = [
        OptionSection("Layout", (dimensions.Width(**size_kwargs), dimensions.Height(**size_kwargs))),
        OptionSection(
            "Engine and Preview",
            (controls.Mode(), guarded.Engine(**guard_kwargs), guarded.Preview(**guard_kwargs)),
        ),
        OptionSection(
            "Capture",
            (controls.Flash(), controls.WhiteBalance(), controls.Hdr(), controls.PictureFormat()),
        ),
        OptionSection("Video Recording", (controls.VideoCodec(), controls.AudioCodec(), controls.Audio())),
        OptionSection(
            "Gestures",
            (
                gestures.Pinch(),
                gestures.HorizontalScroll(),
                gestures.VerticalScroll(),
                gestures.Tap(),
                gestures.LongTap(),
            ),
        ),
        OptionSection("Grid", (controls.Grid(), GridColor())),
    ]
    if overlay is not None:
        sections.append(
            OptionSection(
                "Overlays",
                (
                    overlays.OverlayInPreview(overlay),
                    overlays.OverlayInPictureSnapshot(overlay),
                    overlays.OverlayInVideoSnapshot(overlay),
                ),
            )
        )
    return sections


def iter_options(sections: List[OptionSection]) -> Iterator[Option]:
    for section in sections:
        yield from section.options


def index_by_name(sections: List[OptionSection]) -> Dict[str, Option]:
    index: Dict[str, Option] = {}
    for option in iter_options(sections):
        if option.name in index:
            raise ValueError(f"Duplicate option name {option.name!r}")
        index[option.name] = option
    return index


__all__ = ["OptionSection", "build_sections", "index_by_name", "iter_options"]
