"""Named descriptors for reading, listing and changing camera preview settings."""

from __future__ import annotations

from importlib import metadata

from .config import OptionsConfig, OverlapPolicy, load_config
from .controller import OptionController, OptionRow
from .errors import (
    GuardedMutationPending,
    InvariantViolation,
    OptionError,
    UnknownGridColorError,
    UnknownOptionError,
)
from .options import Option, build_sections, pending_mutation
from .target import MATCH_PARENT, WRAP_CONTENT

try:
    __version__ = metadata.version("preview-options")
except metadata.PackageNotFoundError:  # pragma: no cover - local dev
    __version__ = "0.0.0"


__all__ = [
    "GuardedMutationPending",
    "InvariantViolation",
    "MATCH_PARENT",
    "Option",
    "OptionController",
    "OptionError",
    "OptionRow",
    "OptionsConfig",
    "OverlapPolicy",
    "UnknownGridColorError",
    "UnknownOptionError",
    "WRAP_CONTENT",
    "__version__",
    "build_sections",
    "load_config",
    "pending_mutation",
]
