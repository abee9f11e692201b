"""Typed configuration helpers for preview_options."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from preview_options.core.config_loader import ConfigLoader
from preview_options.core.logging_config import configure_logging
from preview_options.core.logging_utils import LoggerLike, ensure_structured_logger
from preview_options.defaults import (
    DEFAULT_BOUNDARY,
    DEFAULT_DIVISIONS,
    DEFAULT_LOG_FILE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_OVERLAP_POLICY,
)

DEFAULT_CONFIG_PATH = Path(__file__).with_name("config.txt")

CONFIG_DEFAULTS: Dict[str, Any] = {
    "dimensions.default_boundary": DEFAULT_BOUNDARY,
    "dimensions.divisions": DEFAULT_DIVISIONS,
    "guard.overlap_policy": DEFAULT_OVERLAP_POLICY,
    "logging.level": DEFAULT_LOG_LEVEL,
    "logging.file": DEFAULT_LOG_FILE,
}


class OverlapPolicy(Enum):
    """What a guarded option does when another guarded change is pending."""

    REJECT = "reject"
    COALESCE = "coalesce"


@dataclass(slots=True, frozen=True)
class DimensionSettings:
    default_boundary: int = DEFAULT_BOUNDARY
    divisions: int = DEFAULT_DIVISIONS


@dataclass(slots=True, frozen=True)
class GuardSettings:
    overlap_policy: OverlapPolicy = OverlapPolicy(DEFAULT_OVERLAP_POLICY)


@dataclass(slots=True, frozen=True)
class LoggingSettings:
    level: str = DEFAULT_LOG_LEVEL
    file: Optional[Path] = None


@dataclass(slots=True, frozen=True)
class OptionsConfig:
    dimensions: DimensionSettings = DimensionSettings()
    guard: GuardSettings = GuardSettings()
    logging: LoggingSettings = LoggingSettings()


# ---------------------------------------------------------------------------
# Public API


def load_config(
    config_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
    *,
    logger: LoggerLike = None,
) -> OptionsConfig:
    """Build a typed config from a config file plus optional overrides."""

    log = ensure_structured_logger(logger, fallback_name=__name__)
    merged = ConfigLoader.load(config_path or DEFAULT_CONFIG_PATH, CONFIG_DEFAULTS)
    if overrides:
        for key, value in overrides.items():
            if value is not None:
                merged[key] = value

    dimensions = DimensionSettings(
        default_boundary=_coerce_positive_int(
            merged, ("dimensions.default_boundary",), DEFAULT_BOUNDARY, logger=log
        ),
        divisions=_coerce_positive_int(merged, ("dimensions.divisions",), DEFAULT_DIVISIONS, logger=log),
    )
    guard = GuardSettings(overlap_policy=_coerce_policy(merged, ("guard.overlap_policy",), logger=log))
    log_file = str(_first_present(merged, ("logging.file",)) or "").strip()
    logging_settings = LoggingSettings(
        level=str(_first_present(merged, ("logging.level",)) or DEFAULT_LOG_LEVEL).upper(),
        file=Path(log_file) if log_file else None,
    )
    return OptionsConfig(dimensions=dimensions, guard=guard, logging=logging_settings)


def apply_logging(config: OptionsConfig, *, force: bool = False) -> None:
    """Configure root logging from ``config.logging``."""

    configure_logging(config.logging.level, force=force, log_file=config.logging.file)


def as_dict(config: OptionsConfig) -> Dict[str, Any]:
    """Return a nested dict representation (useful for debug output)."""

    return {
        "dimensions": asdict(config.dimensions),
        "guard": {"overlap_policy": config.guard.overlap_policy.value},
        "logging": {
            "level": config.logging.level,
            "file": str(config.logging.file) if config.logging.file else "",
        },
    }


# ---------------------------------------------------------------------------
# Internal helpers


def _coerce_positive_int(data: Dict[str, Any], keys: Tuple[str, ...], default: int, *, logger) -> int:
    raw = _first_present(data, keys)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except (TypeError, ValueError):
        logger.warning("Invalid integer %r for %s, using default %s", raw, keys[0], default)
        return default
    if value <= 0:
        logger.warning("Non-positive value %r for %s, using default %s", raw, keys[0], default)
        return default
    return value


def _coerce_policy(data: Dict[str, Any], keys: Tuple[str, ...], *, logger) -> OverlapPolicy:
    raw = _first_present(data, keys)
    if isinstance(raw, OverlapPolicy):
        return raw
    try:
        return OverlapPolicy(str(raw).strip().lower())
    except ValueError:
        logger.warning("Unknown overlap policy %r, using %s", raw, DEFAULT_OVERLAP_POLICY)
        return OverlapPolicy(DEFAULT_OVERLAP_POLICY)


def _first_present(data: Dict[str, Any], keys: Tuple[str, ...]) -> Any:
    for key in keys:
        if key in data:
            return data.get(key)
    return None


__all__ = [
    "CONFIG_DEFAULTS",
    "DimensionSettings",
    "GuardSettings",
    "LoggingSettings",
    "OptionsConfig",
    "OverlapPolicy",
    "apply_logging",
    "as_dict",
    "load_config",
]
