"""Presentation-facing coordinator for a camera's options."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from preview_options.config import OptionsConfig
from preview_options.core.logging_utils import LoggerLike, ensure_structured_logger
from preview_options.errors import InvariantViolation, OptionError, UnknownOptionError
from preview_options.options.base import Option
from preview_options.options.catalog import OptionSection, build_sections, index_by_name, iter_options
from preview_options.options.guarded import GuardedMutation
from preview_options.target import CameraOptions, CameraTarget, OverlayView


@dataclass(slots=True, frozen=True)
class OptionRow:
    """Display snapshot of one option: current value plus choices."""

    section: str
    name: str
    value: Any
    label: str
    choices: List[Any]
    labels: List[str]


class OptionController:
    """
    Binds the option catalog to one camera and its capability snapshot.

    Responsibilities:
    - Listing every option with its current value and choices
    - Applying a value (or a choice by label) to a named option
    - Logging applied changes and surfacing failures
    """

    def __init__(
        self,
        view: CameraTarget,
        capabilities: CameraOptions,
        *,
        config: Optional[OptionsConfig] = None,
        overlay: Optional[OverlayView] = None,
        sections: Optional[List[OptionSection]] = None,
        on_change: Optional[Callable[[str, Any], None]] = None,
        logger: LoggerLike = None,
    ) -> None:
        self._logger = ensure_structured_logger(logger, fallback_name=__name__)
        self._view = view
        self._capabilities = capabilities
        self._on_change = on_change
        self._sections = sections if sections is not None else build_sections(
            config, overlay=overlay, logger=self._logger
        )
        self._by_name: Dict[str, Option] = index_by_name(self._sections)

    @property
    def sections(self) -> List[OptionSection]:
        return list(self._sections)

    @property
    def capabilities(self) -> CameraOptions:
        return self._capabilities

    def update_capabilities(self, capabilities: CameraOptions) -> None:
        """Swap in a new snapshot, e.g. after the engine changed."""
        self._capabilities = capabilities
        self._logger.debug("Capability snapshot replaced")

    def option(self, name: str) -> Option:
        try:
            return self._by_name[name]
        except KeyError:
            raise UnknownOptionError(name) from None

    def names(self) -> List[str]:
        return [option.name for option in iter_options(self._sections)]

    # ------------------------------------------------------------------
    # Reading

    def row(self, name: str) -> OptionRow:
        option = self.option(name)
        return self._build_row(self._section_of(option), option)

    def rows(self) -> List[OptionRow]:
        return [self._build_row(section.title, option) for section in self._sections for option in section.options]

    def _build_row(self, section: str, option: Option) -> OptionRow:
        try:
            value = option.get(self._view)
        except InvariantViolation as exc:
            self._logger.error("%s is out of sync with the camera: %s", option.name, exc)
            raise
        choices = list(option.get_all(self._view, self._capabilities))
        return OptionRow(
            section=section,
            name=option.name,
            value=value,
            label=option.to_string(value),
            choices=choices,
            labels=[option.to_string(choice) for choice in choices],
        )

    def _section_of(self, option: Option) -> str:
        for section in self._sections:
            if option in section.options:
                return section.title
        return ""

    # ------------------------------------------------------------------
    # Writing

    def apply(self, name: str, value: Any) -> Any:
        """Apply ``value`` to the named option. Returns whatever ``set`` returns."""
        option = self.option(name)
        self._logger.info("Applying %s = %s", name, option.to_string(value))
        try:
            result = option.set(self._view, value)
        except OptionError as exc:
            self._logger.warning("Failed to apply %s: %s", name, exc)
            raise
        if self._on_change is None:
            return result
        if isinstance(result, GuardedMutation):
            result.add_done_callback(lambda mutation: self._notify_guarded(name, mutation))
        else:
            self._on_change(name, value)
        return result

    def _notify_guarded(self, name: str, mutation: GuardedMutation) -> None:
        if not mutation.applied:
            self._logger.warning("Not reporting %s, guarded change failed: %s", name, mutation.error)
            return
        # a coalesced change may have been superseded by a later request
        self._on_change(name, dict(mutation.changes)[name])

    def apply_label(self, name: str, label: str) -> Any:
        """Apply the choice whose display label equals ``label``."""
        option = self.option(name)
        for choice in option.get_all(self._view, self._capabilities):
            if option.to_string(choice) == label:
                return self.apply(name, choice)
        raise ValueError(f"{label!r} is not a current choice for {name!r}")


__all__ = ["OptionController", "OptionRow"]
