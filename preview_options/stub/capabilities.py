"""Capability snapshot with configurable supported sets."""

from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Type

from preview_options.controls import Control, GestureAction


class StubCameraOptions:
    """Supported controls and gesture actions.

    Control types missing from ``controls`` support every member; a missing
    ``actions`` argument supports every gesture action.
    """

    def __init__(
        self,
        controls: Optional[Mapping[Type[Control], Iterable[Control]]] = None,
        actions: Optional[Iterable[GestureAction]] = None,
    ) -> None:
        self._controls: Dict[Type[Control], FrozenSet[Control]] = {
            control_type: frozenset(values) for control_type, values in (controls or {}).items()
        }
        self._actions: Optional[FrozenSet[GestureAction]] = frozenset(actions) if actions is not None else None

    def supported_controls(self, control_type: Type[Control]) -> FrozenSet[Control]:
        if control_type in self._controls:
            return self._controls[control_type]
        return frozenset(control_type)

    def supports(self, action: GestureAction) -> bool:
        if self._actions is None:
            return True
        return action in self._actions

    def with_controls(self, control_type: Type[Control], values: Iterable[Control]) -> "StubCameraOptions":
        controls = dict(self._controls)
        controls[control_type] = frozenset(values)
        return StubCameraOptions(controls, self._actions)


__all__ = ["StubCameraOptions"]
