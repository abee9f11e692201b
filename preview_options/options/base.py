"""Option contract shared by every camera attribute descriptor."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Generic, List, TypeVar

from preview_options.target import CameraOptions, CameraTarget

T = TypeVar("T")


class Option(ABC, Generic[T]):
    """A named, stateless descriptor for one configurable camera attribute.

    Options never hold on to the camera: the target and its capability
    snapshot are passed to every call.

    - ``get`` reads the current value without mutating the target.
    - ``get_all`` lists the legal values, in a stable order, for the target's
      current state.
    - ``set`` applies a value. Callers pass a value from the latest
      ``get_all`` result; this is not re-validated here.
    - ``to_string`` renders a value for display.
    """

    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @abstractmethod
    def get(self, view: CameraTarget) -> T:
        ...

    @abstractmethod
    def get_all(self, view: CameraTarget, options: CameraOptions) -> List[T]:
        ...

    @abstractmethod
    def set(self, view: CameraTarget, value: T) -> Any:
        ...

    def to_string(self, value: T) -> str:
        if isinstance(value, Enum):
            text = value.name
        elif isinstance(value, bool):
            text = "true" if value else "false"
        else:
            text = str(value)
        return text.replace("_", " ").lower()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"


__all__ = ["Option"]
