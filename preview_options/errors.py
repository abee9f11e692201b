"""Exceptions raised by the option descriptors."""

from __future__ import annotations


class OptionError(RuntimeError):
    """Base class for option failures."""


class InvariantViolation(OptionError):
    """The target holds a value the descriptor catalog cannot represent.

    Signals that the target and the catalog drifted apart; never recoverable.
    """


class UnknownGridColorError(InvariantViolation):
    def __init__(self, color: int) -> None:
        super().__init__(f"Could not find grid color 0x{color & 0xFFFFFFFF:08X}")
        self.color = color


class GuardedMutationPending(OptionError):
    """A guarded change is already waiting for the camera to close."""

    def __init__(self, option_name: str, pending_name: str) -> None:
        super().__init__(
            f"Cannot apply {option_name!r}: {pending_name!r} is still waiting for the camera to close"
        )
        self.option_name = option_name
        self.pending_name = pending_name


class UnknownOptionError(OptionError, KeyError):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown option {self.name!r}"


__all__ = [
    "GuardedMutationPending",
    "InvariantViolation",
    "OptionError",
    "UnknownGridColorError",
    "UnknownOptionError",
]
