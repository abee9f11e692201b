"""Options that can only be changed while the camera is closed.

When the camera is open, ``set`` registers a one-shot listener, closes the
camera, and applies the change from the listener's ``on_camera_closed``
callback before reopening. When the camera is already closed the change is
applied immediately.

At most one guarded change may be outstanding per camera. A second request
either raises :class:`GuardedMutationPending` or is merged into the pending
change, depending on the configured :class:`OverlapPolicy`.
"""

from __future__ import annotations

import asyncio
import weakref
from abc import abstractmethod
from typing import Any, Callable, Dict, List, Optional, Tuple, Type, TypeVar

from preview_options import controls
from preview_options.config import OverlapPolicy
from preview_options.core.logging_utils import LoggerLike, ensure_structured_logger, get_module_logger
from preview_options.errors import GuardedMutationPending
from preview_options.target import CameraTarget

from .controls import ControlOption

C = TypeVar("C", bound=controls.Control)

logger = get_module_logger(__name__)


class GuardedMutation:
    """Handle for a guarded change.

    The handle settles once every requested change reached the camera and the
    camera was reopened, or once that cycle failed. ``applied`` is True only
    for the first outcome; ``error`` holds the exception for the second.
    Asyncio callers can ``await mutation.wait()``.
    """

    def __init__(self) -> None:
        self._changes: List[Tuple["GuardedControlOption", Any]] = []
        self._done = False
        self._error: Optional[BaseException] = None
        self._callbacks: List[Callable[["GuardedMutation"], None]] = []
        self._event = asyncio.Event()

    # ------------------------------------------------------------------
    # State

    @property
    def done(self) -> bool:
        return self._done

    @property
    def applied(self) -> bool:
        return self._done and self._error is None

    @property
    def pending(self) -> bool:
        return not self._done

    @property
    def error(self) -> Optional[BaseException]:
        return self._error

    @property
    def changes(self) -> Tuple[Tuple[str, Any], ...]:
        return tuple((option.name, value) for option, value in self._changes)

    @property
    def value(self) -> Any:
        """Value of the most recently requested change."""
        return self._changes[-1][1] if self._changes else None

    def describe(self) -> str:
        return ", ".join(f"{name}={value!r}" for name, value in self.changes)

    def __repr__(self) -> str:
        if not self._done:
            state = "pending"
        elif self._error is None:
            state = "applied"
        else:
            state = f"failed: {self._error}"
        return f"GuardedMutation({self.describe()}, {state})"

    # ------------------------------------------------------------------
    # Completion

    def add_done_callback(self, callback: Callable[["GuardedMutation"], None]) -> None:
        if self._done:
            callback(self)
            return
        self._callbacks.append(callback)

    async def wait(self, timeout: Optional[float] = None) -> "GuardedMutation":
        """Wait for the handle to settle. Re-raises the failure, if any."""
        if timeout is None:
            await self._event.wait()
        else:
            await asyncio.wait_for(self._event.wait(), timeout)
        if self._error is not None:
            raise self._error
        return self

    # ------------------------------------------------------------------
    # Internal helpers

    def _add(self, option: "GuardedControlOption", value: Any) -> None:
        for index, (existing, _) in enumerate(self._changes):
            if existing is option:
                self._changes[index] = (option, value)
                return
        self._changes.append((option, value))

    def _apply_changes(self, view: CameraTarget) -> None:
        for option, value in self._changes:
            logger.debug("Applying %s = %s", option.name, value)
            option.apply(view, value)

    def _settle(self, error: Optional[BaseException] = None) -> None:
        if self._done:
            return
        self._done = True
        self._error = error
        self._event.set()
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            try:
                callback(self)
            except Exception:
                logger.exception("Guarded mutation callback failed for %s", self.describe())


class _PendingRegistry:
    """Outstanding guarded mutation per camera, without keeping cameras alive."""

    def __init__(self) -> None:
        self._entries: Dict[int, Tuple[weakref.ref, GuardedMutation]] = {}

    def get(self, view: CameraTarget) -> Optional[GuardedMutation]:
        entry = self._entries.get(id(view))
        if entry is None or entry[0]() is not view:
            return None
        return entry[1]

    def put(self, view: CameraTarget, mutation: GuardedMutation) -> None:
        key = id(view)
        entries = self._entries

        def _forget(_ref: weakref.ref) -> None:
            current = entries.get(key)
            if current is not None and current[0] is _ref:
                del entries[key]

        entries[key] = (weakref.ref(view, _forget), mutation)

    def pop(self, view: CameraTarget) -> Optional[GuardedMutation]:
        entry = self._entries.get(id(view))
        if entry is None or entry[0]() is not view:
            return None
        del self._entries[id(view)]
        return entry[1]


_pending = _PendingRegistry()


def pending_mutation(view: CameraTarget) -> Optional[GuardedMutation]:
    """Return the guarded mutation still waiting on ``view`` to close, if any."""
    return _pending.get(view)


class _IdleObserver:
    """One-shot close listener. Revokes itself inside its only invocation."""

    def __init__(self, view: CameraTarget, mutation: GuardedMutation) -> None:
        self._view = view
        self._mutation = mutation
        self._fired = False

    @property
    def fired(self) -> bool:
        return self._fired

    def on_camera_closed(self) -> None:
        if self._fired:
            return
        self._fired = True
        view = self._view
        mutation = self._mutation
        view.remove_camera_listener(self)
        _pending.pop(view)
        try:
            try:
                mutation._apply_changes(view)
            finally:
                logger.debug("Reopening camera after %s", mutation.describe())
                view.open()
        except Exception as exc:
            logger.error("Guarded change %s failed: %s", mutation.describe(), exc)
            mutation._settle(exc)
            raise
        mutation._settle()

    def revoke(self) -> None:
        self._fired = True
        self._view.remove_camera_listener(self)


class GuardedControlOption(ControlOption[C]):
    """Control option whose change requires a close → apply → reopen cycle."""

    def __init__(
        self,
        control_type: Type[C],
        name: str,
        *,
        overlap_policy: OverlapPolicy = OverlapPolicy.REJECT,
        logger: LoggerLike = None,
    ) -> None:
        super().__init__(control_type, name)
        self._overlap_policy = overlap_policy
        self._logger = ensure_structured_logger(logger, fallback_name=__name__)

    @property
    def overlap_policy(self) -> OverlapPolicy:
        return self._overlap_policy

    @abstractmethod
    def apply(self, view: CameraTarget, value: C) -> None:
        """Perform the change. The camera is closed when this runs."""

    def set(self, view: CameraTarget, value: C) -> GuardedMutation:
        pending = _pending.get(view)
        if pending is not None:
            if self._overlap_policy is OverlapPolicy.REJECT:
                self._logger.warning("Rejecting %s = %s while %s is pending", self.name, value, pending.describe())
                raise GuardedMutationPending(self.name, pending.describe())
            pending._add(self, value)
            self._logger.debug("Merged %s = %s into pending change", self.name, value)
            return pending

        mutation = GuardedMutation()
        mutation._add(self, value)

        if not view.is_opened():
            mutation._apply_changes(view)
            mutation._settle()
            return mutation

        observer = _IdleObserver(view, mutation)
        _pending.put(view, mutation)
        view.add_camera_listener(observer)
        self._logger.debug("Closing camera to apply %s = %s", self.name, value)
        try:
            view.close()
        except Exception:
            if not observer.fired:
                observer.revoke()
                _pending.pop(view)
            raise
        return mutation


class Engine(GuardedControlOption[controls.Engine]):
    def __init__(self, **kwargs) -> None:
        super().__init__(controls.Engine, "Engine", **kwargs)

    def apply(self, view: CameraTarget, value: controls.Engine) -> None:
        view.set_engine(value)


class Preview(GuardedControlOption[controls.Preview]):
    """Render strategy. The view must be detached from its parent to change it."""

    def __init__(self, **kwargs) -> None:
        super().__init__(controls.Preview, "Preview Surface", **kwargs)

    def apply(self, view: CameraTarget, value: controls.Preview) -> None:
        parent = view.parent
        if parent is None:
            view.set_preview(value)
            return
        params = view.layout_params
        index = max(parent.index_of_child(view), 0)
        parent.remove_view(view)
        try:
            view.set_preview(value)
        finally:
            parent.add_view(view, index, params)


__all__ = [
    "Engine",
    "GuardedControlOption",
    "GuardedMutation",
    "Preview",
    "pending_mutation",
]
