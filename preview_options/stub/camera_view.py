"""Stub camera view implementing the CameraTarget contract."""

from __future__ import annotations

import asyncio
from collections import deque
from enum import Enum
from typing import Deque, Dict, List, Optional, Type, TypeVar

from preview_options.controls import ALL_CONTROLS, Control, Engine, Gesture, GestureAction, Preview
from preview_options.core.logging_utils import LoggerLike, ensure_structured_logger
from preview_options.options.grid_color import DEFAULT_GRID_COLOR
from preview_options.target import CameraListener, LayoutParams

from .capabilities import StubCameraOptions
from .views import StubView

C = TypeVar("C", bound=Control)


class CloseDispatch(Enum):
    """How ``on_camera_closed`` reaches listeners after ``close()``."""

    SYNC = "sync"  # before close() returns
    DEFERRED = "deferred"  # queued until dispatch_pending()
    LOOP = "loop"  # scheduled on an asyncio loop


class StubCameraView(StubView):
    """Camera preview stand-in.

    Mirrors the restrictions of a real preview: the engine can only change
    while closed, and the render strategy only while detached from a parent.
    Every lifecycle call and mutation is appended to ``events``.
    """

    def __init__(
        self,
        *,
        capabilities: Optional[StubCameraOptions] = None,
        opened: bool = False,
        dispatch: CloseDispatch = CloseDispatch.SYNC,
        loop: Optional[asyncio.AbstractEventLoop] = None,
        logger: LoggerLike = None,
    ) -> None:
        super().__init__("camera", LayoutParams())
        self.capabilities = capabilities or StubCameraOptions()
        self.grid_color = DEFAULT_GRID_COLOR
        self.events: List[str] = []
        self._opened = opened
        self._dispatch = dispatch
        self._loop = loop
        self._logger = ensure_structured_logger(logger, fallback_name=__name__)
        self._listeners: List[CameraListener] = []
        self._queued: Deque[str] = deque()
        self._controls: Dict[Type[Control], Control] = {
            control_type: control_type.default() for control_type in ALL_CONTROLS
        }
        self._gestures: Dict[Gesture, GestureAction] = {gesture: GestureAction.NONE for gesture in Gesture}

    # ------------------------------------------------------------------
    # Lifecycle

    def is_opened(self) -> bool:
        return self._opened

    def open(self) -> None:
        self._opened = True
        self.events.append("open")
        self._logger.debug("Camera opened (engine=%s)", self._controls[Engine].name)

    def close(self) -> None:
        if not self._opened:
            return
        self._opened = False
        self.events.append("close")
        self._logger.debug("Camera closed")
        if self._dispatch is CloseDispatch.SYNC:
            self._notify_closed()
        elif self._dispatch is CloseDispatch.DEFERRED:
            self._queued.append("closed")
        else:
            loop = self._loop or asyncio.get_running_loop()
            loop.call_soon(self._notify_closed)

    def dispatch_pending(self) -> int:
        """Deliver queued close notifications. Returns how many were delivered."""
        delivered = 0
        while self._queued:
            self._queued.popleft()
            self._notify_closed()
            delivered += 1
        return delivered

    def notify_closed(self) -> None:
        """Deliver a close notification now, regardless of dispatch mode."""
        self._notify_closed()

    # ------------------------------------------------------------------
    # Listeners

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def add_camera_listener(self, listener: CameraListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_camera_listener(self, listener: CameraListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify_closed(self) -> None:
        for listener in list(self._listeners):
            listener.on_camera_closed()

    # ------------------------------------------------------------------
    # Controls

    def get_control(self, control_type: Type[C]) -> C:
        return self._controls[control_type]  # type: ignore[return-value]

    def set_control(self, value: Control) -> None:
        if isinstance(value, Engine):
            self.set_engine(value)
        elif isinstance(value, Preview):
            self.set_preview(value)
        else:
            self._controls[type(value)] = value
            self.events.append(f"set:{value.name}")

    def set_engine(self, engine: Engine) -> None:
        if self._opened:
            raise RuntimeError("Engine can only be changed while the camera is closed")
        self._controls[Engine] = engine
        self.events.append(f"engine:{engine.name}")

    def set_preview(self, preview: Preview) -> None:
        if self.parent is not None:
            raise RuntimeError("Preview can only be changed while detached from the window")
        self._controls[Preview] = preview
        self.events.append(f"preview:{preview.name}")

    # ------------------------------------------------------------------
    # Gestures, grid color

    def get_gesture_action(self, gesture: Gesture) -> GestureAction:
        return self._gestures[gesture]

    def map_gesture(self, gesture: Gesture, action: GestureAction) -> None:
        if not gesture.is_assignable_to(action):
            raise ValueError(f"{action.name} cannot be assigned to {gesture.name}")
        self._gestures[gesture] = action
        self.events.append(f"gesture:{gesture.name}={action.name}")

    def set_grid_color(self, color: int) -> None:
        self.grid_color = color
        self.events.append(f"grid_color:{color & 0xFFFFFFFF:08X}")

    def __repr__(self) -> str:
        state = "opened" if self._opened else "closed"
        return f"StubCameraView({state}, engine={self._controls[Engine].name}, preview={self._controls[Preview].name})"


__all__ = ["CloseDispatch", "StubCameraView"]
