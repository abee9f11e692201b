"""In-process camera stand-ins for developing and testing without hardware."""

from .camera_view import CloseDispatch, StubCameraView
from .capabilities import StubCameraOptions
from .views import StubContainer, StubOverlay, StubView

__all__ = [
    "CloseDispatch",
    "StubCameraOptions",
    "StubCameraView",
    "StubContainer",
    "StubOverlay",
    "StubView",
]
