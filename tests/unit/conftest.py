"""Unit test fixtures built on the stub camera.

Fixtures provided:
- capabilities: snapshot supporting every control and action
- container: a measured parent with two sibling views
- camera: closed stub camera attached at index 1 of ``container``
- opened_camera: same camera, opened
- overlay: overlay view with all draw flags off
"""

from __future__ import annotations

import pytest

from preview_options.stub import StubCameraOptions, StubCameraView, StubContainer, StubOverlay, StubView
from preview_options.target import LayoutParams


@pytest.fixture
def capabilities() -> StubCameraOptions:
    return StubCameraOptions()


@pytest.fixture
def container() -> StubContainer:
    parent = StubContainer(width=1080, height=1920)
    parent.add_view(StubView("toolbar"))
    parent.add_view(StubView("controls"))
    return parent


@pytest.fixture
def camera(container: StubContainer, capabilities: StubCameraOptions) -> StubCameraView:
    view = StubCameraView(capabilities=capabilities)
    container.add_view(view, 1, LayoutParams(width=640, height=480))
    return view


@pytest.fixture
def opened_camera(camera: StubCameraView) -> StubCameraView:
    camera.open()
    camera.events.clear()
    return camera


@pytest.fixture
def overlay() -> StubOverlay:
    return StubOverlay()
