"""Minimal view hierarchy: plain views, overlays and a container."""

from __future__ import annotations

from typing import Any, List, Optional

from preview_options.target import LayoutParams, OverlayLayoutParams


class StubView:
    """A child view with layout params and a back-reference to its parent."""

    def __init__(self, name: str = "view", params: Optional[LayoutParams] = None) -> None:
        self.name = name
        self.layout_params = params if params is not None else LayoutParams()
        self.parent: Optional["StubContainer"] = None
        self.layout_requests = 0

    def set_layout_params(self, params: LayoutParams) -> None:
        self.layout_params = params
        self.layout_requests += 1

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class StubOverlay(StubView):
    def __init__(self, name: str = "overlay", params: Optional[OverlayLayoutParams] = None) -> None:
        super().__init__(name, params if params is not None else OverlayLayoutParams())


class StubContainer:
    """Parent view with a measured size and an ordered list of children."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self.width = width
        self.height = height
        self.children: List[Any] = []

    @property
    def child_count(self) -> int:
        return len(self.children)

    def index_of_child(self, view: Any) -> int:
        for index, child in enumerate(self.children):
            if child is view:
                return index
        return -1

    def add_view(self, view: Any, index: int = -1, params: Optional[LayoutParams] = None) -> None:
        if getattr(view, "parent", None) is not None:
            raise RuntimeError(f"{view!r} already has a parent")
        if index < 0 or index > len(self.children):
            index = len(self.children)
        self.children.insert(index, view)
        view.parent = self
        if params is not None:
            view.layout_params = params

    def remove_view(self, view: Any) -> None:
        index = self.index_of_child(view)
        if index < 0:
            raise ValueError(f"{view!r} is not a child of this container")
        del self.children[index]
        view.parent = None


__all__ = ["StubContainer", "StubOverlay", "StubView"]
