"""Base classes for drawable objects and event-handling controls."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .point import Point


class _Hooks:
    """Optional per-instance listeners that the default handlers notify."""

    def bind(self, event: str, callback: Callable[..., Any]) -> None:
        """Call callback with the event's arguments whenever event is handled."""
        listeners = self.__dict__.setdefault("_listeners", {})
        listeners.setdefault(event, []).append(callback)

    def _emit(self, event: str, *args: Any) -> None:
        for callback in list(self.__dict__.get("_listeners", {}).get(event, ())):
            callback(*args)


class GameObject(_Hooks):
    """Something that is positioned, updated and drawn."""

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        w: float = 0.0,
        h: float = 0.0,
        anchor_x: float = 0.0,
        anchor_y: float = 0.0,
    ) -> None:
        self.visible = True
        self.position = Point(x, y)
        self.size = Point(w, h)
        self.anchor = Point(anchor_x, anchor_y)

    def draw(self, surface: Any) -> None:
        """Draw onto the surface by notifying any bound "draw" listeners."""
        self._emit("draw", surface)

    def update(self, delta_time: float) -> None:
        """Advance game logic by notifying any bound "update" listeners."""
        self._emit("update", delta_time)


class Control(_Hooks):
    """Something that receives keyboard and mouse events and passes them to bound listeners."""

    def on_key_down(self, key_code: int) -> None:
        """Handle a key press."""
        self._emit("key_down", key_code)

    def on_key_up(self, key_code: int) -> None:
        """Handle a key release."""
        self._emit("key_up", key_code)

    def on_mouse_down(self, button: int, mx: int, my: int) -> None:
        """Handle a mouse button press."""
        self._emit("mouse_down", button, mx, my)

    def on_mouse_up(self, button: int, mx: int, my: int) -> None:
        """Handle a mouse button release."""
        self._emit("mouse_up", button, mx, my)

    def on_mouse_move(self, mx: int, my: int) -> None:
        """Handle mouse movement."""
        self._emit("mouse_move", mx, my)

    def on_mouse_scroll(self, mx: int, my: int, delta: int) -> None:
        """Handle mouse wheel scrolling."""
        self._emit("mouse_scroll", mx, my, delta)