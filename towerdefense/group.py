"""A container that forwards updates, drawing and input events to its children."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, TypeVar

from .objects import Control, GameObject

_T = TypeVar("_T")


def _index_of(items: list[_T], item: _T, kind: str) -> int:
    for index, candidate in enumerate(items):
        if candidate is item:
            return index
    raise ValueError(f"The {kind} is not in this group.")


def _contains(items: list[Any], item: Any) -> bool:
    return any(candidate is item for candidate in items)


def _live(items: list[_T]) -> Iterator[_T]:
    """Walk a snapshot, skipping entries removed while walking."""
    for item in list(items):
        if _contains(items, item):
            yield item


class Group(GameObject, Control):
    """An object and control that holds other objects and controls in order."""

    def __init__(self) -> None:
        super().__init__()
        self._objects: list[GameObject] = []
        self._controls: list[Control] = []

    def clear(self) -> None:
        """Remove all objects and controls."""
        self._objects.clear()
        self._controls.clear()

    def update(self, delta_time: float) -> None:
        """Update every visible object."""
        for obj in _live(self._objects):
            if obj.visible:
                obj.update(delta_time)

    def draw(self, surface: Any) -> None:
        """Draw every visible object in order."""
        for obj in self._objects:
            if obj.visible:
                obj.draw(surface)

    def on_key_down(self, key_code: int) -> None:
        for ctrl in _live(self._controls):
            ctrl.on_key_down(key_code)

    def on_key_up(self, key_code: int) -> None:
        for ctrl in _live(self._controls):
            ctrl.on_key_up(key_code)

    def on_mouse_down(self, button: int, mx: int, my: int) -> None:
        for ctrl in _live(self._controls):
            ctrl.on_mouse_down(button, mx, my)

    def on_mouse_up(self, button: int, mx: int, my: int) -> None:
        for ctrl in _live(self._controls):
            ctrl.on_mouse_up(button, mx, my)

    def on_mouse_move(self, mx: int, my: int) -> None:
        for ctrl in _live(self._controls):
            ctrl.on_mouse_move(mx, my)

    def on_mouse_scroll(self, mx: int, my: int, delta: int) -> None:
        for ctrl in _live(self._controls):
            ctrl.on_mouse_scroll(mx, my, delta)

    def add_object(self, obj: GameObject) -> None:
        """Append an object."""
        self._objects.append(obj)

    def insert_object(self, obj: GameObject, before: GameObject | None) -> None:
        """Insert an object just before another one, or at the end when before is None."""
        if before is None:
            self._objects.append(obj)
            return
        self._objects.insert(_index_of(self._objects, before, "object"), obj)

    def add_control(self, ctrl: Control) -> None:
        """Append a control."""
        self._controls.append(ctrl)

    def add_control_object(self, ctrl: Control) -> None:
        """Append something that is both an object and a control."""
        if not isinstance(ctrl, GameObject) or not isinstance(ctrl, Control):
            raise ValueError("The control must inherit both GameObject and Control.")
        self._objects.append(ctrl)
        self._controls.append(ctrl)

    def remove_object(self, obj: GameObject) -> None:
        """Remove an object; raise ValueError if it is not in the group."""
        del self._objects[_index_of(self._objects, obj, "object")]

    def remove_control(self, ctrl: Control) -> None:
        """Remove a control; raise ValueError if it is not in the group."""
        del self._controls[_index_of(self._controls, ctrl, "control")]

    def remove_control_object(self, ctrl: Control) -> None:
        """Remove something added as both a control and an object."""
        self.remove_control(ctrl)
        self.remove_object(ctrl)  # type: ignore[arg-type]

    def objects(self) -> list[GameObject]:
        """Return the objects in order."""
        return list(self._objects)

    def controls(self) -> list[Control]:
        """Return the controls in order."""
        return list(self._controls)