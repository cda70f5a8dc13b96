"""Base class for game scenes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .group import Group


class Scene(Group, ABC):
    """A group that is set up when entered and torn down when left."""

    @abstractmethod
    def initialize(self) -> None:
        """Set up the scene's contents."""

    def terminate(self) -> None:
        """Tear down the scene by removing everything in it."""
        self.clear()

    def draw(self, surface: Any) -> None:
        """Clear the surface to black, then draw the scene's objects."""
        surface.fill((0, 0, 0))
        super().draw(surface)