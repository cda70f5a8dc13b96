"""Images that move, rotate, take a tint and have a collision radius."""

from __future__ import annotations

import math
from typing import Any

import pygame

from .objects import GameObject
from .point import Point
from .resources import get_instance

_WHITE = (255, 255, 255, 255)


class Sprite(GameObject):
    """An image drawn around its anchor with rotation, tint and velocity."""

    def __init__(
        self,
        img: str,
        x: float,
        y: float,
        w: float = 0.0,
        h: float = 0.0,
        anchor_x: float = 0.5,
        anchor_y: float = 0.5,
        rotation: float = 0.0,
        vx: float = 0.0,
        vy: float = 0.0,
        tint: tuple[int, int, int, int] = _WHITE,
    ) -> None:
        super().__init__(x, y, w, h, anchor_x, anchor_y)
        self.image_path = img
        self.rotation = rotation
        self.velocity = Point(vx, vy)
        self.tint = tuple(tint)
        self.collision_radius = 0.0
        self._bitmap: pygame.Surface | None = None

    @property
    def bitmap(self) -> pygame.Surface:
        """The image, loaded from the shared resource cache on first use."""
        if self._bitmap is None:
            self.bitmap = get_instance().get_bitmap(self.image_path)
        return self._bitmap  # type: ignore[return-value]

    @bitmap.setter
    def bitmap(self, surface: pygame.Surface) -> None:
        self._bitmap = surface
        width, height = surface.get_size()
        if self.size.x == 0:
            self.size.x = float(width)
        if self.size.y == 0:
            self.size.y = float(height)

    def _prepared_image(self) -> pygame.Surface | None:
        bitmap = self.bitmap
        width, height = round(abs(self.size.x)), round(abs(self.size.y))
        if width == 0 or height == 0 or 0 in bitmap.get_size():
            return None
        image = bitmap
        if (width, height) != bitmap.get_size():
            try:
                image = pygame.transform.smoothscale(bitmap, (width, height))
            except ValueError:
                image = pygame.transform.scale(bitmap, (width, height))
        if self.size.x < 0 or self.size.y < 0:
            image = pygame.transform.flip(image, self.size.x < 0, self.size.y < 0)
        if self.tint != _WHITE:
            image = image.copy()
            image.fill(self.tint, special_flags=pygame.BLEND_RGBA_MULT)
        return image

    def draw(self, surface: Any) -> None:
        """Draw the image so that its anchor lands on the position."""
        image = self._prepared_image()
        if image is None:
            return
        width, height = image.get_size()
        offset_x = self.anchor.x * width - width / 2
        offset_y = self.anchor.y * height - height / 2
        if self.rotation:
            image = pygame.transform.rotate(image, -math.degrees(self.rotation))
        cos_r, sin_r = math.cos(self.rotation), math.sin(self.rotation)
        rotated_x = offset_x * cos_r - offset_y * sin_r
        rotated_y = offset_x * sin_r + offset_y * cos_r
        rect = image.get_rect(center=(self.position.x - rotated_x, self.position.y - rotated_y))
        surface.blit(image, rect)

    def update(self, delta_time: float) -> None:
        """Move by velocity times the elapsed time."""
        self.position.x += self.velocity.x * delta_time
        self.position.y += self.velocity.y * delta_time