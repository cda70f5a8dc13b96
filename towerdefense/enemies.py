"""The enemy kinds that appear on the battlefield."""

from __future__ import annotations

import math
from typing import Any

from .enemy import Battlefield, Enemy
from .point import Point
from .sprite import Sprite


class SoldierEnemy(Enemy):
    """Slow, fragile foot soldier."""

    def __init__(self, x: int, y: int, field: Battlefield) -> None:
        super().__init__("play/enemy-1.png", x, y, 10, 50, 5, 5, field)


class PlaneEnemy(Enemy):
    """Fast flyer with a wide collision circle."""

    def __init__(self, x: int, y: int, field: Battlefield) -> None:
        super().__init__("play/enemy-2.png", x, y, 16, 100, 10, 10, field)


class TankEnemy(Enemy):
    """Slow, tough tank whose turret head turns about at random."""

    def __init__(self, x: int, y: int, field: Battlefield) -> None:
        super().__init__("play/enemy-3.png", x, y, 20, 20, 100, 50, field)
        self.head = Sprite("play/enemy-3-head.png", x, y)
        self.target_rotation = 0.0

    def draw(self, surface: Any) -> None:
        super().draw(surface)
        self.head.draw(surface)

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        self.head.position = Point(self.position.x, self.position.y)
        rng = self.field.rng
        if rng.uniform(0.0, 4.0) < delta_time:
            self.target_rotation = rng.uniform(-math.pi, math.pi)
        self.head.rotation = (self.head.rotation + delta_time * self.target_rotation) / (1 + delta_time)


class Enemy4(Enemy):
    """Enemy that turns invisible and visible again every two seconds."""

    def __init__(self, x: int, y: int, field: Battlefield) -> None:
        super().__init__("play/enemy-4.png", x, y, 10, 50, 20, 20, field)
        self.invisible_time = 0.0
        self.is_visible = True

    def update(self, delta_time: float) -> None:
        self.invisible_time += delta_time
        if self.invisible_time >= 2.0:
            self.invisible_time = 0.0
            self.is_visible = not self.is_visible
        self.set_alpha(255 if self.is_visible else 0)
        super().update(delta_time)


class Enemy5(Enemy):
    def __init__(self, x: int, y: int, field: Battlefield) -> None:
        super().__init__("play/enemy-5.png", x, y, 10, 50, 30, 30, field)


class Enemy6(Enemy):
    def __init__(self, x: int, y: int, field: Battlefield) -> None:
        super().__init__("play/enemy-6.png", x, y, 10, 50, 40, 40, field)


class Enemy7(Enemy):
    def __init__(self, x: int, y: int, field: Battlefield) -> None:
        super().__init__("play/enemy-7.png", x, y, 10, 50, 150, 150, field)


class Enemy8(Enemy):
    def __init__(self, x: int, y: int, field: Battlefield) -> None:
        super().__init__("play/enemy-8.png", x, y, 10, 50, 90, 90, field)


class Enemy9(Enemy):
    def __init__(self, x: int, y: int, field: Battlefield) -> None:
        super().__init__("play/enemy-9.png", x, y, 10, 50, 55, 55, field)


class Enemy10(Enemy):
    def __init__(self, x: int, y: int, field: Battlefield) -> None:
        super().__init__("play/enemy-10.png", x, y, 10, 50, 55, 55, field)


class Enemy11(Enemy):
    def __init__(self, x: int, y: int, field: Battlefield) -> None:
        super().__init__("play/enemy-11.png", x, y, 10, 50, 80, 80, field)