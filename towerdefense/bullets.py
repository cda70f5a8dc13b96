"""The straight-flying bullet kinds and the marks they leave."""

from __future__ import annotations

import math
from typing import Any

from .bullet import Bullet
from .enemy import Battlefield, Enemy
from .point import Point


def _leave_dirt(bullet: Bullet, enemy: Enemy, image: str, low: int, high: int) -> None:
    rng = bullet.field.rng
    bullet.field.add_ground_effect(image, rng.randint(low, high), enemy.position)


class FireBullet(Bullet):
    """Fast bullet with light damage."""

    def __init__(self, position: Point, forward_direction: Point, rotation: float,
                 parent: Any, field: Battlefield) -> None:
        super().__init__("play/bullet-1.png", 500, 1, position, forward_direction,
                         rotation - math.pi / 2, parent, field)

    def on_explode(self, enemy: Enemy) -> None:
        _leave_dirt(self, enemy, "play/dirty-1.png", 2, 5)


class LaserBullet(Bullet):
    """Very fast laser shot."""

    def __init__(self, position: Point, forward_direction: Point, rotation: float,
                 parent: Any, field: Battlefield) -> None:
        super().__init__("play/bullet-2.png", 800, 2, position, forward_direction,
                         rotation - math.pi / 2, parent, field)

    def on_explode(self, enemy: Enemy) -> None:
        _leave_dirt(self, enemy, "play/dirty-2.png", 2, 10)


class Bullet5(Bullet):
    def __init__(self, position: Point, forward_direction: Point, rotation: float,
                 parent: Any, field: Battlefield) -> None:
        super().__init__("play/bullet-5.png", 500, 30, position, forward_direction,
                         rotation - math.pi / 2, parent, field)

    def on_explode(self, enemy: Enemy) -> None:
        _leave_dirt(self, enemy, "play/dirty-2.png", 2, 5)


class Bullet6(Bullet):
    def __init__(self, position: Point, forward_direction: Point, rotation: float,
                 parent: Any, field: Battlefield) -> None:
        super().__init__("play/bullet-6.png", 1000, 15, position, forward_direction,
                         rotation - math.pi / 2, parent, field)

    def on_explode(self, enemy: Enemy) -> None:
        _leave_dirt(self, enemy, "play/dirty-1.png", 2, 5)


class Bullet7(Bullet):
    def __init__(self, position: Point, forward_direction: Point, rotation: float,
                 parent: Any, field: Battlefield) -> None:
        super().__init__("play/bullet-7.png", 100, 500, position, forward_direction,
                         rotation - math.pi / 2, parent, field)

    def on_explode(self, enemy: Enemy) -> None:
        _leave_dirt(self, enemy, "play/dirty-2.png", 2, 10)


class Bullet8(Bullet):
    def __init__(self, position: Point, forward_direction: Point, rotation: float,
                 parent: Any, field: Battlefield) -> None:
        super().__init__("play/bullet-8.png", 1000, 1000, position, forward_direction,
                         rotation - math.pi / 2, parent, field)

    def on_explode(self, enemy: Enemy) -> None:
        _leave_dirt(self, enemy, "play/dirty-2.png", 2, 10)


class Bullet9(Bullet):
    def __init__(self, position: Point, forward_direction: Point, rotation: float,
                 parent: Any, field: Battlefield) -> None:
        super().__init__("play/bullet-9.png", 1000, 1000, position, forward_direction,
                         rotation - math.pi / 2, parent, field)

    def on_explode(self, enemy: Enemy) -> None:
        _leave_dirt(self, enemy, "play/dirty-2.png", 2, 10)


class Bullet10(Bullet):
    def __init__(self, position: Point, forward_direction: Point, rotation: float,
                 parent: Any, field: Battlefield) -> None:
        super().__init__("play/bullet-10.png", 1000, 5, position, forward_direction,
                         rotation - math.pi / 2, parent, field)

    def on_explode(self, enemy: Enemy) -> None:
        _leave_dirt(self, enemy, "play/dirty-3.png", 2, 10)