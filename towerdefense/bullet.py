"""Projectiles fired by turrets, including the homing kinds."""

from __future__ import annotations

import math
from typing import Any

from .collider import is_circle_overlap, is_rect_overlap
from .enemy import Battlefield, Enemy
from .point import Point
from .sprite import Sprite


class Bullet(Sprite):
    """A sprite that flies straight and damages the first visible enemy it touches."""

    def __init__(
        self,
        img: str,
        speed: float,
        damage: float,
        position: Point,
        forward_direction: Point,
        rotation: float,
        parent: Any,
        field: Battlefield,
    ) -> None:
        super().__init__(img, position.x, position.y)
        self.speed = speed
        self.damage = damage
        self.parent = parent
        self.field = field
        self.target: Enemy | None = None
        self.velocity = forward_direction.normalize() * speed
        self.rotation = rotation
        self.collision_radius = 4.0

    def on_explode(self, enemy: Enemy) -> None:
        """React to hitting an enemy; a plain bullet leaves nothing behind."""

    def update(self, delta_time: float) -> None:
        """Move, then hit an overlapping enemy or vanish once out of the field."""
        super().update(delta_time)
        for enemy in self.field.enemy_group.objects():
            if not enemy.visible:
                continue
            if is_circle_overlap(
                self.position, self.collision_radius, enemy.position, enemy.collision_radius
            ):
                self.on_explode(enemy)
                enemy.hit(self.damage)
                self.field.bullet_group.remove_object(self)
                return
        half = self.size / 2
        if not is_rect_overlap(
            self.position - half, self.position + half, Point(0, 0), self.field.client_size
        ):
            self.field.bullet_group.remove_object(self)


class _HomingBullet(Bullet):
    """A bullet that locks onto the nearest enemy and turns toward it."""

    rotate_radian = 2 * math.pi

    def _acquire_target(self) -> bool:
        if self.target is not None:
            return True
        nearest = min(
            self.field.enemy_group.objects(),
            key=lambda enemy: (enemy.position - self.position).magnitude(),
            default=None,
        )
        if nearest is None:
            return False
        self.target = nearest
        nearest.locked_bullets.append(self)
        return True

    def _home(self, delta_time: float) -> None:
        if not self._acquire_target():
            return
        assert self.target is not None
        origin = self.velocity.normalize()
        toward = (self.target.position - self.position).normalize()
        max_rotate = self.rotate_radian * delta_time
        cos_theta = min(max(origin.dot(toward), -1.0), 1.0)
        radian = math.acos(cos_theta)
        if abs(radian) <= max_rotate:
            direction = toward
        else:
            direction = ((abs(radian) - max_rotate) * origin + max_rotate * toward) / radian
        self.velocity = self.speed * direction.normalize()
        self.rotation = math.atan2(self.velocity.y, self.velocity.x) + math.pi / 2

    def _release_and_crater(self, enemy: Enemy) -> None:
        if self.target is not None:
            locked = self.target.locked_bullets
            for index, bullet in enumerate(locked):
                if bullet is self:
                    del locked[index]
                    break
        rng = self.field.rng
        self.field.add_ground_effect("play/dirty-3.png", rng.randint(4, 10), enemy.position)


class MissileBullet(_HomingBullet):
    """Slow homing missile."""

    def __init__(
        self,
        position: Point,
        forward_direction: Point,
        rotation: float,
        parent: Any,
        field: Battlefield,
    ) -> None:
        super().__init__(
            "play/bullet-3.png", 100, 4, position, forward_direction,
            rotation + math.pi / 2, parent, field,
        )

    def update(self, delta_time: float) -> None:
        """Turn toward the locked enemy, then fly on."""
        self._home(delta_time)
        super().update(delta_time)

    def on_explode(self, enemy: Enemy) -> None:
        """Release the lock and leave a crater."""
        self._release_and_crater(enemy)


class Bullet4(_HomingBullet):
    """Homing bullet that wobbles around a small circle as it flies."""

    circle_radius = 4.0
    circle_period = 2.0

    def __init__(
        self,
        position: Point,
        forward_direction: Point,
        rotation: float,
        parent: Any,
        field: Battlefield,
    ) -> None:
        super().__init__(
            "play/bullet-4.png", 200, 10, position, forward_direction,
            rotation + math.pi / 2, parent, field,
        )
        self.time_since_last_circle = 0.0
        self.circling = False

    def update(self, delta_time: float) -> None:
        """Shift along the wobble circle, turn toward the target, then fly on."""
        self.time_since_last_circle += delta_time
        progress = self.time_since_last_circle / self.circle_period
        angle = progress * 2 * math.pi
        self.position = self.position + Point(
            self.circle_radius * math.cos(angle), self.circle_radius * math.sin(angle)
        )
        if progress >= 1.0:
            self.time_since_last_circle = 0.0
        self._home(delta_time)
        super().update(delta_time)

    def on_explode(self, enemy: Enemy) -> None:
        """Release the lock and leave a crater."""
        self._release_and_crater(enemy)