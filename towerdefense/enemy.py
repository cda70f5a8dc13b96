"""Enemies that walk the battlefield toward the end point."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Any

import pygame

from .group import Group
from .log import LogType, log
from .point import Point
from .sprite import Sprite

DIRECTIONS: tuple[Point, ...] = (Point(-1, 0), Point(0, -1), Point(1, 0), Point(0, 1))


@dataclass(frozen=True)
class GroundEffect:
    """A mark left on the ground, shown for a number of seconds."""

    image: str
    duration: int
    position: Point


class Battlefield:
    """The grid the enemies cross, and the tally they report to."""

    def __init__(
        self,
        map_width: int,
        map_height: int,
        block_size: int,
        end_grid_point: Point,
        *,
        directions: tuple[Point, ...] = DIRECTIONS,
        debug_mode: bool = False,
        audio: Any = None,
        rng: random.Random | None = None,
    ) -> None:
        self.map_width = map_width
        self.map_height = map_height
        self.block_size = block_size
        self.end_grid_point = end_grid_point
        self.directions = directions
        self.debug_mode = debug_mode
        self.audio = audio
        self.rng = rng if rng is not None else random.Random()
        self.enemy_group = Group()
        self.bullet_group = Group()
        self.explosions: list[Point] = []
        self.ground_effects: list[GroundEffect] = []
        self.sounds: list[str] = []
        self.money = 0
        self.score = 0
        self.hits = 0

    @property
    def client_size(self) -> Point:
        """Size of the playable area in pixels."""
        return Point(self.map_width * self.block_size, self.map_height * self.block_size)

    def earn_money(self, amount: int) -> None:
        self.money += amount

    def earn_score(self, amount: int) -> None:
        self.score += amount

    def hit(self) -> None:
        """Record an enemy reaching the end point."""
        self.hits += 1

    def add_explosion(self, position: Point) -> None:
        self.explosions.append(Point(position.x, position.y))

    def add_ground_effect(self, image: str, duration: int, position: Point) -> None:
        self.ground_effects.append(GroundEffect(image, duration, Point(position.x, position.y)))

    def play_audio(self, name: str) -> None:
        """Play a sound effect through the attached audio helper, if any."""
        self.sounds.append(name)
        if self.audio is not None:
            self.audio.play_audio(name)


class Enemy(Sprite):
    """A sprite with hit points that follows a path of grid cells."""

    def __init__(
        self,
        img: str,
        x: float,
        y: float,
        radius: float,
        speed: float,
        hp: float,
        money: int,
        field: Battlefield,
    ) -> None:
        super().__init__(img, x, y)
        self.field = field
        self.speed = speed
        self.hp = hp
        self.money = money
        self.collision_radius = radius
        self.reach_end_time = 0.0
        self.path: list[Point] = []
        self.locked_turrets: list[Any] = []
        self.locked_bullets: list[Any] = []
        self.alpha = 255

    def on_explode(self) -> None:
        """Leave an explosion and ten random dirt marks behind."""
        field = self.field
        field.add_explosion(self.position)
        for _ in range(10):
            image = f"play/dirty-{field.rng.randint(1, 3)}.png"
            field.add_ground_effect(image, field.rng.randint(1, 20), self.position)

    def hit(self, damage: float) -> None:
        """Take damage; at zero hit points explode, pay out and leave the field."""
        self.hp -= damage
        if self.hp > 0:
            return
        self.on_explode()
        for turret in self.locked_turrets:
            turret.target = None
        for bullet in self.locked_bullets:
            bullet.target = None
        self.field.earn_money(self.money)
        self.field.earn_score(self.money // 10)
        self.field.enemy_group.remove_object(self)
        self.field.play_audio("explosion.wav")

    def update_path(self, map_distance: list[list[int]]) -> None:
        """Choose a shortest route to the end from a grid of distances to it."""
        field = self.field
        x = int(math.floor(self.position.x / field.block_size))
        y = int(math.floor(self.position.y / field.block_size))
        x = min(max(x, 0), field.map_width - 1)
        y = min(max(y, 0), field.map_height - 1)
        pos = Point(x, y)
        num = map_distance[y][x]
        if num == -1:
            num = 0
            log(LogType.ERROR, "Enemy path finding error")
        path = [Point() for _ in range(num + 1)]
        while num != 0:
            next_hops = []
            for direction in field.directions:
                nx = int(pos.x + direction.x)
                ny = int(pos.y + direction.y)
                if 0 <= nx < field.map_width and 0 <= ny < field.map_height \
                        and map_distance[ny][nx] == num - 1:
                    next_hops.append(Point(nx, ny))
            if not next_hops:
                raise ValueError("No neighbouring cell leads closer to the end point.")
            pos = field.rng.choice(next_hops)
            path[num] = pos
            num -= 1
        path[0] = field.end_grid_point
        self.path = path

    def update(self, delta_time: float) -> None:
        """Walk speed * delta_time pixels along the path; hit the base at its end."""
        block = self.field.block_size
        remain = self.speed * delta_time
        while remain != 0:
            if not self.path:
                self.hit(self.hp)
                self.field.hit()
                self.reach_end_time = 0.0
                return
            target = self.path[-1] * block + Point(block // 2, block // 2)
            vec = target - self.position
            distance = vec.magnitude()
            self.reach_end_time = (distance + (len(self.path) - 1) * block - remain) / self.speed
            if remain - distance > 0:
                self.position = target
                self.path.pop()
                remain -= distance
            else:
                self.velocity = vec.normalize() * remain / delta_time
                remain = 0
        self.rotation = math.atan2(self.velocity.y, self.velocity.x)
        super().update(delta_time)

    def draw(self, surface: Any) -> None:
        """Draw the sprite, plus its collision circle in debug mode."""
        super().draw(surface)
        if self.field.debug_mode:
            pygame.draw.circle(
                surface, (255, 0, 0), (self.position.x, self.position.y), self.collision_radius, 2
            )

    def set_alpha(self, alpha: int) -> None:
        self.alpha = alpha