import math
import random

import pygame
import pytest

from towerdefense.enemies import (
    Enemy4,
    Enemy5,
    Enemy6,
    Enemy7,
    Enemy8,
    Enemy9,
    Enemy10,
    Enemy11,
    PlaneEnemy,
    SoldierEnemy,
    TankEnemy,
)
from towerdefense.enemy import Battlefield
from towerdefense.point import Point


def make_field():
    return Battlefield(20, 1, 64, Point(19, 0), rng=random.Random(3))


@pytest.mark.parametrize(
    "cls, image, radius, speed, hp, money",
    [
        (SoldierEnemy, "play/enemy-1.png", 10, 50, 5, 5),
        (PlaneEnemy, "play/enemy-2.png", 16, 100, 10, 10),
        (TankEnemy, "play/enemy-3.png", 20, 20, 100, 50),
        (Enemy4, "play/enemy-4.png", 10, 50, 20, 20),
        (Enemy5, "play/enemy-5.png", 10, 50, 30, 30),
        (Enemy6, "play/enemy-6.png", 10, 50, 40, 40),
        (Enemy7, "play/enemy-7.png", 10, 50, 150, 150),
        (Enemy8, "play/enemy-8.png", 10, 50, 90, 90),
        (Enemy9, "play/enemy-9.png", 10, 50, 55, 55),
        (Enemy10, "play/enemy-10.png", 10, 50, 55, 55),
        (Enemy11, "play/enemy-11.png", 10, 50, 80, 80),
    ],
)
def test_enemy_stats(cls, image, radius, speed, hp, money):
    enemy = cls(32, 32, make_field())
    assert enemy.image_path == image
    assert enemy.collision_radius == radius
    assert enemy.speed == speed
    assert enemy.hp == hp
    assert enemy.money == money
    assert enemy.position == Point(32, 32)


def test_enemy4_toggles_visibility_every_two_seconds():
    enemy = Enemy4(32, 32, make_field())
    enemy.path = [Point(19, 0)]
    enemy.update(1.0)
    assert enemy.alpha == 255 and enemy.is_visible
    enemy.update(1.0)
    assert enemy.alpha == 0 and not enemy.is_visible
    assert enemy.invisible_time == 0
    enemy.update(2.0)
    assert enemy.alpha == 255 and enemy.is_visible


def test_enemy4_still_walks():
    enemy = Enemy4(32, 32, make_field())
    enemy.path = [Point(19, 0)]
    enemy.update(1.0)
    assert enemy.position.x == pytest.approx(32 + 50 * 1.0)


def test_tank_head_follows_body():
    enemy = TankEnemy(32, 32, make_field())
    enemy.path = [Point(19, 0)]
    for _ in range(10):
        enemy.update(0.5)
        assert enemy.head.position == enemy.position
        assert abs(enemy.head.rotation) <= math.pi


def test_tank_head_turns_toward_new_target():
    enemy = TankEnemy(32, 32, make_field())
    enemy.path = [Point(19, 0)]
    enemy.update(5.0)
    target = enemy.target_rotation
    assert -math.pi <= target <= math.pi
    low, high = sorted((0.0, target))
    assert low <= enemy.head.rotation <= high
    assert abs(enemy.head.rotation) < abs(target) or target == 0


def test_tank_draws_head_over_body():
    enemy = TankEnemy(20, 20, make_field())
    enemy.bitmap = pygame.Surface((4, 4), pygame.SRCALPHA)
    head = pygame.Surface((4, 4))
    head.fill((0, 255, 0))
    enemy.head.bitmap = head
    surface = pygame.Surface((40, 40))
    enemy.draw(surface)
    assert tuple(surface.get_at((20, 20)))[:3] == (0, 255, 0)
    assert tuple(surface.get_at((2, 2)))[:3] == (0, 0, 0)


def test_tank_lethal_hit_pays_fifty():
    field = make_field()
    enemy = TankEnemy(32, 32, field)
    field.enemy_group.add_object(enemy)
    enemy.hit(100)
    assert field.money == 50
    assert field.score == 5
    assert field.enemy_group.objects() == []