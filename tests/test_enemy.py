import random
from types import SimpleNamespace

import pygame
import pytest

from towerdefense.enemy import Battlefield, Enemy
from towerdefense.point import Point


def make_field(width=4, height=1, debug=False):
    return Battlefield(width, height, 64, Point(width - 1, 0), debug_mode=debug, rng=random.Random(7))


def make_enemy(field, x=32, y=32, hp=10, money=30, speed=50):
    return Enemy("play/enemy-1.png", x, y, 10, speed, hp, money, field)


def test_construction_sets_stats():
    field = make_field()
    enemy = make_enemy(field)
    assert enemy.collision_radius == 10
    assert enemy.hp == 10
    assert enemy.position == Point(32, 32)
    assert enemy.reach_end_time == 0


def test_non_lethal_hit_keeps_enemy():
    field = make_field()
    enemy = make_enemy(field)
    field.enemy_group.add_object(enemy)
    enemy.hit(4)
    assert enemy.hp == 6
    assert field.enemy_group.objects() == [enemy]
    assert field.money == 0


def test_lethal_hit_pays_out_and_cleans_up():
    field = make_field()
    enemy = make_enemy(field)
    field.enemy_group.add_object(enemy)
    turret = SimpleNamespace(target=enemy)
    bullet = SimpleNamespace(target=enemy)
    enemy.locked_turrets.append(turret)
    enemy.locked_bullets.append(bullet)
    enemy.hit(10)
    assert field.enemy_group.objects() == []
    assert turret.target is None and bullet.target is None
    assert field.money == 30
    assert field.score == 3
    assert field.sounds == ["explosion.wav"]
    assert field.explosions == [Point(32, 32)]
    assert len(field.ground_effects) == 10
    for effect in field.ground_effects:
        assert effect.image in {"play/dirty-1.png", "play/dirty-2.png", "play/dirty-3.png"}
        assert 1 <= effect.duration <= 20
        assert effect.position == Point(32, 32)


def test_update_path_follows_corridor():
    field = make_field()
    enemy = make_enemy(field)
    enemy.update_path([[3, 2, 1, 0]])
    assert enemy.path == [Point(3, 0), Point(3, 0), Point(2, 0), Point(1, 0)]


def test_update_path_unreachable_cell_gives_end_only():
    field = make_field()
    enemy = make_enemy(field)
    enemy.update_path([[-1, 2, 1, 0]])
    assert enemy.path == [Point(3, 0)]


def test_update_path_clamps_outside_position():
    field = make_field()
    enemy = make_enemy(field, x=1000, y=-50)
    enemy.update_path([[3, 2, 1, 0]])
    assert enemy.path == [Point(3, 0)]


def test_update_path_dead_end_raises():
    field = make_field()
    enemy = make_enemy(field)
    with pytest.raises(ValueError):
        enemy.update_path([[3, 5, 5, 0]])


def test_update_moves_toward_target():
    field = make_field()
    enemy = make_enemy(field)
    enemy.path = [Point(1, 0)]
    enemy.update(0.1)
    assert enemy.position.x == pytest.approx(32 + 50 * 0.1)
    assert enemy.position.y == pytest.approx(32)
    assert enemy.rotation == pytest.approx(0)
    assert enemy.path == [Point(1, 0)]


def test_update_passes_waypoints_keeping_distance():
    field = make_field()
    enemy = make_enemy(field)
    enemy.path = [Point(2, 0), Point(1, 0)]
    enemy.update(2.0)
    assert enemy.path == [Point(2, 0)]
    assert enemy.position.x == pytest.approx(32 + 50 * 2.0)
    assert enemy.reach_end_time >= 0


def test_reaching_end_hits_base():
    field = make_field()
    enemy = make_enemy(field)
    field.enemy_group.add_object(enemy)
    enemy.update(0.1)
    assert field.hits == 1
    assert field.enemy_group.objects() == []
    assert enemy.reach_end_time == 0
    assert field.money == 30


def test_set_alpha():
    enemy = make_enemy(make_field())
    enemy.set_alpha(0)
    assert enemy.alpha == 0


def _has_red(surface):
    width, height = surface.get_size()
    return any(
        tuple(surface.get_at((x, y)))[:3] == (255, 0, 0)
        for x in range(width)
        for y in range(height)
    )


@pytest.mark.parametrize("debug", [True, False])
def test_draw_shows_collision_circle_only_in_debug(debug):
    field = make_field(debug=debug)
    enemy = make_enemy(field, x=20, y=20)
    enemy.bitmap = pygame.Surface((4, 4), pygame.SRCALPHA)
    surface = pygame.Surface((40, 40))
    enemy.draw(surface)
    assert _has_red(surface) is debug


def test_client_size_covers_grid():
    field = make_field(width=4, height=1)
    assert field.client_size == Point(4 * 64, 64)