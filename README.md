# towerdefense

The building blocks of a tower defense game, built on pygame.

| Module | What it holds |
| --- | --- |
| `towerdefense.point` | `Point`, a 2D vector. It supports `+`, `-`, scaling by a number, `/`, `normalize()`, `dot()`, `magnitude()` and `magnitude_squared()`. |
| `towerdefense.collider` | `is_point_in_rect`, `is_point_in_bitmap`, `is_rect_overlap` and `is_circle_overlap`. |
| `towerdefense.log` | `LogType`, `set_config()` and `log()`. |
| `towerdefense.errors` | `EngineError`, raised when pygame fails to set up or to load something. |
| `towerdefense.objects` | `GameObject`, for things that are positioned, updated and drawn, and `Control`, for things that receive key and mouse events. Both accept listeners through `bind(event, callback)`. |
| `towerdefense.group` | `Group`, which holds objects and controls in order and passes updates, drawing and events on to them. |
| `towerdefense.scene` | `Scene`, an abstract `Group` with `initialize()` and `terminate()`. It clears the surface to black before it draws. |
| `towerdefense.sprite` | `Sprite`, an image with position, anchor, velocity, rotation, tint and a collision radius. |
| `towerdefense.resources` | `Resources`, which loads and caches images, fonts and sounds, and `get_instance()`, which returns the shared cache. |
| `towerdefense.audio` | `AudioHelper`, which plays sound effects, looping background music and controllable sample instances. |
| `towerdefense.engine` | `GameEngine` and `get_instance()`, covering the window, the event loop and scene switching. |
| `towerdefense.enemy` | `Battlefield` and `Enemy`. |
| `towerdefense.enemies` | The enemy kinds: `SoldierEnemy`, `PlaneEnemy`, `TankEnemy` and `Enemy4` to `Enemy11`. |
| `towerdefense.bullet` | `Bullet`, plus the homing `MissileBullet` and `Bullet4`. |
| `towerdefense.bullets` | The straight-flying kinds: `FireBullet`, `LaserBullet` and `Bullet5` to `Bullet10`. |

Install with `pip install .`, or with `pip install .[test]` to also get pytest.

## Vectors and collisions

```python
from towerdefense.point import Point
from towerdefense import collider

a = Point(3, 4)
print(a.magnitude())          # 5.0
print(a.normalize())          # Point(x=0.6, y=0.8)
print(2 * a + Point(1, 1))    # Point(x=7, y=9)

print(collider.is_circle_overlap(Point(0, 0), 4, Point(6, 0), 3))                    # True
print(collider.is_rect_overlap(Point(0, 0), Point(2, 2), Point(1, 1), Point(3, 3)))  # True
```

## Enemies, bullets and the battlefield

A `Battlefield` describes the playing field:

- the size of the grid;
- the size of a block in pixels;
- the end cell.

It also keeps track of what happens during play:

- an `enemy_group` and a `bullet_group`;
- the money, score and base hits earned so far;
- the explosions, ground marks (`GroundEffect`) and sound names that were produced.

It takes an optional `random.Random`, which makes the outcome reproducible.

`Enemy.update_path()` takes a grid of distances to the end cell and picks one of the shortest routes. `update()` then moves the enemy along that route. When the enemy reaches the end, it is destroyed and the battlefield counts a hit. Bullets move on each `update()`. A bullet that overlaps a visible enemy damages it and is removed. A bullet that leaves the field is also removed. `MissileBullet` and `Bullet4` lock onto the nearest enemy and turn toward it.

```python
import random

from towerdefense.bullets import FireBullet
from towerdefense.enemies import SoldierEnemy
from towerdefense.enemy import Battlefield
from towerdefense.point import Point

field = Battlefield(3, 1, 64, Point(2, 0), rng=random.Random(1))
enemy = SoldierEnemy(32, 32, field)
field.enemy_group.add_object(enemy)
enemy.update_path([[2, 1, 0]])

bullet = FireBullet(Point(32, 32), Point(1, 0), 0.0, None, field)
field.bullet_group.add_object(bullet)
bullet.update(0.01)
print(enemy.hp)                   # 4
print(field.bullet_group.objects())  # []
```

## Scenes and the engine

```python
from towerdefense.engine import get_instance
from towerdefense.scene import Scene


class TitleScene(Scene):
    def initialize(self):
        ...  # add sprites and controls here


engine = get_instance()
engine.add_new_scene("title", TitleScene())
engine.start("title", icon=None)
```

`start()` opens the window and blocks until the window is closed. `change_scene(name)` switches scenes at the next update. Each frame's time is capped at `delta_time_threshold` (0.05 s by default), so that fast bullets do not skip past their targets. By default `start()` loads `icon.png` as the window icon. Pass `icon=None` to skip the icon.

## Resources and audio

`Resources(root)` loads files from three folders under `root`:

- images from `images/`;
- fonts from `fonts/`;
- sounds from `audios/`.

The shared instance from `resources.get_instance()` uses `Resource/` as its root. Each file is loaded once and then cached. `release_unused()` drops cached entries that nothing else refers to. A file that fails to load raises `EngineError`.

`AudioHelper` provides:

- `play_audio()`, which plays a sound once;
- `play_bgm()`, which plays a sound in a loop;
- `play_sample()`, which returns an instance whose volume and start position can be changed, and which can be stopped.

## Logging

```python
from towerdefense.log import LogType, log, set_config

set_config(True, False, "log.txt")
log(LogType.INFO, "Game begin")
```

Each line is labelled, for example `[INFO] Game begin`. Lines go to the console and to the log file. Verbose lines are written only when verbose logging is on. Nothing is written until logging is enabled.

## What is not included

This package is a library, not a finished game. It has no command to run, no title screen, no play scene and no map files. It also has no turrets and no user interface.

Drawing of explosions and ground marks is not included either. `Battlefield` only records them, and drawing them is left to the program that uses it.