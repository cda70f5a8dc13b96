import pygame
import pytest

from towerdefense.engine import GameEngine, get_instance
from towerdefense.point import Point
from towerdefense.scene import Scene


class RecordingScene(Scene):
    def __init__(self, name, calls, quit_on_init=False):
        super().__init__()
        self.name = name
        self.calls = calls
        self.quit_on_init = quit_on_init
        self.deltas = []

    def initialize(self):
        self.calls.append((self.name, "initialize"))
        if self.quit_on_init:
            pygame.event.post(pygame.event.Event(pygame.QUIT))

    def terminate(self):
        self.calls.append((self.name, "terminate"))
        super().terminate()

    def update(self, delta_time):
        self.calls.append((self.name, "update"))
        self.deltas.append(delta_time)

    def draw(self, surface):
        self.calls.append((self.name, "draw"))
        super().draw(surface)


def test_get_instance_is_shared():
    first = get_instance()
    assert type(first) is GameEngine
    assert get_instance() is first


def test_add_and_get_scene():
    engine = GameEngine()
    scene = RecordingScene("a", [])
    engine.add_new_scene("a", scene)
    assert engine.get_scene("a") is scene


def test_duplicate_scene_rejected():
    engine = GameEngine()
    engine.add_new_scene("a", RecordingScene("a", []))
    with pytest.raises(ValueError):
        engine.add_new_scene("a", RecordingScene("a", []))


def test_unknown_scene_lookup_rejected():
    engine = GameEngine()
    with pytest.raises(ValueError):
        engine.get_scene("missing")


def test_change_scene_happens_on_update():
    calls = []
    engine = GameEngine()
    a = RecordingScene("a", calls)
    b = RecordingScene("b", calls)
    engine.add_new_scene("a", a)
    engine.add_new_scene("b", b)
    engine.change_scene("a")
    assert calls == []
    engine.update(0.01)
    assert engine.active_scene is a
    engine.change_scene("b")
    engine.update(0.01)
    assert engine.active_scene is b
    assert calls == [
        ("a", "initialize"),
        ("a", "update"),
        ("a", "terminate"),
        ("b", "initialize"),
        ("b", "update"),
    ]


def test_change_to_unknown_scene_raises_on_update():
    engine = GameEngine()
    engine.change_scene("missing")
    with pytest.raises(ValueError):
        engine.update(0.01)


def test_delta_time_is_clamped_to_threshold():
    engine = GameEngine()
    scene = RecordingScene("a", [])
    engine.add_new_scene("a", scene)
    engine.change_scene("a")
    engine.update(1.0)
    engine.update(0.01)
    assert scene.deltas == [0.05, 0.01]


def test_default_screen_size():
    assert GameEngine().screen_size() == Point(800, 600)


def test_start_with_unknown_scene_raises():
    engine = GameEngine()
    with pytest.raises(ValueError):
        engine.start("missing", icon=None)


def test_start_runs_until_quit(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    calls = []
    engine = GameEngine()
    engine.add_new_scene("main", RecordingScene("main", calls, quit_on_init=True))
    engine.start("main", screen_w=320, screen_h=240, reserve_samples=8, icon=None)
    assert calls == [("main", "initialize"), ("main", "draw"), ("main", "terminate")]
    assert engine.screen_size() == Point(320, 240)
    with pytest.raises(ValueError):
        engine.get_scene("main")