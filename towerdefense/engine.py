"""The game engine: window, event loop and scene management."""

from __future__ import annotations

import time
from typing import Any

import pygame

from .errors import EngineError
from .log import LogType, log
from .point import Point
from .resources import get_instance as get_resources
from .scene import Scene

_WHEEL_BUTTONS = frozenset({4, 5, 6, 7})


class GameEngine:
    """Owns the window, runs the event loop and delegates to the active scene."""

    score: int = 0

    def __init__(self) -> None:
        self.fps = 60
        self.screen_w = 800
        self.screen_h = 600
        self.reserve_samples = 1000
        self.title = "Tower Defense"
        self.icon: str | None = "icon.png"
        self.free_memory_on_scene_changed = False
        self.delta_time_threshold = 0.05
        self.active_scene: Scene | None = None
        self._scenes: dict[str, Scene] = {}
        self._next_scene = ""
        self._display: Any = None

    def _init_backend(self) -> None:
        pygame.init()
        try:
            pygame.mixer.init()
        except pygame.error as exc:
            raise EngineError("failed to initialize audio add-on") from exc
        pygame.mixer.set_num_channels(self.reserve_samples)
        if not pygame.font.get_init():
            pygame.font.init()
        try:
            self._display = pygame.display.set_mode((self.screen_w, self.screen_h))
        except pygame.error as exc:
            raise EngineError("failed to create display") from exc
        pygame.display.set_caption(self.title)
        if self.icon:
            pygame.display.set_icon(get_resources().get_bitmap(self.icon))
            log(LogType.INFO, "Loaded window icon from: ", self.icon)
        log(LogType.INFO, "There are total ", pygame.mouse.get_pressed(num_buttons=5).__len__(),
            " supported mouse buttons")

    def _dispatch(self, event: Any) -> bool:
        """Send one event to the active scene; return True when the game should end."""
        scene = self.active_scene
        if event.type == pygame.QUIT:
            log(LogType.VERBOSE, "Window close button clicked")
            return True
        if scene is None:
            return False
        if event.type == pygame.KEYDOWN:
            log(LogType.VERBOSE, "Key with keycode ", event.key, " down")
            scene.on_key_down(event.key)
        elif event.type == pygame.KEYUP:
            log(LogType.VERBOSE, "Key with keycode ", event.key, " up")
            scene.on_key_up(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button not in _WHEEL_BUTTONS:
            x, y = event.pos
            log(LogType.VERBOSE, "Mouse button ", event.button, " down at (", x, ", ", y, ")")
            scene.on_mouse_down(event.button, x, y)
        elif event.type == pygame.MOUSEBUTTONUP and event.button not in _WHEEL_BUTTONS:
            x, y = event.pos
            log(LogType.VERBOSE, "Mouse button ", event.button, " up at (", x, ", ", y, ")")
            scene.on_mouse_up(event.button, x, y)
        elif event.type == pygame.MOUSEMOTION:
            if event.rel != (0, 0):
                x, y = event.pos
                log(LogType.VERBOSE, "Mouse move to (", x, ", ", y, ")")
                scene.on_mouse_move(x, y)
        elif event.type == pygame.MOUSEWHEEL:
            if event.y != 0:
                x, y = pygame.mouse.get_pos()
                log(LogType.VERBOSE, "Mouse scroll at (", x, ", ", y, ") with delta ", event.y)
                scene.on_mouse_scroll(x, y, event.y)
        elif event.type == pygame.WINDOWLEAVE:
            log(LogType.VERBOSE, "Mouse leave display.")
            scene.on_mouse_move(-1, -1)
        elif event.type == pygame.WINDOWENTER:
            log(LogType.VERBOSE, "Mouse enter display.")
        return False

    def _run_event_loop(self) -> None:
        clock = pygame.time.Clock()
        timestamp = time.monotonic()
        while True:
            if any(self._dispatch(event) for event in pygame.event.get()):
                return
            now = time.monotonic()
            elapsed, timestamp = now - timestamp, now
            self.update(elapsed)
            self.draw()
            clock.tick(self.fps)

    def _destroy(self) -> None:
        pygame.quit()
        self._display = None
        self._scenes.clear()

    def _change_scene(self, name: str) -> None:
        if name not in self._scenes:
            raise ValueError("Cannot change to a unknown scene.")
        if self.active_scene is not None:
            self.active_scene.terminate()
        self.active_scene = self._scenes[name]
        if self.free_memory_on_scene_changed:
            get_resources().release_unused()
        self.active_scene.initialize()
        log(LogType.INFO, "Changed to ", name, " scene")

    def start(
        self,
        first_scene_name: str,
        fps: int = 60,
        screen_w: int = 800,
        screen_h: int = 600,
        reserve_samples: int = 1000,
        title: str = "Tower Defense",
        icon: str | None = "icon.png",
        free_memory_on_scene_changed: bool = False,
        delta_time_threshold: float = 0.05,
    ) -> None:
        """Open the window and run the game until it is closed."""
        log(LogType.INFO, "Game Initializing...")
        self.fps = fps
        self.screen_w = screen_w
        self.screen_h = screen_h
        self.reserve_samples = reserve_samples
        self.title = title
        self.icon = icon
        self.free_memory_on_scene_changed = free_memory_on_scene_changed
        self.delta_time_threshold = delta_time_threshold
        if first_scene_name not in self._scenes:
            raise ValueError("The scene is not added yet.")
        self.active_scene = self._scenes[first_scene_name]

        self._init_backend()
        log(LogType.INFO, "Backend initialized")
        log(LogType.INFO, "Game begin")
        self.active_scene.initialize()
        log(LogType.INFO, "Game initialized")
        self.draw()
        log(LogType.INFO, "Game start event loop")
        self._run_event_loop()
        log(LogType.INFO, "Game Terminating...")
        self.active_scene.terminate()
        log(LogType.INFO, "Game terminated")
        log(LogType.INFO, "Game end")
        self._destroy()

    def add_new_scene(self, name: str, scene: Scene) -> None:
        """Register a scene under a unique name."""
        if name in self._scenes:
            raise ValueError("Cannot add scenes with the same name.")
        self._scenes[name] = scene

    def change_scene(self, name: str) -> None:
        """Switch to the named scene at the next update."""
        self._next_scene = name

    def update(self, delta_time: float) -> None:
        """Apply a pending scene change and update the active scene."""
        if self._next_scene:
            name, self._next_scene = self._next_scene, ""
            self._change_scene(name)
        delta_time = min(delta_time, self.delta_time_threshold)
        if self.active_scene is not None:
            self.active_scene.update(delta_time)

    def draw(self) -> None:
        """Draw the active scene to the window and show it."""
        if self.active_scene is None or self._display is None:
            return
        self.active_scene.draw(self._display)
        pygame.display.flip()

    def get_scene(self, name: str) -> Scene:
        """Return the scene registered under the name."""
        if name not in self._scenes:
            raise ValueError("Cannot get scenes that aren't added.")
        return self._scenes[name]

    def screen_size(self) -> Point:
        """Return the window size."""
        return Point(self.screen_w, self.screen_h)

    def mouse_position(self) -> Point:
        """Return the current mouse position in the window."""
        x, y = pygame.mouse.get_pos()
        return Point(x, y)

    def is_key_down(self, key_code: int) -> bool:
        """Return whether the key is currently held down."""
        return bool(pygame.key.get_pressed()[key_code])


_instance: GameEngine | None = None


def get_instance() -> GameEngine:
    """Return the shared engine, creating it on first use."""
    global _instance
    if _instance is None:
        _instance = GameEngine()
    return _instance