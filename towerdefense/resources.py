"""Cached loading of images, fonts and audio samples."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pygame

from .errors import EngineError
from .log import LogType, log


class SampleInstance:
    """A playable voice of a loaded sample with its own mode, gain and position."""

    def __init__(self, sample: pygame.mixer.Sound) -> None:
        self.sample = sample
        self.loop = False
        self.gain = 1.0
        self.position = 0
        self.channel: pygame.mixer.Channel | None = None
        self._sound: pygame.mixer.Sound | None = None

    @staticmethod
    def _mixer_format() -> tuple[int, int, int]:
        init = pygame.mixer.get_init()
        if init is None:
            raise EngineError("audio mixer is not initialised")
        return init

    @property
    def frequency(self) -> int:
        """Samples per second of the mixer the instance plays on."""
        return self._mixer_format()[0]

    @property
    def frame_bytes(self) -> int:
        _, size, channels = self._mixer_format()
        return abs(size) // 8 * channels

    @property
    def length(self) -> int:
        """Length of the sample in frames."""
        return len(self.sample.get_raw()) // self.frame_bytes

    @property
    def playing(self) -> bool:
        return self.channel is not None and bool(self.channel.get_busy())

    def play(self) -> bool:
        """Start playing from the current position; return whether it started."""
        raw = self.sample.get_raw()[self.position * self.frame_bytes:]
        if not raw:
            return False
        self._sound = pygame.mixer.Sound(buffer=raw)
        self._sound.set_volume(self.gain)
        self.channel = self._sound.play(loops=-1 if self.loop else 0)
        return self.channel is not None

    def stop(self) -> bool:
        """Stop playing; return whether there was something to stop."""
        if self.channel is None:
            return False
        self.channel.stop()
        self.channel = None
        return True


def _refcount_baseline() -> int:
    probe = {"probe": object()}
    return sys.getrefcount(probe["probe"])


class Resources:
    """Loads resources from disk once and hands out the cached objects."""

    def __init__(self, root: str | Path = "Resource") -> None:
        root = Path(root)
        self._bitmap_dir = root / "images"
        self._font_dir = root / "fonts"
        self._sample_dir = root / "audios"
        self._bitmaps: dict[str, pygame.Surface] = {}
        self._fonts: dict[str, pygame.font.Font] = {}
        self._samples: dict[str, pygame.mixer.Sound] = {}
        self._sample_instances: dict[str, tuple[SampleInstance, pygame.mixer.Sound]] = {}

    @staticmethod
    def _drop_unused(cache: dict[str, Any], kind: str, key=lambda value: value) -> None:
        baseline = _refcount_baseline()
        for name in list(cache):
            if sys.getrefcount(key(cache[name])) <= baseline:
                log(LogType.INFO, f"Destroyed {kind}: ", name)
                del cache[name]

    def release_unused(self) -> None:
        """Forget every cached resource that nothing else refers to."""
        self._drop_unused(self._bitmaps, "Resource<image>")
        self._drop_unused(self._fonts, "Resource<font>")
        self._drop_unused(self._sample_instances, "<sample_instance>", key=lambda pair: pair[0])
        self._drop_unused(self._samples, "Resource<audio>")

    def _load_image(self, path: Path) -> pygame.Surface:
        try:
            return pygame.image.load(str(path))
        except (pygame.error, OSError) as exc:
            raise EngineError(f"failed to load image: {path}") from exc

    def get_bitmap(self, name: str, width: int | None = None, height: int | None = None) -> pygame.Surface:
        """Return the image under images/, scaled to width x height when both are given."""
        scaled = width is not None and height is not None
        key = f"{name}?{width}x{height}" if scaled else name
        if key in self._bitmaps:
            return self._bitmaps[key]
        path = self._bitmap_dir / name
        image = self._load_image(path)
        if scaled:
            try:
                image = pygame.transform.smoothscale(image, (width, height))
            except ValueError:
                image = pygame.transform.scale(image, (width, height))
            log(LogType.INFO, "Loaded Resource<image>: ", path, " scaled to ", width, "x", height)
        else:
            log(LogType.INFO, "Loaded Resource<image>: ", path)
        self._bitmaps[key] = image
        return image

    def get_font(self, name: str, font_size: int) -> pygame.font.Font:
        """Return the font under fonts/ at the given size."""
        key = f"{name}?{font_size}"
        if key in self._fonts:
            return self._fonts[key]
        path = self._font_dir / name
        if not pygame.font.get_init():
            pygame.font.init()
        try:
            font = pygame.font.Font(str(path), font_size)
        except (pygame.error, OSError) as exc:
            raise EngineError(f"failed to load font: {path}") from exc
        log(LogType.INFO, "Loaded Resource<font>: ", path, " with size ", font_size)
        self._fonts[key] = font
        return font

    def get_sample(self, name: str) -> pygame.mixer.Sound:
        """Return the audio sample under audios/."""
        if name in self._samples:
            return self._samples[name]
        path = self._sample_dir / name
        try:
            sample = pygame.mixer.Sound(str(path))
        except (pygame.error, OSError) as exc:
            raise EngineError(f"failed to load audio: {path}") from exc
        log(LogType.INFO, "Loaded Resource<audio>: ", path)
        self._samples[name] = sample
        return sample

    def get_sample_instance(self, name: str) -> SampleInstance:
        """Create a new playable instance of the named sample."""
        sample = self.get_sample(name)
        instance = SampleInstance(sample)
        log(LogType.INFO, "Created<sample_instance>: ", self._sample_dir / name)
        self._sample_instances[name] = (instance, sample)
        return instance


_instance: Resources | None = None


def get_instance() -> Resources:
    """Return the shared resource cache, creating it on first use."""
    global _instance
    if _instance is None:
        _instance = Resources()
    return _instance