"""Playing sound effects, background music and controllable samples."""

from __future__ import annotations

import pygame

from .errors import EngineError
from .log import LogType, log
from .resources import Resources, SampleInstance, get_instance


class AudioHelper:
    """Plays audio loaded through a resource cache."""

    def __init__(
        self,
        resources: Resources | None = None,
        bgm_volume: float = 1.0,
        sfx_volume: float = 1.0,
    ) -> None:
        self.resources = resources if resources is not None else get_instance()
        self.bgm_volume = bgm_volume
        self.sfx_volume = sfx_volume

    def _play(self, audio: str, volume: float, loops: int, kind: str) -> pygame.mixer.Channel | None:
        channel = self.resources.get_sample(audio).play(loops=loops)
        if channel is None:
            log(LogType.INFO, f"failed to play audio ({kind})")
        else:
            channel.set_volume(volume)
            log(LogType.VERBOSE, f"played audio ({kind})")
        return channel

    def play_audio(self, audio: str) -> pygame.mixer.Channel | None:
        """Play a sound effect once at the effect volume."""
        return self._play(audio, self.sfx_volume, 0, "once")

    def play_bgm(self, audio: str) -> pygame.mixer.Channel | None:
        """Play background music in a loop at the music volume."""
        return self._play(audio, self.bgm_volume, -1, "bgm")

    def stop_bgm(self, channel: pygame.mixer.Channel | None) -> None:
        """Stop the background music playing on the channel."""
        if channel is not None:
            channel.stop()
        log(LogType.INFO, "stopped audio (bgm)")

    def play_sample(
        self,
        audio: str,
        loop: bool = False,
        volume: float = 1.0,
        position: float = 0.0,
    ) -> SampleInstance:
        """Start a new instance of the sample, optionally looping, with volume and start time in seconds."""
        instance = self.resources.get_sample_instance(audio)
        instance.loop = loop
        if volume != 1:
            self.change_sample_volume(instance, volume)
        if position != 0:
            self.change_sample_position(instance, position)
        if instance.play():
            log(LogType.VERBOSE, "played audio (sample)")
        else:
            log(LogType.INFO, "failed to play audio (sample)")
        return instance

    def stop_sample(self, sample: SampleInstance) -> None:
        """Stop the instance if it is playing."""
        if not sample.playing:
            return
        if sample.stop():
            log(LogType.INFO, "stopped audio (sample)")
        else:
            log(LogType.INFO, "failed to stop audio (sample)")

    def change_sample_volume(self, sample: SampleInstance, volume: float) -> None:
        """Set the gain of the instance."""
        if volume < 0:
            raise EngineError(f"failed to change sample volume to {volume:.6f}")
        sample.gain = volume
        if sample.channel is not None:
            sample.channel.set_volume(volume)

    def change_sample_position(self, sample: SampleInstance, position: float) -> None:
        """Move the start of the instance to the given time in seconds."""
        index = int(sample.frequency * position)
        if index < 0 or index > sample.length:
            raise EngineError(f"failed to change sample position to {position:.6f} s")
        sample.position = index

    def get_sample_length(self, sample: SampleInstance) -> int:
        """Return the length of the instance in whole seconds."""
        return sample.length // sample.frequency