"""Background music playback."""

import logging
import os

import pygame

_log = logging.getLogger(__name__)

_FREQUENCY = 44100
_SIZE = -16
_CHANNELS = 2
_BUFFER = 4096


class SoundManager:
    """Plays one looping music track at a time from a base directory."""

    def __init__(self, base_path="assets/sound"):
        self.base_path = base_path
        self.current_music = None
        try:
            pygame.mixer.init(_FREQUENCY, _SIZE, _CHANNELS, _BUFFER)
        except pygame.error as error:
            _log.error("Mixer failed to init! Mix_Error: %s", error)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def play_music(self, path):
        """Stop the current track and loop the one at path under base_path."""
        self.stop_music()
        full_path = os.path.join(self.base_path, path)
        try:
            pygame.mixer.music.load(full_path)
            pygame.mixer.music.play(-1)
        except pygame.error as error:
            _log.error("Failed to play music %s: %s", full_path, error)
            return
        self.current_music = full_path

    def toggle_music(self, pause):
        """Pause the current track when pause is true, otherwise resume it."""
        if self.current_music is None:
            return
        if pause:
            pygame.mixer.music.pause()
        else:
            pygame.mixer.music.unpause()

    def stop_music(self):
        """Stop and unload the current track, if any."""
        if self.current_music is None:
            return
        pygame.mixer.music.stop()
        pygame.mixer.music.unload()
        self.current_music = None

    def is_playing(self):
        """Return True when a track is loaded and playing."""
        if self.current_music is None:
            return False
        return bool(pygame.mixer.music.get_busy())

    def close(self):
        """Release the audio device."""
        self.stop_music()
        if pygame.mixer.get_init():
            pygame.mixer.quit()