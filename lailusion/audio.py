"""Background music and sound effects."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Optional

from .constants import MusicTrack

TRACK_FILES = {
    MusicTrack.MENU: "menu.ogg",
    MusicTrack.MAIN_MUSIC: "main_music.ogg",
    MusicTrack.START: "start.ogg",
    MusicTrack.JUMP: "jump.ogg",
    MusicTrack.SLIDE: "slide.ogg",
    MusicTrack.DEAD: "dead.ogg",
}

DEFAULT_VOLUMES = {
    MusicTrack.MENU: 60.0,
    MusicTrack.MAIN_MUSIC: 40.0,
    MusicTrack.START: 70.0,
    MusicTrack.JUMP: 20.0,
    MusicTrack.SLIDE: 50.0,
    MusicTrack.DEAD: 120.0,
}

BACKGROUND_TRACKS = frozenset({MusicTrack.MAIN_MUSIC, MusicTrack.MENU, MusicTrack.DEAD})
LOOPING_TRACKS = frozenset({MusicTrack.MENU, MusicTrack.MAIN_MUSIC})


class Jukebox:
    """Plays one background track and one sound effect at a time.

    ``tracks`` maps each track to an object with ``play(loops=...)``,
    ``stop()`` and ``set_volume(fraction)``, such as a pygame Sound.
    Volumes are percentages; values above 100 play at full volume.
    """

    def __init__(self, tracks: Mapping, volumes: Optional[Mapping] = None):
        self.tracks = {MusicTrack(key): value for key, value in tracks.items()}
        missing = set(MusicTrack) - set(self.tracks)
        if missing:
            names = ", ".join(sorted(track.name for track in missing))
            raise ValueError(f"missing tracks: {names}")
        self.volumes = dict(DEFAULT_VOLUMES)
        if volumes is not None:
            self.volumes.update({MusicTrack(k): float(v) for k, v in volumes.items()})
        self.current_music = MusicTrack.MENU
        self.current_sound: Optional[MusicTrack] = None

    def play(self, track: MusicTrack) -> None:
        """Start a track, replacing the current music or the current effect."""
        track = MusicTrack(track)
        if track in BACKGROUND_TRACKS:
            self.tracks[self.current_music].stop()
            self.current_music = track
        else:
            if self.current_sound is not None:
                self.tracks[self.current_sound].stop()
            self.current_sound = track
        sound = self.tracks[track]
        sound.set_volume(min(max(self.volumes[track], 0.0), 100.0) / 100.0)
        sound.play(loops=-1 if track in LOOPING_TRACKS else 0)

    def stop_current(self) -> None:
        """Stop the background music."""
        self.tracks[self.current_music].stop()

    def close(self) -> None:
        """Stop everything."""
        for sound in self.tracks.values():
            sound.stop()
        self.current_sound = None


def load_tracks(assets_dir="assets") -> dict:
    """Load every track from ``<assets_dir>/musics``.

    Raises FileNotFoundError naming the first missing file.
    """
    music_dir = Path(assets_dir) / "musics"
    paths = {track: music_dir / name for track, name in TRACK_FILES.items()}
    for path in paths.values():
        if not path.is_file():
            raise FileNotFoundError(f"Failed to load music: {path}")

    import pygame

    if pygame.mixer.get_init() is None:
        pygame.mixer.init()
    return {track: pygame.mixer.Sound(str(path)) for track, path in paths.items()}