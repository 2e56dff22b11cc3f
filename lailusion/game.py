"""The game object: window, music, the current scene and the main loop."""

from __future__ import annotations

import argparse
import random
import sys
import time
from typing import Callable, Mapping, Optional

import pygame

from .audio import Jukebox, load_tracks
from .constants import (
    EXIT_ERROR,
    EXIT_SUCCESS,
    FRAMERATE_LIMIT,
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
    SceneType,
)
from .scene import AssetError, Scene

UPDATE_STEP = 0.05
_BLACK = (0, 0, 0)


def _default_factories(rng) -> dict:
    from .death import DeathScene
    from .ingame import IngameScene
    from .menu import MenuScene

    return {
        SceneType.MAIN_MENU: MenuScene,
        SceneType.INGAME: lambda game: IngameScene(game, rng=rng),
        SceneType.DEATH: DeathScene,
    }


class Game:
    """Holds the window, the music and the current scene.

    ``surface`` is drawn on; when omitted a display window is opened.
    ``jukebox`` defaults to the tracks found under ``assets_dir``.
    ``scenes`` maps each scene type to a callable building it from the game.
    """

    def __init__(
        self,
        assets_dir="assets",
        surface: Optional[pygame.Surface] = None,
        jukebox: Optional[Jukebox] = None,
        scenes: Optional[Mapping[SceneType, Callable]] = None,
        rng: Optional[random.Random] = None,
    ):
        self.assets_dir = assets_dir
        self.rng = rng if rng is not None else random.Random()
        self.jukebox = jukebox if jukebox is not None else Jukebox(load_tracks(assets_dir))

        self._owns_display = surface is None
        if surface is None:
            pygame.init()
            surface = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
            pygame.display.set_caption(WINDOW_TITLE)
        self.surface = surface
        self.window_size = surface.get_size()
        self.is_open = True

        self.scenes = dict(scenes) if scenes is not None else _default_factories(self.rng)
        self.scene_type = SceneType.NONE
        self.scene: Optional[Scene] = None

        self.speed = 1.0
        self.score = 0.0
        self._clock_start = time.perf_counter()

    def _elapsed(self) -> float:
        return time.perf_counter() - self._clock_start

    def change_scene(self, scene_type: SceneType) -> None:
        """Close the current scene and start another; nothing if it is the same."""
        scene_type = SceneType(scene_type)
        if scene_type == self.scene_type:
            return
        if self.scene is not None:
            self.scene.close()
            self.scene = None
        self.jukebox.stop_current()
        self.scene_type = scene_type
        if scene_type != SceneType.NONE:
            try:
                factory = self.scenes[scene_type]
            except KeyError:
                raise ValueError(f"no scene registered for {scene_type.name}") from None
            self.scene = factory(self)

    def handle_event(self, event) -> None:
        """Close the window on a quit request, else pass the event to the scene."""
        if event.type == pygame.QUIT:
            self.close_window()
            return
        if self.scene is not None:
            self.scene.handle_event(event)

    def update(self) -> None:
        """Advance the current scene by one fixed step."""
        self._clock_start = time.perf_counter()
        if self.scene is not None:
            self.scene.update()

    def draw(self) -> None:
        """Clear the window and draw the current scene."""
        self.surface.fill(_BLACK)
        if self.scene is not None:
            self.scene.draw(self.surface)
        if self._owns_display:
            pygame.display.flip()

    def close_window(self) -> None:
        self.is_open = False

    def run(self) -> int:
        """Run the main loop until the window closes; return the exit status."""
        frame_clock = pygame.time.Clock() if self._owns_display else None
        self.change_scene(SceneType.MAIN_MENU)
        while self.is_open:
            seconds = self._elapsed()
            for event in pygame.event.get():
                self.handle_event(event)
            while seconds > UPDATE_STEP:
                self.update()
                seconds -= UPDATE_STEP
            self.draw()
            if frame_clock is not None:
                frame_clock.tick(FRAMERATE_LIMIT)
        self.shutdown()
        return EXIT_SUCCESS

    def shutdown(self) -> None:
        """Release the scene, the music and the window."""
        if self.scene is not None:
            self.scene.close()
            self.scene = None
        self.jukebox.close()
        self.is_open = False
        if self._owns_display:
            pygame.display.quit()
            self._owns_display = False


def main(argv=None) -> int:
    """Start the game; return the process exit status."""
    parser = argparse.ArgumentParser(prog="lailusion", description=WINDOW_TITLE)
    parser.add_argument("--assets-dir", default="assets", help="directory holding the game assets")
    args = parser.parse_args(argv)
    try:
        game = Game(args.assets_dir)
        return game.run()
    except (FileNotFoundError, AssetError) as error:
        print(error, file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())