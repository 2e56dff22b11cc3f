"""The running scene: player, scrolling platforms and the score counter."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import pygame

from .constants import MusicTrack, SceneType
from .platform import PlatformTrack
from .player import Player, snap_to_platform
from .scene import (
    BLACK,
    Scene,
    _optional_font,
    _Text,
    load_background_layers,
    load_texture,
)

SCORE_STEP = 1.0 / 150.0


def _keyboard_state() -> tuple:
    pressed = pygame.key.get_pressed()
    return bool(pressed[pygame.K_SPACE]), bool(pressed[pygame.K_c])


class IngameScene(Scene):
    """The level itself.

    ``key_state`` returns ``(jump_pressed, slide_pressed)``; by default it
    reads the keyboard. ``rng`` drives platform generation.
    """

    scene_type = SceneType.INGAME

    def __init__(self, game, key_state: Optional[Callable[[], tuple]] = None, rng=None):
        super().__init__(game)
        game.jukebox.play(MusicTrack.MAIN_MUSIC)
        assets = Path(game.assets_dir)

        self.layers = load_background_layers(assets, game.window_size)

        player_dir = assets / "player"
        self.player_textures = [
            load_texture(player_dir / name) for name in ("player.png", "jump.png", "slide.png")
        ]
        self.player = Player(self.player_textures)

        platform_dir = assets / "platforms"
        self.platform_textures = [
            load_texture(platform_dir / "platform_red.png"),
            load_texture(platform_dir / "platform_green.jpg"),
        ]
        self.track = PlatformTrack(self.platform_textures, rng)

        self.timer_text = _Text(
            _optional_font(assets / "fonts" / "FutureMillennium.ttf", 30),
            "",
            (5.0, 5.0),
            color=BLACK,
        )
        self.color = 0
        self.key_state = key_state if key_state is not None else _keyboard_state

    def handle_event(self, event) -> None:
        """Releasing V swaps which platform colour is solid."""
        if self.closed:
            return
        if event.type == pygame.KEYUP and getattr(event, "key", None) == pygame.K_v:
            self.color = (self.color + 1) % 2
            snap_to_platform(self.player, self.track, self.color)

    def update(self) -> None:
        if self.closed:
            return
        game = self.game
        step = int(game.speed)
        for index, layer in enumerate(self.layers):
            layer.texture_rect.left += step * (index * 2)

        previous_state = self.player.state
        jump_pressed, slide_pressed = self.key_state()
        if not self.player.update(jump_pressed, slide_pressed, game.jukebox.play):
            game.change_scene(SceneType.DEATH)
            game.jukebox.play(MusicTrack.DEAD)
            return

        self.track.update(self.player, self.color)

        if self.player.state != previous_state:
            self.player.update_texture(self.player_textures)

        game.score += SCORE_STEP
        self.timer_text.string = f"SCORE : {int(game.score * 100)}"

    def draw(self, surface) -> None:
        if self.closed:
            return
        for layer in self.layers:
            layer.draw(surface)
        self.player.draw(surface)
        self.track.draw(surface)
        self.timer_text.draw(surface)

    def close(self) -> None:
        super().close()
        self.layers = []