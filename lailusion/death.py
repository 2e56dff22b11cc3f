"""The game-over screen showing the score and a restart button."""

from __future__ import annotations

from pathlib import Path

import pygame

from .constants import WINDOW_HEIGHT, WINDOW_WIDTH, SceneType
from .scene import (
    Scene,
    _is_left_click,
    _Text,
    load_background_layers,
    load_font,
    load_texture,
)
from .sprite import Sprite

FADE_COLOR = (0, 0, 0, 130)
SPEED_DECAY = 0.007
BUTTON_SCALE = (1.5, 1.0)


class DeathScene(Scene):
    """Slowing background, a dark veil, the final score and a restart button."""

    scene_type = SceneType.DEATH

    def __init__(self, game):
        super().__init__(game)
        assets = Path(game.assets_dir)
        self.layers = load_background_layers(assets, game.window_size)

        self.fade = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.SRCALPHA)
        self.fade.fill(FADE_COLOR)

        center_x = WINDOW_WIDTH // 2
        center_y = WINDOW_HEIGHT // 2
        font_path = assets / "fonts" / "FutureMillennium.ttf"
        self.title = _Text(
            load_font(font_path, 80), "You died", (center_x - 190.0, center_y - 150.0)
        )
        self.score_text = _Text(
            load_font(font_path, 20),
            f"Score : {int(game.score * 100)}",
            (center_x - 65.0, float(center_y)),
        )
        self.button_text = _Text(
            load_font(font_path, 40), "Restart", (center_x - 90.0, center_y + 50.0)
        )

        self.button = Sprite(
            load_texture(assets / "button" / "button.png"),
            (center_x - 110.0, center_y + 40.0),
        )
        self.button.scale = BUTTON_SCALE

    def handle_event(self, event) -> None:
        if self.closed or not _is_left_click(event):
            return
        x, y = event.pos
        if self.button.global_bounds().contains(x, y):
            self.game.speed = 1.0
            self.game.score = 0.0
            self.game.change_scene(SceneType.INGAME)

    def update(self) -> None:
        """Scroll the background layers while the game speed dies down."""
        if self.closed:
            return
        speed = self.game.speed
        for index, layer in enumerate(self.layers):
            layer.texture_rect.left += int(speed * (index * 2))
        self.game.speed = max(speed - SPEED_DECAY, 0.0)

    def draw(self, surface) -> None:
        if self.closed:
            return
        for layer in self.layers:
            layer.draw(surface)
        surface.blit(self.fade, (0, 0))
        self.title.draw(surface)
        self.score_text.draw(surface)
        self.button.draw(surface)
        self.button_text.draw(surface)

    def close(self) -> None:
        super().close()
        self.layers = []