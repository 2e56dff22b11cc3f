"""Shared scene machinery: the scene interface, text labels and asset loading."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pygame

from .constants import SceneType
from .sprite import Sprite

BACKGROUND_LAYERS = 5
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


class AssetError(OSError):
    """Raised when a texture or a font cannot be loaded."""


class Scene:
    """One screen of the game.

    A scene is built from a game object providing ``assets_dir``,
    ``window_size``, ``jukebox``, ``speed``, ``score``,
    ``change_scene(scene_type)`` and ``close_window()``.
    The base scene reacts to nothing and draws nothing.
    """

    scene_type = SceneType.NONE

    def __init__(self, game):
        self.game = game
        self.closed = False

    def handle_event(self, event) -> None:
        """React to one window event."""

    def update(self) -> None:
        """Advance the scene by one fixed step."""

    def draw(self, surface) -> None:
        """Render the scene onto a surface."""

    def close(self) -> None:
        """Release the scene; it ignores updates and draws afterwards."""
        self.closed = True


@dataclass
class _Text:
    """A line of text drawn with a font, optionally outlined."""

    font: Optional[pygame.font.Font]
    string: str = ""
    position: tuple = (0.0, 0.0)
    color: tuple = WHITE
    outline_color: tuple = BLACK
    outline_thickness: int = 0

    def draw(self, surface) -> None:
        if self.font is None or not self.string:
            return
        x, y = self.position
        if self.outline_thickness > 0:
            outline = self.font.render(self.string, True, self.outline_color)
            step = int(self.outline_thickness)
            for dx in (-step, 0, step):
                for dy in (-step, 0, step):
                    if dx or dy:
                        surface.blit(outline, (round(x + dx), round(y + dy)))
        surface.blit(self.font.render(self.string, True, self.color), (round(x), round(y)))


def _is_left_click(event) -> bool:
    return (
        event.type == pygame.MOUSEBUTTONUP
        and getattr(event, "button", None) == pygame.BUTTON_LEFT
    )


def load_texture(path) -> pygame.Surface:
    """Load an image file; raise AssetError if it cannot be read."""
    path = Path(path)
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError) as error:
        raise AssetError(f"Error: Failed loading texture at {path}") from error


def load_font(path, size: int) -> pygame.font.Font:
    """Load a TrueType font at a character size; raise AssetError on failure."""
    path = Path(path)
    if not path.is_file():
        raise AssetError(f"Error: Failed to load font {path}")
    if not pygame.font.get_init():
        pygame.font.init()
    try:
        return pygame.font.Font(str(path), int(size))
    except (pygame.error, OSError) as error:
        raise AssetError(f"Error: Failed to load font {path}") from error


def _optional_font(path, size: int) -> Optional[pygame.font.Font]:
    """Load a font, or give None so that text using it is not drawn."""
    try:
        return load_font(path, size)
    except AssetError:
        return None


def scale_to_cover(sprite: Sprite, window_size) -> None:
    """Scale a sprite uniformly so its texture covers the whole window."""
    window_w, window_h = window_size
    texture_w, texture_h = sprite.texture.get_size()
    scale = max(window_w / texture_w, window_h / texture_h)
    sprite.scale = (scale, scale)


def load_background_layers(assets_dir, window_size) -> list:
    """Load the parallax background layers, each scaled to cover the window."""
    background_dir = Path(assets_dir) / "background"
    layers = []
    for index in range(BACKGROUND_LAYERS):
        sprite = Sprite(load_texture(background_dir / f"layer_{index}.png"))
        scale_to_cover(sprite, window_size)
        layers.append(sprite)
    return layers