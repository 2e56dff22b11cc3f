"""Platforms the player runs on, and the endless track they form."""

from __future__ import annotations

import math
import random
from enum import IntEnum
from typing import Optional, Sequence

from .constants import (
    PLATFORM_COUNT,
    PLATFORM_HEIGHT,
    PLATFORM_MAX_WIDTH,
    PLATFORM_MIN_WIDTH,
    PLAYER_SPEED,
    WINDOW_HEIGHT,
    PlayerState,
)
from .sprite import Rect, Sprite

FIRST_PLATFORM_WIDTH = 200
_ACTIVE_TINT = (255, 255, 255, 255)
_INACTIVE_TINT = (255, 255, 255, 100)


class PlatformColor(IntEnum):
    """Platform colours; also index the platform textures."""

    RED = 0
    GREEN = 1


def _source(rng):
    return random if rng is None else rng


class Platform:
    """A platform sprite with its colour and whether it is currently solid."""

    def __init__(self, sprite: Sprite, color: PlatformColor = PlatformColor.RED):
        self.sprite = sprite
        self.color = PlatformColor(color)
        self.is_active = self.color == PlatformColor.RED

    @classmethod
    def spawn(cls, textures: Sequence, rng=None) -> Platform:
        """Create a platform of random colour and width."""
        rng = _source(rng)
        color = PlatformColor(rng.randrange(2))
        sprite = Sprite()
        sprite.set_texture(textures[color], False)
        platform = cls(sprite, color)
        platform.randomize_width(rng)
        return platform

    def randomize_width(self, rng=None) -> None:
        """Pick a new width between the minimum and the maximum platform width."""
        rng = _source(rng)
        width = rng.randrange(PLATFORM_MAX_WIDTH - PLATFORM_MIN_WIDTH) + PLATFORM_MIN_WIDTH
        self.sprite.texture_rect = Rect(0, 0, width, PLATFORM_HEIGHT)

    def refresh_activity(self, active_color: int) -> None:
        """Make the platform solid only when its colour is the active one."""
        self.is_active = int(self.color) == int(active_color)
        self.sprite.color = _ACTIVE_TINT if self.is_active else _INACTIVE_TINT


def generate_position(previous: Optional[Platform], rng=None) -> tuple[float, float]:
    """Position for a platform placed after ``previous`` (or the first one)."""
    if previous is None:
        return (0.0, WINDOW_HEIGHT / 2 + 34.0)
    rng = _source(rng)
    x, y = previous.sprite.position
    dx = float(rng.randrange(990) + 10)
    dy = float(rng.randrange(1000) - 500)
    magnitude = math.hypot(dx, dy)
    dx /= magnitude
    dy /= magnitude

    offset = float(rng.randrange(20)) + 80.0
    dx *= offset
    dy *= offset / 1.25

    x += dx + previous.sprite.global_bounds().width
    y += dy

    if y - 40.0 <= 0.0:
        y += 80.0
    if y + 13.0 >= WINDOW_HEIGHT:
        y -= 80.0
    return (x, y)


def handle_collision(platform: Platform, player) -> None:
    """Resolve a collision between the player and a solid platform."""
    platform_bounds = platform.sprite.global_bounds()
    player_bounds = player.sprite.global_bounds()

    if player.state == PlayerState.JUMP and platform_bounds.top >= player_bounds.bottom:
        player_x, _ = player.sprite.position
        player.sprite.position = (player_x, platform.sprite.position[1])
        player.accel_y = 0.0
        player.state = PlayerState.NORMAL
    elif player.state == PlayerState.JUMP and platform_bounds.bottom <= player_bounds.top:
        player.accel_y = -abs(player.accel_y)
    else:
        displacement = player_bounds.left + player_bounds.width - platform.sprite.position[0]
        player.sprite.move(-displacement, 0.0)


def player_collides(platform_bounds: Rect, player) -> bool:
    """Whether the player, stretched by its vertical momentum, touches the bounds."""
    bounds = player.sprite.global_bounds()
    momentum = abs(player.accel_y)
    bounds.top -= momentum + 1.0
    bounds.height += 2 * (momentum + 1.0)
    return platform_bounds.intersects(bounds)


class PlatformTrack:
    """The fixed set of platforms scrolling towards the player."""

    def __init__(self, textures: Sequence, rng=None):
        self.textures = textures
        self.rng = _source(rng)
        self.platforms: list[Platform] = []
        previous: Optional[Platform] = None
        for index in range(PLATFORM_COUNT):
            position = generate_position(previous, self.rng)
            platform = Platform.spawn(textures, self.rng)
            if index == 0:
                platform.color = PlatformColor.RED
                platform.is_active = True
                platform.sprite.set_texture(textures[PlatformColor.RED], False)
                platform.sprite.texture_rect = Rect(0, 0, FIRST_PLATFORM_WIDTH, PLATFORM_HEIGHT)
            platform.sprite.position = position
            self.platforms.append(platform)
            previous = platform
        self.last_platform = self.platforms[-1]

    def __iter__(self):
        return iter(self.platforms)

    def __len__(self) -> int:
        return len(self.platforms)

    def replace(self, platform: Platform) -> None:
        """Recycle a platform to the far end of the track."""
        new_color = PlatformColor(self.rng.randrange(2))
        if new_color != platform.color:
            platform.sprite.set_texture(self.textures[new_color], False)
            platform.color = new_color
            platform.is_active = not platform.is_active
        platform.randomize_width(self.rng)
        platform.sprite.position = generate_position(self.last_platform, self.rng)
        self.last_platform = platform

    def update_platform(self, platform: Platform, player, active_color: int) -> None:
        """Advance one platform by a fixed step."""
        platform.refresh_activity(active_color)
        x, y = platform.sprite.position
        bounds = platform.sprite.global_bounds()

        if x + bounds.width < 0.0:
            self.replace(platform)
            return

        if player_collides(bounds, player) and platform.is_active:
            handle_collision(platform, player)

        platform.sprite.position = (x - PLAYER_SPEED, y)

    def update(self, player, active_color: int) -> None:
        for platform in self.platforms:
            self.update_platform(platform, player, active_color)

    def draw(self, surface) -> None:
        for platform in self.platforms:
            platform.sprite.draw(surface)