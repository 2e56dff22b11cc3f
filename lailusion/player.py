"""The running, jumping and sliding player character."""

from __future__ import annotations

from typing import Callable, Iterable, Optional, Sequence

from .constants import (
    JUMP_STRENGTH,
    PLAYER_GRAVITY,
    WINDOW_HEIGHT,
    MusicTrack,
    PlayerState,
)
from .sprite import Rect, Sprite

ANIMATION_DELAY = 8
FRAME_SIZE = 32
RUN_SHEET_WIDTH = 192


class Player:
    """The player sprite with its movement state and vertical acceleration."""

    def __init__(self, textures: Optional[Sequence] = None):
        self.state = PlayerState.NORMAL
        self.accel_y = 0.0
        self.textures = textures
        self.sprite = Sprite()
        self.sprite.origin = (16.0, 32.0)
        self.sprite.scale = (1.75, 1.75)
        self.sprite.position = (32.0, WINDOW_HEIGHT / 2 + 32.0)
        self._frame_count = 0
        if textures is not None:
            self.update_texture(textures)

    def is_out_of_bounds(self) -> bool:
        """Whether the player has left the screen to the left or bottom."""
        x, y = self.sprite.position
        return x + 16.0 <= 0.0 or y - 32.0 >= WINDOW_HEIGHT

    def update(
        self,
        jump_pressed: bool,
        slide_pressed: bool,
        play_sound: Optional[Callable[[MusicTrack], None]] = None,
    ) -> bool:
        """Advance one fixed step; return False when the player has died."""
        if self.is_out_of_bounds():
            return False

        def sound(track: MusicTrack) -> None:
            if play_sound is not None:
                play_sound(track)

        if self.state != PlayerState.JUMP and jump_pressed:
            sound(MusicTrack.JUMP)
            self.jump(self.textures)

        if self.state == PlayerState.NORMAL and slide_pressed:
            sound(MusicTrack.SLIDE)
            self.slide(self.textures)
        if self.state == PlayerState.SLIDE and not slide_pressed:
            self.run(self.textures)

        x, y = self.sprite.position
        y -= self.accel_y
        if self.state == PlayerState.JUMP:
            self.accel_y -= PLAYER_GRAVITY
        self.sprite.position = (x, y)

        # Assume airborne; landing on a platform sets the state back.
        self.state = PlayerState.JUMP
        return True

    def jump(self, textures: Optional[Sequence]) -> None:
        self.accel_y += JUMP_STRENGTH
        self.state = PlayerState.JUMP
        self.update_texture(textures)

    def run(self, textures: Optional[Sequence]) -> None:
        self.state = PlayerState.NORMAL
        self.update_texture(textures)

    def slide(self, textures: Optional[Sequence]) -> None:
        self.state = PlayerState.SLIDE
        self.update_texture(textures)

    def update_texture(self, textures: Optional[Sequence]) -> None:
        """Show the sheet for the current state, starting at its first frame."""
        if textures is not None:
            self.sprite.set_texture(textures[self.state], False)
        self.sprite.texture_rect = Rect(0, 0, FRAME_SIZE, FRAME_SIZE)

    def advance_animation(self) -> None:
        """Step to the next frame of the current state's animation."""
        rect = self.sprite.texture_rect
        if self.state == PlayerState.NORMAL:
            rect.left = (rect.left + FRAME_SIZE) % RUN_SHEET_WIDTH
        elif self.state == PlayerState.JUMP:
            if rect.left >= 160:
                rect.left -= FRAME_SIZE
            else:
                rect.left += FRAME_SIZE
        elif rect.left < 64:
            rect.left += FRAME_SIZE

    def draw(self, surface) -> None:
        """Draw the player, advancing the animation every few frames."""
        if self._frame_count >= ANIMATION_DELAY:
            self.advance_animation()
            self._frame_count = 0
        self.sprite.draw(surface)
        self._frame_count += 1


def snap_to_platform(player: Player, platforms: Iterable, color: int) -> bool:
    """Move the player onto the first solid platform of ``color`` it touches.

    Returns whether a platform was found.
    """
    bounds = player.sprite.global_bounds()
    player_bottom = bounds.top + bounds.height
    momentum = abs(player.accel_y)
    bounds.height += momentum * 2 + 4.0
    bounds.top -= momentum + 2.0

    for platform in platforms:
        if platform.color != color:
            continue
        platform_bounds = platform.sprite.global_bounds()
        if not bounds.intersects(platform_bounds):
            continue
        difference = player_bottom - platform_bounds.top
        player.sprite.move(0.0, 45.0 if difference > 40.0 else -difference)
        if difference < 40.0:
            player.accel_y = 0.0
        return True
    return False