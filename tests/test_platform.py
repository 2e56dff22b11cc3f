import random

import pygame
import pytest

from lailusion.constants import (
    PLATFORM_COUNT,
    PLATFORM_HEIGHT,
    PLATFORM_MAX_WIDTH,
    PLATFORM_MIN_WIDTH,
    PLAYER_SPEED,
    WINDOW_HEIGHT,
    PlayerState,
)
from lailusion.platform import (
    Platform,
    PlatformColor,
    PlatformTrack,
    generate_position,
    handle_collision,
    player_collides,
)
from lailusion.player import Player
from lailusion.sprite import Rect, Sprite


@pytest.fixture
def textures():
    red = pygame.Surface((64, PLATFORM_HEIGHT))
    red.fill((255, 0, 0))
    green = pygame.Surface((64, PLATFORM_HEIGHT))
    green.fill((0, 255, 0))
    return [red, green]


def make_platform(textures, x, y, width=100, color=PlatformColor.RED):
    sprite = Sprite()
    sprite.set_texture(textures[color], False)
    sprite.texture_rect = Rect(0, 0, width, PLATFORM_HEIGHT)
    sprite.position = (x, y)
    return Platform(sprite, color)


def test_first_position_is_fixed():
    assert generate_position(None, random.Random(1)) == (0.0, 234.0)


@pytest.mark.parametrize("seed", range(30))
def test_generated_position_moves_forward(textures, seed):
    rng = random.Random(seed)
    previous = make_platform(textures, 50.0, 200.0, width=60)
    x, y = generate_position(previous, rng)
    advance = x - 50.0 - 60.0
    assert 0.0 < advance <= 100.0
    assert abs(y - 200.0) <= 100.0 / 1.25 + 80.0


@pytest.mark.parametrize("seed", range(20))
def test_randomize_width_range(textures, seed):
    platform = make_platform(textures, 0, 0)
    platform.randomize_width(random.Random(seed))
    rect = platform.sprite.texture_rect
    assert PLATFORM_MIN_WIDTH <= rect.width < PLATFORM_MAX_WIDTH
    assert rect.height == PLATFORM_HEIGHT


@pytest.mark.parametrize("seed", range(10))
def test_spawn_red_is_active(textures, seed):
    platform = Platform.spawn(textures, random.Random(seed))
    assert platform.is_active == (platform.color == PlatformColor.RED)
    assert platform.sprite.texture is textures[platform.color]


def test_refresh_activity(textures):
    platform = make_platform(textures, 0, 0, color=PlatformColor.GREEN)
    platform.refresh_activity(PlatformColor.RED)
    assert platform.is_active is False
    assert platform.sprite.color[3] == 100
    platform.refresh_activity(PlatformColor.GREEN)
    assert platform.is_active is True
    assert platform.sprite.color[3] == 255


def test_collision_snaps_falling_player(textures):
    player = Player()
    player.state = PlayerState.JUMP
    player.accel_y = -7.0
    platform = make_platform(textures, 0.0, 300.0)
    handle_collision(platform, player)
    assert player.sprite.position[1] == 300.0
    assert player.accel_y == 0.0
    assert player.state == PlayerState.NORMAL


def test_collision_from_below_pushes_down(textures):
    player = Player()
    player.state = PlayerState.JUMP
    player.accel_y = 10.0
    platform = make_platform(textures, 0.0, 100.0)
    handle_collision(platform, player)
    assert player.accel_y == -10.0
    assert player.state == PlayerState.JUMP


def test_collision_from_side_pushes_back(textures):
    player = Player()
    platform = make_platform(textures, 40.0, 200.0)
    handle_collision(platform, player)
    assert player.sprite.global_bounds().right == pytest.approx(40.0)


def test_player_collides(textures):
    player = Player()
    touching = make_platform(textures, 0.0, 232.5)
    far = make_platform(textures, 500.0, 10.0)
    assert player_collides(touching.sprite.global_bounds(), player) is True
    assert player_collides(far.sprite.global_bounds(), player) is False


def test_track_initial_layout(textures):
    track = PlatformTrack(textures, random.Random(3))
    assert len(track) == PLATFORM_COUNT
    first = track.platforms[0]
    assert first.color == PlatformColor.RED
    assert first.sprite.texture_rect.width == 200
    assert first.sprite.position == generate_position(None)
    assert track.last_platform is track.platforms[-1]
    xs = [p.sprite.position[0] for p in track]
    assert xs == sorted(xs)


def test_track_update_scrolls(textures):
    track = PlatformTrack(textures, random.Random(5))
    player = Player()
    player.sprite.position = (32.0, -5000.0)
    before = [p.sprite.position for p in track]
    track.update(player, PlatformColor.RED)
    after = [p.sprite.position for p in track]
    for (bx, by), (ax, ay) in zip(before, after):
        assert ax == bx - PLAYER_SPEED
        assert ay == by


def test_replace_moves_platform_to_end(textures):
    track = PlatformTrack(textures, random.Random(9))
    first = track.platforms[0]
    old_last_x = track.last_platform.sprite.position[0]
    track.replace(first)
    assert track.last_platform is first
    assert first.sprite.position[0] > old_last_x
    assert first.is_active == (first.color == PlatformColor.RED)


def test_offscreen_platform_is_replaced(textures):
    track = PlatformTrack(textures, random.Random(11))
    platform = track.platforms[0]
    platform.sprite.position = (-500.0, 200.0)
    track.update_platform(platform, Player(), PlatformColor.RED)
    assert track.last_platform is platform
    assert platform.sprite.position[0] > 0.0


def test_inactive_platform_does_not_collide(textures):
    track = PlatformTrack(textures, random.Random(2))
    player = Player()
    player.state = PlayerState.JUMP
    player.sprite.position = (32.0, WINDOW_HEIGHT / 2 + 34.0)
    first = track.platforms[0]
    track.update_platform(first, player, PlatformColor.GREEN)
    assert first.is_active is False
    assert player.state == PlayerState.JUMP


def test_track_draw(textures):
    track = PlatformTrack(textures, random.Random(4))
    surface = pygame.Surface((711, WINDOW_HEIGHT))
    surface.fill((0, 0, 0))
    track.draw(surface)
    assert tuple(surface.get_at((5, 240))) == (255, 0, 0, 255)