"""Game-wide constants and enumerations."""

from enum import IntEnum

WINDOW_WIDTH = 711
WINDOW_HEIGHT = 400
WINDOW_TITLE = "La Ilusion"
FRAMERATE_LIMIT = 144

PLATFORM_MIN_WIDTH = 25
PLATFORM_MAX_WIDTH = 150
PLATFORM_COUNT = 20
PLATFORM_HEIGHT = 13

PLAYER_SPEED = 10.0
JUMP_STRENGTH = 25.0
PLAYER_GRAVITY = 5.0

EXIT_ERROR = 84
EXIT_SUCCESS = 0


class SceneType(IntEnum):
    """The scenes the game can be in."""

    NONE = 0
    MAIN_MENU = 1
    INGAME = 2
    DEATH = 3


class MusicTrack(IntEnum):
    """Music tracks and sound effects, in loading order."""

    MENU = 0
    MAIN_MUSIC = 1
    START = 2
    JUMP = 3
    SLIDE = 4
    DEAD = 5


class PlayerState(IntEnum):
    """Movement states of the player; also index the player's textures."""

    NORMAL = 0
    JUMP = 1
    SLIDE = 2