from unittest import mock

import pygame
import pytest

from lailusion.audio import Jukebox
from lailusion.constants import EXIT_ERROR, EXIT_SUCCESS, MusicTrack, SceneType
from lailusion.game import Game, main


class FakeSound:
    def __init__(self):
        self.plays = []
        self.stops = 0
        self.volume = None

    def play(self, loops=0):
        self.plays.append(loops)

    def stop(self):
        self.stops += 1

    def set_volume(self, fraction):
        self.volume = fraction


class RecordingScene:
    def __init__(self, game, log, name):
        self.game = game
        self.log = log
        self.name = name
        self.events = []
        self.updates = 0
        self.closed = False
        log.append(("load", name))

    def handle_event(self, event):
        self.events.append(event)

    def update(self):
        self.updates += 1

    def draw(self, surface):
        surface.set_at((0, 0), (255, 0, 0))

    def close(self):
        self.closed = True
        self.log.append(("close", self.name))


def make_game(log=None):
    log = [] if log is None else log
    sounds = {track: FakeSound() for track in MusicTrack}
    factories = {
        kind: (lambda game, kind=kind: RecordingScene(game, log, kind))
        for kind in (SceneType.MAIN_MENU, SceneType.INGAME, SceneType.DEATH)
    }
    game = Game(
        surface=pygame.Surface((711, 400)),
        jukebox=Jukebox(sounds),
        scenes=factories,
    )
    return game, sounds, log


def test_initial_state():
    game, _, log = make_game()
    assert game.scene_type == SceneType.NONE
    assert game.scene is None
    assert game.speed == 1.0
    assert game.score == 0.0
    assert game.window_size == (711, 400)
    assert log == []


def test_change_scene_loads_new_scene():
    game, _, log = make_game()
    game.change_scene(SceneType.MAIN_MENU)
    assert game.scene_type == SceneType.MAIN_MENU
    assert game.scene.name == SceneType.MAIN_MENU
    assert log == [("load", SceneType.MAIN_MENU)]


def test_change_scene_to_same_type_does_nothing():
    game, sounds, log = make_game()
    game.change_scene(SceneType.INGAME)
    scene = game.scene
    stops = sounds[MusicTrack.MENU].stops
    game.change_scene(SceneType.INGAME)
    assert game.scene is scene
    assert log == [("load", SceneType.INGAME)]
    assert sounds[MusicTrack.MENU].stops == stops


def test_change_scene_closes_previous_and_stops_music():
    game, sounds, log = make_game()
    game.change_scene(SceneType.MAIN_MENU)
    first = game.scene
    before = sounds[MusicTrack.MENU].stops
    game.change_scene(SceneType.DEATH)
    assert first.closed
    assert log == [
        ("load", SceneType.MAIN_MENU),
        ("close", SceneType.MAIN_MENU),
        ("load", SceneType.DEATH),
    ]
    assert sounds[MusicTrack.MENU].stops == before + 1


def test_change_scene_to_none_leaves_no_scene():
    game, _, _ = make_game()
    game.change_scene(SceneType.INGAME)
    scene = game.scene
    game.change_scene(SceneType.NONE)
    assert game.scene is None
    assert game.scene_type == SceneType.NONE
    assert scene.closed


def test_change_scene_without_factory_raises():
    game = Game(
        surface=pygame.Surface((10, 10)),
        jukebox=Jukebox({track: FakeSound() for track in MusicTrack}),
        scenes={},
    )
    with pytest.raises(ValueError):
        game.change_scene(SceneType.DEATH)


def test_quit_event_closes_window_and_is_not_forwarded():
    game, _, _ = make_game()
    game.change_scene(SceneType.MAIN_MENU)
    game.handle_event(pygame.event.Event(pygame.QUIT))
    assert game.is_open is False
    assert game.scene.events == []


def test_other_events_reach_scene():
    game, _, _ = make_game()
    game.change_scene(SceneType.INGAME)
    event = pygame.event.Event(pygame.KEYUP, key=pygame.K_v)
    game.handle_event(event)
    assert game.scene.events == [event]
    assert game.is_open is True


def test_event_without_scene_keeps_window_open():
    game, _, _ = make_game()
    game.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_v))
    assert game.is_open is True


def test_update_forwards_to_scene():
    game, _, _ = make_game()
    game.change_scene(SceneType.INGAME)
    game.update()
    game.update()
    assert game.scene.updates == 2


def test_draw_clears_then_draws_scene():
    game, _, _ = make_game()
    game.surface.fill((255, 255, 255))
    game.change_scene(SceneType.MAIN_MENU)
    game.draw()
    assert game.surface.get_at((0, 0))[:3] == (255, 0, 0)
    assert game.surface.get_at((5, 5))[:3] == (0, 0, 0)


def test_draw_without_scene_clears_to_black():
    game, _, _ = make_game()
    game.surface.fill((255, 255, 255))
    game.draw()
    assert game.surface.get_at((0, 0))[:3] == (0, 0, 0)


def test_shutdown_closes_scene_and_music():
    game, sounds, _ = make_game()
    game.change_scene(SceneType.INGAME)
    scene = game.scene
    game.shutdown()
    assert scene.closed
    assert game.scene is None
    assert game.is_open is False
    assert all(sound.stops >= 1 for sound in sounds.values())


def test_run_starts_menu_and_stops_on_quit():
    game, _, log = make_game()
    with mock.patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
        status = game.run()
    assert status == EXIT_SUCCESS
    assert log == [("load", SceneType.MAIN_MENU), ("close", SceneType.MAIN_MENU)]
    assert game.is_open is False


def test_main_reports_missing_music(tmp_path, capsys):
    status = main(["--assets-dir", str(tmp_path)])
    assert status == EXIT_ERROR
    assert "Failed to load music" in capsys.readouterr().err