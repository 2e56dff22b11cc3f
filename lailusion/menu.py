"""The main menu with its start and quit buttons."""

from __future__ import annotations

from pathlib import Path

from .constants import MusicTrack, SceneType
from .scene import (
    BLACK,
    WHITE,
    Scene,
    _is_left_click,
    _optional_font,
    _Text,
    load_texture,
    scale_to_cover,
)
from .sprite import Sprite

START_BUTTON_POSITION = (295.0, 220.0)
QUIT_BUTTON_POSITION = (295.0, 300.0)


class MenuScene(Scene):
    """Title screen: a background, two buttons and three labels."""

    scene_type = SceneType.MAIN_MENU

    def __init__(self, game):
        super().__init__(game)
        game.jukebox.play(MusicTrack.MENU)
        assets = Path(game.assets_dir)

        self.background = Sprite(load_texture(assets / "background" / "menu_bg.png"))
        scale_to_cover(self.background, game.window_size)

        button_texture = load_texture(assets / "button" / "button.png")
        self.buttons = [
            Sprite(button_texture, START_BUTTON_POSITION),
            Sprite(button_texture, QUIT_BUTTON_POSITION),
        ]

        font_path = assets / "font" / "FutureMillennium.ttf"
        button_font = _optional_font(font_path, 40)
        title_font = _optional_font(font_path, 80)
        self.texts = [
            _Text(button_font, "Start", (300.0, 226.0)),
            _Text(button_font, "Quit", (319.0, 306.0)),
            _Text(
                title_font,
                "La Ilusion",
                (135.0, 60.0),
                color=WHITE,
                outline_color=BLACK,
                outline_thickness=5,
            ),
        ]

    def handle_event(self, event) -> None:
        if self.closed or not _is_left_click(event):
            return
        x, y = event.pos
        start_button, quit_button = self.buttons
        if start_button.global_bounds().contains(x, y):
            self.game.jukebox.play(MusicTrack.START)
            self.game.change_scene(SceneType.INGAME)
            return
        if quit_button.global_bounds().contains(x, y):
            self.game.close_window()

    def update(self) -> None:
        """The menu has nothing to animate."""

    def draw(self, surface) -> None:
        if self.closed:
            return
        self.background.draw(surface)
        for button in self.buttons:
            button.draw(surface)
        for text in self.texts:
            text.draw(surface)

    def close(self) -> None:
        super().close()
        self.buttons = []
        self.texts = []