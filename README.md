# La Ilusion

La Ilusion is an endless side-scrolling runner built on pygame. The
platforms scroll towards the player, who must jump from one to the next.
Each platform is either red or green. Only the platforms of the active
colour are solid. The others are drawn faded, and the player falls
through them.

## Installing

```
pip install .
```

This needs Python 3.10 or newer and pygame.

## Playing

```
lailusion
lailusion --assets-dir path/to/assets
```

`--assets-dir` is the directory that holds the game's assets and
defaults to `assets`. The command returns 0 after the window is closed.
If a music file, a texture or a required font is missing, it prints an
error message and returns 84.

### Controls

| Key        | Action                                                     |
|------------|------------------------------------------------------------|
| Space      | Jump, when not already in the air                          |
| C (hold)   | Slide while running; releasing it returns to running       |
| V          | On release, switch the solid platform colour (red/green)   |
| Left click | Press the menu's Start and Quit buttons, or death's Restart |

The score goes up with every game step and is shown as `SCORE : n`. The
player dies on falling off the bottom of the screen or on being pushed
off its left edge. The death screen shows `Score : n` and a **Restart**
button, which resets the speed and the score and starts a new run.

## Assets

The package does not include any images, sounds or fonts. It reads
them from the assets directory:

- `musics/`: `menu.ogg`, `main_music.ogg`, `start.ogg`, `jump.ogg`,
  `slide.ogg`, `dead.ogg`
- `background/`: `menu_bg.png` and `layer_0.png` to `layer_4.png`
- `button/button.png`
- `player/`: `player.png`, `jump.png`, `slide.png`. These are sprite
  sheets of 32×32 frames.
- `platforms/`: `platform_red.png`, `platform_green.jpg`
- `fonts/FutureMillennium.ttf`, used by the game screen and the death
  screen
- `font/FutureMillennium.ttf`, used by the main menu

The death screen needs its font. If the menu or the game screen cannot
load its font, the game still runs, but that text is not drawn.

## Using it from Python

- `lailusion.game.Game(assets_dir="assets", surface=None, jukebox=None, scenes=None, rng=None)`
  holds the window, the music and the current scene.
  - `run()` is the main loop. It updates the scene in fixed 0.05-second
    steps.
  - `change_scene(scene_type)` switches between scenes.
  - `handle_event`, `update`, `draw`, `close_window` and `shutdown`
    drive the game one call at a time.
  - If you pass a `surface`, the game draws on it and opens no window.
  - `lailusion.game.main(argv=None)` is the command's entry point.
- `lailusion.menu.MenuScene`, `lailusion.ingame.IngameScene` and
  `lailusion.death.DeathScene` are the three screens. They are built on
  `lailusion.scene.Scene`.
  - `IngameScene` accepts a `key_state` callable that returns
    `(jump_pressed, slide_pressed)`. It also accepts an `rng`.
- `lailusion.player`:
  - `Player` does the movement, gravity and sprite animation.
  - `snap_to_platform` moves the player onto a platform after a colour
    switch.
- `lailusion.platform`:
  - `Platform` and `PlatformColor` describe one platform.
  - `PlatformTrack` holds the 20 recycled platforms.
  - `generate_position`, `handle_collision` and `player_collides` do
    the placement and the collisions.
- `lailusion.audio`:
  - `Jukebox` plays one background track and one sound effect at a
    time. Volumes above 100 % play at full volume.
  - `load_tracks(assets_dir)` loads the music files.
- `lailusion.sprite`: `Rect`, which has `intersects` and `contains`, and
  `Sprite`, which has an origin, a scale, a texture rect and a tint.
- `lailusion.constants`: window size, physics constants, and the
  `SceneType`, `MusicTrack` and `PlayerState` enumerations.

## Running the tests

```
pip install .[test]
pytest
```