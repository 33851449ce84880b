# spaceshoot

A small space shooter written with pygame. It comes in two parts:

- **The menu engine** (`spaceshoot`): a scene-driven front end that loads
  its textures, fonts, music, sounds and animations from JSON descriptions
  and shows a main menu with the entries Play, Option, Setting, Help and Quit.
- **The arcade game** (`spaceshoot-arcade`): a vertical shooter with
  scrolling star backgrounds, enemies that aim at you, health pickups that
  bounce off the screen edges, and a high-score table.

The package ships no images, fonts, sounds or music; both commands read them
from directories you point them at.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## The arcade shooter

```
spaceshoot-arcade [--width 600] [--height 800] [--scores ../../data/score.dat] [--assets ../../assets]
```

| Key       | Action                              |
|-----------|-------------------------------------|
| W A S D   | Move the ship                       |
| Space     | Fire                                |
| P         | Pause and resume                    |
| Escape    | Back to the title screen            |
| Enter     | Start, confirm your name, continue  |
| Backspace | Delete the last character of a name |
| F11       | Toggle full screen                  |

You start with 100 health. Enemy shots cost 10, ramming an enemy costs 20.
Destroying an enemy scores 20 points; an enemy that was not rammed may drop a
health pickup worth 10 points and 50 health. When you die you enter your
name (an empty name becomes `Player`), and the score goes into a table that
keeps the best eight entries. The table is read from the `--scores` file at
start and written back when the game closes, one `score name` pair per line.

The `--assets` directory is expected to hold:

- `font/Silver.ttf`, `font/VonwaonBitmap-16px.ttf`, `font/VonwaonBitmap-12px.ttf`
- `image/Stars-A.png`, `image/Stars-B.png`, `image/icon/app-icon.bmp`
- `image/player/PlayerRed_Frame_01_png_processed.png`, `image/laser-3.png`,
  `image/insect-1.png`, `image/bullet-1.png`,
  `image/item/Powerup_Health_png_processed.png`, `image/Health UI Black.png`
- `effect/explosion.png` (a horizontal strip of square frames)
- `music/06_Battle_in_Space_Intro.ogg`, `music/level1_loop.ogg`
- `sound/laser_shoot4.wav`, `sound/xs_laser.wav`, `sound/explosion1.wav`,
  `sound/explosion3.wav`, `sound/eff5.wav`, `sound/eff11.wav`

A missing texture, sound or font stops the game at start-up.

## The menu engine

```
spaceshoot [--resources ../../data/resources.json] [--width 1280] [--height 720]
```

Use the Up and Down arrow keys, or the mouse, to pick a menu entry; press
Enter or click to open it. Escape returns from a sub-screen to the one before.

### Resource descriptions

The `--resources` file is an index whose keys name a kind of resource and
whose values are paths to further JSON files:

```json
{
  "textures": "textures.json",
  "fonts": "fonts.json",
  "music": "music.json",
  "sounds": "sounds.json",
  "animations": "animations.json"
}
```

Each of those files maps a tag to its description:

- textures: `{"file": ..., "w": ..., "h": ...}`
- fonts: `{"file": ..., "size": ..., "bold": ..., "italic": ...}`
- music and sounds: `{"file": ..., "volume": ...}`
- animations: `{"image": ..., "x": ..., "y": ..., "w": ..., "h": ...,
  "currentFrame": ..., "totalFrames": ..., "frameDuration": ...}`

A tag that is already loaded is kept and not loaded again; unknown keys in
the index are logged and skipped. A file that cannot be opened or parsed is
logged and treated as empty. A value in the index that is not a string, or a
description with a missing or wrongly typed field, is an error and the engine
does not start.

The menu also reads three tag lists, one tag per line, from
`scenes/menu/` next to the index file: `menu_scene.txt`, `menu_music.txt`
and `menu_sound.txt`. It needs the texture `banner_modern` and the font
`Silver-48px`; it uses the font `VonwaonBitmap-16px` for its title, the sound
`menu_select` and the music `bg_menu_scene` when they are listed and loaded.

### What the menu engine does not do

The screens behind the menu entries only show their name (for example
"Level Scene") and return on Escape: Play does not start the shooter, and
Quit does not close the program. Animations are loaded and kept but never
played. Close the window to leave.

## Using the pieces

- `spaceshoot.resource_manager.ResourceManager` loads resources through the
  loader callables you give it, so it can be driven without a display.
  `load_all(file_path)` reads an index file as described above and raises
  `ResourceError` when it is malformed.
- `spaceshoot.scene_manager.SceneManager` keeps a registry of scene factories
  (`register_scene`), switches between them (`change_scene`, which raises
  `UnknownSceneError` for an unregistered name) and remembers where it came
  from (`go_back`).
- `spaceshoot.menu.Menu` is a wrap-around menu that can be driven by keys
  (`select_up`, `select_down`) or by the pointer (`select_at`).
- `spaceshoot.shooter_world.World` holds the whole state of a round of the
  shooter; `step(controls, delta_time, now)` advances it by one frame, which
  makes the game rules testable without a window. The names of the sound
  effects a frame triggers are collected in `World.sounds`.
- `spaceshoot.arcade.ScoreBoard` keeps the best eight scores, highest first,
  and reads and writes them as plain text with `load` and `save`.
- `spaceshoot.logger.init_async_logger(path)` sends the `spaceshoot` loggers'
  records at INFO and above to a file.