# coinrunner

A small side-scrolling platformer. Run and jump through the level and collect
coins. Be quick about it: you lose a coin every 90 ticks, and falling into a
hole costs you five more. It costs money to be alive.

## Installing

```
pip install .
```

The game uses `pygame` for its window, graphics and sound.

## Game data

The package does not include the game's images, font, sounds or level
layouts. `coinrunner.assets.game_data` reads every file from a data
directory: the directory named by the `COINRUNNER_DATA` environment variable,
or else a `data` directory inside the installed `coinrunner` package. The
game expects these files in it:

- `assets/1-tiles-city.png`, `assets/2-tiles-country.png`,
  `assets/3-objects-city.png`, `assets/4-objects-country.png`: tile sheets
- `assets/coin.png`, `assets/runner.png`: coin and runner animations
- `assets/Background_Layer_1.png` to `assets/Background_Layer_3.png`:
  parallax backgrounds
- `assets/Modak-Regular.ttf`: the display font
- `assets/Coins_Grab_00.ogg` to `assets/Coins_Grab_04.ogg`, `assets/coin.ogg`:
  coin sounds
- `assets/ambience-level-1.ogg`, `assets/ambience-level-2.ogg`: level ambience
- `leveldata/level_N_main.csv`, `level_N_background.csv`,
  `level_N_foreground.csv` and `level_N_actors.csv` for levels 1 and 2

Sprite sheets are cut into 64×64 frames. Level layers are CSV grids of tile
numbers, at most eight rows; cells that are not integers count as empty. The
actors file marks coins with `c` and spawn points with `s`; the first spawn
point is where the level starts.

## Playing

```
coinrunner
```

Controls:

- Right arrow or `D`: run right
- Left arrow or `A`: run left
- Space, up arrow or `W`: jump
- At the end of the first level: `G` to try again, `N` for the next level.
  At the end of the second level, `G` tries it again.

Level editing keys, on by default:

- `0`: reload the current level from its data files
- `9`: skip ahead to the next spawn point

While editing is on, an overlay shows the runner's grid position as a
spreadsheet-style cell reference, with the current update and frame rates.
`coinrunner --no-editor` turns the editing keys and the overlay off.

## Using the pieces

- `coinrunner.level.parse_level_grid` and `coinrunner.level.parse_actors`
  take plain text and need no display; `load_level` builds a `Level` from the
  data files. `Level.start_position`, `previous_spawn` and `next_spawn` give
  spawn positions, and `Level.solid_at` tells whether terrain covers a pixel.
- `coinrunner.game.Game.update` advances one tick given a `Controls` value;
  sounds and the font are optional, so a game can be driven without audio.
- `coinrunner.render.draw_game` draws one frame, and
  `coinrunner.app.read_controls` turns pygame key state into `Controls`.

## Running the tests

```
pip install .[test]
pytest
```