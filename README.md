# michaelk

*The Life and Times of Michael K.* is a quiet farming game that runs in your terminal.

You start with ten pumpkin seeds, two melon seeds and a watering can holding four units.
Plant pumpkins and melons in the field, water them, pull the weeds that creep in, and
harvest what ripens. Each harvest gives you one to three new seeds of the same kind.

## Installing

```
pip install .
```

Your terminal needs 256-colour and mouse (SGR mode) support.

## Playing

```
michaelk
```

Options:

- `--fps N` sets the frame rate (default 10; must be positive).
- `--seed N` seeds the random number generator so that a game can be replayed.

Keys:

- **Space** on the title screen starts the game.
- **Esc** quits at any time.

The column of boxes on the left side of the field is your hand. Click a box to pick it up;
the box you hold is outlined in green.

| Box           | What a click in the field does                                          |
|---------------|-------------------------------------------------------------------------|
| Clicker       | Harvests a ripe pumpkin or melon, or pulls a weed                       |
| Water         | Waters a plant (one unit from the can), or refills the can at a puddle   |
| Pumpkin seeds | Plants a pumpkin on a free spot, if you have a seed                     |
| Melon seeds   | Plants a melon on a free spot, if you have a seed                       |
| Bird Mode     | Switches to a side view of the field, the hills and the dam             |

In the side view, click the green arrow at the top left to return to the field.

How the field behaves:

- Plants grow a little each frame; the wetter the soil, the faster they grow, and the soil
  slowly dries out.
- Watering a plant empties one unit from the can. The can refills to six units when you
  click a puddle in the top right corner.
- Weeds sprout at random. A spot covered by a plant or weed cannot be planted.
- A day lasts 1200 frames. Rain falls between frames 400 and 800 of each day and waters
  every plant. In the side view the sky turns to night after frame 600.

## Using the parts

The game is built from small modules that can be used on their own:

- `michaelk.canvas` – `Screen`, a character grid with lines, rectangles, circles,
  triangles and text, plus `Pixel` and `BorderStyle`.
- `michaelk.plants` – `Pumpkin`, `Melon`, `Puddle` and `Weed`.
- `michaelk.scenes` – backdrops such as `draw_mountains`, `planting_view` and `rain`.
- `michaelk.game` – `Game`, which holds the farm and runs one frame per `run` call.
- `michaelk.banner` – `render`, which draws text in large block letters.
- `michaelk.app` – `App`, which steps the whole program one frame at a time with given
  input, and `main`, the terminal front end.

## What it does not do

The package also contains conversation boxes (`michaelk.dialogue`), talking characters
(`michaelk.character`) and first-person scenes with blinking eyelids (`michaelk.pov`), but
the game does not use them: there are no people to talk to and no story beyond the farm.
Hunger is counted in `Game.hunger` but is never shown and has no effect. There is no
saving or loading of a game.

## Running the tests

```
pip install ".[test]"
pytest
```