# spriteengine

A small 2D sprite engine built on pygame and numpy, together with a
side-scrolling demo game: a hero walks and jumps across a tile map loaded
from a TMX file, collides with its solid tiles and scrolls it sideways, a
bird flies back and forth across the screen, and the sun turns slowly.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Running the game

```
spriteengine
```

Options:

| Option            | Default        | Meaning                               |
|-------------------|----------------|---------------------------------------|
| `--width`         | `800`          | window width                          |
| `--height`        | `600`          | window height                         |
| `--frames N`      | none           | stop after `N` frames                 |
| `--log PATH`      | `seError.log`  | file the error log is written to      |

The game expects its assets under `Data/` relative to the working directory:

- `Data/Shaders/` – shader sources (`basic.vs`, `basic.fs`, `spriteTile.vs`)
- `Data/Textures/` – images (`sky_01.png`, `bg2.png`, `sun_01.png`,
  `bird.png`, `iceman.png` and the level's tileset)
- `Data/Maps/` – tile maps (`level01.tmx`)

A shader or texture that cannot be read is reported in the log and the game
carries on without it; a missing or malformed map stops the game with an
error in the log. Log lines go both to the console and to the error log
file. When the hero reaches the bottom of the screen, "You lose." is logged
and the hero stops falling.

### Controls

| Key              | Action                                  |
|------------------|-----------------------------------------|
| Left / A         | walk left                               |
| Right / D        | walk right                              |
| Up / W / Space   | jump                                    |
| Down / S         | move down (only while gravity is off)   |
| G                | toggle gravity (each frame it is held)  |
| Escape           | quit                                    |

## Using the engine

The building blocks live in separate modules:

- `spriteengine.collision` – `CollisionRect` (with `right`, `bottom`,
  `contains`, `intersects`, `shift`) and `CollisionDirection`
- `spriteengine.collection` – `Collection`, items stored by name and
  iterated in name order
- `spriteengine.resource_manager` – `ResourceManager`, with `instance()` and
  `destroy_instance()` for the shared one; loads and caches shaders and
  textures
- `spriteengine.shader`, `spriteengine.texture` – `Shader` and `Texture`
- `spriteengine.program` – `ShaderProgram` and `new_program()`
- `spriteengine.scene_object` – `SceneObject` and `QuadObject`
- `spriteengine.sprite`, `spriteengine.sprite_tile` – `Sprite` and the
  sprite-sheet based `SpriteTile`
- `spriteengine.animation` – `Animation` and `Animator`
- `spriteengine.movement` – `Movement`, a speed clamped to per-axis limits
- `spriteengine.game_level` – `GameLevel`, a TMX tile map with collision
- `spriteengine.scene` – `Scene`, which renders its objects and can be used
  as a context manager
- `spriteengine.hero`, `spriteengine.game_scene` – the demo game's `Hero`
  and `GameScene` (input is passed as a set of `Key` values)
- `spriteengine.app` – `run()`, `main()` and `pressed_keys()`
- `spriteengine.log` – `initialize()`, `destroy()`, `log()` and `log_error()`

A sketch of an animated sprite:

```python
from spriteengine.animation import Animation
from spriteengine.program import new_program
from spriteengine.resource_manager import instance
from spriteengine.sprite_tile import SpriteTile

manager = instance()
manager.add_shader("spriteTile.vs")
manager.add_shader("basic.fs")
bird = SpriteTile(
    True,
    new_program("spriteTile.vs", "basic.fs", manager),
    manager.add_texture("bird.png"),
    14,
    14,
)
bird.place(50, 100, -0.8, 50, 50)
bird.add_animation(Animation("animation:bird:movement", range(14), 0.1), True)
bird.do_animation(0.2)
```

To run the demo loop from Python for a fixed number of frames:

```python
from spriteengine.app import run

frames_drawn = run(800, 600, 600)
```

## What it does not do

Drawing is done by blitting pygame surfaces, not on the graphics card.
Shader files are read and the attributes and uniforms they declare are
recorded, and uniform values set on a program are remembered, but the
shaders themselves are never run. Only the current sprite-sheet cell and
the mirror setting are taken from those values when drawing; `alpha`,
`shiftX` and the combined transform matrix are stored but do not change
what appears on screen, so sprites are drawn opaque and the mountain
background does not scroll.