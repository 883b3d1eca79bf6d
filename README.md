# roguekit

roguekit is a set of building blocks for roguelike games. It needs nothing outside the standard library.

## Modules

- `roguekit.color`
  - `Color` is a frozen RGB value with 8-bit channels. Out-of-range values wrap like a byte.
  - `+` and `-` saturate at 255 and 0, and `*` multiplies channels and clamps the result.
  - `Color.from_hsv(hue, saturation, value)` takes the hue in degrees.
  - Helper functions: `color_from_hsv`, `color_to_hsv`, `color_to_rgb`, `greyscale`, `darken(amount, col)`, `apply_colored_light(col, (r, g, b))` and `lerp(first, second, amount)`.
- `roguekit.geometry`
  - `distance2d` and `distance3d`, each with a `_squared` and a `_manhattan` form.
  - `project_angle(x, y, radius, radians)`.
  - Line walkers: `line_func`, `line_func_3d`, `line_func_cancellable` and `line_func_3d_cancellable`. The cancellable forms stop as soon as the callback returns a false value.
- `roguekit.perlin`
  - `PerlinNoise(seed=None)` gives values in 0..1 through `noise(x, y, z)` and `noise_octaves(x, y, z, octaves, persistence, frequency)`.
  - Without a seed it uses the reference permutation. With a seed it shuffles a permutation deterministically.
- `roguekit.rexpaint`
  - `RexSprite` covers REXPaint `.xp` images. `RexSprite.load` reads gzip-compressed or plain data and `save` writes gzip.
  - Tile access: `get_tile`, `set_tile`, `tile_at_index` and `set_tile_at_index`.
  - `flatten()` merges all layers into the first and keeps transparent cells from covering what lies beneath.
  - Cells are `RexTile` values. `is_transparent` and `transparent_tile` handle the 255,0,255 transparency background.
- `roguekit.input`
  - `InputState` stores mouse button states (indexed by the `Button` enum) and the window-focus flag.
  - It also stores the mouse position, divided by a scale factor.
- `roguekit.fonts`
  - `FontRegistry` maps font tags to `BitmapFont` records (a texture tag and a character size).
  - `register_font` adds one font. `register_font_directory(path)` reads `tag,file,width,height` lines from `path/fonts.txt`.
- `roguekit.controls`
  - Retained-mode controls: `StaticText`, `BorderBox`, `Checkbox`, `RadioButtons` (of `Radio` options), `HBar`, `VBar` and `ListBox` (of `ListItem` entries).
  - They draw through any object with `print`, `set_char`, `box` and `box_at` methods.
  - Each control has optional `on_render_start`, `on_mouse_over`, `on_mouse_down` and `on_mouse_up` callbacks.
- `roguekit.layer`
  - `Layer` is a pixel rectangle of kind `LayerKind.CONSOLE`, `SPARSE` or `OWNER_DRAW`. It holds controls by handle.
  - Adding controls: `add_static_text`, `add_checkbox`, `add_radioset`, `add_hbar`, `add_vbar`, `add_listbox` and `add_boundary_box`.
  - `process_mouse` fires the render-start and mouse callbacks, and `render_controls` draws every control.
  - `resize_fullscreen` is a ready-made resize callback.
- `roguekit.gui`
  - `Gui` keeps layers by handle and passes window resizes on to them.
  - `layers_in_render_order()` returns the layers in drawing order. Layers added with `order=-1` stack above the ones added before them.
- `roguekit.ecs`
  - `ECS` holds `Entity` objects, each with components keyed by type, plus `BaseSystem` subclasses.
  - `tick` runs every system, records its time in a `SystemProfile` (microseconds), then drops deleted entities.
  - `profile_dump()` formats the timings as a table.
  - `save` and `load` pickle the entities to a binary stream, so load only data you trust.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from roguekit.color import Color, lerp
from roguekit.geometry import line_func
from roguekit.perlin import PerlinNoise

path = []
line_func(0, 0, 5, 3, lambda x, y: path.append((x, y)))

shade = lerp(Color(0, 64, 0), Color(128, 255, 128), 0.5)
height = PerlinNoise(42).noise_octaves(0.1, 0.2, 0.0, 4, 0.5, 1.0)
```

A checkbox that toggles on a click:

```python
from roguekit.color import Color
from roguekit.layer import Layer, resize_fullscreen

layer = Layer(0, 0, 640, 480, resize_fullscreen)
box = layer.add_checkbox(1, 1, 1, "Sound", False, Color(255, 255, 255), Color(0, 0, 0))

layer.process_mouse(16, 8, True, (8, 8))   # button pressed over the checkbox
layer.process_mouse(16, 8, False, (8, 8))  # button released
assert box.checked
```

The ECS:

```python
from roguekit.ecs import ECS, BaseSystem

class Mover(BaseSystem):
    def configure(self):
        self.system_name = "Mover"

    def update(self, duration_ms):
        pass

world = ECS()
player = world.create_entity()
world.add_system(Mover())
world.configure()
world.tick(16.0)
print(world.profile_dump())
```

## What it does not do

- roguekit opens no window and draws no pixels.
- It has no terminal or console of its own. Controls draw onto an object you supply, and a layer's `console` is whatever object you attach to it.
- `FontRegistry` records image paths but does not load images.
- Keyboard input is not tracked.
- The ECS has no message passing between systems.