# quadkit

Pure-Python building blocks for a frame-driven game loop. It has no
dependencies outside the standard library.

## Modules

- `quadkit.color`: `Color`, a frozen RGBA color with channels from 0.0 to
  1.0. It has the constructors `Color.from_rgba`, `Color.from_hex` and
  `Color.from_bytes`, and the methods `to_bytes` and `to_tuple`. The module
  also has `color_u8`, named constants such as `RED`, `WHITE` and `BLANK`,
  and the conversions `hsl_to_rgb` and `rgb_to_hsl`.
- `quadkit.geometry`: `Vec2`, `Rect`, `RectOffset` and `Circle`. They test
  containment, overlap and intersection. The module also has
  `polar_to_cartesian`, `cartesian_to_polar` and `clamp`.
- `quadkit.generational`: `GenerationalStorage`, a slot store. Its
  `GenerationalId` values go stale once their slot is freed and reused.
- `quadkit.storage`: a store that holds one value per type, through
  `Storage` or the module-level `store`, `get` and `try_get`.
- `quadkit.animation`: `Animation`, `AnimationFrame` and `AnimatedSprite`,
  for sprite sheets with one animation per row.
- `quadkit.shaders`: `preprocess_shader`, which expands `#include "name"`
  directives using the includes held in a `PreprocessorConfig`.
- `quadkit.conf`: `Conf`, `UpdateTrigger` and `FilterMode`, for window
  and draw-batch settings.
- `quadkit.mouse_camera`: `MouseCamera`, a camera that pans and zooms with
  the mouse.
- `quadkit.input`: `InputState`, which takes window events and answers
  keyboard, mouse and touch queries for each frame. It also records
  `InputEvent`s for subscribers.

## Installation

```
pip install quadkit
```

## Examples

Colors and geometry:

```python
from quadkit.color import Color, rgb_to_hsl
from quadkit.geometry import Rect, Circle, Vec2

sky = Color.from_hex(0x3CA7D5)
h, s, l = rgb_to_hsl(sky)

a = Rect(0.0, 0.0, 10.0, 10.0)
b = Rect(5.0, 5.0, 10.0, 10.0)
print(a.intersect(b))                                   # Rect(x=5.0, y=5.0, w=5.0, h=5.0)
print(Circle(0.0, 0.0, 2.0).contains(Vec2(1.0, 1.0)))   # True
```

Generational ids:

```python
from quadkit.generational import GenerationalStorage

slots = GenerationalStorage()
first = slots.push("a")
slots.free(first)
second = slots.push("b")          # reuses the slot, generation 1
assert slots.get(first) is None   # the old id is stale
assert slots.get(second) == "b"
```

Sprite animation:

```python
from quadkit.animation import Animation, AnimatedSprite
from quadkit.geometry import Rect

sprite = AnimatedSprite(
    15, 20,
    [Animation("idle", 0, 20, 12), Animation("run", 1, 15, 15)],
    True,
)
sprite.update(0.1)   # longer than 1/12 s, so the frame advances
assert sprite.frame().source_rect == Rect(15.0, 0.0, 15.0, 20.0)
```

Shader includes:

```python
from quadkit.shaders import PreprocessorConfig, preprocess_shader

config = PreprocessorConfig(includes=[("common.glsl", "float x;")])
print(preprocess_shader('#include "common.glsl"\nvoid main() {}', config))
# float x;
# void main() {}
```

An include name that is not in the config raises `ValueError`.

Input state, fed from your window's event callbacks:

```python
from quadkit.input import InputState, MouseButton

state = InputState()
state.mouse_button_down_event(MouseButton.LEFT, 10.0, 20.0)
assert state.is_mouse_button_pressed(MouseButton.LEFT)
state.end_frame()
assert not state.is_mouse_button_pressed(MouseButton.LEFT)
assert state.is_mouse_button_down(MouseButton.LEFT)
```

## What quadkit does not do

quadkit opens no window. It does not render, play audio or read input
devices. `InputState` only knows the events you pass to it, and
`MouseCamera` only tracks an offset and a scale. `Conf` and `FilterMode`
describe settings but do not apply them.

There is no coroutine scheduler, scene graph, state machine or asset or
file loader in the package. Frame timing is also up to the caller: for
example, `AnimatedSprite.update` takes the frame time as an argument.

## Running the tests

```
pip install -e ".[test]"
pytest
```