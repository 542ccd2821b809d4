# spriteforge

A small component-based 2D game engine core in pure Python. It gives you
game objects built from components, a transform hierarchy with 3x2 affine
matrices, scenes with a deferred lifecycle, trigger-style collision
detection, sprite-sheet animation, keyboard/mouse input state and a frame
timer.

## Install

```
pip install .
```

Tests use pytest:

```
pip install ".[test]"
pytest
```

## Modules

- `spriteforge.vector2.Vector2`: mutable 2D vector with `+`, `-`, scalar
  `*` and `/`, in-place component-wise `*=` and `/=`, `scale`, `normalize`,
  `normalized`, `magnitude`, `sqr_magnitude` and the static `dot`,
  `distance` and `lerp`. Class attributes `zero`, `one`, `up`, `down`,
  `left` and `right` hold the usual constants.
- `spriteforge.mathhelper`: `degree_to_radian`, `radian_to_degree`,
  `clamp`, the vector `Vector2F` (with `length`, `normalize`, `cross`),
  `is_left`, the point-in-polygon tests `cn_pn_poly` (crossing number) and
  `wn_pn_poly` (winding number), `Edge`, `Triangle` and the circumcircle
  test `is_circum`.
- `spriteforge.matrix.Matrix3x2`: row-vector 3x2 affine matrix with
  `identity`, `translation`, `scaling`, `rotation` (degrees), composition
  with `a @ b`, `inverted` (raises `ValueError` when singular) and
  `transform_point`. Helpers: `make_translation_matrix`,
  `make_rotation_matrix`, `make_scale_matrix`, `make_render_matrix`,
  `matrix_to_string`, `decompose_matrix`, `remove_pivot`,
  `is_point_in_rect`.
- `spriteforge.keycode.Keycode`: `IntEnum` of virtual key codes.
- `spriteforge.component`: `Component`, `Behaviour` (`enable`, `disable`)
  and `MonoBehaviour` with the hooks `awake`, `start`, `update`,
  `fixed_update`, `late_update`, `on_trigger_enter`, `on_trigger_stay` and
  `on_trigger_exit`. The default hooks record that they ran, accumulate
  elapsed time, and keep the set of touching colliders in `touching`.
- `spriteforge.transform`: `Transform` (position, rotation, scale, pivot,
  `translate`, `rotate`, `set_parent`, `detach_children`, cached
  `local_matrix` and `world_matrix`) and `PivotPreset`.
- `spriteforge.gameobject.GameObject`: owns a `Transform` and other
  components. `add_component` returns the existing component if one of that
  type is already attached. Adding or removing components during a
  lifecycle pass takes effect when the pass ends.
- `spriteforge.render_info`: `Rect`, `RenderInfo`, `ColliderType`,
  `RectInfo`, `CircleInfo`.
- `spriteforge.sprite_renderer.SpriteRenderer`: bitmap, source and
  destination rectangles and flip flag; `get_render_info` fills in the
  world matrix.
- `spriteforge.colliders`: `CircleCollider` (radius in meters, 50 pixels
  per meter; it only tests against other circles) and `BoxCollider` (its
  test always reports a hit).
- `spriteforge.physics`: `CollisionPair` and `PhysicsManager`, whose `step`
  checks every pair of active colliders and raises enter, stay and exit
  events on both owners.
- `spriteforge.scene`: `Scene` (`create_game_object`, `destroy`, lifecycle
  methods, `build_render_queue`, camera registration, `get_render_tm`) and
  `ScenePhase`. `fixed_update` also runs the scene's physics step.
- `spriteforge.scene_manager`: `SceneManager` (`register_scene`,
  `get_scene`, `load_scene`, `uninitialize`) and `instantiate`.
- `spriteforge.animation`: `FrameData`, `AnimationClip` and
  `load_animation_clips`, which reads a sprite-sheet JSON file with
  `meta.frameTags` (`name`, `from`, `to`) and `frames` (each with
  `frame.x/y/w/h` and `duration` in milliseconds).
- `spriteforge.animator.Animator`: holds named clips and steps through
  frames, updating the object's `SpriteRenderer`.
- `spriteforge.resources.ResourceManager`: indexes `.json` and `.png` files
  under a directory by file name, loads textures (as RGBA Pillow images by
  default, or through a `bitmap_loader` you pass in) and caches clips.
- `spriteforge.input`: `InputManager`, `Message`, `MouseState`, `KeyEdge`,
  `get_x_from_lparam`, `get_y_from_lparam` and the `WM_*` message constants.
- `spriteforge.timer.GameTimer`: frame delta and total time that leaves out
  stopped periods; the clock can be injected.

## Example: a scene with a script

```python
from spriteforge.component import MonoBehaviour
from spriteforge.scene import Scene
from spriteforge.scene_manager import SceneManager
from spriteforge.transform import Transform


class Mover(MonoBehaviour):
    def update(self, delta_time):
        self.get_component(Transform).translate(10 * delta_time, 0)


class MainScene(Scene):
    def awake(self):
        player = self.create_game_object("Player")
        player.add_component(Mover)
        super().awake()


manager = SceneManager()
manager.register_scene("Main", MainScene())
manager.load_scene("Main")

scene = manager.get_scene("Main")
for _ in range(3):
    scene.fixed_update(0.02)
    scene.update(0.016)
    scene.late_update(0.016)
```

## Example: collisions

```python
from spriteforge.colliders import CircleCollider
from spriteforge.scene import Scene
from spriteforge.vector2 import Vector2

scene = Scene()
a = scene.create_game_object("A")
b = scene.create_game_object("B")
a.add_component(CircleCollider)
b.add_component(CircleCollider)
b.transform.position = Vector2(60.0, 0.0)

scene.awake()
scene.fixed_update(0.02)

collider_a = a.get_component(CircleCollider)
assert b.get_component(CircleCollider) in collider_a.touching
```

## Example: input

```python
from spriteforge.input import WM_KEYDOWN, InputManager, Message
from spriteforge.keycode import Keycode

keys = InputManager()
keys.handle_message(Message(WM_KEYDOWN, Keycode.SPACE))
assert keys.get_key_down(Keycode.SPACE)
assert keys.get_key_pressed(Keycode.SPACE)
```

## What it does not do

spriteforge does not open windows, read events from the operating system or
draw anything. A scene only collects `RenderInfo` records through
`build_render_queue`; handing them to a renderer, and feeding `Message`
records to `InputManager`, is up to your program. There is no camera
component: `Scene.register_camera` stores whatever object you give it. There
is no main loop or command-line program; you call the scene's lifecycle
methods yourself.