# fpsengine

This is the platform-independent core of a small first-person game engine. It is pure Python and needs nothing beyond the standard library.

## What it covers

### Colliders (`fpsengine.colliders`)

- `Vec3` is an immutable vector.
- `BoxCollider` is an axis-aligned box and `SphereCollider` is a sphere.
- `intersects()` tests for overlap.
- `bounds()` returns the world bounds as `(min, max)`.
- `BoxCollider.contains()` tests whether a point is inside a box.
- `BoxCollider.compute_penetration()` returns the smallest-axis push that separates two boxes, or `None` if they do not overlap.

### Collision dispatch (`fpsengine.collision_system`)

- `CollisionSystem` stores colliders by integer id.
- Each collider has a `CollisionLayer` and a mask.
- `update()` calls your callback with a `CollisionHit` for each enabled pair that overlaps and whose masks accept each other.
- When both colliders in a pair are boxes, the hit includes the penetration.

### Static map geometry (`fpsengine.map_collision`)

- `MapCollision` places blocks on a uniform grid, keyed by the cell that holds each block's center.
- `nearby_blocks()`, `check_collision()` and `check_collision_all()` query blocks near a position.
- `CollisionManager` gives a single entry point to both the dynamic system and the map.
- `CollisionManager.resolve_map_collision()` returns a `MapResolution`. It holds the corrected position and velocity, whether anything was hit, and whether the body is grounded.

### Meshes and materials

- `fpsengine.mesh` provides `Vertex3D` and `Mesh`. A mesh computes its bounds lazily and caches them.
- `fpsengine.mesh_factory` provides `create_box`, `create_plane` and `create_sphere`.
- `box_triangle_list()` returns the unit cube as 36 vertices without indices.
- `fpsengine.material` provides `MaterialData`. Its `pack()` method gives an 80-byte little-endian constant-buffer image.
- `Material` holds a `MaterialData` and an optional texture object. `default_material()` returns a material with opaque white diffuse.

### Input

`fpsengine.keyboard`:

- `Key` holds the virtual key codes.
- `KeyboardState` is a bit set over key codes 0–0xFE.
- Call `snapshot()` once per frame. `is_triggered()` then reports keys that were pressed since the last snapshot.
- `process_message()` takes window key messages and tells left from right for Shift, Ctrl and Alt.

`fpsengine.gamepad`:

- `normalize_joystick()` turns raw joystick readings into a `GamepadState`.
- `apply_ps5_report()`, `apply_ps4_report()` and `apply_switch_report()` parse HID reports and fill in the gyro and the touchpad.
- `identify_controller()` maps a vendor id and product id to an `ExtendedType`.

`fpsengine.input_manager`:

- `InputManager.update(keyboard, mouse, pad)` merges a `KeyboardState`, a `MouseState` and a `GamepadState` into one `FPSCommand` per frame.
- It applies a stick deadzone and clamps movement to the range -1..1.
- It detects the frame on which jump, fire, aim, reload and pause are first pressed.

### Timing (`fpsengine.timer`)

- `SystemTimer` can be stopped, started and stepped.
- It runs on any clock function that returns integer nanoseconds. By default it uses `time.perf_counter_ns`.

## What it does not do

- **No drawing.** Meshes and materials are data only. Nothing draws them, uploads them to a GPU or loads textures.
- **No device access.** The input modules do not talk to real devices. You feed them window messages, raw joystick readings, HID report bytes or ready-made `MouseState` and `GamepadState` values.
- **No application.** The package has no window, no game loop and no command.

## Install

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from fpsengine.colliders import BoxCollider, Vec3
from fpsengine.map_collision import CollisionManager

manager = CollisionManager(2.0)
manager.register_map_block(BoxCollider(Vec3(0.0, -1.0, 0.0), Vec3(4.0, 1.0, 4.0)))

player = BoxCollider(Vec3(0.0, -0.2, 0.0), Vec3(1.0, 1.0, 1.0))
result = manager.resolve_map_collision(player, Vec3(0.0, -0.2, 0.0), Vec3(0.0, -3.0, 0.0))
print(result)
```

The player box overlaps the floor. The result shows the following:

- The box is pushed up 0.2 along y.
- Its vertical velocity is set to zero.
- `collided` is true.
- `grounded` is true.