# noneuclid

Building blocks for first-person scenes whose rooms are joined by seamless
portals, so that a space can be larger inside than outside or lead back into
itself. The package holds the vector maths, camera, collision, mesh loading,
physics and portal logic, plus thin OpenGL wrappers (through `pyglet`) for
drawing meshes, shaders, textures, off-screen buffers and a sky.

## Installing

```
pip install .
```

## What is in it

- `noneuclid.vector`: immutable `Vector3`, `Vector4` and row-major `Matrix4`
  (rotations, translation, scale, `inverse`, `mul_point`, `mul_direction`;
  matrices multiply with `@`).
- `noneuclid.settings`: game-wide constants (field of view, time step,
  gravity, walking speed, ...) and `clamp`.
- `noneuclid.camera`: `Camera` with a perspective projection and
  `clip_oblique` for clipping the near plane to a portal's surface.
- `noneuclid.sphere`: `Sphere`, a collision probe with maps to and from the
  unit sphere.
- `noneuclid.collider`: `Collider`, a rectangle built from a right triangle;
  `collide` returns the push out of it or `None`.
- `noneuclid.mesh`: `Mesh.from_lines` and `Mesh.load` read an OBJ dialect
  (`v`, `vt`, `f`, plus `c` lines for colliders and `*` wildcards for the
  latest vertices); `draw` uploads and draws it.
- `noneuclid.texture`: `decode_bmp` splits a 24-bit bitmap into a grid of
  tiles; `Texture` loads one and binds it as a 2D texture or texture array.
- `noneuclid.shader`: `vertex_attributes` lists a vertex shader's `in`
  names; `Shader` builds a program from `<name>.vert` and `<name>.frag`.
- `noneuclid.resources`: `acquire_mesh`, `acquire_shader` and
  `acquire_texture` share one live copy of each resource by name. They read
  from `Meshes/`, `Shaders/` and `Textures/` in the working directory; a
  missing file gives an empty resource.
- `noneuclid.framebuffer`: `FrameBuffer`, an off-screen target that asks a
  renderer to draw into it.
- `noneuclid.sky`: `Sky`, a screen quad drawn behind the scene.
- `noneuclid.controls`: `InputState`, held and just-pressed keys and mouse
  buttons with smoothed mouse motion.
- `noneuclid.timer`: `Timer`, a tick counter over a monotonic clock.
- `noneuclid.scene_object`: `SceneObject`, the positioned, rotated and scaled
  base for everything in a scene.
- `noneuclid.portal`: `Portal` and `Warp`; `Portal.connect` links two portals
  both ways, `intersects` finds the warp a movement crosses and `dist_to`
  measures the distance to the portal's rectangle.
- `noneuclid.physical`: `Physical`, an object with gravity, drag, friction,
  collision response and `try_portal` to teleport through a crossed portal.

## Example

```python
from noneuclid.physical import Physical
from noneuclid.portal import Portal
from noneuclid.vector import Matrix4, Vector3

m = Matrix4.trans(Vector3(1, 2, 3)) @ Matrix4.rot_y(0.5)
p = m.mul_point(Vector3(0, 0, 0))
back = m.inverse().mul_point(p)

a, b = Portal(), Portal()
b.pos = Vector3(100, 0, 0)
Portal.connect(a, b)

body = Physical()
body.set_position(Vector3(0, 0, 1))
body.pos = Vector3(0, 0, -1)   # step through portal a
if body.try_portal(a):
    print(body.pos)             # now on the far side of portal b
```

Creating portals needs no window; only drawing calls OpenGL.

## What it does not do

There is no game to run: the package has no window, main loop or command, no
player controller for walking and looking, and no ready-made levels or props.
It supplies the pieces such a program is built from.

## Running the tests

```
pip install ".[test]"
pytest
```