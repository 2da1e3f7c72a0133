# rabbik

The core of a small game engine, in plain Python with no third-party
dependencies.

## What is in it

- `rabbik.mathf` – `clamp`, `lerp`, `sign`, `is_nan`, `is_infinity` and the
  constants `PI`, `DEG2RAD`, `RAD2DEG`, `INFINITY`, `NAN`.
- `rabbik.vector` – immutable `Vector2` and `Vector3` with arithmetic,
  `length()`, `length_squared()`, `normalized()` and the static helpers
  `dot`, `cross`, `lerp` and `angle_between`. `Vector3.from_vector2` widens a
  2D vector.
- `rabbik.color` – immutable `Color` (RGBA floats), `Color.from8` for 8-bit
  channels (values outside 0..255 raise `ValueError`) and `Color.lerp`.
- `rabbik.transform` – `Quaternion` (`from_axis_angle`, `from_euler`,
  `normalized`, `conjugated`, `to_transform_matrix`; `*` composes
  quaternions or rotates a `Vector3`) and the immutable 4×4
  `TransformMatrix` (`identity`, `translate`, `scale`, `rotate`, `ortho`,
  `perspective`, `look_at`, `flattened`; `@` combines matrices or
  transforms a `Vector3`).
- `rabbik.random_source` – `RandomSource`, seedable, with `next_int` for
  `[min, max)` and `next_float` / `next_double` for a half-open range.
- `rabbik.hash_helper` – `is_prime` and `get_prime`, for choosing hash table
  sizes.
- `rabbik.time` – `Time`, which tracks scaled and unscaled deltas, totals
  and the frame count; `advance(unscaled_delta)` records a frame.
- `rabbik.debug` – `info`, `warn`, `error` and `fatal` print coloured console
  messages (the last three with the caller's function, file and line);
  `fatal` then raises `FatalError`. The `format_*` functions return the text
  without printing it.
- `rabbik.node`, `rabbik.node2d`, `rabbik.node3d` – the scene graph: `Node`,
  `Node2D` and `Node3D`, with names kept unique among siblings, enter, ready
  and exit callbacks, and update propagation through the tree.
- `rabbik.node_path` – `NodePath`, which parses paths such as
  `/root/player:position:x` into names and sub-names.
- `rabbik.app_loop`, `rabbik.engine`, `rabbik.node_tree` – `AppLoop`, the
  interface a running application implements; `Engine`, which runs a loop at
  a target frame rate and measures the real rate; and `NodeTree`, the
  default loop, which drives a tree of nodes.
- `rabbik.window` – the abstract `Window` and `WindowSystem`, and
  `MonitorInfo`.
- `rabbik.file_protocol`, `rabbik.native`, `rabbik.filesystem` – `OpenMode`,
  the `FileProtocol` interface, `NativeFileProtocol` and `NativeFileStream`
  for the local disk, and `FileSystem`, which routes paths to protocol
  handlers.
- `rabbik.resource` – `Resource` and `ResourceFileHandler`, the base for
  loaders and savers keyed by file extension.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## A quick look

```python
from rabbik.vector import Vector2, Vector3
from rabbik.transform import Quaternion, TransformMatrix
from rabbik.node import Node

v = Vector2(3, 4)
print(v.length())                    # 5.0
print(Vector3.cross(Vector3(1, 0, 0), Vector3(0, 1, 0)))

turn = Quaternion.from_axis_angle(Vector3(0, 0, 1), 1.5707964)
world = TransformMatrix.translate(Vector3(1, 2, 3)) @ turn.to_transform_matrix()

root = Node()
child = Node()
root.add_child(child)
print(root.children_count)           # 1
print(root.tree_structure())
```

## Nodes

Nodes get an automatic name starting with `@@` until they are given one.
Setting `node.name` removes the characters `. / : \r \n`; a name that starts
with `@@` is ignored, and a name that collides with a sibling is replaced by
a fresh automatic name. `Node.validate_child_name` can instead pick an
ordinal name (`Name`, `Name1`, `Name2`, …) with
`ChildNameValidation.ORDINAL`.

A node that joins a tree is told through `on_entered_tree`, then its children
join, then its `on_ready` runs. When it leaves, its children leave first and
then its `on_exiting_tree` runs. While a node is preparing its children it
refuses new ones, and `add_child` raises `NodeError`. To create nodes that
depend on one another, do it in the constructor. `destroy()` destroys all
children, last first, and detaches the node from its parent.

`Node2D` and `Node3D` add `position`, `scale` and `rotation` properties and a
`local_transform` that is rebuilt only after one of them changes.

## Files

```python
from rabbik.filesystem import FileSystem
from rabbik.file_protocol import OpenMode

fs = FileSystem()
fs.create_directory("file://build/cache")
with fs.open_file("file://build/cache/data.bin", OpenMode.WRITE_TRUNCATE) as stream:
    stream.write(b"hello")
print(fs.list_files("build/cache"))
```

Paths without a protocol prefix go to the native file system. An unknown
protocol name raises `ValueError`. `create_file` raises `FileExistsError` if
the file is already there, and opening a missing file with
`OpenMode.READ_ONLY` raises `FileNotFoundError`. Listings are sorted.

## Running an application

`Engine(window_system)` becomes the active engine (see
`Engine.get_instance()`) until `close()` is called or its `with` block ends.
Assign an `AppLoop` to `engine.app_loop` and call `engine.run()`; it blocks
until the loop's `should_run` becomes false, then calls `on_stop()`.
`NodeTree` opens a first window when it starts and, with
`stop_when_no_window` set, stops once every window is gone.

## What the package does not do

- It ships no concrete window backend. `Window` and `WindowSystem` are
  abstract: to run an `Engine` or a `NodeTree` you supply a `WindowSystem`
  subclass that implements `new_window()` and `update()`, and a `Window`
  subclass that implements every property.
- It draws nothing. `NodeTree.on_render` does nothing, and there is no
  renderer.
- The `res://` and `user://` protocols are known by name, but no handler
  comes with them, so paths using them cannot be served.
- `ResourceFileHandler` is only a base class; no concrete resource formats
  are included.