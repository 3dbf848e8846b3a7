# ghostmaze

This package is the simulation core of a first-person maze game. The player
walks a walled maze in the dark and carries a flashlight. Hundreds of ghosts
drift through the maze. When a ghost comes within 10 units of the player, the
player is sent back to the start. The flashlight shifts towards red as the
nearest ghost gets closer.

The package holds only game logic. It uses nothing outside the standard
library.

## Modules

### `ghostmaze.vectors`

- `Vec3` is an immutable vector. It supports `+`, `-`, scalar `*` and `/`, and
  unary `-`. Its methods are `dot`, `cross`, `length` and `normalized`.
  `normalized` raises `ValueError` for a zero-length vector.
- `identity()`, `translate(matrix, offset)` and `rotate(matrix, angle, axis)`
  build 4×4 matrices. A matrix is stored as a tuple of four columns. The angle
  is given in radians.

### `ghostmaze.collisions`

`segment_hits_triangle(start, stop, p1, p2, p3)` reports whether the segment
crosses the surface patch spanned by the triangle's two edges at `p1`.

### `ghostmaze.config`

- `Config` holds string values read from a flat, line-oriented, JSON-like file.
- `Config.load(path)` reads the file. Later keys override earlier ones.
  - It returns the number of values held afterwards.
  - It raises `OSError` when the file cannot be opened.
- `get_float`, `get_int` and `get_string` return a stored value, or the
  default when the key is missing. `get_float` and `get_int` also return the
  default when the value does not start with a number.
- `parse_line(line)` returns the `(key, value)` pair on one line, or `None`.

### `ghostmaze.maze`

- `parse_maze(text)` and `load_maze(path)` build a `Maze`.
- A `Maze` has four fields: `start_position`, `start_yaw`, a tuple of `walls`
  and a `floor`. Each wall and the floor is a `Wall`.
- Short data, an entry that is not a number, or a negative wall count raises
  `ValueError`.
- `Maze.bounds()` returns `(xmin, xmax, zmin, zmax)` over the wall vertices.
- `Wall.normal` is the normal of the wall's first vertex.
- `Wall.vertex_data` gives the interleaved floats in the order the file lists
  them.

### `ghostmaze.ghost`

A `Ghost` stays inside an x/z box and keeps its own random generator.

- `apply_movement(current_time, elapsed)` moves it:
  - it bobs around a height of 2.5;
  - it drifts along its heading;
  - it picks a new random heading when it reaches the edge of its box.
- `model_matrix(camera_pos)` returns a placement that keeps its billboard
  turned towards the camera.
- `reverse_direction_from(target)` points its heading away from `target`.
- `regenerate_position()` moves it to a new random spot inside its box.
- `rand_float(rng, low, high)` draws a uniform value from `rng`.

### `ghostmaze.player`

`Player` holds the state of the player:

- position, velocity, `yaw` and `pitch`, both in degrees;
- field of view `fov`;
- `camera_pos`, `camera_front` and `camera_up`;
- `light_pos` and `light_front` for the flashlight, which lags behind the view.

Its methods:

- `mouse_moved(x, y)` turns the view. Pitch is clamped to ±89°.
- `scrolled(offset)` zooms. The field of view is kept between 1° and 90°.
- `process_input(keys)` sets the velocity from a `Keys` snapshot. The snapshot
  has `forward`, `back`, `left`, `right`, `jump` and `quit`. Input is ignored
  while the player is in the air.
- `apply_movement(elapsed)` moves the player. It applies gravity and stops
  movement into walls.
- `reset_position(start, yaw)` puts the player back at `start`, facing `yaw`.

### `ghostmaze.world`

`World(maze, ghost_count=800, rng=None)` places its ghosts at more than 30
units from the start. It raises `ValueError` when the maze bounds leave no room
for them.

Each call to `step(current_time, keys)` advances one frame:

1. The first call only starts the clock and returns `False`. Every later call
   returns `True`.
2. `keys.quit` clears `running`.
3. The ghosts are sorted by distance to the player.
4. `light_color` is set from the nearest ghost.
5. The nearest fifth of the ghosts, plus one, are moved and collected in
   `visible_ghosts` with their model matrices.
6. A ghost within 10 units catches the player. A ghost within 30 units of the
   start turns away from it.
7. The player is moved.

Other attributes:

- `fps` holds the frame count of the last full second.
- `trail` is a `Trail` that keeps up to 500 `(position, yaw)` markers. One
  marker is added per second.
- `nearest_ghost_distance()` returns the distance from the player to the
  closest ghost.

`flashlight_color(distance)` blends from the normal colour at 30 units or more
to a red-shifted colour at 10 units or less.

## Example

```python
from ghostmaze.maze import load_maze
from ghostmaze.player import Keys
from ghostmaze.world import World

world = World(load_maze("maze.txt"))
t = 0.0
while world.running and t < 5.0:
    world.step(t, Keys(forward=True))
    t += 1 / 60
print(world.player.position, world.nearest_ghost_distance())
```

## Maze files

A maze file is plain whitespace-separated numbers, in this order:

1. The start pose: `x y z yaw`.
2. The number of walls.
3. For each wall, six vertices of the form `x y z nx ny nz`. These make two
   triangles with their normals.
4. Six vertices of the same form for the floor.

## Configuration files

Settings are read one per line. The reader ignores:

- blank lines;
- lines starting with `{`, `}`, `/` or `*`;
- lines without a colon.

Quotes around keys and values are removed, and so are trailing commas.

```json
{
    "camera_speed": 20.0
}
```

## What it does not do

- There is no rendering, window, audio or input handling. A front end must:
  - draw the walls, the floor, the ghosts, the trail and the FPS counter from
    the state this package exposes;
  - turn its own keyboard, mouse and scroll events into `Keys`,
    `mouse_moved` and `scrolled`.
- There is no command to start a game.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.