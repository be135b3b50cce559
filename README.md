# bulletbalance

A small simulation of circles on a plane, built on a minimal entity-component
registry. On the first frame ten gray circles of radius 10 are created in a
diagonal row; every other one is given a velocity to the right. Each frame the
moving circles advance, a spatial hash finds circles that overlap a neighbour
and colours them yellow (all others gray), and the scene is drawn with pygame
together with the current frame rate.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Running

```
bulletbalance
```

This opens a window and runs until it is closed. Options:

- `--width`, `--height`: window size in pixels (default 800 x 450)
- `--fps`: frame-rate cap (default 60)
- `--title`: window title (default `test window`)
- `--hotload`: pressing `R` leaves the current game interface and binds a
  fresh one to the same state

Width, height and fps must be positive integers.

## Using the pieces

- `bulletbalance.components`: the immutable `Vector2` (with `+`, `-`, scalar
  `*` and `distance_sqr`) and `Color` (RGBA, channels 0-255, with `GRAY`,
  `YELLOW`, `RAYWHITE` and `BLACK`), plus the `Position`, `Velocity`, `Radius`
  and `DrawColor` components.
- `bulletbalance.registry.Registry`: `create()` makes an entity id,
  `emplace(entity, component)` attaches one component per type (a second of
  the same type raises `ValueError`), `has`, `get(entity, *types)` and
  `view(*types)`, which yields `(entity, *components)` for every entity that
  has all the given types.
- `bulletbalance.spatial_hash.SpatialHash(spacing, max_objects)`:
  `create(registry)` rebuilds the table from every entity with a `Position`
  (more than `max_objects` raises `ValueError`); `query(position, distance)`
  returns the entities stored in every cell touched by the square of that
  half-width around the position. These are candidates only; callers check the
  real distance.
- `bulletbalance.state.State`: tick counter, registry and spatial hash.
- `bulletbalance.game`: `create_state`, `free_state`, `setup_entities`,
  `move`, `detect_overlaps`, `draw` and `update`. `update` runs the setup on
  tick 0, then moves, detects overlaps and draws only when given a surface.
- `bulletbalance.hotload`: `GameInterface` exposes `initialize`, `update`,
  `release`, `enter` and `leave`; `Instance` drives one through
  `initialize`, `update`, `reload` and `terminate`, and can be used as a
  context manager.

```python
from bulletbalance import game

state = game.create_state()
game.update(state, 1 / 60)   # no surface: logic only, nothing is drawn
```

## What it does not do

`Instance.reload` creates a new interface object from the same factory; it does
not reload any code from disk, so edits to the game logic take effect only
after a restart. There is no browser build.

## Tests

```
pytest
```