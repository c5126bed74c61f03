# cubcaster

Tools for reading and checking `.cub` scene files, plus the geometry,
drawing and player-state pieces of a grid-world raycaster. Plain Python,
no third-party dependencies.

## The scene file

A `.cub` file starts with eight elements, in any order, separated by any
number of empty lines:

- `R <width> <height>` – resolution, each positive, at most 2560 by 1440
- `NO`, `SO`, `WE`, `EA <path>` – wall textures; each file must be openable
- `S <path>` – sprite texture; the file must be openable
- `F r,g,b` and `C r,g,b` – floor and ceiling colours, each component 0–255
  (components may be separated by commas or spaces)

The map follows: rows of `0`, `1`, `2`, spaces and one player start
(`N`, `S`, `E` or `W`). Tabs are expanded to four spaces. The map needs at
least three rows, its first row may hold only walls and spaces, every
inside cell must be surrounded on all eight sides by non-space cells, and
there must be exactly one player.

## Installing

```
pip install .
```

## Command line

```
cubcaster maps/level.cub
```

On success it prints a one-line summary, for example
`maps/level.cub: 640x480, map 12x8, player N`, and exits with 0. If the
name does not end in `.cub`, or the file is rejected, it prints `Error`
and a description of the problem to standard error and exits with 1.
Missing or wrong arguments print a short message and exit with 2.

```
cubcaster maps/level.cub --save
```

With `--save` as the second argument the file is checked in the same way
(without the `.cub` name check); no image is written.

## Library use

```python
from cubcaster.config import is_cub_filename, load_cub
from cubcaster.errors import CubError

try:
    config = load_cub("maps/level.cub")
except CubError as error:
    print(error.kind, error)
else:
    print(config.resolution, config.floor, config.map.player)
```

`parse_cub(lines)` does the same from a list of lines already read.

Modules:

- `cubcaster.config` – `CubConfig`, `load_cub`, `parse_cub`,
  `parse_resolution`, `parse_color`, `parse_texture_path`, `is_cub_filename`
- `cubcaster.mapcheck` – `validate_map`, `MapInfo`, `is_wall_row`,
  `is_row_closed`
- `cubcaster.extract` – `extract_lines`, `expand_tabs`, `is_map_line`,
  `is_element_line`
- `cubcaster.errors` – `CubError` and the `ErrorKind` enum
- `cubcaster.geometry` – `Segment`, `normalize_angle`, wall, sprite and
  floor texture offsets, on-screen wall and sprite segments
- `cubcaster.raster` – an `Image` pixel buffer and routines to draw
  segments, textured wall and sprite columns, the ceiling, the floor, a
  minimap and a weapon overlay
- `cubcaster.player` – `Player` (key presses and releases, turning,
  stepping with a wall test you supply, the five-frame attack animation),
  `Key` codes and `ray_facing`
- `cubcaster.linereader` – `iter_lines`, chunked line reading from a stream
- `cubcaster.strutil` – small C-style string helpers (`atoi`, `strncmp`, …)

## What it does not do

There is no game window, event loop or screen output, and `--save` does
not write a screenshot. Texture files are only checked for being readable;
they are not decoded into images. There is no wall-intersection ray caster
and no sprite tracking: the drawing routines take distances, columns and
textures that the caller works out.

## Tests

```
pip install .[test]
pytest
```