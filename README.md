# terrainkit

Procedural terrain generation on NumPy arrays. Heightmaps are 2-D `float32`
arrays, usually scaled into the range 0..1.

## Modules

- `terrainkit.diamond_square.DiamondSquare`: fractal heightmaps with the
  diamond-square algorithm. `generate(n, corners=None, decay=0.5, seed=-1,
  normalized=True)` needs a side length of `2**x + 1`; omitted corners are
  drawn uniformly from [-1, 1). A positive seed makes the result reproducible.
- `terrainkit.voronoi.Voronoi`: cell-based heightmaps. Each pixel's height is
  a weighted sum (one coefficient per nearest point) of squared distances to
  its nearest feature points. Points can be given as `(x, y)` pairs or
  generated from a count, optionally spread apart (`regularize`).
  `binary_mask`, `shift_height_mask` and `set_weights` scale the regions;
  `draw_points` marks the points in a float32 image.
- `terrainkit.thermal_erosion.ThermalErosion` and
  `terrainkit.fast_erosion.FastErosion`: talus-angle erosion that moves
  material downhill in place.
- `terrainkit.hydraulic_erosion.HydraulicErosion`: water-based erosion with
  `rain`, `erode`, `transfer` and `evaporate` steps, run together by `apply`.
  `normalized_watermap()` and `normalized_sedimentmap()` give viewable maps.
- `terrainkit.evaluator`: `slope_map(heightmap)` and `Evaluator`, which
  exposes `slope_map`, `accessibility_map`, `unit_map`, `flatness_map`,
  `building_map` and `erosion_score` (slope standard deviation over mean, or
  -1 for a flat map).
- `terrainkit.kernel`: `KernelType` (`MOORE`, `VON_NEUMANN`, `VON_NEUMANN2`),
  `neighbours`, `move_material` and the `Kernel` base class.
- `terrainkit.pipeline`: `combine`, `diamond_square_heightmap`,
  `voronoi_heightmap` (returns the heightmap and its points), `thermal_erode`
  and `fast_erode`.
- `terrainkit.rng`: `make_generator(seed)` and a `Random` class drawing from a
  chosen uniform-integer, uniform-real or normal distribution.
- `terrainkit.utils`: `average`, `total`, `point_in_range` and `normalize`.

## Installing

```
pip install .
```

## Example

```python
from terrainkit.kernel import KernelType
from terrainkit.pipeline import combine, diamond_square_heightmap, voronoi_heightmap
from terrainkit.thermal_erosion import ThermalErosion

n = 2 ** 7 + 1
base = diamond_square_heightmap(n, 0.5, 1337)
cells, points = voronoi_heightmap(n, 20, [-1.0, 1.0], 1337)
terrain = combine(base, cells, 0.67)

ThermalErosion(KernelType.MOORE).apply(terrain, 5)
```

## Command line

```
terrainkit 6
```

This generates a diamond-square heightmap with side length `2**6 + 1` and
saves it as `examples/65x65.png`. The exponent must be between 2 and 12 and
defaults to 2 (a 5×5 map). Options: `--persistence` (roughness decay, default
0.5), `--seed` (positive for a reproducible map) and `--output-dir`.

## What it does not do

The command only writes a PNG file; it does not open a window to show the
heightmap. The package has no interactive viewer and draws nothing on screen.

## Tests

```
pip install .[test]
pytest
```