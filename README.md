# raysketch

The first pieces of a ray tracer:

- `raysketch.vector.Vector3D`: an immutable 3D vector of floats.
- `raysketch.ppm.PPM`: a binary (`P6`) PPM image with 8-bit channels.
- `raysketch.rt`: an image plane, a camera, and a routine that computes the
  ray from the camera through each point of the plane.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Vectors

`Vector3D(x, y, z)` is a frozen dataclass, so vectors compare by value and
can be used as dictionary keys.

```python
from raysketch.vector import Vector3D

a = Vector3D(1.0, 2.0, 0.0)
b = Vector3D(3.0, -2.0, 1.0)

a.add(b)          # same as a + b  -> Vector3D(4.0, 0.0, 1.0)
a.sub(b)          # same as a - b  -> Vector3D(-2.0, 4.0, -1.0)
a.scale(2.0)      # same as a * 2.0 or 2.0 * a
a.mult(b)         # same as a * b, component-wise -> Vector3D(3.0, -4.0, 0.0)
a.dot(b)          # -1.0
a.cross(b)        # Vector3D(2.0, -1.0, -8.0)
a.magnitude()     # sqrt(5)
a.normalize()     # unit vector in the same direction
print(a.add(b))   # [ 4, 0, 1 ]
```

`str()` writes each component in its shortest exact decimal form, with no
exponent and no trailing `.0`. Normalising the zero vector gives a vector of
NaNs.

## Images

`PPM(w, h, data)` takes the width, the height and rows of `(r, g, b)`
triples, each channel a value from 0 to 255. The maximum colour value is
always 255.

```python
import sys
from raysketch.ppm import PPM

rows = [[(255, 0, 0), (0, 255, 0)], [(0, 0, 255), (255, 255, 255)]]
image = PPM(2, 2, rows)

image.header()    # "P6\n2 2 255\n"
image.to_bytes()  # header followed by the pixel bytes, row by row
image.write(sys.stdout.buffer)  # writes the bytes and flushes the stream
```

## Plane, camera and rays

`raysketch.rt` provides:

- `Plane(w, h)`: an `h` by `w` grid of colours, all white at first,
  addressed by coordinates centred on the grid (y grows upwards).
  `point(x, y)` returns the colour there, or `None` after printing a
  `Failed: ...` line to standard error when the point lies past the bottom
  or right edge; `set_point(x, y, color)` changes it and raises `IndexError`
  in that case. Coordinates past the top or left edge raise `ValueError`.
  The rows are in `plane.data`, ready to hand to `PPM`.
- `CameraInfo(d, origin)`: a camera at `origin` at distance `d`, with
  `o_unit` the unit vector pointing from `origin` back towards the world
  origin.
- `trace_rays(plane, camera, err=None)`: for each point of the plane that
  can be reached, computes a ray, writes a line such as
  `(-2, -4) => [ -2, -4, -10 ]` to `err` (standard error by default), and
  returns the list of `(x, y, ray)` tuples.
- `circle(x, y, r)` and `in_circle(x, y, r, func)`: the implicit equation of
  a circle centred on the origin, and a test of whether a point lies on or
  inside the shape a given equation describes.

## The command

```
raysketch > out.ppm
```

builds a 5 by 10 plane and a camera at `(0, 0, -20)`, prints every point of
the plane with its ray to standard error, and writes the plane as a PPM image
to standard output. The command takes no options besides `--help`.

## What it does not do

Nothing is rendered yet: no ray is intersected with any object and no pixel
is coloured, so the image the command writes is plain white. The circle
helpers are not used by the command.