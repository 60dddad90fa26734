"""Casting rays from a camera through the pixels of an image plane."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, List, Optional, Sequence, TextIO, Tuple

from raysketch.ppm import PPM
from raysketch.vector import Vector3D

Color = Tuple[int, int, int]
WHITE: Color = (255, 255, 255)
PLANE_DEPTH = -20.0


def circle(x: int, y: int, r: int) -> int:
    """Implicit equation of a circle of radius r centred on the origin."""
    return x**2 + y**2 - r**2


def in_circle(x: int, y: int, r: int, func: Callable[[int, int, int], int]) -> bool:
    """Return whether (x, y) lies on or inside the shape described by func."""
    return func(x, y, r) <= 0


class CameraInfo:
    """A camera placed at origin, looking back towards the world origin."""

    def __init__(self, d: int, origin: Vector3D) -> None:
        self.d = d
        self.origin = origin
        self.o_unit = origin.normalize().scale(-1.0)


class Plane:
    """A grid of colours addressed by coordinates centred on the grid."""

    def __init__(self, w: int, h: int) -> None:
        self.w = w
        self.h = h
        self.origin = (h // 2, w // 2)
        self.data: List[List[Color]] = [[WHITE] * w for _ in range(h)]

    def _index(self, x: int, y: int) -> Optional[Tuple[int, int]]:
        yi = self.origin[0] - y
        xi = self.origin[1] + x
        if yi < 0 or xi < 0:
            raise ValueError(f"coordinates ({x}, {y}) map to a negative index")
        if yi >= len(self.data) or xi >= len(self.data[0]):
            print(f"Failed: ({x}, {y}) -> [{xi}][{yi}]", file=sys.stderr)
            return None
        return yi, xi

    def point(self, x: int, y: int) -> Optional[Color]:
        """Return the colour at (x, y), or None if it falls off the grid."""
        index = self._index(x, y)
        if index is None:
            return None
        yi, xi = index
        return self.data[yi][xi]

    def set_point(self, x: int, y: int, color: Color) -> None:
        """Set the colour at (x, y); IndexError if it falls off the grid."""
        index = self._index(x, y)
        if index is None:
            raise IndexError(f"coordinates ({x}, {y}) are outside the plane")
        yi, xi = index
        self.data[yi][xi] = color


def trace_rays(
    plane: Plane, camera: CameraInfo, err: Optional[TextIO] = None
) -> List[Tuple[int, int, Vector3D]]:
    """Compute the ray through every reachable plane point and report it."""
    out = sys.stderr if err is None else err
    half_w = plane.w // 2
    half_h = plane.h // 2
    rays = []
    for x in range(-half_w, half_w):
        for y in range(-half_h, half_h):
            if plane.point(x, y) is None:
                continue
            v1 = Vector3D(float(x), float(y), PLANE_DEPTH)
            v2 = v1.add(camera.o_unit.scale(float(camera.d)))
            ray = v2.sub(camera.origin)
            label = f"({x}, {y})"
            out.write(f"{label:>8} => {ray}\n")
            rays.append((x, y, ray))
    return rays


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Trace the sample scene and write the plane as a PPM image to stdout."""
    parser = argparse.ArgumentParser(
        prog="raysketch",
        description="Trace rays through an image plane and emit a PPM image.",
    )
    parser.parse_args(argv)

    w, h, d = 5, 10, 10
    plane = Plane(w, h)
    camera = CameraInfo(d, Vector3D(0.0, 0.0, PLANE_DEPTH))
    trace_rays(plane, camera, sys.stderr)

    image = PPM(w, h, plane.data)
    sys.stdout.flush()
    image.write(sys.stdout.buffer)
    return 0


if __name__ == "__main__":
    sys.exit(main())