"""3D vectors, binary PPM image output and a sketch of a ray-casting camera."""

__version__ = "0.1.0"
__all__ = ["ppm", "rt", "vector"]