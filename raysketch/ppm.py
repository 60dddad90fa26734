"""Binary PPM (P6) images."""

from __future__ import annotations

from typing import BinaryIO, Iterable, Sequence, Tuple

Color = Tuple[int, int, int]


class PPM:
    """A P6 image with 8-bit colour channels, stored row by row."""

    MAGIC = "P6"
    MAX_COLOR_VALUE = 255

    def __init__(self, w: int, h: int, data: Iterable[Sequence[Color]]) -> None:
        self.w = w
        self.h = h
        self.data = tuple(tuple(row) for row in data)

    def header(self) -> str:
        """Return the textual header of the image."""
        return f"{self.MAGIC}\n{self.w} {self.h} {self.MAX_COLOR_VALUE}\n"

    def to_bytes(self) -> bytes:
        """Return the whole image: header followed by RGB pixel bytes."""
        pixels = bytes(
            channel for row in self.data for pixel in row for channel in pixel
        )
        return self.header().encode("ascii") + pixels

    def write(self, stream: BinaryIO) -> None:
        """Write the image to a binary stream and flush it."""
        stream.write(self.to_bytes())
        stream.flush()