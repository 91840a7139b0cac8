"""Binary PGM (P5) greyscale images and the filters applied to them."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum
from os import PathLike
from pathlib import Path
from typing import Union

_HEADER_FIELD = re.compile(rb"\s*(\S+)")

_BINARIZE = bytes(255 if v > 127 else 0 for v in range(256))
_INVERT = bytes(255 - v for v in range(256))
_BRIGHTEN = bytes(min(255, v + 50) for v in range(256))


class PGMError(ValueError):
    """Raised when data is not a readable binary PGM image."""


class FilterMode(IntEnum):
    """Filters that can be applied to an image."""

    BINARIZE = 0
    INVERT = 1
    BRIGHTEN = 2
    SHARPEN = 3


@dataclass
class GrayImage:
    """An 8-bit greyscale image stored as rows of bytes."""

    width: int = 0
    height: int = 0
    pixels: list[bytearray] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("image dimensions must not be negative")
        if not self.pixels:
            self.pixels = [bytearray(self.width) for _ in range(self.height)]
            return
        self.pixels = [bytearray(row) for row in self.pixels]
        if len(self.pixels) != self.height:
            raise ValueError(f"expected {self.height} rows, got {len(self.pixels)}")
        if any(len(row) != self.width for row in self.pixels):
            raise ValueError(f"every row must hold {self.width} pixels")

    def copy(self) -> GrayImage:
        """Return an independent copy of the image."""
        return GrayImage(self.width, self.height, [bytearray(r) for r in self.pixels])

    def _translate(self, table: bytes) -> None:
        for row in self.pixels:
            row[:] = row.translate(table)

    def binarize(self) -> None:
        """Set pixels above 127 to white and the rest to black."""
        self._translate(_BINARIZE)

    def invert(self) -> None:
        """Replace every pixel by its negative."""
        self._translate(_INVERT)

    def brighten(self) -> None:
        """Raise every pixel by 50, saturating at 255."""
        self._translate(_BRIGHTEN)

    def sharpen(self) -> None:
        """Apply a 3x3 Laplacian sharpening kernel; border pixels are kept."""
        source = [bytes(row) for row in self.pixels]
        for row, (up, mid, down) in zip(
            self.pixels[1:-1], zip(source, source[1:], source[2:])
        ):
            for x in range(1, self.width - 1):
                value = 5 * mid[x] - up[x] - down[x] - mid[x - 1] - mid[x + 1]
                row[x] = max(0, min(255, value))

    def apply(self, mode: Union[FilterMode, int]) -> None:
        """Apply the filter selected by ``mode``; unknown modes leave the image as is."""
        try:
            mode = FilterMode(mode)
        except ValueError:
            return
        {
            FilterMode.BINARIZE: self.binarize,
            FilterMode.INVERT: self.invert,
            FilterMode.BRIGHTEN: self.brighten,
            FilterMode.SHARPEN: self.sharpen,
        }[mode]()

    def to_bytes(self) -> bytes:
        """Encode the image as a binary PGM file with a maximum value of 255."""
        header = f"P5\n{self.width} {self.height}\n255\n".encode("ascii")
        return header + b"".join(self.pixels)


def parse_pgm(data: bytes) -> GrayImage:
    """Decode a binary PGM image.

    The maximum value is read but not used to rescale pixels. Missing pixel
    data at the end of the input is filled with zeros.
    """
    data = bytes(data)
    pos = 0

    def next_field() -> bytes:
        nonlocal pos
        match = _HEADER_FIELD.match(data, pos)
        if match is None:
            raise PGMError("unexpected end of PGM header")
        pos = match.end()
        return match.group(1)

    def next_int(name: str) -> int:
        text = next_field()
        try:
            value = int(text)
        except ValueError:
            raise PGMError(f"invalid {name} in PGM header: {text!r}") from None
        if value < 0:
            raise PGMError(f"negative {name} in PGM header")
        return value

    if next_field() != b"P5":
        raise PGMError("not a binary PGM (P5) image")
    width = next_int("width")
    height = next_int("height")
    next_int("maximum value")
    pos += 1  # the single whitespace byte ending the header

    size = width * height
    body = data[pos : pos + size].ljust(size, b"\0")
    rows = [bytearray(body[start : start + width]) for start in range(0, size, width or 1)]
    if width == 0:
        rows = [bytearray() for _ in range(height)]
    return GrayImage(width, height, rows)


def read_pgm(path: Union[str, PathLike]) -> GrayImage:
    """Read a binary PGM image from ``path``."""
    return parse_pgm(Path(path).read_bytes())


def write_pgm(image: GrayImage, path: Union[str, PathLike]) -> None:
    """Write ``image`` to ``path`` as a binary PGM file."""
    Path(path).write_bytes(image.to_bytes())