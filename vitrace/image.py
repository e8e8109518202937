"""In-memory frame buffers and binary PPM (P6) files."""

from __future__ import annotations

import os
from pathlib import Path

from .postprocess import reinhard_tone_map
from .rgb import RGB

_WHITESPACE = b" \t\n\r\v\f"


class Image:
    """A width x height grid of RGB values, initially black."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        if width < 0 or height < 0:
            raise ValueError("image dimensions must not be negative")
        self.width = width
        self.height = height
        self.pixels: list[RGB] = [RGB()] * (width * height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.width + x

    def get(self, x: int, y: int) -> RGB:
        """The pixel at (x, y); black outside the image."""
        try:
            return self.pixels[self._index(x, y)]
        except IndexError:
            return RGB()

    def set(self, x: int, y: int, rgb: RGB) -> None:
        self.pixels[self._index(x, y)] = rgb

    def add(self, x: int, y: int, rgb: RGB) -> None:
        i = self._index(x, y)
        self.pixels[i] = self.pixels[i] + rgb

    def divide(self, x: int, y: int, alpha: float) -> None:
        i = self._index(x, y)
        self.pixels[i] = self.pixels[i] / alpha


def _to_byte(value: float) -> int:
    return int(max(min(1.0, value), 0.0) * 255)


def _next_token(data: bytes, pos: int) -> tuple[bytes, int]:
    while pos < len(data) and data[pos] in _WHITESPACE:
        pos += 1
    start = pos
    while pos < len(data) and data[pos] not in _WHITESPACE:
        pos += 1
    return data[start:pos], pos


class ImagePPM(Image):
    """An image that can be written to and read from binary PPM files."""

    def to_bytes(self) -> bytes:
        """Tone-map, clamp and encode the image as a P6 file."""
        if self.width == 0 or self.height == 0:
            raise ValueError("can't save an empty image")
        header = f"P6\n{self.width} {self.height}\n255\n".encode("ascii")
        body = bytes(
            _to_byte(channel)
            for colour in reinhard_tone_map(self.pixels)
            for channel in colour
        )
        return header + body

    def save(self, filename: str | os.PathLike[str]) -> None:
        Path(filename).write_bytes(self.to_bytes())

    @classmethod
    def load(cls, filename: str | os.PathLike[str]) -> ImagePPM:
        """Read a P6 file; channel bytes are scaled to [0, 1]."""
        data = Path(filename).read_bytes()
        magic, pos = _next_token(data, 0)
        if magic != b"P6":
            raise ValueError(f"can't read input texture file: {filename} (wrong format)")
        try:
            width_tok, pos = _next_token(data, pos)
            height_tok, pos = _next_token(data, pos)
            _maxval, pos = _next_token(data, pos)
            width, height = int(width_tok), int(height_tok)
        except ValueError as exc:
            raise ValueError(f"can't read input texture file: {filename} (bad header)") from exc

        newline = data.find(b"\n", pos, pos + 256)
        pos = newline + 1 if newline != -1 else min(pos + 256, len(data))

        raster = data[pos:pos + 3 * width * height]
        if len(raster) < 3 * width * height:
            raise ValueError(f"can't read input texture file: {filename} (truncated data)")

        image = cls(width, height)
        channels = iter(raster)
        image.pixels = [
            RGB(r / 255.0, g / 255.0, b / 255.0) for r, g, b in zip(channels, channels, channels)
        ]
        return image