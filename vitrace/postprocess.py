"""Tone mapping and denoising filters applied to a finished image."""

from __future__ import annotations

from typing import Callable, Sequence

from .rgb import RGB
from .vector import EPSILON


def reinhard_tone_map(pixels: Sequence[RGB]) -> list[RGB]:
    """Compress each colour by its luminance: C / (1 + Y)."""
    return [c / (1.0 + c.luminance()) for c in pixels]


def _window_filter(
    width: int,
    height: int,
    pixels: Sequence[RGB],
    half: int,
    reduce: Callable[[list[float]], float],
) -> list[RGB]:
    pixels = list(pixels)
    if len(pixels) != width * height:
        raise ValueError(f"expected {width * height} pixels, got {len(pixels)}")
    out = list(pixels)
    offsets = [(u, v) for v in range(-half, half + 1) for u in range(-half, half + 1)]
    for y in range(half, height - half):
        for x in range(half, width - half):
            c_in = pixels[y * width + x]
            l_in = c_in.luminance()
            if abs(l_in) < EPSILON:
                continue
            window = [pixels[(y + v) * width + x + u].luminance() for u, v in offsets]
            out[y * width + x] = c_in * reduce(window) / l_in
    return out


def box_filter(width: int, height: int, pixels: Sequence[RGB]) -> list[RGB]:
    """Rescale each pixel to the mean luminance of its 3x3 neighbourhood.

    Pixels on the one-pixel border are passed through unchanged.
    """
    return _window_filter(width, height, pixels, 1, lambda w: sum(w) / len(w))


def median_filter(width: int, height: int, pixels: Sequence[RGB]) -> list[RGB]:
    """Rescale each pixel to the median luminance of its 5x5 neighbourhood.

    Pixels on the two-pixel border are passed through unchanged.
    """
    return _window_filter(width, height, pixels, 2, lambda w: sorted(w)[len(w) // 2])