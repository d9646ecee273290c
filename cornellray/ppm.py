"""Plain-text PPM (P3) image output."""

from __future__ import annotations

import os
from typing import Sequence

Pixel = Sequence[int]
Image = Sequence[Sequence[Pixel]]


def format_ppm(image: Image) -> str:
    """Render rows of (r, g, b) pixels as P3 text, one image row per line."""
    height = len(image)
    width = len(image[0]) if height else 0
    lines = [f"P3\n{width} {height}\n255\n"]
    for row in image:
        if len(row) != width:
            raise ValueError("all rows must have the same width")
        parts = []
        for pixel in row:
            if len(pixel) != 3:
                raise ValueError("pixels must have three channels")
            for channel in pixel:
                if not 0 <= channel <= 255:
                    raise ValueError(f"channel value {channel} outside 0..255")
            parts.append("{} {} {} ".format(*pixel))
        lines.append("".join(parts) + "\n")
    return "".join(lines)


def write_ppm(path: str | os.PathLike[str], image: Image) -> None:
    """Write ``image`` to ``path`` as a P3 file."""
    with open(path, "wb") as handle:
        handle.write(format_ppm(image).encode("ascii"))