from pathlib import Path

import numpy as np
from PIL import Image

from render_server.tiles import Tile
from util.color import color, write_color


def to_uint8(buffer: np.ndarray) -> np.ndarray:
    """Gamma-corrected float colors to bytes: int(256 * c), clamped to [0, 255]."""
    scaled = np.floor(np.nan_to_num(buffer, nan=0.0) * 256.0)
    return np.clip(scaled, 0, 255).astype(np.uint8)


class ImageAssembler:
    """Places tiles, in whatever order they arrive, into one (H, W, 3) buffer."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.buffer = np.zeros((height, width, 3), dtype=np.float64)
        self.coverage = np.zeros((height, width), dtype=np.int32)
        self.tiles_placed = 0

    def place(self, tile: Tile):
        if tile.pixels is None:
            raise ValueError(f"tile {tile.index} has not been rendered")
        row, col = tile.offset
        rows, cols = tile.extent
        if row + rows > self.height or col + cols > self.width:
            raise ValueError(f"tile {tile.index} at {tile.offset} size {tile.extent} "
                             f"does not fit a {self.width}x{self.height} image")

        self.buffer[row:row + rows, col:col + cols] = tile.pixels.reshape(rows, cols, 3)
        self.coverage[row:row + rows, col:col + cols] += 1
        self.tiles_placed += 1

    def complete(self) -> bool:
        """True when every pixel was written exactly once."""
        return bool(np.all(self.coverage == 1))

    def to_uint8(self) -> np.ndarray:
        return to_uint8(self.buffer)

    def write_ppm(self, path):
        """Write the image as ASCII PPM (P3)."""
        with open(path, 'w') as f:
            f.write(f"P3\n{self.width} {self.height}\n255\n")
            for h in range(self.height):
                for w in range(self.width):
                    r, g, b = self.buffer[h, w]
                    write_color(f, color(float(r), float(g), float(b)))

    def save(self, path):
        """PPM for a .ppm path, otherwise whatever format Pillow picks from the extension."""
        if Path(path).suffix.lower() == '.ppm':
            self.write_ppm(path)
        else:
            Image.fromarray(self.to_uint8()).save(path)
