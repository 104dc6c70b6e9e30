import itertools
from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple

import numpy as np


@dataclass
class Tile:
    """
    Rectangular block of the image. offset is the (row, col) of its top-left
    pixel, extent its (rows, cols). pixels holds rows * cols gamma-corrected
    colors in row-major order once the tile has been rendered.
    """
    index: int
    offset: Tuple[int, int]
    extent: Tuple[int, int]
    pixels: Optional[np.ndarray] = field(default=None, repr=False)
    render_time: float = 0.0

    @property
    def row(self) -> int:
        return self.offset[0]

    @property
    def col(self) -> int:
        return self.offset[1]

    @property
    def rows(self) -> int:
        return self.extent[0]

    @property
    def cols(self) -> int:
        return self.extent[1]

    @property
    def pixel_count(self) -> int:
        return self.rows * self.cols


class TileGrid:
    """Row-major partition of a height x width image. Edge tiles are clipped."""

    def __init__(self, height: int, width: int, tile_height: int, tile_width: int):
        if height < 1 or width < 1:
            raise ValueError(f"image must be at least 1x1, got {width}x{height}")
        if tile_height < 1 or tile_width < 1:
            raise ValueError(f"tile must be at least 1x1, got {tile_width}x{tile_height}")

        self.height = height
        self.width = width
        self.tile_height = tile_height
        self.tile_width = tile_width

        self.tiles_down = -(-height // tile_height)
        self.tiles_across = -(-width // tile_width)

    @property
    def tile_count(self) -> int:
        return self.tiles_down * self.tiles_across

    def tile(self, index: int) -> Tile:
        if not 0 <= index < self.tile_count:
            raise IndexError(f"tile index {index} out of range [0, {self.tile_count})")

        tile_row, tile_col = divmod(index, self.tiles_across)
        row = tile_row * self.tile_height
        col = tile_col * self.tile_width
        rows = min(self.tile_height, self.height - row)
        cols = min(self.tile_width, self.width - col)
        return Tile(index, (row, col), (rows, cols))

    def __len__(self) -> int:
        return self.tile_count

    def __iter__(self) -> Iterator[Tile]:
        for index in range(self.tile_count):
            yield self.tile(index)


class TileCursor:
    """
    Shared fetch-and-increment counter. Each index is handed out exactly once.

    next() on itertools.count runs without releasing the GIL, so concurrent
    claims never see the same value.
    """

    def __init__(self, start: int = 0):
        self._counter = itertools.count(start)

    def claim(self) -> int:
        return next(self._counter)
