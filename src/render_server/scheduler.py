"""
Tile scheduler: a fixed pool of worker threads pulls tile indices from a
shared cursor, renders each tile into its own buffer and hands it to the
single consumer through a bounded channel.

    scheduler = TileScheduler(scene, cam, workers=4, seed=123)
    for tile in scheduler.render():
        assembler.place(tile)

Each tile draws from its own PRNG stream (the base stream advanced by
index + 1 short jumps), so the image depends only on the seed and never on
which worker rendered which tile.
"""

import logging
import queue
import threading
import time
from typing import Iterator, List, Optional

import numpy as np

from core.integrator import sample_pixel
from core.scene import Scene
from render_server.channel import TileChannel, ChannelClosed
from render_server.config import (
    DEFAULT_TILE_SIZE,
    CHANNEL_CAPACITY,
    POLL_INTERVAL,
    resolve_workers,
    resolve_seed,
    resolve_tile_size,
)
from render_server.tiles import Tile, TileGrid, TileCursor
from util.rng import rng

logger = logging.getLogger(__name__)


class RenderError(RuntimeError):
    """A render worker failed. The original exception is chained as __cause__."""


class TileScheduler:
    def __init__(self, scene: Scene, cam, tile_size=DEFAULT_TILE_SIZE,
                 workers: Optional[int] = None, seed: Optional[int] = None,
                 capacity: int = CHANNEL_CAPACITY):
        self.scene = scene
        self.cam = cam
        if not cam.initialized:
            cam.initialize()

        tile_rows, tile_cols = resolve_tile_size(tile_size)
        self.grid = TileGrid(cam.img_height, cam.img_width, tile_rows, tile_cols)
        self.workers = resolve_workers(workers)
        self.seed = resolve_seed(seed)
        self.capacity = capacity

        self.streams = self._tile_streams()

        self._channel: Optional[TileChannel] = None
        self._errors: List[BaseException] = []
        self._errors_lock = threading.Lock()

    @property
    def tile_count(self) -> int:
        return self.grid.tile_count

    def _tile_streams(self) -> List[rng]:
        base = rng.from_seed(self.seed) if self.seed is not None else rng.from_entropy()
        streams = []
        stream = base
        for _ in range(self.grid.tile_count):
            stream = stream.copy().short_jump()
            streams.append(stream)
        return streams

    def render_tile(self, index: int, channel: Optional[TileChannel] = None) -> Tile:
        """
        Render one tile into a fresh buffer. When a channel is given, a close
        observed between rows abandons the tile with ChannelClosed.
        """
        tile = self.grid.tile(index)
        stream = self.streams[index].copy()
        pixels = np.empty((tile.pixel_count, 3), dtype=np.float64)

        start = time.time()
        k = 0
        for j in range(tile.rows):
            if channel is not None and channel.closed:
                raise ChannelClosed()
            row = tile.row + j
            for i in range(tile.cols):
                c = sample_pixel(stream, self.cam, row, tile.col + i, self.scene)
                pixels[k] = (c.x, c.y, c.z)
                k += 1

        tile.pixels = pixels
        tile.render_time = time.time() - start
        return tile

    def _worker(self, cursor: TileCursor, channel: TileChannel):
        rendered = 0
        try:
            while not channel.closed:
                index = cursor.claim()
                if index >= self.grid.tile_count:
                    break
                tile = self.render_tile(index, channel)
                channel.send(tile)
                rendered += 1
        except ChannelClosed:
            logger.debug("%s stopping: channel closed", threading.current_thread().name)
        except Exception as exc:
            logger.exception("%s failed", threading.current_thread().name)
            with self._errors_lock:
                self._errors.append(exc)
        logger.debug("%s finished after %d tiles", threading.current_thread().name, rendered)

    def render(self) -> Iterator[Tile]:
        """
        Yield finished tiles in completion order. Leaving the loop early
        cancels the render; workers are joined before this returns.
        """
        channel = TileChannel(self.capacity)
        cursor = TileCursor()
        self._channel = channel
        self._errors = []

        threads = [
            threading.Thread(target=self._worker, args=(cursor, channel),
                             name=f"render-worker-{n}", daemon=True)
            for n in range(self.workers)
        ]
        logger.info("Rendering %d tiles (%dx%d) on %d workers, seed=%s",
                    self.grid.tile_count, self.grid.tile_width, self.grid.tile_height,
                    self.workers, self.seed)
        for t in threads:
            t.start()

        delivered = 0
        try:
            while delivered < self.grid.tile_count and not channel.closed:
                if self._errors:
                    break
                try:
                    tile = channel.recv(timeout=POLL_INTERVAL)
                except queue.Empty:
                    if not any(t.is_alive() for t in threads) and len(channel) == 0:
                        break
                    continue
                delivered += 1
                yield tile
        finally:
            channel.close()
            for t in threads:
                t.join()
            self._channel = None
            if delivered < self.grid.tile_count:
                logger.info("Render stopped after %d/%d tiles", delivered, self.grid.tile_count)
            else:
                logger.debug("All %d tiles delivered", delivered)

        if self._errors:
            raise RenderError(f"render worker failed: {self._errors[0]!r}") from self._errors[0]

    def cancel(self):
        """Stop the render in progress. Safe to call from any thread."""
        channel = self._channel
        if channel is not None:
            channel.close()
