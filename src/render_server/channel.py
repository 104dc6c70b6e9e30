import queue
import threading
from typing import Optional

from render_server.config import POLL_INTERVAL
from render_server.tiles import Tile


class ChannelClosed(Exception):
    """The receiving side has gone away. Senders should stop quietly."""


class TileChannel:
    """
    Bounded many-producer, single-consumer hand-off of finished tiles.

    send() blocks while the channel is full. Closing is done by the receiver:
    it wakes blocked senders (they raise ChannelClosed) and drops any tiles
    still queued.
    """

    def __init__(self, capacity: int = 1, poll_interval: float = POLL_INTERVAL):
        if capacity < 1:
            raise ValueError(f"channel capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self.poll_interval = poll_interval
        self._queue = queue.Queue(maxsize=capacity)
        self._closed = threading.Event()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def send(self, tile: Tile):
        while not self._closed.is_set():
            try:
                self._queue.put(tile, timeout=self.poll_interval)
            except queue.Full:
                continue
            if self._closed.is_set():
                # raced with close(), nobody will receive it
                self._drain()
                break
            return
        raise ChannelClosed()

    def recv(self, timeout: Optional[float] = None) -> Tile:
        """Next finished tile. Raises queue.Empty if none arrives within timeout."""
        return self._queue.get(timeout=timeout)

    def close(self):
        self._closed.set()
        self._drain()

    def _drain(self):
        while True:
            try:
                self._queue.get_nowait()
            except queue.Empty:
                break

    def __len__(self) -> int:
        return self._queue.qsize()
