"""
Live Preview: Tkinter-based window that shows tiles as they finish.
"""

import tkinter as tk
from typing import Callable, Optional

import numpy as np
from PIL import Image, ImageTk

from render_server.image import to_uint8
from render_server.tiles import Tile


class LivePreview:
    """
    Live preview window fed with finished tiles.

    Usage:
        preview = LivePreview(width, height, on_close=scheduler.cancel)
        preview.start()

        # During rendering:
        preview.update(tile, tiles_done, tile_count)
        preview.process_events()

        # After rendering:
        preview.finish()  # Keeps window open until user closes
    """

    def __init__(self, width: int, height: int, title: str = "Path Tracer - Live Preview",
                 on_close: Optional[Callable[[], None]] = None):
        self.width = width
        self.height = height
        self.title = title
        self.on_close = on_close

        self.window = None
        self.canvas = None
        self.label = None
        self.photo = None
        self.image_item = None
        self.pixels = np.zeros((height, width, 3), dtype=np.uint8)
        self.is_finished = False
        self.closed = False

    def start(self):
        """Initialize and show the preview window"""
        self.window = tk.Tk()
        self.window.title(self.title)
        self.window.protocol("WM_DELETE_WINDOW", self._handle_close)

        self.canvas = tk.Canvas(self.window, width=self.width, height=self.height)
        self.canvas.pack()
        self.photo = ImageTk.PhotoImage(Image.fromarray(self.pixels))
        self.image_item = self.canvas.create_image(0, 0, anchor=tk.NW, image=self.photo)

        self.label = tk.Label(self.window, text="Rendering...", font=("Courier", 10))
        self.label.pack()

        # Don't block - just update
        self.window.update()

    def update(self, tile: Tile, tiles_done: int, tile_count: int):
        """Paste one finished tile into the displayed image."""
        if self.window is None or self.is_finished:
            return

        self.pixels[tile.row:tile.row + tile.rows, tile.col:tile.col + tile.cols] = \
            self.buffer_to_image(tile.pixels.reshape(tile.rows, tile.cols, 3))

        # swap the image on the one canvas item, keeping a reference so Tk
        # does not drop the photo
        self.photo = ImageTk.PhotoImage(Image.fromarray(self.pixels))
        self.canvas.itemconfigure(self.image_item, image=self.photo)

        progress = (tiles_done / tile_count) * 100
        self.label.config(text=f"Tile {tiles_done}/{tile_count} ({progress:.1f}%)")

    def process_events(self):
        """Process pending Tkinter events. Call after every tile."""
        if self.window is not None and not self.is_finished:
            try:
                self.window.update()
            except tk.TclError:
                # Window was destroyed underneath us
                self._mark_closed()

    def finish(self):
        """Mark rendering complete and keep window open for viewing"""
        if self.window is None:
            return

        self.is_finished = True
        self.label.config(text="Rendering Complete - Close window when done")
        self.window.mainloop()

    def close(self):
        """Close the preview window"""
        if self.window is not None:
            self.window.destroy()
            self.window = None

    def _handle_close(self):
        window = self.window
        self._mark_closed()
        if window is not None:
            window.destroy()

    def _mark_closed(self):
        self.window = None
        if not self.closed:
            self.closed = True
            if self.on_close is not None and not self.is_finished:
                self.on_close()

    @staticmethod
    def buffer_to_image(buffer: np.ndarray) -> np.ndarray:
        """
        Gamma-corrected (H, W, 3) float colors to a displayable uint8 image.
        """
        return to_uint8(buffer)
