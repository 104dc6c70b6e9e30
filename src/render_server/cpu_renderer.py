"""
CpuRenderer: tiled path tracer on a pool of worker threads.
Thin class that coordinates the scheduler, image assembly and output.
"""

import logging
import time
from contextlib import closing
from typing import Optional

from core.bvh_node import bvh_node
from core.camera import camera
from core.scene import Scene
from render_server.base_renderer import BaseRenderer
from render_server.config import DEFAULT_TILE_SIZE
from render_server.scheduler import TileScheduler

logger = logging.getLogger(__name__)


class CpuRenderer(BaseRenderer):
    """
    Usage:
        renderer = CpuRenderer(scene, cam, "output.png", workers=8, seed=42)
        renderer.render(enable_preview=True)
    """

    def __init__(self, scene: Scene, cam: camera, img_path: str,
                 workers: Optional[int] = None, seed: Optional[int] = None,
                 tile_size=DEFAULT_TILE_SIZE):
        self.timing = {
            'bvh_build': 0.0,
            'stream_setup': 0.0,
            'total_setup': 0.0,
        }
        setup_start = time.time()

        t0 = time.time()
        super().__init__(scene, cam, img_path)
        self.timing['bvh_build'] = time.time() - t0

        t0 = time.time()
        self.scheduler = TileScheduler(self.scene, self.cam, tile_size=tile_size,
                                       workers=workers, seed=seed)
        self.timing['stream_setup'] = time.time() - t0

        self.timing['total_setup'] = time.time() - setup_start
        logger.debug("Setup timing: %s", self.timing)

    def render(self, enable_preview: bool = False) -> bool:
        """
        Main render loop.

        Args:
            enable_preview: Show live preview window during rendering

        Returns True when every tile was rendered and the image written.
        """
        self._print_setup_info()

        preview = None
        if enable_preview:
            # tkinter is only needed for the preview window
            from render_server.preview import LivePreview
            preview = LivePreview(self.cam.img_width, self.cam.img_height,
                                  on_close=self.scheduler.cancel)
            preview.start()

        print(f"\nRendering Progress:")
        print(f"{'─' * 60}")

        tile_count = self.scheduler.tile_count
        display_interval = max(1, tile_count // 20)  # 20 updates = every 5%
        render_start = time.time()

        done = 0
        with closing(self.scheduler.render()) as tiles:
            for tile in tiles:
                self.image.place(tile)
                self.tile_times.append(tile.render_time)
                done += 1

                if done % display_interval == 0 or done == 1 or done == tile_count:
                    self._print_progress(done, render_start)

                if preview:
                    preview.update(tile, done, tile_count)
                    preview.process_events()
                    if preview.closed:
                        break

        self.total_render_time = time.time() - render_start
        print(f"{'─' * 60}")

        if not self.image.complete():
            print(f"\nRender cancelled after {done}/{tile_count} tiles")
            return False

        self.write_image()
        self.print_statistics()

        if preview:
            print("\n✓ Preview window will stay open. Close it manually when done.")
            preview.finish()
        return True

    def _print_setup_info(self):
        """Print compact setup summary"""
        world = self.scene.world
        nodes = world.count() if isinstance(world, bvh_node) else 0
        depth = world.depth() if isinstance(world, bvh_node) else 0

        print(f"\n{self.__class__.__name__}")
        print(f"Resolution: {self.cam.img_width}x{self.cam.img_height} | "
              f"Samples: {self.cam.samples_per_pixel} ({self.cam.sampling}) | Depth: {self.cam.max_depth}")
        print(f"Materials: {len(self.scene.materials)} | BVH Nodes: {nodes} | BVH Depth: {depth}")
        print(f"Tiles: {self.scheduler.tile_count} of {self.scheduler.grid.tile_width}x"
              f"{self.scheduler.grid.tile_height} | Workers: {self.scheduler.workers} | "
              f"Seed: {self.scheduler.seed}")
        print(f"\nSetup Timing:")
        print(f"  BVH Build: {self.timing['bvh_build']*1000:6.2f}ms | "
              f"Stream Setup: {self.timing['stream_setup']*1000:6.2f}ms | "
              f"Total Setup: {self.timing['total_setup']*1000:6.2f}ms")

    def _print_progress(self, done: int, render_start: float):
        """Print progress at 5% intervals"""
        tile_count = self.scheduler.tile_count
        elapsed = time.time() - render_start
        rate = done / elapsed if elapsed > 0 else 0.0
        eta = (tile_count - done) / rate if rate > 0 else 0.0
        progress = done / tile_count * 100

        print(f"{done:4d}/{tile_count} ({progress:5.1f}%) │ "
              f"{self.tile_times[-1]*1000:7.1f}ms │ "
              f"Elapsed: {elapsed:6.1f}s │ "
              f"ETA: {eta:6.1f}s")
