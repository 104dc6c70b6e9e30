from abc import ABC, abstractmethod
from typing import List

from core.camera import camera
from core.hittable_list import hittable_list
from core.scene import Scene
from render_server.image import ImageAssembler


class BaseRenderer(ABC):
    """Abstract base class for renderers"""

    def __init__(self, scene: Scene, cam: camera, img_path: str):
        self.scene = self._compile(scene)
        self.img_path = img_path

        self.cam = cam
        self.cam.initialize()

        self.image = ImageAssembler(self.cam.img_width, self.cam.img_height)

        # Statistics
        self.tile_times: List[float] = []
        self.total_render_time = 0.0

    def _compile(self, scene: Scene) -> Scene:
        """
        Hook method for renderer-specific world compilation.
        The default wraps a flat hittable_list in a BVH.
        """
        if isinstance(scene.world, hittable_list):
            return Scene(scene.world.into_bvh(), scene.materials)
        return scene

    @abstractmethod
    def render(self, enable_preview: bool = False) -> bool:
        """
        Execute the rendering loop. Implementations should:
        1. Place finished pixels into self.image
        2. Call self.write_image() when done
        Returns False if the render was cancelled.
        """

    def write_image(self):
        """Write the assembled image; the format follows the file extension."""
        print(f"Writing image to {self.img_path}...")
        self.image.save(self.img_path)
        print("Image writing completed.")

    def get_statistics(self) -> dict:
        """Return rendering statistics as a dictionary"""
        if not self.tile_times:
            return {}

        total_pixels = self.cam.img_width * self.cam.img_height
        total_samples = total_pixels * self.cam.samples_per_pixel
        wall = self.total_render_time

        return {
            'tiles': len(self.tile_times),
            'total_render_time': wall,
            'avg_tile_time': sum(self.tile_times) / len(self.tile_times),
            'min_tile_time': min(self.tile_times),
            'max_tile_time': max(self.tile_times),
            'pixels_per_sec': total_pixels / wall if wall > 0 else 0.0,
            'samples_per_sec': total_samples / wall if wall > 0 else 0.0,
        }

    def print_statistics(self):
        """Print rendering statistics to console"""
        stats = self.get_statistics()
        if not stats:
            return

        print(f"\nPERFORMANCE SUMMARY")
        print(f"Total Render Time: {stats['total_render_time']:6.2f}s")
        print(f"Tile Time: Avg {stats['avg_tile_time']*1000:7.2f}ms | "
              f"Min {stats['min_tile_time']*1000:7.2f}ms | Max {stats['max_tile_time']*1000:7.2f}ms")
        print(f"Throughput: {stats['pixels_per_sec']/1e3:7.2f} Kpix/s "
              f"({stats['samples_per_sec']/1e3:7.2f} Ksamples/s)")
