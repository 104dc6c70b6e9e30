from dataclasses import dataclass

from core.hittable import hittable
from core.material import material_arena


@dataclass
class Scene:
    """Root of the intersection hierarchy plus the arena its material handles point into."""
    world: hittable
    materials: material_arena
