from typing import Optional

from core.aabb import aabb
from core.bvh_node import bvh_node
from core.hittable import hittable, hit_record
from core.interval import interval
from util.ray import Ray


class hittable_list(hittable):
    """Flat, unordered collection. hit() is a linear scan for the closest hit."""

    def __init__(self, objects=None):
        self.objects = []
        self.bbox = aabb.empty
        for obj in objects or ():
            self.add(obj)

    def add(self, obj: hittable):
        self.objects.append(obj)
        self.bbox = self.bbox | obj.bounding_box()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)

    def hit(self, r: Ray, ray_t: interval) -> Optional[hit_record]:
        closest = None
        closest_so_far = ray_t.max

        for obj in self.objects:
            rec = obj.hit(r, interval(ray_t.min, closest_so_far))
            if rec is not None:
                closest_so_far = rec.t
                closest = rec

        return closest

    def bounding_box(self) -> aabb:
        return self.bbox

    def into_bvh(self) -> hittable:
        """
        Build a BVH over a copy of the object list. An empty list has
        nothing to partition and is returned unchanged.
        """
        if not self.objects:
            return self
        objects = list(self.objects)
        return bvh_node.from_objects(objects, 0, len(objects))
