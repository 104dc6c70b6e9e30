"""
Bounding volume hierarchy over hittables.

Built once from an index range of a single list (sorted and partitioned in
place), then immutable.
"""

import logging
import math
from typing import List, Optional

from core.aabb import aabb
from core.hittable import hittable, hit_record
from core.interval import interval
from util.ray import Ray

logger = logging.getLogger(__name__)


def box_compare(a: hittable, b: hittable, axis: int) -> int:
    """Three-way comparison of bounding-box centroids along axis."""
    ca = a.bounding_box().centroid(axis)
    cb = b.bounding_box().centroid(axis)
    return (ca > cb) - (ca < cb)


def centroid_spread(objects: List[hittable], start: int, end: int, axis: int) -> float:
    lo = math.inf
    hi = -math.inf
    for i in range(start, end):
        c = objects[i].bounding_box().centroid(axis)
        if c < lo:
            lo = c
        if c > hi:
            hi = c
    return hi - lo


def choose_axis(objects: List[hittable], start: int, end: int) -> int:
    """Axis with the greatest range of bounding-box centroids."""
    best_axis = 0
    best_spread = -math.inf
    for axis in range(3):
        spread = centroid_spread(objects, start, end, axis)
        if spread > best_spread:
            best_axis = axis
            best_spread = spread
    return best_axis


class bvh_node(hittable):
    def __init__(self, left: hittable, right: hittable):
        self.left = left
        self.right = right
        self.bbox = aabb.union(left.bounding_box(), right.bounding_box())

    @classmethod
    def from_objects(cls, objects: List[hittable], start: int, end: int) -> hittable:
        """
        Build a tree over objects[start:end]. The slice is reordered in place.

        Returns the object itself for a single-element range, otherwise a
        bvh_node. Every object ends up in exactly one leaf.
        """
        node = cls._build(objects, start, end)
        if logger.isEnabledFor(logging.DEBUG) and isinstance(node, bvh_node):
            logger.debug("BVH built: %d primitives, %d nodes, depth %d",
                         end - start, node.count(), node.depth())
        return node

    @classmethod
    def _build(cls, objects: List[hittable], start: int, end: int) -> hittable:
        span = end - start
        if span <= 0:
            raise ValueError(f"cannot build a BVH over an empty range [{start}, {end})")

        if span == 1:
            return objects[start]

        axis = choose_axis(objects, start, end)

        if span == 2:
            first, second = objects[start], objects[start + 1]
            if box_compare(second, first, axis) < 0:
                first, second = second, first
            return cls(first, second)

        key = lambda obj: obj.bounding_box().centroid(axis)
        objects[start:end] = sorted(objects[start:end], key=key)

        if centroid_spread(objects, start, end, axis) == 0.0:
            # all centroids coincide, halve the range to keep the tree balanced
            split = span // 2
        else:
            centroids = [key(objects[i]) for i in range(start, end)]
            mean = sum(centroids) / span
            split = next((i for i, c in enumerate(centroids) if c >= mean), span // 2)
            split = min(max(split, 1), span - 1)

        mid = start + split
        right = cls._build(objects, mid, end)
        left = cls._build(objects, start, mid)
        return cls(left, right)

    def hit(self, r: Ray, ray_t: interval) -> Optional[hit_record]:
        if self.bbox.hit(r, ray_t) is None:
            return None

        left_rec = self.left.hit(r, ray_t)
        if left_rec is not None:
            right_rec = self.right.hit(r, interval(ray_t.min, left_rec.t))
            return right_rec if right_rec is not None else left_rec

        return self.right.hit(r, ray_t)

    def bounding_box(self) -> aabb:
        return self.bbox

    def count(self) -> int:
        n = 1
        for child in (self.left, self.right):
            if isinstance(child, bvh_node):
                n += child.count()
        return n

    def depth(self) -> int:
        d = 0
        for child in (self.left, self.right):
            if isinstance(child, bvh_node):
                d = max(d, child.depth())
        return d + 1

    def leaves(self):
        for child in (self.left, self.right):
            if isinstance(child, bvh_node):
                yield from child.leaves()
            else:
                yield child
