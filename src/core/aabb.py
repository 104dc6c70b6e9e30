import math
from typing import Optional

from core.interval import interval
from util.ray import Ray
from util.vec3 import point3

# parametric range used when the caller does not restrict the ray
_FORWARD = interval(0.0, math.inf)


class aabb:
    """Axis-aligned bounding box: one interval per axis, never mutated."""

    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: interval = interval.empty, y: interval = interval.empty, z: interval = interval.empty):
        self.x = x
        self.y = y
        self.z = z

    @classmethod
    def from_points(cls, a: point3, b: point3) -> 'aabb':
        return cls(interval(min(a.x, b.x), max(a.x, b.x)),
                   interval(min(a.y, b.y), max(a.y, b.y)),
                   interval(min(a.z, b.z), max(a.z, b.z)))

    @classmethod
    def union(cls, a: 'aabb', b: 'aabb') -> 'aabb':
        return cls(interval.from_intervals(a.x, b.x),
                   interval.from_intervals(a.y, b.y),
                   interval.from_intervals(a.z, b.z))

    def __or__(self, other: 'aabb') -> 'aabb':
        return aabb.union(self, other)

    def axis(self, n: int) -> interval:
        if n == 1:
            return self.y
        if n == 2:
            return self.z
        return self.x

    def centroid(self, n: int) -> float:
        return self.axis(n).middle()

    def hit(self, r: Ray, ray_t: interval = _FORWARD) -> Optional[interval]:
        """
        Slab test. Returns the parametric interval where the ray is inside
        the box (clipped to ray_t), or None.

        Zero direction components arrive as +/-inf in r.inv_direction. A ray
        lying exactly on a slab plane produces 0 * inf = nan, which the
        comparisons below never let through.
        """
        t_min = ray_t.min
        t_max = ray_t.max
        origin = r.origin

        for a in range(3):
            ax = self.axis(a)
            inv_d = r.inv_direction[a]
            orig = origin[a]

            t0 = (ax.min - orig) * inv_d
            t1 = (ax.max - orig) * inv_d
            if inv_d < 0.0:
                t0, t1 = t1, t0

            if t0 > t_min:
                t_min = t0
            if t1 < t_max:
                t_max = t1

            # t_min == inf: parallel to this slab and outside it
            if t_max < t_min or t_min == math.inf:
                return None

        return interval(t_min, t_max)

    def __eq__(self, other) -> bool:
        if not isinstance(other, aabb):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __repr__(self) -> str:
        return f"aabb({self.x!r}, {self.y!r}, {self.z!r})"


aabb.empty = aabb(interval.empty, interval.empty, interval.empty)
