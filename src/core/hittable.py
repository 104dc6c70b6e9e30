from abc import ABC, abstractmethod
from typing import Optional

from core.aabb import aabb
from core.interval import interval
from util.ray import Ray
from util.vec3 import vec3, point3, dot


class hit_record:
    __slots__ = ('p', 'normal', 'material', 't', 'u', 'v', 'front_face')

    def __init__(self, p: point3, t: float, material: int, u: float = 0.0, v: float = 0.0):
        self.p = p
        self.t = t
        self.material = material
        self.u = u
        self.v = v
        self.normal = vec3()
        self.front_face = True

    def set_face_normal(self, r: Ray, outward_normal: vec3):
        """
        Orient the normal against the incoming ray.
        outward_normal is assumed to have unit length.
        """
        self.front_face = dot(r.direction, outward_normal) < 0.0
        self.normal = outward_normal if self.front_face else -outward_normal

    def __repr__(self) -> str:
        return (f"hit_record(t={self.t}, p={self.p!r}, normal={self.normal!r}, "
                f"material={self.material}, front_face={self.front_face})")


class hittable(ABC):
    """
    Anything a ray can be intersected with. Implementations are read-only
    after construction and are shared by all render workers.
    """

    @abstractmethod
    def hit(self, r: Ray, ray_t: interval) -> Optional[hit_record]:
        """Closest intersection with t strictly inside ray_t, or None."""

    @abstractmethod
    def bounding_box(self) -> aabb:
        pass
