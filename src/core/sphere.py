import math
from typing import Optional

from core.aabb import aabb
from core.hittable import hittable, hit_record
from core.interval import interval
from util.ray import Ray
from util.vec3 import vec3, point3, dot, lerp


def get_sphere_uv(p: point3) -> tuple:
    """
    p: a point on the unit sphere centered at the origin.
    u: angle around the Y axis from X=-1, v: angle from Y=-1 to Y=+1.
    """
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x) + math.pi
    return phi / (2.0 * math.pi), theta / math.pi


class Sphere(hittable):
    def __init__(self, center: point3, radius: float, material: int):
        self.center = center
        self.radius = max(0.0, radius)
        self.material = material

        rvec = vec3(self.radius, self.radius, self.radius)
        self.bbox = aabb.from_points(center - rvec, center + rvec)

    @classmethod
    def stationary(cls, center: point3, radius: float, material: int) -> 'Sphere':
        return cls(center, radius, material)

    @classmethod
    def moving(cls, center1: point3, center2: point3, radius: float, material: int) -> 'MovingSphere':
        return MovingSphere(cls(center1, radius, material), center2)

    def hit(self, r: Ray, ray_t: interval) -> Optional[hit_record]:
        return self.hit_at(r, ray_t, self.center)

    def hit_at(self, r: Ray, ray_t: interval, center: point3) -> Optional[hit_record]:
        oc = r.origin - center
        a = r.direction.length_squared()
        h = dot(oc, r.direction)
        c = oc.length_squared() - self.radius * self.radius

        discriminant = h * h - a * c
        # a point sphere has no surface to shade
        if discriminant < 0.0 or self.radius == 0.0:
            return None

        sqrtd = math.sqrt(discriminant)

        # Find the nearest root that lies in the acceptable range.
        root = (-h - sqrtd) / a
        if not ray_t.surrounds(root):
            root = (-h + sqrtd) / a
            if not ray_t.surrounds(root):
                return None

        p = r.at(root)
        outward_normal = (p - center) / self.radius
        u, v = get_sphere_uv(outward_normal)

        rec = hit_record(p, root, self.material, u, v)
        rec.set_face_normal(r, outward_normal)
        return rec

    def bounding_box(self) -> aabb:
        return self.bbox

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius}, material={self.material})"


class MovingSphere(hittable):
    """Sphere whose center moves linearly from sphere.center to destination over time [0, 1]."""

    def __init__(self, sphere: Sphere, destination: point3):
        self.sphere = sphere
        self.destination = destination

        rvec = vec3(sphere.radius, sphere.radius, sphere.radius)
        end_box = aabb.from_points(destination - rvec, destination + rvec)
        self.bbox = sphere.bounding_box() | end_box

    @property
    def material(self) -> int:
        return self.sphere.material

    def center_at(self, time: float) -> point3:
        return lerp(self.sphere.center, self.destination, time)

    def hit(self, r: Ray, ray_t: interval) -> Optional[hit_record]:
        return self.sphere.hit_at(r, ray_t, self.center_at(r.time))

    def bounding_box(self) -> aabb:
        return self.bbox

    def __repr__(self) -> str:
        return f"MovingSphere({self.sphere!r}, destination={self.destination!r})"
