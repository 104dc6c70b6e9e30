import math
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from core.hittable import hit_record
from core.texture import texture, solid_color
from util.color import color, WHITE
from util.ray import Ray
from util.vec3 import dot, unit_vector, reflect, refract, random_on_unit_sphere

ScatterResult = Optional[Tuple[color, Ray]]


class material(ABC):
    @abstractmethod
    def scatter(self, rng, r_in: Ray, rec: hit_record) -> ScatterResult:
        """(attenuation, scattered ray), or None when the ray is absorbed."""


class lambertian(material):
    def __init__(self, tex: texture):
        self.tex = tex

    @classmethod
    def from_color(cls, albedo: color) -> 'lambertian':
        return cls(solid_color.from_color(albedo))

    @classmethod
    def from_texture(cls, tex: texture) -> 'lambertian':
        return cls(tex)

    def scatter(self, rng, r_in: Ray, rec: hit_record) -> ScatterResult:
        scatter_direction = rec.normal + random_on_unit_sphere(rng)

        # Catch degenerate scatter direction
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        scattered = Ray(rec.p, scatter_direction, r_in.time)
        return self.tex.value(rec.u, rec.v, rec.p), scattered

    def __repr__(self) -> str:
        return f"lambertian({self.tex!r})"


class metal(material):
    def __init__(self, albedo: color, fuzz: float = 0.0):
        self.albedo = albedo
        self.fuzz = min(max(fuzz, 0.0), 1.0)

    def scatter(self, rng, r_in: Ray, rec: hit_record) -> ScatterResult:
        reflected = reflect(r_in.direction, rec.normal)
        if self.fuzz > 0.0:
            reflected = reflected + self.fuzz * random_on_unit_sphere(rng)

        return self.albedo, Ray(rec.p, reflected, r_in.time)

    def __repr__(self) -> str:
        return f"metal({self.albedo!r}, fuzz={self.fuzz})"


def reflectance(cosine: float, refraction_index: float) -> float:
    # Schlick's approximation for reflectance.
    r0 = (1.0 - refraction_index) / (1.0 + refraction_index)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow(1.0 - cosine, 5)


class dielectric(material):
    def __init__(self, refraction_index: float):
        self.refraction_index = refraction_index

    def scatter(self, rng, r_in: Ray, rec: hit_record) -> ScatterResult:
        ri = (1.0 / self.refraction_index) if rec.front_face else self.refraction_index

        unit_direction = unit_vector(r_in.direction)
        cos_theta = min(dot(-unit_direction, rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        cannot_refract = ri * sin_theta > 1.0
        if cannot_refract or reflectance(cos_theta, ri) > rng.next_f64():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ri)

        return WHITE, Ray(rec.p, direction, r_in.time)

    def __repr__(self) -> str:
        return f"dielectric({self.refraction_index})"


class material_arena:
    """
    Owns every material of a scene. Primitives hold the integer handle
    returned by add(), so one material can back any number of primitives.
    """

    def __init__(self):
        self._materials: List[material] = []

    def add(self, mat: material) -> int:
        self._materials.append(mat)
        return len(self._materials) - 1

    def __getitem__(self, handle: int) -> material:
        return self._materials[handle]

    def __len__(self) -> int:
        return len(self._materials)

    def __iter__(self):
        return iter(self._materials)
