"""
Recursive path integrator: one estimate of incoming radiance per camera ray.
"""

from core.hittable import hittable
from core.interval import interval
from core.material import material_arena
from util.color import color, WHITE, BLACK, DEFAULT_GAMMA, gamma_correct
from util.ray import Ray
from util.vec3 import unit_vector

# Secondary rays start this far along the ray to avoid self-intersection.
RAY_EPSILON = 1e-6

SKY_BLUE = color(0.5, 0.7, 1.0)


def sky_color(r: Ray) -> color:
    unit_direction = unit_vector(r.direction)
    a = 0.5 * (unit_direction.y + 1.0)
    return (1.0 - a) * WHITE + a * SKY_BLUE


def trace(rng, r: Ray, depth: int, limit: int, world: hittable, materials: material_arena) -> color:
    if depth >= limit:
        return BLACK

    rec = world.hit(r, interval(RAY_EPSILON, float('inf')))
    if rec is None:
        return sky_color(r)

    scattered = materials[rec.material].scatter(rng, r, rec)
    if scattered is None:
        return BLACK

    attenuation, next_ray = scattered
    return attenuation * trace(rng, next_ray, depth + 1, limit, world, materials)


def ray_color(rng, r: Ray, cam, scene) -> color:
    return trace(rng, r, 0, cam.max_depth, scene.world, scene.materials)


def sample_pixel(rng, cam, row: int, col: int, scene, gamma: float = DEFAULT_GAMMA) -> color:
    """Mean of the camera sampler's sub-pixel estimates, gamma corrected."""
    accum = color(0, 0, 0)
    count = 0
    for dy, dx in cam.sampler.offsets(rng):
        r = cam.get_ray(rng, row + dy, col + dx)
        accum = accum + ray_color(rng, r, cam, scene)
        count += 1

    return gamma_correct(accum / count, gamma)
