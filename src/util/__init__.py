from .vec3 import (
    vec3,
    point3,
    dot,
    cross,
    unit_vector,
    lerp,
    random_on_unit_sphere,
    random_in_unit_disk,
    reflect,
    refract,
)
from .color import color, gamma_correct, write_color
from .ray import Ray
from .rng import rng
