import math

from util.vec3 import vec3

color = vec3

WHITE = color(1.0, 1.0, 1.0)
BLACK = color(0.0, 0.0, 0.0)
CYAN = color(0.0, 1.0, 1.0)

DEFAULT_GAMMA = 2.2


def gray(value: float) -> color:
    return color(value, value, value)


def gamma_correct(pixel_color: color, gamma: float = DEFAULT_GAMMA) -> color:
    inv = 1.0 / gamma
    return color(math.pow(max(0.0, pixel_color.x), inv),
                 math.pow(max(0.0, pixel_color.y), inv),
                 math.pow(max(0.0, pixel_color.z), inv))


def to_byte(component: float) -> int:
    return max(0, min(255, int(256.0 * component)))


def write_color(out, pixel_color: color):
    """Write one already gamma-corrected pixel as a PPM (P3) triple."""
    out.write(f"{to_byte(pixel_color.x)} {to_byte(pixel_color.y)} {to_byte(pixel_color.z)}\n")
