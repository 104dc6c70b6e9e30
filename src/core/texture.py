import math
from abc import ABC, abstractmethod
from functools import lru_cache

import numpy as np
from PIL import Image

from util.color import color, gray, CYAN
from util.rng import rng, MASK64
from util.vec3 import point3


class texture(ABC):
    @abstractmethod
    def value(self, u: float, v: float, p: point3) -> color:
        pass


class solid_color(texture):
    def __init__(self, albedo: color):
        self.albedo = albedo

    @classmethod
    def from_color(cls, albedo: color) -> 'solid_color':
        return cls(albedo)

    def value(self, u: float, v: float, p: point3) -> color:
        return self.albedo


class checker_texture(texture):
    """3-D checker: alternates on the parity of the integer lattice cell containing p."""

    def __init__(self, scale: float, even: texture, odd: texture):
        self.inv_scale = 1.0 / scale
        self.even = even
        self.odd = odd

    @classmethod
    def from_colors(cls, scale: float, c1: color, c2: color) -> 'checker_texture':
        return cls(scale, solid_color(c1), solid_color(c2))

    def value(self, u: float, v: float, p: point3) -> color:
        x = math.floor(self.inv_scale * p.x)
        y = math.floor(self.inv_scale * p.y)
        z = math.floor(self.inv_scale * p.z)

        if (x + y + z) % 2 == 0:
            return self.even.value(u, v, p)
        return self.odd.value(u, v, p)


@lru_cache(maxsize=1 << 16)
def noise_at(x: int, y: int, z: int) -> float:
    """Gray level of one lattice point: a leaped stream seeded by the coordinates."""
    a = x & MASK64
    b = (y + (z << 32)) & MASK64
    if a == 0 and b == 0:
        b = 1
    stream = rng(a, b)
    stream.short_jump()
    return stream.next_f64()


def hermite_cubic(t: float) -> float:
    return t * t * (3.0 - 2.0 * t)


class noise_texture(texture):
    """Value noise: trilinear, Hermite-smoothed blend of per-lattice gray levels."""

    def __init__(self, scale: float):
        self.inv_scale = 1.0 / scale

    def noise(self, p: point3) -> float:
        x = p.x * self.inv_scale
        y = p.y * self.inv_scale
        z = p.z * self.inv_scale
        ix, iy, iz = math.floor(x), math.floor(y), math.floor(z)

        xb = hermite_cubic(x - ix)
        yb = hermite_cubic(y - iy)
        zb = hermite_cubic(z - iz)

        def blend(a, b, t):
            return a * (1.0 - t) + b * t

        m00 = blend(noise_at(ix, iy, iz), noise_at(ix + 1, iy, iz), xb)
        m01 = blend(noise_at(ix, iy, iz + 1), noise_at(ix + 1, iy, iz + 1), xb)
        m10 = blend(noise_at(ix, iy + 1, iz), noise_at(ix + 1, iy + 1, iz), xb)
        m11 = blend(noise_at(ix, iy + 1, iz + 1), noise_at(ix + 1, iy + 1, iz + 1), xb)

        o0 = blend(m00, m10, yb)
        o1 = blend(m01, m11, yb)
        return blend(o0, o1, zb)

    def value(self, u: float, v: float, p: point3) -> color:
        return gray(self.noise(p))


class image_texture(texture):
    def __init__(self, filename_or_image):
        if isinstance(filename_or_image, Image.Image):
            img = filename_or_image
        else:
            img = Image.open(filename_or_image)
        self.data = np.asarray(img.convert('RGB'), dtype=np.float64) / 255.0

    @property
    def width(self) -> int:
        return self.data.shape[1]

    @property
    def height(self) -> int:
        return self.data.shape[0]

    def value(self, u: float, v: float, p: point3) -> color:
        # No texture data: solid cyan makes the problem visible.
        if self.height <= 0 or self.width <= 0:
            return CYAN

        u = min(max(u, 0.0), 1.0)
        v = 1.0 - min(max(v, 0.0), 1.0)  # image rows run top to bottom

        i = min(int(u * self.width), self.width - 1)
        j = min(int(v * self.height), self.height - 1)
        r, g, b = self.data[j, i]
        return color(float(r), float(g), float(b))
