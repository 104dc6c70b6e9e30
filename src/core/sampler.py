"""
Sub-pixel sample offsets. Offsets are (dy, dx) pairs in [-0.5, 0.5) relative
to the pixel center.
"""

import math
from typing import Iterator, Tuple

from core.errors import ConfigurationError


class stratified_sampler:
    """sqrt(n) x sqrt(n) grid of strata over the pixel, one jittered sample in each."""

    def __init__(self, samples_per_pixel: int):
        if samples_per_pixel <= 0:
            raise ConfigurationError(f"samples_per_pixel must be positive, got {samples_per_pixel}")
        root = math.isqrt(samples_per_pixel)
        if root * root != samples_per_pixel:
            raise ConfigurationError(
                f"samples_per_pixel in the stratified sampler must be a square number, "
                f"got {samples_per_pixel}")
        self.samples_per_pixel = samples_per_pixel
        self.samples_sqrt = root

    def offsets(self, rng) -> Iterator[Tuple[float, float]]:
        n = self.samples_sqrt
        inv = 1.0 / n
        for yi in range(n):
            for xi in range(n):
                dy = (yi + rng.next_f64()) * inv - 0.5
                dx = (xi + rng.next_f64()) * inv - 0.5
                yield dy, dx

    def __repr__(self) -> str:
        return f"stratified_sampler({self.samples_per_pixel})"


class random_sampler:
    def __init__(self, samples_per_pixel: int):
        if samples_per_pixel <= 0:
            raise ConfigurationError(f"samples_per_pixel must be positive, got {samples_per_pixel}")
        self.samples_per_pixel = samples_per_pixel

    def offsets(self, rng) -> Iterator[Tuple[float, float]]:
        for _ in range(self.samples_per_pixel):
            dy = rng.next_f64_range(-0.5, 0.5)
            dx = rng.next_f64_range(-0.5, 0.5)
            yield dy, dx

    def __repr__(self) -> str:
        return f"random_sampler({self.samples_per_pixel})"


SAMPLERS = {
    'stratified': stratified_sampler,
    'random': random_sampler,
}


def make_sampler(strategy: str, samples_per_pixel: int):
    try:
        factory = SAMPLERS[strategy]
    except KeyError:
        raise ConfigurationError(
            f"unknown sampling strategy {strategy!r}, expected one of {sorted(SAMPLERS)}") from None
    return factory(samples_per_pixel)
