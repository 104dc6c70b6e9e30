import numpy as np

from util.vec3 import vec3, point3

_ONE = np.float64(1.0)


class Ray:
    __slots__ = ('origin', 'direction', 'time', 'inv_direction')

    def __init__(self, origin: point3, direction: vec3, time: float = 0.0):
        self.origin = origin
        self.direction = direction
        self.time = time

        # IEEE division: a zero component becomes +/-inf, which the slab
        # test relies on
        with np.errstate(divide='ignore'):
            self.inv_direction = (float(_ONE / direction.x),
                                  float(_ONE / direction.y),
                                  float(_ONE / direction.z))

    def at(self, t: float) -> point3:
        return self.origin + t * self.direction

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r}, time={self.time})"
