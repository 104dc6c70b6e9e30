import math


class vec3:
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.x = x
        self.y = y
        self.z = z

    def __getitem__(self, i: int) -> float:
        if i == 0:
            return self.x
        if i == 1:
            return self.y
        if i == 2:
            return self.z
        raise IndexError(f"vec3 index out of range: {i}")

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __neg__(self) -> 'vec3':
        return vec3(-self.x, -self.y, -self.z)

    def __add__(self, other: 'vec3') -> 'vec3':
        return vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: 'vec3') -> 'vec3':
        return vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other) -> 'vec3':
        # vec3 * vec3 is component-wise (used for attenuation)
        if isinstance(other, vec3):
            return vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        return vec3(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, t: float) -> 'vec3':
        return vec3(self.x * t, self.y * t, self.z * t)

    def __truediv__(self, t: float) -> 'vec3':
        return vec3(self.x / t, self.y / t, self.z / t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, vec3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __repr__(self) -> str:
        return f"vec3({self.x}, {self.y}, {self.z})"

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def near_zero(self) -> bool:
        s = 1e-8
        return abs(self.x) < s and abs(self.y) < s and abs(self.z) < s

    def to_tuple(self) -> tuple:
        return (self.x, self.y, self.z)

    @classmethod
    def random(cls, rng, lo: float = 0.0, hi: float = 1.0) -> 'vec3':
        return cls(rng.next_f64_range(lo, hi),
                   rng.next_f64_range(lo, hi),
                   rng.next_f64_range(lo, hi))


point3 = vec3


def dot(u: vec3, v: vec3) -> float:
    return u.x * v.x + u.y * v.y + u.z * v.z


def cross(u: vec3, v: vec3) -> vec3:
    return vec3(u.y * v.z - u.z * v.y,
                u.z * v.x - u.x * v.z,
                u.x * v.y - u.y * v.x)


def unit_vector(v: vec3) -> vec3:
    return v / v.length()


def lerp(a: vec3, b: vec3, t: float) -> vec3:
    return a * (1.0 - t) + b * t


def random_on_unit_sphere(rng) -> vec3:
    """Uniformly distributed unit vector (rejection sampled in the unit cube)."""
    while True:
        p = vec3.random(rng, -1.0, 1.0)
        lensq = p.length_squared()
        if 1e-160 < lensq <= 1.0:
            return p / math.sqrt(lensq)


def random_in_unit_disk(rng) -> vec3:
    while True:
        p = vec3(rng.next_f64_range(-1.0, 1.0), rng.next_f64_range(-1.0, 1.0), 0.0)
        if p.length_squared() < 1.0:
            return p


def reflect(v: vec3, n: vec3) -> vec3:
    return v - 2.0 * dot(v, n) * n


def refract(uv: vec3, n: vec3, etai_over_etat: float) -> vec3:
    """Snell's law split into components perpendicular and parallel to n."""
    cos_theta = min(dot(-uv, n), 1.0)
    r_out_perp = etai_over_etat * (uv + cos_theta * n)
    r_out_parallel = -math.sqrt(abs(1.0 - r_out_perp.length_squared())) * n
    return r_out_perp + r_out_parallel
