import math
from typing import Optional

from core.errors import ConfigurationError
from core.sampler import make_sampler
from util.ray import Ray
from util.vec3 import vec3, point3, cross, unit_vector, random_in_unit_disk


class image_spec:
    """Output image dimensions. Exactly two of width, height and aspect ratio are given."""

    def __init__(self, width: int, height: int, aspect_ratio: float):
        self.width = width
        self.height = height
        self.aspect_ratio = aspect_ratio

    @classmethod
    def resolve(cls, width: Optional[int] = None, height: Optional[int] = None,
                aspect_ratio: Optional[float] = None) -> 'image_spec':
        given = sum(value is not None for value in (width, height, aspect_ratio))
        if given != 2:
            raise ConfigurationError(
                "exactly two of image width, height and aspect ratio must be set "
                f"(width={width}, height={height}, aspect_ratio={aspect_ratio})")

        for name, value in (('width', width), ('height', height), ('aspect_ratio', aspect_ratio)):
            if value is not None and value <= 0:
                raise ConfigurationError(f"image {name} must be positive, got {value}")

        if height is None:
            height = max(1, int(width / aspect_ratio))
        elif width is None:
            width = max(1, int(height * aspect_ratio))
        else:
            aspect_ratio = width / height

        return cls(int(width), int(height), aspect_ratio)

    def __repr__(self) -> str:
        return f"image_spec({self.width}x{self.height}, aspect_ratio={self.aspect_ratio:.4f})"


class camera:
    """
    Pinhole / thin-lens camera. Configure by setting attributes, then call
    initialize(); it validates everything and derives the viewport.

        cam = camera()
        cam.aspect_ratio = 16.0 / 9.0
        cam.img_width = 400
        cam.samples_per_pixel = 100
        cam.max_depth = 50
        cam.initialize()
    """

    def __init__(self):
        self.img_width: Optional[int] = None
        self.img_height: Optional[int] = None
        self.aspect_ratio: Optional[float] = None

        self.samples_per_pixel: Optional[int] = None
        self.sampling = 'stratified'
        self.max_depth: Optional[int] = None

        self.vfov = 90.0
        self.lookfrom = point3(0, 0, 0)
        self.lookat = point3(0, 0, -1)
        self.vup = vec3(0, 1, 0)

        self.defocus_angle = 0.0
        self.focus_distance: Optional[float] = None

        self.sampler = None
        self.initialized = False
        self._derived = None  # image attribute filled in by the last initialize()

    def initialize(self):
        self.initialized = False
        if self._derived is not None:
            setattr(self, self._derived, None)
            self._derived = None

        if self.img_width is None and self.img_height is None:
            raise ConfigurationError("image size is not set: give img_width or img_height")
        spec = image_spec.resolve(self.img_width, self.img_height, self.aspect_ratio)
        for name in ('img_width', 'img_height', 'aspect_ratio'):
            if getattr(self, name) is None:
                self._derived = name
        self.img_width = spec.width
        self.img_height = spec.height
        self.aspect_ratio = spec.aspect_ratio

        if self.samples_per_pixel is None:
            raise ConfigurationError("samples_per_pixel is not set")
        self.sampler = make_sampler(self.sampling, self.samples_per_pixel)

        if self.max_depth is None:
            raise ConfigurationError("max_depth is not set")
        if self.max_depth < 0:
            raise ConfigurationError(f"max_depth must not be negative, got {self.max_depth}")

        if not 0.0 < self.vfov < 180.0:
            raise ConfigurationError(f"vfov must be in (0, 180) degrees, got {self.vfov}")
        if (self.lookfrom - self.lookat).near_zero():
            raise ConfigurationError("lookfrom and lookat must be distinct points")

        focus_distance = self.focus_distance
        if focus_distance is None:
            focus_distance = (self.lookfrom - self.lookat).length()
        if focus_distance <= 0.0:
            raise ConfigurationError(f"focus_distance must be positive, got {focus_distance}")

        self.center = self.lookfrom

        # Determine viewport dimensions.
        theta = math.radians(self.vfov)
        h = math.tan(theta / 2.0)
        viewport_height = 2.0 * h * focus_distance
        viewport_width = viewport_height * (self.img_width / self.img_height)

        # Calculate the u,v,w unit basis vectors for the camera coordinate frame.
        self.w = unit_vector(self.lookfrom - self.lookat)
        side = cross(self.vup, self.w)
        if side.near_zero():
            raise ConfigurationError("vup must not be parallel to the viewing direction")
        self.u = unit_vector(side)
        self.v = cross(self.w, self.u)

        viewport_u = viewport_width * self.u
        viewport_v = viewport_height * -self.v

        self.delta_u = viewport_u / self.img_width
        self.delta_v = viewport_v / self.img_height

        viewport_upper_left = self.center - (focus_distance * self.w) - viewport_u / 2 - viewport_v / 2
        self.pixel00_loc = viewport_upper_left + 0.5 * (self.delta_u + self.delta_v)

        # Calculate the camera defocus disk basis vectors.
        defocus_radius = focus_distance * math.tan(math.radians(self.defocus_angle / 2.0))
        self.defocus_disk_u = self.u * defocus_radius
        self.defocus_disk_v = self.v * defocus_radius

        self.initialized = True

    @property
    def pixel_count(self) -> int:
        return self.img_width * self.img_height

    def get_ray(self, rng, row: float, col: float) -> Ray:
        """
        Ray through the fractional pixel position (row, col). Integer
        coordinates hit pixel centers.
        """
        pixel_sample = self.pixel00_loc + (col * self.delta_u) + (row * self.delta_v)

        ray_origin = self.center if self.defocus_angle <= 0 else self.defocus_disk_sample(rng)
        ray_direction = pixel_sample - ray_origin
        ray_time = rng.next_f64()

        return Ray(ray_origin, ray_direction, ray_time)

    def defocus_disk_sample(self, rng) -> point3:
        p = random_in_unit_disk(rng)
        return self.center + (p.x * self.defocus_disk_u) + (p.y * self.defocus_disk_v)
