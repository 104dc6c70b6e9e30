from .interval import interval
from .aabb import aabb
from .hittable import hittable, hit_record
from .sphere import Sphere, MovingSphere
from .bvh_node import bvh_node
from .hittable_list import hittable_list
from .texture import texture, solid_color, checker_texture, noise_texture, image_texture
from .material import material, lambertian, metal, dielectric, material_arena
from .scene import Scene
from .sampler import stratified_sampler, random_sampler
from .camera import camera, image_spec
from .errors import ConfigurationError
