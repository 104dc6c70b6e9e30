import pytest

from core import (
    Scene,
    Sphere,
    camera,
    hittable_list,
    interval,
    aabb,
    lambertian,
    material_arena,
)
from util import Ray, color, point3, vec3, rng


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "unittest: mark test as an Unit Test"
    )


@pytest.fixture
def stream():
    return rng.from_seed(1234)


@pytest.fixture
def unit_box():
    return aabb.from_points(point3(0, 0, 0), point3(1, 1, 1))


@pytest.fixture
def forward():
    return interval(0.0, float('inf'))


@pytest.fixture
def ray_that_hits():
    # enters the unit box through z = 1
    return Ray(point3(0.5, 0.5, 5), vec3(0, 0, -1))


@pytest.fixture
def ray_that_misses():
    return Ray(point3(5, 5, 5), vec3(0, 1, 0))


@pytest.fixture
def ray_inside_box():
    return Ray(point3(0.5, 0.5, 0.5), vec3(0, 0, 1))


@pytest.fixture
def small_scene():
    """A red sphere resting on a large gray one, seen from the origin."""
    materials = material_arena()
    ground = materials.add(lambertian.from_color(color(0.5, 0.5, 0.5)))
    red = materials.add(lambertian.from_color(color(0.8, 0.3, 0.3)))

    world = hittable_list()
    world.add(Sphere.stationary(point3(0, 0, -1), 0.5, red))
    world.add(Sphere.stationary(point3(0, -100.5, -1), 100, ground))
    return Scene(world.into_bvh(), materials)


@pytest.fixture
def small_camera():
    cam = camera()
    cam.img_width = 13
    cam.img_height = 9
    cam.samples_per_pixel = 1
    cam.max_depth = 3
    return cam
