import math

import pytest

from core import ConfigurationError, camera, image_spec, random_sampler, stratified_sampler
from core.sampler import make_sampler
from util import point3, rng, vec3


def configured_camera(**overrides):
    cam = camera()
    cam.img_width = 4
    cam.img_height = 2
    cam.samples_per_pixel = 4
    cam.max_depth = 5
    for name, value in overrides.items():
        setattr(cam, name, value)
    return cam


def test_configuration_error_is_value_error():
    assert issubclass(ConfigurationError, ValueError)


@pytest.mark.parametrize("width, height, aspect_ratio, expected", [
    (400, None, 2.0, (400, 200)),
    (None, 100, 1.5, (150, 100)),
    (300, 200, None, (300, 200)),
    (10, None, 100.0, (10, 1)),
])
def test_image_spec_derives_missing_value(width, height, aspect_ratio, expected):
    spec = image_spec.resolve(width, height, aspect_ratio)
    assert (spec.width, spec.height) == expected


def test_image_spec_aspect_ratio_from_size():
    assert image_spec.resolve(300, 200).aspect_ratio == 1.5


@pytest.mark.parametrize("width, height, aspect_ratio", [
    (400, 200, 2.0),
    (400, None, None),
    (None, None, None),
    (-4, None, 1.0),
    (None, 0, 1.0),
    (100, None, -1.0),
])
def test_image_spec_rejects_bad_combinations(width, height, aspect_ratio):
    with pytest.raises(ConfigurationError):
        image_spec.resolve(width, height, aspect_ratio)


def test_initialize_accepts_valid_configuration():
    cam = configured_camera()
    cam.initialize()
    assert cam.initialized
    assert cam.aspect_ratio == 2.0
    assert cam.pixel_count == 8


@pytest.mark.parametrize("overrides", [
    {'img_width': None, 'img_height': None},
    {'samples_per_pixel': None},
    {'samples_per_pixel': 10},
    {'samples_per_pixel': 0},
    {'sampling': 'sobol'},
    {'max_depth': None},
    {'max_depth': -1},
    {'vfov': 180.0},
    {'lookat': point3(0, 0, 0)},
    {'vup': vec3(0, 0, 3)},
    {'focus_distance': 0.0},
])
def test_initialize_rejects_invalid_configuration(overrides):
    with pytest.raises(ConfigurationError):
        configured_camera(**overrides).initialize()


def test_random_sampler_accepts_any_count():
    cam = configured_camera(sampling='random', samples_per_pixel=10)
    cam.initialize()
    assert isinstance(cam.sampler, random_sampler)


def test_center_pixel_ray_looks_down_axis():
    cam = configured_camera(img_width=3, img_height=3)
    cam.initialize()
    r = cam.get_ray(rng.from_seed(1), 1, 1)
    assert r.origin == point3(0, 0, 0)
    assert r.direction.to_tuple() == pytest.approx((0, 0, -1), abs=1e-9)
    assert 0.0 <= r.time < 1.0


def test_corner_pixels_span_the_field_of_view():
    cam = configured_camera(img_width=2, img_height=2)
    cam.initialize()
    # pixel 0,0 is the upper left; with vfov 90 the viewport spans [-1, 1]
    r = cam.get_ray(rng.from_seed(1), 0, 0)
    assert r.direction.to_tuple() == pytest.approx((-0.5, 0.5, -1))
    r = cam.get_ray(rng.from_seed(1), 1, 1)
    assert r.direction.to_tuple() == pytest.approx((0.5, -0.5, -1))


def test_defocus_origin_lies_on_disk():
    cam = configured_camera(defocus_angle=10.0, focus_distance=2.0)
    cam.initialize()
    radius = 2.0 * math.tan(math.radians(5.0))
    stream = rng.from_seed(3)
    origins = [cam.get_ray(stream, 0.5, 1.5).origin for _ in range(100)]
    for o in origins:
        assert o.z == pytest.approx(0.0)
        assert math.hypot(o.x, o.y) <= radius + 1e-12
    assert len({o.to_tuple() for o in origins}) > 1


def test_stratified_offsets_one_per_stratum():
    sampler = stratified_sampler(9)
    offsets = list(sampler.offsets(rng.from_seed(5)))
    assert len(offsets) == 9
    cells = set()
    for dy, dx in offsets:
        assert -0.5 <= dy < 0.5 and -0.5 <= dx < 0.5
        cells.add((math.floor((dy + 0.5) * 3), math.floor((dx + 0.5) * 3)))
    assert cells == {(i, j) for i in range(3) for j in range(3)}


def test_random_offsets_in_pixel():
    offsets = list(random_sampler(25).offsets(rng.from_seed(6)))
    assert len(offsets) == 25
    assert all(-0.5 <= dy < 0.5 and -0.5 <= dx < 0.5 for dy, dx in offsets)


def test_make_sampler_unknown_strategy():
    with pytest.raises(ConfigurationError):
        make_sampler('halton', 4)
    with pytest.raises(ConfigurationError):
        stratified_sampler(8)


def test_reinitialize_rederives_image_size():
    cam = camera()
    cam.aspect_ratio = 2.0
    cam.img_width = 400
    cam.samples_per_pixel = 1
    cam.max_depth = 1
    cam.initialize()
    assert cam.img_height == 200

    cam.img_width = 100
    cam.initialize()
    assert (cam.img_width, cam.img_height) == (100, 50)
