from core import *
from util import *
from util.color import gray

#------------------------------------------------------------------------
# Every scene returns (Scene, camera). The camera is configured but not yet
# initialized; the renderer does that.
#------------------------------------------------------------------------

def single_sphere():
    materials = material_arena()
    ground_material = materials.add(lambertian.from_color(color(0.5, 0.5, 0.5)))
    sphere_material = materials.add(lambertian.from_color(color(0.8, 0.3, 0.3)))

    world = hittable_list()
    world.add(Sphere.stationary(point3(0, 0, -1), 0.5, sphere_material))
    world.add(Sphere.stationary(point3(0, -100.5, -1), 100, ground_material))

    cam = camera()

    cam.aspect_ratio = 16.0 / 9.0
    cam.img_width = 400
    cam.samples_per_pixel = 16
    cam.max_depth = 10

    return Scene(world, materials), cam

#------------------------------------------------------------------------

def three_spheres():
    materials = material_arena()
    material_ground = materials.add(lambertian.from_color(color(0.8, 0.8, 0.0)))
    material_center = materials.add(lambertian.from_color(color(0.1, 0.2, 0.5)))
    material_left = materials.add(dielectric(1.50))
    material_bubble = materials.add(dielectric(1.00 / 1.50))
    material_right = materials.add(metal(color(0.8, 0.6, 0.2), 1.0))

    world = hittable_list()
    world.add(Sphere.stationary(point3(0.0, -100.5, -1.0), 100.0, material_ground))
    world.add(Sphere.stationary(point3(0.0, 0.0, -1.2), 0.5, material_center))
    world.add(Sphere.stationary(point3(-1.0, 0.0, -1.0), 0.5, material_left))
    world.add(Sphere.stationary(point3(-1.0, 0.0, -1.0), 0.4, material_bubble))
    world.add(Sphere.stationary(point3(1.0, 0.0, -1.0), 0.5, material_right))

    cam = camera()

    cam.aspect_ratio = 16.0 / 9.0
    cam.img_width = 400
    cam.samples_per_pixel = 100
    cam.max_depth = 50

    cam.vfov = 20
    cam.lookfrom = point3(-2, 2, 1)
    cam.lookat = point3(0, 0, -1)
    cam.vup = vec3(0, 1, 0)

    cam.defocus_angle = 10.0
    cam.focus_distance = 3.4

    return Scene(world, materials), cam

#------------------------------------------------------------------------

def random_spheres(seed: int = 42, moving: bool = True):
    """The cover scene: a field of small spheres, diffuse ones bouncing when moving=True."""
    scene_rng = rng.from_seed(seed)
    materials = material_arena()
    world = hittable_list()

    checker = checker_texture.from_colors(0.32, color(0.2, 0.3, 0.1), color(0.9, 0.9, 0.9))
    ground_material = materials.add(lambertian.from_texture(checker))
    world.add(Sphere.stationary(point3(0, -1000, 0), 1000, ground_material))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = scene_rng.next_f64()
            center = point3(a + 0.9 * scene_rng.next_f64(), 0.2, b + 0.9 * scene_rng.next_f64())

            if (center - point3(4, 0.2, 0)).length() > 0.9:
                if choose_mat < 0.8:
                    # diffuse
                    albedo = color.random(scene_rng) * color.random(scene_rng)
                    sphere_material = materials.add(lambertian.from_color(albedo))
                    if moving:
                        center2 = center + vec3(0, scene_rng.next_f64_range(0, 0.5), 0)
                        world.add(Sphere.moving(center, center2, 0.2, sphere_material))
                    else:
                        world.add(Sphere.stationary(center, 0.2, sphere_material))
                elif choose_mat < 0.95:
                    # metal
                    albedo = color.random(scene_rng, 0.5, 1)
                    fuzz = scene_rng.next_f64_range(0, 0.5)
                    sphere_material = materials.add(metal(albedo, fuzz))
                    world.add(Sphere.stationary(center, 0.2, sphere_material))
                else:
                    # glass
                    sphere_material = materials.add(dielectric(1.5))
                    world.add(Sphere.stationary(center, 0.2, sphere_material))

    material1 = materials.add(dielectric(1.5))
    world.add(Sphere.stationary(point3(0, 1, 0), 1.0, material1))

    material2 = materials.add(lambertian.from_color(color(0.4, 0.2, 0.1)))
    world.add(Sphere.stationary(point3(-4, 1, 0), 1.0, material2))

    material3 = materials.add(metal(color(0.7, 0.6, 0.5), 0.0))
    world.add(Sphere.stationary(point3(4, 1, 0), 1.0, material3))

    cam = camera()

    cam.aspect_ratio = 16.0 / 9.0
    cam.img_width = 400
    cam.samples_per_pixel = 100
    cam.max_depth = 50

    cam.vfov = 20
    cam.lookfrom = point3(13, 2, 3)
    cam.lookat = point3(0, 0, 0)
    cam.vup = vec3(0, 1, 0)

    # Defocus blur (depth of field)
    cam.defocus_angle = 0.6
    cam.focus_distance = 10.0

    return Scene(world, materials), cam

#------------------------------------------------------------------------

def checkered_spheres():
    materials = material_arena()
    checker = checker_texture.from_colors(0.32, color(0.2, 0.3, 0.1), color(0.9, 0.9, 0.9))
    checker_material = materials.add(lambertian.from_texture(checker))

    world = hittable_list()
    world.add(Sphere.stationary(point3(0, -10, 0), 10, checker_material))
    world.add(Sphere.stationary(point3(0, 10, 0), 10, checker_material))

    cam = camera()

    cam.aspect_ratio = 16.0 / 9.0
    cam.img_width = 400
    cam.samples_per_pixel = 100
    cam.max_depth = 50

    cam.vfov = 20
    cam.lookfrom = point3(13, 2, 3)
    cam.lookat = point3(0, 0, 0)
    cam.vup = vec3(0, 1, 0)

    return Scene(world, materials), cam

#------------------------------------------------------------------------

def noise_spheres():
    materials = material_arena()
    noise_material = materials.add(lambertian.from_texture(noise_texture(0.25)))
    gray_material = materials.add(lambertian.from_color(gray(0.5)))

    world = hittable_list()
    world.add(Sphere.stationary(point3(0, -1000, 0), 1000, gray_material))
    world.add(Sphere.stationary(point3(0, 2, 0), 2, noise_material))

    cam = camera()

    cam.aspect_ratio = 16.0 / 9.0
    cam.img_width = 400
    cam.samples_per_pixel = 100
    cam.max_depth = 50

    cam.vfov = 20
    cam.lookfrom = point3(13, 2, 3)
    cam.lookat = point3(0, 0, 0)
    cam.vup = vec3(0, 1, 0)

    return Scene(world, materials), cam

#------------------------------------------------------------------------

def earth(texture_path: str = "earthmap.jpg"):
    materials = material_arena()
    earth_surface = materials.add(lambertian.from_texture(image_texture(texture_path)))

    world = hittable_list()
    world.add(Sphere.stationary(point3(0, 0, 0), 2, earth_surface))

    cam = camera()

    cam.aspect_ratio = 16.0 / 9.0
    cam.img_width = 400
    cam.samples_per_pixel = 100
    cam.max_depth = 50

    cam.vfov = 20
    cam.lookfrom = point3(0, 0, 12)
    cam.lookat = point3(0, 0, 0)
    cam.vup = vec3(0, 1, 0)

    return Scene(world, materials), cam

#------------------------------------------------------------------------

SCENES = {
    'single': single_sphere,
    'three': three_spheres,
    'random': random_spheres,
    'checkered': checkered_spheres,
    'noise': noise_spheres,
    'earth': earth,
}
