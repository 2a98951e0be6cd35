# renderer/render.py
import logging
import time
from typing import Iterable, Optional
from phongtracer.core.color import Color
from phongtracer.core.tuple import point, vector
from phongtracer.geometry.hittable import Hittable
from phongtracer.geometry.intersection import hit, intersections
from phongtracer.geometry.ray import Ray
from phongtracer.geometry.sphere import Sphere
from phongtracer.lighting.phong import lighting
from phongtracer.lighting.point_light import PointLight
from phongtracer.renderer.canvas import Canvas

logger = logging.getLogger(__name__)


def cast_ray(ray: Ray, objects: Iterable[Hittable], light: PointLight) -> Optional[Color]:
    """
    Shades the first surface the ray hits, or returns None when it misses
    every object.
    """
    xs = intersections(*(obj.intersect(ray) for obj in objects))
    i = hit(xs)
    if i is None:
        return None
    p = ray.position(i.t)
    normal = i.object.normal_at(p)
    eye = -ray.direction
    return lighting(i.object.material, light, p, eye, normal)


def render(canvas: Canvas, objects: Iterable[Hittable], light: PointLight) -> Canvas:
    """
    Casts one ray per pixel from the world origin towards +z. The view
    spans [-1, 1] on both axes, so the canvas must be square. Pixels whose
    ray misses keep their current color.
    """
    if canvas.width != canvas.height:
        raise ValueError(f"Only square canvases can be rendered, got {canvas.width}x{canvas.height}.")
    if canvas.width < 3:
        raise ValueError("The canvas must be at least 3 pixels wide.")

    objects = list(objects)
    origin = point(0, 0, 0)
    center = float((canvas.width - 1) // 2)
    hits = 0
    start = time.perf_counter()

    for y in range(canvas.height):
        for x in range(canvas.width):
            dx = (x - center) / center
            dy = (center - y) / center
            ray = Ray(origin, vector(dx, dy, 1).normalize())
            color = cast_ray(ray, objects, light)
            if color is not None:
                canvas[x, y] = color
                hits += 1

    logger.debug("Rendered %dx%d canvas: %d pixels hit in %.2fs",
                 canvas.width, canvas.height, hits, time.perf_counter() - start)
    return canvas


def render_sphere(canvas: Canvas, sphere: Sphere, light: PointLight) -> Canvas:
    return render(canvas, [sphere], light)
