# renderer/raytracer.py
import logging
import math
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Optional
from core.color import Color
from core.ray import Ray
from core.scalar import ipow
from core.utils import reflect
from core.vector import Vector3
from geometry.hittable import Hittable, Intersection
from materials.light import Light

logger = logging.getLogger(__name__)

# Number of mirror bounces followed before the grey fallback is used
MAX_DEPTH = 5

class RayTracer:
    """
    Whitted-style recursive ray tracer.

    Shading at a hit point sums Lambert diffuse and Phong specular terms over
    every unshadowed light, then adds the mirror reflection traced one level
    deeper. The scene is only read, so one tracer can serve many threads.

    The scene passed to each method must expose ``things``, ``lights``,
    ``camera`` and ``background``; the canvas must expose
    ``set_pixel(x, y, color)``.
    """
    def __init__(self, max_depth: int = MAX_DEPTH):
        self.max_depth = max_depth

    def get_intersections(self, ray: Ray, scene) -> Optional[Intersection]:
        """
        Returns the nearest intersection along ray, or None. Distances are
        compared with a strict less-than in scene order, so the first thing
        reaching the minimum distance wins ties.
        """
        closest = None
        closest_dist = math.inf
        for thing in scene.things:
            isect = thing.intersect(ray)
            if isect is not None and isect.dist < closest_dist:
                closest_dist = isect.dist
                closest = isect
        return closest

    def test_ray(self, ray: Ray, scene) -> Optional[float]:
        """Distance to the nearest hit along ray, or None."""
        isect = self.get_intersections(ray, scene)
        if isect is not None:
            return isect.dist
        return None

    def trace_ray(self, ray: Ray, scene, depth: int = 0) -> Color:
        isect = self.get_intersections(ray, scene)
        if isect is None:
            return scene.background
        return self.shade(isect, scene, depth)

    def shade(self, isect: Intersection, scene, depth: int) -> Color:
        d = isect.ray.direction
        pos = isect.ray.at(isect.dist)
        normal = isect.thing.get_normal(pos)
        reflect_dir = reflect(d, normal)
        # The background is added at every hit, not only on misses.
        natural_color = scene.background + self.get_natural_color(isect.thing, pos, normal, reflect_dir, scene)
        if depth >= self.max_depth:
            reflected_color = Color.grey()
        else:
            reflected_color = self.get_reflection_color(isect.thing, pos, reflect_dir, scene, depth)
        return natural_color + reflected_color

    def get_reflection_color(self, thing: Hittable, pos: Vector3, rd: Vector3,
                             scene, depth: int) -> Color:
        return self.trace_ray(Ray(pos, rd), scene, depth + 1).scale(thing.surface.reflect(pos))

    def add_light(self, thing: Hittable, pos: Vector3, normal: Vector3, rd: Vector3,
                  scene, col: Color, light: Light) -> Color:
        """
        Adds one light's diffuse and specular contribution at pos to col.
        Lights blocked by a nearer primitive contribute nothing.
        """
        ldis = light.pos - pos
        livec = ldis.normalize()
        near_dist = self.test_ray(Ray(pos, livec), scene)
        if near_dist is not None and near_dist < ldis.length():
            return col

        illum = livec.dot(normal)
        lcolor = light.color.scale(illum) if illum > 0 else Color.default_color()
        specular = livec.dot(rd.normalize())
        surface = thing.surface
        if specular > 0:
            scolor = light.color.scale(ipow(specular, surface.roughness))
        else:
            scolor = Color.default_color()
        return col + surface.diffuse(pos) * lcolor + surface.specular(pos) * scolor

    def get_natural_color(self, thing: Hittable, pos: Vector3, normal: Vector3,
                          rd: Vector3, scene) -> Color:
        col = Color.default_color()
        for light in scene.lights:
            col = self.add_light(thing, pos, normal, rd, scene, col, light)
        return col

    def render_rows(self, scene, canvas, width: int, height: int, rows: Iterable[int]):
        """Traces every pixel of the given rows into canvas."""
        camera = scene.camera
        for y in rows:
            for x in range(width):
                ray = camera.get_ray(x, y, width, height)
                canvas.set_pixel(x, y, self.trace_ray(ray, scene, 0))

    def render(self, scene, canvas, width: int, height: int):
        """Traces the whole image row by row on the calling thread."""
        start = time.perf_counter()
        logger.debug("Rendering %dx%d with %d things and %d lights",
                     width, height, len(scene.things), len(scene.lights))
        self.render_rows(scene, canvas, width, height, range(height))
        logger.info("Rendered %dx%d in %.3fs", width, height, time.perf_counter() - start)


def render_parallel(tracer: RayTracer, scene, canvas, width: int, height: int,
                    workers: int = 4):
    """
    Splits the image into interleaved row bands and traces them on a thread
    pool. Every pixel is written exactly once, so the canvas needs no locking.
    Exceptions raised by a worker are re-raised here.
    """
    if workers <= 1:
        tracer.render(scene, canvas, width, height)
        return

    start = time.perf_counter()
    bands = [range(i, height, workers) for i in range(workers)]
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(tracer.render_rows, scene, canvas, width, height, band)
                   for band in bands]
        for future in futures:
            future.result()
    logger.info("Rendered %dx%d on %d workers in %.3fs",
                width, height, workers, time.perf_counter() - start)
