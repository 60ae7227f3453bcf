# camera/camera.py
import math
from core.vector import Vector3
from core.ray import Ray
from core.interval import Interval

class Camera:
    """
    Pinhole camera looking from `position` towards `lookat`, plus the
    recursive radiance estimator that follows one path per camera ray.

    `fov` is the vertical field of view in degrees. Pixel (0, 0) is the
    top-left corner of the image.
    """
    def __init__(self, position: Vector3, lookat: Vector3, fov: float,
                 image_width: int, image_height: int,
                 background: Vector3 = None, up: Vector3 = None):
        if image_width < 1 or image_height < 1:
            raise ValueError(f"Image size must be positive, got {image_width}x{image_height}")
        if not 0 < fov < 180:
            raise ValueError(f"Field of view must be in (0, 180) degrees, got {fov}")
        self.position = position
        self.lookat = lookat
        self.fov = fov
        self.image_width = image_width
        self.image_height = image_height
        self.background = background if background is not None else Vector3(0.0, 0.0, 0.0)
        self.up = up if up is not None else Vector3(0.0, 1.0, 0.0)
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        view = self.position - self.lookat
        if view.length() == 0:
            raise ValueError("Camera position and lookat point coincide")
        self.w = view.normalize()
        right = self.up.cross(self.w)
        if right.length() == 0:
            raise ValueError("Camera up vector is parallel to the view direction")
        self.u = right.normalize()
        # Points down the image so rows count from the top.
        self.v = self.u.cross(self.w)

        # Viewport at unit distance in front of the camera
        viewport_height = 2.0 * math.tan(math.radians(self.fov) / 2)
        viewport_width = viewport_height * self.image_width / self.image_height

        horizontal = self.u * viewport_width
        vertical = self.v * viewport_height

        self.pixel_dx = horizontal / self.image_width
        self.pixel_dy = vertical / self.image_height

        viewport_corner = self.position - self.w - horizontal / 2 - vertical / 2
        self.pixel_corner = viewport_corner + self.pixel_dx / 2 + self.pixel_dy / 2

    def get_ray(self, x: int, y: int, rng=None) -> Ray:
        """
        Unit-direction ray through pixel (x, y). With a sampler the target is
        jittered uniformly over the pixel footprint for anti-aliasing;
        without one the ray goes through the pixel center.
        """
        point = self.pixel_corner + self.pixel_dx * x + self.pixel_dy * y
        if rng is not None:
            point = point + self.pixel_dx * (rng.random() - 0.5) + self.pixel_dy * (rng.random() - 0.5)
        return Ray(self.position, (point - self.position).normalize())

    def raycast(self, ray: Ray, world, depth: int, rng) -> Vector3:
        """
        Radiance arriving along `ray`. Each bounce spends one unit of
        `depth`; when it runs out the background is returned.
        """
        if depth <= 0:
            return self.background

        rec = world.hit(ray, Interval.for_ray())
        if rec is None:
            return self.background

        emitted = rec.material.emitted(rec.uv, rec.p)
        scatter = rec.material.scatter(ray, rec, rng)
        if scatter is None:
            return emitted

        attenuation, scattered = scatter
        return emitted + attenuation * self.raycast(scattered, world, depth - 1, rng)
