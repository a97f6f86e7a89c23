"""
Scene assembly, shading and rasterization for the Sphere Renderer.
"""
import numpy as np

from sphere_renders import constants
from sphere_renders.camera import Camera
from sphere_renders.rays import screen_rays
from sphere_renders.rendering import HitSelector, Surface, Light
from sphere_renders.sink import PngSink, to_rgb8
from sphere_renders.utils import as_vector, normalize, frozen


class Scene:
    def __init__(self, camera_transform, ambient=None):
        """
        Initialize an empty scene viewed through a fixed camera transform.

        Surfaces and lights are added with the chainable `add_sphere` and
        `add_light`. The scene is not modified once rendering starts.

        Args:
            camera_transform: (4, 4) view-projection matrix, see Camera.transform()
            ambient: RGB fill color returned for rays that hit nothing
        """
        self.camera_transform = np.asarray(camera_transform, dtype=np.float64)
        self.surfaces = []
        self.lights = []
        self._ambient = frozen(as_vector(ambient if ambient is not None else constants.DEFAULT_AMBIENT,
                                         name="ambient"))
        self.diffuse = np.array(constants.DIFFUSE_COLOR)
        self.selector = HitSelector(self.surfaces)

    @property
    def ambient_color(self):
        return self._ambient

    def ambient(self, color):
        self._ambient = frozen(as_vector(color, name="ambient"))
        return self

    def add_light(self, center, radius, color):
        self.lights.append(Light(center, radius, color))
        return self

    def add_sphere(self, center, radius, color):
        self.surfaces.append(Surface(center, radius, color))
        return self

    def shade(self, ray_origins, ray_directions):
        """
        Vectorized shading of a batch of rays.

        Rays that hit nothing, and every ray when there are no lights, get the
        ambient color. Otherwise only the first light is evaluated. A hit is in
        shadow when any other surface intersects the ray toward that light, at
        any distance, and then gets color * ambient. Lit hits get
        color * (ambient + diffuse * lambert).

        Args:
            ray_origins: (3,) shared origin or (N, 3) per-ray origins
            ray_directions: (3,) or (N, 3) unit directions

        Returns:
            (N, 3) RGB colors, not clamped; (3,) for a single ray
        """
        is_single = ray_directions.ndim == 1
        if is_single:
            ray_directions = ray_directions[None, :]

        colors = np.tile(self._ambient, (ray_directions.shape[0], 1))
        hits = self.selector.select_primary(ray_origins, ray_directions)
        hit_mask = hits.hit_mask

        if self.lights and np.any(hit_mask):
            light = self.lights[0]
            points = hits.hit_point[hit_mask]
            index = hits.surface_index[hit_mask]
            surface_colors = np.array([s.color for s in self.surfaces])[index]
            centers = np.array([s.center for s in self.surfaces])[index]

            # A light centered on the hit point has no direction; lambert falls to 0
            with np.errstate(divide='ignore', invalid='ignore'):
                light_dirs = normalize(light.center - points)
            shadowed = self.selector.is_occluded(points, light_dirs, exclude_index=index)

            lambert = np.fmax(np.sum(normalize(points - centers) * light_dirs, axis=1), 0.0)
            illumination = np.where(shadowed[:, None],
                                    self._ambient,
                                    self._ambient + self.diffuse * lambert[:, None])
            colors[hit_mask] = surface_colors * illumination

        return colors[0] if is_single else colors

    def trace(self, ray):
        """
        Shade a single ray.

        Returns:
            (3,) RGB color, not clamped
        """
        return self.shade(ray.origin, ray.direction)

    def render_pixels(self, width, height):
        """
        Trace one ray per pixel, all pixels at once.

        Returns:
            (height, width, 3) uint8 raster in row-major order

        Raises:
            numpy.linalg.LinAlgError: If the camera transform is not invertible
        """
        origins, directions = screen_rays(width, height, self.camera_transform)
        colors = self.shade(origins, directions)
        return to_rgb8(colors).reshape(height, width, 3)

    def render(self, width, height, sink=None):
        """Render the scene and hand the raster to `sink` (default: PNG at test.png)."""
        if sink is None:
            sink = PngSink(constants.DEFAULT_OUTPUT)
        sink.write(self.render_pixels(width, height))


def build_demo_scene(eye=None, center=None, fovy=None, ambient=None):
    """
    Two spheres lit by one light, seen from the -X side.

    Any argument left as None uses the demo default.
    """
    camera = Camera(eye if eye is not None else constants.DEMO_EYE,
                    center if center is not None else constants.DEMO_CENTER)
    if fovy is not None:
        camera.fovy(fovy)

    scene = Scene(camera.transform())
    scene.ambient(ambient if ambient is not None else constants.DEMO_AMBIENT)
    scene.add_light(*constants.DEMO_LIGHT)
    for position, radius, color in constants.DEMO_SPHERES:
        scene.add_sphere(position, radius, color)
    return scene
