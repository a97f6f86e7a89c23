"""
Scene primitives and closest-hit selection for the Sphere Renderer.
"""
from dataclasses import dataclass, fields
from typing import Optional, Sequence

import numpy as np

from sphere_renders.intersections import intersect_sphere
from sphere_renders.utils import as_vector, frozen


@dataclass(frozen=True, eq=False)
class SphereGeometry:
    """
    Center and radius shared by surfaces and lights.

    Instances are immutable and compare structurally: two spheres are equal
    when they have the same type and every field matches element-wise.
    """
    center: np.ndarray
    radius: float

    def __post_init__(self):
        object.__setattr__(self, "center", frozen(as_vector(self.center, name="center")))
        radius = float(self.radius)
        if not radius > 0.0:
            raise ValueError(f"radius must be positive, got {self.radius}")
        object.__setattr__(self, "radius", radius)

    def intersect(self, ray) -> Optional[float]:
        """Distance along `ray` to this sphere, or None."""
        t = intersect_sphere(ray.origin, ray.direction, self.center, self.radius)
        return None if t == np.inf else float(t)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return all(np.array_equal(getattr(self, f.name), getattr(other, f.name))
                   for f in fields(self))

    __hash__ = None


@dataclass(frozen=True, eq=False)
class Surface(SphereGeometry):
    """Renderable sphere with a flat RGB color."""
    color: np.ndarray = (1.0, 1.0, 1.0)

    def __post_init__(self):
        super().__post_init__()
        object.__setattr__(self, "color", frozen(as_vector(self.color, name="color")))


@dataclass(frozen=True, eq=False)
class Light(SphereGeometry):
    """
    Point light. The radius is the light's extent and `color` its RGB
    intensity; shading only uses the center.
    """
    color: np.ndarray = (1.0, 1.0, 1.0)

    def __post_init__(self):
        super().__post_init__()
        object.__setattr__(self, "color", frozen(as_vector(self.color, name="color")))


@dataclass
class HitResult:
    """
    Result of closest-hit selection for a batch of rays.

    Attributes:
        distance: (N,) hit distance, inf where nothing is hit
        surface_index: (N,) index into the surface list, -1 where nothing is hit
        hit_point: (N, 3) world-space hit position, NaN where nothing is hit
    """
    distance: np.ndarray
    surface_index: np.ndarray
    hit_point: np.ndarray

    def __post_init__(self):
        """Validate array shapes."""
        if self.distance.ndim != 1:
            raise ValueError(f"distance must be 1D array, got shape {self.distance.shape}")
        if self.surface_index.shape != self.distance.shape:
            raise ValueError(f"surface_index shape {self.surface_index.shape} doesn't match distance shape {self.distance.shape}")
        if self.hit_point.shape != (self.distance.shape[0], 3):
            raise ValueError(f"hit_point must be (N,3) array, got shape {self.hit_point.shape}")

    @property
    def hit_mask(self):
        """(N,) True where a surface was hit."""
        return self.surface_index >= 0


class HitSelector:
    """
    Responsible for determining which surface each ray hits first, and
    whether anything blocks a shadow ray.

    Every surface is tested against every ray; there is no spatial index.
    """

    def __init__(self, surfaces: Sequence[Surface]):
        self.surfaces = surfaces

    def select_primary(self, ray_origins: np.ndarray, ray_directions: np.ndarray) -> HitResult:
        """
        Find the surface with the smallest hit distance for each ray.

        On equal distances the earliest surface in the sequence wins.

        Args:
            ray_origins: (3,) shared origin or (N, 3) per-ray origins
            ray_directions: (3,) or (N, 3) unit directions

        Returns:
            HitResult with N entries (N = 1 for a single ray)
        """
        if ray_directions.ndim == 1:
            ray_directions = ray_directions[None, :]
        n_rays = ray_directions.shape[0]

        t_min = np.full(n_rays, np.inf)
        surface_index = np.full(n_rays, -1)
        for i, surface in enumerate(self.surfaces):
            t = intersect_sphere(ray_origins, ray_directions, surface.center, surface.radius)
            closer = t < t_min
            t_min[closer] = t[closer]
            surface_index[closer] = i

        hit_points = np.full((n_rays, 3), np.nan)
        valid_hits = surface_index >= 0
        if np.any(valid_hits):
            origins = np.broadcast_to(ray_origins, ray_directions.shape)
            hit_points[valid_hits] = (origins[valid_hits] +
                                      t_min[valid_hits, None] * ray_directions[valid_hits])

        return HitResult(distance=t_min, surface_index=surface_index, hit_point=hit_points)

    def is_occluded(self, ray_origins: np.ndarray, ray_directions: np.ndarray, exclude_index):
        """
        Whether any surface other than the excluded one intersects each ray.

        Exclusion is structural: every surface equal to the excluded one is
        skipped, not only the same object.

        Args:
            ray_origins: (3,) or (N, 3) origins
            ray_directions: (3,) or (N, 3) unit directions
            exclude_index: Surface index (int, or (N,) array) to skip per ray

        Returns:
            (N,) bool array, or a bool for a single ray
        """
        is_single = ray_directions.ndim == 1
        if is_single:
            ray_directions = ray_directions[None, :]
        exclude_index = np.broadcast_to(exclude_index, ray_directions.shape[:1])

        occluded = np.zeros(ray_directions.shape[0], dtype=bool)
        for surface in self.surfaces:
            same = np.array([surface == other for other in self.surfaces], dtype=bool)
            t = intersect_sphere(ray_origins, ray_directions, surface.center, surface.radius)
            occluded |= (t != np.inf) & ~same[exclude_index]

        return bool(occluded[0]) if is_single else occluded
