"""
Ray-sphere intersection for the Sphere Renderer.

The solver projects the center-to-origin vector onto the ray direction
instead of solving the full quadratic. Its output defines the rendered image,
so the arithmetic below is kept in this exact form.
"""
import numpy as np


def intersect_sphere(ray_origins, ray_directions, center, radius):
    """
    Vectorized distance along rays to a sphere.

    Spheres whose center lies behind the ray origin (negative projection)
    are rejected outright, including when the origin is inside the sphere.
    A ray with a NaN direction is not rejected and yields NaN.

    Args:
        ray_origins: (3,) shared origin or (N, 3) per-ray origins
        ray_directions: (3,) or (N, 3) unit directions
        center: (3,) sphere center
        radius: Sphere radius

    Returns:
        Hit distances (inf where no intersection), scalar for a single ray
    """
    # Handle single vs batch
    is_single = ray_directions.ndim == 1
    if is_single:
        ray_directions = ray_directions[None, :]

    l = center - ray_origins
    v = np.sum(l * ray_directions, axis=-1)
    d2 = np.sum(l * l, axis=-1) - v * v
    r2 = radius * radius

    miss = (v < 0.0) | (d2 > r2)
    d = np.sqrt(np.where(miss, 0.0, r2 - d2))
    t = np.where(miss, np.inf, v - np.minimum(d, v + d))

    return t[0] if is_single else t
