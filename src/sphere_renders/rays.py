"""
Rays for the Sphere Renderer.

A ray is an origin plus a unit direction: P(t) = origin + t * direction.
Camera rays are built by un-projecting a pixel through the inverse of the
view-projection transform.
"""
from dataclasses import dataclass

import numpy as np

from sphere_renders.utils import as_vector, normalize, frozen


@dataclass(frozen=True, eq=False)
class Ray:
    """
    Half-line in world space.

    Attributes:
        origin: (3,) start point
        direction: (3,) unit direction, normalized at construction
    """
    origin: np.ndarray
    direction: np.ndarray

    def __post_init__(self):
        origin = frozen(as_vector(self.origin, name="origin"))
        direction = frozen(normalize(as_vector(self.direction, name="direction")))
        object.__setattr__(self, "origin", origin)
        object.__setattr__(self, "direction", direction)

    def point_at(self, t):
        """Point at parameter t along the ray (t may be negative)."""
        return self.origin + self.direction * t

    @classmethod
    def through_screen(cls, x, y, width, height, camera_transform):
        """
        Build the world-space ray through the center of pixel (x, y).

        Two points are un-projected at the same screen position, one on the
        near plane (clip z = -1) and one on the far plane (clip z = +1). The
        ray starts at the near point and heads toward the far point, which
        holds for any invertible projection.

        Args:
            x, y: Pixel coordinates (row 0 is the top of the image)
            width, height: Raster size in pixels
            camera_transform: (4, 4) view-projection matrix

        Returns:
            Ray in world space

        Raises:
            numpy.linalg.LinAlgError: If camera_transform is singular
        """
        sx = 2.0 * ((x + 0.5) / width) - 1.0
        sy = -(2.0 * ((y + 0.5) / height) - 1.0)

        inverse = np.linalg.inv(camera_transform)

        near = inverse @ np.array([sx, sy, -1.0, 1.0])
        near = near / near[3]
        far = inverse @ np.array([sx, sy, 1.0, 1.0])
        far = far / far[3]

        return cls(near[:3], far[:3] - near[:3])

    def __repr__(self):
        return f"Ray(origin={self.origin.tolist()}, direction={self.direction.tolist()})"


def screen_rays(width, height, camera_transform):
    """
    Vectorized Ray.through_screen for every pixel of a raster.

    Args:
        width, height: Raster size in pixels
        camera_transform: (4, 4) view-projection matrix

    Returns:
        tuple: (origins, directions), each (height * width, 3) in row-major
        pixel order

    Raises:
        numpy.linalg.LinAlgError: If camera_transform is singular
    """
    inverse = np.linalg.inv(camera_transform)

    px, py = np.meshgrid(np.arange(width), np.arange(height))
    sx = (2.0 * ((px + 0.5) / width) - 1.0).ravel()
    sy = (-(2.0 * ((py + 0.5) / height) - 1.0)).ravel()
    ones = np.ones_like(sx)

    near = np.stack([sx, sy, -ones, ones], axis=1) @ inverse.T
    near = near / near[:, 3:]
    far = np.stack([sx, sy, ones, ones], axis=1) @ inverse.T
    far = far / far[:, 3:]

    return near[:, :3], normalize(far[:, :3] - near[:, :3])
