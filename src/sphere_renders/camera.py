"""
Camera for the Sphere Renderer.

The camera only exists to produce a single view-projection matrix, which is
the one piece of camera state the scene receives.
"""
import numpy as np

from sphere_renders import constants
from sphere_renders.utils import as_vector, normalize, frozen


def look_at_matrix(eye, center, up):
    """
    Right-handed view matrix looking from `eye` toward `center`.

    The camera looks down its local -Z axis with `up` projected onto +Y.

    Args:
        eye: (3,) camera position
        center: (3,) point the camera looks at
        up: (3,) approximate up direction

    Returns:
        (4, 4) view matrix
    """
    f = normalize(center - eye)
    s = normalize(np.cross(f, up))
    u = np.cross(s, f)

    view = np.identity(4)
    view[0, :3] = s
    view[1, :3] = u
    view[2, :3] = -f
    view[0, 3] = -np.dot(s, eye)
    view[1, 3] = -np.dot(u, eye)
    view[2, 3] = np.dot(f, eye)
    return view


def perspective_matrix(fovy, aspect_ratio, near, far):
    """
    OpenGL-style perspective projection.

    Points on the near plane map to clip z = -1 and points on the far plane
    to +1 after the perspective divide.

    Args:
        fovy: Vertical field of view (radians)
        aspect_ratio: Width / height
        near, far: Clip plane distances

    Returns:
        (4, 4) projection matrix
    """
    f = 1.0 / np.tan(fovy / 2.0)

    proj = np.zeros((4, 4))
    proj[0, 0] = f / aspect_ratio
    proj[1, 1] = f
    proj[2, 2] = (far + near) / (near - far)
    proj[2, 3] = (2.0 * far * near) / (near - far)
    proj[3, 2] = -1.0
    return proj


class Camera:
    """
    View parameters with chainable setters.

    Usage:
        transform = Camera(eye, center).fovy(0.8).far(50.0).transform()
    """

    def __init__(self, eye, center, up=None, near=None, far=None, fovy=None, aspect_ratio=None):
        self.eye = as_vector(eye, name="eye")
        self.center = as_vector(center, name="center")
        self._up = as_vector(up if up is not None else constants.DEFAULT_UP, name="up")
        self._near = near if near is not None else constants.DEFAULT_NEAR
        self._far = far if far is not None else constants.DEFAULT_FAR
        self._fovy = fovy if fovy is not None else constants.DEFAULT_FOVY
        self._aspect_ratio = aspect_ratio if aspect_ratio is not None else constants.DEFAULT_ASPECT_RATIO

    def up(self, up):
        self._up = as_vector(up, name="up")
        return self

    def near(self, near):
        self._near = float(near)
        return self

    def far(self, far):
        self._far = float(far)
        return self

    def fovy(self, fovy):
        self._fovy = float(fovy)
        return self

    def aspect_ratio(self, aspect_ratio):
        self._aspect_ratio = float(aspect_ratio)
        return self

    @property
    def params(self):
        """Current parameters as a plain dict."""
        return {
            'eye': self.eye.copy(),
            'center': self.center.copy(),
            'up': self._up.copy(),
            'near': self._near,
            'far': self._far,
            'fovy': self._fovy,
            'aspect_ratio': self._aspect_ratio,
        }

    def transform(self):
        """
        Combined view-projection matrix (projection @ view).

        Returns:
            Read-only (4, 4) array
        """
        view = look_at_matrix(self.eye, self.center, self._up)
        projection = perspective_matrix(self._fovy, self._aspect_ratio, self._near, self._far)
        return frozen(projection @ view)
