"""
Pytest fixtures and configuration for Sphere Renderer tests.

This module provides shared fixtures and utilities to reduce test code duplication
and improve test organization.
"""

import numpy as np
import pytest
from sphere_renders.camera import Camera
from sphere_renders.core import Scene, build_demo_scene
from sphere_renders.rays import Ray


@pytest.fixture
def demo_transform():
    """View-projection matrix of the demo camera."""
    return Camera((-5.0, 0.0, 0.0), (1.0, 0.0, 0.0)).transform()


@pytest.fixture
def demo_scene():
    return build_demo_scene()


@pytest.fixture
def empty_scene():
    """Scene with no surfaces or lights and a 0.2 ambient."""
    return Scene(np.identity(4), ambient=(0.2, 0.2, 0.2))


@pytest.fixture
def axis_ray():
    """Ray from (-5, 0, 0) along +X, through the origin."""
    return Ray((-5.0, 0.0, 0.0), (1.0, 0.0, 0.0))


@pytest.fixture
def standard_rays():
    """Common rays used in multiple tests."""
    return {
        'forward': Ray((-5.0, 0.0, 0.0), (1.0, 0.0, 0.0)),
        'backward': Ray((-5.0, 0.0, 0.0), (-1.0, 0.0, 0.0)),
        'up': Ray((-5.0, 0.0, 0.0), (0.0, 0.0, 1.0)),
        'diagonal': Ray((-5.0, 0.0, 0.0), (1.0, 1.0, 1.0)),
    }


def assert_color_close(actual, expected, rtol=1e-9, atol=1e-12, err_msg=""):
    """Assert that two colors are close, with helpful error messages."""
    np.testing.assert_allclose(
        actual, expected, rtol=rtol, atol=atol,
        err_msg=f"Color mismatch: {err_msg}"
    )
