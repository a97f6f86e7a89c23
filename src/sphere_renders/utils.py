"""
Utility functions for the Sphere Renderer.

This module provides the small vector helpers shared by rays, geometry,
the camera and the scene.
"""

import numpy as np


def as_vector(values, size=3, name="vector"):
    """
    Convert a sequence into a float64 vector of the given size.

    Args:
        values: Any sequence or array of numbers
        size: Required number of components
        name: Label used in the error message

    Returns:
        (size,) float64 array (a new copy)

    Raises:
        ValueError: If the input does not have exactly `size` components
    """
    arr = np.array(values, dtype=np.float64)
    if arr.shape != (size,):
        raise ValueError(f"{name} must have shape ({size},), got {arr.shape}")
    return arr


def normalize(v):
    """
    Scale a vector, or each row of an (N, 3) array, to unit length.

    A zero vector yields NaNs and numpy's invalid-value warning.
    """
    return v / np.linalg.norm(v, axis=-1, keepdims=True)


def frozen(arr):
    """Mark an array read-only and return it."""
    arr.setflags(write=False)
    return arr
