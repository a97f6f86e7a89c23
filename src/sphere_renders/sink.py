"""
Image output for the Sphere Renderer.
"""
import numpy as np
import PIL.Image


def to_rgb8(colors):
    """
    Convert linear RGB colors to bytes.

    Each channel is clamped to [0, 1], scaled by 255 and truncated. NaN
    channels become 0.

    Args:
        colors: (3,) color or (..., 3) array of colors

    Returns:
        uint8 array of the same shape
    """
    colors = np.nan_to_num(np.asarray(colors, dtype=np.float64), nan=0.0)
    return (np.clip(colors, 0.0, 1.0) * 255.0).astype(np.uint8)


class PngSink:
    """Writes a raster to a PNG file."""

    def __init__(self, path):
        self.path = path

    def write(self, pixels):
        """
        Persist a (height, width, 3) uint8 raster.

        Raises:
            ValueError: If the raster has the wrong shape or dtype
            OSError: If the file cannot be written
        """
        if pixels.ndim != 3 or pixels.shape[2] != 3:
            raise ValueError(f"pixels must be (H, W, 3) array, got shape {pixels.shape}")
        if pixels.dtype != np.uint8:
            raise ValueError(f"pixels must be uint8, got {pixels.dtype}")
        PIL.Image.fromarray(pixels).save(self.path, format="PNG")

    def __repr__(self):
        return f"PngSink({self.path!r})"
