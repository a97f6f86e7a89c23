"""
Defaults and fixed shading constants for the Sphere Renderer.
"""

# Camera defaults (radians for fovy)
DEFAULT_UP = (0.0, 0.0, 1.0)
DEFAULT_NEAR = 0.1
DEFAULT_FAR = 10.0
DEFAULT_FOVY = 1.0
DEFAULT_ASPECT_RATIO = 1.0

# Shading
DEFAULT_AMBIENT = (0.2, 0.2, 0.2)
DIFFUSE_COLOR = (0.5, 0.4, 0.5)

# Output
DEFAULT_RESOLUTION = 1024
DEFAULT_OUTPUT = "test.png"
SAMPLES_DIR = "output"

# Demo scene
DEMO_EYE = (-5.0, 0.0, 0.0)
DEMO_CENTER = (1.0, 0.0, 0.0)
DEMO_AMBIENT = (0.3, 0.3, 0.3)
DEMO_LIGHT = ((-0.5, -2.0, 0.0), 1.0, (1.0, 1.0, 1.0))
DEMO_SPHERES = [
    ((4.0, 0.0, 3.0), 3.0, (1.0, 0.23, 0.47)),  # Pink
    ((1.0, 0.0, 0.0), 1.0, (0.21, 0.1, 0.47)),  # Indigo
]
