import argparse
import os
import sys
import time
import numpy as np
from sphere_renders import constants
from sphere_renders.camera import Camera
from sphere_renders.core import build_demo_scene
from sphere_renders.sink import PngSink


def render_default(resolution=constants.DEFAULT_RESOLUTION, output=constants.DEFAULT_OUTPUT):
    """Render the demo scene to a single PNG."""
    print(f"Rendering demo scene ({resolution}x{resolution}) to {output}...")
    t0 = time.time()
    build_demo_scene().render(resolution, resolution, sink=PngSink(output))
    print(f"  Complete in {time.time() - t0:.2f}s")


def generate_samples(resolution=constants.DEFAULT_RESOLUTION):
    """Render the demo scene from several viewpoints."""
    print(f"\n--- Generating Samples ({resolution}x{resolution}) ---")
    os.makedirs(constants.SAMPLES_DIR, exist_ok=True)

    samples = [
        ("Front", (-5.0, 0.0, 0.0), f"sample_front_{resolution}.png"),
        ("Below", (-5.0, 0.0, -2.0), f"sample_below_{resolution}.png"),
        ("Light side", (-4.0, -3.0, 1.0), f"sample_light_side_{resolution}.png"),
    ]

    for name, eye, filename in samples:
        print(f"Rendering {name}...")
        t0 = time.time()
        scene = build_demo_scene(eye=eye)
        scene.render(resolution, resolution, sink=PngSink(os.path.join(constants.SAMPLES_DIR, filename)))
        print(f"  Complete in {time.time() - t0:.2f}s")


def run_camera_verification():
    """Check that the demo camera transform inverts cleanly."""
    print("\n--- Camera Verification ---")
    transform = Camera(constants.DEMO_EYE, constants.DEMO_CENTER).transform()
    det = np.linalg.det(transform)
    print(f"Transform determinant: {det:.6g}")

    inverse = np.linalg.inv(transform)
    world = np.array([1.0, 0.5, -0.25, 1.0])
    clip = transform @ world
    recovered = inverse @ clip
    recovered = recovered / recovered[3]
    error = np.max(np.abs(recovered[:3] - world[:3]))
    print(f"Round-trip error: {error:.3e}")

    ok = bool(det != 0.0 and error < 1e-9)
    print("Verified camera transform." if ok else "Error: camera transform failed verification.")
    return ok


def main():
    parser = argparse.ArgumentParser(description="Sphere Renderer CLI")
    parser.add_argument("--ui", action="store_true", help="Launch the interactive Gradio UI")
    parser.add_argument("--samples", action="store_true", help="Render the demo scene from several viewpoints")
    parser.add_argument("--verify", action="store_true", help="Run camera transform checks")
    parser.add_argument("--res", type=int, default=constants.DEFAULT_RESOLUTION, help="Output resolution (square)")
    parser.add_argument("--output", default=constants.DEFAULT_OUTPUT, help="Output PNG path")

    args = parser.parse_args()

    if args.ui:
        from sphere_renders.ui import create_ui, CSS
        print("Launching UI...")
        demo = create_ui()
        demo.launch(css=CSS)
    elif args.samples:
        generate_samples(args.res)
    elif args.verify:
        if not run_camera_verification():
            sys.exit(1)
    else:
        render_default(args.res, args.output)


def run_ui():
    """Entry point for sphere-ui command."""
    sys.argv = [sys.argv[0], "--ui"]
    main()


def run_verify():
    """Entry point for sphere-verify command."""
    sys.argv = [sys.argv[0], "--verify"]
    main()


def run_samples():
    """Entry point for sphere-samples command."""
    sys.argv = [sys.argv[0], "--samples"]
    main()


if __name__ == "__main__":
    main()
