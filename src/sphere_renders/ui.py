import gradio as gr
import PIL.Image
from sphere_renders import constants
from sphere_renders.core import build_demo_scene

# Keep the previous frame visible while the next one renders.
CSS = """
.gradio-container { background-color: #0b0f19 !important; color: #e5e7eb !important; }
#output_img { background-color: #0b0f19 !important; border-radius: 8px; overflow: hidden; border: none !important; }
#output_img img { object-fit: contain; image-rendering: pixelated; }

.generating, .pending {
    opacity: 1 !important;
    filter: none !important;
    transition: none !important;
}

.loading, .progress-view, .loader, .spinner {
    display: none !important;
    visibility: hidden !important;
}
"""

DEFAULT_VIEW = [*constants.DEMO_EYE, constants.DEFAULT_FOVY, constants.DEMO_AMBIENT[0], 128]


def render_frame(eye_x, eye_y, eye_z, fovy, ambient, resolution):
    resolution = int(resolution)
    scene = build_demo_scene(eye=(eye_x, eye_y, eye_z), fovy=fovy,
                             ambient=(ambient, ambient, ambient))
    return PIL.Image.fromarray(scene.render_pixels(resolution, resolution))


def create_ui():

    with gr.Blocks(title="Sphere Renderer") as demo:

        gr.Markdown("# Sphere Renderer")
        gr.Markdown("Two spheres, one light, one ray per pixel.")

        with gr.Row():
            with gr.Column(scale=1):
                with gr.Group():
                    gr.Markdown("### 🎥 Camera")
                    eye_x = gr.Slider(minimum=-9, maximum=-1.5, value=DEFAULT_VIEW[0], step=0.1, label="Eye X", info="Distance in front of the spheres")
                    eye_y = gr.Slider(minimum=-4, maximum=4, value=DEFAULT_VIEW[1], step=0.1, label="Eye Y", info="Sideways")
                    eye_z = gr.Slider(minimum=-4, maximum=4, value=DEFAULT_VIEW[2], step=0.1, label="Eye Z", info="Height (+Z is up)")
                    fovy_slider = gr.Slider(minimum=0.2, maximum=2.5, value=DEFAULT_VIEW[3], step=0.05, label="Vertical FOV (rad)")
                    res_slider = gr.Slider(minimum=32, maximum=512, value=DEFAULT_VIEW[5], step=32, label="Render Resolution", info="Lower for speed, higher for quality")
                    reset_btn = gr.Button("🔄 Reset Viewport", variant="secondary")

                with gr.Group():
                    gr.Markdown("### 💡 Lighting")
                    ambient_slider = gr.Slider(minimum=0, maximum=1, value=DEFAULT_VIEW[4], step=0.05, label="Ambient", info="Background and shadow fill")

            with gr.Column(scale=2):
                output_img = gr.Image(label="Viewport", interactive=False, elem_id="output_img")

        inputs = [eye_x, eye_y, eye_z, fovy_slider, ambient_slider, res_slider]

        def reset_view():
            return list(DEFAULT_VIEW)

        reset_btn.click(fn=reset_view, outputs=inputs)

        for input_comp in inputs:
            input_comp.change(fn=render_frame, inputs=inputs, outputs=output_img,
                              trigger_mode="always_last", show_progress="hidden")

        demo.load(fn=render_frame, inputs=inputs, outputs=output_img, show_progress="hidden")

    return demo


if __name__ == "__main__":
    demo = create_ui()
    demo.launch(css=CSS)
