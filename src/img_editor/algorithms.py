"""Public algorithm API for img_editor.

This module exports the core algorithms for direct use in applications
without the batch and HTTP layers.

Example:
    Frame measurements only::

        from img_editor.algorithms import PrintPaperSpec, calculate_frame_dimensions

        borders = calculate_frame_dimensions(
            width=3000,
            height=2000,
            paper=PrintPaperSpec(width=4, height=6),
        )
        print(borders.top, borders.left, borders.right, borders.bottom)

    Single-file edits::

        from img_editor.algorithms import add_frame, image_resize

        add_frame(input_path="photo.jpg", output_path="framed.jpg", frame_color="#000")
        image_resize(input_path="photo.jpg", output_path="small.jpg", width=800, grayscale=True)
"""

# Frame
from .common.schemas import BorderThicknesses, OperationCode, PrintPaperSpec
from .common.output_paths import construct_output_path
from .plugins.add_frame.algo.add_border import add_frame
from .plugins.add_frame.algo.frame_geometry import calculate_frame_dimensions

# Resize
from .plugins.image_resize.algo.image_resize import image_resize
from .utils.image_ops import add_border, resize_to_width, to_grayscale

__all__ = [
    # Frame
    "calculate_frame_dimensions",
    "add_border",
    "add_frame",
    "BorderThicknesses",
    "PrintPaperSpec",
    # Resize
    "image_resize",
    "resize_to_width",
    "to_grayscale",
    # Output naming
    "construct_output_path",
    "OperationCode",
]
