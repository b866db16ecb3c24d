"""Single-file add frame operation."""

from pathlib import Path

from PIL import Image

from ....common.schemas import PrintPaperSpec
from ....utils.image_ops import add_border, apply_orientation
from .frame_geometry import DEFAULT_FRAME_WIDTH_FACTOR, calculate_frame_dimensions


def add_frame(
    *,
    input_path: str | Path,
    output_path: str | Path,
    paper: PrintPaperSpec | None = None,
    frame_color: str = "#fff",
    frame_width_factor: float = DEFAULT_FRAME_WIDTH_FACTOR,
) -> str:
    """
    Frame a single image to the paper aspect ratio and write output.

    Framework-agnostic, single-image operation.

    Args:
        input_path: Path to input image
        output_path: Path to output image
        paper: Print paper dimensions (default 4x6)
        frame_color: Hex frame color
        frame_width_factor: Base frame thickness as a fraction of the smaller side

    Returns:
        Output file path as string

    Raises:
        FileNotFoundError: If input image does not exist
        FrameGeometryError: If the frame cannot be computed
        OSError: If Pillow fails to read/write the image
    """
    input_path = Path(input_path)
    output_path = Path(output_path)
    paper = paper or PrintPaperSpec()

    with Image.open(input_path) as src:
        img = apply_orientation(src)
        borders = calculate_frame_dimensions(img.width, img.height, paper, frame_width_factor)
        framed = add_border(img, borders, frame_color)

        # JPEG does not support alpha channel
        if output_path.suffix.lower() in (".jpg", ".jpeg") and framed.mode in ("RGBA", "LA", "P"):
            framed = framed.convert("RGB")

        framed.save(output_path)

    return str(output_path)
