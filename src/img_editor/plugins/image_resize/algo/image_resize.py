"""Single-file resize and grayscale operation."""

from pathlib import Path

from PIL import Image

from ....utils.image_ops import apply_orientation, resize_to_width, to_grayscale


def image_resize(
    *,
    input_path: str | Path,
    output_path: str | Path,
    width: int | None = None,
    grayscale: bool = False,
) -> str:
    """
    Resize and/or grayscale a single image and write output.

    Framework-agnostic, single-responsibility function.

    Args:
        input_path: Path to input image
        output_path: Path to output image
        width: Target width; height follows the aspect ratio. None keeps the size
        grayscale: Convert to grayscale if True

    Returns:
        Output file path as string

    Raises:
        FileNotFoundError: If input image does not exist
        OSError: If Pillow fails to read/write the image
    """
    input_path = Path(input_path)
    output_path = Path(output_path)

    with Image.open(input_path) as img:
        result = apply_orientation(img)
        if width is not None:
            result = resize_to_width(result, width)
        if grayscale:
            result = to_grayscale(result)

        if output_path.suffix.lower() in (".jpg", ".jpeg") and result.mode in ("RGBA", "LA", "P"):
            result = result.convert("RGB" if result.mode != "LA" else "L")

        result.save(output_path)

    return str(output_path)
