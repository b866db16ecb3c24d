"""Pure frame measurement logic (no I/O)."""

import math

from ....common.errors import FrameGeometryError
from ....common.schemas import BorderThicknesses, PrintPaperSpec

DEFAULT_FRAME_WIDTH_FACTOR = 0.05


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positives, like print layout tools do."""
    return math.floor(value + 0.5)


def target_aspect_ratio(width: int, height: int, paper: PrintPaperSpec) -> float:
    """Paper aspect ratio (w/h) turned to match the image orientation.

    Landscape and square images get the paper's long side horizontal,
    portrait images get it vertical.
    """
    paper_width = float(paper.width)  # type: ignore[arg-type]
    paper_height = float(paper.height)  # type: ignore[arg-type]

    if not (math.isfinite(paper_width) and math.isfinite(paper_height)):
        raise FrameGeometryError(
            f"Print paper dimensions must be finite: width = {paper_width} height = {paper_height}"
        )
    if paper_width == 0 or paper_height == 0:
        raise FrameGeometryError(
            f"Print paper dimensions cannot be zero: width = {paper_width} height = {paper_height}"
        )

    long_side = max(paper_width, paper_height)
    short_side = min(paper_width, paper_height)

    if width >= height:
        return long_side / short_side
    return short_side / long_side


def calculate_frame_dimensions(
    width: int,
    height: int,
    paper: PrintPaperSpec,
    frame_width_factor: float = DEFAULT_FRAME_WIDTH_FACTOR,
) -> BorderThicknesses:
    """
    Calculate the border needed to bring an image to the paper aspect ratio.

    The base frame is ``frame_width_factor`` times the smaller image side;
    one output dimension is derived from it and the other follows from the
    paper aspect ratio. Landscape and square images are centered. Portrait
    images keep the base frame on top and take the remaining height at the
    bottom, leaving room for a caption.

    Args:
        width: Image width in pixels
        height: Image height in pixels
        paper: Print paper dimensions
        frame_width_factor: Base frame thickness as a fraction of the
            smaller image side; values <= 0 give no base frame

    Returns:
        Top, left, right and bottom border thickness in pixels

    Raises:
        FrameGeometryError: If any side comes out negative, the paper has
            a zero or infinite side, or the factor is not finite
    """
    if not math.isfinite(frame_width_factor):
        raise FrameGeometryError(f"Frame width factor must be finite: {frame_width_factor}")

    output_aspect_ratio = target_aspect_ratio(width, height, paper)
    input_aspect_ratio = width / height

    smaller_side = height if width >= height else width
    frame_thickness = max(0, round_half_up(smaller_side * frame_width_factor))

    if output_aspect_ratio >= input_aspect_ratio:
        # output is relatively wider: grow height by the frame, derive width
        output_height = height + 2 * frame_thickness
        output_width = output_height * output_aspect_ratio
    else:
        output_width = width + 2 * frame_thickness
        output_height = output_width / output_aspect_ratio

    horizontal = round_half_up((output_width - width) / 2)

    if width >= height:
        vertical = round_half_up((output_height - height) / 2)
        top = bottom = vertical
    else:
        top = frame_thickness
        bottom = round_half_up(output_height - height - frame_thickness)

    borders = (top, horizontal, horizontal, bottom)
    if min(borders) < 0:
        raise FrameGeometryError(
            "Frame calculation is incorrect, frame borders cannot be negative: "
            + f"top = {top} left = {horizontal} right = {horizontal} bottom = {bottom}"
        )

    return BorderThicknesses(top=top, left=horizontal, right=horizontal, bottom=bottom)
