"""Argument checks run once, before any image of a batch is touched."""

import math
import re

from loguru import logger

from .schemas import EditInput, FrameSpec, PrintPaperSpec, ProcessingOutcome

HEX_COLOR_PATTERN = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def _is_number(value: object) -> bool:
    if value is None or isinstance(value, bool):
        return False
    if not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def is_hex_color(value: object) -> bool:
    return isinstance(value, str) and HEX_COLOR_PATTERN.match(value) is not None


def _reject(outcome: ProcessingOutcome, message: str) -> bool:
    outcome.add_error(message)
    logger.warning(message)
    return False


def check_arguments(
    edit_input: EditInput,
    paper: PrintPaperSpec,
    frame: FrameSpec,
    output: str | None,
    outcome: ProcessingOutcome,
) -> bool:
    """Validate add-frame arguments, stopping at the first problem.

    Args:
        edit_input: Files or buffer to edit
        paper: Print paper dimensions
        frame: Frame options
        output: Output folder (not checked; ignored for buffer input)
        outcome: Receives one error message on failure

    Returns:
        True if the arguments are usable
    """
    _ = output

    if len(edit_input) == 0:
        return _reject(outcome, "No input files found")

    if not (_is_number(paper.width) and _is_number(paper.height)):
        return _reject(
            outcome, "paper width and paper height must be specified and valid numbers"
        )

    if not is_hex_color(frame.color):
        return _reject(outcome, "frame color must be valid hex color string")

    return True


def check_resize_arguments(
    edit_input: EditInput,
    width: int | float | None,
    grayscale: bool,
    outcome: ProcessingOutcome,
) -> bool:
    """Validate resize arguments; either a width or grayscale is required."""
    if len(edit_input) == 0:
        return _reject(outcome, "No input files found")

    if width is not None:
        if not _is_number(width):
            return _reject(outcome, "Width must be a valid integer or None")
        # transform rounds to whole pixels
        if round(width) < 1:
            return _reject(outcome, "Width must be a valid integer (gt 0)")
    elif not grayscale:
        return _reject(outcome, "Either 'width' or 'grayscale' should be defined")

    return True
