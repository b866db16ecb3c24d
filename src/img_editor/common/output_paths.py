"""Output file naming for edited images."""

from pathlib import Path

from ..utils.timestamp import to_timestamp
from .schemas import OperationCode

OUTPUT_PREFIX = "edited"


def construct_output_path(
    file: str | Path,
    output: str | Path,
    code: OperationCode,
    timestamp_ms: int | None = None,
) -> Path:
    """Build the output path for an edited file.

    The name is ``edited-<code>-<timestamp_ms>-<basename>`` inside ``output``.
    Two inputs with the same basename edited within the same millisecond
    map to the same path.

    Args:
        file: Input file path
        output: Output folder
        code: Operation code of the edit
        timestamp_ms: UTC milliseconds; defaults to now

    Returns:
        Output file path
    """
    if timestamp_ms is None:
        timestamp_ms = to_timestamp()

    filename = f"{OUTPUT_PREFIX}-{code.value}-{timestamp_ms}-{Path(file).name}"
    return Path(output) / filename
