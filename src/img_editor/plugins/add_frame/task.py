"""Add frame task implementation."""

from pathlib import Path
from typing_extensions import override

from PIL import Image

from ...common.edit_module import EditModule
from ...common.schemas import (
    EditInput,
    ImageDimensions,
    OperationCode,
    ProcessingOutcome,
)
from ...common.validation import check_arguments
from .algo.frame_geometry import calculate_frame_dimensions
from .schema import AddFrameParams


class AddFrameTask(EditModule[AddFrameParams]):
    """Adds a frame around images to match a print paper aspect ratio."""

    @property
    @override
    def task_type(self) -> str:
        return "add_frame"

    @property
    @override
    def op_code(self) -> OperationCode:
        return OperationCode.ADD_FRAME

    @override
    def validate(
        self,
        edit_input: EditInput,
        params: AddFrameParams,
        output: str,
        outcome: ProcessingOutcome,
    ) -> bool:
        return check_arguments(edit_input, params.paper, params.frame, output, outcome)

    @override
    async def transform(
        self,
        source: Path | bytes,
        dimensions: ImageDimensions,
        params: AddFrameParams,
    ) -> Image.Image:
        borders = calculate_frame_dimensions(
            dimensions.width,
            dimensions.height,
            params.paper,
            params.frame_width_factor,
        )
        # validated as a hex color before any item is processed
        color = str(params.frame.color)
        return await self.imaging.apply_border(source, borders, color)
