"""Image resize task implementation."""

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
from ...common.validation import check_resize_arguments
from .schema import ImageResizeParams


class ImageResizeTask(EditModule[ImageResizeParams]):
    """Resizes images preserving the aspect ratio and/or grayscales them."""

    @property
    @override
    def task_type(self) -> str:
        return "image_resize"

    @property
    @override
    def op_code(self) -> OperationCode:
        return OperationCode.RESIZE

    @override
    def validate(
        self,
        edit_input: EditInput,
        params: ImageResizeParams,
        output: str,
        outcome: ProcessingOutcome,
    ) -> bool:
        _ = output
        return check_resize_arguments(edit_input, params.width, params.grayscale, outcome)

    @override
    async def transform(
        self,
        source: Path | bytes,
        dimensions: ImageDimensions,
        params: ImageResizeParams,
    ) -> Image.Image:
        _ = dimensions
        width = round(params.width) if params.width is not None else None
        image = await self.imaging.resize(source, width)
        if params.grayscale:
            image = await self.imaging.grayscale(image)
        return image
