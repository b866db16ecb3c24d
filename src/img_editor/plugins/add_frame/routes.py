"""Add frame route factory."""

from typing import Annotated, cast

from fastapi import APIRouter, File, Form, HTTPException, UploadFile
from fastapi.responses import Response

from ...common.schemas import FrameSpec, PrintPaperSpec
from ...utils.imaging import ImagingBackend, mime_for_buffer
from .algo.frame_geometry import DEFAULT_FRAME_WIDTH_FACTOR
from .schema import AddFrameParams
from .task import AddFrameTask


def create_router(imaging: ImagingBackend | None = None) -> APIRouter:
    """Create router with an injected imaging backend.

    Args:
        imaging: ImagingBackend implementation (Pillow if None)

    Returns:
        Configured APIRouter with the add frame endpoint
    """
    router = APIRouter()
    task = AddFrameTask(imaging)

    @router.post("/frame")
    async def add_frame(
        file: Annotated[UploadFile, File(description="Image file to frame")],
        paper_width: Annotated[float, Form(description="Print paper width")] = 4,
        paper_height: Annotated[float, Form(description="Print paper height")] = 6,
        frame_color: Annotated[str, Form(description="Frame color, i.e. #fff")] = "#fff",
        frame_width_factor: Annotated[
            float, Form(description="Frame width as a fraction of the smaller side")
        ] = DEFAULT_FRAME_WIDTH_FACTOR,
    ) -> Response:
        """Add a frame to the uploaded image and return the framed image."""
        data = await file.read()
        params = AddFrameParams(
            paper=PrintPaperSpec(width=paper_width, height=paper_height),
            frame=FrameSpec(color=frame_color),
            frame_width_factor=frame_width_factor,
        )

        outcome = await task.execute(data, params)
        if not outcome.success or not outcome.data:
            raise HTTPException(status_code=422, detail=outcome.errors)

        framed = cast(bytes, outcome.data[0])
        return Response(content=framed, media_type=mime_for_buffer(framed))

    _ = add_frame
    return router
