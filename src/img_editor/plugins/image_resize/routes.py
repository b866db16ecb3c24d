"""Image resize route factory."""

from typing import Annotated, cast

from fastapi import APIRouter, File, Form, HTTPException, UploadFile
from fastapi.responses import Response

from ...utils.imaging import ImagingBackend, mime_for_buffer
from .schema import ImageResizeParams
from .task import ImageResizeTask


def create_router(imaging: ImagingBackend | None = None) -> APIRouter:
    router = APIRouter()
    task = ImageResizeTask(imaging)

    @router.post("/resize")
    async def resize(
        file: Annotated[UploadFile, File(description="Image file to resize")],
        width: Annotated[int | None, Form(description="Target width in pixels")] = None,
        grayscale: Annotated[bool, Form(description="Convert to grayscale")] = False,
    ) -> Response:
        data = await file.read()
        outcome = await task.execute(data, ImageResizeParams(width=width, grayscale=grayscale))
        if not outcome.success or not outcome.data:
            raise HTTPException(status_code=422, detail=outcome.errors)

        resized = cast(bytes, outcome.data[0])
        return Response(content=resized, media_type=mime_for_buffer(resized))

    _ = resize
    return router
