"""Image resize parameters schema."""

from pydantic import BaseModel


class ImageResizeParams(BaseModel):
    """Parameters for the image resize task.

    Attributes:
        width: Target width in pixels; height keeps the aspect ratio.
               None leaves the size unchanged (grayscale must then be set)
        grayscale: Convert to grayscale
    """

    width: int | float | None = None
    grayscale: bool = False
