"""Add frame parameters schema."""

from pydantic import BaseModel, Field

from ...common.schemas import FrameSpec, PrintPaperSpec
from .algo.frame_geometry import DEFAULT_FRAME_WIDTH_FACTOR


class AddFrameParams(BaseModel):
    """Parameters for the add frame task.

    Attributes:
        paper: Print paper dimensions (default 4x6)
        frame: Frame color and image position (default white)
        frame_width_factor: Base frame thickness as a fraction of the
            smaller image side (default 0.05)
    """

    paper: PrintPaperSpec = Field(default_factory=PrintPaperSpec)
    frame: FrameSpec = Field(default_factory=FrameSpec)
    frame_width_factor: float = DEFAULT_FRAME_WIDTH_FACTOR
