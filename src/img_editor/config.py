"""Editor configuration with documented defaults."""

from pathlib import Path

from pydantic import BaseModel, Field

from .common.schemas import FrameSpec, PrintPaperSpec
from .common.validation import HEX_COLOR_PATTERN
from .plugins.add_frame.algo.frame_geometry import DEFAULT_FRAME_WIDTH_FACTOR
from .plugins.add_frame.schema import AddFrameParams
from .plugins.image_resize.schema import ImageResizeParams


class EditorConfig(BaseModel):
    """Settings for one editor run.

    Attributes:
        output_dir: Folder for edited files (default current directory)
        paper_width: Print paper width, finite and > 0 (default 4)
        paper_height: Print paper height (default 6)
        frame_color: Hex frame color, #RGB or #RRGGBB (default #fff)
        frame_width_factor: Base frame thickness as a fraction of the
            smaller image side (default 0.05)
        resize_width: Resize target width (default None, keep size)
        grayscale: Convert resized images to grayscale (default False)
    """

    output_dir: Path = Path(".")
    paper_width: float = Field(default=4, gt=0, allow_inf_nan=False)
    paper_height: float = Field(default=6, gt=0, allow_inf_nan=False)
    frame_color: str = Field(default="#fff", pattern=HEX_COLOR_PATTERN.pattern)
    frame_width_factor: float = Field(default=DEFAULT_FRAME_WIDTH_FACTOR, allow_inf_nan=False)
    resize_width: int | None = Field(default=None, gt=0)
    grayscale: bool = False

    def frame_params(self) -> AddFrameParams:
        return AddFrameParams(
            paper=PrintPaperSpec(width=self.paper_width, height=self.paper_height),
            frame=FrameSpec(color=self.frame_color),
            frame_width_factor=self.frame_width_factor,
        )

    def resize_params(self) -> ImageResizeParams:
        return ImageResizeParams(width=self.resize_width, grayscale=self.grayscale)
