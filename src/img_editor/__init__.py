"""img_editor - Frame images for print paper, resize and grayscale them."""

from .common.edit_module import EditModule
from .common.errors import (
    FrameGeometryError,
    ImageEditorError,
    ImageEncodeError,
    ImageMetadataError,
)
from .common.schemas import (
    BorderThicknesses,
    BufferInput,
    FileListInput,
    FrameSpec,
    ImageDimensions,
    OperationCode,
    OutputFileInfo,
    PrintPaperSpec,
    ProcessingOutcome,
)
from .config import EditorConfig
from .plugins.add_frame.schema import AddFrameParams
from .plugins.add_frame.task import AddFrameTask
from .plugins.image_resize.schema import ImageResizeParams
from .plugins.image_resize.task import ImageResizeTask
from .utils.imaging import ImagingBackend, PillowImaging

__version__ = "0.1.0"

__all__ = [
    "AddFrameParams",
    "AddFrameTask",
    "BorderThicknesses",
    "BufferInput",
    "EditModule",
    "EditorConfig",
    "FileListInput",
    "FrameGeometryError",
    "FrameSpec",
    "ImageDimensions",
    "ImageEditorError",
    "ImageEncodeError",
    "ImageMetadataError",
    "ImageResizeParams",
    "ImageResizeTask",
    "ImagingBackend",
    "OperationCode",
    "OutputFileInfo",
    "PillowImaging",
    "PrintPaperSpec",
    "ProcessingOutcome",
    "__version__",
]
