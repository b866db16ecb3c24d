from typing_extensions import override


class ImageEditorError(Exception):
    """Base class for errors raised while editing a single image."""

    def __init__(self, message: str = "An unknown image editing error occurred."):
        self.message: str = message
        super().__init__(self.message)

    @override
    def __str__(self):
        return self.message


class FrameGeometryError(ImageEditorError):
    """Frame measurements are inconsistent (a border side came out negative)."""


class ImageMetadataError(ImageEditorError):
    """The imaging backend could not decode the input or read its size."""


class ImageEncodeError(ImageEditorError):
    """The imaging backend failed to write or encode the edited image."""
