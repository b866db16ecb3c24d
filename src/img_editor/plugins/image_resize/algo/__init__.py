"""Single-file resize and grayscale."""

from .image_resize import image_resize

__all__ = ["image_resize"]
