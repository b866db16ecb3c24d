"""Frame geometry and single-file framing."""

from .add_border import add_frame
from .frame_geometry import calculate_frame_dimensions

__all__ = ["add_frame", "calculate_frame_dimensions"]
