"""Pillow pixel operations shared by the imaging backend and the single-file algorithms."""

from PIL import ExifTags, Image, ImageOps

from ..common.schemas import BorderThicknesses

# info keys carried over to the framed image
PRESERVED_INFO_KEYS = ("icc_profile", "exif", "dpi")

# Orientation values that show the stored image rotated by 90 or 270 degrees
_SWAPPED_ORIENTATIONS = {5, 6, 7, 8}

# modes a solid fill color can be expanded into without conversion
_FILLABLE_MODES = {"RGB", "RGBA", "L", "LA"}


def oriented_size(img: Image.Image) -> tuple[int, int]:
    """(width, height) as displayed, honoring the EXIF Orientation tag.

    Reads only the header, so it is safe on a lazily opened image.
    """
    orientation = img.getexif().get(ExifTags.Base.Orientation)
    if orientation in _SWAPPED_ORIENTATIONS:
        return img.height, img.width
    return img.width, img.height


def apply_orientation(img: Image.Image) -> Image.Image:
    """Rotate pixels to the displayed orientation and drop the Orientation tag."""
    return ImageOps.exif_transpose(img) or img


def _fillable(img: Image.Image) -> Image.Image:
    if img.mode in _FILLABLE_MODES:
        return img
    # a full palette has no slot left for the fill color
    if img.mode == "PA" or "transparency" in img.info:
        return img.convert("RGBA")
    return img.convert("RGB")


def add_border(
    img: Image.Image,
    borders: BorderThicknesses,
    background_color: str,
) -> Image.Image:
    """Extend the canvas by the given borders, filled with a solid color.

    Palette and other non-RGB/L images are converted first, keeping alpha
    where the source has it.
    """
    framed = ImageOps.expand(_fillable(img), border=borders.as_ltrb(), fill=background_color)
    for key in PRESERVED_INFO_KEYS:
        if key in img.info:
            framed.info[key] = img.info[key]
    return framed


def resize_to_width(img: Image.Image, width: int) -> Image.Image:
    """Resize to ``width`` keeping the aspect ratio (upscaling allowed)."""
    height = max(1, round(img.height * width / img.width))
    resized = img.resize((width, height), Image.Resampling.LANCZOS)
    if "icc_profile" in img.info:
        resized.info["icc_profile"] = img.info["icc_profile"]
    return resized


def to_grayscale(img: Image.Image) -> Image.Image:
    if img.mode in ("L", "LA"):
        return img
    if img.mode in ("RGBA", "PA") or (img.mode == "P" and "transparency" in img.info):
        return img.convert("RGBA").convert("LA")
    return ImageOps.grayscale(img)
