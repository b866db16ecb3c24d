"""Imaging backend: the only place that decodes, transforms and encodes pixels."""

import asyncio
from io import BytesIO
from pathlib import Path
from typing import Protocol, runtime_checkable

from PIL import Image, UnidentifiedImageError

from ..common.errors import ImageEncodeError, ImageMetadataError
from ..common.schemas import BorderThicknesses, ImageDimensions, OutputFileInfo
from .image_ops import add_border, apply_orientation, oriented_size, resize_to_width, to_grayscale

ImageSource = Path | bytes

# formats that can embed these blocks when saving
_ICC_FORMATS = {"JPEG", "PNG", "WEBP", "TIFF"}
_EXIF_FORMATS = {"JPEG", "PNG", "WEBP"}


@runtime_checkable
class ImagingBackend(Protocol):
    """Async contract used by the edit modules.

    Implementations raise ImageMetadataError when an input cannot be
    decoded and ImageEncodeError when an output cannot be written.
    """

    async def metadata(self, source: ImageSource) -> ImageDimensions: ...

    async def apply_border(
        self,
        source: ImageSource,
        borders: BorderThicknesses,
        background_color: str,
    ) -> Image.Image: ...

    async def resize(self, source: ImageSource, width: int | None) -> Image.Image: ...

    async def grayscale(self, image: Image.Image) -> Image.Image: ...

    async def encode_to_file(self, image: Image.Image, path: Path) -> OutputFileInfo: ...

    async def encode_to_buffer(self, image: Image.Image, format: str | None) -> bytes: ...


def describe_source(source: ImageSource) -> str:
    if isinstance(source, bytes):
        return f"<buffer {len(source)} bytes>"
    return str(source)


def load_image(source: ImageSource) -> tuple[Image.Image, str | None]:
    """Decode an image fully into memory, rotated as it is displayed.

    Returns:
        The decoded image and its file format (e.g. "JPEG")

    Raises:
        ImageMetadataError: If the source cannot be opened or decoded
    """
    fp = BytesIO(source) if isinstance(source, bytes) else source
    try:
        with Image.open(fp) as img:
            img.load()
            return apply_orientation(img), img.format
    except (UnidentifiedImageError, OSError, SyntaxError) as exc:
        raise ImageMetadataError(
            f"Could not retrieve metadata of the input file {describe_source(source)}: {exc}"
        ) from exc


def read_dimensions(source: ImageSource) -> ImageDimensions:
    fp = BytesIO(source) if isinstance(source, bytes) else source
    try:
        with Image.open(fp) as img:
            width, height = oriented_size(img)
            fmt = img.format
    except (UnidentifiedImageError, OSError, SyntaxError) as exc:
        raise ImageMetadataError(
            f"Could not retrieve metadata of the input file {describe_source(source)}: {exc}"
        ) from exc

    if not width or not height:
        raise ImageMetadataError(
            f"Could not retrieve metadata of the input file {describe_source(source)}"
        )
    return ImageDimensions(width=width, height=height, format=fmt)


def _prepare_for_format(img: Image.Image, fmt: str) -> Image.Image:
    # JPEG does not support alpha channel
    if fmt == "JPEG" and img.mode not in ("RGB", "L", "CMYK"):
        return img.convert("L" if img.mode == "LA" else "RGB")
    return img


def _save_kwargs(img: Image.Image, fmt: str) -> dict[str, object]:
    save_kwargs: dict[str, object] = {}
    if fmt in _ICC_FORMATS and img.info.get("icc_profile"):
        save_kwargs["icc_profile"] = img.info["icc_profile"]
    if fmt in _EXIF_FORMATS and img.info.get("exif"):
        save_kwargs["exif"] = img.info["exif"]
    return save_kwargs


def format_for_path(path: Path) -> str:
    fmt = Image.registered_extensions().get(path.suffix.lower())
    if fmt is None:
        raise ImageEncodeError(f"Unsupported output file extension: {path.name}")
    return fmt


def save_image(img: Image.Image, path: Path) -> OutputFileInfo:
    fmt = format_for_path(path)
    prepared = _prepare_for_format(img, fmt)
    try:
        prepared.save(path, format=fmt, **_save_kwargs(img, fmt))
    except (OSError, ValueError, KeyError) as exc:
        raise ImageEncodeError(f"Failed to write {path}: {exc}") from exc

    return OutputFileInfo(
        path=str(path),
        format=fmt.lower(),
        width=prepared.width,
        height=prepared.height,
        channels=len(prepared.getbands()),
        size=path.stat().st_size,
    )


def encode_image(img: Image.Image, format: str | None) -> bytes:
    fmt = (format or "PNG").upper()
    prepared = _prepare_for_format(img, fmt)
    buffer = BytesIO()
    try:
        prepared.save(buffer, format=fmt, **_save_kwargs(img, fmt))
    except (OSError, ValueError, KeyError) as exc:
        raise ImageEncodeError(f"Failed to encode image as {fmt}: {exc}") from exc
    return buffer.getvalue()


class PillowImaging:
    """Pillow implementation of ImagingBackend.

    Pillow calls block, so each one runs in a worker thread and the event
    loop only suspends at these calls.
    """

    async def metadata(self, source: ImageSource) -> ImageDimensions:
        return await asyncio.to_thread(read_dimensions, source)

    async def apply_border(
        self,
        source: ImageSource,
        borders: BorderThicknesses,
        background_color: str,
    ) -> Image.Image:
        def _run() -> Image.Image:
            img, _ = load_image(source)
            return add_border(img, borders, background_color)

        return await asyncio.to_thread(_run)

    async def resize(self, source: ImageSource, width: int | None) -> Image.Image:
        def _run() -> Image.Image:
            img, _ = load_image(source)
            return img if width is None else resize_to_width(img, width)

        return await asyncio.to_thread(_run)

    async def grayscale(self, image: Image.Image) -> Image.Image:
        return await asyncio.to_thread(to_grayscale, image)

    async def encode_to_file(self, image: Image.Image, path: Path) -> OutputFileInfo:
        return await asyncio.to_thread(save_image, image, path)

    async def encode_to_buffer(self, image: Image.Image, format: str | None) -> bytes:
        return await asyncio.to_thread(encode_image, image, format)


def mime_for_buffer(data: bytes) -> str:
    """MIME type of an encoded image, from its decoded format."""
    try:
        with Image.open(BytesIO(data)) as img:
            fmt = img.format
    except (UnidentifiedImageError, OSError):
        return "application/octet-stream"
    return Image.MIME.get(fmt or "", "application/octet-stream")
