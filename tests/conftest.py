"""Test configuration and fixtures for img_editor.

This module provides:
- Synthetic test images generated with Pillow (no media checked in)
- Imaging backends with injected failures
- FastAPI TestClient for route testing
- Plugin entry points served without an installed package
"""

from collections.abc import Callable
from importlib.metadata import EntryPoint
from io import BytesIO
from pathlib import Path
from typing_extensions import override

import pytest
from PIL import Image, ImageDraw

from img_editor.common.errors import ImageEncodeError
from img_editor.common.schemas import ImageDimensions, OutputFileInfo
from img_editor.utils.imaging import ImageSource, PillowImaging

ImageFactory = Callable[..., Path]

PLUGIN_ENTRY_POINTS = {
    "img_editor.tasks": [
        EntryPoint("add_frame", "img_editor.plugins.add_frame.task:AddFrameTask", "img_editor.tasks"),
        EntryPoint("image_resize", "img_editor.plugins.image_resize.task:ImageResizeTask", "img_editor.tasks"),
    ],
    "img_editor.routes": [
        EntryPoint("add_frame", "img_editor.plugins.add_frame.routes:create_router", "img_editor.routes"),
        EntryPoint("image_resize", "img_editor.plugins.image_resize.routes:create_router", "img_editor.routes"),
    ],
}


def draw_test_image(width: int, height: int, mode: str = "RGB") -> Image.Image:
    """Build a simple patterned image of the given size."""
    color = (73, 109, 137, 255) if mode == "RGBA" else (73, 109, 137)
    img = Image.new(mode, (width, height), color=color)
    draw = ImageDraw.Draw(img)
    draw.ellipse([width // 4, height // 4, 3 * width // 4, 3 * height // 4], fill="red")
    return img


# ============================================================================
# Function-Scoped Fixtures (Run Per Test)
# ============================================================================


@pytest.fixture
def make_image(tmp_path: Path) -> ImageFactory:
    """Factory writing a synthetic image into tmp_path/input."""
    input_dir = tmp_path / "input"
    input_dir.mkdir(exist_ok=True)

    def _make(name: str = "image.png", width: int = 200, height: int = 100, mode: str = "RGB") -> Path:
        path = input_dir / name
        draw_test_image(width, height, mode).save(path)
        return path

    return _make


@pytest.fixture
def landscape_image(make_image: ImageFactory) -> Path:
    return make_image("landscape.png", 200, 100)


@pytest.fixture
def portrait_image(make_image: ImageFactory) -> Path:
    return make_image("portrait.png", 80, 100)


@pytest.fixture
def png_bytes() -> bytes:
    buffer = BytesIO()
    draw_test_image(200, 100).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def jpeg_bytes() -> bytes:
    buffer = BytesIO()
    draw_test_image(100, 200).save(buffer, format="JPEG", quality=90)
    return buffer.getvalue()


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Output folder path; not created, the tasks create it."""
    return tmp_path / "output"


# ============================================================================
# Mock Imaging Backends
# ============================================================================


class RecordingImaging(PillowImaging):
    """Pillow backend that records which calls were made."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    @override
    async def metadata(self, source: ImageSource) -> ImageDimensions:
        self.calls.append("metadata")
        return await super().metadata(source)

    @override
    async def encode_to_file(self, image: Image.Image, path: Path) -> OutputFileInfo:
        self.calls.append("encode_to_file")
        return await super().encode_to_file(image, path)

    @override
    async def encode_to_buffer(self, image: Image.Image, format: str | None) -> bytes:
        self.calls.append("encode_to_buffer")
        return await super().encode_to_buffer(image, format)


class FailingEncodeImaging(PillowImaging):
    """Pillow backend whose file encode rejects inputs named ``*bad*``."""

    @override
    async def encode_to_file(self, image: Image.Image, path: Path) -> OutputFileInfo:
        if "bad" in path.name:
            raise ImageEncodeError(f"error while saving the file {path.name}")
        return await super().encode_to_file(image, path)


@pytest.fixture
def recording_imaging() -> RecordingImaging:
    return RecordingImaging()


@pytest.fixture
def failing_imaging() -> FailingEncodeImaging:
    return FailingEncodeImaging()


@pytest.fixture
def api_client():
    """Provide FastAPI TestClient with both plugin routers."""
    from fastapi import FastAPI
    from fastapi.testclient import TestClient

    from img_editor.plugins.add_frame.routes import create_router as create_frame_router
    from img_editor.plugins.image_resize.routes import create_router as create_resize_router

    app = FastAPI()
    app.include_router(create_frame_router())
    app.include_router(create_resize_router())

    return TestClient(app)


@pytest.fixture
def plugin_entry_points(monkeypatch: pytest.MonkeyPatch) -> dict[str, list[EntryPoint]]:
    """Serve the plugin entry points without requiring an installed package."""
    registered = {group: list(eps) for group, eps in PLUGIN_ENTRY_POINTS.items()}

    def _entry_points(*, group: str) -> list[EntryPoint]:
        return registered.get(group, [])

    monkeypatch.setattr("img_editor.master.entry_points", _entry_points)
    return registered
