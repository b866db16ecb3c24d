"""Comprehensive test suite for the image resize plugin."""

from io import BytesIO
from pathlib import Path

import pytest
from PIL import Image

from img_editor.common.schemas import OutputFileInfo
from img_editor.plugins.image_resize.algo.image_resize import image_resize
from img_editor.plugins.image_resize.schema import ImageResizeParams
from img_editor.plugins.image_resize.task import ImageResizeTask
from img_editor.utils.image_ops import resize_to_width, to_grayscale

from .conftest import FailingEncodeImaging, ImageFactory


@pytest.fixture
def resize_task() -> ImageResizeTask:
    return ImageResizeTask()


# ============================================================================
# Test Class 1: Schema Validation
# ============================================================================


class TestImageResizeParams:
    def test_defaults(self) -> None:
        params = ImageResizeParams()

        assert params.width is None
        assert params.grayscale is False

    def test_custom_values(self) -> None:
        params = ImageResizeParams(width=512, grayscale=True)

        assert params.width == 512
        assert params.grayscale is True


# ============================================================================
# Test Class 2: Algorithms
# ============================================================================


class TestResizeAlgorithms:
    def test_resize_keeps_aspect_ratio(self) -> None:
        resized = resize_to_width(Image.new("RGB", (200, 100)), 50)

        assert resized.size == (50, 25)

    def test_resize_can_upscale(self) -> None:
        resized = resize_to_width(Image.new("RGB", (20, 10)), 100)

        assert resized.size == (100, 50)

    def test_grayscale_rgb(self) -> None:
        gray = to_grayscale(Image.new("RGB", (4, 4), (255, 0, 0)))

        assert gray.mode == "L"

    def test_grayscale_keeps_alpha(self) -> None:
        gray = to_grayscale(Image.new("RGBA", (4, 4), (255, 0, 0, 128)))

        assert gray.mode == "LA"

    def test_image_resize_single_file(self, landscape_image: Path, tmp_path: Path) -> None:
        output_path = tmp_path / "small.jpg"

        result = image_resize(input_path=landscape_image, output_path=output_path, width=100, grayscale=True)

        assert result == str(output_path)
        with Image.open(output_path) as img:
            assert img.size == (100, 50)
            assert img.mode == "L"


# ============================================================================
# Test Class 3: Task execution
# ============================================================================


class TestImageResizeTask:
    @pytest.mark.asyncio
    async def test_resize_width(
        self,
        resize_task: ImageResizeTask,
        landscape_image: Path,
        output_dir: Path,
    ) -> None:
        outcome = await resize_task.execute([landscape_image], ImageResizeParams(width=50), output_dir)

        assert outcome.success
        info = outcome.data[0]
        assert isinstance(info, OutputFileInfo)
        assert (info.width, info.height) == (50, 25)
        assert Path(info.path).name.startswith("edited-rsz-")
        assert info.channels == 3

    @pytest.mark.asyncio
    async def test_grayscale_only(
        self,
        resize_task: ImageResizeTask,
        landscape_image: Path,
        output_dir: Path,
    ) -> None:
        outcome = await resize_task.execute([landscape_image], ImageResizeParams(grayscale=True), output_dir)

        info = outcome.data[0]
        assert isinstance(info, OutputFileInfo)
        assert (info.width, info.height) == (200, 100)
        assert info.channels == 1

    @pytest.mark.asyncio
    async def test_resize_and_grayscale_batch(
        self,
        resize_task: ImageResizeTask,
        make_image: ImageFactory,
        output_dir: Path,
    ) -> None:
        files = [make_image(f"img{i}.png", 100 + i * 10, 100) for i in range(4)]

        outcome = await resize_task.execute(files, ImageResizeParams(width=20, grayscale=True), output_dir)

        assert outcome.successful == 4
        assert len(list(output_dir.iterdir())) == 4
        for info in outcome.data:
            assert isinstance(info, OutputFileInfo)
            assert info.width == 20
            assert info.channels == 1

    @pytest.mark.asyncio
    async def test_missing_width_and_grayscale(
        self,
        resize_task: ImageResizeTask,
        landscape_image: Path,
        output_dir: Path,
    ) -> None:
        outcome = await resize_task.execute([landscape_image], ImageResizeParams(), output_dir)

        assert outcome.errors == ["Either 'width' or 'grayscale' should be defined"]
        assert not output_dir.exists()

    @pytest.mark.asyncio
    async def test_invalid_width(
        self,
        resize_task: ImageResizeTask,
        landscape_image: Path,
        output_dir: Path,
    ) -> None:
        outcome = await resize_task.execute([landscape_image], ImageResizeParams(width=0), output_dir)

        assert outcome.errors == ["Width must be a valid integer (gt 0)"]
        assert outcome.successful == 0

    @pytest.mark.asyncio
    async def test_sub_pixel_width_fails_validation(
        self,
        resize_task: ImageResizeTask,
        landscape_image: Path,
        output_dir: Path,
    ) -> None:
        outcome = await resize_task.execute([landscape_image], ImageResizeParams(width=0.4), output_dir)

        assert outcome.errors == ["Width must be a valid integer (gt 0)"]
        assert outcome.failed == 0
        assert not output_dir.exists()

    @pytest.mark.asyncio
    async def test_encode_failure_is_recorded(
        self,
        failing_imaging: FailingEncodeImaging,
        make_image: ImageFactory,
        output_dir: Path,
    ) -> None:
        task = ImageResizeTask(failing_imaging)
        files = [make_image("bad.png"), make_image("fine.png")]

        outcome = await task.execute(files, ImageResizeParams(width=10), output_dir)

        assert outcome.successful == 1
        assert outcome.failed == 1
        assert len(outcome.errors) == 1

    @pytest.mark.asyncio
    async def test_buffer_input(
        self,
        resize_task: ImageResizeTask,
        jpeg_bytes: bytes,
        output_dir: Path,
    ) -> None:
        outcome = await resize_task.execute(jpeg_bytes, ImageResizeParams(width=50, grayscale=True), output_dir)

        assert outcome.successful == 1
        data = outcome.data[0]
        assert isinstance(data, bytes)
        assert not output_dir.exists()
        with Image.open(BytesIO(data)) as img:
            assert img.format == "JPEG"
            assert img.size == (50, 100)
            assert img.mode == "L"
