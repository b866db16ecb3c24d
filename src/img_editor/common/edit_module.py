"""EditModule - Abstract base class for batch image edits."""

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path
from typing import Generic, TypeVar

from loguru import logger
from PIL import Image
from pydantic import BaseModel

from ..utils.imaging import ImagingBackend, PillowImaging
from .errors import ImageEditorError
from .output_paths import construct_output_path
from .schemas import (
    BufferInput,
    EditInput,
    FileListInput,
    ImageDimensions,
    ItemResult,
    OperationCode,
    ProcessingOutcome,
    as_edit_input,
)

P = TypeVar("P", bound=BaseModel)


class EditModule(ABC, Generic[P]):
    """
    Template-method batch driver shared by all edit operations.

    - Arguments are validated once; a failure aborts the whole batch
    - Items are edited concurrently and independently; one failing
      item never stops the others
    - The outcome is owned by execute() and built only after every
      item has finished
    """

    def __init__(self, imaging: ImagingBackend | None = None):
        self.imaging: ImagingBackend = imaging if imaging is not None else PillowImaging()

    @property
    @abstractmethod
    def task_type(self) -> str: ...

    @property
    @abstractmethod
    def op_code(self) -> OperationCode: ...

    @abstractmethod
    def validate(self, edit_input: EditInput, params: P, output: str, outcome: ProcessingOutcome) -> bool:
        """Check arguments; on failure add one message to outcome and return False."""
        ...

    @abstractmethod
    async def transform(
        self,
        source: Path | bytes,
        dimensions: ImageDimensions,
        params: P,
    ) -> Image.Image:
        """Produce the edited image for one input."""
        ...

    async def execute(
        self,
        edit_input: EditInput | bytes | Iterable[str | Path] | None,
        params: P,
        output: str | Path = ".",
    ) -> ProcessingOutcome:
        """Edit a list of files, or a single in-memory buffer.

        For a buffer the output folder is ignored and the edited image
        is returned as bytes in ``outcome.data``.

        Raises:
            OSError: If the output folder cannot be created
        """
        edit_input = as_edit_input(edit_input)
        outcome = ProcessingOutcome()

        if not self.validate(edit_input, params, str(output), outcome):
            return outcome

        match edit_input:
            case BufferInput(data=data):
                results = [await self._process_buffer(data, params)]
            case FileListInput(files=files):
                output_dir = Path(output)
                output_dir.mkdir(parents=True, exist_ok=True)
                results = await asyncio.gather(
                    *(self._process_file(file, output_dir, params) for file in files)
                )

        for item in results:
            _ = outcome.record(item)

        logger.info(
            f"{self.task_type}: {outcome.successful} succeeded, {outcome.failed} failed"
        )
        return outcome

    async def _process_file(self, file: Path, output_dir: Path, params: P) -> ItemResult:
        out_path = construct_output_path(file, output_dir, self.op_code)
        try:
            dimensions = await self.imaging.metadata(file)
            edited = await self.transform(file, dimensions, params)
            info = await self.imaging.encode_to_file(edited, out_path)
        except ImageEditorError as exc:
            logger.error(f"{self.task_type} failed for {file}: {exc}")
            return ItemResult(source=str(file), error=f"{file}: {exc}")
        except Exception as exc:
            logger.exception(f"{self.task_type} failed unexpectedly for {file}")
            return ItemResult(source=str(file), error=f"{file}: {exc}")

        logger.info(f"{self.task_type}: {file} -> {info.path} ({info.width}x{info.height})")
        return ItemResult(source=str(file), data=info)

    async def _process_buffer(self, data: bytes, params: P) -> ItemResult:
        try:
            dimensions = await self.imaging.metadata(data)
            edited = await self.transform(data, dimensions, params)
            encoded = await self.imaging.encode_to_buffer(edited, dimensions.format)
        except ImageEditorError as exc:
            logger.error(f"{self.task_type} failed for buffer input: {exc}")
            return ItemResult(source="<buffer>", error=str(exc))
        except Exception as exc:
            logger.exception(f"{self.task_type} failed unexpectedly for buffer input")
            return ItemResult(source="<buffer>", error=str(exc))

        logger.info(f"{self.task_type}: buffer -> {len(encoded)} bytes")
        return ItemResult(source="<buffer>", data=encoded)
