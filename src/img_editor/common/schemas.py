"""Pydantic schemas for edit parameters, inputs and results."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

# ─────────────────────────────────────────────────────────────
# Edit parameters
# ─────────────────────────────────────────────────────────────


class PrintPaperSpec(BaseModel):
    """Physical paper dimensions, in any consistent unit (e.g. inches).

    Values are not constrained here: the argument validator reports
    missing or NaN values as outcome errors instead of raising.
    """

    width: float | None = Field(default=4, description="Width of the printing paper")
    height: float | None = Field(default=6, description="Height of the printing paper")

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


class ImagePosition(BaseModel):
    x: int = 0
    y: int = 0


class FrameSpec(BaseModel):
    """Frame color and image placement (placement is reserved, not used yet)."""

    color: str | None = Field(default="#fff", description="Frame color, i.e. #fff")
    image_position: ImagePosition = Field(default_factory=ImagePosition)

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


class OperationCode(StrEnum):
    """Short tags embedded in output filenames."""

    ADD_FRAME = "afr"
    RESIZE = "rsz"


# ─────────────────────────────────────────────────────────────
# Geometry
# ─────────────────────────────────────────────────────────────


class ImageDimensions(BaseModel):
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    format: str | None = None

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


class BorderThicknesses(BaseModel):
    """Border sizes in pixels; the calculator guarantees none is negative."""

    top: int
    left: int
    right: int
    bottom: int

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    def as_ltrb(self) -> tuple[int, int, int, int]:
        return (self.left, self.top, self.right, self.bottom)


# ─────────────────────────────────────────────────────────────
# Inputs (file list | single buffer)
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class FileListInput:
    files: list[Path] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.files)


@dataclass(frozen=True)
class BufferInput:
    data: bytes = b""

    def __len__(self) -> int:
        return len(self.data)


EditInput = FileListInput | BufferInput


def as_edit_input(value: EditInput | bytes | bytearray | memoryview | Iterable[str | Path] | None) -> EditInput:
    """Decide once whether the caller passed a buffer or a list of files."""
    if isinstance(value, (FileListInput, BufferInput)):
        return value
    if value is None:
        return FileListInput()
    if isinstance(value, (bytes, bytearray, memoryview)):
        return BufferInput(bytes(value))
    if isinstance(value, (str, Path)):
        return FileListInput([Path(value)])
    return FileListInput([Path(item) for item in value])


# ─────────────────────────────────────────────────────────────
# Results
# ─────────────────────────────────────────────────────────────


class OutputFileInfo(BaseModel):
    """Descriptor of an image file written by the imaging backend."""

    path: str
    format: str | None = None
    width: int
    height: int
    channels: int
    size: int = Field(description="File size in bytes")


ItemData = OutputFileInfo | bytes


@dataclass(frozen=True)
class ItemResult:
    """Result of editing one input; exactly one of data/error is set."""

    source: str
    data: ItemData | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ProcessingOutcome(BaseModel):
    """Aggregate result of one batch invocation.

    Owned by a single batch driver; item results are folded in only after
    every item has finished.
    """

    data: list[ItemData] = Field(default_factory=list, description="Buffers or written file descriptors")
    successful: int = 0
    failed: int = 0
    errors: list[str] = Field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.failed == 0 and not self.errors

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    def record(self, item: ItemResult) -> "ProcessingOutcome":
        if item.ok and item.data is not None:
            self.successful += 1
            self.data.append(item.data)
        else:
            self.failed += 1
            self.errors.append(item.error or f"{item.source}: unknown error")
        return self
