"""Common module - errors, schemas, loading and batch execution."""

from .errors import (
    DecodeError,
    DegenerateImage,
    ImageIOError,
    ImageSizerError,
    InvalidSizeFormat,
    PathNotFound,
    UnsupportedFormat,
)
from .schemas import (
    BaseResizeParams,
    InvalidFilePolicy,
    PlacementMode,
    RenderedOutput,
    ResampleFilter,
    ResizeOutput,
    TaskResult,
)

__all__ = [
    "BaseResizeParams",
    "DecodeError",
    "DegenerateImage",
    "ImageIOError",
    "ImageSizerError",
    "InvalidFilePolicy",
    "InvalidSizeFormat",
    "PathNotFound",
    "PlacementMode",
    "RenderedOutput",
    "ResampleFilter",
    "ResizeOutput",
    "TaskResult",
    "UnsupportedFormat",
]
