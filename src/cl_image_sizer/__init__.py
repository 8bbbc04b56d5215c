"""cl_image_sizer - Batch resize images to widths or square canvases."""

from loguru import logger

from .common.compute_module import ComputeModule
from .common.errors import (
    DecodeError,
    DegenerateImage,
    ImageIOError,
    ImageSizerError,
    InvalidSizeFormat,
    PathNotFound,
    UnsupportedFormat,
)
from .common.schemas import (
    InvalidFilePolicy,
    PlacementMode,
    RenderedOutput,
    ResampleFilter,
    ResizeOutput,
    TaskResult,
)
from .common.source_image import SourceImage, ensure_supported, load_image
from .plugins.square_resize import SquareResizeParams, SquareResizeTask
from .plugins.width_resize import WidthResizeParams, WidthResizeTask
from .utils.sizes import parse_sizes

__version__ = "0.1.0"

# Silent when embedded; the CLI enables it via configure_logging().
logger.disable("cl_image_sizer")

__all__ = [
    "ComputeModule",
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
    "SourceImage",
    "SquareResizeParams",
    "SquareResizeTask",
    "TaskResult",
    "UnsupportedFormat",
    "WidthResizeParams",
    "WidthResizeTask",
    "__version__",
    "ensure_supported",
    "load_image",
    "parse_sizes",
]
