"""Source image loading and validation."""

from dataclasses import dataclass
from pathlib import Path

from loguru import logger
from PIL import Image

from ..utils.media_types import SUPPORTED_EXTENSIONS, ImageExtension, extension_of
from .errors import (
    DecodeError,
    DegenerateImage,
    ImageIOError,
    PathNotFound,
    UnsupportedFormat,
)


@dataclass(frozen=True)
class SourceImage:
    """A decoded source image.

    ``image`` is never mutated after load; every resample works on a copy.
    """

    path: Path
    image: Image.Image

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def extension(self) -> str:
        return extension_of(self.path)

    @property
    def image_extension(self) -> ImageExtension | None:
        return ImageExtension.from_path(self.path)

    @property
    def stem(self) -> str:
        return self.path.stem or "out"

    @property
    def suffix(self) -> str:
        """Extension as spelled on disk (case preserved), 'png' if absent."""
        return self.path.suffix.lstrip(".") or "png"


def ensure_supported(path: str | Path) -> None:
    """
    Check that a path names an existing file with a supported extension.

    Raises:
        UnsupportedFormat: If the extension is not jpg, jpeg, png, gif or bmp
        PathNotFound: If the path does not exist
    """
    path = Path(path)
    ext = extension_of(path)
    if ext not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFormat(
            f"Unsupported image format: {ext!r}",
            path=path,
            operation="validating",
        )
    if not path.exists():
        raise PathNotFound("Image path does not exist", path=path, operation="validating")


def _normalize_mode(img: Image.Image) -> Image.Image:
    # Palette and greyscale sources resample poorly (Pillow falls back to
    # nearest for "P"), so everything is widened to RGB or RGBA up front.
    if img.mode == "RGBA":
        return img.copy()
    if "A" in img.getbands() or "transparency" in img.info:
        return img.convert("RGBA")
    if img.mode == "RGB":
        return img.copy()
    return img.convert("RGB")


def load_image(path: str | Path) -> SourceImage:
    """
    Validate and decode a source image.

    Only the first frame of multi-frame files is used.

    Args:
        path: Path to the source image

    Returns:
        SourceImage with pixels normalized to RGB or RGBA

    Raises:
        UnsupportedFormat: If the extension is not supported
        PathNotFound: If the path does not exist
        DecodeError: If Pillow cannot read the file
        DegenerateImage: If the image has zero width or height
        ImageIOError: If the path is a directory or cannot be read
    """
    path = Path(path)
    ensure_supported(path)

    try:
        with Image.open(path) as img:
            img.load()
            pixels = _normalize_mode(img)
    except FileNotFoundError as exc:
        raise PathNotFound("Image path does not exist", path=path, operation="opening") from exc
    except (IsADirectoryError, PermissionError) as exc:
        raise ImageIOError(str(exc), path=path, operation="reading") from exc
    except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as exc:
        raise DecodeError(str(exc), path=path, operation="decoding") from exc

    if pixels.width == 0 or pixels.height == 0:
        raise DegenerateImage(
            f"Image has zero dimension ({pixels.width}x{pixels.height})",
            path=path,
            operation="loading",
        )

    logger.debug(f"Loaded {path} ({pixels.width}x{pixels.height}, {pixels.mode})")
    return SourceImage(path=path, image=pixels)
