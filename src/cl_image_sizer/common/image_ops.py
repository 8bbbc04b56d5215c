"""Resampling and encoding helpers shared by the placement plugins."""

from pathlib import Path

from PIL import Image

from ..utils.media_types import get_pil_format
from ..utils.profiling import timed
from .errors import ImageIOError
from .schemas import PlacementMode, ResampleFilter

_PIL_FILTERS: dict[ResampleFilter, Image.Resampling] = {
    ResampleFilter.NEAREST: Image.Resampling.NEAREST,
    ResampleFilter.TRIANGLE: Image.Resampling.BILINEAR,
    ResampleFilter.LANCZOS3: Image.Resampling.LANCZOS,
}


def get_pil_filter(resample_filter: ResampleFilter | str) -> Image.Resampling:
    return _PIL_FILTERS[ResampleFilter(resample_filter)]


@timed
def resample(
    image: Image.Image,
    width: int,
    height: int,
    resample_filter: ResampleFilter | str = ResampleFilter.LANCZOS3,
) -> Image.Image:
    """Return a new image of exactly ``width`` x ``height``; ``image`` is untouched."""
    return image.resize((width, height), get_pil_filter(resample_filter))


def existing_output(output_path: Path, mode: PlacementMode) -> bool:
    """True when ``mode`` keeps an output that is already on disk."""
    return mode.skips_existing and output_path.exists()


def save_image(image: Image.Image, output_path: str | Path, extension: str) -> Path:
    """
    Encode ``image`` into the container named by ``extension``.

    Args:
        image: Pixels to write
        output_path: Destination file
        extension: Lower-cased source extension selecting the encoder

    Returns:
        The output path

    Raises:
        ImageIOError: If the file cannot be written
    """
    output_path = Path(output_path)
    fmt = get_pil_format(extension)

    # JPEG has no alpha channel; Pillow writes BMP as opaque 32bpp BI_RGB
    if fmt in ("JPEG", "BMP") and image.mode != "RGB":
        image = image.convert("RGB")

    try:
        image.save(output_path, format=fmt)
    except OSError as exc:
        raise ImageIOError(str(exc), path=output_path, operation="saving") from exc

    return output_path
