"""Aspect-preserving resize to an exact target width."""

from pathlib import Path

from loguru import logger
from PIL import Image

from ....common.image_ops import existing_output, resample, save_image
from ....common.schemas import PlacementMode, RenderedOutput, ResampleFilter
from ....common.source_image import SourceImage
from ....utils.rounding import scaled_height


def width_output_name(source: SourceImage, width: int) -> str:
    return f"{source.stem}-{width}.{source.suffix}"


def target_height(source: SourceImage, width: int) -> int:
    # Very wide sources can round to zero rows; keep at least one.
    return max(1, scaled_height(source.width, source.height, width))


def render_width(
    source: SourceImage,
    width: int,
    resample_filter: ResampleFilter | str = ResampleFilter.LANCZOS3,
) -> Image.Image:
    """Resample ``source`` to ``width`` x round(h * width / w)."""
    height = target_height(source, width)
    return resample(source.image, width, height, resample_filter)


def width_resize(
    *,
    source: SourceImage,
    output_dir: str | Path,
    width: int,
    resample_filter: ResampleFilter | str = ResampleFilter.LANCZOS3,
) -> RenderedOutput:
    """
    Resize one source image to a target width and write it.

    An output that already exists is left untouched and reported with
    ``written=False``; nothing is resampled or encoded in that case.

    Args:
        source: Decoded source image
        output_dir: Directory for the rendered file
        width: Target width in pixels
        resample_filter: Interpolation kernel

    Returns:
        RenderedOutput describing the file

    Raises:
        ImageIOError: If the output cannot be written
    """
    output_path = Path(output_dir) / width_output_name(source, width)
    height = target_height(source, width)

    if existing_output(output_path, PlacementMode.WIDTH):
        logger.info(f"Skipping {output_path}, already exists")
        return RenderedOutput(
            source_path=source.path,
            output_path=output_path,
            size=width,
            width=width,
            height=height,
            written=False,
        )

    resized = render_width(source, width, resample_filter)
    _ = save_image(resized, output_path, source.extension)
    logger.info(f"Resized {source.path} to width {width} -> {output_path}")

    return RenderedOutput(
        source_path=source.path,
        output_path=output_path,
        size=width,
        width=resized.width,
        height=resized.height,
    )
