"""Fixed square canvas rendering by center-crop or center-pad."""

from pathlib import Path

from loguru import logger
from PIL import Image

from ....common.image_ops import existing_output, resample, save_image
from ....common.schemas import PlacementMode, RenderedOutput, ResampleFilter
from ....common.source_image import SourceImage
from ....utils.rounding import cover_dimensions

TRANSPARENT = (0, 0, 0, 0)
WHITE = (255, 255, 255)
SQUARE_MODES = (PlacementMode.CROP, PlacementMode.PAD)


def square_output_name(source: SourceImage, edge: int) -> str:
    return f"{source.stem}-{edge}x{edge}.{source.suffix}"


def crop_origin(new_w: int, new_h: int, edge: int) -> tuple[int, int]:
    return max(0, (new_w - edge) // 2), max(0, (new_h - edge) // 2)


def pad_offset(new_w: int, new_h: int, edge: int) -> tuple[int, int]:
    # int() truncates toward zero before the clamp
    return max(0, int((edge - new_w) / 2)), max(0, int((edge - new_h) / 2))


def blank_canvas(source: SourceImage, edge: int) -> Image.Image:
    """Transparent RGBA for png/gif sources, opaque white RGB otherwise."""
    ext = source.image_extension
    if ext is not None and ext.supports_alpha_canvas:
        return Image.new("RGBA", (edge, edge), TRANSPARENT)
    return Image.new("RGB", (edge, edge), WHITE)


def render_square(
    source: SourceImage,
    edge: int,
    crop: bool = False,
    resample_filter: ResampleFilter | str = ResampleFilter.LANCZOS3,
) -> Image.Image:
    """
    Render ``source`` onto an exact ``edge`` x ``edge`` canvas.

    The shorter side is scaled to ``edge`` first. Crop trims the longer side
    symmetrically and always yields RGBA; pad copies the resampled pixels
    onto a blank canvas without blending.
    """
    new_w, new_h = cover_dimensions(source.width, source.height, edge)
    resized = resample(source.image, new_w, new_h, resample_filter)

    if crop:
        x, y = crop_origin(new_w, new_h, edge)
        # crop() fills any area outside the source with zeros
        return resized.convert("RGBA").crop((x, y, x + edge, y + edge))

    canvas = blank_canvas(source, edge)
    x, y = pad_offset(new_w, new_h, edge)
    canvas.paste(resized.convert(canvas.mode), (x, y))
    return canvas


def square_resize(
    *,
    source: SourceImage,
    output_dir: str | Path,
    edge: int,
    mode: PlacementMode = PlacementMode.PAD,
    resample_filter: ResampleFilter | str = ResampleFilter.LANCZOS3,
) -> RenderedOutput:
    """
    Render one source image onto a square canvas and write it.

    Square modes never keep an existing output, so it is overwritten.

    Args:
        source: Decoded source image
        output_dir: Directory for the rendered file
        edge: Square edge length in pixels
        mode: PlacementMode.CROP or PlacementMode.PAD
        resample_filter: Interpolation kernel

    Returns:
        RenderedOutput describing the file

    Raises:
        ValueError: If mode is not a square placement
        ImageIOError: If the output cannot be written
    """
    mode = PlacementMode(mode)
    if mode not in SQUARE_MODES:
        raise ValueError(f"Not a square placement mode: {mode}")

    output_path = Path(output_dir) / square_output_name(source, edge)

    if existing_output(output_path, mode):
        logger.info(f"Skipping {output_path}, already exists")
        return RenderedOutput(
            source_path=source.path,
            output_path=output_path,
            size=edge,
            width=edge,
            height=edge,
            written=False,
        )

    crop = mode is PlacementMode.CROP
    rendered = render_square(source, edge, crop=crop, resample_filter=resample_filter)
    _ = save_image(rendered, output_path, source.extension)
    logger.info(
        f"{'Cropped' if crop else 'Padded'} {source.path} to {edge}x{edge} -> {output_path}"
    )

    return RenderedOutput(
        source_path=source.path,
        output_path=output_path,
        size=edge,
        width=rendered.width,
        height=rendered.height,
    )
