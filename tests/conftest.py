"""Test configuration and fixtures for cl_image_sizer.

This module provides:
- Synthetic source images written with Pillow
- Temporary source/output directories
- Loguru reset between tests
"""

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from loguru import logger
from PIL import Image, ImageDraw

ImageFactory = Callable[..., Path]


# ============================================================================
# Logging
# ============================================================================


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Undo any sinks the CLI installed so later tests start silent."""
    yield
    logger.remove()
    logger.disable("cl_image_sizer")


# ============================================================================
# Function-Scoped Fixtures (Run Per Test)
# ============================================================================


def draw_pattern(width: int, height: int, mode: str = "RGB") -> Image.Image:
    """Gradient with a contrasting block so resampling filters differ."""
    img = Image.new(mode, (width, height))
    pixels = img.load()
    assert pixels is not None
    for x in range(width):
        for y in range(height):
            r = (x * 255) // max(width - 1, 1)
            g = (y * 255) // max(height - 1, 1)
            b = ((x + y) * 7) % 256
            if mode == "RGBA":
                pixels[x, y] = (r, g, b, 255)
            elif mode == "L":
                pixels[x, y] = (r + g) // 2
            else:
                pixels[x, y] = (r, g, b)

    if width > 4 and height > 4 and mode in ("RGB", "RGBA"):
        draw = ImageDraw.Draw(img)
        fill = (255, 255, 255, 255) if mode == "RGBA" else (255, 255, 255)
        draw.rectangle([width // 4, height // 4, width // 2, height // 2], fill=fill)
    return img


@pytest.fixture
def make_image(tmp_path: Path) -> ImageFactory:
    """Factory writing a synthetic image and returning its path."""

    def factory(
        name: str,
        width: int = 32,
        height: int = 24,
        mode: str = "RGB",
        directory: Path | None = None,
        solid: bool = False,
    ) -> Path:
        target_dir = directory if directory is not None else tmp_path / "src"
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / name
        if solid:
            img = Image.new(mode, (width, height))
        else:
            img = draw_pattern(width, height, mode)
        img.save(path)
        return path

    return factory


@pytest.fixture
def sample_png(make_image: ImageFactory) -> Path:
    return make_image("sample.png", 40, 20, mode="RGBA")


@pytest.fixture
def sample_jpg(make_image: ImageFactory) -> Path:
    return make_image("sample.jpg", 40, 20)


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    path = tmp_path / "src"
    path.mkdir(exist_ok=True)
    return path


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Output directory path; not created, tasks create it themselves."""
    return tmp_path / "out"
