"""Command line tests using typer's CliRunner."""

from collections.abc import Callable
from pathlib import Path

from PIL import Image
from typer.testing import CliRunner

from cl_image_sizer.cli import app

ImageFactory = Callable[..., Path]

runner = CliRunner()


# ============================================================================
# widths
# ============================================================================


def test_widths_command(make_image: ImageFactory, source_dir: Path, output_dir: Path):
    _ = make_image("a.png", 20, 10, directory=source_dir)
    _ = (source_dir / "readme.txt").write_text("skip me")

    result = runner.invoke(
        app,
        [
            "widths",
            "--source-dir",
            str(source_dir),
            "--sizes",
            "10, 4,10",
            "--output-dir",
            str(output_dir),
        ],
    )

    assert result.exit_code == 0, result.output
    assert sorted(p.name for p in output_dir.iterdir()) == ["a-10.png", "a-4.png"]
    with Image.open(output_dir / "a-10.png") as img:
        assert img.size == (10, 5)


def test_widths_command_from_environment(
    make_image: ImageFactory, source_dir: Path, output_dir: Path
):
    _ = make_image("a.jpg", 16, 16, directory=source_dir)

    result = runner.invoke(
        app,
        ["widths"],
        env={
            "INPUT_SOURCE_DIR": str(source_dir),
            "INPUT_SIZES": "8",
            "INPUT_OUTPUT_DIR": str(output_dir),
            "INPUT_FILTER": "nearest",
            "INPUT_WORKERS": "2",
        },
    )

    assert result.exit_code == 0, result.output
    assert (output_dir / "a-8.jpg").exists()


def test_widths_command_invalid_sizes(source_dir: Path, output_dir: Path):
    result = runner.invoke(
        app,
        [
            "widths",
            "--source-dir",
            str(source_dir),
            "--sizes",
            "64,xyz",
            "--output-dir",
            str(output_dir),
        ],
    )

    assert result.exit_code == 1
    assert "xyz" in result.output
    assert not output_dir.exists()


def test_widths_command_decode_error(source_dir: Path, output_dir: Path):
    _ = (source_dir / "broken.bmp").write_bytes(b"nope")

    result = runner.invoke(
        app,
        [
            "widths",
            "--source-dir",
            str(source_dir),
            "--sizes",
            "4",
            "--output-dir",
            str(output_dir),
        ],
    )

    assert result.exit_code == 1
    assert "broken.bmp" in result.output


def test_widths_command_missing_option():
    result = runner.invoke(app, ["widths", "--sizes", "4"], env={})

    assert result.exit_code == 2


# ============================================================================
# square
# ============================================================================


def test_square_command_pad_default(sample_jpg: Path, output_dir: Path):
    result = runner.invoke(
        app,
        [
            "square",
            "--source-image",
            str(sample_jpg),
            "--sizes",
            "12",
            "--output-dir",
            str(output_dir),
        ],
    )

    assert result.exit_code == 0, result.output
    with Image.open(output_dir / "sample-12x12.jpg") as img:
        assert img.size == (12, 12)
        assert img.mode == "RGB"


def test_square_command_crop(sample_png: Path, output_dir: Path):
    result = runner.invoke(
        app,
        [
            "square",
            "--source-image",
            str(sample_png),
            "--sizes",
            "8,16",
            "--output-dir",
            str(output_dir),
            "--crop",
            "--filter",
            "triangle",
        ],
    )

    assert result.exit_code == 0, result.output
    for edge in (8, 16):
        with Image.open(output_dir / f"sample-{edge}x{edge}.png") as img:
            assert img.size == (edge, edge)
            assert img.mode == "RGBA"


def test_square_command_crop_from_environment(sample_png: Path, output_dir: Path):
    result = runner.invoke(
        app,
        ["square"],
        env={
            "INPUT_SOURCE_IMAGE": str(sample_png),
            "INPUT_SIZES": "6",
            "INPUT_OUTPUT_DIR": str(output_dir),
            "INPUT_CROP": "true",
        },
    )

    assert result.exit_code == 0, result.output
    assert (output_dir / "sample-6x6.png").exists()


def test_square_command_unsupported_aborts(tmp_path: Path, output_dir: Path):
    source = tmp_path / "doc.txt"
    _ = source.write_text("hi")

    result = runner.invoke(
        app,
        [
            "square",
            "--source-image",
            str(source),
            "--sizes",
            "8",
            "--output-dir",
            str(output_dir),
        ],
    )

    assert result.exit_code == 1
    assert "Unsupported image format" in result.output
