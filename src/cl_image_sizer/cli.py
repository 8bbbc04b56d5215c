"""Command line entry point.

Every option can also be supplied through an ``INPUT_*`` environment
variable. Parameters are collected into a pydantic model once and handed to
the task; nothing below this module reads the environment.
"""

import signal
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TypeVar

import typer
from loguru import logger
from pydantic import ValidationError

from .common.compute_module import ComputeModule
from .common.schemas import BaseResizeParams, ResampleFilter, TaskResult
from .plugins.square_resize import SquareResizeParams, SquareResizeTask
from .plugins.width_resize import WidthResizeParams, WidthResizeTask
from .utils.log_config import configure_logging

P = TypeVar("P", bound=BaseResizeParams)

app = typer.Typer(
    help="Batch resize images to target widths or square canvases.",
    no_args_is_help=True,
)


@contextmanager
def cancel_on_sigterm() -> Iterator[threading.Event]:
    """Set the yielded event on SIGTERM so the batch stops between files."""
    event = threading.Event()

    def handler(signum: int, frame: object) -> None:
        logger.warning("Received SIGTERM, stopping after the current file")
        event.set()

    if threading.current_thread() is not threading.main_thread():
        yield event
        return

    previous = signal.signal(signal.SIGTERM, handler)
    try:
        yield event
    finally:
        _ = signal.signal(signal.SIGTERM, previous)


def _run_task(task: ComputeModule[P], params: P) -> TaskResult:
    with cancel_on_sigterm() as cancel_event:
        result = task.execute(params, cancel_event=cancel_event)

    if result.status != "ok" or result.task_output is None:
        typer.echo(f"Error: {result.error}", err=True)
        raise typer.Exit(code=1)

    output = result.task_output
    written = sum(1 for item in output.outputs if item.written)
    logger.info(
        f"{task.task_type}: {written} written, "
        f"{len(output.outputs) - written} already present, "
        f"{len(output.skipped_sources)} sources skipped"
    )
    if output.cancelled:
        logger.warning(f"{task.task_type}: cancelled before all sources were processed")
    return result


def _build(schema: type[P], **values: object) -> P:
    try:
        return schema.model_validate(values)
    except ValidationError as exc:
        typer.echo(f"Error: invalid parameters: {exc}", err=True)
        raise typer.Exit(code=1) from exc


SizesOption = typer.Option(..., envvar="INPUT_SIZES", help="Comma separated list of sizes")
OutputDirOption = typer.Option(..., envvar="INPUT_OUTPUT_DIR", help="Output directory")
FilterOption = typer.Option(
    ResampleFilter.LANCZOS3, "--filter", envvar="INPUT_FILTER", help="Resampling filter"
)
WorkersOption = typer.Option(
    1, envvar="INPUT_WORKERS", min=0, help="Source files processed concurrently (0 = CPU count)"
)
LogLevelOption = typer.Option("INFO", envvar="INPUT_LOG_LEVEL", help="Log level")


@app.command()
def widths(
    source_dir: Path = typer.Option(
        ..., envvar="INPUT_SOURCE_DIR", help="Directory containing source images"
    ),
    sizes: str = SizesOption,
    output_dir: Path = OutputDirOption,
    resample_filter: ResampleFilter = FilterOption,
    workers: int = WorkersOption,
    log_level: str = LogLevelOption,
) -> None:
    """Resize every image in a directory to each target width."""
    configure_logging(log_level)
    params = _build(
        WidthResizeParams,
        source_dir=source_dir,
        sizes=sizes,
        output_dir=output_dir,
        resample_filter=resample_filter,
        workers=workers,
    )
    _ = _run_task(WidthResizeTask(), params)


@app.command()
def square(
    source_image: Path = typer.Option(
        ..., envvar="INPUT_SOURCE_IMAGE", help="Source image path"
    ),
    sizes: str = SizesOption,
    output_dir: Path = OutputDirOption,
    crop: bool = typer.Option(
        False, "--crop/--pad", envvar="INPUT_CROP", help="Center-crop instead of pad"
    ),
    resample_filter: ResampleFilter = FilterOption,
    log_level: str = LogLevelOption,
) -> None:
    """Render one image onto square canvases of each target edge length."""
    configure_logging(log_level)
    params = _build(
        SquareResizeParams,
        source_path=source_image,
        sizes=sizes,
        output_dir=output_dir,
        crop=crop,
        resample_filter=resample_filter,
    )
    _ = _run_task(SquareResizeTask(), params)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
