"""Batch runner: drives the placement engine over a sequence of source files."""

import os
import threading
from collections.abc import Callable, Iterable, Iterator
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from pathlib import Path

from loguru import logger

from .errors import ImageIOError, PathNotFound, UnsupportedFormat
from .schemas import InvalidFilePolicy, RenderedOutput, ResizeOutput
from .source_image import SourceImage, load_image

RenderFn = Callable[[SourceImage, int], RenderedOutput]


def iter_source_files(source_dir: str | Path) -> Iterator[Path]:
    """
    Yield the regular files directly inside ``source_dir``.

    Raises:
        PathNotFound: If the directory does not exist
        ImageIOError: If the directory cannot be listed
    """
    source_dir = Path(source_dir)
    if not source_dir.exists():
        raise PathNotFound("Source directory does not exist", path=source_dir, operation="reading")
    try:
        entries = os.scandir(source_dir)
    except OSError as exc:
        raise ImageIOError(str(exc), path=source_dir, operation="reading source dir") from exc

    with entries:
        for entry in entries:
            if entry.is_file():
                yield Path(entry.path)
            else:
                logger.debug(f"Ignoring non-file entry {entry.path}")


def ensure_output_dir(output_dir: str | Path) -> Path:
    output_dir = Path(output_dir)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ImageIOError(str(exc), path=output_dir, operation="creating output dir") from exc
    return output_dir


def resolve_workers(workers: int) -> int:
    """0 means one worker per CPU core."""
    if workers <= 0:
        return os.cpu_count() or 1
    return workers


def process_file(
    path: Path,
    sizes: list[int],
    render: RenderFn,
    on_invalid_file: InvalidFilePolicy,
) -> list[RenderedOutput] | None:
    """
    Load one source and render every target size for it.

    Returns:
        Rendered outputs, or None when the file was skipped by policy
    """
    try:
        source = load_image(path)
    except (UnsupportedFormat, PathNotFound) as exc:
        if on_invalid_file is InvalidFilePolicy.SKIP:
            logger.debug(f"Skipping {path}: {exc.message}")
            return None
        raise

    return [render(source, size) for size in sizes]


def run_batch(
    paths: Iterable[str | Path],
    sizes: list[int],
    render: RenderFn,
    *,
    on_invalid_file: InvalidFilePolicy = InvalidFilePolicy.ABORT,
    workers: int = 1,
    cancel_event: threading.Event | None = None,
    progress_callback: Callable[[int], None] | None = None,
) -> ResizeOutput:
    """
    Render every size for every source path.

    ``paths`` is consumed lazily and only once. An iterator with a ``close``
    method (such as the generator from ``iter_source_files``) is closed on
    every exit, including cancellation and errors. Sources are independent, so
    with ``workers > 1`` they are processed concurrently with at most
    ``2 * workers`` files in flight. The first error that the policy does not
    skip cancels outstanding work and is re-raised.

    Args:
        paths: Candidate source files
        sizes: Target sizes, applied to each source in order
        render: Callable rendering one (source, size) pair
        on_invalid_file: Skip or abort on unsupported/missing files
        workers: Concurrent source files (0 = CPU count)
        cancel_event: Checked between files; when set, the run stops early
        progress_callback: Receives the number of finished source files

    Returns:
        ResizeOutput with outputs in completion order
    """
    result = ResizeOutput()
    finished = 0

    def record(path: Path, outputs: list[RenderedOutput] | None) -> None:
        nonlocal finished
        if outputs is None:
            result.skipped_sources.append(path)
        else:
            result.outputs.extend(outputs)
        finished += 1
        if progress_callback:
            progress_callback(finished)

    def cancelled() -> bool:
        return cancel_event is not None and cancel_event.is_set()

    max_workers = resolve_workers(workers)

    try:
        if max_workers == 1:
            for raw_path in paths:
                if cancelled():
                    result.cancelled = True
                    break
                path = Path(raw_path)
                record(path, process_file(path, sizes, render, on_invalid_file))
            return result

        pending: dict[Future[list[RenderedOutput] | None], Path] = {}

        def drain(return_when: str) -> None:
            done, _ = wait(pending, return_when=return_when)
            for future in done:
                path = pending.pop(future)
                record(path, future.result())

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            try:
                for raw_path in paths:
                    if cancelled():
                        result.cancelled = True
                        break
                    path = Path(raw_path)
                    future = executor.submit(process_file, path, sizes, render, on_invalid_file)
                    pending[future] = path
                    if len(pending) >= 2 * max_workers:
                        drain(FIRST_COMPLETED)

                while pending:
                    drain(FIRST_COMPLETED)
            except BaseException:
                for future in pending:
                    _ = future.cancel()
                raise

        return result
    finally:
        # Release the directory handle of a partly consumed generator
        close = getattr(paths, "close", None)
        if close is not None:
            close()
