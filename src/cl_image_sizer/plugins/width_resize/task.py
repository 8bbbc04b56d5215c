"""Width resize task implementation."""

import threading
from typing import Callable

from typing_extensions import override

from ...common.batch import ensure_output_dir, iter_source_files, run_batch
from ...common.compute_module import ComputeModule
from ...common.schemas import RenderedOutput, ResizeOutput
from ...common.source_image import SourceImage
from .algo.width_resize import width_resize
from .schema import WidthResizeParams


class WidthResizeTask(ComputeModule[WidthResizeParams]):
    """Compute module resizing every image in a directory to a set of widths."""

    schema: type[WidthResizeParams] = WidthResizeParams

    @property
    @override
    def task_type(self) -> str:
        return "width_resize"

    @override
    def run(
        self,
        params: WidthResizeParams,
        progress_callback: Callable[[int], None] | None = None,
        cancel_event: threading.Event | None = None,
    ) -> ResizeOutput:
        output_dir = ensure_output_dir(params.output_dir)

        def render(source: SourceImage, width: int) -> RenderedOutput:
            return width_resize(
                source=source,
                output_dir=output_dir,
                width=width,
                resample_filter=params.resample_filter,
            )

        return run_batch(
            iter_source_files(params.source_dir),
            params.sizes,
            render,
            on_invalid_file=params.on_invalid_file,
            workers=params.workers,
            cancel_event=cancel_event,
            progress_callback=progress_callback,
        )
