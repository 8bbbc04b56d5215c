"""Square resize task implementation."""

import threading
from typing import Callable

from typing_extensions import override

from ...common.batch import ensure_output_dir, run_batch
from ...common.compute_module import ComputeModule
from ...common.schemas import RenderedOutput, ResizeOutput
from ...common.source_image import SourceImage
from .algo.square_resize import square_resize
from .schema import SquareResizeParams


class SquareResizeTask(ComputeModule[SquareResizeParams]):
    """Compute module rendering one image onto square canvases."""

    schema: type[SquareResizeParams] = SquareResizeParams

    @property
    @override
    def task_type(self) -> str:
        return "square_resize"

    @override
    def run(
        self,
        params: SquareResizeParams,
        progress_callback: Callable[[int], None] | None = None,
        cancel_event: threading.Event | None = None,
    ) -> ResizeOutput:
        output_dir = ensure_output_dir(params.output_dir)

        def render(source: SourceImage, edge: int) -> RenderedOutput:
            return square_resize(
                source=source,
                output_dir=output_dir,
                edge=edge,
                mode=params.mode,
                resample_filter=params.resample_filter,
            )

        def report(finished: int) -> None:
            if progress_callback:
                progress_callback(100 * finished)

        return run_batch(
            [params.source_path],
            params.sizes,
            render,
            on_invalid_file=params.on_invalid_file,
            workers=1,
            cancel_event=cancel_event,
            progress_callback=report,
        )
