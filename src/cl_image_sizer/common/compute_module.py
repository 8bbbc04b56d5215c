"""ComputeModule - Abstract base class for resize tasks."""

import threading
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Callable, Generic, TypeVar

from loguru import logger
from pydantic import ValidationError

from .errors import ImageSizerError
from .schemas import BaseResizeParams, ResizeOutput, TaskResult

P = TypeVar("P", bound=BaseResizeParams)


class ComputeModule(ABC, Generic[P]):
    """
    Stateless, template-method based compute module.

    - Params are validated once and passed through
    - run() raises on failure
    - execute() turns failures into an error TaskResult
    """

    schema: type[P]

    @property
    @abstractmethod
    def task_type(self) -> str: ...

    @abstractmethod
    def run(
        self,
        params: P,
        progress_callback: Callable[[int], None] | None = None,
        cancel_event: threading.Event | None = None,
    ) -> ResizeOutput:
        """
        Execute task.

        - Writes rendered files under params.output_dir
        - Returns what was written or skipped
        """
        ...

    def execute(
        self,
        params: P | Mapping[str, object],
        progress_callback: Callable[[int], None] | None = None,
        cancel_event: threading.Event | None = None,
    ) -> TaskResult:
        try:
            if not isinstance(params, self.schema):
                params = self.schema.model_validate(params)

            output = self.run(params, progress_callback, cancel_event)

            return TaskResult(status="ok", task_output=output)

        except ValidationError as exc:
            logger.error(f"{self.task_type}: invalid parameters: {exc}")
            return TaskResult(status="error", error=f"Invalid parameters: {exc}")

        except ImageSizerError as exc:
            logger.error(f"{self.task_type}: {exc}")
            return TaskResult(status="error", error=str(exc))

        except Exception as exc:
            logger.exception(f"{self.task_type}: unexpected failure")
            return TaskResult(status="error", error=str(exc))
