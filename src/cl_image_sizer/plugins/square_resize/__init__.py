"""Square resize plugin."""

from .schema import SquareResizeParams
from .task import SquareResizeTask

__all__ = ["SquareResizeTask", "SquareResizeParams"]
