"""Width resize plugin."""

from .schema import WidthResizeParams
from .task import WidthResizeTask

__all__ = ["WidthResizeTask", "WidthResizeParams"]
