"""Width resize algorithm."""

from .width_resize import render_width, width_output_name, width_resize

__all__ = ["render_width", "width_output_name", "width_resize"]
