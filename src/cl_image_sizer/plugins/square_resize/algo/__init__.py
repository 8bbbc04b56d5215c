"""Square crop/pad algorithm."""

from .square_resize import render_square, square_output_name, square_resize

__all__ = ["render_square", "square_output_name", "square_resize"]
