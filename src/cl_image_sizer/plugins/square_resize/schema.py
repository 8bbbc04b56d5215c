"""Square resize parameters schema."""

from pathlib import Path

from pydantic import Field

from ...common.schemas import BaseResizeParams, PlacementMode


class SquareResizeParams(BaseResizeParams):
    """Parameters for the single image square resize task.

    Attributes:
        source_path: Source image
        sizes: Square edge lengths in pixels
        output_dir: Directory for `{stem}-{s}x{s}.{ext}` files
        crop: Center-crop if True, center-pad (default) otherwise
    """

    source_path: Path = Field(..., description="Source image to render")
    crop: bool = Field(default=False, description="Crop instead of pad")

    @property
    def mode(self) -> PlacementMode:
        return PlacementMode.CROP if self.crop else PlacementMode.PAD
