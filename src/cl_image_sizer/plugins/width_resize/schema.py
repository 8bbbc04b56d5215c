"""Width resize parameters schema."""

from pathlib import Path

from pydantic import Field

from ...common.schemas import BaseResizeParams, InvalidFilePolicy


class WidthResizeParams(BaseResizeParams):
    """Parameters for the directory batch width resize task.

    Attributes:
        source_dir: Directory scanned (non-recursively) for source images
        sizes: Target widths in pixels
        output_dir: Directory for `{stem}-{width}.{ext}` files
        on_invalid_file: Defaults to skip; unsupported files do not fail the batch
    """

    source_dir: Path = Field(..., description="Directory containing source images")
    on_invalid_file: InvalidFilePolicy = InvalidFilePolicy.SKIP
