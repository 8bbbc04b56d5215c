"""Pydantic schemas for resize parameters and results."""

from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..utils.sizes import parse_sizes

# ─────────────────────────────────────────────────────────────
# Enumerations
# ─────────────────────────────────────────────────────────────


class PlacementMode(StrEnum):
    WIDTH = "width"
    CROP = "crop"
    PAD = "pad"

    @property
    def skips_existing(self) -> bool:
        """Width outputs are idempotent-by-existence; square outputs are always rewritten."""
        return self is PlacementMode.WIDTH


class InvalidFilePolicy(StrEnum):
    SKIP = "skip"
    ABORT = "abort"


class ResampleFilter(StrEnum):
    NEAREST = "nearest"
    TRIANGLE = "triangle"
    LANCZOS3 = "lanczos3"


# ─────────────────────────────────────────────────────────────
# Base resize params
# ─────────────────────────────────────────────────────────────


class BaseResizeParams(BaseModel):
    """Parameters shared by all resize tasks.

    Built once per run and passed into the pipeline; nothing below this
    layer reads the environment.
    """

    sizes: list[int] = Field(
        ...,
        description="Target sizes; a comma separated string is parsed with parse_sizes",
    )
    output_dir: Path = Field(..., description="Directory that receives the rendered files")
    resample_filter: ResampleFilter = Field(
        default=ResampleFilter.LANCZOS3,
        description="Interpolation kernel used when resampling",
    )
    workers: int = Field(
        default=1,
        ge=0,
        description="Concurrent source files; 0 means one per CPU core",
    )
    on_invalid_file: InvalidFilePolicy = Field(
        default=InvalidFilePolicy.ABORT,
        description="What to do with files that fail extension or existence checks",
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("sizes", mode="before")
    @classmethod
    def parse_size_string(cls, v: object) -> object:
        """Accept the raw delimited form used on the command line."""
        if isinstance(v, str):
            return parse_sizes(v)
        return v

    @field_validator("sizes")
    @classmethod
    def validate_sizes(cls, v: list[int]) -> list[int]:
        """Ensure sizes are positive; drop duplicates keeping first occurrence."""
        if any(size <= 0 for size in v):
            raise ValueError("Sizes must be greater than zero")
        return list(dict.fromkeys(v))


# ─────────────────────────────────────────────────────────────
# Results
# ─────────────────────────────────────────────────────────────


class RenderedOutput(BaseModel):
    """One rendered (source, size) pair."""

    source_path: Path
    output_path: Path
    size: int
    width: int
    height: int
    written: bool = Field(
        default=True,
        description="False when an existing output was left untouched",
    )


class ResizeOutput(BaseModel):
    """Result of a resize task run."""

    outputs: list[RenderedOutput] = Field(default_factory=list)
    skipped_sources: list[Path] = Field(
        default_factory=list,
        description="Sources dropped by the skip policy",
    )
    cancelled: bool = False


class TaskResult(BaseModel):
    """Result returned by ComputeModule.execute()."""

    status: str
    task_output: ResizeOutput | None = None
    error: str | None = None

    model_config = ConfigDict(extra="forbid")
