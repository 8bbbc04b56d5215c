"""Error types raised by the sizing pipeline."""

from pathlib import Path
from typing_extensions import override


class ImageSizerError(Exception):
    """
    Base class for all pipeline failures.

    Carries the offending path and the operation that failed so a caller can
    report the problem without re-running.
    """

    def __init__(
        self,
        message: str,
        *,
        path: str | Path | None = None,
        operation: str | None = None,
    ):
        self.message: str = message
        self.path: Path | None = Path(path) if path is not None else None
        self.operation: str | None = operation
        super().__init__(self.message)

    @override
    def __str__(self):
        parts: list[str] = []
        if self.operation:
            parts.append(self.operation)
        if self.path is not None:
            parts.append(str(self.path))
        if not parts:
            return self.message
        return f"{' '.join(parts)}: {self.message}"


class InvalidSizeFormat(ImageSizerError, ValueError):
    """A size token is not a positive integer."""


class UnsupportedFormat(ImageSizerError):
    """The file extension is not in the supported allow-list."""


class PathNotFound(ImageSizerError, FileNotFoundError):
    """An input path does not exist."""


class DecodeError(ImageSizerError):
    """The codec could not parse a file whose extension passed validation."""


class ImageIOError(ImageSizerError, OSError):
    """Directory creation, read or write failure."""


class DegenerateImage(ImageSizerError):
    """The decoded image has a zero width or height."""
