from enum import StrEnum
from pathlib import Path


class ImageExtension(StrEnum):
    JPG = "jpg"
    JPEG = "jpeg"
    PNG = "png"
    GIF = "gif"
    BMP = "bmp"

    @classmethod
    def from_path(cls, path: str | Path) -> "ImageExtension | None":
        try:
            return cls(extension_of(path))
        except ValueError:
            return None

    @property
    def supports_alpha_canvas(self) -> bool:
        """Pad canvases are transparent only for these containers."""
        return self in (ImageExtension.PNG, ImageExtension.GIF)


SUPPORTED_EXTENSIONS: frozenset[str] = frozenset(ext.value for ext in ImageExtension)


def extension_of(path: str | Path) -> str:
    """Lower-cased extension without the leading dot, '' if there is none."""
    return Path(path).suffix.lstrip(".").lower()


def get_pil_format(format_str: str) -> str:
    """Convert format string to PIL format name."""
    format_map = {
        "jpg": "JPEG",
        "jpeg": "JPEG",
        "png": "PNG",
        "gif": "GIF",
        "bmp": "BMP",
    }
    return format_map.get(format_str.lower(), format_str.upper())
