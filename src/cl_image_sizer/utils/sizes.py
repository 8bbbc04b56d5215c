"""Target size list parsing."""

import re

from ..common.errors import InvalidSizeFormat

_SIZE_TOKEN = re.compile(r"\+?[0-9]+")


def parse_sizes(raw: str) -> list[int]:
    """
    Parse a comma separated list of target sizes.

    Tokens are whitespace-trimmed and empty tokens are skipped, so ``""``
    and ``"64,,128,"`` are both valid. Duplicates are dropped and the first
    occurrence keeps its position.

    Args:
        raw: Delimited size string, e.g. ``"64,128, 64"``

    Returns:
        Ordered list of distinct positive integers

    Raises:
        InvalidSizeFormat: If a token is not a positive integer
    """
    sizes: list[int] = []
    seen: set[int] = set()

    for part in raw.split(","):
        token = part.strip()
        if not token:
            continue

        if not _SIZE_TOKEN.fullmatch(token):
            raise InvalidSizeFormat(f"invalid size '{token}'", operation="parsing sizes")

        value = int(token)
        if value == 0:
            raise InvalidSizeFormat(
                f"invalid size '{token}': must be greater than zero",
                operation="parsing sizes",
            )

        if value not in seen:
            seen.add(value)
            sizes.append(value)

    return sizes
