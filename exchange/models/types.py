"""Shared type definitions for exchange models.

Asset ids and caller identities are opaque 32-byte values encoded as
0x-prefixed lowercase hex.
"""

import re
from typing import Annotated

from pydantic import Field

from exchange.constants import ID_HEX_LENGTH, UINT64_MAX

_ID_PATTERN = re.compile(rf"^0x[a-fA-F0-9]{{{ID_HEX_LENGTH}}}$")

# Asset identifier (32 bytes = 64 hex chars)
AssetId = Annotated[str, Field(pattern=rf"^0x[a-f0-9]{{{ID_HEX_LENGTH}}}$")]

# Unsigned 64-bit amount
Uint64 = Annotated[int, Field(ge=0, le=UINT64_MAX)]


def is_valid_id(value: str) -> bool:
    """Check if value is a valid 0x-prefixed 32-byte hex id.

    Args:
        value: String to validate

    Returns:
        True if valid, False otherwise
    """
    return isinstance(value, str) and _ID_PATTERN.match(value) is not None


def normalize_id(value: str, *, validate: bool = False) -> str:
    """Normalize an asset id or identity to lowercase.

    Args:
        value: A 0x-prefixed hex id
        validate: If True, raises ValueError for malformed ids.

    Returns:
        Lowercase id
    """
    if validate and not is_valid_id(value):
        raise ValueError(f"Invalid id: {value!r} (must be 0x + {ID_HEX_LENGTH} hex chars)")
    return value.lower()


def is_u64(value: object) -> bool:
    """Check that value is an int (not bool) within the u64 range."""
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= UINT64_MAX
