"""
Small helpers exposed to modules as ``context.utility``.
"""

from __future__ import annotations

import math
import random
import uuid as _uuid
from typing import Optional, Union

_CHARS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


def uuid(length: Optional[int] = None, radix: Optional[int] = None) -> str:
    """
    Random identifier.

    Without ``length`` returns an RFC 4122 version-4 UUID string. With
    ``length`` returns that many characters drawn from the first ``radix``
    symbols of ``0-9A-Za-z`` (all 62 by default), lower-cased.
    """
    if not length:
        return str(_uuid.uuid4())
    radix = radix or len(_CHARS)
    if not 2 <= radix <= len(_CHARS):
        raise ValueError(f"radix must be between 2 and {len(_CHARS)}, got {radix}")
    return "".join(random.choice(_CHARS[:radix]) for _ in range(length)).lower()


def to_float(value: Union[str, float, int], decimals: int) -> str:
    """Parse ``value`` and format it with ``decimals`` digits after the point."""
    return f"{float(value):.{decimals}f}"


def to_radians(degrees: float) -> float:
    return math.radians(degrees)


def to_degrees(radians: float) -> float:
    return math.degrees(radians)


def random_color() -> str:
    return "#" + "".join(random.choice("0123456789ABCDEF") for _ in range(6))
