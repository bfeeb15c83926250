"""Fixed-width distance arithmetic shared by both finders."""

from __future__ import annotations

from typing import Optional

import numpy as np

from .exceptions import DistanceOverflowError

Distance = int

_INT32 = np.iinfo(np.int32)

#: Largest representable distance; doubles as the "unreachable" marker.
INFINITY: Distance = int(_INT32.max)
#: Smallest representable distance.
NEG_LIMIT: Distance = int(_INT32.min)

OVERFLOW_POLICIES = ("saturate", "raise")


def in_range(value: int) -> bool:
    """Return ``True`` if ``value`` fits the 32-bit signed width."""
    return NEG_LIMIT <= value <= INFINITY


def checked_add(base: Optional[Distance], weight: int, overflow: str = "saturate") -> Distance:
    """Add ``weight`` to ``base`` without wrapping.

    Args:
        base: Accumulated distance, or ``None`` when none is known yet.
        weight: Connection weight.
        overflow: Policy for a sum below the 32-bit range. ``"saturate"``
            maps it to :data:`INFINITY`; ``"raise"`` raises
            :class:`DistanceOverflowError`. A sum above the range always
            saturates: it could never beat a recorded distance, all of which
            are below :data:`INFINITY`.

    Returns:
        The sum, or :data:`INFINITY` if ``base`` is unknown or infinite.

    Examples:
        ```python
        >>> checked_add(5, 10)
        15
        >>> checked_add(INFINITY - 1, 2) == INFINITY
        True
        >>> checked_add(None, 3) == INFINITY
        True
        ```
    """
    if base is None or base == INFINITY:
        return INFINITY
    total = base + weight
    if in_range(total):
        return total
    if total < NEG_LIMIT and overflow == "raise":
        raise DistanceOverflowError(f"distance {base} + {weight} falls below the 32-bit range")
    return INFINITY


def as_optional(value: Distance) -> Optional[Distance]:
    """Translate the sentinel into ``None``."""
    return None if value == INFINITY else value


__all__ = [
    "Distance",
    "INFINITY",
    "NEG_LIMIT",
    "OVERFLOW_POLICIES",
    "in_range",
    "checked_add",
    "as_optional",
]
