"""Depth limiting for recursion protection.

The grammar is mutually recursive through parse_expr, so every "(" or "'"
costs several Python stack frames. A configured nesting limit is only safe
if it fits inside sys.getrecursionlimit(); depth_clamp enforces that.

Thread-safe: pure function, no shared state.
Python 3.13+.
"""

from __future__ import annotations

import logging
import sys

from sexpreader.constants import FRAMES_PER_NESTING_LEVEL

__all__ = ["depth_clamp"]

logger = logging.getLogger(__name__)


def depth_clamp(
    requested_depth: int,
    reserve_frames: int = 50,
    frames_per_level: int = FRAMES_PER_NESTING_LEVEL,
) -> int:
    """Clamp requested depth against Python recursion limit.

    Validates requested depth against sys.getrecursionlimit() to prevent
    RecursionError on systems with constrained stack limits. Logs warning
    if clamping occurs.

    Args:
        requested_depth: Desired maximum nesting depth
        reserve_frames: Stack frames to reserve for call overhead (default: 50)
        frames_per_level: Stack frames consumed by one nesting level

    Returns:
        Safe depth value, clamped if necessary (never below 1)

    Example:
        >>> import sys
        >>> sys.setrecursionlimit(1000)
        >>> depth_clamp(64)  # OK, 64 * 12 fits in 950 frames
        64
        >>> depth_clamp(500)  # Exceeds limit, clamped to 950 // 12
        79
    """
    available = sys.getrecursionlimit() - reserve_frames
    max_safe_depth = max(1, available // max(1, frames_per_level))
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested nesting depth %d exceeds Python recursion limit (%d). "
            "Clamping to %d to prevent RecursionError. "
            "Consider increasing sys.setrecursionlimit() if needed.",
            requested_depth,
            sys.getrecursionlimit(),
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth
