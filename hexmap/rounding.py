"""Internal rounding helper.

The implementation is picked once, at import time, from
:data:`hexmap.config.ROUNDING_BACKEND`. Callers only ever see
:func:`round_nearest` and :func:`snap`.
"""
from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Decimal

from .config import ROUNDING_BACKEND

logger = logging.getLogger(__name__)


def _round_builtin(value: float) -> float:
    # Half away from zero, like the floor backend
    return float(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _round_floor(value: float) -> float:
    # Half away from zero using floor only
    if value >= 0.0:
        return float(math.floor(value + 0.5))
    return -float(math.floor(-value + 0.5))


_BACKENDS = {
    "builtin": _round_builtin,
    "floor": _round_floor,
}

if ROUNDING_BACKEND not in _BACKENDS:
    raise ValueError(
        f"unknown rounding backend {ROUNDING_BACKEND!r}, expected one of {sorted(_BACKENDS)}"
    )

round_nearest = _BACKENDS[ROUNDING_BACKEND]
logger.debug("rounding backend: %s", ROUNDING_BACKEND)


def snap(value: float, digits: int) -> float:
    """Round ``value`` to ``digits`` decimal places with the active backend."""
    scale = 10.0 ** digits
    return round_nearest(value * scale) / scale
