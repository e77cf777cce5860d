"""
PokerTrack – Domain Service: Unit Converter
=============================================
Maps a stakes label to the money value of one profit unit (big blind).

  "NL50"   → 0.50
  "NL200"  → 2.00
  "PLO100" → 1.00
  anything else / empty → 1.0 (units and money treated as equivalent)

The fallback is deliberate, not an error.
"""

from __future__ import annotations

import re
from typing import Optional

_STAKES_PATTERNS = (
    re.compile(r"NL(\d+)", re.IGNORECASE),
    re.compile(r"PLO(\d+)", re.IGNORECASE),
)

DEFAULT_UNIT_VALUE = 1.0


def unit_value(stakes: Optional[str]) -> float:
    """Money value of one unit at the given stakes."""
    if not stakes:
        return DEFAULT_UNIT_VALUE
    for pattern in _STAKES_PATTERNS:
        match = pattern.search(stakes)
        if match:
            return int(match.group(1)) / 100
    return DEFAULT_UNIT_VALUE


def money_from_units(profit_units: float, stakes: Optional[str]) -> float:
    """Convert a unit-denominated profit to money. Write-path only."""
    return profit_units * unit_value(stakes)
