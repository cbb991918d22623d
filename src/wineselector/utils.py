"""
Utility functions for Wine Selector.

Includes logging setup, input key normalisation and presentation rounding.
"""

import logging
import os
import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

# Configure logging
logging.basicConfig(
    level=os.getenv("WINESELECTOR_LOG_LEVEL", "INFO").upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger("wineselector")


# =======================
# INPUT NORMALISATION
# =======================

_SEPARATORS = re.compile(r'[\s\-/]+')


def normalize_key(raw: str) -> str:
    """
    Normalise a user-facing label into a lookup key.

    'Red Meat', 'red-meat', ' RED_MEAT ' and 'Boss/Superior' become
    'red_meat', 'red_meat', 'red_meat' and 'boss_superior'.
    """
    return _SEPARATORS.sub('_', raw.strip()).lower()


# =======================
# ROUNDING
# =======================

def round_half_up(value: Optional[float]) -> Optional[int]:
    """
    Round to the nearest integer, halves away from zero.

    Python's round() does banker's rounding (round(36.5) == 36), which is
    not what a score shown to a user should do.

    Args:
        value: Score at full precision, or None

    Returns:
        Rounded integer, or None when value is None
    """
    if value is None:
        return None
    return int(Decimal(repr(value)).quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def format_percentage(fraction: float) -> str:
    """Render a weight such as 0.5 as "50%", halves rounded up."""
    return f"{round_half_up(fraction * 100)}%"
