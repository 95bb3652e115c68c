"""
Camelot key notation to DJUCED key code mapping.

DJUCED numbers keys in its own order, so the table is written out by hand
rather than derived from the Camelot wheel.
"""

from typing import Dict

from djuced_sync.core.exceptions import InvalidKey

# Camelot label -> DJUCED key code (Open Key notation in comments)
CAMELOT_TO_DJUCED: Dict[str, int] = {
    "1A": 23,  # 6m
    "1B": 2,  # 6d
    "2A": 18,  # 7m
    "2B": 9,  # 7d
    "3A": 13,  # 8m
    "3B": 4,  # 8d
    "4A": 20,  # 9m
    "4B": 11,  # 9d
    "5A": 15,  # 10m
    "5B": 6,  # 10d
    "6A": 22,  # 11m
    "6B": 1,  # 11d
    "7A": 17,  # 12m
    "7B": 8,  # 12d
    "8A": 12,  # 1m
    "8B": 3,  # 1d
    "9A": 19,  # 2m
    "9B": 10,  # 2d
    "10A": 14,  # 3m
    "10B": 5,  # 3d
    "11A": 21,  # 4m
    "11B": 0,  # 4d
    "12A": 16,  # 5m
    "12B": 7,  # 5d
}

DJUCED_TO_CAMELOT: Dict[int, str] = {
    code: label for label, code in CAMELOT_TO_DJUCED.items()
}


def encode(label: str) -> int:
    """
    Convert a Camelot key label to the DJUCED key code.

    Args:
        label: Camelot label such as "8A" or "11B"

    Returns:
        DJUCED key code in the range 0-23

    Raises:
        InvalidKey: if the label is not one of the 24 Camelot keys
    """
    try:
        return CAMELOT_TO_DJUCED[label]
    except (KeyError, TypeError):
        raise InvalidKey(label) from None


def decode(code: int) -> str:
    """Convert a DJUCED key code back to its Camelot label."""
    try:
        return DJUCED_TO_CAMELOT[code]
    except (KeyError, TypeError):
        raise InvalidKey(code) from None


def is_valid_key(label: str) -> bool:
    return label in CAMELOT_TO_DJUCED
