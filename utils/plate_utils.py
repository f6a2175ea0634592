import re
from typing import Optional, Tuple

# Whitespace and the separators people type between prefix and serial (粤B·D1234A)
_SEPARATORS_RX = re.compile(r"[\s\-·.]+")


def normalize_plate_input(raw: Optional[str]) -> str:
    """Upper-case user input and drop whitespace/separators. None -> ""."""
    if not raw:
        return ""
    return _SEPARATORS_RX.sub("", raw).upper()


def split_plate(plate: Optional[str]) -> Optional[Tuple[str, str, str]]:
    """
    Split a plate into (province code, series letter, serial).

    Returns None when the string is too short to carry a prefix.
    """
    if not plate or len(plate) < 2:
        return None
    return plate[0], plate[1], plate[2:]


def format_plate(plate: Optional[str]) -> str:
    """Display form with a middle dot after the prefix: 京A12345 -> 京A·12345."""
    parts = split_plate(plate)
    if parts is None or not parts[2]:
        return plate or ""
    code, letter, serial = parts
    return f"{code}{letter}·{serial}"
