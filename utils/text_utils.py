"""
Text measurement helpers (character counts only - no font metrics)
"""

from typing import Iterable, Optional


def trimmed_length(text: Optional[str]) -> int:
    """
    Length of text after stripping surrounding whitespace

    Args:
        text: Text or None

    Returns:
        Number of characters (0 for None/blank)
    """
    if not text:
        return 0
    return len(text.strip())


def average_length(values: Iterable[Optional[str]]) -> float:
    """
    Average trimmed length over the non-empty values

    Blank and missing values are ignored rather than counted as zero, so a
    schedule with no descriptions is not treated as having short text.

    Args:
        values: Text values (None allowed)

    Returns:
        Average length, or 0.0 when every value is empty
    """
    lengths = [length for length in (trimmed_length(v) for v in values) if length > 0]
    if not lengths:
        return 0.0
    return sum(lengths) / len(lengths)
