# intensity_bands.py
# Two independent ways of turning a magnitude into wording. They use different
# cut points and vocabularies and are not interchangeable.
from __future__ import annotations

from typing import Tuple

# -----------------------------------------------------------------------------
# 9-band ladder: nine equal bands over [0, 1], upper edge inclusive.
# Anything above the last edge (including values >= 1) is the top band.
# -----------------------------------------------------------------------------
LADDER_EDGES: Tuple[float, ...] = (
    0.1111, 0.2222, 0.3333, 0.4444, 0.5555, 0.6666, 0.7777, 0.8888,
)

# (qualifier, index into (weak, mid, strong)) for each of the nine bands
_LADDER_PHRASES: Tuple[Tuple[str, int], ...] = (
    ("slight", 0), ("", 0), ("significant", 0),
    ("moderate", 1), ("", 1), ("significant", 1),
    ("", 2), ("intense", 2), ("complete", 2),
)

# -----------------------------------------------------------------------------
# 5-band prefix: exclusive upper edges; the last band is open ended.
# -----------------------------------------------------------------------------
PREFIX_BANDS: Tuple[Tuple[float, str], ...] = (
    (0.15, "slight "),
    (0.35, "mild "),
    (0.70, ""),
    (0.85, "strong "),
)
_TOP_PREFIX = "intense "


def ladder_band(intensity: float) -> int:
    """Index 0..8 of the ladder band holding `intensity`."""
    for i, edge in enumerate(LADDER_EDGES):
        if intensity <= edge:
            return i
    return len(LADDER_EDGES)


def describe_by_intensity(intensity: float, weak: str, mid: str, strong: str) -> str:
    """
    Pick one of nine phrasings built from a (weak, mid, strong) word ladder.

        >>> describe_by_intensity(0.5, "serenity", "joy", "ecstasy")
        'joy'
        >>> describe_by_intensity(0.95, "serenity", "joy", "ecstasy")
        'complete ecstasy'
    """
    qualifier, word_idx = _LADDER_PHRASES[ladder_band(intensity)]
    word = (weak, mid, strong)[word_idx]
    return f"{qualifier} {word}" if qualifier else word


def get_intensity_prefix(intensity: float) -> str:
    """Qualifier (with trailing space, or empty) placed before a single-word dyad."""
    for edge, prefix in PREFIX_BANDS:
        if intensity < edge:
            return prefix
    return _TOP_PREFIX
