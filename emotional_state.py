# emotional_state.py
# Numerically describing a single position on Plutchik's wheel of emotions,
# treated as a point in four dimensions (close to the "hourglass of emotions").
#
# - Each axis resolves to one of its two poles by sign; its strength is |value|.
# - The two strongest axes decide the wording:
#     nothing          primary strength under DESCRIPTION_CUTOFF
#     simple emotion   secondary / primary < COMPLEX_SCALE_CUTOFF
#     dyad (blend)     otherwise
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Tuple

from intensity_bands import describe_by_intensity, get_intensity_prefix
from plutchik_wheel import (
    INTENSITY_LADDERS,
    Dimension,
    Emotion,
    dyad_for,
    pole_for,
)

logger = logging.getLogger(__name__)

DESCRIPTION_CUTOFF = 0.02
COMPLEX_SCALE_CUTOFF = 0.35

NOTHING = "nothing"
UNKNOWN_COMBINATION = "unknown combination"

RankedEmotion = Tuple[Emotion, float]


@dataclass(frozen=True)
class EmotionalState:
    """
    Immutable (sensitivity, attention, pleasantness, aptitude) vector.

    Components are conventionally in [-1, 1]; larger magnitudes are accepted
    and simply land in the strongest wording. Non-finite components are
    rejected because they cannot be ranked.
    """
    sensitivity: float
    attention: float
    pleasantness: float
    aptitude: float

    def __post_init__(self):
        for dimension, value in zip(Dimension, self.as_tuple()):
            if not math.isfinite(value):
                raise ValueError(f"{dimension.value} must be finite, got {value!r}")

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.sensitivity, self.attention, self.pleasantness, self.aptitude)

    def value_of(self, dimension: Dimension) -> float:
        return getattr(self, dimension.value)

    # ---------------------------- ranking ------------------------------------

    def sort_emotions_by_significance(self) -> List[RankedEmotion]:
        """
        One (emotion, magnitude) pair per axis, weakest first.

        The sort is stable over axis order, so among equal magnitudes the
        later axis ranks higher.
        """
        pairs = []
        for dimension in Dimension:
            value = self.value_of(dimension)
            pairs.append((pole_for(dimension, value), abs(value)))
        return sorted(pairs, key=lambda pair: pair[1])

    def dominant_emotions(self) -> Tuple[RankedEmotion, RankedEmotion]:
        """(primary, secondary): the two strongest axes, strongest first."""
        ranked = self.sort_emotions_by_significance()
        return ranked[-1], ranked[-2]

    # ---------------------------- wording ------------------------------------

    def describe(self) -> str:
        (primary, primary_value), (secondary, secondary_value) = self.dominant_emotions()

        if -DESCRIPTION_CUTOFF < primary_value < DESCRIPTION_CUTOFF:
            logger.debug("%r: below description cutoff", self)
            return NOTHING

        ratio = secondary_value / primary_value
        if ratio < COMPLEX_SCALE_CUTOFF:
            logger.debug("%r: simple %s (ratio %.3f)", self, primary.label, ratio)
            return describe_simple_state(primary, primary_value)

        logger.debug("%r: combined %s+%s (ratio %.3f)",
                     self, primary.label, secondary.label, ratio)
        return describe_combined_state(
            primary, secondary, max(primary_value, secondary_value)
        )

    def __str__(self) -> str:
        return self.describe()


def describe_simple_state(emotion: Emotion, intensity: float) -> str:
    weak, mid, strong = INTENSITY_LADDERS[emotion]
    return describe_by_intensity(intensity, weak, mid, strong)


def describe_combined_state(first: Emotion, second: Emotion, intensity: float) -> str:
    """Wording for a blend of two emotions; argument order does not matter."""
    dyad = dyad_for(first, second)
    if dyad is None:
        return UNKNOWN_COMBINATION
    if dyad.graded:
        weak, mid, strong = dyad.words
        return describe_by_intensity(intensity, weak, mid, strong)
    return get_intensity_prefix(intensity) + dyad.words[0]
