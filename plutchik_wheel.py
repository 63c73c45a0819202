# plutchik_wheel.py
# The fixed vocabulary of Plutchik's wheel: four bipolar axes, eight primary
# emotions, their intensity ladders and the named dyads (two-emotion blends).
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


class Dimension(Enum):
    SENSITIVITY = "sensitivity"    # anger (+) / fear (-)
    ATTENTION = "attention"        # anticipation (+) / surprise (-)
    PLEASANTNESS = "pleasantness"  # joy (+) / sadness (-)
    APTITUDE = "aptitude"          # trust (+) / disgust (-)


class Emotion(IntEnum):
    # Codes order the dyad table; lower code is always the first of a pair.
    JOY = 1
    TRUST = 2
    FEAR = 3
    SURPRISE = 4
    SADNESS = 5
    DISGUST = 6
    ANGER = 7
    ANTICIPATION = 8

    @property
    def label(self) -> str:
        return self.name.lower()


# Dimension -> (positive pole, negative pole)
POLES: Mapping[Dimension, Tuple[Emotion, Emotion]] = MappingProxyType({
    Dimension.SENSITIVITY:  (Emotion.ANGER, Emotion.FEAR),
    Dimension.ATTENTION:    (Emotion.ANTICIPATION, Emotion.SURPRISE),
    Dimension.PLEASANTNESS: (Emotion.JOY, Emotion.SADNESS),
    Dimension.APTITUDE:     (Emotion.TRUST, Emotion.DISGUST),
})

# Intensity ladder (weak, mid, strong) per primary emotion
INTENSITY_LADDERS: Mapping[Emotion, Tuple[str, str, str]] = MappingProxyType({
    Emotion.JOY:          ("serenity", "joy", "ecstasy"),
    Emotion.TRUST:        ("acceptance", "trust", "admiration"),
    Emotion.FEAR:         ("apprehension", "fear", "terror"),
    Emotion.SURPRISE:     ("distraction", "surprise", "amazement"),
    Emotion.SADNESS:      ("pensiveness", "sadness", "grief"),
    Emotion.DISGUST:      ("boredom", "disgust", "loathing"),
    Emotion.ANGER:        ("annoyance", "anger", "rage"),
    Emotion.ANTICIPATION: ("interest", "anticipation", "vigilance"),
})


def pole_for(dimension: Dimension, value: float) -> Emotion:
    """Emotion selected on `dimension` by the sign of `value` (zero counts as positive)."""
    positive, negative = POLES[dimension]
    return positive if value >= 0 else negative


def dimension_of(emotion: Emotion) -> Dimension:
    for dimension, poles in POLES.items():
        if emotion in poles:
            return dimension
    raise ValueError(f"Not a primary emotion: {emotion!r}")


# -----------------------------------------------------------------------------
# Dyads
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Dyad:
    """
    A named blend of two primary emotions.

    `words` is either a (weak, mid, strong) ladder rendered with the 9-band
    scheme, or a single word rendered behind the 5-band intensity prefix.
    """
    first: Emotion
    second: Emotion
    words: Tuple[str, ...]

    @property
    def graded(self) -> bool:
        return len(self.words) == 3


def normalize_pair(a: Emotion, b: Emotion) -> Tuple[Emotion, Emotion]:
    return (a, b) if a <= b else (b, a)


def _dyad(a: Emotion, b: Emotion, *words: str) -> Tuple[Tuple[Emotion, Emotion], Dyad]:
    first, second = normalize_pair(a, b)
    return (first, second), Dyad(first, second, tuple(words))


E = Emotion

# Upper triangle keyed by (lower code, higher code). The three direct
# opposites joy/sadness, fear/anger, surprise/anticipation have no name.
DYADS: Mapping[Tuple[Emotion, Emotion], Dyad] = MappingProxyType(dict([
    _dyad(E.JOY, E.TRUST, "acknowledgement", "love", "devotion"),
    _dyad(E.JOY, E.FEAR, "guilt"),
    _dyad(E.JOY, E.SURPRISE, "delight"),  # or frivolity
    _dyad(E.JOY, E.DISGUST, "morbidness"),  # or gloat
    _dyad(E.JOY, E.ANGER, "pride"),
    _dyad(E.JOY, E.ANTICIPATION, "bemusement", "optimism", "zeal"),

    _dyad(E.TRUST, E.FEAR, "acquiescence", "submission", "subservience"),
    _dyad(E.TRUST, E.SURPRISE, "curiosity"),
    _dyad(E.TRUST, E.SADNESS, "sentimentality"),
    _dyad(E.TRUST, E.DISGUST, "morbidness"),
    _dyad(E.TRUST, E.ANGER, "pride"),  # or rivalry
    _dyad(E.TRUST, E.ANTICIPATION, "hope"),

    _dyad(E.FEAR, E.SURPRISE, "wariness", "awe", "petrification"),
    _dyad(E.FEAR, E.SADNESS, "despair"),
    _dyad(E.FEAR, E.DISGUST, "shame"),  # or coercion
    _dyad(E.FEAR, E.ANTICIPATION, "anxiety"),

    _dyad(E.SURPRISE, E.SADNESS, "dismay", "disapproval", "horror"),
    _dyad(E.SURPRISE, E.DISGUST, "unbelief"),
    _dyad(E.SURPRISE, E.ANGER, "outrage"),  # or rejection

    _dyad(E.SADNESS, E.DISGUST, "listlessness", "remorse", "shame"),
    _dyad(E.SADNESS, E.ANGER, "envy"),
    _dyad(E.SADNESS, E.ANTICIPATION, "pessimism"),  # or frustration

    _dyad(E.DISGUST, E.ANGER, "impatience", "contempt", "hatred"),
    _dyad(E.DISGUST, E.ANTICIPATION, "cynicism"),  # corrected from "cynisism"

    _dyad(E.ANGER, E.ANTICIPATION, "disfavor", "aggressiveness", "domination"),
]))

del E


def dyad_for(a: Emotion, b: Emotion) -> Optional[Dyad]:
    """Named blend of `a` and `b` in either order, or None."""
    return DYADS.get(normalize_pair(a, b))
