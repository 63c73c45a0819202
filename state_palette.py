# state_palette.py
# Colour for an emotional state, from Plutchik's standard primary colours.
# Weak / strong forms of an emotion are shaded in HLS space; blends mix the
# two dominant poles weighted by their strength.
from __future__ import annotations

import colorsys
from dataclasses import dataclass
from typing import Mapping, Tuple

import numpy as np

from emotional_state import COMPLEX_SCALE_CUTOFF, DESCRIPTION_CUTOFF, EmotionalState
from intensity_bands import ladder_band
from plutchik_wheel import Emotion


@dataclass(frozen=True)
class Color:
    r: int  # 0..255
    g: int
    b: int

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def mpl(self) -> Tuple[float, float, float]:
        """RGB scaled to [0, 1] as matplotlib expects."""
        return (self.r / 255, self.g / 255, self.b / 255)


PRIMARY_COLORS: Mapping[Emotion, str] = {
    Emotion.JOY:          "#FFFF00",  # Yellow
    Emotion.TRUST:        "#00FF00",  # Green
    Emotion.FEAR:         "#00FFFF",  # Cyan
    Emotion.SURPRISE:     "#0000FF",  # Blue
    Emotion.SADNESS:      "#800080",  # Purple
    Emotion.DISGUST:      "#008000",  # Dark Green
    Emotion.ANGER:        "#FF0000",  # Red
    Emotion.ANTICIPATION: "#FFA500",  # Orange
}

NEUTRAL = Color(224, 224, 224)

# (saturation factor, lightness factor) for the weak / mid / strong thirds
SHADING: Tuple[Tuple[float, float], ...] = ((0.8, 1.2), (1.0, 1.0), (1.2, 0.8))


def hex_to_rgb(hex_str: str) -> Tuple[int, int, int]:
    s = hex_str.strip().lstrip("#")
    if len(s) == 3:
        s = "".join(ch * 2 for ch in s)
    if len(s) != 6:
        raise ValueError(f"Unrecognized color: {hex_str}")
    try:
        return tuple(int(s[i:i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        raise ValueError(f"Unrecognized color: {hex_str}") from None


def rgb_to_hex(rgb: Tuple[int, int, int]) -> str:
    return "#{:02X}{:02X}{:02X}".format(*rgb)


def adjust_hsl(hex_color: str, sat_factor: float = 1.0, light_factor: float = 1.0) -> str:
    r, g, b = [v / 255.0 for v in hex_to_rgb(hex_color)]
    h, l, s = colorsys.rgb_to_hls(r, g, b)  # note: HLS order in Python
    s = max(0, min(1, s * sat_factor))
    l = max(0, min(1, l * light_factor))
    r, g, b = colorsys.hls_to_rgb(h, l, s)
    return rgb_to_hex((int(round(r * 255)), int(round(g * 255)), int(round(b * 255))))


def emotion_color(emotion: Emotion, intensity: float = 0.5) -> Color:
    """Colour of `emotion`, shaded by which third of the intensity ladder it falls in."""
    sat_factor, light_factor = SHADING[ladder_band(intensity) // 3]
    return Color(*hex_to_rgb(adjust_hsl(PRIMARY_COLORS[emotion], sat_factor, light_factor)))


def state_color(state: EmotionalState) -> Color:
    """
    Display colour for a whole state, following the same branches as
    EmotionalState.describe(): neutral grey, one shaded pole, or a blend.
    """
    (primary, primary_value), (secondary, secondary_value) = state.dominant_emotions()
    if primary_value < DESCRIPTION_CUTOFF:
        return NEUTRAL
    if secondary_value / primary_value < COMPLEX_SCALE_CUTOFF:
        return emotion_color(primary, primary_value)

    intensity = max(primary_value, secondary_value)
    rgbs = np.array([
        emotion_color(primary, intensity).rgb,
        emotion_color(secondary, intensity).rgb,
    ], dtype=float)
    mixed = np.average(rgbs, axis=0, weights=[primary_value, secondary_value])
    return Color(*(int(round(v)) for v in mixed))
