# wheel_renderer.py
# Render an emotional state as a Plutchik wheel glyph with matplotlib:
# one petal per primary emotion, petal length = strength of that pole,
# the state's blended colour in the centre and its description as the title.
from __future__ import annotations

import math
from typing import List, Tuple

import numpy as np
from matplotlib.figure import Figure

from emotional_state import EmotionalState
from face_renderer import FaceRenderer
from plutchik_wheel import Emotion, dimension_of, pole_for
from state_palette import emotion_color, state_color

# Petal order around the wheel follows the emotion codes.
WHEEL_ORDER: Tuple[Emotion, ...] = tuple(sorted(Emotion))


def petal_lengths(state: EmotionalState) -> List[float]:
    """Strength of each emotion in WHEEL_ORDER; the inactive pole of each axis is 0."""
    lengths = []
    for emotion in WHEEL_ORDER:
        dimension = dimension_of(emotion)
        value = state.value_of(dimension)
        lengths.append(abs(value) if pole_for(dimension, value) is emotion else 0.0)
    return lengths


class WheelRenderer(FaceRenderer):
    """
    Draws onto a matplotlib Figure. The figure is cleared and resized to
    width x height pixels at its own dpi.
    """

    def __init__(self, *, show_labels: bool = True, show_title: bool = True, petal_gap: float = 0.1):
        self.show_labels = show_labels
        self.show_title = show_title
        self.petal_gap = petal_gap

    def draw(self, surface, width, height, state):
        if not isinstance(surface, Figure):
            raise TypeError(f"WheelRenderer draws on a matplotlib Figure, got {type(surface).__name__}")

        fig = surface
        fig.clear()
        fig.set_size_inches(width / fig.dpi, height / fig.dpi)
        ax = fig.add_subplot(111, projection="polar")

        lengths = petal_lengths(state)
        theta = np.linspace(0.0, 2 * math.pi, len(WHEEL_ORDER), endpoint=False)
        step = 2 * math.pi / len(WHEEL_ORDER)
        colors = [emotion_color(e, v).mpl for e, v in zip(WHEEL_ORDER, lengths)]

        ax.bar(theta, lengths, width=step * (1 - self.petal_gap), color=colors,
               edgecolor="k", linewidth=0.5)
        ax.scatter([0.0], [0.0], s=200, color=[state_color(state).mpl], edgecolor="k", zorder=3)

        ax.set_ylim(0.0, max(1.0, max(lengths)))
        ax.set_yticklabels([])
        ax.set_xticks(theta)
        ax.set_xticklabels([e.label for e in WHEEL_ORDER] if self.show_labels else [])
        if self.show_title:
            ax.set_title(state.describe())
