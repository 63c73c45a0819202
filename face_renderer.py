# face_renderer.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from emotional_state import EmotionalState


class FaceRenderer(ABC):
    """
    Draws a picture of an emotional state onto some drawing target.

    Implementations only read the state; nothing is passed back to the
    classifier. `width` and `height` are in pixels of the target.
    """

    @abstractmethod
    def draw(self, surface: Any, width: float, height: float, state: EmotionalState) -> None:
        ...
