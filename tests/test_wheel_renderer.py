import matplotlib

matplotlib.use("Agg")

import pytest
from matplotlib.figure import Figure

from emotional_state import EmotionalState
from face_renderer import FaceRenderer
from plutchik_wheel import Emotion
from wheel_renderer import WHEEL_ORDER, WheelRenderer, petal_lengths


def test_face_renderer_is_abstract():
    with pytest.raises(TypeError):
        FaceRenderer()


def test_wheel_order_follows_codes():
    assert WHEEL_ORDER[0] is Emotion.JOY
    assert WHEEL_ORDER[-1] is Emotion.ANTICIPATION


def test_petal_lengths_only_active_poles():
    lengths = petal_lengths(EmotionalState(-0.4, 0, 0.7, 0))
    by_emotion = dict(zip(WHEEL_ORDER, lengths))
    assert by_emotion[Emotion.FEAR] == pytest.approx(0.4)
    assert by_emotion[Emotion.JOY] == pytest.approx(0.7)
    assert by_emotion[Emotion.ANGER] == 0.0
    assert by_emotion[Emotion.SADNESS] == 0.0


def test_draw_on_figure():
    fig = Figure(dpi=100)
    state = EmotionalState(0.9, 0.5, 0, 0)
    WheelRenderer().draw(fig, 400, 300, state)

    width, height = fig.get_size_inches()
    assert width == pytest.approx(4.0)
    assert height == pytest.approx(3.0)

    (ax,) = fig.axes
    assert ax.get_title() == "complete domination"
    bars = ax.containers[0]
    assert [bar.get_height() for bar in bars] == pytest.approx(petal_lengths(state))


def test_redraw_replaces_previous_picture():
    fig = Figure()
    renderer = WheelRenderer(show_title=False)
    renderer.draw(fig, 200, 200, EmotionalState(0.5, 0, 0, 0))
    renderer.draw(fig, 200, 200, EmotionalState(0, 0, 0, 0))
    assert len(fig.axes) == 1
    assert fig.axes[0].get_title() == ""


def test_draw_requires_a_figure():
    with pytest.raises(TypeError):
        WheelRenderer().draw(object(), 100, 100, EmotionalState(0, 0, 0, 0))
