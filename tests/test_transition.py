import pytest

from glowquest.config import FADE_DURATION, TRANSITION_DURATION
from glowquest.screen import Screen
from glowquest.transition import Transition, TransitionType, ease_in_out


def test_zero_duration_is_complete():
    t = Transition()
    assert t.progress() == 1.0
    assert t.done() is True


def test_start_scroll():
    old = Screen()
    t = Transition()
    t.timer = 5.0
    t.start(1, 0, old)
    assert t.active is True
    assert t.kind == TransitionType.SCROLL
    assert t.timer == 0.0
    assert t.duration == TRANSITION_DURATION
    assert (t.dir_x, t.dir_y) == (1, 0)
    assert t.old_screen is old
    assert t.done() is False


def test_start_fade_clears_scroll_state():
    t = Transition()
    t.start(0, -1, Screen())
    t.start_fade()
    assert t.kind == TransitionType.FADE
    assert t.duration == FADE_DURATION
    assert (t.dir_x, t.dir_y) == (0, 0)
    assert t.old_screen is None


def test_progress_is_capped():
    t = Transition(duration=1.0, timer=3.0)
    assert t.progress() == 1.0
    assert t.done() is True


def test_fade_progress_peaks_in_middle():
    t = Transition(duration=1.0)
    assert t.fade_progress() == 0.0
    t.timer = 0.25
    assert t.fade_progress() == 0.5
    t.timer = 0.5
    assert t.fade_progress() == 1.0
    t.timer = 1.0
    assert t.fade_progress() == 0.0


def test_ease_endpoints():
    assert ease_in_out(0.0) == 0.0
    assert ease_in_out(1.0) == 1.0
    assert ease_in_out(0.5) == 0.5


@pytest.mark.parametrize("x", [0.1, 0.2, 0.3, 0.45])
def test_ease_is_symmetric(x):
    assert ease_in_out(x) + ease_in_out(1 - x) == pytest.approx(1.0)


def test_ease_is_monotonic():
    values = [ease_in_out(i / 20) for i in range(21)]
    assert values == sorted(values)