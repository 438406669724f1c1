"""Tests for the resize debouncer."""

from grid_room_renderer.debounce import Debouncer


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_burst_fires_once_after_quiet_period():
    clock = FakeClock()
    d = Debouncer(wait=0.25, clock=clock)

    for t in (0.0, 0.1, 0.2, 0.3):
        clock.now = t
        d.trigger()
        assert not d.due()

    clock.now = 0.5
    assert not d.due()
    clock.now = 0.55
    assert d.due()
    assert not d.due()
    assert not d.pending


def test_idle_debouncer_never_fires():
    d = Debouncer(clock=FakeClock())
    assert not d.due()


def test_cancel():
    clock = FakeClock()
    d = Debouncer(wait=0.25, clock=clock)
    d.trigger()
    d.cancel()
    clock.now = 10.0
    assert not d.due()
