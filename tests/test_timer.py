import pytest

from spriteforge.timer import GameTimer

SECOND = 1_000_000_000


class FakeClock:
    def __init__(self):
        self.now = 0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


def test_delta_starts_negative(clock):
    timer = GameTimer(clock)
    assert timer.delta_time() == -1.0


def test_tick_measures_delta(clock):
    timer = GameTimer(clock)
    timer.reset()
    clock.now = SECOND // 2
    timer.tick()
    assert timer.delta_time() == pytest.approx(0.5)
    assert timer.delta_time_ms() == pytest.approx(timer.delta_time() * 1000.0)


def test_stopped_tick_gives_zero(clock):
    timer = GameTimer(clock)
    timer.reset()
    timer.stop()
    clock.now = SECOND
    timer.tick()
    assert timer.delta_time() == 0.0
    assert timer.stopped is True


def test_total_time_excludes_paused_span(clock):
    timer = GameTimer(clock)
    timer.reset()
    clock.now = SECOND
    timer.tick()
    timer.stop()
    clock.now = 6 * SECOND
    timer.start()
    clock.now = 7 * SECOND
    timer.tick()
    assert timer.total_time() == pytest.approx(2.0)
    assert timer.delta_time() == pytest.approx(1.0)


def test_total_time_while_stopped_freezes(clock):
    timer = GameTimer(clock)
    timer.reset()
    clock.now = 3 * SECOND
    timer.stop()
    first = timer.total_time()
    clock.now = 9 * SECOND
    timer.stop()
    assert timer.total_time() == first
    assert first == pytest.approx(3.0)


def test_negative_delta_is_clamped(clock):
    clock.now = 5 * SECOND
    timer = GameTimer(clock)
    timer.reset()
    clock.now = 4 * SECOND
    timer.tick()
    assert timer.delta_time() == 0.0


def test_start_without_stop_changes_nothing(clock):
    timer = GameTimer(clock)
    timer.reset()
    clock.now = SECOND
    timer.start()
    clock.now = 2 * SECOND
    timer.tick()
    assert timer.total_time() == pytest.approx(2.0)


def test_real_clock_delta_is_non_negative():
    timer = GameTimer()
    timer.reset()
    timer.tick()
    assert timer.delta_time() >= 0.0
    assert timer.total_time() >= 0.0