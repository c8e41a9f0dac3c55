import pytest

from core.ticker import TickGate


def test_first_call_ticks_then_waits_a_period():
    g = TickGate(60)
    assert g.ready(0.0)
    assert not g.ready(0.01)
    assert g.ready(0.02)
    assert g.ticks == 2
    # phase advanced by one period, not to the poll time
    assert g.last == pytest.approx(1 / 60)


def test_coarse_polling_keeps_target_rate():
    # pygame's Clock.tick(120) hands back whole 8 ms frames
    g = TickGate(60)
    ticks = sum(g.ready(i * 0.008) for i in range(125))
    assert 58 <= ticks <= 61


def test_polling_at_the_rate_ticks_every_poll():
    g = TickGate(60)
    ticks = sum(g.ready(i * 0.017) for i in range(60))
    assert ticks == 60


def test_no_catch_up_after_stall():
    g = TickGate(60)
    assert g.ready(0.0)
    # a long stall is worth many periods but only one tick runs
    assert g.ready(10.0)
    assert not g.ready(10.001)
    assert g.ticks == 2
    assert g.last == 10.0


def test_uses_injected_clock():
    t = [0.0]
    g = TickGate(10, clock=lambda: t[0])
    assert g.ready()
    t[0] = 0.05
    assert not g.ready()
    t[0] = 0.1
    assert g.ready()


def test_bad_rate():
    with pytest.raises(ValueError):
        TickGate(0)
