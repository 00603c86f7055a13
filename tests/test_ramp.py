import pytest

from rmcontrol.ramp import Ramp


def test_first_step():
    ramp = Ramp(10.0, 0.1)
    ramp.update(5.0)
    assert ramp.out == pytest.approx(1.0)


def test_reaches_target_without_overshoot():
    ramp = Ramp(10.0, 0.1)
    previous = ramp.out
    for _ in range(20):
        ramp.update(5.0)
        assert ramp.out <= 5.0
        assert ramp.out - previous <= ramp.acc + 1e-9
        previous = ramp.out
    assert ramp.out == 5.0


def test_ramps_down():
    ramp = Ramp(10.0, 0.1)
    ramp.clear(3.0)
    for _ in range(100):
        ramp.update(-2.0)
        assert ramp.out >= -2.0
    assert ramp.out == -2.0


def test_snaps_when_within_step():
    ramp = Ramp(10.0, 0.1)
    ramp.update(0.3)
    assert ramp.out == 0.3


def test_clear():
    ramp = Ramp(1.0, 1.0)
    ramp.update(0.5)
    ramp.clear()
    assert ramp.out == 0.0
    ramp.clear(4.25)
    assert ramp.out == 4.25


def test_set_acc_changes_step():
    ramp = Ramp(10.0, 0.1)
    ramp.set_acc(20.0)
    ramp.update(100.0)
    assert ramp.out == pytest.approx(2.0)