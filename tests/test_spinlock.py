import pytest

from yulecode.spinlock import value_after


def test_worked_example():
    assert value_after(3) == 638


def test_small_buffer():
    assert value_after(3, 3) == 1


def test_zero_step_wraps_to_start():
    assert value_after(0, 5) == 0


def test_no_inserts_leaves_only_zero():
    assert value_after(7, 0) == 0


@pytest.mark.parametrize("step", [1, 3, 12, 348])
@pytest.mark.parametrize("inserts", [1, 10, 50])
def test_result_is_an_earlier_value(step, inserts):
    assert 0 <= value_after(step, inserts) < inserts


def test_negative_step_raises():
    with pytest.raises(ValueError):
        value_after(-1)