import pytest

from yulecode.spiral import first_value_reaching, spiral_distance


def test_known_distances():
    assert spiral_distance(1) == 0
    assert spiral_distance(12) == 3
    assert spiral_distance(1024) == 31


@pytest.mark.parametrize("ring", range(1, 6))
def test_odd_square_corners(ring):
    side = 2 * ring + 1
    assert spiral_distance(side * side) == 2 * ring


def test_distance_never_exceeds_side_length():
    for square in range(1, 200):
        assert spiral_distance(square) <= square


def test_first_value_at_least_limit():
    for limit in (5, 50, 500, 5000):
        assert first_value_reaching(limit) >= limit


def test_first_value_is_fixed_point():
    value = first_value_reaching(100)
    assert first_value_reaching(value) == value
    assert first_value_reaching(value + 1) > value


def test_limit_one_returns_starting_value():
    assert first_value_reaching(1) == 1


def test_first_value_is_monotonic():
    results = [first_value_reaching(limit) for limit in range(1, 300, 7)]
    assert results == sorted(results)