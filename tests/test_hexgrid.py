import pytest

from yulecode.hexgrid import final_and_furthest, hex_distance, walk


def test_origin_has_zero_distance():
    assert hex_distance(0, 0) == 0


@pytest.mark.parametrize("direction", ["n", "s", "ne", "nw", "se", "sw"])
@pytest.mark.parametrize("count", [1, 2, 5])
def test_straight_line_distance_equals_step_count(direction, count):
    path = ",".join([direction] * count)
    assert final_and_furthest(path) == (count, count)


def test_worked_example():
    assert final_and_furthest("se,sw,se,sw,sw")[0] == 3


def test_there_and_back():
    assert final_and_furthest("ne,ne,sw,sw") == (0, 2)


@pytest.mark.parametrize(
    "path",
    ["ne,ne,s,s", "n,n,n,sw,sw,se", "se,se,se,nw,nw,nw,n", "s,s,s,n,n,n,n"],
)
def test_furthest_is_max_over_walk(path):
    final, furthest = final_and_furthest(path)
    positions = list(walk(path))
    assert furthest == max(hex_distance(x, y) for x, y in positions)
    assert final == hex_distance(*positions[-1])
    assert furthest >= final


def test_reversed_opposite_path_returns_home():
    opposite = {"n": "s", "s": "n", "ne": "sw", "sw": "ne", "nw": "se", "se": "nw"}
    steps = ["ne", "n", "nw", "se", "s", "s"]
    back = [opposite[step] for step in reversed(steps)]
    positions = list(walk(",".join(steps + back)))
    assert positions[-1] == (0, 0)


def test_walk_yields_one_position_per_step():
    assert len(list(walk("n,s,ne"))) == 3


def test_only_first_line_is_read():
    assert final_and_furthest("ne\nne,ne") == (1, 1)


def test_unknown_step_raises():
    with pytest.raises(ValueError):
        final_and_furthest("ne,up,sw")