import pytest

from yulecode.knot import (
    count_regions,
    dense_hash,
    disk_grid,
    first_two_product,
    knot_hash,
    knot_rounds,
)

KEY = "flqrgnkx"


@pytest.fixture(scope="module")
def grid():
    return disk_grid(KEY)


def test_first_two_product_example():
    assert first_two_product([3, 4, 1, 5], 5) == 12


def test_rounds_produce_permutation():
    lengths = [14, 58, 0, 116, 179, 16, 1, 104, 2, 254, 167, 86, 255, 55, 122, 244]
    marks = knot_rounds(lengths, 3)
    assert sorted(marks) == list(range(256))


def test_no_lengths_is_identity():
    assert knot_rounds([], 5, 10) == list(range(10))


def test_length_beyond_size_raises():
    with pytest.raises(ValueError):
        knot_rounds([6], 1, 5)


def test_dense_hash_single_block():
    assert dense_hash([5] + [0] * 15) == [5]


def test_dense_hash_of_self_cancelling_blocks():
    block = [9, 9] * 8
    assert dense_hash(block * 2) == [0, 0]


def test_dense_hash_rejects_partial_block():
    with pytest.raises(ValueError):
        dense_hash([1, 2, 3])


def test_knot_hash_shape():
    digest = knot_hash("14,58,0,116,179,16,1,104,2,254,167,86,255,55,122,244")
    assert len(digest) == 32
    assert int(digest, 16) >= 0
    assert digest == digest.lower()


def test_grid_dimensions(grid):
    assert len(grid) == 128
    assert all(len(row) == 128 for row in grid)


def test_grid_rows_match_hashes(grid):
    for index in (0, 1, 127):
        bits = "".join("1" if used else "0" for used in grid[index])
        assert int(bits, 2) == int(knot_hash(f"{KEY}-{index}"), 16)


def test_regions_bounded_by_used_squares(grid):
    used = sum(sum(row) for row in grid)
    regions = count_regions(KEY)
    assert 0 < regions <= used