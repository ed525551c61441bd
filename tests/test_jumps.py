import pytest

from yulecode.jumps import count_steps, parse_offsets


def test_parse_offsets_skips_blank_lines():
    assert parse_offsets("0\n3\n\n-3\n") == [0, 3, -3]


def test_parse_offsets_rejects_garbage():
    with pytest.raises(ValueError):
        parse_offsets("1\nfoo\n")


def test_example():
    assert count_steps([0, 3, 0, 1, -3]) == 10


def test_input_not_mutated():
    offsets = [0, 3, 0, 1, -3]
    count_steps(offsets)
    assert offsets == [0, 3, 0, 1, -3]


def test_empty_list_takes_no_steps():
    assert count_steps([]) == 0


def test_all_forward_ones():
    offsets = [1] * 9
    assert count_steps(offsets) == len(offsets)


def test_immediate_exit_backwards():
    offsets = [-1, 0, 0]
    assert count_steps(offsets) == len(offsets[:1])


def test_tuple_input_accepted():
    assert count_steps((0, 3, 0, 1, -3)) == count_steps([0, 3, 0, 1, -3])