import pytest

from yulecode.dance import LINE, Move, dance_repeated, parse_moves, perform

EXAMPLE = "s1,x3/4,pe/b"


def test_parse_moves():
    assert parse_moves(EXAMPLE) == [Move("s", 1), Move("x", 3, 4), Move("p", "e", "b")]


def test_example_single_dance():
    assert perform(parse_moves(EXAMPLE), "abcde") == "baedc"


def test_example_second_dance():
    assert dance_repeated(parse_moves(EXAMPLE), 2, "abcde") == "ceadb"


def test_zero_dances_keeps_line():
    assert dance_repeated(parse_moves(EXAMPLE), 0, "abcde") == "abcde"


@pytest.mark.parametrize("times", range(12))
def test_repeated_matches_direct_dancing(times):
    moves = parse_moves(EXAMPLE)
    line = "abcde"
    for _ in range(times):
        line = perform(moves, line)
    assert dance_repeated(moves, times, "abcde") == line


def test_dance_is_permutation():
    moves = parse_moves("s3,x0/15,pa/p,x7/2,s13,pc/k")
    result = dance_repeated(moves, 1000, LINE)
    assert sorted(result) == sorted(LINE)


def test_spin_of_full_length_is_identity():
    assert Move("s", 16).apply(LINE) == LINE


def test_spin_moves_tail_to_front():
    assert Move("s", 3).apply("abcde") == "cdeab"


@pytest.mark.parametrize("token", ["q1", "sx", "x1", "pab/c", "x1/b"])
def test_malformed_move_raises(token):
    with pytest.raises(ValueError):
        parse_moves(token)


def test_missing_partner_raises():
    with pytest.raises(ValueError):
        perform([Move("p", "a", "z")], "abcde")


def test_negative_times_raises():
    with pytest.raises(ValueError):
        dance_repeated(parse_moves(EXAMPLE), -1, "abcde")