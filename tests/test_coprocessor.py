import pytest

from yulecode.coprocessor import count_multiplications


def test_straight_line():
    text = "set a 3\nmul a 2\nmul a 2\n"
    assert count_multiplications(text) == text.count("mul")


def test_loop():
    text = "set b 3\nmul a a\nsub b 1\njnz b -2\n"
    assert count_multiplications(text) == 3


def test_jump_past_end():
    assert count_multiplications("jnz 1 5\nmul a a\n") == 0


def test_jump_before_start():
    assert count_multiplications("mul a a\njnz 1 -5\nmul a a\n") == 1


def test_zero_register_does_not_jump():
    assert count_multiplications("jnz a 5\nmul a a\n") == 1


def test_accepts_parsed_tuples():
    program = [("set", "a", "2"), ("mul", "a", "a"), ("mul", "b", "a")]
    assert count_multiplications(program) == len(program) - 1


def test_unknown_operation_is_skipped():
    assert count_multiplications("nop\nmul a 1\n") == 1


def test_wrong_operand_count():
    with pytest.raises(ValueError):
        count_multiplications("mul a\n")