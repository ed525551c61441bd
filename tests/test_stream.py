import pytest

from yulecode.stream import scan_stream


def test_nested_group_score():
    assert scan_stream("{{{}}}").score == 6


def test_score_with_garbage_groups():
    assert scan_stream("{{<ab>},{<ab>},{<ab>},{<ab>}}").score == 9


def test_garbage_count_with_cancels():
    assert scan_stream('<{o"i!a,<{i<a>').garbage == 10


@pytest.mark.parametrize("inner", ["", "abc", "{}{}", "<<<", "x,y,z"])
def test_garbage_counts_inner_characters(inner):
    assert scan_stream(f"<{inner}>").garbage == len(inner)


def test_cancelled_characters_not_counted():
    assert scan_stream("<!!!>>").garbage == scan_stream("<>").garbage


def test_garbage_does_not_change_score():
    assert scan_stream("{<{}{}>}").score == scan_stream("{}").score


def test_cancelled_brace_is_ignored():
    assert scan_stream("{!}}").score == scan_stream("{}").score


def test_reading_stops_at_newline():
    assert scan_stream("{}\n{{}}") == scan_stream("{}")


def test_plain_group_has_no_garbage():
    assert scan_stream("{{}{}}").garbage == 0