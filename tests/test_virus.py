from yulecode.virus import count_infections, parse_infected

EXAMPLE = "..#\n#..\n..."


def test_parse_marks():
    assert parse_infected(EXAMPLE) == {(0, 2), (1, 0)}


def test_example_seventy_bursts():
    assert count_infections(parse_infected(EXAMPLE), 70, 3) == 41


def test_example_default_bursts():
    assert count_infections(parse_infected(EXAMPLE), size=3) == 5587


def test_no_bursts():
    assert count_infections(parse_infected(EXAMPLE), 0, 3) == 0


def test_clean_start_infects():
    bursts = 1
    assert count_infections(set(), bursts, 3) == bursts


def test_infected_start_is_cleaned():
    assert count_infections({(1, 1)}, 1, 3) == 0


def test_input_not_modified():
    infected = parse_infected(EXAMPLE)
    snapshot = set(infected)
    count_infections(infected, 100, 3)
    assert infected == snapshot


def test_count_bounded_by_bursts():
    for bursts in (5, 50, 500):
        assert count_infections(parse_infected(EXAMPLE), bursts, 3) <= bursts