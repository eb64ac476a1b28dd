import random

import pytest

from labprojects.benchmark import ALGORITHMS, compare, fill_random, format_results, main, time_sort


def test_fill_random_range_and_length():
    values = fill_random(500, random.Random(3))
    assert len(values) == 500
    assert all(0 <= value < 1000 for value in values)


def test_fill_random_is_deterministic_with_seed():
    first = fill_random(50, random.Random(11))
    second = fill_random(50, random.Random(11))
    other = fill_random(50, random.Random(12))
    assert len(first) == 50
    assert first == second
    assert other != first
    assert all(0 <= value < 1000 for value in first)


def test_time_sort_does_not_mutate_input():
    data = [5, 3, 1, 4]
    seconds = time_sort("Gnome Sort", data)
    assert seconds >= 0.0
    assert data == [5, 3, 1, 4]


def test_time_sort_unknown_name():
    with pytest.raises(ValueError):
        time_sort("Bogo sort", [1, 2])


def test_compare_order_matches_algorithms():
    results = compare(40, seed=1)
    assert [name for name, _ in results] == list(ALGORITHMS)
    assert all(seconds >= 0.0 for _, seconds in results)


def test_format_results():
    text = format_results([("Gnome Sort", 0.5), ("Quick sort", 0.0)])
    assert text == "Gnome Sort: 0.500000 segundos\nQuick sort: 0.000000 segundos\n"


def test_main_prints_one_line_per_algorithm(capsys):
    assert main(["--size", "30", "--seed", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == len(ALGORITHMS)
    assert lines[0].startswith("Gnome Sort: ")
    assert all(line.endswith(" segundos") for line in lines)