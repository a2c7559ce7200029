import pytest

from band_achievements.grouping import AchievementItem, StudentAggregate
from band_achievements.io import load_students
from band_achievements.views import SORT_MODES, filter_and_sort


def _student(name, *points):
    return StudentAggregate(name=name, items=[AchievementItem(f"card{i}", p) for i, p in enumerate(points)])


@pytest.fixture()
def roster():
    return [
        _student("Priya Shah", 100, 50),
        _student("maya lopez", 60, 10, 10, 10),
        _student("Jonah Reed", 30),
        _student("Eli Brooks", 90),
        _student("Ava Kim", 30),
    ]


def test_scenario_sorted_by_points(scenario_csv):
    display = filter_and_sort(load_students(scenario_csv), "", "points")
    assert [(s.name, s.total) for s in display] == [("Alice", 30), ("Bob", 5)]


def test_search_is_case_insensitive_substring(roster):
    assert [s.name for s in filter_and_sort(roster, "LOP")] == ["maya lopez"]
    assert [s.name for s in filter_and_sort(roster, "re")] == ["Jonah Reed"]


def test_empty_search_matches_all(roster):
    assert len(filter_and_sort(roster, "")) == len(roster)


def test_points_sort_is_stable(roster):
    display = filter_and_sort(roster, "", "points")
    assert [s.name for s in display] == ["Priya Shah", "maya lopez", "Eli Brooks", "Jonah Reed", "Ava Kim"]


def test_cards_sort(roster):
    display = filter_and_sort(roster, "", "cards")
    assert [s.name for s in display] == ["maya lopez", "Priya Shah", "Jonah Reed", "Eli Brooks", "Ava Kim"]


def test_name_sort_ignores_case(roster):
    display = filter_and_sort(roster, "", "name")
    assert [s.name for s in display] == ["Ava Kim", "Eli Brooks", "Jonah Reed", "maya lopez", "Priya Shah"]


def test_unknown_sort_falls_back_to_points(roster):
    assert filter_and_sort(roster, "", "shoe size") == filter_and_sort(roster, "", "points")


@pytest.mark.parametrize("sort", SORT_MODES)
@pytest.mark.parametrize("search", ["", "a", "zzz"])
def test_filter_is_idempotent(roster, search, sort):
    once = filter_and_sort(roster, search, sort)
    assert filter_and_sort(once, search, sort) == once
    assert filter_and_sort(roster, search, sort) == once


def test_input_is_not_reordered(roster):
    before = list(roster)
    filter_and_sort(roster, "", "name")
    assert roster == before


def test_empty_roster():
    assert filter_and_sort([], "x", "cards") == []
