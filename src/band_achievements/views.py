import locale
from typing import List, Sequence

from .grouping import StudentAggregate

SORT_POINTS = "points"
SORT_NAME = "name"
SORT_CARDS = "cards"
SORT_MODES = [SORT_POINTS, SORT_NAME, SORT_CARDS]


def name_sort_key(name: str):
    # Case-folded collation first so "alice" and "Bob" interleave as readers expect.
    return (locale.strxfrm(name.casefold()), locale.strxfrm(name))


def filter_and_sort(students: Sequence[StudentAggregate], search: str = "", sort: str = SORT_POINTS) -> List[StudentAggregate]:
    """Return the display list for a search term and sort mode.

    Pure: the input sequence is never reordered, and calling it again on its
    own output with the same arguments yields the same list.
    """
    query = (search or "").lower()
    filtered = [student for student in students if query in student.name.lower()]

    if sort == SORT_NAME:
        return sorted(filtered, key=lambda s: name_sort_key(s.name))
    if sort == SORT_CARDS:
        return sorted(filtered, key=lambda s: -s.card_count)
    return sorted(filtered, key=lambda s: -s.total)
