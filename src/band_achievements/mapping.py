from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

STUDENT_KEYWORD = "student"
CARD_KEYWORD = "card"
POINTS_KEYWORD = "point"


@dataclass(frozen=True)
class ColumnMapping:
    """Which record keys hold the student name, card label and points.

    ``None`` means the sheet has no such column; the value is treated as missing.
    """

    student: Optional[str]
    card: Optional[str]
    points: Optional[str]

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "student": self.student,
            "card": self.card,
            "points": self.points,
        }


def _find_key(keys: Sequence[str], keyword: str, position: int) -> Optional[str]:
    for key in keys:
        if keyword in key:
            return key
    # Positional fallback: the n-th column, if the sheet has that many.
    return keys[position] if position < len(keys) else None


def resolve_columns(keys: Iterable[str]) -> ColumnMapping:
    """Guess the semantic columns from lower-cased header keys.

    Each column is the first key containing its keyword ("student", "card",
    "point"). When nothing matches, the first, second and third key are used
    respectively, whatever they contain. Two roles can therefore resolve to
    the same column.
    """
    ordered: List[str] = list(keys)
    return ColumnMapping(
        student=_find_key(ordered, STUDENT_KEYWORD, 0),
        card=_find_key(ordered, CARD_KEYWORD, 1),
        points=_find_key(ordered, POINTS_KEYWORD, 2),
    )
