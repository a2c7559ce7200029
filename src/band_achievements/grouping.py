from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

import pandas as pd

from .mapping import ColumnMapping, resolve_columns
from .parsing import Record

UNNAMED_STUDENT = "Unnamed"

TIER_THRESHOLDS = [
    (200, "blue"),
    (150, "gold"),
    (100, "silver"),
    (50, "bronze"),
]


@dataclass(frozen=True)
class AchievementItem:
    card: str
    points: float


@dataclass
class StudentAggregate:
    name: str
    items: List[AchievementItem] = field(default_factory=list)

    @property
    def total(self) -> float:
        return float(sum(item.points for item in self.items))

    @property
    def card_count(self) -> int:
        return len(self.items)


def tier_for_total(total: float) -> Optional[str]:
    """Return the tier name for a point total, highest threshold first."""
    for threshold, tier in TIER_THRESHOLDS:
        if total >= threshold:
            return tier
    return None


def _exact_float(value):
    # float() rounds long decimals correctly; pandas' fast parser can be off by one ULP.
    text = str(value)
    if "_" in text:
        return value
    try:
        return float(text)
    except ValueError:
        return value


def leader(students: Sequence[StudentAggregate]) -> Optional[StudentAggregate]:
    """Student with the highest total; the first one seen wins ties."""
    if not students:
        return None
    return max(students, key=lambda s: s.total)


def coerce_points(values: pd.Series) -> pd.Series:
    """Parse point values as floats; anything non-numeric or non-finite is 0."""
    numeric = pd.to_numeric(values.map(_exact_float), errors="coerce").astype(float)
    numeric = numeric.replace([float("inf"), float("-inf")], float("nan"))
    return numeric.fillna(0.0)


def _column(frame: pd.DataFrame, key: Optional[str]) -> pd.Series:
    if key is None or key not in frame.columns:
        return pd.Series([""] * len(frame), index=frame.index, dtype=object)
    return frame[key]


def group_students(records: Sequence[Record], mapping: Optional[ColumnMapping] = None) -> List[StudentAggregate]:
    """Aggregate records into one entry per student, highest total first.

    Columns are resolved from the first record's keys unless a mapping is
    given. Students with equal totals keep the order they first appeared in.
    """
    if not records:
        return []

    keys = list(records[0].keys())
    if mapping is None:
        mapping = resolve_columns(keys)

    frame = pd.DataFrame.from_records(list(records), columns=keys)
    names = _column(frame, mapping.student).fillna("").astype(str)
    names = names.where(names != "", UNNAMED_STUDENT)
    cards = _column(frame, mapping.card).fillna("").astype(str)
    if mapping.points is None or mapping.points not in frame.columns:
        points = pd.Series([0.0] * len(frame), index=frame.index)
    else:
        points = coerce_points(frame[mapping.points])

    students: Dict[str, StudentAggregate] = {}
    for name, card, value in zip(names, cards, points):
        student = students.get(name)
        if student is None:
            student = students[name] = StudentAggregate(name=name)
        student.items.append(AchievementItem(card=card, points=float(value)))

    return sorted(students.values(), key=lambda s: -s.total)


def students_frame(students: Sequence[StudentAggregate]) -> pd.DataFrame:
    """Tabular view of aggregates, one row per student, in the given order."""
    rows = []
    for rank, student in enumerate(students, start=1):
        rows.append(
            {
                "rank": rank,
                "student": student.name,
                "cards": student.card_count,
                "total_points": student.total,
                "tier": tier_for_total(student.total) or "",
                "card_list": "; ".join(item.card for item in student.items),
            }
        )
    columns = ["rank", "student", "cards", "total_points", "tier", "card_list"]
    return pd.DataFrame(rows, columns=columns)
