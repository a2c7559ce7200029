from __future__ import annotations

import re
from typing import Dict, List, Sequence

Record = Dict[str, str]

_LINE_BREAK_RE = re.compile(r"\r?\n")


def _split_line(line: str) -> List[str]:
    fields: List[str] = []
    current: List[str] = []
    in_quotes = False
    i = 0
    while i < len(line):
        ch = line[i]
        if ch == '"' and in_quotes and line[i + 1 : i + 2] == '"':
            current.append('"')
            i += 2
            continue
        if ch == '"':
            in_quotes = not in_quotes
        elif ch == "," and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(ch)
        i += 1
    fields.append("".join(current))
    return [field.strip() for field in fields]


def parse_csv(text: str) -> List[List[str]]:
    """Split CSV text into rows of trimmed fields.

    Blank lines are dropped. Quoted fields may contain commas and doubled
    quotes, but not raw line breaks: every line is parsed on its own.
    """
    lines = [line for line in _LINE_BREAK_RE.split(text or "") if line.strip()]
    return [_split_line(line) for line in lines]


def rows_to_records(rows: Sequence[Sequence[str]]) -> List[Record]:
    """Zip the header row with each data row.

    Returns an empty list when there is no data row.
    """
    if len(rows) < 2:
        return []
    header = [cell.lower() for cell in rows[0]]
    records: List[Record] = []
    for row in rows[1:]:
        record: Record = {}
        for idx, key in enumerate(header):
            record[key] = row[idx] if idx < len(row) else ""
        records.append(record)
    return records
