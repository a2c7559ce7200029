import logging
from typing import List, Optional

import requests

from .grouping import StudentAggregate, group_students
from .mapping import ColumnMapping
from .parsing import parse_csv, rows_to_records

logger = logging.getLogger(__name__)

EXPORT_URL_TEMPLATE = "https://docs.google.com/spreadsheets/d/{sheet_id}/export?format=csv&gid={gid}"


class SheetFetchError(RuntimeError):
    """The sheet could not be downloaded."""


def build_export_url(sheet_id: str, gid: str = "0") -> str:
    sheet_id = (sheet_id or "").strip()
    if not sheet_id:
        raise ValueError("A spreadsheet id is required")
    return EXPORT_URL_TEMPLATE.format(sheet_id=sheet_id, gid=(str(gid).strip() or "0"))


def fetch_sheet_csv(sheet_id: str, gid: str = "0", timeout: float = 20) -> str:
    """Download one sheet tab as CSV text.

    Raises SheetFetchError on transport errors and non-success responses.
    """
    url = build_export_url(sheet_id, gid)
    logger.info("Fetching sheet %s (gid=%s)", sheet_id, gid)
    try:
        resp = requests.get(url, timeout=timeout)
    except requests.RequestException as exc:
        raise SheetFetchError(f"Could not fetch sheet CSV: {exc}") from exc
    if not resp.ok:
        raise SheetFetchError(f"Could not fetch sheet CSV: {resp.status_code} {resp.reason or ''}".rstrip())
    if not resp.encoding:
        resp.encoding = "utf-8"
    return resp.text.lstrip("\ufeff")


def load_students(text: str, mapping: Optional[ColumnMapping] = None) -> List[StudentAggregate]:
    """Parse CSV text into grouped students.

    An empty list means the sheet had no data rows.
    """
    rows = parse_csv(text)
    records = rows_to_records(rows)
    if not records:
        logger.info("Sheet has %d row(s); no data to group", len(rows))
        return []
    students = group_students(records, mapping=mapping)
    logger.info("Grouped %d row(s) into %d student(s)", len(records), len(students))
    return students
