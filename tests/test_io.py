import pytest
import requests

from band_achievements import io as sheet_io
from band_achievements.io import SheetFetchError, build_export_url, fetch_sheet_csv, load_students


def _response(status, body=b"", reason=""):
    resp = requests.Response()
    resp.status_code = status
    resp.reason = reason
    resp._content = body
    resp.encoding = "utf-8"
    return resp


def test_build_export_url():
    assert build_export_url("abc123", "42") == "https://docs.google.com/spreadsheets/d/abc123/export?format=csv&gid=42"
    assert build_export_url(" abc ", "") == "https://docs.google.com/spreadsheets/d/abc/export?format=csv&gid=0"


def test_build_export_url_requires_id():
    with pytest.raises(ValueError):
        build_export_url("  ")


def test_fetch_returns_text_without_bom(monkeypatch):
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return _response(200, "\ufeffStudent,Card,Points\n".encode("utf-8"))

    monkeypatch.setattr(sheet_io.requests, "get", fake_get)
    assert fetch_sheet_csv("sheet", "7", timeout=5) == "Student,Card,Points\n"
    assert calls == [("https://docs.google.com/spreadsheets/d/sheet/export?format=csv&gid=7", 5)]


def test_fetch_404_raises(monkeypatch):
    monkeypatch.setattr(sheet_io.requests, "get", lambda url, timeout: _response(404, reason="Not Found"))
    with pytest.raises(SheetFetchError) as excinfo:
        fetch_sheet_csv("sheet")
    assert "404 Not Found" in str(excinfo.value)


def test_fetch_transport_error_raises(monkeypatch):
    def boom(url, timeout):
        raise requests.ConnectionError("dns failure")

    monkeypatch.setattr(sheet_io.requests, "get", boom)
    with pytest.raises(SheetFetchError, match="dns failure"):
        fetch_sheet_csv("sheet")


def test_load_students_no_data():
    assert load_students("") == []
    assert load_students("Student,Card,Points\n\n") == []


def test_load_students_malformed_points_scenario():
    (student,) = load_students('Student,Card,Points\nEli,Section Leader,"abc"\nEli,Rhythm,10\n')
    assert student.total == 10
    assert student.items[0].points == 0
