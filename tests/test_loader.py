"""
Tests for DataLoader. No network: HTTP goes through a fake session that
returns real requests.Response objects.
"""
import pytest
import requests

from deanery import DataLoader, RosterImportError

from .conftest import FakeSession, SAMPLE_ROSTER, make_response

URL = "http://roster.test/data.txt"


def test_reads_local_file(roster_file):
    assert DataLoader().fetch(roster_file) == SAMPLE_ROSTER


def test_reads_local_file_given_as_string(roster_file):
    assert DataLoader().fetch(str(roster_file)) == SAMPLE_ROSTER


def test_drops_utf8_bom(tmp_path):
    path = tmp_path / "bom.txt"
    path.write_bytes(b"\xef\xbb\xbf" + "[GROUPS]\nИВТ-101|Иванов".encode("utf-8"))
    assert DataLoader().fetch(path) == "[GROUPS]\nИВТ-101|Иванов"


def test_missing_file_is_import_error(tmp_path):
    with pytest.raises(RosterImportError):
        DataLoader().fetch(tmp_path / "missing.txt")


def test_invalid_utf8_is_import_error(tmp_path):
    path = tmp_path / "latin1.txt"
    path.write_bytes("[GROUPS]\nГруппа".encode("cp1251"))
    with pytest.raises(RosterImportError):
        DataLoader().fetch(path)


def test_default_source_from_config(monkeypatch, roster_file):
    monkeypatch.setattr("deanery.data.loader.DATA_SOURCE", str(roster_file))
    assert DataLoader().fetch() == SAMPLE_ROSTER


def test_fetches_url_once_with_timeout():
    session = FakeSession(response=make_response(200, SAMPLE_ROSTER.encode("utf-8")))
    loader = DataLoader(session=session, timeout=2.5)

    assert loader.fetch(URL) == SAMPLE_ROSTER
    assert session.calls == [(URL, 2.5)]


def test_url_body_decoded_as_utf8_regardless_of_charset():
    response = make_response(200, "[DISCIPLINES]\nMath|экзамен".encode("utf-8"))
    response.headers["Content-Type"] = "text/plain"
    loader = DataLoader(session=FakeSession(response=response))
    assert loader.fetch(URL).endswith("экзамен")


@pytest.mark.parametrize("status,reason", [(404, "Not Found"), (500, "Server Error")])
def test_non_success_status_is_import_error(status, reason):
    session = FakeSession(response=make_response(status, b"", reason=reason))
    with pytest.raises(RosterImportError):
        DataLoader(session=session).fetch(URL)
    assert len(session.calls) == 1


def test_connection_error_is_import_error_without_retry():
    session = FakeSession(exc=requests.ConnectionError("refused"))
    with pytest.raises(RosterImportError) as excinfo:
        DataLoader(session=session).fetch(URL)
    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)
    assert len(session.calls) == 1


def test_default_session_is_requests_session():
    assert isinstance(DataLoader().session, requests.Session)


@pytest.mark.parametrize("source,expected", [
    ("http://example.org/data.txt", True),
    ("https://example.org/data.txt", True),
    ("data/data.txt", False),
    ("/abs/data.txt", False),
    ("ftp://example.org/data.txt", False),
])
def test_is_url(source, expected):
    assert DataLoader.is_url(source) is expected


@pytest.mark.parametrize("source", ["http://[::1", "data\x00.txt"])
def test_malformed_source_is_import_error(source):
    session = FakeSession(response=make_response(200, b"[GROUPS]"))
    with pytest.raises(RosterImportError):
        DataLoader(session=session).fetch(source)
    assert session.calls == []
