import bookcodes.__main__

import io
import json
import logging

import pytest


def run(argv, stdin=""):
    out = io.StringIO()
    status = bookcodes.__main__.run(argv, stdin=io.StringIO(stdin), stdout=out)
    return status, out.getvalue()


def test_default_format(monkeypatch):
    monkeypatch.setattr(bookcodes, "DEFAULT_FORMAT", "isbn13")
    assert run(["0306406152"]) == (0, "9780306406157\n")


def test_configured_format(monkeypatch):
    monkeypatch.setattr(bookcodes, "DEFAULT_FORMAT", "urn")
    assert run(["0306406152"]) == (0, "urn:isbn:9780306406157\n")


def test_format_option():
    assert run(["--format=isbn10", "978-0-306-40615-7"]) == (0, "0306406152\n")
    assert run(["--format=sbn", "978-0-306-40615-7"]) == (0, "306406152\n")


def test_unknown_format():
    status, out = run(["--format=issn", "0306406152"])
    assert status == 2
    assert "issn" in out


def test_invalid_codes_are_reported():
    status, out = run(["067232357", "0306406152"])
    assert status == 1
    assert out.splitlines() == ["067232357: isbn: invalid sbn checksum", "9780306406157"]


def test_stdin():
    status, out = run(["-"], stdin="0306406152\n\n1-316-87371-4\n")
    assert status == 0
    assert out.splitlines() == ["9780306406157", "9781316873717"]


def test_json():
    status, out = run(["--json", "--format=isbn10", "0306406152", "9791090636071"])
    assert status == 1
    assert json.loads(out) == {
        "0306406152": "0306406152",
        "9791090636071": {"error": "isbn: isbn-10: gs1 is not 978 but 979"},
    }


def test_needs_a_code():
    with pytest.raises(SystemExit):
        run([])


def test_log_level():
    assert bookcodes.__main__.log_level("WARNING") == logging.WARNING
    assert bookcodes.__main__.log_level("debug") == logging.DEBUG
    assert bookcodes.__main__.log_level("verbose") is None
    assert bookcodes.__main__.log_level("") is None


def test_unknown_log_level(monkeypatch):
    monkeypatch.setattr(bookcodes, "LOG_LEVEL", "verbose")
    status, out = run(["0306406152"])
    assert status == 2
    assert "verbose" in out
    assert "9780306406157" not in out
