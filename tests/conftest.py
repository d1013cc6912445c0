"""Shared pytest fixtures for the inireader test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from inireader.reader import IniReader

SAMPLE_INI = """\
; top-level settings
name = app
greeting = hello %(name)s

[db]
host = localhost
port = 5432
url = %(db.host)s:%(db.port)s

/ another comment style
[paths]
root = /srv
logs = %(paths.root)s/logs
motd = first line
\tsecond line
\tthird line
"""


@pytest.fixture
def sample_text() -> str:
    """Returns an INI document exercising sections, comments, placeholders and continuations."""
    return SAMPLE_INI


@pytest.fixture
def sample_reader(sample_text: str) -> IniReader:
    """Returns an IniReader built from sample_text."""
    return IniReader(sample_text)


@pytest.fixture
def sample_file(tmp_path: Path, sample_text: str) -> Path:
    """Writes sample_text to a temp file and returns its path."""
    path = tmp_path / "app.ini"
    path.write_text(sample_text, encoding="utf-8")
    return path
