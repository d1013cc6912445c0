"""Line-oriented INI parser producing a flat composite-key Store."""

from __future__ import annotations

import logging

from inireader.errors import ConfigError, MalformedLineError
from inireader.store import Store, make_key

__all__ = ["parse", "split_lines", "LINE_BREAKS"]

logger = logging.getLogger(__name__)

LINE_BREAKS = ("\n", "\r\n", "\r")

_COMMENT_CHARS = (";", "/")
_CONTINUATION_CHAR = "\t"


def split_lines(raw_text: str, line_break: str | None = None) -> list[str]:
    """Split text into lines.

    With ``line_break=None`` the text is split on ``\\n`` and one trailing
    ``\\r`` is dropped from every line. Otherwise the text is split on exactly
    ``line_break``, which must be one of LINE_BREAKS (ConfigError otherwise).
    """
    if line_break is None:
        return [line[:-1] if line.endswith("\r") else line for line in raw_text.split("\n")]
    if line_break not in LINE_BREAKS:
        raise ConfigError(message=f"Unsupported line break {line_break!r}, expected one of {LINE_BREAKS!r}")
    return raw_text.split(line_break)


def parse(raw_text: str, line_break: str | None = None) -> Store:
    """Parse INI text into a Store of ``"section.field" -> raw value``.

    Continuation lines (a literal tab as the first character) are appended
    verbatim to the most recently assigned key, joined by ``line_break``
    (``"\\n"`` when it is None). Raises MalformedLineError on an assignment
    without ``=``, an unterminated section header, or a continuation with no
    preceding assignment, and ConfigError for an unsupported ``line_break``.
    """
    joiner = "\n" if line_break is None else line_break
    entries: dict[str, str] = {}
    sections: list[str] = []
    section = ""
    prev_key: str | None = None

    for line_number, line in enumerate(split_lines(raw_text, line_break), start=1):
        stripped = line.strip()
        if not stripped:
            continue

        if line[0] == _CONTINUATION_CHAR:
            if prev_key is None:
                raise MalformedLineError(line_number, line, "continuation line before any assignment")
            entries[prev_key] = f"{entries[prev_key]}{joiner}{line}"
            continue

        lead = stripped[0]
        if lead in _COMMENT_CHARS:
            continue

        if lead == "[":
            end = stripped.find("]")
            if end == -1:
                raise MalformedLineError(line_number, line, "section header has no closing ']'")
            section = stripped[1:end]
            continue

        field, sep, value = line.partition("=")
        if not sep:
            raise MalformedLineError(line_number, line, "expected 'key = value'")
        prev_key = make_key(section, field.strip())
        entries[prev_key] = value.strip()
        sections.append(section)

    logger.debug("Parsed %d keys in %d sections", len(entries), len(set(sections)))
    return Store(entries, sections)
