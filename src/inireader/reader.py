"""IniReader: construction adapters and query entry points."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from inireader.config import ReaderOptions
from inireader.errors import KeyNotFoundError
from inireader.parser import parse
from inireader.resolver import PlaceholderResolver
from inireader.store import Store

__all__ = ["IniReader"]

logger = logging.getLogger(__name__)

_MISSING: Any = object()


class IniReader:
    """Parsed INI content with placeholder-aware lookups.

    The content is parsed once at construction; the resulting store is
    immutable, so a single reader can be queried from several threads.

    Example::

        reader = IniReader("[db]\\nhost = localhost\\nurl = %(db.host)s:5432\\n")
        reader.get_section_value("db", "url")  # "localhost:5432"
    """

    def __init__(self, content: str, options: ReaderOptions | None = None) -> None:
        self._options = options or ReaderOptions()
        self._store: Store = parse(content, line_break=self._options.line_break)
        self._resolver = PlaceholderResolver(self._store, max_depth=self._options.max_depth)

    # === Construction adapters ===

    @classmethod
    def from_string(cls, content: str, options: ReaderOptions | None = None) -> IniReader:
        return cls(content, options)

    @classmethod
    def from_bytes(cls, data: bytes, options: ReaderOptions | None = None) -> IniReader:
        """Decode ``data`` with ``options.encoding`` and parse it."""
        options = options or ReaderOptions()
        return cls(data.decode(options.encoding), options)

    @classmethod
    def from_file(cls, path: str | Path, options: ReaderOptions | None = None) -> IniReader:
        """Read and parse the file at ``path``.

        Raises IsADirectoryError for a directory and lets any other OSError
        from the read propagate.
        """
        file_path = Path(path)
        if file_path.is_dir():
            raise IsADirectoryError(f"Expected a file but got a directory: {file_path}")
        logger.debug("Reading INI file %s", file_path)
        return cls.from_bytes(file_path.read_bytes(), options)

    @classmethod
    def from_stream(cls, stream: Any, options: ReaderOptions | None = None) -> IniReader:
        """Read a text or binary stream to the end and parse it."""
        data = stream.read()
        if isinstance(data, (bytes, bytearray)):
            return cls.from_bytes(bytes(data), options)
        return cls(data, options)

    @classmethod
    def from_response(cls, response: Any, options: ReaderOptions | None = None) -> IniReader:
        """Parse an HTTP response body.

        Accepts objects exposing ``.content`` bytes (requests, httpx) or a
        readable body (``http.client.HTTPResponse``, urllib).
        """
        content = getattr(response, "content", None)
        if isinstance(content, (bytes, bytearray)):
            return cls.from_bytes(bytes(content), options)
        return cls.from_stream(response, options)

    # === Queries ===

    @property
    def options(self) -> ReaderOptions:
        return self._options

    @property
    def store(self) -> Store:
        return self._store

    @property
    def stage(self) -> Mapping[str, str]:
        """Read-only view of the raw, unresolved entries."""
        return self._store.as_dict()

    def sections(self) -> list[str]:
        return self._store.sections()

    def get_value(self, field: str) -> str:
        """Look up ``field`` in the unsectioned scope."""
        return self._resolver.resolve("", field)

    def get_section_value(self, section: str, field: str) -> str:
        return self._resolver.resolve(section, field)

    def get_by_dot(self, *key_parts: str) -> str:
        """Look up ``key_parts`` joined with ``.``."""
        return self._resolver.resolve(*key_parts)

    def get(self, *key_parts: str, default: Any = _MISSING) -> Any:
        """Like get_by_dot, but return ``default`` when the key is absent.

        Without a default, KeyNotFoundError propagates.
        """
        try:
            return self._resolver.resolve(*key_parts)
        except KeyNotFoundError:
            if default is _MISSING:
                raise
            return default

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return f"IniReader(keys={len(self._store)}, sections={self.sections()!r})"
