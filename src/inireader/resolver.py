"""Query-time expansion of ``%(name)s`` placeholders."""

from __future__ import annotations

import logging
import re
import sys
from collections.abc import Mapping, Sequence

from inireader.errors import KeyNotFoundError, PlaceholderCycleError, PlaceholderDepthError
from inireader.store import make_key

__all__ = ["PlaceholderResolver", "DEFAULT_MAX_DEPTH", "PLACEHOLDER_PATTERN", "lookup_key", "placeholder_name"]

logger = logging.getLogger(__name__)

PLACEHOLDER_PATTERN = re.compile(r"%\(.*?\)s")

DEFAULT_MAX_DEPTH = 32


def lookup_key(key_parts: Sequence[str]) -> str:
    """Join key parts with ``.``; a dotless result names the unsectioned scope."""
    key = ".".join(key_parts)
    if "." not in key:
        return make_key("", key)
    return key


def placeholder_name(token: str) -> str:
    """Strip every ``%(`` and ``)s`` from a matched placeholder token."""
    return token.replace(")s", "").replace("%(", "")


class PlaceholderResolver:
    """Looks up composite keys in a store and expands placeholders recursively.

    Placeholders name keys in the flat namespace, never relative to the
    section of the value they appear in. A placeholder whose key is missing
    is left in the value as literal text. Each matched token replaces only
    its first occurrence in the value being built.
    """

    def __init__(self, store: Mapping[str, str], max_depth: int | None = DEFAULT_MAX_DEPTH) -> None:
        self._store = store
        self._max_depth = max_depth

    def resolve(self, *key_parts: str) -> str:
        """Return the fully expanded value for ``key_parts`` joined with ``.``.

        Raises KeyNotFoundError if the key is absent, PlaceholderCycleError if
        expansion revisits a key, and PlaceholderDepthError when nesting
        exceeds ``max_depth``. With ``max_depth=None`` nesting is bounded only
        by the interpreter recursion limit, which also surfaces as
        PlaceholderDepthError.
        """
        key = lookup_key(key_parts)
        try:
            return self._resolve(key, ())
        except RecursionError as e:
            limit = sys.getrecursionlimit()
            raise PlaceholderDepthError(
                depth=limit,
                max_depth=limit if self._max_depth is None else self._max_depth,
                chain=[key],
                cause=e,
            ) from e

    def _resolve(self, key: str, chain: tuple[str, ...]) -> str:
        if key not in self._store:
            raise KeyNotFoundError(key)
        if key in chain:
            raise PlaceholderCycleError(chain=[*chain, key])
        depth = len(chain)
        if self._max_depth is not None and depth > self._max_depth:
            raise PlaceholderDepthError(depth=depth, max_depth=self._max_depth, chain=[*chain, key])

        value = self._store[key]
        chain = (*chain, key)
        for token in PLACEHOLDER_PATTERN.findall(value):
            name = placeholder_name(token)
            try:
                replacement = self._resolve(lookup_key((name,)), chain)
            except KeyNotFoundError:
                logger.debug("Placeholder %s in %r left unresolved", token, key)
                continue
            value = value.replace(token, replacement, 1)
        return value
