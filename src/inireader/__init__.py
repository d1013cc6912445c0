"""inireader - INI parsing with %(name)s placeholder resolution."""

from __future__ import annotations

# Core
from inireader.parser import parse
from inireader.reader import IniReader
from inireader.resolver import PlaceholderResolver
from inireader.store import Store

# Config
from inireader.config import Config, ReaderOptions

# Errors
from inireader.errors import (
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    IniReaderError,
    KeyNotFoundError,
    MalformedLineError,
    PlaceholderCycleError,
    PlaceholderDepthError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "IniReader",
    "PlaceholderResolver",
    "Store",
    "parse",
    # Config
    "Config",
    "ReaderOptions",
    # Errors
    "ErrorCodes",
    "IniReaderError",
    "KeyNotFoundError",
    "MalformedLineError",
    "PlaceholderCycleError",
    "PlaceholderDepthError",
    "ConfigError",
    "ConfigNotFoundError",
]
