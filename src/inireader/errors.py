"""Error hierarchy for the inireader package."""

from __future__ import annotations

from typing import Any

__all__ = [
    "IniReaderError",
    "ConfigNotFoundError",
    "ConfigError",
    "KeyNotFoundError",
    "MalformedLineError",
    "PlaceholderCycleError",
    "PlaceholderDepthError",
    "ErrorCodes",
]


class IniReaderError(Exception):
    """Base error for all inireader errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(IniReaderError):
    """Raised when a YAML file of reader options cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Reader configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(IniReaderError):
    """Raised when reader options are unreadable or fail validation."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class KeyNotFoundError(IniReaderError, KeyError):
    """Raised when a composite key is absent from the store."""

    def __init__(self, key: str, **kwargs: Any) -> None:
        super().__init__(
            code="KEY_NOT_FOUND",
            message=f"Key not found: {key!r}",
            details={"key": key},
            **kwargs,
        )

    # KeyError.__str__ would repr() the message
    def __str__(self) -> str:
        return IniReaderError.__str__(self)

    @property
    def key(self) -> str:
        """The joined key that was looked up."""
        return self.details["key"]


class MalformedLineError(IniReaderError):
    """Raised when a line cannot be classified as comment, header, assignment or continuation."""

    def __init__(self, line_number: int, line: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="MALFORMED_LINE",
            message=f"Malformed line {line_number}: {reason}",
            details={"line_number": line_number, "line": line, "reason": reason},
            **kwargs,
        )

    @property
    def line_number(self) -> int:
        """1-based number of the offending line."""
        return self.details["line_number"]

    @property
    def line(self) -> str:
        """The offending line text."""
        return self.details["line"]


class PlaceholderCycleError(IniReaderError):
    """Raised when placeholder expansion refers back to a key already being expanded."""

    def __init__(self, chain: list[str], **kwargs: Any) -> None:
        super().__init__(
            code="PLACEHOLDER_CYCLE",
            message=f"Circular placeholder reference: {' -> '.join(chain)}",
            details={"chain": chain},
            **kwargs,
        )

    @property
    def chain(self) -> list[str]:
        """Keys visited, ending with the repeated one."""
        return self.details["chain"]


class PlaceholderDepthError(IniReaderError):
    """Raised when nested placeholder expansion exceeds the configured depth."""

    def __init__(self, depth: int, max_depth: int, chain: list[str], **kwargs: Any) -> None:
        super().__init__(
            code="PLACEHOLDER_DEPTH_EXCEEDED",
            message=f"Placeholder depth {depth} exceeds maximum {max_depth}",
            details={"depth": depth, "max_depth": max_depth, "chain": chain},
            **kwargs,
        )

    @property
    def max_depth(self) -> int:
        """The configured maximum nesting depth."""
        return self.details["max_depth"]


class ErrorCodes:
    """All inireader error codes as constants.

    Example:
        if error.code == ErrorCodes.KEY_NOT_FOUND:
            use_default()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    KEY_NOT_FOUND = "KEY_NOT_FOUND"
    MALFORMED_LINE = "MALFORMED_LINE"
    PLACEHOLDER_CYCLE = "PLACEHOLDER_CYCLE"
    PLACEHOLDER_DEPTH_EXCEEDED = "PLACEHOLDER_DEPTH_EXCEEDED"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
