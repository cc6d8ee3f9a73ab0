"""rescodegen error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Parse
- 9xxx: Internal
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2004

    # Parse (3xxx)
    PARSE_INVALID_INPUT = 3001
    PARSE_TYPE_TOO_DEEP = 3002
    PARSE_MALFORMED_DECLARATION = 3003

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class RescodegenError(Exception):
    """Base error with structured context for diagnostics and CLI output."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'PARSE_TYPE_TOO_DEEP')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(RescodegenError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class ParseError(RescodegenError):
    """Errors raised inside a parse call.

    These never escape ``parse()``; the driver converts them into
    diagnostic records.
    """

    @classmethod
    def invalid_input(cls, received: str) -> "ParseError":
        return cls(
            code=ErrorCode.PARSE_INVALID_INPUT,
            message=f"Input must be a string, got {received}",
            details={"received": received},
        )

    @classmethod
    def type_too_deep(cls, depth: int, fragment: str) -> "ParseError":
        return cls(
            code=ErrorCode.PARSE_TYPE_TOO_DEEP,
            message=f"Type annotation nested deeper than {depth} levels: {fragment}",
            details={"max_depth": depth, "fragment": fragment},
        )

    @classmethod
    def malformed_declaration(cls, kind: str, reason: str) -> "ParseError":
        return cls(
            code=ErrorCode.PARSE_MALFORMED_DECLARATION,
            message=f"Invalid {kind} structure: {reason}",
            details={"kind": kind, "reason": reason},
        )


class InternalError(RescodegenError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
