"""Core module exports."""

from rescodegen.core.errors import (
    ConfigError,
    ErrorCode,
    InternalError,
    ParseError,
    RescodegenError,
)
from rescodegen.core.logging import (
    clear_parse_id,
    configure_logging,
    get_logger,
    get_parse_id,
    set_parse_id,
)

__all__ = [
    # Errors
    "RescodegenError",
    "ConfigError",
    "ErrorCode",
    "InternalError",
    "ParseError",
    # Logging
    "clear_parse_id",
    "configure_logging",
    "get_logger",
    "get_parse_id",
    "set_parse_id",
]
