"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (RESCODEGEN__SECTION__KEY)
3. Project YAML (rescodegen.yaml, or an explicit path)
4. Global YAML (~/.config/rescodegen/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    RESCODEGEN__<SECTION>__<KEY>=<VALUE>

Examples:
    RESCODEGEN__LOGGING__LEVEL=DEBUG
    RESCODEGEN__PARSER__MAX_TYPE_DEPTH=16
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        RESCODEGEN__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. DEBUG traces every skipped declaration and unknown type.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class ParserConfig(BaseModel):
    """Parser configuration.

    Env vars:
        RESCODEGEN__PARSER__MAX_TYPE_DEPTH: Nesting limit for type annotations
        RESCODEGEN__PARSER__STRIP_TRAILING_COMMAS: Drop record-field commas from signatures
    """

    max_type_depth: int = Field(
        default=32,
        description="Maximum nesting of wrapper/function types before the translator gives up. "
        "Deeper annotations degrade to void with a diagnostic.",
    )
    strip_trailing_commas: bool = Field(
        default=True,
        description="Strip the record-field comma from single-line method signatures. "
        "Multi-line signatures always have it stripped once their parentheses close.",
    )

    @field_validator("max_type_depth")
    @classmethod
    def validate_max_type_depth(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"max_type_depth must be at least 1, got {v}")
        return v


class RescodegenConfig(BaseModel):
    """Root configuration for rescodegen.

    All settings can be configured via:
    1. Environment variables: RESCODEGEN__SECTION__KEY
    2. YAML config files (project or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    parser: ParserConfig = Field(default_factory=ParserConfig)
