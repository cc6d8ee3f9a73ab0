"""Config module exports."""

from rescodegen.config.loader import RescodegenSettings, load_config
from rescodegen.config.models import (
    LoggingConfig,
    LogOutputConfig,
    ParserConfig,
    RescodegenConfig,
)

__all__ = [
    "load_config",
    "RescodegenConfig",
    "RescodegenSettings",
    "LoggingConfig",
    "LogOutputConfig",
    "ParserConfig",
]
