"""
Logging Configuration.

Settings are read from ``ROTOLOG_*`` environment variables or a ``.env``
file and turned into a logger with ``build_logger``.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from . import default
from .exceptions import ConfigurationError, UnknownSinkError
from .fanout import FanoutLogger
from .levels import Severity
from .sinks import BaseLogger, ConsoleSink, RotatingFileSink

KNOWN_SINKS = ["console", "file"]


class RotologSettings(BaseSettings):
    """Logger construction options."""

    model_config = SettingsConfigDict(
        env_prefix="ROTOLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    level: Severity = Field(default=Severity.INFO, description="Initial threshold")
    sinks: str = Field(default="console", description="Comma-separated sink names (console, file)")
    file_path: str = Field(default="logs/rotolog.log", description="Active file for the file sink")
    max_file_size: int = Field(
        default=RotatingFileSink.DEFAULT_MAX_FILE_SIZE,
        gt=0,
        description="Rotation threshold in bytes",
    )
    max_rotated_files: int = Field(
        default=RotatingFileSink.DEFAULT_MAX_ROTATED_FILES,
        ge=1,
        description="Rotated files kept before indices wrap",
    )

    @field_validator("level", mode="before")
    @classmethod
    def _parse_level(cls, value: object) -> Severity:
        return Severity.parse(value)

    @property
    def sink_names(self) -> list[str]:
        return [name.strip().lower() for name in self.sinks.split(",") if name.strip()]


def _build_sink(name: str, settings: RotologSettings) -> BaseLogger:
    if name == "console":
        return ConsoleSink(settings.level)
    if name == "file":
        if not settings.file_path.strip():
            raise ConfigurationError("File sink requested without a file path")
        return RotatingFileSink(
            settings.level,
            settings.file_path,
            settings.max_file_size,
            settings.max_rotated_files,
        )
    raise UnknownSinkError(sink_name=name, known=KNOWN_SINKS)


def build_logger(settings: RotologSettings | None = None) -> BaseLogger:
    """Build the logger described by ``settings`` (env-derived when omitted).

    A single configured sink is returned as-is; several are wrapped in a
    ``FanoutLogger`` in the order they are listed.
    """
    if settings is None:
        settings = RotologSettings()

    names = settings.sink_names
    if not names:
        raise ConfigurationError("No sinks configured", details={"sinks": settings.sinks})
    for name in names:
        if name not in KNOWN_SINKS:
            raise UnknownSinkError(sink_name=name, known=KNOWN_SINKS)
    # Two file sinks on one path would rename the file under each other.
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        raise ConfigurationError(
            f"Sink listed more than once: {', '.join(duplicates)}",
            code="DUPLICATE_SINK",
            details={"sinks": settings.sinks, "duplicates": duplicates},
        )

    sinks = [_build_sink(name, settings) for name in names]
    if len(sinks) == 1:
        return sinks[0]
    return FanoutLogger(settings.level, sinks)


def configure_default(settings: RotologSettings | None = None) -> BaseLogger:
    """Build a logger from ``settings`` and install it as the process default."""
    logger = build_logger(settings)
    default.set_logger(logger)
    return logger
