"""Input, output and logging configuration dataclasses."""

from __future__ import annotations

from dataclasses import dataclass

from .base import DEFAULT_OUTPUT_DIR, DEFAULT_TRANSCRIPT_SUFFIX


@dataclass
class InputConfig:
    """Where transcripts come from and how they are decoded."""

    transcript_dir: str | None = None
    file_suffix: str = DEFAULT_TRANSCRIPT_SUFFIX
    encoding: str = "utf-8"


@dataclass
class OutputConfig:
    """Where tables and charts are written."""

    base_output_dir: str = DEFAULT_OUTPUT_DIR
    save_charts: bool = True
    dpi: int = 300


@dataclass
class LoggingConfig:
    """Logging level and optional log file."""

    level: str = "INFO"
    file: str | None = None
