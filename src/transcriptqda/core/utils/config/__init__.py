from .analysis import AnalysisConfig, TopicModelingConfig
from .workflow import InputConfig, OutputConfig, LoggingConfig
from .main import QDAConfig, parse_word_list
from . import main as _main
from .base import (
    ALPHABETIC_TOKEN_PATTERN,
    DEFAULT_FILLER_WORDS,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_SENTIMENT_LEXICON,
    DEFAULT_TRANSCRIPT_SUFFIX,
    POLARITY_LABELS,
)


def get_config() -> QDAConfig:
    """Get the global configuration instance."""
    return _main.get_config()


def set_config(config: QDAConfig | None) -> None:
    """Set the global configuration instance."""
    _main.set_config(config)


def load_config(config_file: str) -> QDAConfig:
    """Load configuration from file and set as global config."""
    config = QDAConfig(config_file)
    set_config(config)
    return config


__all__ = [
    "QDAConfig",
    "AnalysisConfig",
    "TopicModelingConfig",
    "InputConfig",
    "OutputConfig",
    "LoggingConfig",
    "get_config",
    "set_config",
    "load_config",
    "parse_word_list",
    "ALPHABETIC_TOKEN_PATTERN",
    "DEFAULT_FILLER_WORDS",
    "DEFAULT_OUTPUT_DIR",
    "DEFAULT_SENTIMENT_LEXICON",
    "DEFAULT_TRANSCRIPT_SUFFIX",
    "POLARITY_LABELS",
]
