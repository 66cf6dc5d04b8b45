"""Top-level transcriptqda configuration."""

from __future__ import annotations

import json
import os
from dataclasses import asdict
from typing import Any

from dotenv import load_dotenv

from .analysis import AnalysisConfig
from .base import ENV_PREFIX, TRUTHY_VALUES
from .workflow import InputConfig, LoggingConfig, OutputConfig


class QDAConfig:
    """
    Main configuration class for transcriptqda.

    Combines configuration from multiple sources:
    - Default values
    - Configuration files (JSON)
    - Environment variables

    The configuration is organized into logical sections:
    - analysis: Cleaning, word cloud, sentiment and topic model settings
    - input: Transcript directory, suffix and encoding
    - output: Where tables and charts are written
    - logging: Logging level and optional log file
    """

    def __init__(self, config_file: str | None = None):
        """
        Initialize configuration with default values and optional file loading.

        Args:
            config_file: Path to a JSON configuration file (optional)

        Note:
            Configuration loading order (highest to lowest priority):
            1. Environment variables
            2. Configuration file (if provided)
            3. Default values
        """
        self.analysis = AnalysisConfig()
        self.input = InputConfig()
        self.output = OutputConfig()
        self.logging = LoggingConfig()

        # Global settings
        self.mode = "simple"  # 'simple' or 'advanced' - controls message verbosity
        self.use_emojis = True

        if config_file:
            self._load_from_file(config_file)

        self._load_from_env()

    def _load_from_env(self):
        """
        Load configuration from ``TRANSCRIPTQDA_*`` environment variables.

        Supported environment variables:
        - TRANSCRIPTQDA_NUM_TOPICS: Number of LDA topics
        - TRANSCRIPTQDA_RANDOM_SEED: LDA and word cloud random seed
        - TRANSCRIPTQDA_MIN_WORD_FREQ: Minimum count for the word cloud
        - TRANSCRIPTQDA_TOP_N: Number of top words reported
        - TRANSCRIPTQDA_FILLER_WORDS: JSON array or comma-separated list
        - TRANSCRIPTQDA_LEXICON_FILE: CSV polarity lexicon (word,sentiment)
        - TRANSCRIPTQDA_SPACY_MODEL: spaCy pipeline used for tokenization
        - TRANSCRIPTQDA_ENCODING: Transcript file encoding
        - TRANSCRIPTQDA_OUTPUT_DIR: Base output directory
        - TRANSCRIPTQDA_LOG_LEVEL: Logging level
        - TRANSCRIPTQDA_USE_EMOJIS: Enable/disable emojis in console output
        """
        topic_config = self.analysis.topic_modeling

        num_topics = _env_int("NUM_TOPICS")
        if num_topics is not None:
            topic_config.num_topics = num_topics

        seed = _env_int("RANDOM_SEED")
        if seed is not None:
            topic_config.random_state = seed

        min_freq = _env_int("MIN_WORD_FREQ")
        if min_freq is not None:
            self.analysis.wordcloud_min_freq = min_freq

        top_n = _env_int("TOP_N")
        if top_n is not None:
            self.analysis.top_n_words = top_n

        filler_words = os.getenv(f"{ENV_PREFIX}FILLER_WORDS")
        if filler_words is not None:
            self.analysis.filler_words = parse_word_list(filler_words)

        lexicon_file = os.getenv(f"{ENV_PREFIX}LEXICON_FILE")
        if lexicon_file:
            self.analysis.sentiment_lexicon_file = lexicon_file

        spacy_model = os.getenv(f"{ENV_PREFIX}SPACY_MODEL")
        if spacy_model:
            self.analysis.spacy_model = spacy_model

        encoding = os.getenv(f"{ENV_PREFIX}ENCODING")
        if encoding:
            self.input.encoding = encoding

        output_dir = os.getenv(f"{ENV_PREFIX}OUTPUT_DIR")
        if output_dir:
            self.output.base_output_dir = output_dir

        log_level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if log_level:
            self.logging.level = log_level

        emoji_env = os.getenv(f"{ENV_PREFIX}USE_EMOJIS")
        if emoji_env is not None:
            self.use_emojis = emoji_env.strip().lower() in TRUTHY_VALUES

    def _load_from_file(self, config_file: str):
        """
        Load configuration from a JSON file.

        The file mirrors the section layout::

            {
                "analysis": {"filler_words": [...], "topic_modeling": {...}},
                "input": {...},
                "output": {...},
                "logging": {...},
                "use_emojis": true
            }

        Args:
            config_file: Path to the JSON configuration file

        Raises:
            ValueError: If the file cannot be read or parsed
        """
        try:
            with open(config_file, encoding="utf-8") as f:
                config_data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ValueError(f"Failed to load configuration from {config_file}: {e}")

        if not isinstance(config_data, dict):
            raise ValueError(
                f"Failed to load configuration from {config_file}: "
                "top-level JSON value must be an object"
            )

        analysis_data = dict(config_data.get("analysis", {}))
        topic_data = analysis_data.pop("topic_modeling", None)
        self._apply_section(self.analysis, analysis_data)
        if isinstance(topic_data, dict):
            self._apply_section(self.analysis.topic_modeling, topic_data)

        self._apply_section(self.input, config_data.get("input", {}))
        self._apply_section(self.output, config_data.get("output", {}))
        self._apply_section(self.logging, config_data.get("logging", {}))

        if "mode" in config_data:
            self.mode = config_data["mode"]
        if "use_emojis" in config_data:
            self.use_emojis = bool(config_data["use_emojis"])

    def _apply_section(self, config_obj: Any, section_data: dict[str, Any]):
        """
        Copy known keys from a dictionary onto a config dataclass.

        Unknown keys are ignored so older config files keep loading.
        """
        for key, value in section_data.items():
            if hasattr(config_obj, key):
                setattr(config_obj, key, value)

    def to_dict(self) -> dict[str, Any]:
        """Return a complete configuration snapshot as a dictionary."""
        return {
            "analysis": asdict(self.analysis),
            "input": asdict(self.input),
            "output": asdict(self.output),
            "logging": asdict(self.logging),
            "mode": self.mode,
            "use_emojis": self.use_emojis,
        }

    def save_to_file(self, config_file: str):
        """Save the current configuration to a JSON file."""
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)


def _env_int(name: str) -> int | None:
    raw = os.getenv(f"{ENV_PREFIX}{name}")
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None  # Keep default value if conversion fails


def parse_word_list(raw: str) -> list[str]:
    """Parse a JSON array or a comma-separated string into lowercase words."""
    try:
        parsed = json.loads(raw)
        if isinstance(parsed, list):
            return [str(word).strip().lower() for word in parsed if str(word).strip()]
    except (json.JSONDecodeError, ValueError):
        pass
    return [word.strip().lower() for word in raw.split(",") if word.strip()]


_config: QDAConfig | None = None
_env_loaded = False


def _load_dotenv_once() -> None:
    global _env_loaded
    if _env_loaded:
        return
    _env_loaded = True
    load_dotenv(override=False)


def get_config() -> QDAConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _load_dotenv_once()
        _config = QDAConfig()
    return _config


def set_config(config: QDAConfig | None) -> None:
    """Set (or with ``None``, reset) the global configuration instance."""
    global _config
    _config = config
