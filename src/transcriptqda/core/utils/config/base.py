"""Shared configuration constants."""

from __future__ import annotations

# Filler words removed on top of the stop-word list
DEFAULT_FILLER_WORDS = ["uh", "um", "yeah"]

# Tokens must match this pattern to survive cleaning
ALPHABETIC_TOKEN_PATTERN = r"^[a-zA-Z]+$"

# Polarity labels used by the sentiment lexicon
POLARITY_LABELS = ("positive", "negative")

# Name of the built-in polarity lexicon (Hu & Liu opinion lexicon, a.k.a. Bing)
DEFAULT_SENTIMENT_LEXICON = "bing"

# Only files with this suffix are treated as transcripts
DEFAULT_TRANSCRIPT_SUFFIX = ".txt"

# Default directory for saved tables and charts
DEFAULT_OUTPUT_DIR = "qda_outputs"

# Environment variable prefix for every setting override
ENV_PREFIX = "TRANSCRIPTQDA_"

TRUTHY_VALUES = ("1", "true", "yes", "on")
