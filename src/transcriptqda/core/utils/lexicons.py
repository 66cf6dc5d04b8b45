"""
Reference data for the analysis stages: the polarity lexicon and stop words.

The default polarity lexicon is the Hu & Liu opinion lexicon (the "Bing"
lexicon), read through NLTK's ``opinion_lexicon`` corpus. A CSV file with
``word,sentiment`` columns can be used instead.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

import pandas as pd

from transcriptqda.core.utils.config import POLARITY_LABELS
from transcriptqda.core.utils.logger import log_info, log_warning
from transcriptqda.core.utils.nlp_utils import get_all_stopwords
from transcriptqda.core.utils.notifications import notify_user

_DISABLE_DOWNLOADS_ENV = "TRANSCRIPTQDA_DISABLE_DOWNLOADS"
_OPINION_LEXICON_RESOURCE = "corpora/opinion_lexicon"

LEXICON_COLUMNS = ["word", "sentiment"]


def _downloads_disabled() -> bool:
    value = os.getenv(_DISABLE_DOWNLOADS_ENV, "").strip().lower()
    return value in {"1", "true", "yes", "on"}


def _ensure_opinion_lexicon() -> None:
    """Ensure the NLTK opinion_lexicon corpus is available, downloading it once."""
    import nltk

    try:
        nltk.data.find(_OPINION_LEXICON_RESOURCE)
    except LookupError:
        if _downloads_disabled():
            # CI/offline mode: do not attempt network downloads.
            raise
        notify_user(
            "📥 Downloading NLTK opinion_lexicon resource (required for sentiment scoring)...",
            technical=True,
            section="sentiment",
        )
        if not nltk.download("opinion_lexicon", quiet=True):
            raise LookupError(
                "Could not download opinion_lexicon. Please run: "
                "python -c \"import nltk; nltk.download('opinion_lexicon')\""
            )


def _read_opinion_lexicon() -> tuple[list[str], list[str]]:
    from nltk.corpus import opinion_lexicon

    return list(opinion_lexicon.positive()), list(opinion_lexicon.negative())


def lexicon_from_words(
    positive: Iterable[str], negative: Iterable[str]
) -> pd.DataFrame:
    """Build a lexicon table from positive and negative word lists."""
    rows = [(word, "positive") for word in positive]
    rows.extend((word, "negative") for word in negative)
    lexicon = pd.DataFrame(rows, columns=LEXICON_COLUMNS)
    lexicon["word"] = lexicon["word"].astype(str).str.strip().str.lower()
    return lexicon[lexicon["word"] != ""].reset_index(drop=True)


def load_bing_lexicon() -> pd.DataFrame:
    """
    Load the Bing (Hu & Liu) polarity lexicon as a ``word, sentiment`` table.

    Raises:
        LookupError: If the corpus is missing and cannot be downloaded
    """
    _ensure_opinion_lexicon()
    positive, negative = _read_opinion_lexicon()
    lexicon = lexicon_from_words(positive, negative)
    log_info(
        "LEXICON",
        f"Loaded Bing lexicon with {len(positive)} positive and {len(negative)} negative words",
    )
    return lexicon


def load_lexicon_file(path: str | Path) -> pd.DataFrame:
    """
    Load a polarity lexicon from a CSV file with ``word`` and ``sentiment`` columns.

    Rows whose sentiment is not ``positive`` or ``negative`` are dropped with
    a warning.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the required columns are missing
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Lexicon file not found: {path}")

    frame = pd.read_csv(path, dtype=str, keep_default_na=False)
    frame.columns = [str(column).strip().lower() for column in frame.columns]
    missing = [column for column in LEXICON_COLUMNS if column not in frame.columns]
    if missing:
        raise ValueError(
            f"Lexicon file {path} is missing required column(s): {', '.join(missing)}"
        )

    lexicon = frame[LEXICON_COLUMNS].copy()
    lexicon["word"] = lexicon["word"].str.strip().str.lower()
    lexicon["sentiment"] = lexicon["sentiment"].str.strip().str.lower()

    valid = lexicon["sentiment"].isin(POLARITY_LABELS) & (lexicon["word"] != "")
    dropped = int((~valid).sum())
    if dropped:
        log_warning(
            "LEXICON",
            f"Dropped {dropped} row(s) without a positive/negative label",
            context=str(path),
        )
    lexicon = lexicon[valid].reset_index(drop=True)
    log_info("LEXICON", f"Loaded {len(lexicon)} lexicon entries from {path}")
    return lexicon


def load_lexicon(name: str = "bing", path: str | Path | None = None) -> pd.DataFrame:
    """Load the configured lexicon: a CSV file when ``path`` is set, else by name."""
    if path:
        return load_lexicon_file(path)
    if name.lower() != "bing":
        raise ValueError(f"Unknown sentiment lexicon: {name!r} (expected 'bing')")
    return load_bing_lexicon()


def load_stopwords(extra_stopwords: Iterable[str] | None = None) -> frozenset[str]:
    """spaCy English stop words plus any configured extras."""
    return get_all_stopwords(extra_stopwords)
