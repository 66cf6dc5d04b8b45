"""
Word frequency analysis for transcriptqda.

Counts every surviving token across all transcripts and ranks the most
frequent words.
"""

from typing import Any, Dict, Optional, Sequence

import pandas as pd

from transcriptqda.core.analysis.base import AnalysisModule
from transcriptqda.core.analysis.common import WORD_COLUMN, require_tokens
from transcriptqda.core.utils.logger import log_info

COUNT_COLUMN = "n"


def count_words(tokens: pd.DataFrame) -> pd.DataFrame:
    """
    Count token occurrences across all documents.

    Returns:
        ``word, n`` table, one row per distinct word, sorted by ``n``
        descending with ties in alphabetical order

    Raises:
        EmptyInputError: If the token table is empty
    """
    require_tokens(tokens, "word_frequency")
    counts = (
        tokens.groupby(WORD_COLUMN, sort=False)
        .size()
        .reset_index(name=COUNT_COLUMN)
        .sort_values([COUNT_COLUMN, WORD_COLUMN], ascending=[False, True], kind="mergesort")
        .reset_index(drop=True)
    )
    counts[COUNT_COLUMN] = counts[COUNT_COLUMN].astype(int)
    return counts


def top_n_words(word_counts: pd.DataFrame, n: int = 10) -> pd.DataFrame:
    """The first ``n`` rows of a ranked word-count table (fewer if it is shorter)."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return word_counts.head(n).reset_index(drop=True)


class WordFrequencyAnalysis(AnalysisModule):
    """Global word counts and the top-N ranking."""

    module_name = "word_frequency"

    def analyze(
        self,
        tokens: pd.DataFrame,
        context: Any,
        file_names: Optional[Sequence[str]] = None,
    ) -> Dict[str, Any]:
        word_counts = count_words(tokens)
        top_words = top_n_words(word_counts, context.config.analysis.top_n_words)
        log_info(
            "WORD_FREQUENCY",
            f"{len(word_counts)} distinct word(s), {int(word_counts[COUNT_COLUMN].sum())} token(s)",
        )
        return {"word_counts": word_counts, "top_words": top_words}


__all__ = ["COUNT_COLUMN", "WordFrequencyAnalysis", "count_words", "top_n_words"]
