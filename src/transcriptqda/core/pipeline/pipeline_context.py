"""
Analysis context for transcriptqda.

The context carries everything the analysis stages read besides the token
table: the configuration, the stop-word set, filler words, the polarity
lexicon and the random seed. Reference data is loaded once per run by
``build_context`` and handed to every stage explicitly.
"""

from dataclasses import dataclass, field, replace
from typing import FrozenSet, List, Optional

import pandas as pd

from transcriptqda.core.utils.config import QDAConfig, get_config
from transcriptqda.core.utils.lexicons import load_lexicon, load_stopwords
from transcriptqda.core.utils.logger import log_info


@dataclass(frozen=True, eq=False)
class AnalysisContext:
    """Read-only inputs shared by every analysis stage in a run."""

    config: QDAConfig
    stopwords: FrozenSet[str]
    filler_words: List[str]
    lexicon: pd.DataFrame = field(repr=False)
    random_seed: int
    source: str = ""

    def with_source(self, source: str) -> "AnalysisContext":
        return replace(self, source=source)


def build_context(
    config: Optional[QDAConfig] = None,
    lexicon: Optional[pd.DataFrame] = None,
) -> AnalysisContext:
    """
    Load reference data and build the context for a run.

    Args:
        config: Configuration to use (defaults to the global config)
        lexicon: Pre-loaded polarity lexicon; when omitted it is loaded
            from the configured file or the Bing lexicon
    """
    config = config or get_config()
    analysis = config.analysis

    if lexicon is None:
        lexicon = load_lexicon(
            analysis.sentiment_lexicon, path=analysis.sentiment_lexicon_file
        )
    stopwords = load_stopwords(analysis.extra_stopwords)
    filler_words = [word.strip().lower() for word in analysis.filler_words if word.strip()]

    log_info(
        "CONTEXT",
        f"{len(stopwords)} stop word(s), {len(filler_words)} filler word(s), "
        f"{len(lexicon)} lexicon entr{'y' if len(lexicon) == 1 else 'ies'}",
    )
    return AnalysisContext(
        config=config,
        stopwords=stopwords,
        filler_words=filler_words,
        lexicon=lexicon,
        random_seed=analysis.topic_modeling.random_state,
    )
