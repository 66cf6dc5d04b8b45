"""
Sentiment Analysis Module for transcriptqda.

Scores each transcript by joining its tokens against a polarity lexicon
(the Bing lexicon by default) and counting positive and negative matches.
A transcript's net score is ``positive - negative``.
"""

from typing import Any, Dict, Optional, Sequence

import pandas as pd

from transcriptqda.core.analysis.base import AnalysisModule
from transcriptqda.core.analysis.common import (
    FILE_NAME_COLUMN,
    WORD_COLUMN,
    require_tokens,
)
from transcriptqda.core.utils.logger import log_info
from transcriptqda.core.viz.specs import BarCategoricalSpec

SENTIMENT_COLUMNS = [FILE_NAME_COLUMN, "negative", "positive", "net"]

# ggplot2's default two-level fill: FALSE then TRUE
POSITIVE_NET_COLOR = "#00BFC4"
NON_POSITIVE_NET_COLOR = "#F8766D"


def score_sentiment(
    tokens: pd.DataFrame,
    lexicon: pd.DataFrame,
    file_names: Optional[Sequence[str]] = None,
) -> pd.DataFrame:
    """
    Count positive and negative lexicon matches per transcript.

    Every token is joined against the lexicon on ``word``; a word listed
    more than once in the lexicon contributes once per entry.

    Args:
        tokens: Cleaned ``file_name, word`` token table
        lexicon: ``word, sentiment`` table with positive/negative labels
        file_names: Transcripts to report; those without matches get zeros.
            Defaults to every file in ``tokens``.

    Returns:
        ``file_name, negative, positive, net`` table sorted by file name

    Raises:
        EmptyInputError: If the token table is empty
    """
    require_tokens(tokens, "sentiment")

    matches = tokens.merge(lexicon, on=WORD_COLUMN, how="inner")
    if matches.empty:
        counts = pd.DataFrame(columns=["negative", "positive"], dtype=int)
    else:
        counts = (
            matches.groupby([FILE_NAME_COLUMN, "sentiment"])
            .size()
            .unstack("sentiment", fill_value=0)
            .reindex(columns=["negative", "positive"], fill_value=0)
        )

    all_files = set(tokens[FILE_NAME_COLUMN])
    if file_names is not None:
        all_files.update(file_names)
    counts = counts.reindex(sorted(all_files), fill_value=0)
    counts.index.name = FILE_NAME_COLUMN
    counts.columns.name = None

    sentiment = counts.reset_index()
    sentiment["negative"] = sentiment["negative"].astype(int)
    sentiment["positive"] = sentiment["positive"].astype(int)
    sentiment["net"] = sentiment["positive"] - sentiment["negative"]
    return sentiment[SENTIMENT_COLUMNS]


def create_sentiment_chart(sentiment: pd.DataFrame) -> BarCategoricalSpec:
    """One horizontal bar per transcript, coloured by whether net is positive."""
    nets = [int(value) for value in sentiment["net"]]
    return BarCategoricalSpec(
        viz_id="sentiment.net_by_transcript.global",
        module="sentiment",
        name="sentiment_by_transcript",
        chart_intent="bar_categorical",
        title="Sentiment Analysis by Transcript",
        x_label="Sentiment Score",
        y_label="Transcript",
        categories=[str(name) for name in sentiment[FILE_NAME_COLUMN]],
        values=nets,
        colors=[POSITIVE_NET_COLOR if net > 0 else NON_POSITIVE_NET_COLOR for net in nets],
        orientation="horizontal",
        legend={"net > 0": POSITIVE_NET_COLOR, "net <= 0": NON_POSITIVE_NET_COLOR},
    )


class SentimentAnalysis(AnalysisModule):
    """Per-transcript positive/negative/net scores from the polarity lexicon."""

    module_name = "sentiment"

    def analyze(
        self,
        tokens: pd.DataFrame,
        context: Any,
        file_names: Optional[Sequence[str]] = None,
    ) -> Dict[str, Any]:
        sentiment = score_sentiment(tokens, context.lexicon, file_names=file_names)
        log_info(
            "SENTIMENT",
            f"Scored {len(sentiment)} transcript(s); "
            f"{int((sentiment['net'] > 0).sum())} net positive",
        )
        return {"sentiment": sentiment}

    def save_results(self, results: Dict[str, Any], output_service: Any) -> None:
        sentiment = results["sentiment"]
        output_service.save_data(sentiment, "sentiment_by_transcript", format_type="csv")
        if output_service.save_charts and not sentiment.empty:
            output_service.save_chart(create_sentiment_chart(sentiment))


__all__ = [
    "SENTIMENT_COLUMNS",
    "SentimentAnalysis",
    "create_sentiment_chart",
    "score_sentiment",
]
