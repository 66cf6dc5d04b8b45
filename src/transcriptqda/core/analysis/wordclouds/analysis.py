"""
Word cloud rendering for transcriptqda.

Words are sized by their global count. Only words that occur at least
``min_freq`` times are drawn; the most frequent words are placed first.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

import pandas as pd

from transcriptqda.core.analysis.base import AnalysisModule
from transcriptqda.core.analysis.common import WORD_COLUMN
from transcriptqda.core.analysis.word_frequency import COUNT_COLUMN, count_words
from transcriptqda.core.analysis.wordclouds.models import WordcloudTerm, WordcloudTerms
from transcriptqda.core.utils.lazy_imports import get_matplotlib_pyplot, get_wordcloud
from transcriptqda.core.utils.logger import log_warning
from transcriptqda.core.utils.notifications import notify_user

WORDCLOUD_TITLE = "Word Cloud"


def _get_wordcloud_class():
    return get_wordcloud().WordCloud


def filter_min_frequency(word_counts: pd.DataFrame, min_freq: int = 2) -> pd.DataFrame:
    """Keep words whose count is at least ``min_freq``, preserving rank order."""
    return word_counts[word_counts[COUNT_COLUMN] >= min_freq].reset_index(drop=True)


def build_terms_payload(
    word_counts: pd.DataFrame,
    source: str,
    min_freq: int,
    max_words: Optional[int] = None,
) -> WordcloudTerms:
    """Describe the words drawn in the cloud, ranked by count."""
    drawn = word_counts if max_words is None else word_counts.head(max_words)
    terms = [
        WordcloudTerm(term=str(word), value=int(count), rank=rank)
        for rank, (word, count) in enumerate(
            zip(drawn[WORD_COLUMN], drawn[COUNT_COLUMN]), start=1
        )
    ]
    return WordcloudTerms(
        source=source,
        metric="count",
        terms=terms,
        min_count=min_freq,
        max_words=max_words,
    )


def render_wordcloud(
    word_counts: pd.DataFrame,
    min_freq: int = 2,
    max_words: Optional[int] = None,
    random_state: int = 1234,
    width: int = 800,
    height: int = 400,
    colormap: str = "Dark2",
    title: str = WORDCLOUD_TITLE,
) -> Any:
    """
    Render a word cloud from a ``word, n`` table.

    Args:
        word_counts: Ranked word counts
        min_freq: Minimum count for a word to be drawn
        max_words: Cap on the number of words drawn (None draws all)
        random_state: Seed for word placement and colours

    Returns:
        A matplotlib Figure, or None when no word reaches ``min_freq``
    """
    filtered = filter_min_frequency(word_counts, min_freq)
    if max_words is not None:
        filtered = filtered.head(max_words)
    if filtered.empty:
        log_warning(
            "WORDCLOUDS", f"No word occurs at least {min_freq} time(s); skipping word cloud"
        )
        notify_user(
            f"⚠️ Skipping word cloud '{title}': no word reaches min frequency {min_freq}.",
            level="warning",
            technical=True,
            section="wordclouds",
        )
        return None

    frequencies = dict(zip(filtered[WORD_COLUMN], filtered[COUNT_COLUMN].astype(int)))
    wc = _get_wordcloud_class()(
        width=width,
        height=height,
        background_color="white",
        colormap=colormap,
        max_words=len(frequencies),
        random_state=random_state,
    ).generate_from_frequencies(frequencies)

    plt = get_matplotlib_pyplot()
    fig = plt.figure(figsize=(10, 5))
    ax = fig.add_subplot(1, 1, 1)
    ax.imshow(wc, interpolation="bilinear")
    ax.axis("off")
    ax.set_title(title)
    fig.tight_layout()
    return fig


class WordcloudAnalysis(AnalysisModule):
    """Word cloud of every word reaching the minimum frequency."""

    module_name = "wordclouds"

    def analyze(
        self,
        tokens: pd.DataFrame,
        context: Any,
        file_names: Optional[Sequence[str]] = None,
    ) -> Dict[str, Any]:
        settings = context.config.analysis
        word_counts = count_words(tokens)
        filtered = filter_min_frequency(word_counts, settings.wordcloud_min_freq)
        payload = build_terms_payload(
            filtered,
            source=context.source,
            min_freq=settings.wordcloud_min_freq,
            max_words=settings.wordcloud_max_words,
        )
        render_options = {
            "min_freq": settings.wordcloud_min_freq,
            "max_words": settings.wordcloud_max_words,
            "random_state": context.random_seed,
            "width": settings.wordcloud_width,
            "height": settings.wordcloud_height,
            "colormap": settings.wordcloud_colormap,
        }
        return {
            "word_counts": word_counts,
            "terms": payload,
            "render_options": render_options,
        }

    def save_results(self, results: Dict[str, Any], output_service: Any) -> None:
        payload: WordcloudTerms = results["terms"]
        output_service.save_data(payload.to_dict(), "wordcloud_terms", format_type="json")
        if not output_service.save_charts:
            return

        fig = render_wordcloud(results["word_counts"], **results["render_options"])
        if fig is not None:
            output_service.save_chart(figure=fig, name="wordcloud")
