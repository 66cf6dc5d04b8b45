"""Word cloud analysis package."""

from transcriptqda.core.analysis.wordclouds.analysis import (
    WordcloudAnalysis,
    build_terms_payload,
    filter_min_frequency,
    render_wordcloud,
)
from transcriptqda.core.analysis.wordclouds.models import WordcloudTerm, WordcloudTerms

__all__ = [
    "WordcloudAnalysis",
    "WordcloudTerm",
    "WordcloudTerms",
    "build_terms_payload",
    "filter_min_frequency",
    "render_wordcloud",
]
