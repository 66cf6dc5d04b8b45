"""Topic modeling package."""

from transcriptqda.core.analysis.topic_modeling.analysis import TopicModelingAnalysis
from transcriptqda.core.analysis.topic_modeling.lda import (
    TOPIC_TERM_COLUMNS,
    DocumentTermMatrix,
    build_document_term_matrix,
    fit_lda,
    top_terms_per_topic,
    topic_term_betas,
)
from transcriptqda.core.analysis.topic_modeling.visualization import (
    create_top_terms_chart,
)

__all__ = [
    "TOPIC_TERM_COLUMNS",
    "DocumentTermMatrix",
    "TopicModelingAnalysis",
    "build_document_term_matrix",
    "create_top_terms_chart",
    "fit_lda",
    "top_terms_per_topic",
    "topic_term_betas",
]
