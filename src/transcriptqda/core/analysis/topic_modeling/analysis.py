"""Topic modeling analysis module."""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

import pandas as pd

from transcriptqda.core.analysis.base import AnalysisModule
from transcriptqda.core.analysis.topic_modeling.lda import (
    build_document_term_matrix,
    fit_lda,
    top_terms_per_topic,
    topic_term_betas,
)
from transcriptqda.core.analysis.topic_modeling.visualization import (
    create_top_terms_chart,
)
from transcriptqda.core.utils.logger import log_info


class TopicModelingAnalysis(AnalysisModule):
    """LDA topics over transcripts, reported as per-topic term probabilities."""

    module_name = "topic_modeling"

    def analyze(
        self,
        tokens: pd.DataFrame,
        context: Any,
        file_names: Optional[Sequence[str]] = None,
    ) -> Dict[str, Any]:
        topic_config = context.config.analysis.topic_modeling
        dtm = build_document_term_matrix(tokens)
        model = fit_lda(
            dtm,
            k=topic_config.num_topics,
            random_state=context.random_seed,
            max_iter=topic_config.max_iter,
            learning_method=topic_config.learning_method,
        )
        betas = topic_term_betas(model, dtm)
        top_terms = top_terms_per_topic(betas, topic_config.top_terms)
        log_info(
            "TOPIC_MODELING",
            f"Fitted {topic_config.num_topics} topic(s) on "
            f"{dtm.shape[0]} document(s) x {dtm.shape[1]} term(s)",
        )
        return {
            "document_term_matrix": dtm,
            "model": model,
            "topic_term_betas": betas,
            "top_terms": top_terms,
        }

    def save_results(self, results: Dict[str, Any], output_service: Any) -> None:
        output_service.save_data(results["topic_term_betas"], "topic_term_betas", format_type="csv")
        output_service.save_data(results["top_terms"], "top_terms_per_topic", format_type="csv")
        if output_service.save_charts and not results["top_terms"].empty:
            output_service.save_chart(create_top_terms_chart(results["top_terms"]))
