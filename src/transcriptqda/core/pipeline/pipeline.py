"""
Analysis pipeline for transcriptqda.

Runs the linear pipeline over one transcript directory:

    load -> tokenize -> word_frequency, wordclouds, sentiment, topic_modeling

Every downstream stage reads the same cleaned token table. Any failure
aborts the whole run: the exception is logged and propagates to the caller.
"""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

import pandas as pd

from transcriptqda.core.analysis.base import AnalysisModule
from transcriptqda.core.analysis.tokens import tokenize_documents
from transcriptqda.core.output.output_service import create_output_service
from transcriptqda.core.pipeline.pipeline_context import AnalysisContext, build_context
from transcriptqda.core.utils.config import QDAConfig, get_config
from transcriptqda.core.utils.logger import (
    log_error,
    log_performance,
    log_pipeline_complete,
    log_pipeline_start,
)
from transcriptqda.core.utils.notifications import notify_user
from transcriptqda.io.transcript_loader import Document, load_documents


def _word_frequency() -> AnalysisModule:
    from transcriptqda.core.analysis.word_frequency import WordFrequencyAnalysis

    return WordFrequencyAnalysis()


def _wordclouds() -> AnalysisModule:
    from transcriptqda.core.analysis.wordclouds import WordcloudAnalysis

    return WordcloudAnalysis()


def _sentiment() -> AnalysisModule:
    from transcriptqda.core.analysis.sentiment import SentimentAnalysis

    return SentimentAnalysis()


def _topic_modeling() -> AnalysisModule:
    from transcriptqda.core.analysis.topic_modeling import TopicModelingAnalysis

    return TopicModelingAnalysis()


# Execution order of the analysis stages
_MODULE_FACTORIES: Dict[str, Callable[[], AnalysisModule]] = {
    "word_frequency": _word_frequency,
    "wordclouds": _wordclouds,
    "sentiment": _sentiment,
    "topic_modeling": _topic_modeling,
}


def get_available_modules() -> List[str]:
    return list(_MODULE_FACTORIES)


@dataclass
class PipelineResult:
    """Everything a run produced: intermediate tables, per-module results and artifacts."""

    source: str
    documents: List[Document]
    tokens: pd.DataFrame
    module_results: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    artifacts: List[Dict[str, Any]] = field(default_factory=list)
    output_dir: Optional[str] = None
    duration_seconds: float = 0.0

    def _result(self, module: str, key: str) -> Any:
        return self.module_results.get(module, {}).get(key)

    @property
    def word_counts(self) -> Optional[pd.DataFrame]:
        return self._result("word_frequency", "word_counts")

    @property
    def top_words(self) -> Optional[pd.DataFrame]:
        return self._result("word_frequency", "top_words")

    @property
    def wordcloud_terms(self) -> Any:
        return self._result("wordclouds", "terms")

    @property
    def sentiment(self) -> Optional[pd.DataFrame]:
        return self._result("sentiment", "sentiment")

    @property
    def topic_term_betas(self) -> Optional[pd.DataFrame]:
        return self._result("topic_modeling", "topic_term_betas")

    @property
    def top_terms(self) -> Optional[pd.DataFrame]:
        return self._result("topic_modeling", "top_terms")


def _resolve_modules(modules: Optional[Sequence[str]]) -> List[str]:
    if not modules:
        return get_available_modules()
    unknown = [name for name in modules if name not in _MODULE_FACTORIES]
    if unknown:
        raise ValueError(
            f"Unknown module(s): {', '.join(unknown)}. "
            f"Available: {', '.join(get_available_modules())}"
        )
    # Keep pipeline order regardless of the order requested
    return [name for name in _MODULE_FACTORIES if name in modules]


def run_pipeline(
    directory: Union[str, Path],
    config: Optional[QDAConfig] = None,
    context: Optional[AnalysisContext] = None,
    save: bool = True,
    modules: Optional[Sequence[str]] = None,
) -> PipelineResult:
    """
    Run the full analysis over a directory of transcripts.

    Args:
        directory: Folder of transcript files
        config: Configuration used to build the context (ignored when one is given)
        context: Pre-built analysis context; built from ``config`` when omitted
        save: Write tables and charts under the configured output directory
        modules: Subset of analysis modules to run (default: all, in order)

    Returns:
        PipelineResult with every intermediate table

    Raises:
        OSError: If the transcript directory cannot be read
        EmptyInputError: If no tokens remain after cleaning
        ModelFitError: If the topic model cannot be fitted
    """
    start_time = time.time()
    source = str(directory)
    module_names = _resolve_modules(modules)

    if context is None:
        context = build_context(config or get_config())
    context = context.with_source(source)
    config = context.config

    log_pipeline_start(source, module_names)
    try:
        documents = load_documents(
            directory,
            suffix=config.input.file_suffix,
            encoding=config.input.encoding,
        )
        notify_user(f"📂 Loaded {len(documents)} transcript(s) from {source}", section="load")

        tokens = tokenize_documents(
            documents,
            context.stopwords,
            context.filler_words,
            model_name=config.analysis.spacy_model,
        )
        file_names = [document.file_name for document in documents]

        result = PipelineResult(source=source, documents=documents, tokens=tokens)
        if save:
            result.output_dir = config.output.base_output_dir

        for name in module_names:
            module = _MODULE_FACTORIES[name]()
            notify_user(f"🔍 Running {name.replace('_', ' ')}...", section=name)
            output_service = None
            if save:
                output_service = create_output_service(
                    config.output.base_output_dir,
                    name,
                    dpi=config.output.dpi,
                    save_charts=config.output.save_charts,
                )
            run_info = module.run(
                tokens,
                context,
                file_names=file_names,
                output_service=output_service,
                source=source,
            )
            result.module_results[name] = run_info["results"]
            result.artifacts.extend(run_info["artifacts"])
            notify_user(f"✅ Completed {name.replace('_', ' ')}", section=name)
    except Exception as e:
        log_error("PIPELINE", f"Analysis aborted: {e}", context=source)
        raise

    result.duration_seconds = time.time() - start_time
    log_performance("pipeline", result.duration_seconds, context=source)
    log_pipeline_complete(source, module_names)
    return result
