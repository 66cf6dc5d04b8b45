"""
Base classes and interfaces for transcriptqda analysis modules.

Every stage downstream of the tokenizer implements ``AnalysisModule``:
``analyze`` is the pure computation over the token table, ``save_results``
writes artifacts through an ``OutputService``, and ``run`` wraps both with
lifecycle logging and timing.
"""

import time
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence

import pandas as pd

from transcriptqda.core.analysis.common import validate_tokens
from transcriptqda.core.utils.logger import (
    log_analysis_complete,
    log_analysis_error,
    log_analysis_start,
)

if TYPE_CHECKING:
    from transcriptqda.core.output.output_service import OutputService
    from transcriptqda.core.pipeline.pipeline_context import AnalysisContext


class AnalysisModule(ABC):
    """
    Abstract base class for all transcriptqda analysis modules.

    Subclasses set ``module_name`` and implement ``analyze``.
    """

    module_name: str = "analysis"

    @abstractmethod
    def analyze(
        self,
        tokens: pd.DataFrame,
        context: "AnalysisContext",
        file_names: Optional[Sequence[str]] = None,
    ) -> Dict[str, Any]:
        """
        Perform the core analysis on the token table.

        Args:
            tokens: Cleaned ``file_name, word`` token table
            context: Reference data and settings for the run
            file_names: Every loaded document, including ones left without tokens

        Returns:
            Dictionary containing analysis results
        """

    def save_results(
        self, results: Dict[str, Any], output_service: "OutputService"
    ) -> None:
        """
        Save analysis results to files.

        Default implementation saves every DataFrame in ``results`` as CSV.
        """
        for key, value in results.items():
            if isinstance(value, pd.DataFrame):
                output_service.save_data(value, key, format_type="csv")

    def run(
        self,
        tokens: pd.DataFrame,
        context: "AnalysisContext",
        file_names: Optional[Sequence[str]] = None,
        output_service: Optional["OutputService"] = None,
        source: str = "",
    ) -> Dict[str, Any]:
        """
        Analyze, optionally save, and log the run.

        Errors are logged and re-raised; a failing stage aborts the pipeline.

        Returns:
            Dictionary with ``module``, ``results``, ``artifacts`` and ``duration_seconds``
        """
        start_time = time.time()
        log_analysis_start(self.module_name, source)
        try:
            if not validate_tokens(tokens):
                raise ValueError(f"Invalid token table for {self.module_name}")

            results = self.analyze(tokens, context, file_names=file_names)

            artifacts: List[Dict[str, Any]] = []
            if output_service is not None:
                self.save_results(results, output_service)
                artifacts = output_service.get_artifacts()
        except Exception as e:
            log_analysis_error(self.module_name, source, e)
            raise

        duration = time.time() - start_time
        log_analysis_complete(self.module_name, source, duration)
        return {
            "module": self.module_name,
            "results": results,
            "artifacts": artifacts,
            "duration_seconds": duration,
        }
