from .pipeline_context import AnalysisContext, build_context
from .pipeline import PipelineResult, get_available_modules, run_pipeline

__all__ = [
    "AnalysisContext",
    "PipelineResult",
    "build_context",
    "get_available_modules",
    "run_pipeline",
]
