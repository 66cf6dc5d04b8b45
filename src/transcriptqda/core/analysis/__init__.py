from .common import AnalysisError, EmptyInputError, ModelFitError

__all__ = ["AnalysisError", "EmptyInputError", "ModelFitError"]
