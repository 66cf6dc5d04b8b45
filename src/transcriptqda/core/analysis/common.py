"""
Common utilities for transcriptqda analysis modules.

Shared column names, input validation and the errors raised by the
analysis stages.
"""

from typing import Optional

import pandas as pd

# Token table columns
FILE_NAME_COLUMN = "file_name"
WORD_COLUMN = "word"
TOKEN_COLUMNS = [FILE_NAME_COLUMN, WORD_COLUMN]


class AnalysisError(Exception):
    """Base class for errors raised by the analysis stages."""


class EmptyInputError(AnalysisError):
    """Raised when a stage receives no tokens to work on."""

    def __init__(self, stage: str, message: Optional[str] = None):
        self.stage = stage
        super().__init__(
            message or f"{stage}: no tokens remain after cleaning; nothing to analyze"
        )


class ModelFitError(AnalysisError):
    """Raised when the topic model cannot be fitted to the document-term matrix."""

    def __init__(self, message: str, n_documents: int, n_terms: int, k: int):
        self.n_documents = n_documents
        self.n_terms = n_terms
        self.k = k
        super().__init__(
            f"{message} (documents={n_documents}, terms={n_terms}, k={k})"
        )


def empty_token_table() -> pd.DataFrame:
    return pd.DataFrame({FILE_NAME_COLUMN: pd.Series(dtype=str), WORD_COLUMN: pd.Series(dtype=str)})


def validate_tokens(tokens: pd.DataFrame) -> bool:
    """True if ``tokens`` is a DataFrame with the token table columns."""
    return isinstance(tokens, pd.DataFrame) and all(
        column in tokens.columns for column in TOKEN_COLUMNS
    )


def require_tokens(tokens: pd.DataFrame, stage: str) -> None:
    """
    Check the token table before a stage runs.

    Raises:
        ValueError: If ``tokens`` is not a token table
        EmptyInputError: If it has no rows
    """
    if not validate_tokens(tokens):
        raise ValueError(
            f"{stage}: expected a DataFrame with columns {TOKEN_COLUMNS}"
        )
    if tokens.empty:
        raise EmptyInputError(stage)
