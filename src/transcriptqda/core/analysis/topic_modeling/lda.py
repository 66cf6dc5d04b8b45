"""LDA topic modeling over the per-transcript document-term matrix."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
import pandas as pd
from scipy import sparse

from transcriptqda.core.analysis.common import (
    FILE_NAME_COLUMN,
    WORD_COLUMN,
    ModelFitError,
    require_tokens,
)
from transcriptqda.core.utils.logger import log_debug, log_error

TOPIC_TERM_COLUMNS = ["topic", "term", "beta"]


@dataclass(frozen=True)
class DocumentTermMatrix:
    """Counts of each term per document; rows and columns are sorted."""

    matrix: sparse.csr_matrix
    documents: list[str]
    terms: list[str]

    @property
    def shape(self) -> tuple[int, int]:
        return (len(self.documents), len(self.terms))

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            self.matrix.toarray(), index=self.documents, columns=self.terms
        )


def build_document_term_matrix(tokens: pd.DataFrame) -> DocumentTermMatrix:
    """
    Count (file, word) pairs into a sparse document-term matrix.

    Raises:
        EmptyInputError: If the token table is empty
    """
    require_tokens(tokens, "topic_modeling")

    pair_counts = tokens.groupby([FILE_NAME_COLUMN, WORD_COLUMN]).size()
    documents = sorted(tokens[FILE_NAME_COLUMN].unique())
    terms = sorted(tokens[WORD_COLUMN].unique())

    doc_index = {name: i for i, name in enumerate(documents)}
    term_index = {term: j for j, term in enumerate(terms)}
    rows = [doc_index[name] for name, _ in pair_counts.index]
    cols = [term_index[term] for _, term in pair_counts.index]

    matrix = sparse.csr_matrix(
        (pair_counts.to_numpy(dtype=np.int64), (rows, cols)),
        shape=(len(documents), len(terms)),
    )
    log_debug("TOPIC_MODELING", f"Document-term matrix {matrix.shape[0]}x{matrix.shape[1]}")
    return DocumentTermMatrix(matrix=matrix, documents=documents, terms=terms)


def fit_lda(
    dtm: DocumentTermMatrix,
    k: int = 3,
    random_state: int = 1234,
    max_iter: int = 50,
    learning_method: str = "batch",
) -> Any:
    """
    Fit a ``k``-topic LDA model to the document-term matrix.

    Raises:
        ModelFitError: If ``k < 1``, the vocabulary is empty, there are
            fewer documents than topics, or scikit-learn rejects the input
    """
    from sklearn.decomposition import LatentDirichletAllocation

    n_documents, n_terms = dtm.shape
    if k < 1:
        raise ModelFitError("Number of topics must be at least 1", n_documents, n_terms, k)
    if n_terms == 0:
        raise ModelFitError("Document-term matrix has no terms", n_documents, n_terms, k)
    if n_documents < k:
        raise ModelFitError(
            "Fewer documents than topics", n_documents, n_terms, k
        )

    lda = LatentDirichletAllocation(
        n_components=k,
        random_state=random_state,
        learning_method=learning_method,
        max_iter=max_iter,
    )
    try:
        lda.fit(dtm.matrix)
    except ValueError as e:
        log_error("TOPIC_MODELING", f"LDA fit failed: {e}", exception=e)
        raise ModelFitError(f"LDA fit failed: {e}", n_documents, n_terms, k) from e
    return lda


def topic_term_betas(model: Any, dtm: DocumentTermMatrix) -> pd.DataFrame:
    """
    Per-topic term probabilities as a long ``topic, term, beta`` table.

    Topic ids are 1-based; each topic's betas sum to 1.
    """
    components = np.asarray(model.components_, dtype=np.float64)
    betas = components / components.sum(axis=1, keepdims=True)
    n_topics, n_terms = betas.shape
    return pd.DataFrame(
        {
            "topic": np.repeat(np.arange(1, n_topics + 1), n_terms),
            "term": np.tile(np.asarray(dtm.terms, dtype=object), n_topics),
            "beta": betas.ravel(),
        }
    )


def top_terms_per_topic(betas: pd.DataFrame, n: int = 5) -> pd.DataFrame:
    """
    The ``n`` highest-beta terms of each topic.

    Sorted by topic ascending, then beta descending; equal betas are
    ordered by term.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    ordered = betas.sort_values(
        ["topic", "beta", "term"], ascending=[True, False, True]
    )
    return ordered.groupby("topic", sort=True).head(n).reset_index(drop=True)[
        TOPIC_TERM_COLUMNS
    ]
