"""Build the cleaned token table from loaded documents."""

from __future__ import annotations

from typing import Iterable, Sequence

import pandas as pd

from transcriptqda.core.analysis.common import (
    FILE_NAME_COLUMN,
    TOKEN_COLUMNS,
    WORD_COLUMN,
    empty_token_table,
)
from transcriptqda.core.utils.logger import log_info
from transcriptqda.core.utils.nlp_utils import clean_tokens, tokenize
from transcriptqda.io.transcript_loader import Document


def tokenize_documents(
    documents: Sequence[Document],
    stopwords: Iterable[str],
    filler_words: Iterable[str],
    model_name: str | None = None,
) -> pd.DataFrame:
    """
    Tokenize and clean every document into a ``file_name, word`` table.

    One row per surviving token occurrence, in document order. Documents
    are processed independently, so the result does not depend on the
    order they are passed in beyond row order.
    """
    stop_set = frozenset(stopwords)
    filler_list = list(filler_words)

    rows: list[tuple[str, str]] = []
    for document in documents:
        words = clean_tokens(
            tokenize(document.raw_text, model_name=model_name), stop_set, filler_list
        )
        rows.extend((document.file_name, word) for word in words)

    if not rows:
        tokens = empty_token_table()
    else:
        tokens = pd.DataFrame(rows, columns=TOKEN_COLUMNS)

    log_info(
        "TOKENS",
        f"{len(tokens)} token(s) across {tokens[FILE_NAME_COLUMN].nunique()} document(s), "
        f"{tokens[WORD_COLUMN].nunique()} distinct word(s)",
    )
    return tokens
