from __future__ import annotations

import re
from typing import Any, Iterable, Optional

from transcriptqda.core.utils.config import ALPHABETIC_TOKEN_PATTERN
from transcriptqda.core.utils.lazy_imports import get_spacy
from transcriptqda.core.utils.logger import log_debug

_ALPHABETIC_RE = re.compile(ALPHABETIC_TOKEN_PATTERN)
# Clitic split off by spaCy's suffix rules: 's, 're, 'll, ...
_CLITIC_RE = re.compile(r"^['’][a-z]+$")

_nlp_cache: dict[str, Any] = {}
_spacy_stopwords_cache: Optional[frozenset[str]] = None


def get_nlp_model(model_name: str | None = None) -> Any:
    """
    Return a cached spaCy pipeline used for tokenization.

    With no model name a blank English pipeline is used: it only carries
    the rule-based tokenizer, so no model download is needed. The tokenizer's
    special cases are cleared so contractions and slang ("won't", "gonna")
    are not broken into fragments.
    """
    key = model_name or "blank:en"
    if key not in _nlp_cache:
        spacy = get_spacy()
        if model_name:
            # Only the tokenizer is used; skip the heavier components
            _nlp_cache[key] = spacy.load(
                model_name, disable=["parser", "ner", "lemmatizer", "textcat"]
            )
        else:
            _nlp_cache[key] = spacy.blank("en")
        _nlp_cache[key].tokenizer.rules = {}
        log_debug("NLP", f"Loaded spaCy pipeline {key}")
    return _nlp_cache[key]


def get_spacy_stopwords() -> frozenset[str]:
    global _spacy_stopwords_cache
    if _spacy_stopwords_cache is None:
        from spacy.lang.en.stop_words import STOP_WORDS

        _spacy_stopwords_cache = frozenset(word.lower() for word in STOP_WORDS)
    return _spacy_stopwords_cache


def get_all_stopwords(extra_stopwords: Iterable[str] | None = None) -> frozenset[str]:
    """spaCy's English stop words plus any configured extras (lowercased)."""
    stopwords = get_spacy_stopwords()
    if extra_stopwords:
        stopwords = stopwords.union(word.strip().lower() for word in extra_stopwords)
    return stopwords


def tokenize(text: str, model_name: str | None = None) -> list[str]:
    """
    Lowercase text and split it on word boundaries.

    A word keeps its attached clitic ("bob's", "we're"), so it stays one
    token. Whitespace tokens are dropped; punctuation and numbers are kept
    here and removed later by ``clean_tokens``.
    """
    if not text:
        return []
    nlp = get_nlp_model(model_name)
    doc = nlp.make_doc(text.lower())

    words: list[str] = []
    for token in doc:
        if token.is_space:
            continue
        if words and _CLITIC_RE.match(token.text):
            previous = doc[token.i - 1]
            if not previous.is_space and not previous.whitespace_:
                words[-1] += token.text
                continue
        words.append(token.text)
    return words


def is_alphabetic(token: str) -> bool:
    return _ALPHABETIC_RE.fullmatch(token) is not None


def clean_tokens(
    tokens: Iterable[str],
    stopwords: Iterable[str] | frozenset[str],
    filler_words: Iterable[str],
) -> list[str]:
    """
    Drop stop words, filler words and non-alphabetic tokens.

    Args:
        tokens: Lowercase tokens from ``tokenize``
        stopwords: Words to exclude
        filler_words: Verbal tics to exclude

    Returns:
        Surviving tokens in their original order
    """
    stop_set = stopwords if isinstance(stopwords, (set, frozenset)) else set(stopwords)
    filler_set = {word.lower() for word in filler_words}
    return [
        token
        for token in tokens
        if token not in stop_set and token not in filler_set and is_alphabetic(token)
    ]
