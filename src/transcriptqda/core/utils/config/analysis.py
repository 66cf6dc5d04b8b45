"""Analysis configuration dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field

from .base import DEFAULT_FILLER_WORDS, DEFAULT_SENTIMENT_LEXICON


@dataclass
class TopicModelingConfig:
    """Configuration for LDA topic modeling."""

    # Model settings
    num_topics: int = 3
    random_state: int = 1234
    max_iter: int = 50
    learning_method: str = "batch"  # "batch" or "online"

    # Reporting
    top_terms: int = 5


@dataclass
class AnalysisConfig:
    """
    Configuration for the analysis stages.

    Controls how transcripts are cleaned, how many words are reported, how
    the word cloud is rendered, which polarity lexicon drives the sentiment
    scores and how the topic model is fitted.
    """

    # Cleaning settings
    # Filler words and extra stop words removed after tokenization
    filler_words: list[str] = field(default_factory=lambda: list(DEFAULT_FILLER_WORDS))
    extra_stopwords: list[str] = field(default_factory=list)
    # spaCy pipeline used for tokenization; None means a blank English tokenizer
    spacy_model: str | None = None

    # Word frequency settings
    top_n_words: int = 10

    # Word cloud settings
    wordcloud_min_freq: int = 2
    wordcloud_max_words: int | None = None
    wordcloud_width: int = 800
    wordcloud_height: int = 400
    wordcloud_colormap: str = "Dark2"

    # Sentiment settings
    sentiment_lexicon: str = DEFAULT_SENTIMENT_LEXICON
    sentiment_lexicon_file: str | None = None

    topic_modeling: TopicModelingConfig = field(default_factory=TopicModelingConfig)
