"""
Tests for sentiment analysis.
"""

import pandas as pd
import pytest

from transcriptqda.core.analysis.common import EmptyInputError, empty_token_table
from transcriptqda.core.analysis.sentiment import (
    NON_POSITIVE_NET_COLOR,
    POSITIVE_NET_COLOR,
    SENTIMENT_COLUMNS,
    SentimentAnalysis,
    create_sentiment_chart,
    score_sentiment,
)
from transcriptqda.core.utils.lexicons import lexicon_from_words


def _tokens(rows):
    return pd.DataFrame(rows, columns=["file_name", "word"])


@pytest.fixture
def sample_tokens():
    return _tokens(
        [
            ("a.txt", "happy"),
            ("a.txt", "happy"),
            ("a.txt", "good"),
            ("b.txt", "bad"),
            ("b.txt", "sad"),
            ("b.txt", "bad"),
        ]
    )


class TestScoreSentiment:
    """Tests for score_sentiment."""

    def test_counts_per_transcript(self, sample_tokens, bing_lexicon):
        sentiment = score_sentiment(sample_tokens, bing_lexicon)

        assert list(sentiment.columns) == SENTIMENT_COLUMNS
        assert sentiment.to_dict(orient="records") == [
            {"file_name": "a.txt", "negative": 0, "positive": 3, "net": 3},
            {"file_name": "b.txt", "negative": 3, "positive": 0, "net": -3},
        ]

    def test_net_is_positive_minus_negative(self, sample_tokens, bing_lexicon):
        mixed = pd.concat(
            [sample_tokens, _tokens([("a.txt", "sad"), ("b.txt", "good")])],
            ignore_index=True,
        )

        sentiment = score_sentiment(mixed, bing_lexicon)

        assert (sentiment["net"] == sentiment["positive"] - sentiment["negative"]).all()
        assert list(sentiment["net"]) == [2, -2]

    def test_unmatched_transcript_gets_zeros(self, bing_lexicon):
        tokens = _tokens([("a.txt", "happy"), ("c.txt", "garden")])

        sentiment = score_sentiment(tokens, bing_lexicon)

        row = sentiment[sentiment["file_name"] == "c.txt"].iloc[0]
        assert (row["negative"], row["positive"], row["net"]) == (0, 0, 0)

    def test_file_names_without_tokens_are_reported(self, sample_tokens, bing_lexicon):
        sentiment = score_sentiment(
            sample_tokens, bing_lexicon, file_names=["a.txt", "b.txt", "empty.txt"]
        )

        assert list(sentiment["file_name"]) == ["a.txt", "b.txt", "empty.txt"]
        assert sentiment.iloc[2][["negative", "positive", "net"]].tolist() == [0, 0, 0]

    def test_no_lexicon_matches(self, bing_lexicon):
        tokens = _tokens([("b.txt", "garden"), ("a.txt", "soil")])

        sentiment = score_sentiment(tokens, bing_lexicon)

        assert list(sentiment["file_name"]) == ["a.txt", "b.txt"]
        assert sentiment[["negative", "positive", "net"]].to_numpy().sum() == 0

    def test_duplicate_lexicon_entries_count_per_entry(self):
        lexicon = lexicon_from_words(positive=["fine"], negative=["fine"])
        tokens = _tokens([("a.txt", "fine")])

        sentiment = score_sentiment(tokens, lexicon)

        assert sentiment.iloc[0][["negative", "positive", "net"]].tolist() == [1, 1, 0]

    def test_empty_tokens_raise(self, bing_lexicon):
        with pytest.raises(EmptyInputError):
            score_sentiment(empty_token_table(), bing_lexicon)


class TestSentimentChart:
    """Tests for the sentiment chart spec."""

    def test_chart_spec(self, sample_tokens, bing_lexicon):
        spec = create_sentiment_chart(score_sentiment(sample_tokens, bing_lexicon))

        assert spec.name == "sentiment_by_transcript"
        assert spec.title == "Sentiment Analysis by Transcript"
        assert spec.orientation == "horizontal"
        assert spec.categories == ["a.txt", "b.txt"]
        assert spec.values == [3, -3]
        assert spec.colors == [POSITIVE_NET_COLOR, NON_POSITIVE_NET_COLOR]

    def test_zero_net_is_not_positive(self):
        sentiment = pd.DataFrame(
            {"file_name": ["a.txt"], "negative": [1], "positive": [1], "net": [0]}
        )

        assert create_sentiment_chart(sentiment).colors == [NON_POSITIVE_NET_COLOR]


class TestSentimentAnalysis:
    """Tests for SentimentAnalysis."""

    def test_analyze_uses_context_lexicon(self, sample_tokens, analysis_context):
        results = SentimentAnalysis().analyze(
            sample_tokens, analysis_context, file_names=["a.txt", "b.txt"]
        )

        assert list(results["sentiment"]["net"]) == [3, -3]

    def test_run_saves_csv_and_chart(self, sample_tokens, analysis_context, temp_output_dir):
        from transcriptqda.core.output import OutputService

        service = OutputService(temp_output_dir, "sentiment", dpi=50)

        run_info = SentimentAnalysis().run(
            sample_tokens, analysis_context, output_service=service
        )

        module_dir = temp_output_dir / "sentiment"
        assert (module_dir / "data" / "sentiment_by_transcript.csv").exists()
        assert (module_dir / "charts" / "sentiment_by_transcript.png").exists()
        assert len(run_info["artifacts"]) == 2
