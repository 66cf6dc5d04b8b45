"""
Tests for the transcriptqda command line interface.

The CLI is driven through typer's CliRunner; the polarity lexicon comes
from a small CSV file so no NLTK data is needed.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from transcriptqda.cli.exit_codes import (
    EXIT_CONFIG_ERROR,
    EXIT_ERROR,
    EXIT_SUCCESS,
    EXIT_USER_CANCEL,
    CliExit,
)
from transcriptqda.cli.main import app


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def lexicon_file(tmp_path: Path) -> Path:
    path = tmp_path / "lexicon.csv"
    path.write_text(
        "word,sentiment\nhappy,positive\ngood,positive\nbad,negative\nsad,negative\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    return tmp_path / "cli_outputs"


def _analyze_args(directory, lexicon_file, output_dir, *extra):
    return [
        "analyze",
        str(directory),
        "--lexicon-file",
        str(lexicon_file),
        "--output-dir",
        str(output_dir),
        *extra,
    ]


class TestAnalyzeCommand:
    """Tests for `transcriptqda analyze`."""

    def test_help(self, runner):
        result = runner.invoke(app, ["analyze", "--help"])

        assert result.exit_code == EXIT_SUCCESS
        assert "--topics" in result.output

    def test_success_prints_tables(self, runner, transcript_dir, lexicon_file, output_dir):
        result = runner.invoke(
            app, _analyze_args(transcript_dir, lexicon_file, output_dir, "--topics", "2")
        )

        assert result.exit_code == EXIT_SUCCESS, result.output
        assert "Top 10 words" in result.output
        assert "Sentiment by transcript" in result.output
        assert "Top terms per topic" in result.output
        assert "a.txt" in result.output

    def test_success_writes_artifacts(self, runner, transcript_dir, lexicon_file, output_dir):
        result = runner.invoke(
            app, _analyze_args(transcript_dir, lexicon_file, output_dir, "-k", "2")
        )

        assert result.exit_code == EXIT_SUCCESS, result.output
        assert (output_dir / "sentiment" / "data" / "sentiment_by_transcript.csv").exists()
        assert (output_dir / "word_frequency" / "data" / "word_counts.csv").exists()

    def test_no_save(self, runner, transcript_dir, lexicon_file, output_dir):
        result = runner.invoke(
            app,
            _analyze_args(transcript_dir, lexicon_file, output_dir, "-k", "2", "--no-save"),
        )

        assert result.exit_code == EXIT_SUCCESS, result.output
        assert not output_dir.exists()

    def test_modules_subset(self, runner, transcript_dir, lexicon_file, output_dir):
        result = runner.invoke(
            app,
            _analyze_args(
                transcript_dir, lexicon_file, output_dir, "--modules", "sentiment", "--no-save"
            ),
        )

        assert result.exit_code == EXIT_SUCCESS, result.output
        assert "Sentiment by transcript" in result.output
        assert "Top terms per topic" not in result.output

    def test_unknown_module(self, runner, transcript_dir, lexicon_file, output_dir):
        result = runner.invoke(
            app, _analyze_args(transcript_dir, lexicon_file, output_dir, "-m", "ngrams")
        )

        assert result.exit_code == EXIT_CONFIG_ERROR

    def test_missing_directory(self, runner, tmp_path, lexicon_file, output_dir):
        result = runner.invoke(
            app, _analyze_args(tmp_path / "missing", lexicon_file, output_dir)
        )

        assert result.exit_code == EXIT_ERROR
        assert "not found" in result.output

    def test_too_many_topics_for_documents(
        self, runner, transcript_dir, lexicon_file, output_dir
    ):
        result = runner.invoke(app, _analyze_args(transcript_dir, lexicon_file, output_dir))

        assert result.exit_code == EXIT_ERROR
        assert "Fewer documents than topics" in result.output

    def test_nothing_left_after_cleaning(self, runner, tmp_path, lexicon_file, output_dir):
        directory = tmp_path / "fillers"
        directory.mkdir()
        (directory / "a.txt").write_text("um uh yeah the\n", encoding="utf-8")

        result = runner.invoke(app, _analyze_args(directory, lexicon_file, output_dir))

        assert result.exit_code == EXIT_ERROR

    def test_topics_must_be_positive(self, runner, transcript_dir, lexicon_file, output_dir):
        result = runner.invoke(
            app, _analyze_args(transcript_dir, lexicon_file, output_dir, "--topics", "0")
        )

        assert result.exit_code == 2

    def test_invalid_config_file(self, runner, tmp_path, transcript_dir, lexicon_file, output_dir):
        config_file = tmp_path / "config.json"
        config_file.write_text("{broken", encoding="utf-8")

        result = runner.invoke(
            app,
            _analyze_args(
                transcript_dir, lexicon_file, output_dir, "--config", str(config_file)
            ),
        )

        assert result.exit_code == EXIT_CONFIG_ERROR
        assert "Configuration error" in result.output

    def test_config_file_values_used(self, runner, tmp_path, transcript_dir, lexicon_file, output_dir):
        config_file = tmp_path / "config.json"
        config_file.write_text(
            json.dumps({"analysis": {"top_n_words": 3, "topic_modeling": {"num_topics": 2}}}),
            encoding="utf-8",
        )

        result = runner.invoke(
            app,
            _analyze_args(
                transcript_dir, lexicon_file, output_dir, "--config", str(config_file)
            ),
        )

        assert result.exit_code == EXIT_SUCCESS, result.output
        assert "Top 3 words" in result.output

    def test_directory_from_config_file(
        self, runner, tmp_path, transcript_dir, lexicon_file, output_dir
    ):
        config_file = tmp_path / "config.json"
        config_file.write_text(
            json.dumps(
                {
                    "input": {"transcript_dir": str(transcript_dir)},
                    "analysis": {"topic_modeling": {"num_topics": 2}},
                }
            ),
            encoding="utf-8",
        )

        result = runner.invoke(
            app,
            [
                "analyze",
                "--config",
                str(config_file),
                "--lexicon-file",
                str(lexicon_file),
                "--no-save",
            ],
        )

        assert result.exit_code == EXIT_SUCCESS, result.output
        assert "a.txt" in result.output

    def test_no_directory_anywhere(self, runner, lexicon_file):
        result = runner.invoke(app, ["analyze", "--lexicon-file", str(lexicon_file)])

        assert result.exit_code == EXIT_CONFIG_ERROR
        assert "No transcript directory" in result.output

    def test_missing_lexicon_file(self, runner, tmp_path, transcript_dir, output_dir):
        result = runner.invoke(
            app, _analyze_args(transcript_dir, tmp_path / "nope.csv", output_dir)
        )

        assert result.exit_code == EXIT_CONFIG_ERROR

    def test_unavailable_bing_lexicon(self, runner, transcript_dir, output_dir):
        with patch(
            "transcriptqda.core.pipeline.pipeline_context.load_lexicon",
            side_effect=LookupError("opinion_lexicon not found"),
        ):
            result = runner.invoke(
                app, ["analyze", str(transcript_dir), "--output-dir", str(output_dir)]
            )

        assert result.exit_code == EXIT_ERROR
        assert "Polarity lexicon unavailable" in result.output

    def test_keyboard_interrupt(self, runner, transcript_dir, lexicon_file, output_dir):
        with patch("transcriptqda.cli.main.run_pipeline", side_effect=KeyboardInterrupt):
            result = runner.invoke(app, _analyze_args(transcript_dir, lexicon_file, output_dir))

        assert result.exit_code == EXIT_USER_CANCEL


class TestShowConfigCommand:
    """Tests for `transcriptqda show-config`."""

    def test_defaults(self, runner):
        result = runner.invoke(app, ["show-config"])

        assert result.exit_code == EXIT_SUCCESS
        assert '"num_topics": 3' in result.output

    def test_env_override_shown(self, runner, monkeypatch):
        monkeypatch.setenv("TRANSCRIPTQDA_NUM_TOPICS", "7")

        result = runner.invoke(app, ["show-config"])

        assert '"num_topics": 7' in result.output


class TestCliExit:
    """Tests for CliExit."""

    def test_error_code(self):
        assert CliExit.error("boom").exit_code == EXIT_ERROR

    def test_config_error_code(self):
        assert CliExit.config_error().exit_code == EXIT_CONFIG_ERROR

    def test_user_cancel_has_default_message(self):
        cancelled = CliExit.user_cancel()

        assert cancelled.exit_code == EXIT_USER_CANCEL
        assert cancelled.message == "Operation cancelled by user"

    def test_only_failure_constructors(self):
        # A successful run returns normally instead of raising.
        assert not hasattr(CliExit, "success")
