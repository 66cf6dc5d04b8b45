"""
Shared pytest fixtures and configuration for transcriptqda tests.

Provides transcript directories on disk, a small Bing-style polarity
lexicon, a test configuration and an analysis context, plus autouse
fixtures that keep every test offline and isolated from the global config.
"""

import os
import sys
from pathlib import Path
from typing import Dict
from unittest.mock import MagicMock, patch

import pandas as pd
import pytest

_REPO_ROOT = Path(__file__).resolve().parent.parent

# Put `src/` first so `import transcriptqda` uses workspace code.
sys.path.insert(0, str(_REPO_ROOT / "src"))

from transcriptqda.core.pipeline.pipeline_context import AnalysisContext, build_context  # noqa: E402
from transcriptqda.core.utils.config import QDAConfig, set_config  # noqa: E402
from transcriptqda.core.utils.lexicons import lexicon_from_words  # noqa: E402


# ============================================================================
# Transcript Fixtures
# ============================================================================

@pytest.fixture
def sample_transcripts() -> Dict[str, str]:
    """Two short transcripts with opposite polarity."""
    return {
        "a.txt": "happy happy good",
        "b.txt": "bad sad bad",
    }


@pytest.fixture
def transcript_dir(tmp_path: Path, sample_transcripts: Dict[str, str]) -> Path:
    """A directory holding the sample transcripts."""
    directory = tmp_path / "transcripts"
    directory.mkdir()
    for name, text in sample_transcripts.items():
        (directory / name).write_text(text + "\n", encoding="utf-8")
    return directory


@pytest.fixture
def interview_dir(tmp_path: Path) -> Path:
    """Four longer interview transcripts, enough documents for a 3-topic model."""
    directory = tmp_path / "interviews"
    directory.mkdir()
    texts = {
        "interview_01.txt": [
            "Um, the garden was beautiful this spring.",
            "Tomatoes, peppers and beans grew well in the garden soil.",
        ],
        "interview_02.txt": [
            "Yeah, the budget meeting was terrible.",
            "Costs increased and the budget report showed losses.",
        ],
        "interview_03.txt": [
            "Uh, our team enjoyed the garden party.",
            "The soil was rich and the flowers were lovely.",
        ],
        "interview_04.txt": [
            "Budget cuts hurt the team badly.",
            "Losses and costs worried everyone at the meeting.",
        ],
    }
    for name, lines in texts.items():
        (directory / name).write_text("\n".join(lines) + "\n", encoding="utf-8")
    return directory


# ============================================================================
# Reference Data Fixtures
# ============================================================================

@pytest.fixture
def bing_lexicon() -> pd.DataFrame:
    """A small Bing-style polarity lexicon."""
    return lexicon_from_words(
        positive=["happy", "good", "beautiful", "enjoyed", "lovely", "rich"],
        negative=["bad", "sad", "terrible", "losses", "hurt", "badly", "worried"],
    )


@pytest.fixture
def test_config(tmp_path: Path) -> QDAConfig:
    """Default configuration writing under a temporary output directory."""
    config = QDAConfig()
    config.output.base_output_dir = str(tmp_path / "qda_outputs")
    config.output.dpi = 50
    return config


@pytest.fixture
def analysis_context(test_config: QDAConfig, bing_lexicon: pd.DataFrame) -> AnalysisContext:
    """Analysis context built from the test config and the small lexicon."""
    return build_context(test_config, lexicon=bing_lexicon)


@pytest.fixture
def temp_output_dir(tmp_path: Path) -> Path:
    """Create a temporary output directory for testing."""
    output_dir = tmp_path / "outputs"
    output_dir.mkdir()
    return output_dir


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def suppress_logging():
    """Suppress logging output during tests to keep output clean."""
    with patch("transcriptqda.core.utils.logger.get_logger") as mock_logger:
        mock_log = MagicMock()
        mock_logger.return_value = mock_log
        yield mock_log


@pytest.fixture(autouse=True)
def clean_environment():
    """Clean transcriptqda environment variables and the global config before each test."""
    original_env = os.environ.copy()

    for var in [key for key in os.environ if key.startswith("TRANSCRIPTQDA_")]:
        del os.environ[var]

    # Default to offline-safe behavior in tests (no implicit resource downloads).
    os.environ["TRANSCRIPTQDA_DISABLE_DOWNLOADS"] = "1"
    set_config(None)

    yield

    set_config(None)
    os.environ.clear()
    os.environ.update(original_env)


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual functions/classes")
    config.addinivalue_line("markers", "integration: Integration tests for workflows and pipelines")
    config.addinivalue_line("markers", "slow: Tests that take longer to run")
