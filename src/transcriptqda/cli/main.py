"""
Typer-based CLI for transcriptqda.

Commands:

- ``analyze DIRECTORY``: run the full pipeline over a folder of ``.txt``
  transcripts and print the top words, sentiment scores and topic terms
- ``show-config``: print the effective configuration as JSON

Configuration comes from defaults, an optional JSON file (``--config``),
``TRANSCRIPTQDA_*`` environment variables and finally the command-line
options, in increasing order of priority.
"""

import json
from pathlib import Path
from typing import Optional

import pandas as pd
import typer
from rich.table import Table

from transcriptqda.core.analysis.common import AnalysisError
from transcriptqda.core.pipeline import PipelineResult, build_context, run_pipeline
from transcriptqda.core.pipeline.pipeline import get_available_modules
from transcriptqda.core.utils.config import (
    QDAConfig,
    get_config,
    load_config,
    parse_word_list,
)
from transcriptqda.core.utils.logger import log_error, setup_logging
from transcriptqda.core.utils.notifications import console

from .exit_codes import CliExit

app = typer.Typer(
    name="transcriptqda",
    help="📝 transcriptqda - Exploratory text analysis for interview transcripts",
    add_completion=False,
    rich_markup_mode="rich",
)


def _load_config(config_file: Optional[Path]) -> QDAConfig:
    if config_file is None:
        return get_config()
    try:
        return load_config(str(config_file))
    except ValueError as e:
        raise CliExit.config_error(f"❌ Configuration error: {e}")


def _apply_overrides(
    config: QDAConfig,
    topics: Optional[int],
    min_freq: Optional[int],
    top_n: Optional[int],
    seed: Optional[int],
    filler_words: Optional[str],
    lexicon_file: Optional[Path],
    output_dir: Optional[Path],
    log_level: Optional[str],
) -> None:
    analysis = config.analysis
    if topics is not None:
        analysis.topic_modeling.num_topics = topics
    if min_freq is not None:
        analysis.wordcloud_min_freq = min_freq
    if top_n is not None:
        analysis.top_n_words = top_n
    if seed is not None:
        analysis.topic_modeling.random_state = seed
    if filler_words is not None:
        analysis.filler_words = parse_word_list(filler_words)
    if lexicon_file is not None:
        analysis.sentiment_lexicon_file = str(lexicon_file)
    if output_dir is not None:
        config.output.base_output_dir = str(output_dir)
    if log_level is not None:
        config.logging.level = log_level


def _frame_table(frame: pd.DataFrame, title: str, float_format: str = "{:.4f}") -> Table:
    table = Table(title=title, show_lines=False)
    for column in frame.columns:
        numeric = pd.api.types.is_numeric_dtype(frame[column])
        table.add_column(str(column), justify="right" if numeric else "left")
    for row in frame.itertuples(index=False):
        cells = []
        for value in row:
            if isinstance(value, float):
                cells.append(float_format.format(value))
            else:
                cells.append(str(value))
        table.add_row(*cells)
    return table


def _print_results(result: PipelineResult, top_n: int) -> None:
    if result.top_words is not None:
        console.print(_frame_table(result.top_words, f"Top {top_n} words"))
    if result.sentiment is not None:
        console.print(_frame_table(result.sentiment, "Sentiment by transcript"))
    if result.top_terms is not None:
        console.print(_frame_table(result.top_terms, "Top terms per topic"))
    if result.artifacts:
        console.print(
            f"[green]✅ Saved {len(result.artifacts)} artifact(s) to {result.output_dir}[/green]"
        )


@app.command()
def analyze(
    directory: Optional[Path] = typer.Argument(
        None, help="Folder containing .txt transcripts (default: input.transcript_dir from --config)"
    ),
    topics: Optional[int] = typer.Option(
        None, "--topics", "-k", min=1, help="Number of LDA topics (default 3)"
    ),
    min_freq: Optional[int] = typer.Option(
        None, "--min-freq", min=1, help="Minimum word count for the word cloud (default 2)"
    ),
    top_n: Optional[int] = typer.Option(
        None, "--top-n", min=0, help="Number of top words to report (default 10)"
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", help="Random seed for LDA and word cloud layout (default 1234)"
    ),
    filler_words: Optional[str] = typer.Option(
        None, "--filler-words", help="Comma-separated filler words to remove (default uh,um,yeah)"
    ),
    lexicon_file: Optional[Path] = typer.Option(
        None, "--lexicon-file", help="CSV polarity lexicon with word,sentiment columns"
    ),
    modules: Optional[str] = typer.Option(
        None,
        "--modules",
        "-m",
        help=f"Comma-separated analysis modules ({', '.join(get_available_modules())})",
    ),
    output_dir: Optional[Path] = typer.Option(
        None, "--output-dir", "-o", help="Directory for saved tables and charts"
    ),
    no_save: bool = typer.Option(
        False, "--no-save", help="Print results without writing any files"
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to JSON configuration file"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)"
    ),
):
    """
    Analyze every transcript in DIRECTORY.
    """
    config = _load_config(config_file)
    _apply_overrides(
        config,
        topics=topics,
        min_freq=min_freq,
        top_n=top_n,
        seed=seed,
        filler_words=filler_words,
        lexicon_file=lexicon_file,
        output_dir=output_dir,
        log_level=log_level,
    )
    setup_logging(config.logging.level, config.logging.file)

    if directory is None:
        if not config.input.transcript_dir:
            raise CliExit.config_error(
                "❌ No transcript directory given and input.transcript_dir is not configured"
            )
        directory = Path(config.input.transcript_dir)

    module_list = None
    if modules:
        module_list = [name.strip() for name in modules.split(",") if name.strip()]
        unknown = [name for name in module_list if name not in get_available_modules()]
        if unknown:
            raise CliExit.config_error(f"❌ Unknown module(s): {', '.join(unknown)}")

    try:
        context = build_context(config)
    except (FileNotFoundError, ValueError) as e:
        raise CliExit.config_error(f"❌ Configuration error: {e}")
    except LookupError as e:
        log_error("CLI", f"Polarity lexicon unavailable: {e}")
        raise CliExit.error(f"❌ Polarity lexicon unavailable: {e}")
    except KeyboardInterrupt:
        raise CliExit.user_cancel()

    try:
        result = run_pipeline(
            directory, context=context, save=not no_save, modules=module_list
        )
    except KeyboardInterrupt:
        raise CliExit.user_cancel()
    except (OSError, AnalysisError) as e:
        raise CliExit.error(f"❌ Error: {e}")

    _print_results(result, config.analysis.top_n_words)


@app.command("show-config")
def show_config(
    config_file: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to JSON configuration file"
    ),
):
    """
    Print the effective configuration as JSON.
    """
    config = _load_config(config_file)
    console.print_json(json.dumps(config.to_dict()))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
