"""
transcriptqda - Exploratory text analysis for interview transcripts

Reads a folder of plain-text transcripts and runs a linear analysis
pipeline over them: tokenization and cleaning, word frequencies, a word
cloud, Bing-lexicon sentiment scores per transcript and LDA topic modeling.

Package Structure:
- io/: Transcript discovery and loading
- core/analysis/: Tokenizer and analysis modules
- core/pipeline/: Analysis context and pipeline runner
- core/output/, core/viz/: Saved tables and charts
- core/utils/: Configuration, logging, lexicons and NLP helpers
- cli/: Typer command-line interface
"""

__version__ = "0.1.0"
