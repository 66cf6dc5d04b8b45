"""Command-line interface for transcriptqda."""
