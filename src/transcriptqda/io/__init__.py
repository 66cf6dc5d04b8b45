"""
Transcript I/O for transcriptqda.

Usage:
    from transcriptqda.io import load_documents, Document
"""

from .transcript_loader import (
    Document,
    discover_transcripts,
    load_documents,
    read_transcript,
)

__all__ = [
    "Document",
    "discover_transcripts",
    "load_documents",
    "read_transcript",
]
