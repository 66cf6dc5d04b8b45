"""
Transcript loading utilities for transcriptqda.

Transcripts are plain-text files in a single directory. Each file becomes one
``Document`` tagged with its base name; discovery is non-recursive and the
result is always sorted by file name so downstream tables are deterministic.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List

from transcriptqda.core.utils.config import DEFAULT_TRANSCRIPT_SUFFIX
from transcriptqda.core.utils.logger import log_file_operation, log_info, log_warning


@dataclass(frozen=True)
class Document:
    """One transcript file: its base name and full text."""

    file_name: str
    raw_text: str


def _check_directory(directory: Path) -> None:
    if not directory.exists():
        raise FileNotFoundError(f"Transcript directory not found: {directory}")
    if not directory.is_dir():
        raise NotADirectoryError(f"Not a directory: {directory}")
    if not os.access(directory, os.R_OK | os.X_OK):
        raise PermissionError(f"Transcript directory is not readable: {directory}")


def discover_transcripts(
    directory: str | Path, suffix: str = DEFAULT_TRANSCRIPT_SUFFIX
) -> List[Path]:
    """
    List transcript files directly inside ``directory``.

    Args:
        directory: Folder to scan (subfolders are ignored)
        suffix: File-name suffix to match, case-sensitively (".TXT" is not ".txt")

    Returns:
        Matching file paths sorted by file name

    Raises:
        FileNotFoundError: If the directory does not exist
        NotADirectoryError: If the path is not a directory
        PermissionError: If the directory cannot be listed
    """
    directory = Path(directory)
    _check_directory(directory)

    paths = [
        path
        for path in directory.iterdir()
        if path.is_file() and path.name.endswith(suffix)
    ]
    return sorted(paths, key=lambda path: path.name)


def read_transcript(path: str | Path, encoding: str = "utf-8") -> str:
    """Read a transcript file and join its lines with single spaces."""
    with open(path, encoding=encoding) as f:
        return " ".join(line.rstrip("\r\n") for line in f)


def load_documents(
    directory: str | Path,
    suffix: str = DEFAULT_TRANSCRIPT_SUFFIX,
    encoding: str = "utf-8",
) -> List[Document]:
    """
    Load every transcript in ``directory`` as a ``Document``.

    Files that cannot be read or decoded are skipped with a warning; the
    directory itself must be readable.
    """
    documents: List[Document] = []
    for path in discover_transcripts(directory, suffix):
        try:
            text = read_transcript(path, encoding=encoding)
        except (OSError, UnicodeDecodeError) as e:
            log_file_operation("read", str(path), success=False, error=str(e))
            log_warning("LOAD", f"Skipping unreadable transcript {path.name}", str(e))
            continue
        log_file_operation("read", str(path), success=True)
        documents.append(Document(file_name=path.name, raw_text=text))

    log_info("LOAD", f"Loaded {len(documents)} transcript(s) from {directory}")
    return documents
