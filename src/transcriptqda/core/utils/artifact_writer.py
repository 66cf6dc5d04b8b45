"""
Atomic file writer utilities for transcriptqda artifacts.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any

import pandas as pd


def _ensure_parent_dir(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def _atomic_replace(src: Path, dest: Path) -> None:
    os.replace(src, dest)


def _temp_path(target: Path) -> Path:
    fd, name = tempfile.mkstemp(dir=str(target.parent), suffix=target.suffix)
    os.close(fd)
    return Path(name)


def write_bytes(path: str | Path, data: bytes) -> Path:
    target = Path(path)
    _ensure_parent_dir(target)
    with tempfile.NamedTemporaryFile(delete=False, dir=str(target.parent)) as tmp:
        tmp.write(data)
        tmp.flush()
        os.fsync(tmp.fileno())
        tmp_path = Path(tmp.name)
    _atomic_replace(tmp_path, target)
    return target


def write_text(path: str | Path, text: str, encoding: str = "utf-8") -> Path:
    return write_bytes(path, text.encode(encoding))


def write_json(
    path: str | Path, data: Any, indent: int = 2, ensure_ascii: bool = False
) -> Path:
    payload = json.dumps(data, indent=indent, ensure_ascii=ensure_ascii, default=str)
    return write_text(path, payload)


def write_dataframe_csv(path: str | Path, frame: pd.DataFrame) -> Path:
    """Write a DataFrame as CSV (no index) through a temp file."""
    target = Path(path)
    _ensure_parent_dir(target)
    tmp_path = _temp_path(target)
    try:
        frame.to_csv(tmp_path, index=False)
        _atomic_replace(tmp_path, target)
    finally:
        if tmp_path.exists():
            tmp_path.unlink()
    return target


def write_figure(path: str | Path, fig: Any, dpi: int = 300) -> Path:
    """Save a matplotlib figure as PNG through a temp file."""
    target = Path(path)
    _ensure_parent_dir(target)
    tmp_path = _temp_path(target)
    try:
        fig.savefig(tmp_path, dpi=dpi, bbox_inches="tight", format="png")
        _atomic_replace(tmp_path, target)
    finally:
        if tmp_path.exists():
            tmp_path.unlink()
    return target
