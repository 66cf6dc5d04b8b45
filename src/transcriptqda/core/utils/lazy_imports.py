"""
Centralized lazy import helpers for heavy dependencies.

Plotting, word cloud and spaCy imports are slow, so the modules that need
them resolve them through these helpers on first use rather than at
import time. Failures carry a consistent install hint.
"""

from __future__ import annotations

import importlib
import os
import threading
from typing import Any, Optional

_cache: dict[str, Any] = {}
_locks: dict[str, threading.Lock] = {}


def _get_lock(module_name: str) -> threading.Lock:
    lock = _locks.get(module_name)
    if lock is None:
        lock = threading.Lock()
        _locks[module_name] = lock
    return lock


def lazy_import(module_name: str) -> Any:
    """Lazy import with thread-safe caching."""
    if module_name in _cache:
        return _cache[module_name]

    lock = _get_lock(module_name)
    with lock:
        if module_name in _cache:
            return _cache[module_name]
        module = importlib.import_module(module_name)
        _cache[module_name] = module
        return module


def optional_import(module_name: str, purpose: str, package: Optional[str] = None) -> Any:
    """
    Import a module, raising an ImportError with an install hint on failure.

    Args:
        module_name: Name of the module to import
        purpose: Description of what the module is used for
        package: Distribution name to suggest when it differs from the module

    Raises:
        ImportError: If the module cannot be imported
    """
    try:
        return lazy_import(module_name)
    except ImportError as exc:
        dist = package or module_name.split(".")[0]
        raise ImportError(
            f"{module_name} is required for {purpose}. Install with: pip install {dist}"
        ) from exc


def get_matplotlib_pyplot() -> Any:
    matplotlib = optional_import("matplotlib", "plotting")
    matplotlib.use("Agg")
    # Set TRANSCRIPTQDA_MPL_MAX_OPEN_WARNING=0 to silence the open-figures warning
    max_open_warning = os.getenv("TRANSCRIPTQDA_MPL_MAX_OPEN_WARNING")
    if max_open_warning is not None:
        try:
            matplotlib.rcParams["figure.max_open_warning"] = int(max_open_warning)
        except ValueError:
            pass
    return optional_import("matplotlib.pyplot", "plotting")


def get_seaborn() -> Any:
    return optional_import("seaborn", "plotting")


def get_wordcloud() -> Any:
    return optional_import("wordcloud", "word clouds")


def get_spacy() -> Any:
    return optional_import("spacy", "tokenization")
