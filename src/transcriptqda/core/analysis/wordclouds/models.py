"""Wordcloud data models."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Any, Optional


@dataclass
class WordcloudTerm:
    term: str
    value: int
    rank: int


@dataclass
class WordcloudTerms:
    source: str
    metric: str
    terms: list[WordcloudTerm]
    min_count: Optional[int] = None
    max_words: Optional[int] = None
    created_at: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        if not self.created_at:
            payload["created_at"] = datetime.now(timezone.utc).isoformat()
        payload["terms"] = [{**asdict(term), "value": int(term.value)} for term in self.terms]
        return payload
