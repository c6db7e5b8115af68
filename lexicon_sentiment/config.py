from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class AnalyzerConfig:
    """Runtime configuration for the sentiment analyzer."""

    lexicon_path: str = "lexicon.txt"
    output_path: str = "sentiment_scores.txt"
    max_workers: Optional[int] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "AnalyzerConfig":
        import os

        return cls(
            lexicon_path=os.getenv("LEXICON_SENTIMENT_LEXICON", "lexicon.txt"),
            output_path=os.getenv("LEXICON_SENTIMENT_OUTPUT", "sentiment_scores.txt"),
            max_workers=_parse_workers(os.getenv("LEXICON_SENTIMENT_MAX_WORKERS")),
            log_level=(os.getenv("LEXICON_SENTIMENT_LOG_LEVEL") or "INFO").upper(),
        )


def _parse_workers(value: Optional[str]) -> Optional[int]:
    if value is None or value.strip() == "":
        return None
    try:
        parsed = int(value)
    except ValueError:
        raise ValueError("LEXICON_SENTIMENT_MAX_WORKERS must be an integer if set") from None
    if parsed <= 0:
        raise ValueError("LEXICON_SENTIMENT_MAX_WORKERS must be positive")
    return parsed
