from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class LexiconEntry:
    """A single ``word weight`` pair read from a lexicon file."""

    word: str
    weight: float


@dataclass(slots=True, frozen=True)
class ScoreResult:
    """Sentiment score computed for one piece of text."""

    text: str
    score: float


@dataclass(slots=True)
class BatchReport:
    """Outcome of scoring and writing a batch of texts."""

    submitted: int = 0
    written: int = 0
    failed: int = 0

    @property
    def ok(self) -> bool:
        return self.failed == 0 and self.written == self.submitted
