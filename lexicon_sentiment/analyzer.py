from __future__ import annotations

from dataclasses import asdict
from typing import Iterable, List, Optional, Sequence

from .config import AnalyzerConfig
from .dispatcher import DEFAULT_TEXTS, run_batch
from .lexicon import LexiconStore, PathLike
from .models import BatchReport, ScoreResult
from .sentiment import score_result
from .writer import RecordWriter


class SentimentAnalyzer:
    """Holds one loaded lexicon and scores texts against it."""

    def __init__(self, config: Optional[AnalyzerConfig] = None, lexicon: Optional[LexiconStore] = None) -> None:
        self.config = config or AnalyzerConfig.from_env()
        if lexicon is not None:
            self.lexicon = lexicon
        else:
            self.lexicon = LexiconStore.load(self.config.lexicon_path)
        self.writer = RecordWriter(self.config.output_path)

    def score(self, text: str) -> ScoreResult:
        return score_result(text, self.lexicon)

    def score_many(self, texts: Iterable[str]) -> List[ScoreResult]:
        return [self.score(text) for text in texts]

    def run(self, texts: Optional[Sequence[str]] = None) -> BatchReport:
        if texts is None:
            texts = DEFAULT_TEXTS
        return run_batch(texts, self.lexicon, self.writer, max_workers=self.config.max_workers)

    def to_dict(self, result: ScoreResult) -> dict:
        return asdict(result)


def analyze(
    lexicon_path: PathLike,
    output_path: PathLike,
    texts: Optional[Sequence[str]] = None,
    max_workers: Optional[int] = None,
) -> BatchReport:
    """Load ``lexicon_path``, then score ``texts`` concurrently into ``output_path``.

    Returns once every record has been written or its failure logged.
    """
    lexicon = LexiconStore.load(lexicon_path)
    if texts is None:
        texts = DEFAULT_TEXTS
    return run_batch(texts, lexicon, RecordWriter(output_path), max_workers=max_workers)
