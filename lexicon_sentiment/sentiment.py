from __future__ import annotations

import re
from typing import List, Mapping, Optional

from .models import ScoreResult

_NON_LETTER_RE = re.compile(r"[^a-zA-Z ]")


def normalize(text: Optional[str]) -> List[str]:
    if not text:
        return []
    cleaned = _NON_LETTER_RE.sub("", text).lower()
    return [token for token in cleaned.split() if token]


def score_sentiment(text: Optional[str], lexicon: Mapping[str, float]) -> float:
    score = 0.0
    for token in normalize(text):
        weight = lexicon.get(token)
        if weight is not None:
            score += weight
    return score


def score_result(text: str, lexicon: Mapping[str, float]) -> ScoreResult:
    return ScoreResult(text=text, score=score_sentiment(text, lexicon))
