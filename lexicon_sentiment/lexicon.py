from __future__ import annotations

import logging
import os
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Union

from .models import LexiconEntry

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def parse_line(line: str) -> Optional[LexiconEntry]:
    """Parse ``word weight``; return ``None`` unless the line has exactly two fields.

    Fields are whatever ``str.split`` yields, so leading and trailing
    whitespace never produces an empty field and an indented line still
    parses. Raises ``ValueError`` when the weight is not a number.
    """
    parts = line.split()
    if len(parts) != 2:
        return None
    word, weight = parts
    return LexiconEntry(word=word, weight=float(weight))


class LexiconStore(Mapping[str, float]):
    """Read-only word to weight mapping, safe to share between threads."""

    def __init__(
        self,
        weights: Optional[Mapping[str, float]] = None,
        source: Optional[str] = None,
        skipped: int = 0,
    ) -> None:
        self._weights = MappingProxyType(dict(weights or {}))
        self.source = source
        self.skipped = skipped

    @classmethod
    def from_entries(cls, entries: Iterable[LexiconEntry]) -> "LexiconStore":
        return cls({entry.word: entry.weight for entry in entries})

    @classmethod
    def load(cls, path: PathLike) -> "LexiconStore":
        """Build a store from a lexicon file.

        Lines without exactly two fields are ignored. Lines whose weight does
        not parse are logged and skipped. Bytes that are not valid UTF-8 are
        replaced with U+FFFD rather than failing the load. If the file cannot
        be read, the
        failure is logged and whatever was read before it is kept; nothing is
        raised to the caller.
        """
        source = os.fspath(path)
        weights: dict[str, float] = {}
        skipped = 0
        try:
            with open(source, "r", encoding="utf-8", errors="replace") as handle:
                for lineno, line in enumerate(handle, start=1):
                    try:
                        entry = parse_line(line)
                    except ValueError:
                        skipped += 1
                        logger.warning(
                            "Skipping lexicon line %d in %s: bad weight in %r",
                            lineno,
                            source,
                            line.rstrip("\n"),
                        )
                        continue
                    if entry is None:
                        continue
                    weights[entry.word] = entry.weight
        except OSError:
            logger.exception("Failed to read lexicon %s", source)
        logger.info("Loaded %d lexicon entries from %s (%d skipped)", len(weights), source, skipped)
        return cls(weights, source=source, skipped=skipped)

    def __getitem__(self, word: str) -> float:
        return self._weights[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._weights)

    def __len__(self) -> int:
        return len(self._weights)

    def __repr__(self) -> str:
        return f"LexiconStore(entries={len(self)}, source={self.source!r})"


def load_lexicon(path: PathLike) -> LexiconStore:
    return LexiconStore.load(path)
