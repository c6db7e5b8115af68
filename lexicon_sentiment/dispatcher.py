from __future__ import annotations

import concurrent.futures
import logging
from typing import Mapping, Optional, Sequence

from .models import BatchReport
from .sentiment import score_result
from .writer import RecordWriter

logger = logging.getLogger(__name__)

DEFAULT_TEXTS = (
    "Text 1 for sentiment analysis.",
    "Text 2 for sentiment analysis.",
    "Text 3 for sentiment analysis.",
)


def _score_and_write(text: str, lexicon: Mapping[str, float], writer: RecordWriter) -> bool:
    return writer.append(score_result(text, lexicon))


def run_batch(
    texts: Sequence[str],
    lexicon: Mapping[str, float],
    writer: RecordWriter,
    max_workers: Optional[int] = None,
) -> BatchReport:
    """Score every text on a thread pool and append each record as it completes.

    Blocks until all tasks finish. Failures are logged and counted, never raised.
    """
    report = BatchReport(submitted=len(texts))
    if not texts:
        return report
    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {executor.submit(_score_and_write, text, lexicon, writer): text for text in texts}
        for future in concurrent.futures.as_completed(futures):
            text = futures[future]
            try:
                written = future.result()
            except Exception:
                logger.exception("Scoring task failed for %r", text)
                written = False
            if written:
                report.written += 1
            else:
                report.failed += 1
    logger.info(
        "Batch finished: %d submitted, %d written, %d failed",
        report.submitted,
        report.written,
        report.failed,
    )
    return report
