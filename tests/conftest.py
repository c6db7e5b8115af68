"""Shared fixtures: lexicon files on disk and analyzers wired to tmp paths."""
import pytest

from lexicon_sentiment import AnalyzerConfig, LexiconStore, SentimentAnalyzer

SAMPLE_LEXICON = """\
good 1.0
bad -1.0
great 2.5
awful -2.5
sentiment 0.25
analysis 0.5
"""


@pytest.fixture
def lexicon_file(tmp_path):
    path = tmp_path / "lexicon.txt"
    path.write_text(SAMPLE_LEXICON, encoding="utf-8")
    return path


@pytest.fixture
def lexicon(lexicon_file):
    return LexiconStore.load(lexicon_file)


@pytest.fixture
def output_file(tmp_path):
    return tmp_path / "scores.txt"


@pytest.fixture
def analyzer(lexicon, output_file):
    config = AnalyzerConfig(lexicon_path="unused", output_path=str(output_file), max_workers=4)
    return SentimentAnalyzer(config=config, lexicon=lexicon)


def _parse_records(content):
    assert content.endswith("\n\n") or content == ""
    records = []
    for chunk in content.split("\n\n")[:-1]:
        lines = chunk.split("\n")
        assert len(lines) == 2, chunk
        assert lines[0].startswith("Text: "), chunk
        assert lines[1].startswith("Sentiment score: "), chunk
        records.append((lines[0][len("Text: "):], float(lines[1][len("Sentiment score: "):])))
    return records


@pytest.fixture
def parse_records():
    """Split writer output into (text, score) pairs, failing on malformed records."""
    return _parse_records
