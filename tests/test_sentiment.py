from lexicon_sentiment.sentiment import normalize, score_result, score_sentiment


def test_normalize_strips_punctuation_and_case():
    assert normalize("Good, BAD!! good") == ["good", "bad", "good"]


def test_normalize_drops_digits_and_empty_tokens():
    assert normalize("  Text 1 for   analysis. ") == ["text", "for", "analysis"]


def test_normalize_removes_non_space_whitespace():
    assert normalize("good\tbad\nday") == ["goodbadday"]


def test_normalize_empty():
    assert normalize("") == []
    assert normalize(None) == []
    assert normalize("123 !!! ...") == []


def test_score_sums_weights():
    assert score_sentiment("Good, BAD!! good", {"good": 1.0, "bad": -1.0}) == 1.0


def test_unknown_words_are_neutral():
    assert score_sentiment("xyzzy plugh", {}) == 0.0
    assert score_sentiment("xyzzy good", {"good": 0.5}) == 0.5


def test_uppercase_lexicon_keys_never_match():
    assert score_sentiment("Good", {"Good": 1.0}) == 0.0


def test_score_is_deterministic(lexicon):
    text = "A great, great day; nothing awful."
    first = score_sentiment(text, lexicon)
    assert first == score_sentiment(text, lexicon)
    assert first == 2.5 + 2.5 - 2.5


def test_score_result_keeps_original_text(lexicon):
    result = score_result("Good!", lexicon)
    assert result.text == "Good!"
    assert result.score == 1.0
