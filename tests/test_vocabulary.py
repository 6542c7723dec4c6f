"""Tests for key-vocabulary extraction."""

import pytest

from lyricgrade import PartOfSpeech
from lyricgrade._stop_words import BASIC_VERBS, STOP_WORDS
from lyricgrade._vocabulary import USEFUL_THRESHOLD, frequency_usefulness, is_useful, usefulness


def _vocab(scorer, *texts, language="es", **kwargs):
    return scorer.extract_vocabulary(scorer.analyze_lines(texts, language), **kwargs)


def test_frequency_usefulness_peak():
    assert frequency_usefulness(3.5) == pytest.approx(1.0)
    assert frequency_usefulness(3.5) > frequency_usefulness(5.0)
    assert frequency_usefulness(3.5) > frequency_usefulness(2.0)
    assert frequency_usefulness(8.0) == 0.0


def test_usefulness_bounds():
    for zipf in (0.0, 1.5, 3.5, 6.0, 8.0):
        for pos in PartOfSpeech:
            assert 0.0 <= usefulness("corazón", pos, zipf) <= 1.0


def test_nouns_beat_articles():
    assert usefulness("corazón", PartOfSpeech.NOUN, 4.2) > usefulness("corazón", PartOfSpeech.ARTICLE, 4.2)


def test_stop_words_excluded(scorer):
    lemmas = {item.lemma for item in _vocab(scorer, "el corazón de la ciudad y del mar")}
    assert "corazón" in lemmas
    assert "ciudad" in lemmas
    assert not lemmas & STOP_WORDS["es"]


def test_basic_verbs_excluded(scorer):
    lemmas = {item.lemma for item in _vocab(scorer, "soy feliz, tengo amor")}
    assert "ser" not in lemmas
    assert "tener" not in lemmas
    assert "ser" in BASIC_VERBS["es"]


def test_verbs_reported_by_lemma(scorer):
    items = _vocab(scorer, "bailaba y cantaba", "bailamos juntos")
    by_lemma = {item.lemma: item for item in items}
    assert by_lemma["bailar"].count == 2
    assert by_lemma["bailar"].pos == PartOfSpeech.VERB


def test_sorted_by_score(scorer):
    items = _vocab(scorer, "la soledad del corazón en la madrugada oscura")
    scores = [item.score for item in items]
    assert scores == sorted(scores, reverse=True)


def test_limit(scorer):
    items = _vocab(scorer, "soledad corazón madrugada guitarra destino", limit=2)
    assert len(items) == 2


def test_negative_limit(scorer):
    with pytest.raises(ValueError, match="limit"):
        _vocab(scorer, "amor", limit=-1)


def test_min_score(scorer):
    assert _vocab(scorer, "soledad corazón", min_score=1.0) == []


def test_french(scorer):
    lemmas = {item.lemma for item in _vocab(scorer, "la tristesse de mon cœur", language="fr")}
    assert {"tristesse", "cœur"} <= lemmas


def test_is_useful():
    assert is_useful(USEFUL_THRESHOLD)
    assert not is_useful(USEFUL_THRESHOLD - 0.01)
    assert is_useful(usefulness("corazón", PartOfSpeech.NOUN, 4.2))
    assert not is_useful(usefulness("corazón", PartOfSpeech.ARTICLE, 7.0))
