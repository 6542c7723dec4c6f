"""Tests for idiom detection."""

import logging

from lyricgrade import IdiomMatch, IdiomSpan
from lyricgrade._idioms import IdiomDetector


def _detector(*phrases):
    return IdiomDetector([{"phrase": p, "meaning": p.upper()} for p in phrases], str.split)


def test_idiom_with_conjugated_verb(scorer):
    """Idioms match on lemmas, so conjugated verbs are found."""
    line = scorer.analyze_line("Te echo de menos")
    assert line.idiom_spans == frozenset({IdiomSpan(2, 6, "echar de menos")})


def test_idiom_at_line_start(scorer):
    line = scorer.analyze_line("A lo mejor mañana")
    assert IdiomSpan(0, 4, "a lo mejor") in line.idiom_spans


def test_position_independent(scorer):
    """The same idiom is flagged wherever it sits in the line."""
    ids = []
    for text in ("poco a poco", "vamos poco a poco", "poco a poco se va", "y poco a poco"):
        spans = scorer.analyze_line(text).idiom_spans
        ids.append(sorted(s.idiom_id for s in spans))
    assert ids == [["poco a poco"]] * 4


def test_no_idiom(scorer):
    assert scorer.analyze_line("Camino por la calle").idiom_spans == frozenset()


def test_get_idioms_for_lyrics(scorer):
    lyrics = ["Tal vez mañana", "Camino por la calle", "de vez en cuando, por favor"]
    matches = scorer.get_idioms_for_lyrics(lyrics)
    assert [(m.line_index, m.idiom_id) for m in matches] == [
        (0, "tal vez"),
        (2, "de vez en cuando"),
        (2, "por favor"),
    ]
    assert matches[0] == IdiomMatch(0, 0, 2, "tal vez", "tal vez", "maybe, perhaps")


def test_get_idioms_accepts_analyses(scorer):
    lines = scorer.analyze_lines(["sin embargo te quiero"])
    matches = scorer.get_idioms_for_lyrics(lines)
    assert [m.phrase for m in matches] == ["sin embargo"]
    assert matches[0].meaning == "however, nevertheless"


def test_french_idiom(scorer):
    matches = scorer.get_idioms_for_lyrics(["j'ai eu un coup de foudre"], language="fr")
    assert [m.idiom_id for m in matches] == ["coup de foudre"]


def test_french_idiom_with_elision(scorer):
    """c'est la vie is keyed on the verb lemma, so tense varies freely."""
    present = scorer.get_idioms_for_lyrics(["c'est la vie"], language="fr")
    assert len(present) == 1
    assert present[0].phrase == "c'est la vie"


def test_bundled_idioms_loaded(es, fr):
    assert len(es.idioms) >= 30
    assert len(fr.idioms) >= 25
    assert es.idioms.get("tal vez").meaning == "maybe, perhaps"


def test_leftmost_longest():
    detector = _detector("a b", "a b c")
    matches = detector.match("a b c d".split())
    assert [(s, e, i.idiom_id) for s, e, i in matches] == [(0, 2, "a b c")]


def test_overlaps_not_double_counted():
    detector = _detector("a b c", "b c d", "c d")
    matches = detector.match("a b c d".split())
    assert [(s, e) for s, e, _ in matches] == [(0, 2)]


def test_adjacent_matches():
    detector = _detector("a b", "c d")
    matches = detector.match("a b c d".split())
    assert [(s, e) for s, e, _ in matches] == [(0, 1), (2, 3)]


def test_token_aligned_only():
    """A hit inside a longer token does not count."""
    detector = _detector("b c")
    assert detector.match(["ab", "c"]) == []
    assert detector.match(["b", "cd"]) == []


def test_empty_detector():
    detector = _detector()
    assert len(detector) == 0
    assert detector.match(["a", "b"]) == []


def test_single_token_skipped(caplog):
    with caplog.at_level(logging.WARNING, logger="lyricgrade._idioms"):
        detector = _detector("hola", "hola amigo")
    assert len(detector) == 1
    assert "single-token idiom" in caplog.text


def test_duplicates_collapse():
    detector = _detector("a  b", "a b")
    assert len(detector) == 1
    assert detector.get("a b").phrase == "a  b"
