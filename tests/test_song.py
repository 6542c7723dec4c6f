"""Tests for the whole-song pipeline."""

import pytest

from lyricgrade import InvalidInputError, SongAnalysis, UnsupportedLanguageError
from lyricgrade._song import split_lines

LYRICS = """Camino por la calle
sin saber a dónde voy

Tal vez mañana te encuentre
y poco a poco te olvidaré
"""


def test_split_lines_skips_blanks():
    assert split_lines("a\n\n  \nb") == [(0, "a"), (3, "b")]
    assert split_lines(["x", "", "y"]) == [(0, "x"), (2, "y")]


def test_analyze_song(scorer):
    song = scorer.analyze_song(LYRICS)
    assert isinstance(song, SongAnalysis)
    assert [line.index for line in song.lines] == [0, 1, 3, 4]
    assert song.level == scorer.assign_level(song.difficulty_score)
    assert song.metrics.difficulty_score == song.difficulty_score
    assert 1 <= song.level <= 10


def test_song_idioms(scorer):
    song = scorer.analyze_song(LYRICS)
    assert [(m.line_index, m.idiom_id) for m in song.idioms] == [
        (3, "tal vez"),
        (4, "poco a poco"),
    ]
    assert song.metrics.idiom_count == 2


def test_song_from_list(scorer):
    assert scorer.analyze_song(LYRICS.splitlines()) == scorer.analyze_song(LYRICS)


def test_french_song(scorer):
    song = scorer.analyze_song("je n'ai pas mangé\ntout à coup il pleut", language="fr")
    assert len(song.lines) == 2
    assert [m.idiom_id for m in song.idioms] == ["tout à coup"]


def test_blank_song(scorer):
    with pytest.raises(InvalidInputError):
        scorer.analyze_song("\n  \n")


def test_unknown_language(scorer):
    with pytest.raises(UnsupportedLanguageError):
        scorer.analyze_song("hallo welt", language="de")


def test_lines_in_song_order(scorer):
    song = scorer.analyze_song(LYRICS)
    assert [line.text for line in song.lines][0] == "Camino por la calle"
