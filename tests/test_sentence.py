"""Tests for clause splitting and final-mark counting."""

from lyricgrade._sentence import count_final_marks, split_clauses


def test_empty():
    assert split_clauses("") == []
    assert split_clauses("   ") == []


def test_single_clause():
    assert split_clauses("te quiero") == ["te quiero"]


def test_final_and_clause_marks():
    assert split_clauses("Hola, ¿cómo estás? Bien.") == ["Hola", "¿cómo estás", "Bien"]


def test_semicolon_and_colon():
    assert split_clauses("mira: el mar; la luna") == ["mira", "el mar", "la luna"]


def test_abbreviation():
    assert split_clauses("Sr. López llegó.") == ["Sr. López llegó"]


def test_decimal():
    assert split_clauses("1.5 millones.") == ["1.5 millones"]


def test_count_final_marks():
    assert count_final_marks("¿Qué?! No. Sí…") == 3
    assert count_final_marks("sin puntos") == 0
    assert count_final_marks("") == 0
