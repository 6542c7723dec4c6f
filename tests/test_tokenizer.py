"""Tests for the rule-driven tokenizer."""

from lyricgrade._tokenizer import Tokenizer, TokenizerRules, normalize_text


def _clean_words(tokenizer, text):
    return [clean for _, clean, is_word in tokenizer.tokenize(text) if is_word]


def test_empty_line(es):
    assert es.tokenizer.tokenize("") == []


def test_surfaces_rebuild_line(es):
    """Joining token surfaces reproduces the input exactly."""
    text = "  ¿Dónde  estás,   mi amor?\t"
    tokens = es.tokenizer.tokenize(text)
    assert "".join(surface for surface, _, _ in tokens) == text


def test_whitespace_tokens(es):
    tokens = es.tokenizer.tokenize("hola  mundo")
    assert tokens[1] == ("  ", "", False)


def test_strips_punctuation_and_lowercases(es):
    assert _clean_words(es.tokenizer, "¡HOLA! ¿Qué tal?") == ["hola", "qué", "tal"]


def test_single_letters_are_not_words(es):
    """Single-character tokens keep a clean form but are not words."""
    tokens = es.tokenizer.tokenize("y a")
    assert [(clean, is_word) for _, clean, is_word in tokens if clean] == [
        ("y", False), ("a", False),
    ]


def test_numbers_are_not_words(es):
    assert _clean_words(es.tokenizer, "1999 canciones") == ["canciones"]


def test_spanish_expansions(es):
    assert es.tokenizer.clean("pa'") == "para"
    assert es.tokenizer.clean("Pa'l") == "para"
    assert es.tokenizer.clean("na'") == "nada"


def test_french_elisions(fr):
    assert _clean_words(fr.tokenizer, "l'amour j'ai qu'il") == ["amour", "ai", "il"]


def test_french_longest_elision_first(fr):
    assert fr.tokenizer.clean("jusqu'ici") == "ici"


def test_typographic_apostrophe(fr):
    """Curly apostrophes behave like the ASCII one."""
    assert fr.tokenizer.clean("l’amour") == "amour"


def test_bare_elision_kept(fr):
    """A lone elided article is not stripped to nothing."""
    assert fr.tokenizer.clean("l'") == "l"


def test_normalize_text_composes():
    assert normalize_text("coraz\u00f3n") == "coraz\u00f3n"
    assert normalize_text("corazo\u0301n") == "coraz\u00f3n"


def test_rules_from_dict_orders_elisions():
    rules = TokenizerRules.from_dict("xx", {"elisions": ["d'", "jusqu'", "qu'"]})
    assert rules.elisions == ("jusqu'", "qu'", "d'")


def test_language_letters_make_words():
    """Words of non-ASCII letters only count when the language lists them."""
    plain = Tokenizer(TokenizerRules("xx"))
    greek = Tokenizer(TokenizerRules("el", letters=frozenset("αβγ")))
    assert not plain.is_word("αβγ")
    assert greek.is_word("αβγ")
