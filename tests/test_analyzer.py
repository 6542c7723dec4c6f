"""Tests for lemma, part-of-speech and tense resolution."""

from lyricgrade import PartOfSpeech, TenseMood


def _word(line, clean):
    for token in line.tokens:
        if token.clean == clean:
            return token
    raise AssertionError(f"{clean!r} not in {line.text!r}")


def test_empty_line(scorer):
    """An empty line analyzes to no tokens without raising."""
    line = scorer.analyze_line("", 0)
    assert line.tokens == ()
    assert line.idiom_spans == frozenset()


def test_none_is_empty(scorer):
    assert scorer.analyze_line(None, 3).tokens == ()


def test_line_keeps_index_and_text(scorer):
    line = scorer.analyze_line("Camino por la calle", 7)
    assert line.index == 7
    assert line.text == "Camino por la calle"
    assert line.language == "es"


def test_verb_first_in_verb_dense_line(scorer):
    """Without a preceding article, the verb reading wins."""
    token = _word(scorer.analyze_line("Camino por la calle"), "camino")
    assert token.pos == PartOfSpeech.VERB
    assert token.lemma == "caminar"
    assert token.tense_mood == TenseMood.PRESENT


def test_article_blocks_verb_reading(scorer):
    line = scorer.analyze_line("El camino es largo")
    camino = _word(line, "camino")
    assert camino.pos == PartOfSpeech.NOUN
    assert camino.lemma == "camino"
    assert camino.tense_mood is None
    assert _word(line, "largo").pos == PartOfSpeech.ADJECTIVE


def test_noun_after_feminine_article(scorer):
    calle = _word(scorer.analyze_line("Camino por la calle"), "calle")
    assert calle.pos == PartOfSpeech.NOUN


def test_irregular_copula(scorer):
    es = _word(scorer.analyze_line("El camino es largo"), "es")
    assert es.pos == PartOfSpeech.VERB
    assert es.lemma == "ser"
    assert es.tense_mood == TenseMood.PRESENT


def test_present_indicative(scorer):
    hablas = _word(scorer.analyze_line("Espero que hablas español"), "hablas")
    assert hablas.lemma == "hablar"
    assert hablas.tense_mood == TenseMood.PRESENT


def test_present_subjunctive(scorer):
    hables = _word(scorer.analyze_line("Espero que hables español"), "hables")
    assert hables.lemma == "hablar"
    assert hables.tense_mood == TenseMood.SUBJUNCTIVE


def test_regular_tenses(scorer):
    line = scorer.analyze_line("hablé hablaba hablaré hablaría")
    tenses = [t.tense_mood for t in line.words]
    assert tenses == [
        TenseMood.PRETERITE, TenseMood.IMPERFECT,
        TenseMood.FUTURE, TenseMood.CONDITIONAL,
    ]
    assert {t.lemma for t in line.words} == {"hablar"}


def test_spelling_change_reversed(scorer):
    """busqué is recovered as buscar despite the c -> qu change."""
    token = _word(scorer.analyze_line("te busqué"), "busqué")
    assert token.lemma == "buscar"
    assert token.tense_mood == TenseMood.PRETERITE


def test_stem_changing_verb(scorer):
    token = _word(scorer.analyze_line("quiero bailar"), "quiero")
    assert token.lemma == "querer"
    assert token.tense_mood == TenseMood.PRESENT


def test_irregular_preterite(scorer):
    token = _word(scorer.analyze_line("ayer fui al mar"), "fui")
    assert token.pos == PartOfSpeech.VERB
    assert token.tense_mood == TenseMood.PRETERITE


def test_infinitive_has_no_tense(scorer):
    token = _word(scorer.analyze_line("quiero bailar"), "bailar")
    assert token.pos == PartOfSpeech.VERB
    assert token.lemma == "bailar"
    assert token.tense_mood is None


def test_present_perfect(scorer):
    line = scorer.analyze_line("he cantado")
    assert _word(line, "cantado").tense_mood == TenseMood.PRESENT_PERFECT
    assert _word(line, "he").tense_mood is None


def test_pluperfect(scorer):
    token = _word(scorer.analyze_line("había cantado"), "cantado")
    assert token.tense_mood == TenseMood.PLUPERFECT


def test_compound_keeps_auxiliary_mood(scorer):
    """Subjunctive and conditional auxiliaries keep their mood."""
    line = scorer.analyze_line("si hubiese estudiado habría aprobado")
    assert _word(line, "estudiado").tense_mood == TenseMood.SUBJUNCTIVE
    assert _word(line, "aprobado").tense_mood == TenseMood.CONDITIONAL


def test_compound_across_adverb(scorer):
    token = _word(scorer.analyze_line("ya he llegado"), "llegado")
    assert token.tense_mood == TenseMood.PRESENT_PERFECT


def test_closed_class_blocks_regular_stripping(scorer):
    """para is a preposition, not a form of parar."""
    para = _word(scorer.analyze_line("una canción para ti"), "para")
    assert para.pos == PartOfSpeech.PREPOSITION


def test_stem_fallback(scorer):
    token = _word(scorer.analyze_line("los niños cantan"), "niños")
    assert token.lemma == "niño"
    assert token.pos == PartOfSpeech.NOUN


def test_lemma_map(scorer):
    token = _word(scorer.analyze_line("a veces"), "veces")
    assert token.lemma == "vez"


def test_unknown_word(scorer):
    """Unknown words keep their clean form as lemma with POS OTHER."""
    token = _word(scorer.analyze_line("xyzzyplugh"), "xyzzyplugh")
    assert token.lemma == "xyzzyplugh"
    assert token.pos == PartOfSpeech.OTHER
    assert token.tense_mood is None


def test_digits_are_numbers(scorer):
    token = _word(scorer.analyze_line("1999"), "1999")
    assert token.pos == PartOfSpeech.NUMBER
    assert not token.is_word


def test_expansion_resolves(scorer):
    token = _word(scorer.analyze_line("pa' ti"), "para")
    assert token.pos == PartOfSpeech.PREPOSITION
    assert token.surface == "pa'"


def test_deterministic(scorer):
    """The same surface form always resolves the same way."""
    a = scorer.analyze_line("Vino el vino y se fue")
    b = scorer.analyze_line("Vino el vino y se fue")
    assert a == b


def test_french_present_perfect_with_negation(scorer):
    line = scorer.analyze_line("je n'ai pas mangé", language="fr")
    mange = _word(line, "mangé")
    assert mange.lemma == "manger"
    assert mange.tense_mood == TenseMood.PRESENT_PERFECT
    assert _word(line, "ai").tense_mood is None


def test_french_participle_shared_with_present(scorer):
    """fait after avoir is a participle, not the present of faire."""
    line = scorer.analyze_line("il a fait beau", language="fr")
    fait = _word(line, "fait")
    assert fait.lemma == "faire"
    assert fait.tense_mood == TenseMood.PRESENT_PERFECT


def test_french_etre_auxiliary(scorer):
    line = scorer.analyze_line("il est parti", language="fr")
    parti = _word(line, "parti")
    assert parti.lemma == "partir"
    assert parti.tense_mood == TenseMood.PRESENT_PERFECT
    assert _word(line, "est").lemma == "être"


def test_french_elided_noun(scorer):
    token = _word(scorer.analyze_line("l'amour", language="fr"), "amour")
    assert token.pos == PartOfSpeech.NOUN


def test_french_spelling_change(scorer):
    token = _word(scorer.analyze_line("nous mangeons", language="fr"), "mangeons")
    assert token.lemma == "manger"
    assert token.tense_mood == TenseMood.PRESENT


def test_lone_surrogates_do_not_raise(scorer):
    """Undecodable bytes smuggled in by surrogateescape are treated as noise."""
    line = scorer.analyze_line("hola \udcff mundo", 0, "es")
    assert [t.clean for t in line.words] == ["hola", "mundo"]
    assert line.text == "hola \udcff mundo"
    song = scorer.analyze_song("te quiero\ud800\nmi amor", "es")
    assert 1 <= song.level <= 10


def test_contracted_article_folds_into_preposition(scorer):
    """pa'l reads as para; its article is not a separate word."""
    line = scorer.analyze_line("pa'l cielo")
    assert [t.clean for t in line.words] == ["para", "cielo"]
    assert line.words[0].pos == PartOfSpeech.PREPOSITION
