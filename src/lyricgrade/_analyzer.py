"""Lexical analysis: lemma, part of speech and tense/mood for each token."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ._conjugation import PARTICIPLE, VerbReading
from ._lexicon import CLOSED_CLASSES
from ._types import IdiomSpan, LineAnalysis, PartOfSpeech, TenseMood, Token

if TYPE_CHECKING:
    from ._profile import LanguageProfile

logger = logging.getLogger(__name__)

_P = PartOfSpeech

# Fixed resolution order for tokens with several candidate classes.
POS_PRIORITY: tuple[PartOfSpeech, ...] = (
    _P.VERB, _P.NOUN, _P.ADJECTIVE, _P.ADVERB, _P.ARTICLE, _P.DETERMINER,
    _P.CONJUNCTION, _P.PREPOSITION, _P.PRONOUN, _P.NUMBER, _P.OTHER,
)
_RANK = {pos: i for i, pos in enumerate(POS_PRIORITY)}

# A verb reading is dropped right after these (el camino, la calle).
_NOMINAL_CONTEXT = frozenset({_P.ARTICLE, _P.DETERMINER})

_COMPOUND_TENSES = {
    TenseMood.PRESENT: TenseMood.PRESENT_PERFECT,
    TenseMood.IMPERFECT: TenseMood.PLUPERFECT,
    TenseMood.PRETERITE: TenseMood.PLUPERFECT,
}
_MAX_COMPOUND_GAP = 2


@dataclass(slots=True)
class _Draft:
    surface: str
    clean: str
    is_word: bool
    lemma: str
    pos: PartOfSpeech = _P.OTHER
    tense: TenseMood | None = None
    reading: VerbReading | None = None
    participle: VerbReading | None = None
    exact: tuple[PartOfSpeech, ...] = ()

    def freeze(self) -> Token:
        return Token(
            surface=self.surface,
            clean=self.clean,
            lemma=self.lemma,
            pos=self.pos,
            tense_mood=self.tense,
            is_word=self.is_word,
        )


def _resolve(
    profile: LanguageProfile,
    surface: str,
    clean: str,
    is_word: bool,
    previous: tuple[PartOfSpeech, ...],
) -> _Draft:
    lexicon = profile.lexicon
    exact = lexicon.lookup(clean)
    candidates: dict[PartOfSpeech, str] = {}
    for pos in exact:
        candidates[pos] = lexicon.lemma(clean)
    if clean.isdigit():
        candidates.setdefault(_P.NUMBER, clean)

    # Closed-class words only yield to irregular verb forms.
    closed = bool(CLOSED_CLASSES.intersection(exact))
    readings = profile.conjugator.readings(clean, regular=not closed)
    if readings:
        candidates[_P.VERB] = readings[0].lemma
        if len(readings) > 1:
            logger.debug(
                "Verb form %r has %d readings, using %s/%s",
                clean, len(readings), readings[0].lemma, readings[0].tense_mood,
            )

    if not candidates:
        stemmed = lexicon.stem_lookup(clean)
        if stemmed is not None:
            base, classes = stemmed
            for pos in classes:
                candidates[pos] = base

    if not candidates:
        logger.debug("No lexicon entry for %r", clean)
        return _Draft(surface, clean, is_word, clean)

    if (
        _P.VERB in candidates
        and len(candidates) > 1
        and _NOMINAL_CONTEXT.intersection(previous)
    ):
        del candidates[_P.VERB]

    pos = min(candidates, key=_RANK.__getitem__)
    if len(candidates) > 1:
        logger.debug(
            "Ambiguous %r: %s -> %s",
            clean, sorted(c.value for c in candidates), pos.value,
        )

    reading = participle = None
    if pos is _P.VERB and readings:
        reading = readings[0]
        participle = next((r for r in readings if r.kind == PARTICIPLE), None)
    return _Draft(
        surface, clean, is_word, candidates[pos], pos,
        reading.tense_mood if reading is not None else None,
        reading, participle, exact,
    )


def _find_auxiliary(
    profile: LanguageProfile, drafts: list[_Draft], participle_idx: int
) -> int | None:
    gaps = 0
    for j in range(participle_idx - 1, -1, -1):
        draft = drafts[j]
        if not draft.clean:
            if draft.surface.isspace():
                continue
            return None
        if draft.clean in profile.compound_gap and gaps < _MAX_COMPOUND_GAP:
            gaps += 1
            continue
        reading = draft.reading
        if (
            reading is not None
            and draft.tense is not None
            and reading.lemma in profile.perfect_auxiliaries
        ):
            return j
        return None
    return None


def _mark_compounds(profile: LanguageProfile, drafts: list[_Draft]) -> None:
    """Fold auxiliary + participle into one compound tense on the participle."""
    for i, draft in enumerate(drafts):
        # "fait", "dit": a finite reading may outrank the participle.
        if draft.participle is None:
            continue
        aux_idx = _find_auxiliary(profile, drafts, i)
        if aux_idx is None:
            continue
        auxiliary = drafts[aux_idx]
        draft.reading = draft.participle
        draft.lemma = draft.participle.lemma
        draft.tense = _COMPOUND_TENSES.get(auxiliary.tense, auxiliary.tense)
        auxiliary.tense = None


def analyze_tokens(profile: LanguageProfile, text: str) -> list[Token]:
    """Tokenize and resolve one line without idiom detection."""
    drafts: list[_Draft] = []
    previous: tuple[PartOfSpeech, ...] = ()
    for surface, clean, is_word in profile.tokenizer.tokenize(text):
        if not clean:
            drafts.append(_Draft(surface, clean, is_word, clean))
            if not surface.isspace():
                previous = ()
            continue
        draft = _resolve(profile, surface, clean, is_word, previous)
        drafts.append(draft)
        previous = draft.exact
    _mark_compounds(profile, drafts)
    return [d.freeze() for d in drafts]


def idiom_keys(tokens: list[Token]) -> list[str]:
    return [t.lemma for t in tokens if t.clean]


def find_idiom_spans(profile: LanguageProfile, tokens: list[Token]) -> list[IdiomSpan]:
    positions = [i for i, t in enumerate(tokens) if t.clean]
    keys = [tokens[i].lemma for i in positions]
    return [
        IdiomSpan(positions[start], positions[end], idiom.idiom_id)
        for start, end, idiom in profile.idioms.match(keys)
    ]


def analyze_line(profile: LanguageProfile, text: str, index: int = 0) -> LineAnalysis:
    """Analyze one lyric line. Total: never raises for string input."""
    if text is None:
        text = ""
    tokens = analyze_tokens(profile, text)
    spans = find_idiom_spans(profile, tokens)
    return LineAnalysis(
        index=index,
        tokens=tuple(tokens),
        idiom_spans=frozenset(spans),
        language=profile.code,
    )
