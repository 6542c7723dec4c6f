"""Phrase usefulness: how worth learning a whole lyric line is."""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Iterable, Mapping, Sequence

from ._errors import LyricGradeError
from ._tokenizer import normalize_text
from ._types import LineAnalysis, PartOfSpeech, PhraseFactors, PhraseScore, TenseMood

if TYPE_CHECKING:
    from ._profile import LanguageProfile

USEFULNESS_THRESHOLD = 0.4

# Factors combined into the score. The others are reported but unweighted.
PHRASE_WEIGHTS: Mapping[str, float] = MappingProxyType({
    "word_frequency": 0.5,
    "common_expression": 0.3,
    "repetitiveness": 0.2,
})

# Lower is simpler.
TENSE_COMPLEXITY: Mapping[TenseMood, float] = MappingProxyType({
    TenseMood.PRESENT: 0.2,
    TenseMood.PRETERITE: 0.5,
    TenseMood.IMPERFECT: 0.5,
    TenseMood.FUTURE: 0.4,
    TenseMood.CONDITIONAL: 0.6,
    TenseMood.SUBJUNCTIVE: 0.8,
    TenseMood.PRESENT_PERFECT: 0.5,
    TenseMood.PLUPERFECT: 0.7,
})


@dataclass(slots=True, frozen=True)
class PhraseCategory:
    name: str
    display_name: str
    order: int


PHRASE_CATEGORIES: Mapping[str, PhraseCategory] = MappingProxyType({
    c.name: c for c in (
        PhraseCategory("greetings", "Greetings & Farewells", 1),
        PhraseCategory("questions", "Questions", 2),
        PhraseCategory("expressions", "Common Expressions", 3),
        PhraseCategory("actions", "Actions & Verbs", 4),
        PhraseCategory("time", "Time & Frequency", 5),
        PhraseCategory("emotions", "Emotions & Feelings", 6),
        PhraseCategory("connectors", "Connectors", 7),
        PhraseCategory("vocabulary", "General Vocabulary", 8),
    )
})


def _words_pattern(fragments: Sequence[str]) -> re.Pattern[str] | None:
    """Whole-word alternation of phrase fragments."""
    if not fragments:
        return None
    return re.compile(r"\b(?:" + "|".join(fragments) + r")\b")


def _any_pattern(patterns: Sequence[str]) -> re.Pattern[str] | None:
    if not patterns:
        return None
    return re.compile("|".join(f"(?:{p})" for p in patterns))


def _search(pattern: re.Pattern[str] | None, text: str) -> bool:
    return pattern is not None and pattern.search(text) is not None


class PhrasePatterns:
    """Compiled per-language pattern tables from ``data/<lang>/phrases.json``."""

    __slots__ = ("_greetings", "_questions", "_expressions", "_exclude", "_categories")

    def __init__(
        self,
        greetings: Sequence[str] = (),
        questions: Sequence[str] = (),
        expressions: Sequence[str] = (),
        exclude: Sequence[str] = (),
        categories: Iterable[tuple[str, str]] = (),
    ) -> None:
        self._greetings = _words_pattern(greetings)
        self._questions = _any_pattern(questions)
        self._expressions = _words_pattern(expressions)
        self._exclude = _any_pattern(exclude)
        compiled = []
        for name, pattern in categories:
            if name not in PHRASE_CATEGORIES:
                raise LyricGradeError(f"Unknown phrase category {name!r}")
            compiled.append((name, re.compile(pattern)))
        self._categories = tuple(compiled)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> PhrasePatterns:
        try:
            return cls(
                greetings=raw.get("greetings", ()),
                questions=raw.get("questions", ()),
                expressions=raw.get("expressions", ()),
                exclude=raw.get("exclude", ()),
                categories=[tuple(pair) for pair in raw.get("categories", ())],
            )
        except re.error as e:
            raise LyricGradeError(f"Invalid phrase pattern: {e}") from e

    def is_greeting(self, text: str) -> bool:
        return _search(self._greetings, text)

    def is_question(self, text: str) -> bool:
        return _search(self._questions, text)

    def is_expression(self, text: str) -> bool:
        return _search(self._expressions, text)

    def is_excluded(self, text: str) -> bool:
        return _search(self._exclude, text)

    def category(self, text: str) -> str | None:
        """First topical category whose pattern matches, in table order."""
        for name, pattern in self._categories:
            if pattern.search(text):
                return name
        return None


def _length_score(n: int) -> float:
    if 3 <= n <= 6:
        return 1.0
    if n in (2, 7):
        return 0.8
    if n in (1, 8):
        return 0.6
    if n in (9, 10):
        return 0.4
    return 0.2


def phrase_key(text: str) -> str:
    """Matching form of a line: normalized, lower-cased, trimmed."""
    return " ".join(normalize_text(text).lower().split())


def score_phrase(profile: LanguageProfile, line: LineAnalysis) -> PhraseScore:
    """Score one analyzed line as a phrase worth learning.

    Args:
        profile: Profile of the line's language (frequencies, patterns).
        line: The analyzed line.

    Returns:
        PhraseScore with the combined score in [0, 1], every factor, and a
        category from ``PHRASE_CATEGORIES``.
    """
    text = phrase_key(line.text)
    patterns = profile.phrases
    keys = [t.clean for t in line.tokens if t.clean]
    words = line.words

    if words:
        avg_zipf = sum(profile.zipf(t.clean, t.lemma) for t in words) / len(words)
        frequency = min(1.0, max(0.0, (avg_zipf - 1.0) / 4.0))
    else:
        frequency = 0.0

    tenses = [
        t.tense_mood for t in words
        if t.pos is PartOfSpeech.VERB and t.tense_mood is not None
    ]
    if tenses:
        complexity = 1.0 - sum(TENSE_COMPLEXITY[t] for t in tenses) / len(tenses)
    else:
        complexity = 0.5

    if not keys or patterns.is_excluded(text):
        repetitiveness = 0.0
    else:
        repetitiveness = len(set(keys)) / len(keys)

    factors = PhraseFactors(
        word_frequency=frequency,
        phrase_length=_length_score(len(keys)),
        verb_complexity=complexity,
        question_pattern=1.0 if patterns.is_question(text) else 0.0,
        greeting_pattern=1.0 if patterns.is_greeting(text) else 0.0,
        common_expression=1.0 if patterns.is_expression(text) else 0.0,
        repetitiveness=repetitiveness,
    )
    score = sum(w * getattr(factors, name) for name, w in PHRASE_WEIGHTS.items())
    return PhraseScore(
        line_index=line.index,
        text=line.text,
        score=min(1.0, max(0.0, score)),
        factors=factors,
        category=_category(patterns, text, factors),
    )


def _category(patterns: PhrasePatterns, text: str, factors: PhraseFactors) -> str:
    if factors.greeting_pattern > 0.5:
        return "greetings"
    if factors.question_pattern > 0.5:
        return "questions"
    topical = patterns.category(text)
    if topical is not None:
        return topical
    if factors.common_expression > 0.5:
        return "expressions"
    return "vocabulary"


def is_useful_phrase(score: float) -> bool:
    return score >= USEFULNESS_THRESHOLD


def rank_phrases(
    scores: Iterable[PhraseScore], threshold: float = USEFULNESS_THRESHOLD
) -> list[PhraseScore]:
    """Distinct phrases at or above ``threshold``, best first.

    Repeated lines (choruses) keep their first occurrence.
    """
    seen: set[str] = set()
    kept: list[PhraseScore] = []
    for item in scores:
        key = phrase_key(item.text)
        if not key or key in seen:
            continue
        seen.add(key)
        if item.score >= threshold:
            kept.append(item)
    kept.sort(key=lambda p: (-p.score, p.line_index))
    return kept
