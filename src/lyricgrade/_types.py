"""Data structures for lyricgrade."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping


class PartOfSpeech(Enum):
    NOUN = "noun"
    VERB = "verb"
    ADJECTIVE = "adjective"
    ADVERB = "adverb"
    PRONOUN = "pronoun"
    PREPOSITION = "preposition"
    CONJUNCTION = "conjunction"
    ARTICLE = "article"
    DETERMINER = "determiner"
    NUMBER = "number"
    OTHER = "other"

    @classmethod
    def from_string(cls, value: str) -> PartOfSpeech:
        """Parse a lexicon tag; unknown tags map to OTHER."""
        if not value:
            return cls.OTHER
        value_lower = value.lower().strip()
        for item in cls:
            if item.value == value_lower:
                return item
        return cls.OTHER


class TenseMood(Enum):
    """Verb tense/mood, declared from simplest to hardest reading."""

    PRESENT = "present"
    PRETERITE = "preterite"
    IMPERFECT = "imperfect"
    FUTURE = "future"
    CONDITIONAL = "conditional"
    SUBJUNCTIVE = "subjunctive"
    PRESENT_PERFECT = "present_perfect"
    PLUPERFECT = "pluperfect"


# Declaration order doubles as the tie-break order between tense readings.
TENSE_ORDER: dict[TenseMood, int] = {t: i for i, t in enumerate(TenseMood)}


@dataclass(slots=True, frozen=True)
class Token:
    surface: str                 # verbatim text, whitespace runs included
    clean: str                   # normalized lookup form ("" for whitespace)
    lemma: str
    pos: PartOfSpeech
    tense_mood: TenseMood | None
    is_word: bool


@dataclass(slots=True, frozen=True)
class IdiomSpan:
    start: int      # token index into LineAnalysis.tokens
    end: int        # inclusive
    idiom_id: str


@dataclass(slots=True, frozen=True)
class LineAnalysis:
    index: int
    tokens: tuple[Token, ...]
    idiom_spans: frozenset[IdiomSpan] = field(default_factory=frozenset)
    language: str = "es"

    @property
    def text(self) -> str:
        return "".join(t.surface for t in self.tokens)

    @property
    def words(self) -> list[Token]:
        return [t for t in self.tokens if t.is_word]


@dataclass(slots=True, frozen=True)
class SongMetrics:
    word_count: int
    unique_word_count: int
    type_token_ratio: float
    avg_word_freq_zipf: float
    verb_density: float
    tense_weights: Mapping[TenseMood, float]   # ordered by TenseMood
    tense_weight_avg: float
    idiom_count: int
    punct_complexity: float
    difficulty_score: float = 1.0


@dataclass(slots=True, frozen=True)
class DifficultyResult:
    metrics: SongMetrics
    difficulty_score: float


@dataclass(slots=True, frozen=True)
class ConjugationTable:
    lemma: str
    language: str
    infinitive: str
    participle: str
    gerund: str
    auxiliary: str
    rows: Mapping[str, Mapping[str, str]]   # row name -> person -> form

    def form(self, row: str, person: str) -> str | None:
        return self.rows.get(row, {}).get(person)


@dataclass(slots=True, frozen=True)
class IdiomMatch:
    line_index: int
    start: int          # token index, inclusive
    end: int            # token index, inclusive
    idiom_id: str
    phrase: str
    meaning: str


@dataclass(slots=True, frozen=True)
class VocabularyItem:
    lemma: str
    pos: PartOfSpeech
    count: int
    zipf: float
    score: float


@dataclass(slots=True, frozen=True)
class SongAnalysis:
    lines: list[LineAnalysis]
    metrics: SongMetrics
    difficulty_score: float
    level: int
    idioms: list[IdiomMatch] = field(default_factory=list)


@dataclass(slots=True, frozen=True)
class PhraseFactors:
    word_frequency: float     # average Zipf rescaled to [0, 1]
    phrase_length: float      # 3-6 words ideal
    verb_complexity: float    # simple tenses score higher
    question_pattern: float
    greeting_pattern: float
    common_expression: float
    repetitiveness: float     # distinct-word share; 0 for vocables and fillers


@dataclass(slots=True, frozen=True)
class PhraseScore:
    line_index: int
    text: str
    score: float
    factors: PhraseFactors
    category: str
