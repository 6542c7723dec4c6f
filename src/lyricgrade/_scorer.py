"""DifficultyScorer: the public analysis and scoring API."""

from __future__ import annotations

import dataclasses
from types import MappingProxyType
from typing import TYPE_CHECKING, Iterable, Mapping, Sequence

from ._analyzer import analyze_line
from ._config import ScoringConfig
from ._difficulty import assign_level, score_metrics
from ._errors import UnsupportedLanguageError
from ._metrics import compute_metrics
from ._phrases import USEFULNESS_THRESHOLD, rank_phrases, score_phrase
from ._song import analyze_song
from ._tokenizer import normalize_text
from ._types import (
    ConjugationTable,
    DifficultyResult,
    IdiomMatch,
    LineAnalysis,
    PhraseScore,
    SongAnalysis,
    VocabularyItem,
)
from ._vocabulary import MIN_SCORE, extract_vocabulary

if TYPE_CHECKING:
    from ._profile import LanguageProfile


class DifficultyScorer:
    """Main engine. Holds the loaded language profiles and scoring config.

    Instances are immutable and safe to share between threads.
    """

    __slots__ = ("_profiles", "_config")

    def __init__(
        self,
        profiles: Mapping[str, LanguageProfile],
        config: ScoringConfig | None = None,
    ) -> None:
        cfg = config or ScoringConfig()
        cfg.validate()
        self._profiles = MappingProxyType(dict(profiles))
        self._config = cfg

    @property
    def languages(self) -> tuple[str, ...]:
        return tuple(self._profiles)

    @property
    def config(self) -> ScoringConfig:
        return self._config

    def profile(self, language: str) -> LanguageProfile:
        """Return the profile for a language code.

        Raises:
            UnsupportedLanguageError: If the language is not loaded.
        """
        profile = self._profiles.get(language)
        if profile is None:
            raise UnsupportedLanguageError(
                f"No language profile for {language!r}; loaded: {list(self._profiles)}"
            )
        return profile

    def with_config(self, config: ScoringConfig) -> DifficultyScorer:
        """Return a scorer sharing these profiles with a different config."""
        return DifficultyScorer(self._profiles, config)

    # -- Analysis API --

    def analyze_line(self, text: str, index: int = 0, language: str = "es") -> LineAnalysis:
        """Tokenize one line and resolve lemma, POS and tense for each token.

        Never raises for string input; an empty string gives no tokens.
        """
        return analyze_line(self.profile(language), text, index)

    def analyze_lines(self, lines: Iterable[str], language: str = "es") -> list[LineAnalysis]:
        profile = self.profile(language)
        return [analyze_line(profile, text, i) for i, text in enumerate(lines)]

    def conjugations(self, lemma: str, language: str = "es") -> ConjugationTable | None:
        """Full paradigm for a verb lemma, or None when it is not a verb.

        Infinitives missing from the verb list are conjugated as regular
        verbs of their class.
        """
        profile = self.profile(language)
        lemma = normalize_text(lemma).strip().lower()
        conjugator = profile.conjugator
        if not conjugator.is_verb(lemma) and lemma in profile.lexicon:
            return None
        return conjugator.table(lemma)

    def get_idioms_for_lyrics(
        self,
        lines: Sequence[str | LineAnalysis],
        language: str = "es",
    ) -> list[IdiomMatch]:
        """Idiom occurrences across a song, in line then token order."""
        matches: list[IdiomMatch] = []
        for i, line in enumerate(lines):
            analysis = self._as_analysis(line, i, language)
            profile = self.profile(analysis.language)
            for span in sorted(analysis.idiom_spans, key=lambda s: s.start):
                idiom = profile.idioms.get(span.idiom_id)
                matches.append(IdiomMatch(
                    line_index=analysis.index,
                    start=span.start,
                    end=span.end,
                    idiom_id=span.idiom_id,
                    phrase=idiom.phrase if idiom is not None else span.idiom_id,
                    meaning=idiom.meaning if idiom is not None else "",
                ))
        return matches

    # -- Scoring API --

    def compute_difficulty(self, lines: Sequence[LineAnalysis]) -> DifficultyResult:
        """Song metrics and difficulty score for analyzed lines.

        Raises:
            InvalidInputError: If ``lines`` is empty.
        """
        metrics = compute_metrics(list(lines), self._profiles, self._config.tense_weights)
        score = score_metrics(metrics, self._config)
        metrics = dataclasses.replace(metrics, difficulty_score=score)
        return DifficultyResult(metrics=metrics, difficulty_score=score)

    @staticmethod
    def assign_level(score: float) -> int:
        return assign_level(score)

    def analyze_song(self, text: str | list[str], language: str = "es") -> SongAnalysis:
        """Analyze, score and level a whole song. See ``analyze_song``."""
        return analyze_song(self, text, language)

    def extract_vocabulary(
        self,
        lines: Sequence[LineAnalysis],
        *,
        limit: int = 100,
        min_score: float = MIN_SCORE,
    ) -> list[VocabularyItem]:
        """Most useful lemmas to study from analyzed lines."""
        return extract_vocabulary(lines, self._profiles, limit=limit, min_score=min_score)

    def _as_analysis(self, line: str | LineAnalysis, index: int, language: str) -> LineAnalysis:
        if isinstance(line, LineAnalysis):
            return line
        return self.analyze_line(line, index, language)

    def score_phrase(self, line: str | LineAnalysis, language: str = "es") -> PhraseScore:
        """Usefulness of one line as a phrase to learn, with its category."""
        analysis = self._as_analysis(line, 0, language)
        return score_phrase(self.profile(analysis.language), analysis)

    def useful_phrases(
        self,
        lines: Sequence[str | LineAnalysis],
        language: str = "es",
        *,
        threshold: float = USEFULNESS_THRESHOLD,
    ) -> list[PhraseScore]:
        """Distinct lines scoring at least ``threshold``, best first."""
        scores = []
        for i, line in enumerate(lines):
            analysis = self._as_analysis(line, i, language)
            scores.append(score_phrase(self.profile(analysis.language), analysis))
        return rank_phrases(scores, threshold)
