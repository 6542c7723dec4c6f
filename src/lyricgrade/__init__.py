"""lyricgrade: difficulty levels (1-10) for Spanish and French song lyrics."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from ._config import Baseline, ScoringConfig
from ._difficulty import assign_level, calibrate, level_distribution, score_metrics
from ._errors import (
    DataChecksumError,
    DataVersionError,
    InvalidInputError,
    LyricGradeError,
    UnsupportedLanguageError,
)
from ._phrases import PHRASE_CATEGORIES, USEFULNESS_THRESHOLD, is_useful_phrase
from ._types import (
    ConjugationTable,
    DifficultyResult,
    IdiomMatch,
    IdiomSpan,
    LineAnalysis,
    PartOfSpeech,
    PhraseFactors,
    PhraseScore,
    SongAnalysis,
    SongMetrics,
    TenseMood,
    Token,
    VocabularyItem,
)

if TYPE_CHECKING:
    from pathlib import Path

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "load",
    "assign_level",
    "calibrate",
    "is_useful_phrase",
    "level_distribution",
    "score_metrics",
    "Baseline",
    "ConjugationTable",
    "DataChecksumError",
    "DataVersionError",
    "DifficultyResult",
    "DifficultyScorer",
    "IdiomMatch",
    "IdiomSpan",
    "InvalidInputError",
    "LineAnalysis",
    "LyricGradeError",
    "PHRASE_CATEGORIES",
    "PartOfSpeech",
    "PhraseFactors",
    "PhraseScore",
    "ScoringConfig",
    "SongAnalysis",
    "SongMetrics",
    "TenseMood",
    "Token",
    "UnsupportedLanguageError",
    "USEFULNESS_THRESHOLD",
    "VocabularyItem",
]


def load(
    data_dir: Path | str | None = None,
    languages: Iterable[str] | None = None,
    config: ScoringConfig | None = None,
) -> "DifficultyScorer":
    """Load language data and return a ready-to-use DifficultyScorer.

    Args:
        data_dir: Path to data directory. If None, uses bundled package data.
        languages: Language codes to load. If None, loads every language
            listed in the manifest.
        config: Scoring configuration. If None, uses the defaults.
    """
    from ._loader import load_data
    from ._scorer import DifficultyScorer

    return DifficultyScorer(load_data(data_dir, languages), config)


# Deferred import so DifficultyScorer is available as lyricgrade.DifficultyScorer
# without loading the analysis stack at import time.
def __getattr__(name: str):
    if name == "DifficultyScorer":
        from ._scorer import DifficultyScorer
        return DifficultyScorer
    raise AttributeError(f"module 'lyricgrade' has no attribute {name!r}")
