"""Whole-song pipeline: analyze lines, score, level, idioms."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._difficulty import assign_level
from ._types import SongAnalysis

if TYPE_CHECKING:
    from ._scorer import DifficultyScorer


def split_lines(text: str | list[str]) -> list[tuple[int, str]]:
    """(original index, line) pairs for the non-blank lines of a song."""
    raw = text.splitlines() if isinstance(text, str) else list(text)
    return [(i, line) for i, line in enumerate(raw) if line and line.strip()]


def analyze_song(
    scorer: DifficultyScorer,
    text: str | list[str],
    language: str = "es",
) -> SongAnalysis:
    """Analyze a complete song.

    Args:
        scorer: Loaded scorer providing profiles and scoring config.
        text: Raw lyrics (newline separated) or a pre-split list of lines.
            Blank lines are skipped but keep their position in ``index``.
        language: Language code of the lyrics.

    Raises:
        InvalidInputError: If the song has no non-blank lines.
        UnsupportedLanguageError: If ``language`` is not loaded.
    """
    lines = [
        scorer.analyze_line(line, index, language)
        for index, line in split_lines(text)
    ]
    result = scorer.compute_difficulty(lines)
    return SongAnalysis(
        lines=lines,
        metrics=result.metrics,
        difficulty_score=result.difficulty_score,
        level=assign_level(result.difficulty_score),
        idioms=scorer.get_idioms_for_lyrics(lines, language),
    )
