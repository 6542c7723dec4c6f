"""Key-vocabulary extraction: which lemmas of a song are worth studying."""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Sequence

from ._stop_words import BASIC_VERBS, STOP_WORDS
from ._types import LineAnalysis, PartOfSpeech, VocabularyItem

if TYPE_CHECKING:
    from ._profile import LanguageProfile

POS_WEIGHTS: dict[PartOfSpeech, float] = {
    PartOfSpeech.NOUN: 1.0,
    PartOfSpeech.VERB: 0.9,
    PartOfSpeech.ADJECTIVE: 0.8,
    PartOfSpeech.ADVERB: 0.6,
    PartOfSpeech.PREPOSITION: 0.3,
    PartOfSpeech.CONJUNCTION: 0.2,
    PartOfSpeech.PRONOUN: 0.1,
    PartOfSpeech.ARTICLE: 0.0,
    PartOfSpeech.DETERMINER: 0.0,
    PartOfSpeech.NUMBER: 0.2,
    PartOfSpeech.OTHER: 0.5,
}
MIN_SCORE = 0.3
USEFUL_THRESHOLD = 0.4


def frequency_usefulness(zipf: float) -> float:
    """Peaks at Zipf 3.5: common enough to matter, rare enough to be new."""
    if 2.0 <= zipf <= 5.0:
        return max(0.0, 1.0 - abs(zipf - 3.5) / 1.5)
    if zipf > 5.0:
        return max(0.0, 0.3 - (zipf - 5.0) * 0.1)
    return max(0.0, 0.4 - (2.0 - zipf) * 0.2)


def is_useful(score: float) -> bool:
    return score >= USEFUL_THRESHOLD


def usefulness(lemma: str, pos: PartOfSpeech, zipf: float) -> float:
    length_bonus = min(0.2, (len(lemma) - 3) * 0.02)
    score = frequency_usefulness(zipf) * 0.6 + POS_WEIGHTS[pos] * 0.3 + length_bonus
    return min(1.0, max(0.0, score))


def extract_vocabulary(
    lines: Sequence[LineAnalysis],
    profiles: Mapping[str, LanguageProfile],
    *,
    limit: int = 100,
    min_score: float = MIN_SCORE,
) -> list[VocabularyItem]:
    """Rank a song's lemmas by learning usefulness.

    Args:
        lines: Analyzed lines of one song.
        profiles: Loaded language profiles, keyed by language code.
        limit: Maximum number of items returned.
        min_score: Items scoring at or below this are dropped.

    Returns:
        Items sorted by descending score, then lemma.

    Raises:
        ValueError: If ``limit`` is negative.
    """
    if limit < 0:
        raise ValueError("limit must be >= 0")

    counts: dict[tuple[str, str], int] = {}
    first_seen: dict[tuple[str, str], tuple[PartOfSpeech, float]] = {}
    for line in lines:
        profile = profiles[line.language]
        stop = STOP_WORDS.get(line.language, frozenset())
        basic = BASIC_VERBS.get(line.language, frozenset())
        letters = profile.tokenizer.rules.letters
        for token in line.tokens:
            if not token.is_word:
                continue
            lemma = token.lemma
            if lemma in stop or lemma in basic or token.clean in stop:
                continue
            if len(lemma) < 3:
                continue
            if not all(ch.isascii() and ch.isalpha() or ch in letters for ch in lemma):
                continue
            key = (line.language, lemma)
            counts[key] = counts.get(key, 0) + 1
            if key not in first_seen:
                first_seen[key] = (token.pos, profile.zipf(lemma, lemma))

    items: list[VocabularyItem] = []
    for key, count in counts.items():
        pos, zipf = first_seen[key]
        score = usefulness(key[1], pos, zipf)
        if score > min_score:
            items.append(VocabularyItem(key[1], pos, count, zipf, score))

    items.sort(key=lambda item: (-item.score, item.lemma))
    return items[:limit]
