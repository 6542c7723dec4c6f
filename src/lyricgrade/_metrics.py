"""Document-level statistics over a song's line analyses."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Mapping, Sequence

from ._errors import InvalidInputError, UnsupportedLanguageError
from ._sentence import count_final_marks, split_clauses
from ._types import LineAnalysis, PartOfSpeech, SongMetrics, TenseMood

if TYPE_CHECKING:
    from ._profile import LanguageProfile

# Weighted marks of clause structure. Opening/closing pairs (¿?, ¡!) both count.
PUNCT_WEIGHTS: dict[str, float] = {
    ",": 1.0,
    ";": 1.5,
    ":": 1.2,
    "?": 0.8, "¿": 0.8,
    "!": 0.8, "¡": 0.8,
    "(": 1.0, "—": 1.0, "–": 1.0,
}
PUNCT_CAP = 2.0
_MULTI_FINAL_WEIGHT = 0.5


def _punct_complexity(lines: Sequence[LineAnalysis], word_count: int) -> float:
    texts = [line.text for line in lines]
    weighted = 0.0
    for text in texts:
        for ch in text:
            weighted += PUNCT_WEIGHTS.get(ch, 0.0)
    density = weighted / word_count

    multi_final = sum(1 for text in texts if count_final_marks(text) >= 2)
    multi_share = multi_final / len(texts)

    lengths = [len(c.split()) for text in texts for c in split_clauses(text)]
    variation = 0.0
    if len(lengths) > 1:
        mean = sum(lengths) / len(lengths)
        variance = sum((n - mean) ** 2 for n in lengths) / len(lengths)
        variation = math.sqrt(variance) / mean

    return min(density + _MULTI_FINAL_WEIGHT * multi_share + variation, PUNCT_CAP)


def compute_metrics(
    lines: Sequence[LineAnalysis],
    profiles: Mapping[str, LanguageProfile],
    tense_weights: Mapping[TenseMood, float],
) -> SongMetrics:
    """Reduce line analyses to song statistics (score left at its default).

    Raises:
        InvalidInputError: If ``lines`` is empty.
        UnsupportedLanguageError: If a line's language has no profile.
    """
    if not lines:
        raise InvalidInputError("No lines provided")

    word_count = 0
    lemmas: set[str] = set()
    zipf_total = 0.0
    verbs = 0
    lexical_verbs = 0
    tense_counts: dict[TenseMood, int] = {}
    idiom_count = 0

    for line in lines:
        profile = profiles.get(line.language)
        if profile is None:
            raise UnsupportedLanguageError(f"No language profile for {line.language!r}")
        idiom_count += len(line.idiom_spans)
        for token in line.tokens:
            if not token.is_word:
                continue
            word_count += 1
            lemmas.add(token.lemma.lower())
            zipf_total += profile.zipf(token.clean, token.lemma)
            if token.pos is not PartOfSpeech.VERB:
                continue
            verbs += 1
            if token.lemma not in profile.auxiliaries:
                lexical_verbs += 1
            if token.tense_mood is not None:
                tense_counts[token.tense_mood] = tense_counts.get(token.tense_mood, 0) + 1

    weighted = {
        tense: tense_counts[tense] * tense_weights[tense]
        for tense in TenseMood
        if tense in tense_counts
    }

    if word_count == 0:
        return SongMetrics(
            word_count=0,
            unique_word_count=0,
            type_token_ratio=0.0,
            avg_word_freq_zipf=0.0,
            verb_density=0.0,
            tense_weights={},
            tense_weight_avg=0.0,
            idiom_count=idiom_count,
            punct_complexity=0.0,
        )

    return SongMetrics(
        word_count=word_count,
        unique_word_count=len(lemmas),
        type_token_ratio=len(lemmas) / word_count,
        avg_word_freq_zipf=zipf_total / word_count,
        verb_density=lexical_verbs / word_count,
        tense_weights=weighted,
        tense_weight_avg=sum(weighted.values()) / verbs if verbs else 0.0,
        idiom_count=idiom_count,
        punct_complexity=_punct_complexity(lines, word_count),
    )
