"""Difficulty score, level assignment and baseline calibration."""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Iterable, Sequence

from ._config import FEATURES, Baseline, ScoringConfig
from ._types import SongMetrics

MIN_LEVEL = 1
MAX_LEVEL = 10
_MIN_STD = 0.001


def feature_values(metrics: SongMetrics, config: ScoringConfig) -> dict[str, float]:
    """Raw (un-normalized) feature values for one song."""
    words = metrics.word_count
    return {
        "rarity": config.zipf_ceiling - metrics.avg_word_freq_zipf,
        "diversity": metrics.type_token_ratio,
        "verb_density": metrics.verb_density,
        "tense": metrics.tense_weight_avg,
        "idiom_density": metrics.idiom_count / words if words else 0.0,
        "punctuation": metrics.punct_complexity,
        "length": float(words),
    }


def score_metrics(metrics: SongMetrics, config: ScoringConfig | None = None) -> float:
    """Combine song metrics into a difficulty score in [1, 10].

    A song without any word tokens scores the minimum.
    """
    cfg = config or ScoringConfig()
    if metrics.word_count == 0:
        return float(MIN_LEVEL)

    values = feature_values(metrics, cfg)
    z = 0.0
    for name in FEATURES:
        baseline = cfg.baselines[name]
        z += cfg.weights[name] * (values[name] - baseline.mean) / baseline.std

    score = cfg.center + cfg.spread * z
    if math.isnan(score):
        return cfg.center
    return min(max(score, float(MIN_LEVEL)), float(MAX_LEVEL))


def assign_level(score: object) -> int:
    """Round half up and clamp to [1, 10]. Never raises.

    Non-numeric input and NaN map to the lowest level; infinities clamp to
    the nearest bound.
    """
    try:
        value = float(score)  # type: ignore[arg-type]
    except OverflowError:
        # Integers beyond float range.
        return MAX_LEVEL if score > 0 else MIN_LEVEL  # type: ignore[operator]
    except (TypeError, ValueError):
        return MIN_LEVEL
    if math.isnan(value):
        return MIN_LEVEL
    if math.isinf(value):
        return MAX_LEVEL if value > 0 else MIN_LEVEL
    level = math.floor(value + 0.5)
    return min(max(level, MIN_LEVEL), MAX_LEVEL)


def level_distribution(scores: Iterable[float]) -> dict[int, int]:
    """Count songs per level, with every level 1-10 present."""
    distribution = {level: 0 for level in range(MIN_LEVEL, MAX_LEVEL + 1)}
    for score in scores:
        distribution[assign_level(score)] += 1
    return distribution


def calibrate(
    corpus: Sequence[SongMetrics], config: ScoringConfig | None = None
) -> ScoringConfig:
    """Return a config whose baselines are the corpus feature statistics.

    Songs without words are ignored. Weights and tense weights are kept.

    Raises:
        ValueError: If no song in ``corpus`` has words.
    """
    cfg = config or ScoringConfig()
    rows = [feature_values(m, cfg) for m in corpus if m.word_count > 0]
    if not rows:
        raise ValueError("calibrate needs at least one song with words")

    baselines: dict[str, Baseline] = {}
    for name in FEATURES:
        values = [row[name] for row in rows]
        mean = sum(values) / len(values)
        variance = sum((v - mean) ** 2 for v in values) / len(values)
        baselines[name] = Baseline(mean, max(math.sqrt(variance), _MIN_STD))

    calibrated = ScoringConfig(
        weights=cfg.weights,
        baselines=MappingProxyType(baselines),
        tense_weights=cfg.tense_weights,
        center=cfg.center,
        spread=cfg.spread,
        zipf_ceiling=cfg.zipf_ceiling,
    )
    calibrated.validate()
    return calibrated
