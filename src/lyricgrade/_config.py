"""Scoring configuration: feature weights, baselines and tense weights."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from ._types import TenseMood

# Features combined into the difficulty score. Each is z-normalized against
# its baseline before weighting.
#   rarity         zipf_ceiling - avg_word_freq_zipf (rarer words -> higher)
#   diversity      type_token_ratio (more distinct words -> higher)
#   verb_density   lexical verbs per word
#   tense          tense_weight_avg
#   idiom_density  idiom_count / word_count
#   punctuation    punct_complexity
#   length         word_count
FEATURES: tuple[str, ...] = (
    "rarity", "diversity", "verb_density", "tense",
    "idiom_density", "punctuation", "length",
)


@dataclass(slots=True, frozen=True)
class Baseline:
    """Typical corpus mean and standard deviation of one feature."""

    mean: float
    std: float


DEFAULT_WEIGHTS: Mapping[str, float] = MappingProxyType({
    "rarity": 0.22,
    "diversity": 0.18,
    "verb_density": 0.18,
    "tense": 0.22,
    "idiom_density": 0.06,
    "punctuation": 0.06,
    "length": 0.08,
})

DEFAULT_BASELINES: Mapping[str, Baseline] = MappingProxyType({
    "rarity": Baseline(3.0, 1.0),
    "diversity": Baseline(0.7, 0.15),
    "verb_density": Baseline(0.15, 0.05),
    "tense": Baseline(0.8, 0.3),
    "idiom_density": Baseline(0.01, 0.01),
    "punctuation": Baseline(0.2, 0.1),
    "length": Baseline(80.0, 30.0),
})

DEFAULT_TENSE_WEIGHTS: Mapping[TenseMood, float] = MappingProxyType({
    TenseMood.PRESENT: 0.5,
    TenseMood.PRETERITE: 1.0,
    TenseMood.IMPERFECT: 1.0,
    TenseMood.FUTURE: 0.9,
    TenseMood.CONDITIONAL: 1.2,
    TenseMood.SUBJUNCTIVE: 1.6,
    TenseMood.PRESENT_PERFECT: 1.4,
    TenseMood.PLUPERFECT: 1.6,
})

# Difficulty tiers; every weight in a tier must be below every weight in the next.
_TENSE_TIERS: tuple[tuple[TenseMood, ...], ...] = (
    (TenseMood.PRESENT,),
    (TenseMood.PRETERITE, TenseMood.IMPERFECT, TenseMood.FUTURE),
    (TenseMood.CONDITIONAL,),
    (TenseMood.SUBJUNCTIVE, TenseMood.PRESENT_PERFECT, TenseMood.PLUPERFECT),
)


@dataclass(slots=True, frozen=True)
class ScoringConfig:
    """Tunable parameters of the difficulty score.

    The score is ``center + spread * z`` clamped to [1, 10], where ``z`` is
    the weighted sum of the feature z-scores (see ``FEATURES``).
    """

    weights: Mapping[str, float] = field(default_factory=lambda: DEFAULT_WEIGHTS)
    baselines: Mapping[str, Baseline] = field(default_factory=lambda: DEFAULT_BASELINES)
    tense_weights: Mapping[TenseMood, float] = field(
        default_factory=lambda: DEFAULT_TENSE_WEIGHTS
    )
    center: float = 5.5
    spread: float = 1.5
    zipf_ceiling: float = 7.0

    def validate(self) -> None:
        """Raise ValueError when the configuration cannot produce valid scores."""
        for name in FEATURES:
            if name not in self.weights:
                raise ValueError(f"Missing weight for feature {name!r}.")
            if name not in self.baselines:
                raise ValueError(f"Missing baseline for feature {name!r}.")
            weight = self.weights[name]
            if not math.isfinite(weight) or weight < 0:
                raise ValueError(f"Weight for {name!r} must be finite and >= 0, got {weight!r}.")
            baseline = self.baselines[name]
            if not math.isfinite(baseline.mean):
                raise ValueError(f"Baseline mean for {name!r} must be finite.")
            if not math.isfinite(baseline.std) or baseline.std <= 0:
                raise ValueError(f"Baseline std for {name!r} must be > 0, got {baseline.std!r}.")
        unknown = set(self.weights) - set(FEATURES)
        if unknown:
            raise ValueError(f"Unknown feature weights: {sorted(unknown)}.")

        for tense in TenseMood:
            weight = self.tense_weights.get(tense)
            if weight is None or not math.isfinite(weight) or weight < 0:
                raise ValueError(f"Tense weight for {tense.name} must be finite and >= 0.")
        for lower, upper in zip(_TENSE_TIERS, _TENSE_TIERS[1:]):
            if max(self.tense_weights[t] for t in lower) >= min(
                self.tense_weights[t] for t in upper
            ):
                raise ValueError(
                    "Tense weights must ascend with difficulty: "
                    f"{[t.name for t in lower]} < {[t.name for t in upper]}."
                )

        if not 1.0 <= self.center <= 10.0:
            raise ValueError("center must lie in [1, 10].")
        if not math.isfinite(self.spread) or self.spread <= 0:
            raise ValueError("spread must be finite and > 0.")
        if not math.isfinite(self.zipf_ceiling):
            raise ValueError("zipf_ceiling must be finite.")

    def to_dict(self) -> dict[str, Any]:
        return {
            "weights": dict(self.weights),
            "baselines": {k: [b.mean, b.std] for k, b in self.baselines.items()},
            "tense_weights": {t.value: w for t, w in self.tense_weights.items()},
            "center": self.center,
            "spread": self.spread,
            "zipf_ceiling": self.zipf_ceiling,
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> ScoringConfig:
        """Build a config from ``to_dict`` output; missing keys keep defaults."""
        weights = dict(DEFAULT_WEIGHTS)
        weights.update({k: float(v) for k, v in raw.get("weights", {}).items()})
        baselines = dict(DEFAULT_BASELINES)
        for name, (mean, std) in raw.get("baselines", {}).items():
            baselines[name] = Baseline(float(mean), float(std))
        tense_weights = dict(DEFAULT_TENSE_WEIGHTS)
        for name, value in raw.get("tense_weights", {}).items():
            tense_weights[TenseMood(name)] = float(value)
        config = cls(
            weights=MappingProxyType(weights),
            baselines=MappingProxyType(baselines),
            tense_weights=MappingProxyType(tense_weights),
            center=float(raw.get("center", 5.5)),
            spread=float(raw.get("spread", 1.5)),
            zipf_ceiling=float(raw.get("zipf_ceiling", 7.0)),
        )
        config.validate()
        return config
