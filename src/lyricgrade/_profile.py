"""Per-language capability bundle shared read-only by every analysis."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from ._analyzer import analyze_tokens, idiom_keys
from ._conjugation import Conjugator
from ._idioms import IdiomDetector
from ._lexicon import Lexicon
from ._phrases import PhrasePatterns
from ._tokenizer import Tokenizer, TokenizerRules


@dataclass(slots=True, frozen=True)
class LanguageProfile:
    code: str
    name: str
    tokenizer: Tokenizer
    lexicon: Lexicon
    conjugator: Conjugator
    idioms: IdiomDetector
    phrases: PhrasePatterns
    frequencies: Mapping[str, float]
    unknown_zipf: float
    auxiliaries: frozenset[str]          # excluded from verb density
    perfect_auxiliaries: frozenset[str]  # form compound tenses
    compound_gap: frozenset[str]         # may sit between auxiliary and participle

    def zipf(self, clean: str, lemma: str) -> float:
        """Zipf frequency by surface, then lemma, then the rare default."""
        value = self.frequencies.get(clean)
        if value is None:
            value = self.frequencies.get(lemma)
        if value is None:
            return self.unknown_zipf
        return value

    @classmethod
    def from_assets(cls, code: str, assets: Mapping[str, Any]) -> LanguageProfile:
        """Build a profile from the raw ``rules``/``lexicon``/``verbs``/
        ``frequency``/``idioms``/``phrases`` assets of one language."""
        rules = assets["rules"]
        profile = cls(
            code=code,
            name=rules.get("name", code),
            tokenizer=Tokenizer(TokenizerRules.from_dict(code, rules)),
            lexicon=Lexicon.from_dict(assets["lexicon"], rules["stemmer"]),
            conjugator=Conjugator(code, assets["verbs"]),
            idioms=IdiomDetector((), str.split),
            phrases=PhrasePatterns.from_dict(assets["phrases"]),
            frequencies=MappingProxyType({
                word: float(value) for word, value in assets["frequency"].items()
            }),
            unknown_zipf=float(rules.get("unknown_zipf", 1.5)),
            auxiliaries=frozenset(rules.get("auxiliaries", ())),
            perfect_auxiliaries=frozenset(rules.get("perfect_auxiliaries", ())),
            compound_gap=frozenset(rules.get("compound_gap", ())),
        )
        # Idioms are keyed by lemma, so phrases go through the same analysis
        # as lyric lines.
        idioms = IdiomDetector(
            assets["idioms"],
            lambda phrase: idiom_keys(analyze_tokens(profile, phrase)),
        )
        return dataclasses.replace(profile, idioms=idioms)
