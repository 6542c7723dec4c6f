"""Exact-match dictionary with lemma map and Snowball stem fallback."""

from __future__ import annotations

import threading
from types import MappingProxyType
from typing import Any, Mapping

import Stemmer

from ._types import PartOfSpeech

CLOSED_CLASSES: frozenset[PartOfSpeech] = frozenset({
    PartOfSpeech.ARTICLE,
    PartOfSpeech.DETERMINER,
    PartOfSpeech.PRONOUN,
    PartOfSpeech.PREPOSITION,
    PartOfSpeech.CONJUNCTION,
})

# Classes eligible for the stem fallback; inflection of function words is
# listed explicitly in the lexicon instead.
_STEMMABLE: frozenset[PartOfSpeech] = frozenset({
    PartOfSpeech.NOUN,
    PartOfSpeech.ADJECTIVE,
    PartOfSpeech.ADVERB,
})


class Lexicon:
    """Word -> POS candidates for one language.

    Snowball stemmers are not thread-safe, so each thread lazily builds its
    own; the stem index itself is computed once at construction.
    """

    __slots__ = ("_words", "_lemmas", "_stem_index", "_algorithm", "_local")

    def __init__(
        self,
        words: Mapping[str, tuple[PartOfSpeech, ...]],
        lemmas: Mapping[str, str],
        stemmer_algorithm: str,
    ) -> None:
        self._words = MappingProxyType(dict(words))
        self._lemmas = MappingProxyType(dict(lemmas))
        self._algorithm = stemmer_algorithm
        self._local = threading.local()

        stem_index: dict[str, str] = {}
        for word in sorted(self._words):
            if not _STEMMABLE.intersection(self._words[word]):
                continue
            if word in self._lemmas:
                continue
            stem_index.setdefault(self._stem(word), word)
        self._stem_index = MappingProxyType(stem_index)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any], stemmer_algorithm: str) -> Lexicon:
        words = {
            word: tuple(PartOfSpeech.from_string(tag) for tag in tags)
            for word, tags in raw.get("words", {}).items()
        }
        return cls(words, raw.get("lemmas", {}), stemmer_algorithm)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def _stemmer(self) -> Stemmer.Stemmer:
        stemmer = getattr(self._local, "stemmer", None)
        if stemmer is None:
            stemmer = Stemmer.Stemmer(self._algorithm)
            self._local.stemmer = stemmer
        return stemmer

    def _stem(self, word: str) -> str:
        return self._stemmer().stemWord(word)

    def lookup(self, word: str) -> tuple[PartOfSpeech, ...]:
        """Exact-match POS candidates, empty when the word is unknown."""
        return self._words.get(word, ())

    def lemma(self, word: str) -> str:
        return self._lemmas.get(word, word)

    def stem_lookup(self, word: str) -> tuple[str, tuple[PartOfSpeech, ...]] | None:
        """Resolve an inflected content word through its Snowball stem.

        Returns (lemma, candidates) or None.
        """
        stem = self._stem(word)
        base = self._stem_index.get(stem)
        if base is None or base == word:
            return None
        candidates = tuple(p for p in self._words[base] if p in _STEMMABLE)
        return base, candidates
