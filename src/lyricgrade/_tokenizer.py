"""Whitespace-preserving tokenizer driven by per-language rule tables."""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass, field
from typing import Any, Mapping

_SPACE_RE = re.compile(r"(\s+)")
_ASCII_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyz")

# Lone surrogates (surrogateescape-decoded bytes) cannot be encoded for the
# stemmer; they become U+FFFD.
_SURROGATE_RE = re.compile(r"[\ud800-\udfff]")

# Typographic apostrophes folded to the ASCII one before any rule applies.
_WRONG_APOSTROPHES = ("’", "‘", "ʼ", "ʹ", "`", "´")
_DEFAULT_PUNCTUATION = (
    ".,;:!?¡¿\"'«»()[]{}…-–—*_/“”~#"
)


def normalize_text(text: str) -> str:
    """NFC-compose text, replace lone surrogates and fold typographic
    apostrophes to ``'``."""
    text = unicodedata.normalize("NFC", _SURROGATE_RE.sub("\ufffd", text))
    for apostrophe in _WRONG_APOSTROPHES:
        text = text.replace(apostrophe, "'")
    return text


@dataclass(slots=True, frozen=True)
class TokenizerRules:
    language: str
    letters: frozenset[str] = frozenset()
    punctuation: str = _DEFAULT_PUNCTUATION
    elisions: tuple[str, ...] = ()          # longest first
    expansions: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, language: str, raw: Mapping[str, Any]) -> TokenizerRules:
        elisions = sorted(raw.get("elisions", ()), key=lambda e: (-len(e), e))
        return cls(
            language=language,
            letters=frozenset(raw.get("letters", "")),
            punctuation=raw.get("punctuation", _DEFAULT_PUNCTUATION),
            elisions=tuple(elisions),
            expansions=dict(raw.get("expansions", {})),
        )


class Tokenizer:
    """Split a line into (surface, clean, is_word) triples.

    Whitespace runs are kept as tokens with an empty clean form so that
    joining the surfaces reproduces the line.
    """

    __slots__ = ("_rules", "_outer", "_punct")

    def __init__(self, rules: TokenizerRules) -> None:
        self._rules = rules
        self._outer = rules.punctuation.replace("'", "")
        self._punct = rules.punctuation if "'" in rules.punctuation else rules.punctuation + "'"

    @property
    def rules(self) -> TokenizerRules:
        return self._rules

    def clean(self, surface: str) -> str:
        """Return the lookup form of a single non-whitespace chunk."""
        word = normalize_text(surface).lower().strip(self._outer)
        expanded = self._rules.expansions.get(word)
        if expanded is not None:
            return expanded
        for prefix in self._rules.elisions:
            if word.startswith(prefix) and len(word) > len(prefix):
                word = word[len(prefix):]
                break
        return word.strip(self._punct)

    def is_word(self, clean: str) -> bool:
        if len(clean) <= 1:
            return False
        letters = self._rules.letters
        return any(ch in _ASCII_LETTERS or ch in letters for ch in clean)

    def tokenize(self, text: str) -> list[tuple[str, str, bool]]:
        """Tokenize one line. Never raises; empty input gives no tokens."""
        tokens: list[tuple[str, str, bool]] = []
        for chunk in _SPACE_RE.split(text):
            if not chunk:
                continue
            if chunk.isspace():
                tokens.append((chunk, "", False))
                continue
            clean = self.clean(chunk)
            tokens.append((chunk, clean, self.is_word(clean)))
        return tokens
