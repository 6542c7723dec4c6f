"""Lightweight regex-based clause splitting for lyric punctuation."""

from __future__ import annotations

import re

# Sentence-final marks; lyrics rarely capitalize, so no lookahead on case.
# Negative lookbehinds keep abbreviations and decimals together.
_FINAL_RE = re.compile(
    r"(?<!\bSr)(?<!\bSra)(?<!\bDr)(?<!\bDra)(?<!\bUd)(?<!\bUds)(?<!\bM)"
    r"(?<!\bMme)(?<!\bMlle)(?<!\betc)"
    r"(?<!\d)"
    r"[.!?…]+"
    r"(?=\s|$)"
)
_CLAUSE_RE = re.compile(r"[,;:()–—]+")


def split_clauses(text: str) -> list[str]:
    """Split text into clauses on final and clause-level punctuation."""
    clauses: list[str] = []
    for sentence in _FINAL_RE.split(text.strip()):
        for part in _CLAUSE_RE.split(sentence):
            clause = part.strip()
            if clause:
                clauses.append(clause)
    return clauses


def count_final_marks(text: str) -> int:
    """Number of sentence-final punctuation runs (``?!`` counts once)."""
    return len(_FINAL_RE.findall(text))
