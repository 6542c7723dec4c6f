"""Idiom detection over lemma sequences with an Aho-Corasick automaton."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Mapping, Sequence

import ahocorasick

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class Idiom:
    idiom_id: str       # canonical lemma phrase, stable across processes
    phrase: str
    meaning: str
    length: int         # number of tokens


class IdiomDetector:
    """Leftmost-longest, non-overlapping idiom matcher for one language."""

    __slots__ = ("_automaton", "_idioms", "_by_id")

    def __init__(
        self,
        entries: Iterable[Mapping[str, str]],
        normalize: Callable[[str], list[str]],
    ) -> None:
        """Build the automaton.

        Args:
            entries: Records with ``phrase`` and optional ``meaning``.
            normalize: Maps a phrase to the key sequence used for matching.
                Lines are matched with keys produced the same way.
        """
        idioms: list[Idiom] = []
        by_id: dict[str, Idiom] = {}
        for entry in entries:
            phrase = entry["phrase"]
            keys = normalize(phrase)
            if len(keys) < 2:
                logger.warning("Skipping single-token idiom %r", phrase)
                continue
            idiom_id = " ".join(keys)
            if idiom_id in by_id:
                logger.debug("Duplicate idiom %r (same as %r)", phrase, by_id[idiom_id].phrase)
                continue
            idiom = Idiom(idiom_id, phrase, entry.get("meaning", ""), len(keys))
            idioms.append(idiom)
            by_id[idiom_id] = idiom

        self._idioms = tuple(idioms)
        self._by_id = by_id
        self._automaton = None
        if idioms:
            ac = ahocorasick.Automaton()
            for idx, idiom in enumerate(idioms):
                ac.add_word(idiom.idiom_id, idx)
            ac.make_automaton()
            self._automaton = ac

    def __len__(self) -> int:
        return len(self._idioms)

    def get(self, idiom_id: str) -> Idiom | None:
        return self._by_id.get(idiom_id)

    def match(self, keys: Sequence[str]) -> list[tuple[int, int, Idiom]]:
        """Find idioms in a key sequence.

        Returns (start, end_inclusive, idiom) triples in position order,
        never overlapping.
        """
        if self._automaton is None or not keys:
            return []

        starts: dict[int, int] = {}
        offset = 0
        for pos, key in enumerate(keys):
            starts[offset] = pos
            offset += len(key) + 1
        text = " ".join(keys)

        # Collect token-aligned matches
        raw: list[tuple[int, int, int]] = []
        for end_inclusive, idx in self._automaton.iter(text):
            idiom = self._idioms[idx]
            first = starts.get(end_inclusive + 1 - len(idiom.idiom_id))
            if first is None:
                continue
            after = end_inclusive + 1
            if after < len(text) and text[after] != " ":
                continue
            raw.append((first, first + idiom.length - 1, idx))

        raw.sort(key=lambda m: (m[0], -(m[1] - m[0])))

        # Greedy leftmost-longest non-overlapping selection
        selected: list[tuple[int, int, Idiom]] = []
        last_end = -1
        for start, end, idx in raw:
            if start > last_end:
                selected.append((start, end, self._idioms[idx]))
                last_end = end
        return selected
