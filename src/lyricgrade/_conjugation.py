"""Conjugation paradigms: generation, reverse tense lookup, compound rows."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterator, Mapping

from ._errors import LyricGradeError
from ._types import TENSE_ORDER, ConjugationTable, TenseMood

# Row name -> tense/mood reported for a form found in that row.
ROW_TENSES: dict[str, TenseMood] = {
    "PRESENT": TenseMood.PRESENT,
    "PRETERITE": TenseMood.PRETERITE,
    "IMPERFECT": TenseMood.IMPERFECT,
    "FUTURE": TenseMood.FUTURE,
    "CONDITIONAL": TenseMood.CONDITIONAL,
    "PRESENT_SUBJUNCTIVE": TenseMood.SUBJUNCTIVE,
    "IMPERFECT_SUBJUNCTIVE": TenseMood.SUBJUNCTIVE,
    "IMPERFECT_SUBJUNCTIVE_SE": TenseMood.SUBJUNCTIVE,
    "PRESENT_PERFECT": TenseMood.PRESENT_PERFECT,
    "PLUPERFECT": TenseMood.PLUPERFECT,
}

FINITE = "finite"
INFINITIVE = "infinitive"
PARTICIPLE = "participle"
GERUND = "gerund"

_STRESSED = {"a": "á", "e": "é", "i": "í", "o": "ó", "u": "ú"}
_PLACEHOLDER = "\x01"
_IRREGULAR_KEYS = frozenset({
    "class", "stem", "stem_change", "rows", "stems", "future_stem",
    "participle", "gerund", "like",
})


@dataclass(slots=True, frozen=True)
class VerbReading:
    lemma: str
    tense_mood: TenseMood | None
    kind: str = FINITE

    def sort_key(self) -> tuple[int, int, str, str]:
        # Finite readings first in TenseMood order, then non-finite forms.
        if self.tense_mood is None:
            return (1, 0, self.lemma, self.kind)
        return (0, TENSE_ORDER[self.tense_mood], self.lemma, self.kind)


@dataclass(slots=True, frozen=True)
class _Row:
    name: str
    base: str
    endings: tuple[str, ...]
    strong: frozenset[int] = frozenset()
    weak: frozenset[int] = frozenset()
    stress: frozenset[int] = frozenset()


@dataclass(slots=True, frozen=True)
class _VerbClass:
    key: str
    participle: str
    gerund: str
    rows: tuple[_Row, ...]
    future_trim: int = 0
    weak_gerund: bool = False
    spelling: tuple[tuple[str, str, str], ...] = ()


def _stress(base: str) -> str:
    if base and base[-1] in _STRESSED:
        return base[:-1] + _STRESSED[base[-1]]
    return base


def _change_stem(stem: str, change: str, strong: bool, weak: bool) -> str:
    """Apply a stem-vowel change such as ``e>ie/i`` to the last matching vowel."""
    source, _, targets = change.partition(">")
    strong_to, _, weak_to = targets.partition("/")
    target = strong_to if strong else (weak_to if weak else "")
    if not source or not target:
        return stem
    pos = stem.rfind(source)
    if pos < 0:
        return stem
    return stem[:pos] + target + stem[pos + len(source):]


def _spell(stem: str, ending: str, spelling: tuple[tuple[str, str, str], ...]) -> str:
    if ending:
        for old, before, new in spelling:
            if ending[0] in before and stem.endswith(old):
                return stem[: len(stem) - len(old)] + new + ending
    return stem + ending


def _unspell(
    stem: str, ending: str, spelling: tuple[tuple[str, str, str], ...]
) -> Iterator[str]:
    yield stem
    if ending:
        for old, before, new in spelling:
            if ending[0] in before and stem.endswith(new):
                yield stem[: len(stem) - len(new)] + old


def _parse_class(key: str, raw: Mapping[str, Any]) -> _VerbClass:
    rows = []
    for name, row in raw["rows"].items():
        if name not in ROW_TENSES:
            raise LyricGradeError(f"Unknown conjugation row {name!r} in class {key!r}")
        rows.append(_Row(
            name=name,
            base=row.get("base", "stem"),
            endings=tuple(row["endings"]),
            strong=frozenset(row.get("strong", ())),
            weak=frozenset(row.get("weak", ())),
            stress=frozenset(row.get("stress", ())),
        ))
    return _VerbClass(
        key=key,
        participle=raw["participle"],
        gerund=raw["gerund"],
        rows=tuple(rows),
        future_trim=raw.get("future_trim", 0),
        weak_gerund=raw.get("weak_gerund", False),
        spelling=tuple(tuple(rule) for rule in raw.get("spelling", ())),
    )


class Conjugator:
    """Paradigm tables for one language plus the reverse form index.

    Every table is generated at construction; afterwards the object is
    read-only.
    """

    __slots__ = (
        "_language", "_persons", "_classes", "_verbs", "_default_auxiliary",
        "_compound_rows", "_tables", "_irregular_forms", "_regular_endings",
        "_regular_verbs",
    )

    def __init__(self, language: str, raw: Mapping[str, Any]) -> None:
        self._language = language
        self._persons: tuple[str, ...] = tuple(raw["persons"])
        self._classes = {
            key: _parse_class(key, cls) for key, cls in raw["classes"].items()
        }
        self._verbs: dict[str, dict[str, Any]] = {
            lemma: dict(entry or {}) for lemma, entry in raw["verbs"].items()
        }
        compound = raw.get("compound", {})
        self._default_auxiliary: str = compound.get("auxiliary", "")
        self._compound_rows: dict[str, str] = dict(compound.get("rows", {}))

        for lemma, entry in self._verbs.items():
            model = entry.get("like")
            if model is not None and model not in self._verbs:
                raise LyricGradeError(f"{lemma!r} is modelled on unknown verb {model!r}")
            if model is None and entry.get("class", lemma[-2:]) not in self._classes:
                raise LyricGradeError(f"No conjugation class for {lemma!r}")
            auxiliary = entry.get("auxiliary", self._default_auxiliary)
            if auxiliary and auxiliary not in self._verbs:
                raise LyricGradeError(f"Unknown auxiliary {auxiliary!r} for {lemma!r}")

        self._tables = MappingProxyType({
            lemma: self._build_table(lemma, entry)
            for lemma, entry in sorted(self._verbs.items())
        })
        self._regular_verbs = frozenset(
            lemma for lemma, entry in self._verbs.items()
            if not _IRREGULAR_KEYS.intersection(entry)
        )
        self._irregular_forms = MappingProxyType(self._index_irregular())
        self._regular_endings = self._index_regular_endings()

    # -- Paradigm generation --

    @property
    def language(self) -> str:
        return self._language

    @property
    def persons(self) -> tuple[str, ...]:
        return self._persons

    def _row_base(
        self,
        row: _Row,
        lemma: str,
        stem: str,
        entry: Mapping[str, Any],
        vc: _VerbClass,
        rows: Mapping[str, Mapping[str, str]],
    ) -> tuple[str, bool]:
        """Return (base, stem_change_applies) for one row."""
        override = entry.get("stems", {}).get(row.name)
        if override is not None:
            return override, False
        if row.base == "stem":
            return stem, True
        if row.base == "future":
            future = entry.get("future_stem")
            if future is None:
                future = lemma[: len(lemma) - vc.future_trim]
            return future, False
        # "<ROW>.<person index>-<suffix to drop>"
        source, _, rest = row.base.partition(".")
        index, _, suffix = rest.partition("-")
        form = rows[source][self._persons[int(index)]]
        if suffix and form.endswith(suffix):
            form = form[: len(form) - len(suffix)]
        return form, False

    def _simple_forms(
        self, lemma: str, entry: Mapping[str, Any]
    ) -> tuple[dict[str, dict[str, str]], str, str]:
        """Generate simple rows, participle and gerund for one verb."""
        model = entry.get("like")
        if model is not None:
            prefix = lemma[: len(lemma) - len(model)]
            rows, participle, gerund = self._simple_forms(model, self._verbs[model])
            prefixed = {
                name: {p: prefix + f for p, f in forms.items()}
                for name, forms in rows.items()
            }
            return prefixed, prefix + participle, prefix + gerund

        vc = self._classes[entry.get("class", lemma[-2:])]
        stem = entry.get("stem", lemma[:-2])
        change = entry.get("stem_change", "")
        overrides = entry.get("rows", {})

        rows: dict[str, dict[str, str]] = {}
        for row in vc.rows:
            base, changeable = self._row_base(row, lemma, stem, entry, vc, rows)
            given = overrides.get(row.name, {})
            if isinstance(given, list):
                given = dict(zip(self._persons, given))
            forms: dict[str, str] = {}
            for i, person in enumerate(self._persons):
                if person in given:
                    forms[person] = given[person]
                    continue
                b = base
                if changeable and change:
                    b = _change_stem(b, change, i in row.strong, i in row.weak)
                if i in row.stress:
                    b = _stress(b)
                forms[person] = _spell(b, row.endings[i], vc.spelling)
            rows[row.name] = forms

        participle = entry.get("participle") or _spell(stem, vc.participle, vc.spelling)
        gerund = entry.get("gerund")
        if gerund is None:
            gerund_stem = stem
            if change and vc.weak_gerund:
                gerund_stem = _change_stem(stem, change, False, True)
            gerund = _spell(gerund_stem, vc.gerund, vc.spelling)
        return rows, participle, gerund

    def _auxiliary_for(self, lemma: str, entry: Mapping[str, Any]) -> str:
        auxiliary = entry.get("auxiliary")
        if auxiliary is None and "like" in entry:
            return self._auxiliary_for(entry["like"], self._verbs[entry["like"]])
        return auxiliary or self._default_auxiliary

    def _build_table(self, lemma: str, entry: Mapping[str, Any]) -> ConjugationTable:
        rows, participle, gerund = self._simple_forms(lemma, entry)
        auxiliary = self._auxiliary_for(lemma, entry)
        if auxiliary and self._compound_rows:
            if auxiliary == lemma:
                aux_rows = rows
            else:
                aux_rows, _, _ = self._simple_forms(auxiliary, self._verbs[auxiliary])
            for name, aux_row in self._compound_rows.items():
                rows[name] = {
                    p: f"{aux_rows[aux_row][p]} {participle}" for p in self._persons
                }
        return ConjugationTable(
            lemma=lemma,
            language=self._language,
            infinitive=lemma,
            participle=participle,
            gerund=gerund,
            auxiliary=auxiliary,
            rows=MappingProxyType({
                name: MappingProxyType(forms) for name, forms in rows.items()
            }),
        )

    def is_verb(self, lemma: str) -> bool:
        return lemma in self._verbs

    def table(self, lemma: str) -> ConjugationTable | None:
        """Paradigm for a lemma: known verbs, else regular by infinitive ending."""
        known = self._tables.get(lemma)
        if known is not None:
            return known
        if len(lemma) > 3 and lemma[-2:] in self._classes:
            return self._build_table(lemma, {})
        return None

    # -- Reverse lookup --

    def _index_irregular(self) -> dict[str, tuple[VerbReading, ...]]:
        index: dict[str, set[VerbReading]] = {}
        for lemma, table in self._tables.items():
            if lemma in self._regular_verbs:
                continue
            for name, forms in table.rows.items():
                if name in self._compound_rows:
                    continue
                tense = ROW_TENSES[name]
                for form in forms.values():
                    index.setdefault(form, set()).add(VerbReading(lemma, tense))
            index.setdefault(table.participle, set()).add(
                VerbReading(lemma, None, PARTICIPLE)
            )
            index.setdefault(table.gerund, set()).add(VerbReading(lemma, None, GERUND))
        return {
            form: tuple(sorted(readings, key=VerbReading.sort_key))
            for form, readings in index.items()
        }

    def _index_regular_endings(
        self,
    ) -> tuple[tuple[str, tuple[tuple[str, TenseMood | None, str], ...]], ...]:
        """Endings of every auto-selected class, longest first."""
        endings: dict[str, set[tuple[str, TenseMood | None, str]]] = {}
        for key in self._classes:
            if len(key) != 2:
                continue
            rows, participle, gerund = self._simple_forms(_PLACEHOLDER + key, {})
            for name, forms in rows.items():
                for form in forms.values():
                    endings.setdefault(form[1:], set()).add((key, ROW_TENSES[name], FINITE))
            endings.setdefault(participle[1:], set()).add((key, None, PARTICIPLE))
            endings.setdefault(gerund[1:], set()).add((key, None, GERUND))
        ordered = sorted(endings.items(), key=lambda item: (-len(item[0]), item[0]))
        return tuple(
            (ending, tuple(sorted(entries, key=lambda e: (e[0], e[2], str(e[1])))))
            for ending, entries in ordered
        )

    def irregular_readings(self, form: str) -> tuple[VerbReading, ...]:
        return self._irregular_forms.get(form, ())

    def regular_readings(self, form: str) -> list[VerbReading]:
        """Strip regular endings and keep readings whose infinitive is known."""
        found: set[VerbReading] = set()
        for ending, entries in self._regular_endings:
            if len(form) <= len(ending) or not form.endswith(ending):
                continue
            stem = form[: len(form) - len(ending)]
            for key, tense, kind in entries:
                spelling = self._classes[key].spelling
                for candidate in _unspell(stem, ending, spelling):
                    lemma = candidate + key
                    if lemma in self._regular_verbs:
                        found.add(VerbReading(lemma, tense, kind))
        return sorted(found, key=VerbReading.sort_key)

    def readings(self, form: str, *, regular: bool = True) -> list[VerbReading]:
        """All verb readings of a clean form, best reading first."""
        found: set[VerbReading] = set(self._irregular_forms.get(form, ()))
        if form in self._verbs:
            found.add(VerbReading(form, None, INFINITIVE))
        if regular:
            found.update(self.regular_readings(form))
        return sorted(found, key=VerbReading.sort_key)
