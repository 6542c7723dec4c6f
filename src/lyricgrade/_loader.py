"""Data loading, manifest validation, and SHA-256 checksum verification."""

from __future__ import annotations

import hashlib
import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any, Iterable

import msgpack

from ._errors import (
    DataChecksumError,
    DataVersionError,
    LyricGradeError,
    UnsupportedLanguageError,
)
from ._profile import LanguageProfile

logger = logging.getLogger(__name__)

_EXPECTED_VERSION = "1.0"

ASSET_NAMES = ("rules", "lexicon", "verbs", "frequency", "idioms", "phrases")
_EXTENSIONS = {"json": ".json", "msgpack": ".bin"}


def _default_data_dir() -> Path:
    return Path(str(resources.files("lyricgrade") / "data"))


def _sha256(path: Path) -> str:
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(65536), b""):
            h.update(chunk)
    return h.hexdigest()


def _read_manifest(data_dir: Path) -> dict[str, Any]:
    manifest_path = data_dir / "manifest.json"
    if not manifest_path.exists():
        raise LyricGradeError(f"manifest.json not found in {data_dir}")
    with open(manifest_path, encoding="utf-8") as f:
        return json.load(f)


def _asset_files(manifest: dict[str, Any], languages: Iterable[str]) -> list[str]:
    fmt = manifest.get("format", "json")
    extension = _EXTENSIONS.get(fmt)
    if extension is None:
        raise LyricGradeError(f"Unknown data format {fmt!r}")
    return [f"{lang}/{name}{extension}" for lang in languages for name in ASSET_NAMES]


def _validate_manifest(
    manifest: dict[str, Any], data_dir: Path, languages: Iterable[str]
) -> None:
    version = manifest.get("version")
    if version != _EXPECTED_VERSION:
        raise DataVersionError(
            f"Expected data version {_EXPECTED_VERSION!r}, got {version!r}"
        )
    checksums = manifest.get("files", {})
    for filename in _asset_files(manifest, languages):
        filepath = data_dir / filename
        if not filepath.exists():
            raise LyricGradeError(f"Missing data file: {filepath}")
        expected = checksums.get(filename)
        if expected is None:
            raise LyricGradeError(f"No checksum in manifest for {filename}")
        actual = _sha256(filepath)
        if actual != expected:
            raise DataChecksumError(
                f"Checksum mismatch for {filename}: "
                f"expected {expected[:16]}..., got {actual[:16]}..."
            )


def _load_json(path: Path) -> Any:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def _load_msgpack(path: Path) -> Any:
    with open(path, "rb") as f:
        return msgpack.unpackb(f.read(), raw=False)


def _select_languages(
    manifest: dict[str, Any], languages: Iterable[str] | None
) -> list[str]:
    available = list(manifest.get("languages", []))
    if languages is None:
        return available
    selected = list(languages)
    for lang in selected:
        if lang not in available:
            raise UnsupportedLanguageError(
                f"No data for language {lang!r}; available: {available}"
            )
    return selected


def load_assets(
    data_dir: Path | str | None = None,
    languages: Iterable[str] | None = None,
) -> dict[str, dict[str, Any]]:
    """Load and validate raw assets, keyed by language then asset name."""
    if data_dir is None:
        data_dir = _default_data_dir()
    else:
        data_dir = Path(data_dir)

    manifest = _read_manifest(data_dir)
    selected = _select_languages(manifest, languages)
    _validate_manifest(manifest, data_dir, selected)

    loader = _load_msgpack if manifest.get("format") == "msgpack" else _load_json
    extension = _EXTENSIONS[manifest.get("format", "json")]
    return {
        lang: {
            name: loader(data_dir / lang / f"{name}{extension}")
            for name in ASSET_NAMES
        }
        for lang in selected
    }


def load_data(
    data_dir: Path | str | None = None,
    languages: Iterable[str] | None = None,
) -> dict[str, LanguageProfile]:
    """Load and validate all data files, returning one profile per language."""
    assets = load_assets(data_dir, languages)
    profiles: dict[str, LanguageProfile] = {}
    for lang, raw in assets.items():
        profile = LanguageProfile.from_assets(lang, raw)
        logger.info(
            "Loaded %s profile: %d lexicon entries, %d frequencies, %d idioms",
            lang, len(profile.lexicon), len(profile.frequencies), len(profile.idioms),
        )
        profiles[lang] = profile
    return profiles


def pack_data(
    src_dir: Path | str | None,
    dst_dir: Path | str,
    languages: Iterable[str] | None = None,
) -> Path:
    """Write a msgpack copy of a data directory with a fresh manifest.

    The source is validated first; the result is loadable by ``load_data``.
    Returns the destination directory.
    """
    assets = load_assets(src_dir, languages)
    dst = Path(dst_dir)
    files: dict[str, str] = {}
    for lang, raw in assets.items():
        (dst / lang).mkdir(parents=True, exist_ok=True)
        for name in ASSET_NAMES:
            relative = f"{lang}/{name}{_EXTENSIONS['msgpack']}"
            with open(dst / relative, "wb") as f:
                f.write(msgpack.packb(raw[name], use_bin_type=True))
            files[relative] = _sha256(dst / relative)

    manifest = {
        "version": _EXPECTED_VERSION,
        "format": "msgpack",
        "languages": list(assets),
        "files": files,
    }
    with open(dst / "manifest.json", "w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, sort_keys=True)
    logger.info("Packed %d files for %s into %s", len(files), list(assets), dst)
    return dst
