"""lyricgrade error types."""


class LyricGradeError(Exception):
    """Base error for all lyricgrade failures."""


class InvalidInputError(LyricGradeError, ValueError):
    """Difficulty requested for an empty sequence of lines."""


class UnsupportedLanguageError(LyricGradeError, KeyError):
    """No language profile is loaded for the requested language code."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class DataVersionError(LyricGradeError):
    """Manifest version mismatch."""


class DataChecksumError(LyricGradeError):
    """File checksum verification failed."""
