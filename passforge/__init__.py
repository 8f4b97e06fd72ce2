"""PassForge -- random password generation and strength scoring.

Core functions for building a character set from selected options,
generating passwords from it, and rating them with a simple rubric.
History handling lives in :mod:`passforge.history`.
"""

import logging
import re
import secrets
import string
from dataclasses import dataclass

logger = logging.getLogger(__name__)

MIN_LENGTH = 4
MAX_LENGTH = 50
DEFAULT_LENGTH = 16

UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
NUMBERS = string.digits
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"
AMBIGUOUS = "0O1lI"


# ── Errors ─────────────────────────────────────────────────────────────────


class PassforgeError(Exception):
    """Base class for all passforge errors."""


class GenerationError(PassforgeError, ValueError):
    """A password could not be generated from the given input."""


class EmptyCharsetError(GenerationError):
    """No character class was selected."""


class InvalidLengthError(GenerationError):
    """Requested length is outside the supported range."""


class HistoryStoreError(PassforgeError):
    """History could not be loaded, saved or exported."""


# ── Password generation ────────────────────────────────────────────────────


@dataclass(frozen=True)
class CharsetOptions:
    """Character classes to draw from.

    At least one of the ``include_*`` flags must be set.  When
    ``exclude_ambiguous`` is set, ``0 O 1 l I`` are dropped from the
    letter and number classes; symbols are never filtered.
    """

    include_uppercase: bool = False
    include_lowercase: bool = False
    include_numbers: bool = False
    include_symbols: bool = False
    exclude_ambiguous: bool = False

    @property
    def any_class(self) -> bool:
        return (
            self.include_uppercase
            or self.include_lowercase
            or self.include_numbers
            or self.include_symbols
        )


def _without_ambiguous(chars: str) -> str:
    return "".join(c for c in chars if c not in AMBIGUOUS)


def build_charset(options: CharsetOptions) -> str:
    """Return the pool of eligible characters for *options*.

    Classes are concatenated in a fixed order: uppercase, lowercase,
    numbers, symbols.  Returns an empty string when no class is selected.
    """
    charset = ""
    for enabled, chars in (
        (options.include_uppercase, UPPERCASE),
        (options.include_lowercase, LOWERCASE),
        (options.include_numbers, NUMBERS),
    ):
        if enabled:
            charset += _without_ambiguous(chars) if options.exclude_ambiguous else chars
    if options.include_symbols:
        charset += SYMBOLS
    return charset


def generate_password(length: int, options: CharsetOptions) -> str:
    """Generate a random password of exactly *length* characters.

    Each position takes one byte from :func:`secrets.token_bytes` and uses
    ``byte % len(charset)`` as the index.  This carries a small modulo bias
    when the charset size does not divide 256.

    Raises :class:`InvalidLengthError` for a length outside
    ``MIN_LENGTH..MAX_LENGTH`` and :class:`EmptyCharsetError` when no
    character class is selected.
    """
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidLengthError(f"Password length must be an integer, got {length!r}")
    if not MIN_LENGTH <= length <= MAX_LENGTH:
        raise InvalidLengthError(
            f"Password length must be between {MIN_LENGTH} and {MAX_LENGTH}, got {length}"
        )

    charset = build_charset(options)
    if not charset:
        raise EmptyCharsetError("Please select at least one character type")

    size = len(charset)
    logger.debug("Generating %d characters from a charset of %d", length, size)
    return "".join(charset[byte % size] for byte in secrets.token_bytes(length))


# ── Strength analysis ──────────────────────────────────────────────────────

_LENGTH_THRESHOLDS = (8, 12, 16)

_CLASS_PATTERNS = {
    "lowercase": re.compile(r"[a-z]"),
    "uppercase": re.compile(r"[A-Z]"),
    "numbers":   re.compile(r"[0-9]"),
    "symbols":   re.compile(r"[^A-Za-z0-9]"),
}

MAX_SCORE = len(_LENGTH_THRESHOLDS) + len(_CLASS_PATTERNS)

_LABELS = ["Weak", "Weak", "Weak", "Fair", "Fair", "Good", "Strong", "Strong"]


def _char_classes(password: str) -> dict[str, bool]:
    return {name: bool(p.search(password)) for name, p in _CLASS_PATTERNS.items()}


def score_password(password: str) -> int:
    """Return the rubric score (0-7) of *password*.

    One point for each length threshold reached (8, 12, 16) and one for
    each character class present: lowercase, uppercase, digit, other.
    """
    length_points = sum(len(password) >= n for n in _LENGTH_THRESHOLDS)
    return length_points + sum(_char_classes(password).values())


def strength_label(score: int) -> str:
    """Map a rubric score to Weak, Fair, Good or Strong."""
    if not 0 <= score <= MAX_SCORE:
        raise ValueError(f"Score must be between 0 and {MAX_SCORE}, got {score}")
    return _LABELS[score]


def score_strength(password: str) -> dict:
    """Score *password* and return a small report.

    Returns a dict with keys:
        length       -- int
        char_classes -- dict[str, bool]  (lowercase, uppercase, numbers, symbols)
        score        -- int 0-7
        label        -- str
    """
    score = score_password(password)
    return {
        "length": len(password),
        "char_classes": _char_classes(password),
        "score": score,
        "label": strength_label(score),
    }


__all__ = [
    "AMBIGUOUS",
    "DEFAULT_LENGTH",
    "LOWERCASE",
    "MAX_LENGTH",
    "MAX_SCORE",
    "MIN_LENGTH",
    "NUMBERS",
    "SYMBOLS",
    "UPPERCASE",
    "CharsetOptions",
    "EmptyCharsetError",
    "GenerationError",
    "HistoryStoreError",
    "InvalidLengthError",
    "PassforgeError",
    "build_charset",
    "generate_password",
    "score_password",
    "score_strength",
    "strength_label",
]
