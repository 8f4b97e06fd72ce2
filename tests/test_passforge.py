"""Tests for password generation and strength scoring."""

from unittest.mock import patch

import pytest

from passforge import (
    AMBIGUOUS,
    MAX_LENGTH,
    MIN_LENGTH,
    SYMBOLS,
    CharsetOptions,
    EmptyCharsetError,
    GenerationError,
    InvalidLengthError,
    build_charset,
    generate_password,
    score_password,
    score_strength,
    strength_label,
)


# ── Fixtures / helpers ─────────────────────────────────────────────────────

ALL = CharsetOptions(
    include_uppercase=True,
    include_lowercase=True,
    include_numbers=True,
    include_symbols=True,
)
ALL_UNAMBIGUOUS = CharsetOptions(
    include_uppercase=True,
    include_lowercase=True,
    include_numbers=True,
    include_symbols=True,
    exclude_ambiguous=True,
)
UPPER_ONLY = CharsetOptions(include_uppercase=True)


# ── build_charset ──────────────────────────────────────────────────────────


class TestBuildCharset:
    def test_fixed_class_order(self):
        charset = build_charset(ALL)
        assert charset == (
            "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
            "abcdefghijklmnopqrstuvwxyz"
            "0123456789"
            "!@#$%^&*()_+-=[]{}|;:,.<>?"
        )
        assert len(charset) == 88

    def test_no_classes_is_empty(self):
        assert build_charset(CharsetOptions()) == ""

    def test_exclude_ambiguous_only_flag_is_empty(self):
        assert build_charset(CharsetOptions(exclude_ambiguous=True)) == ""

    def test_exclude_ambiguous_letters_and_numbers(self):
        charset = build_charset(ALL_UNAMBIGUOUS)
        assert not set(AMBIGUOUS) & set(charset)
        assert len(charset) == 24 + 25 + 8 + len(SYMBOLS)

    def test_exclude_ambiguous_numbers_only(self):
        opts = CharsetOptions(include_numbers=True, exclude_ambiguous=True)
        assert build_charset(opts) == "23456789"

    def test_symbols_never_filtered(self):
        opts = CharsetOptions(include_symbols=True, exclude_ambiguous=True)
        assert build_charset(opts) == SYMBOLS

    def test_options_are_immutable(self):
        with pytest.raises(AttributeError):
            ALL.include_symbols = False


# ── generate_password ──────────────────────────────────────────────────────


class TestGeneratePassword:
    @pytest.mark.parametrize("length", [MIN_LENGTH, 12, 16, MAX_LENGTH])
    def test_exact_length(self, length):
        assert len(generate_password(length, ALL)) == length

    def test_chars_from_charset(self):
        charset = set(build_charset(ALL))
        for _ in range(20):
            assert set(generate_password(MAX_LENGTH, ALL)) <= charset

    def test_single_class(self):
        for _ in range(20):
            pwd = generate_password(20, CharsetOptions(include_numbers=True))
            assert pwd.isdigit()

    def test_no_ambiguous_chars(self):
        for _ in range(50):
            pwd = generate_password(MAX_LENGTH, ALL_UNAMBIGUOUS)
            assert not set(AMBIGUOUS) & set(pwd)

    def test_empty_charset_raises(self):
        with pytest.raises(EmptyCharsetError, match="at least one"):
            generate_password(16, CharsetOptions())

    def test_empty_charset_with_exclude_ambiguous_raises(self):
        with pytest.raises(EmptyCharsetError):
            generate_password(16, CharsetOptions(exclude_ambiguous=True))

    @pytest.mark.parametrize("length", [0, 3, 51, -1])
    def test_out_of_range_length_raises(self, length):
        with pytest.raises(InvalidLengthError, match="between 4 and 50"):
            generate_password(length, ALL)

    @pytest.mark.parametrize("length", ["16", 16.0, None, True])
    def test_non_integer_length_raises(self, length):
        with pytest.raises(InvalidLengthError):
            generate_password(length, ALL)

    def test_errors_are_value_errors(self):
        assert issubclass(EmptyCharsetError, GenerationError)
        assert issubclass(InvalidLengthError, ValueError)

    @patch("passforge.secrets.token_bytes")
    def test_byte_modulo_index(self, mock_bytes):
        mock_bytes.return_value = bytes([0, 25, 26, 255])
        assert generate_password(4, UPPER_ONLY) == "AZAV"
        mock_bytes.assert_called_once_with(4)

    @patch("passforge.secrets.token_bytes")
    def test_bytes_map_in_charset_order(self, mock_bytes):
        mock_bytes.return_value = bytes(range(MAX_LENGTH))
        assert generate_password(MAX_LENGTH, ALL) == build_charset(ALL)[:MAX_LENGTH]

    def test_uniqueness(self):
        passwords = {generate_password(16, ALL) for _ in range(50)}
        assert len(passwords) == 50


# ── score_password / strength_label ────────────────────────────────────────


class TestScorePassword:
    @pytest.mark.parametrize(
        "password, expected",
        [
            ("", 0),
            ("abcdefgh", 2),
            ("Abcdefgh123", 4),
            ("Abcdefgh12345!", 6),
            ("A1!aaaaaaaaaaaaaaaa", 7),
        ],
    )
    def test_rubric(self, password, expected):
        assert score_password(password) == expected

    def test_length_thresholds_stack(self):
        assert score_password("a" * 7) == 1
        assert score_password("a" * 8) == 2
        assert score_password("a" * 12) == 3
        assert score_password("a" * 16) == 4

    def test_short_all_classes(self):
        assert score_password("aB1!") == 4

    def test_non_ascii_counts_as_other(self):
        assert score_password("é") == 1
        assert score_password("ÀÉ") == 1

    def test_space_counts_as_other(self):
        assert score_password("a b") == 2


class TestStrengthLabel:
    @pytest.mark.parametrize(
        "score, label",
        [
            (0, "Weak"), (1, "Weak"), (2, "Weak"),
            (3, "Fair"), (4, "Fair"),
            (5, "Good"),
            (6, "Strong"), (7, "Strong"),
        ],
    )
    def test_mapping(self, score, label):
        assert strength_label(score) == label

    @pytest.mark.parametrize("score", [-1, 8])
    def test_out_of_range(self, score):
        with pytest.raises(ValueError):
            strength_label(score)


class TestScoreStrength:
    def test_empty_password(self):
        r = score_strength("")
        assert r["score"] == 0
        assert r["label"] == "Weak"
        assert r["length"] == 0

    def test_fair(self):
        assert score_strength("Abcdefgh123")["label"] == "Fair"

    def test_strong(self):
        r = score_strength("Abcdefgh12345!")
        assert r["score"] == 6
        assert r["label"] == "Strong"

    def test_all_char_classes(self):
        c = score_strength("aB1!")["char_classes"]
        assert c == {
            "lowercase": True,
            "uppercase": True,
            "numbers": True,
            "symbols": True,
        }

    def test_generated_password_score(self):
        pwd = generate_password(16, ALL)
        # Length alone gives 3 points; any class present adds more.
        assert score_strength(pwd)["score"] >= 4
