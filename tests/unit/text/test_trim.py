"""Tests for primkit.text.trim."""

import pytest

from primkit.core.constants import DEFAULT_TRIM_CHARS
from primkit.text.trim import (
    PatternTrimmer,
    compile_charset,
    escape_charset,
    trim,
    trim_end,
    trim_start,
)


class TestEscapeCharset:
    """Tests for escape_charset()."""

    @pytest.mark.parametrize("char", list("-/\\^$*+?.()|[]{}"))
    def test_special_characters_escaped(self, char: str) -> None:
        assert escape_charset(char) == "\\" + char

    def test_plain_characters_pass_through(self) -> None:
        assert escape_charset("#!ab 9") == "#!ab 9"

    def test_mixed(self) -> None:
        assert escape_charset("a-z") == "a\\-z"


class TestTrim:
    """Tests for trim(), trim_start() and trim_end()."""

    def test_both_ends(self) -> None:
        assert trim("#!#!Hey!#!#!", "#!") == "Hey"

    def test_start_only(self) -> None:
        assert trim_start("#!#!Hey!#!#!", "#!") == "Hey!#!#!"

    def test_end_only(self) -> None:
        assert trim_end("#!#!Hey!#!#!", "#!") == "#!#!Hey"

    def test_default_whitespace_set(self) -> None:
        assert trim("\ufeff\xa0 \r\n hello world \n\r\xa0") == "hello world"

    def test_default_set_leaves_tabs(self) -> None:
        assert trim("\thello\t") == "\thello\t"

    def test_empty_charset_falls_back_to_default(self) -> None:
        assert trim("  hi  ", "") == "hi"
        assert trim_start("  hi  ", "") == "hi  "
        assert trim_end("  hi  ", "") == "  hi"

    @pytest.mark.parametrize("chars", [None, "", "#!", "a-z^$"], ids=["none", "empty", "hash_bang", "meta"])
    def test_empty_input(self, chars: str | None) -> None:
        assert trim("", chars) == ""
        assert trim_start("", chars) == ""
        assert trim_end("", chars) == ""

    def test_whole_string_of_charset_chars_becomes_empty(self) -> None:
        assert trim("!#!#", "#!") == ""
        assert trim_start("!#!#", "#!") == ""
        assert trim_end("!#!#", "#!") == ""

    def test_interior_untouched(self) -> None:
        assert trim("--a-b--", "-") == "a-b"

    def test_dash_is_not_a_range(self) -> None:
        # "a-z" is the three characters a, -, z; "m" is not trimmed
        assert trim("azm-za", "a-z") == "m"
        assert trim("mmm", "a-z") == "mmm"

    def test_caret_is_not_negation(self) -> None:
        assert trim("^^x^^", "^") == "x"
        assert trim("abc", "^") == "abc"

    def test_metacharacters_matched_literally(self) -> None:
        assert trim("$^a-zKEEPz-a^$", "a-z^$") == "KEEP"
        assert trim("bcd", "a-z^$") == "bcd"

    @pytest.mark.parametrize("chars", ["\\", "]", "[]", ".*", "()", "{}", "|", "/"])
    def test_bracket_and_backslash_charsets(self, chars: str) -> None:
        assert trim(f"{chars}x{chars}", chars) == "x"

    def test_order_and_duplicates_irrelevant(self) -> None:
        text = "xyyxHeyyxx"
        assert trim(text, "xy") == trim(text, "yxyyx") == "He"

    def test_trailing_newline_not_special(self) -> None:
        # The end anchor only matches at the true end of the string
        assert trim_end("abx\n", "x") == "abx\n"
        assert trim("xabx\n", "x") == "abx\n"

    def test_input_not_mutated(self) -> None:
        text = "  keep  "
        trim(text)
        assert text == "  keep  "

    @pytest.mark.parametrize(
        "text,chars",
        [
            ("#!#!Hey!#!#!", "#!"),
            ("  padded  ", None),
            ("aaaa", "a"),
            ("-a-z-", "a-z"),
            ("no match", "#"),
        ],
    )
    def test_trim_equals_start_then_end(self, text: str, chars: str | None) -> None:
        result = trim(text, chars)
        assert result == trim_end(trim_start(text, chars), chars)
        charset = set(chars or DEFAULT_TRIM_CHARS)
        if result:
            assert result[0] not in charset
            assert result[-1] not in charset


class TestCompileCharset:
    """Tests for compile_charset() caching."""

    def test_equivalent_charsets_share_patterns(self) -> None:
        assert compile_charset("ab") is compile_charset("bba")

    def test_none_uses_default(self) -> None:
        assert compile_charset(None) is compile_charset(DEFAULT_TRIM_CHARS)


class TestPatternTrimmer:
    """Tests for PatternTrimmer with a custom default charset."""

    def test_custom_default(self) -> None:
        trimmer = PatternTrimmer("*")
        assert trimmer.trim("**bold**") == "bold"
        assert trimmer.trim_start("**bold**") == "bold**"
        assert trimmer.trim_end("**bold**") == "**bold"

    def test_explicit_charset_overrides_default(self) -> None:
        trimmer = PatternTrimmer("*")
        assert trimmer.trim("__x__", "_") == "x"

    def test_empty_default_uses_whitespace(self) -> None:
        trimmer = PatternTrimmer("")
        assert trimmer.default_chars == DEFAULT_TRIM_CHARS
        assert trimmer.trim(" x ") == "x"

    def test_empty_charset_logs_fallback(self, log_messages: list[str]) -> None:
        PatternTrimmer("*").trim("*x*", "")
        assert any("Empty trim charset" in m for m in log_messages)
