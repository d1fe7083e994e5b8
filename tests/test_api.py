"""Tests for the top-level public API."""

from __future__ import annotations

import pytest

import sexpreader
from sexpreader import (
    Boolean,
    DiagnosticCode,
    DottedPair,
    Integer,
    List,
    ParseError,
    ParseResult,
    SexpError,
    SexpSyntaxError,
    Symbol,
    Text,
    parse,
    parse_all,
    parse_expression,
)


class TestPublicAPI:
    """Test exports and version metadata."""

    def test_all_exports_resolve(self) -> None:
        for name in sexpreader.__all__:
            assert hasattr(sexpreader, name), name

    def test_version_is_string(self) -> None:
        assert isinstance(sexpreader.__version__, str)
        assert sexpreader.__version__


class TestParseSeeds:
    """Literal scenarios for parse()."""

    def test_text(self) -> None:
        assert parse('"hello"') == ("", Text("hello"))

    def test_integer(self) -> None:
        assert parse("23") == ("", Integer(23))

    def test_symbol(self) -> None:
        assert parse("$foo") == ("", Symbol("$foo"))

    def test_boolean(self) -> None:
        assert parse("#f") == ("", Boolean(False))

    def test_quote(self) -> None:
        assert parse("'52") == ("", List((Symbol("quote"), Integer(52))))

    def test_dotted_pair_precedence(self) -> None:
        assert parse("(a . b)") == ("", DottedPair((Symbol("a"),), Symbol("b")))
        assert parse("(a b)") == ("", List((Symbol("a"), Symbol("b"))))

    @pytest.mark.parametrize("source", ["j5", "jlsdf"])
    def test_letter_led_tokens_are_symbols(self, source: str) -> None:
        """Only the integer parser rejects these; as expressions they are symbols."""
        assert parse(source) == ("", Symbol(source))


class TestConvenienceFunctions:
    """Test module-level parse_expression / parse / parse_all."""

    def test_parse_expression_success(self) -> None:
        result = parse_expression("(1 2) x")

        assert isinstance(result, ParseResult)
        assert result.value == List((Integer(1), Integer(2)))
        assert result.remaining == " x"

    def test_parse_expression_failure(self) -> None:
        result = parse_expression("(1 2")

        assert isinstance(result, ParseError)
        assert result.code == DiagnosticCode.UNEXPECTED_EOF

    def test_parse_raises(self) -> None:
        with pytest.raises(SexpSyntaxError):
            parse("")

    def test_syntax_error_is_sexp_error(self) -> None:
        with pytest.raises(SexpError):
            parse(")")

    def test_parse_all(self) -> None:
        assert parse_all("1 \"two\" three") == (Integer(1), Text("two"), Symbol("three"))
