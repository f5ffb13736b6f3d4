"""Test integer literal scanning and 64-bit overflow handling."""

from monkeylex.tokens import INT64_MAX, Token, TokenType, is_digit

from .conftest import assert_raws, assert_types, assert_values


class TestIsDigit:
    def test_ascii_digits(self):
        for ch in "0123456789":
            assert is_digit(ch)

    def test_non_ascii_digits_rejected(self):
        # Arabic-Indic three, fullwidth one, superscript two
        for ch in "٣１²":
            assert not is_digit(ch)


class TestIntegerLexing:
    def test_single_digit(self, lex):
        tokens = lex("5")
        assert tokens == [Token(TokenType.INT, 5, "5")]

    def test_multi_digit(self, lex):
        tokens = lex("1234567")
        assert tokens == [Token(TokenType.INT, 1234567, "1234567")]

    def test_leading_zeros(self, lex):
        tokens = lex("007")
        assert tokens == [Token(TokenType.INT, 7, "007")]

    def test_followed_by_semicolon(self, lex):
        tokens = lex("7;")
        assert_types(tokens, [TokenType.INT, TokenType.SEMICOLON])
        assert_raws(tokens, ["7", ";"])

    def test_followed_by_letters(self, lex):
        tokens = lex("5five")
        assert_types(tokens, [TokenType.INT, TokenType.IDENT])
        assert_values(tokens, [5, "five"])

    def test_minus_is_separate_token(self, lex):
        tokens = lex("-5")
        assert_types(tokens, [TokenType.MINUS, TokenType.INT])
        assert_values(tokens, [None, 5])

    def test_non_ascii_digit_is_illegal(self, lex):
        tokens = lex("1٣2")
        assert_types(tokens, [TokenType.INT, TokenType.ILLEGAL, TokenType.INT])
        assert_values(tokens, [1, None, 2])


class TestOverflow:
    def test_max_int64(self, lex):
        tokens = lex(str(INT64_MAX))
        assert tokens == [Token(TokenType.INT, 9223372036854775807, "9223372036854775807")]

    def test_one_past_max_is_illegal(self, lex):
        tokens = lex("9223372036854775808")
        assert tokens == [Token(TokenType.ILLEGAL, None, "9223372036854775808")]

    def test_overflow_consumes_whole_run(self, lex):
        tokens = lex("99999999999999999999999;1")
        assert_types(tokens, [TokenType.ILLEGAL, TokenType.SEMICOLON, TokenType.INT])
        assert_values(tokens, [None, None, 1])

    def test_overflow_is_logged(self, lex, caplog):
        with caplog.at_level("DEBUG", logger="monkeylex.lexer"):
            lex("18446744073709551616")
        assert "overflows int64" in caplog.text
