"""Test single-character classification."""

import string

import pytest

from rud.chars import Char


class TestLetters:
    @pytest.mark.parametrize("c", string.ascii_lowercase)
    def test_lowercase(self, c):
        ch = Char(c)
        assert ch.is_lowercase()
        assert not ch.is_uppercase()
        assert ch.is_alphabetic()

    @pytest.mark.parametrize("c", string.ascii_uppercase)
    def test_uppercase(self, c):
        ch = Char(c)
        assert ch.is_uppercase()
        assert not ch.is_lowercase()
        assert ch.is_alphabetic()

    def test_non_ascii_letter_is_not_alphabetic(self):
        assert not Char("é").is_alphabetic()
        assert not Char("é").is_alphanumeric()


class TestDigits:
    @pytest.mark.parametrize("c", string.digits)
    def test_digit(self, c):
        assert Char(c).is_digit()
        assert not Char(c).is_alphabetic()

    def test_zero(self):
        assert Char("0").is_zero()
        assert not Char("1").is_zero()

    def test_non_ascii_digit(self):
        assert not Char("٣").is_digit()


class TestPunctuation:
    @pytest.mark.parametrize("c", string.punctuation)
    def test_ascii_punctuation(self, c):
        assert Char(c).is_ascii_punctuation()

    @pytest.mark.parametrize("c", ["a", "Z", "5", " ", "\n", "\t", "é"])
    def test_not_punctuation(self, c):
        assert not Char(c).is_ascii_punctuation()


class TestSymbols:
    def test_single_symbols(self):
        assert Char('"').is_double_quote()
        assert Char("'").is_single_quote()
        assert Char("&").is_ampersand()
        assert Char("(").is_left_paren()
        assert Char(")").is_right_paren()
        assert Char("=").is_assign()
        assert Char("_").is_underscore()

    def test_symbols_do_not_cross_match(self):
        assert not Char("(").is_right_paren()
        assert not Char("'").is_double_quote()


class TestWhitespace:
    def test_space(self):
        assert Char(" ").is_whitespace()

    def test_tab_is_not_whitespace(self):
        assert not Char("\t").is_whitespace()

    def test_line_term(self):
        assert Char("\n").is_line_term()
        assert not Char("\n").is_whitespace()
        assert not Char(" ").is_line_term()


class TestWordChars:
    @pytest.mark.parametrize("c", ["a", "Q", "7", "_", "\n"])
    def test_word_char(self, c):
        assert Char(c).is_word_char()

    @pytest.mark.parametrize("c", [" ", "(", '"', "\t"])
    def test_not_word_char(self, c):
        assert not Char(c).is_word_char()
