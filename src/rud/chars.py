"""Single-character classification."""

from __future__ import annotations

from dataclasses import dataclass

LINE_TERM = "\n"
WHITESPACE = " "
DOUBLE_QUOTE = '"'
SINGLE_QUOTE = "'"
AMPERSAND = "&"
LEFT_PAREN = "("
RIGHT_PAREN = ")"
ASSIGN = "="
UNDERSCORE = "_"
ZERO = "0"


@dataclass(frozen=True, slots=True)
class Char:
    """One source character with named classification predicates."""

    value: str

    # Single-symbol comparisons

    def is_zero(self) -> bool:
        return self.value == ZERO

    def is_line_term(self) -> bool:
        return self.value == LINE_TERM

    def is_whitespace(self) -> bool:
        # Only a plain space; tabs are not whitespace in Rud.
        return self.value == WHITESPACE

    def is_double_quote(self) -> bool:
        return self.value == DOUBLE_QUOTE

    def is_ampersand(self) -> bool:
        return self.value == AMPERSAND

    def is_single_quote(self) -> bool:
        return self.value == SINGLE_QUOTE

    def is_left_paren(self) -> bool:
        return self.value == LEFT_PAREN

    def is_right_paren(self) -> bool:
        return self.value == RIGHT_PAREN

    def is_assign(self) -> bool:
        return self.value == ASSIGN

    def is_underscore(self) -> bool:
        return self.value == UNDERSCORE

    # Categories

    def is_digit(self) -> bool:
        return "0" <= self.value <= "9"

    def is_lowercase(self) -> bool:
        return "a" <= self.value <= "z"

    def is_uppercase(self) -> bool:
        return "A" <= self.value <= "Z"

    def is_alphabetic(self) -> bool:
        return self.is_lowercase() or self.is_uppercase()

    def is_alphanumeric(self) -> bool:
        return self.is_alphabetic() or self.is_digit()

    def is_ascii_punctuation(self) -> bool:
        """Return True for printable ASCII that is neither a letter, digit nor space."""
        v = self.value
        return "!" <= v <= "/" or ":" <= v <= "@" or "[" <= v <= "`" or "{" <= v <= "~"

    def is_word_char(self) -> bool:
        """Return True if the character extends a word lookahead.

        Line terminators count as word characters here, so a word can run
        across a line break.
        """
        return self.is_alphanumeric() or self.is_underscore() or self.is_line_term()
