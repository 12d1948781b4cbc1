"""Rud lexer — converts source text into a flat token stream."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from rud.builtins import RESERVED_WORDS, STD_FUNCTIONS, is_reserved_word, is_std_fn_name
from rud.chars import Char
from rud.errors import ErrorKind, LexError
from rud.tokens import Punct, Span, Token

logger = logging.getLogger(__name__)

INDENT_WIDTH = 4

_PUNCT_SYMBOLS: dict[str, Punct] = {
    "(": Punct.LEFT_PAREN,
    ")": Punct.RIGHT_PAREN,
    "=": Punct.ASSIGN,
}


@dataclass(slots=True)
class Cursor:
    """Scan position plus one scratch field. Only ever moves forward."""

    pos: int = 0
    tmp: int = 0

    def advance(self, count: int = 1) -> None:
        self.pos += count


class Source:
    """Immutable character buffer built once from the input string."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.code: tuple[Char, ...] = tuple(Char(c) for c in text)

    def __len__(self) -> int:
        return len(self.code)

    def __getitem__(self, pos: int) -> Char:
        return self.code[pos]


class Lexer:
    """Tokenize Rud source text into a list of Token objects.

    Rules are tried in a fixed order at each position; the first one that
    matches consumes input and the scan restarts from the top.
    """

    def __init__(self, source: str, filename: str = "input.rud") -> None:
        self._source = Source(source)
        self._filename = filename
        self._cursor = Cursor()

    @property
    def pos(self) -> int:
        return self._cursor.pos

    def scan_to_tokens(self) -> list[Token]:
        """Scan the whole buffer and return the token list."""
        tokens: list[Token] = []
        while not self._is_end():
            if self.skip_whitespace():
                continue
            token = (
                self.try_line_term()
                or self.try_indent()
                or self.try_reserved()
                or self.try_std_fn()
                or self.try_identifier()
                or self.try_string_lit()
                or self.try_punct()
            )
            if token is None:
                raise self._error(ErrorKind.SCAN_FAILURE, f"unscannable character {self._peek().value!r}")
            tokens.append(token)
        logger.debug("%s: scanned %d tokens", self._filename, len(tokens))
        return tokens

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _is_end(self) -> bool:
        return self._cursor.pos >= len(self._source)

    def _peek(self) -> Char:
        return self._source[self._cursor.pos]

    def _error(self, kind: ErrorKind, message: str, start: int | None = None) -> LexError:
        if start is None:
            start = self._cursor.pos
        return LexError(kind, message, Span(start, start), self._source.text)

    def _take(self, width: int) -> Span:
        """Advance over *width* characters and return the span they cover."""
        start = self._cursor.pos
        self._cursor.advance(width)
        return Span(start, self._cursor.pos - 1)

    def _is_indent(self) -> bool:
        pos = self._cursor.pos
        if len(self._source) - pos < INDENT_WIDTH:
            return False
        return all(self._source[pos + i].is_whitespace() for i in range(INDENT_WIDTH))

    def peek_word(self) -> str:
        """Return the maximal word starting at the cursor without moving it.

        A word is a run of alphanumerics, underscores and line terminators. It
        ends at a space or ASCII punctuation; any other character cannot be
        scanned at all.
        """
        pos = self._cursor.pos
        chars: list[str] = []
        while pos < len(self._source):
            ch = self._source[pos]
            if ch.is_word_char():
                chars.append(ch.value)
            elif ch.is_whitespace() or ch.is_ascii_punctuation():
                break
            else:
                raise self._error(ErrorKind.SCAN_FAILURE, f"unscannable character {ch.value!r}", pos)
            pos += 1
        return "".join(chars)

    # ------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------

    def skip_whitespace(self) -> bool:
        """Skip one space unless it starts an indent run. Return True if skipped."""
        if self._peek().is_whitespace() and not self._is_indent():
            self._cursor.advance()
            return True
        return False

    def try_line_term(self) -> Token | None:
        if not self._peek().is_line_term():
            return None
        return Token.line_term(self._take(1))

    def try_indent(self) -> Token | None:
        if not self._is_indent():
            return None
        return Token.indent(self._take(INDENT_WIDTH))

    def try_reserved(self) -> Token | None:
        if self._peek().is_line_term():
            return None
        word = self.peek_word()
        if not is_reserved_word(word):
            return None
        return Token.reserved(RESERVED_WORDS[word], self._take(len(word)))

    def try_std_fn(self) -> Token | None:
        if self._peek().is_line_term():
            return None
        word = self.peek_word()
        if not is_std_fn_name(word):
            return None
        return Token.std_fn(STD_FUNCTIONS[word].kind, self._take(len(word)))

    def try_identifier(self) -> Token | None:
        if self._peek().is_line_term():
            return None
        word = self.peek_word()
        if not word:
            return None
        return Token.identifier(word, self._take(len(word)))

    def try_string_lit(self) -> Token | None:
        if not self._peek().is_double_quote():
            return None
        start = self._cursor.pos
        self._cursor.tmp = start + 1
        while self._cursor.tmp < len(self._source) and not self._source[self._cursor.tmp].is_double_quote():
            self._cursor.tmp += 1
        if self._cursor.tmp >= len(self._source):
            raise self._error(ErrorKind.UNTERMINATED_LITERAL, "unterminated string literal", start)
        text = self._source.text[start + 1 : self._cursor.tmp]
        return Token.string_lit(text, self._take(self._cursor.tmp - start + 1))

    def try_punct(self) -> Token | None:
        ch = self._peek()
        if not ch.is_ascii_punctuation():
            return None
        symbol = _PUNCT_SYMBOLS.get(ch.value)
        if symbol is None:
            return None
        return Token.punct(symbol, self._take(1))


def tokenize(source: str, filename: str = "input.rud") -> list[Token]:
    """Convenience function: tokenize source text and return token list."""
    return Lexer(source, filename).scan_to_tokens()
