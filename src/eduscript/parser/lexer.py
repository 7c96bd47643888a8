"""Lexical primitives: trivia skipping, literals and keywords."""

import math
import re
from typing import List, Optional, Tuple

from .errors import ScriptSyntaxError, SourcePosition, SourceSpan, format_expected

_WHITESPACE = re.compile(r"\s+")
_LINE_COMMENT = re.compile(r"//[^\n]*")
_BLOCK_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)
_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_NUMBER = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")
_INTEGER = re.compile(r"[0-9]+")
_STRING = re.compile(r'"([^"]*)"')
# Used only to describe what was found at an error position.
_TOKEN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*|-?[0-9]+(?:\.[0-9]+)?s?|\S")


def _quote(value: str) -> str:
    return f'"{value}"'


class Scanner:
    """Cursor over script text with the grammar's lexical primitives.

    Every primitive skips leading whitespace and comments, then either
    consumes its token and returns the value or raises ScriptSyntaxError
    pointing at the first character that did not match.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    # Positions and errors

    def position(self, offset: Optional[int] = None) -> SourcePosition:
        return SourcePosition.from_offset(self.text, self.pos if offset is None else offset)

    def span(self, start: int, end: int) -> SourceSpan:
        return SourceSpan(self.position(start), self.position(end))

    def found_at(self, offset: int) -> Tuple[str, int]:
        """Describe the token at offset and return it with its end offset."""
        if offset >= len(self.text):
            return "end of input", offset
        match = _TOKEN.match(self.text, offset)
        if not match:
            return _quote(self.text[offset]), offset + 1
        return _quote(match.group(0)), match.end()

    def error(
        self,
        expected: List[str],
        offset: Optional[int] = None,
        message: Optional[str] = None,
    ) -> ScriptSyntaxError:
        """Build an 'Expected X but Y found.' error at offset."""
        start = self.pos if offset is None else offset
        found, end = self.found_at(start)
        if message is None:
            message = f"Expected {format_expected(expected)} but {found} found."
        return ScriptSyntaxError(message, self.span(start, end), expected=expected, found=found)

    # Trivia

    def skip_trivia(self) -> None:
        while True:
            match = (
                _WHITESPACE.match(self.text, self.pos)
                or _LINE_COMMENT.match(self.text, self.pos)
                or _BLOCK_COMMENT.match(self.text, self.pos)
            )
            if match:
                self.pos = match.end()
                continue
            if self.text.startswith("/*", self.pos):
                raise ScriptSyntaxError(
                    'Expected "*/" but end of input found.',
                    self.span(self.pos, len(self.text)),
                    expected=['"*/"'],
                    found="end of input",
                )
            return

    def at_end(self) -> bool:
        self.skip_trivia()
        return self.pos >= len(self.text)

    # Punctuation and keywords

    def peek(self, literal: str) -> bool:
        self.skip_trivia()
        return self.text.startswith(literal, self.pos)

    def accept(self, literal: str) -> bool:
        """Consume literal if it is next; report whether it was."""
        if self.peek(literal):
            self.pos += len(literal)
            return True
        return False

    def expect(self, literal: str) -> int:
        """Consume literal or fail; return its start offset."""
        self.skip_trivia()
        start = self.pos
        if not self.accept(literal):
            raise self.error([_quote(literal)])
        return start

    def peek_word(self) -> Optional[str]:
        self.skip_trivia()
        match = _IDENTIFIER.match(self.text, self.pos)
        return match.group(0) if match else None

    def accept_keyword(self, word: str) -> bool:
        if self.peek_word() == word:
            self.pos += len(word)
            return True
        return False

    def expect_keyword(self, *words: str) -> str:
        """Consume one of the given keywords and return it."""
        word = self.peek_word()
        if word in words:
            self.pos += len(word)
            return word
        raise self.error([_quote(w) for w in words])

    def identifier(self, label: str = "identifier") -> Tuple[str, int]:
        self.skip_trivia()
        match = _IDENTIFIER.match(self.text, self.pos)
        if not match:
            raise self.error([label])
        self.pos = match.end()
        return match.group(0), match.start()

    # Literals

    def string(self) -> str:
        """Double-quoted string, no escape sequences."""
        self.skip_trivia()
        if not self.text.startswith('"', self.pos):
            raise self.error(["string"])
        match = _STRING.match(self.text, self.pos)
        if not match:
            raise self.error(['"\\""'], offset=len(self.text))
        self.pos = match.end()
        return match.group(1)

    def number(self) -> Tuple[float, int]:
        """Optional minus, digits, optional fraction. Returns value and start offset."""
        self.skip_trivia()
        match = _NUMBER.match(self.text, self.pos)
        if not match:
            raise self.error(["number"])
        value = self._finite(match)
        self.pos = match.end()
        return value, match.start()

    def _finite(self, match: "re.Match[str]") -> float:
        value = float(match.group(0))
        if not math.isfinite(value):
            raise self.error(["finite number"], offset=match.start())
        return value

    def integer(self) -> Tuple[int, int]:
        """Unsigned digits only. Returns value and start offset."""
        self.skip_trivia()
        match = _INTEGER.match(self.text, self.pos)
        if not match:
            raise self.error(["integer"])
        self.pos = match.end()
        return int(match.group(0)), match.start()

    def duration(self) -> Tuple[float, int]:
        """A number immediately followed by the unit suffix `s`."""
        self.skip_trivia()
        match = _NUMBER.match(self.text, self.pos)
        if not match:
            raise self.error(["duration"])
        if not self.text.startswith("s", match.end()):
            raise self.error(['"s"'], offset=match.end())
        value = self._finite(match)
        self.pos = match.end() + 1
        return value, match.start()
