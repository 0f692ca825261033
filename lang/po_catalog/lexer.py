"""
Character level scanner for PO text.

The lexer only splits the input into comments, keywords and quoted
strings, it knows nothing about entries. It may be fed any number of
chunks and keeps its state between them.
"""
import enum
import re
from typing import List

from .errors import GrammarError
from .tokens import CommentToken, KeyToken, StringToken, Token

KEY_CHARACTER = re.compile(r"[\w\-\[\]]", re.ASCII)
KEY_NAMES = re.compile(
    r"^(?:msgctxt|msgid(?:_plural)?|msgstr(?:\[\d+\])?)$", re.ASCII)

QUOTES = ("\"", "'")

ESCAPES = {
    "t": "\t",
    "n": "\n",
    "r": "\r",
}


class LexerState(enum.Enum):
    NONE = enum.auto()
    COMMENTS = enum.auto()
    KEY = enum.auto()
    STRING = enum.auto()
    OBSOLETE = enum.auto()


class Lexer:
    def __init__(self) -> None:
        self.tokens: List[Token] = []
        self.state = LexerState.NONE
        self.line_number = 1
        self._node = None
        self._escaped = False

    def feed(self, text: str) -> None:
        """
        Scan a piece of text and append the found tokens to self.tokens

        Raises GrammarError if an unquoted word is not a PO keyword.
        """
        pos = 0
        length = len(text)
        while pos < length:
            char = text[pos]

            if self.state is LexerState.KEY and \
                    not KEY_CHARACTER.match(char):
                # the character ending a key is scanned again
                self._finish_key()
                continue

            pos += 1
            if char == "\n":
                self.line_number += 1

            if self.state in (LexerState.NONE, LexerState.OBSOLETE):
                self._start_token(char)
            elif self.state is LexerState.COMMENTS:
                self._scan_comment(char)
            elif self.state is LexerState.STRING:
                self._scan_string(char)
            else:
                self._node.name += char

    def close(self) -> List[Token]:
        """Finish a key left open at the end of the input."""
        if self.state is LexerState.KEY:
            self._finish_key()
        return self.tokens

    def _start_token(self, char: str) -> None:
        if char in QUOTES:
            self._node = StringToken("", char, self.line_number)
            self.state = LexerState.STRING
        elif char == "#":
            self._node = CommentToken("", self.line_number)
            self.state = LexerState.COMMENTS
        elif not char.isspace():
            obsolete = self.state is LexerState.OBSOLETE
            self._node = KeyToken(char, obsolete, self.line_number)
            self.state = LexerState.KEY
        else:
            return
        self.tokens.append(self._node)

    def _scan_comment(self, char: str) -> None:
        if char == "\n":
            self.state = LexerState.NONE
        elif char == "~" and self._node.raw == "":
            # "#~" comments out an obsolete entry
            self._node.raw += char
            self.state = LexerState.OBSOLETE
        elif char != "\r":
            self._node.raw += char

    def _scan_string(self, char: str) -> None:
        if self._escaped:
            self._node.value += ESCAPES.get(char, char)
            self._escaped = False
        elif char == "\\":
            self._escaped = True
        elif char == self._node.quote:
            self.state = LexerState.NONE
        else:
            self._node.value += char

    def _finish_key(self) -> None:
        if not KEY_NAMES.match(self._node.name):
            raise GrammarError(
                "Error parsing PO data: Invalid key name "
                f"\"{self._node.name}\" at line {self.line_number}. "
                "This can be caused by an unescaped quote character "
                "in a msgid or msgstr value.", self.line_number)
        self.state = LexerState.NONE
