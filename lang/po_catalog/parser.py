import codecs
import logging
from typing import Optional, Union

from . import charset as charsets
from .consolidate import join_tokens, pair_keys, parse_comments
from .lexer import Lexer
from .message import TranslationTable
from .normalize import build_entries, normalize
from .options import ParserOptions

log = logging.getLogger(__name__)

BOM = "\ufeff"


class Parser:
    """
    Turns PO text into a translation table

    Text can be handed over in one piece with parse() or piecewise with
    feed()/feed_bytes() followed by finalize().
    """
    def __init__(
        self,
        options: Optional[ParserOptions] = None,
        charset: Optional[str] = None,
    ) -> None:
        self.options = options or ParserOptions()
        self.charset = charsets.format_charset(
            charset or self.options.default_charset)
        self.lexer = Lexer()
        self._started = False

    def sniff_charset(self, data: bytes) -> str:
        """Use the charset declared in the header of `data`, if there is one"""
        if data.startswith(codecs.BOM_UTF8):
            data = data[len(codecs.BOM_UTF8):]
            self.charset = "utf-8"
        sniffed = data.decode("latin-1")
        self.charset = charsets.detect_charset(sniffed, self.charset)
        return self.charset

    def handle_charset(self, data: bytes) -> str:
        self.sniff_charset(data)
        return self.to_text(data)

    def to_text(self, data: bytes) -> str:
        return charsets.decode(data, self.charset)

    def feed(self, text: str) -> None:
        if not self._started and text:
            self._started = True
            if text.startswith(BOM):
                text = text[1:]
        self.lexer.feed(text)

    def feed_bytes(self, data: bytes) -> None:
        self.feed(self.to_text(data))

    def finalize(self) -> TranslationTable:
        """Run the collected tokens through the consolidation passes."""
        tokens = self.lexer.close()
        log.debug("finalizing %d tokens", len(tokens))
        tokens = join_tokens(tokens)
        tokens = parse_comments(tokens)
        pairs = pair_keys(tokens)
        entries = build_entries(pairs, self.options.validation)
        return normalize(entries, self.charset, self.options.validation)

    def parse(self, data: Union[bytes, str]) -> TranslationTable:
        if isinstance(data, str):
            self.charset = "utf-8"
            self.feed(data)
        else:
            self.feed(self.handle_charset(bytes(data)))
        return self.finalize()


def parse(data: Union[bytes, str],
          options: Optional[ParserOptions] = None) -> TranslationTable:
    """
    Parse PO data into a translation table.

    Bytes are decoded with the charset declared in the header, falling
    back to options.default_charset. Text is taken as already decoded.
    """
    return Parser(options).parse(data)
