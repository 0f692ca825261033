"""
Incremental PO parsing for input that arrives in chunks.

Usage:

    stream = PoStream()
    for chunk in chunks:
        stream.write(chunk)
    table = stream.end()
"""
import logging
from functools import partial
from typing import BinaryIO, Iterable, Iterator, List, Optional

from .errors import PoError, StreamClosedError
from .message import TranslationTable
from .options import ParserOptions
from .parser import Parser

log = logging.getLogger(__name__)


def trailing_8bit_length(chunk: bytes) -> int:
    """
    Count the bytes >= 0x80 at the end of a chunk, these may be
    the start of a multi-byte sequence continued in the next chunk
    """
    length = 0
    for byte in reversed(chunk):
        if byte < 0x80:
            break
        length += 1
    return length


class PoStream:
    """
    Push-driven PO parser: write() byte chunks in order, end() returns
    the translation table. Nothing is emitted before end().

    The parser is created once `initial_threshold` bytes are buffered,
    so that the charset can be read from a complete header.
    """
    def __init__(self, options: Optional[ParserOptions] = None) -> None:
        self.options = options or ParserOptions()
        self._parser: Optional[Parser] = None
        self._cache: List[bytes] = []
        self._cache_size = 0
        self._closed = False
        self._error: Optional[PoError] = None

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, chunk: bytes) -> None:
        self._check_writable()
        if not chunk:
            return
        try:
            self._transform(bytes(chunk))
        except PoError as err:
            self._error = err
            raise

    def end(self) -> TranslationTable:
        """Process the remaining bytes and return the translation table."""
        self._check_writable()
        self._closed = True
        try:
            return self._flush()
        except PoError as err:
            self._error = err
            raise

    close = end

    def _check_writable(self) -> None:
        if self._error is not None:
            raise self._error
        if self._closed:
            raise StreamClosedError("Cannot write to an ended PO stream")

    def _take_cache(self) -> bytes:
        data = b"".join(self._cache)
        self._cache = []
        self._cache_size = 0
        return data

    def _create_parser(self, data: bytes) -> Parser:
        parser = Parser(self.options)
        parser.sniff_charset(data)
        log.debug("buffered %d bytes, parsing as %s",
                  len(data), parser.charset)
        return parser

    def _transform(self, chunk: bytes) -> None:
        if self._parser is None:
            self._cache.append(chunk)
            self._cache_size += len(chunk)
            # wait for the header before looking for the charset
            if self._cache_size < self.options.initial_threshold:
                return
            chunk = self._take_cache()
            self._parser = self._create_parser(chunk)
        elif self._cache_size:
            # an incomplete 8bit sequence was left over from the last chunk
            self._cache.append(chunk)
            chunk = self._take_cache()

        length = trailing_8bit_length(chunk)
        if length:
            self._cache = [chunk[-length:]]
            self._cache_size = length
            chunk = chunk[:-length]

        # the chunk is empty if it consisted of 8bit bytes only
        if chunk:
            self._parser.feed_bytes(chunk)

    def _flush(self) -> TranslationTable:
        chunk = self._take_cache()
        if self._parser is None:
            self._parser = self._create_parser(chunk)
        if chunk:
            self._parser.feed_bytes(chunk)
        return self._parser.finalize()


def iter_file(fp: BinaryIO, size: int = 8192) -> Iterator[bytes]:
    """Read a binary file object in blocks of `size` bytes."""
    return iter(partial(fp.read, size), b"")


def parse_stream(chunks: Iterable[bytes],
                 options: Optional[ParserOptions] = None) -> TranslationTable:
    """Parse PO data delivered as an iterable of byte chunks."""
    stream = PoStream(options)
    for chunk in chunks:
        stream.write(chunk)
    return stream.end()
