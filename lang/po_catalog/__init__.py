from .compiler import Compiler, compile
from .errors import (CharsetError, ConfigurationError, DuplicateEntryError,
                     DuplicatePluralError, GrammarError, ParserError,
                     PluralCountError, PoError, StreamClosedError)
from .message import Translation, TranslationTable
from .options import CompilerOptions, ParserOptions
from .parser import Parser, parse
from .stream import PoStream, iter_file, parse_stream

__all__ = [
    "CharsetError",
    "Compiler",
    "CompilerOptions",
    "ConfigurationError",
    "DuplicateEntryError",
    "DuplicatePluralError",
    "GrammarError",
    "Parser",
    "ParserError",
    "ParserOptions",
    "PluralCountError",
    "PoError",
    "PoStream",
    "StreamClosedError",
    "Translation",
    "TranslationTable",
    "compile",
    "iter_file",
    "parse",
    "parse_stream",
]
