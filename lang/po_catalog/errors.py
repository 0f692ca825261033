class PoError(Exception):
    """
    Base class for all catalog exceptions
    """


class ParserError(PoError, SyntaxError):
    """
    Raised when PO data can not be turned into a translation table.
    `line_number` is set when the failure can be tied to a line of input.
    """
    def __init__(self, message: str, line_number=None) -> None:
        super().__init__(message)
        self.line_number = line_number


class GrammarError(ParserError):
    """
    The lexer found a keyword that is not part of the PO grammar
    """


class DuplicateEntryError(ParserError):
    def __init__(self, message: str, msgid: str, msgctxt: str = "",
                 line_number=None) -> None:
        super().__init__(message, line_number)
        self.msgid = msgid
        self.msgctxt = msgctxt


class DuplicatePluralError(DuplicateEntryError):
    """
    A single entry declares msgid_plural more than once
    """


class PluralCountError(ParserError, ValueError):
    def __init__(self, message: str, expected: int, actual: int) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class ConfigurationError(PoError, ValueError):
    """
    Invalid options or an incomplete translation table
    """


class CharsetError(PoError, LookupError):
    """
    A charset name unknown to the codec registry, or text that the
    target charset can not represent
    """


class StreamClosedError(PoError):
    """
    Data was written to a stream that has already ended
    """
