from dataclasses import dataclass, fields
from typing import Any, Callable, Mapping, Union

from .errors import ConfigurationError


def _snake_case(name: str) -> str:
    return "".join("_" + c.lower() if c.isupper() else c for c in name)


def _from_mapping(cls, mapping: Mapping[str, Any]):
    known = {f.name for f in fields(cls)}
    kwargs = {}
    for key, value in mapping.items():
        name = _snake_case(key)
        if name not in known:
            raise ConfigurationError(
                f"Unknown {cls.__name__} option \"{key}\"")
        kwargs[name] = value
    return cls(**kwargs)


@dataclass
class ParserOptions:
    """
    Options for parse(), parse_stream() and PoStream

    default_charset: charset used when the header does not declare one
    validation: reject duplicate entries and wrong msgstr counts
    initial_threshold: bytes a stream buffers before sniffing the charset
    """
    default_charset: str = "iso-8859-1"
    validation: bool = False
    initial_threshold: int = 2 * 1024

    def __post_init__(self) -> None:
        if self.initial_threshold < 1:
            raise ConfigurationError(
                "initial_threshold must be a positive number of bytes")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "ParserOptions":
        return _from_mapping(cls, mapping)


@dataclass
class CompilerOptions:
    """
    Options for compile()

    fold_length: maximum length of a quoted line, 0 disables folding
    escape_characters: escape backslashes, quotes, tabs and carriage returns
    sort: False, True for msgid order, or a two-argument comparator
    eol: line terminator
    """
    fold_length: int = 76
    escape_characters: bool = True
    sort: Union[bool, Callable[[Any, Any], int]] = False
    eol: str = "\n"

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "CompilerOptions":
        return _from_mapping(cls, mapping)
