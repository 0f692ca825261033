from dataclasses import dataclass
from typing import Dict, Optional, Union


@dataclass
class StringToken:
    value: str
    quote: str = "\""
    line: int = 1


@dataclass
class CommentToken:
    # comment body without the leading "#", lines joined by "\n"
    raw: str
    line: int = 1


@dataclass
class StructuredCommentToken:
    fields: Dict[str, str]
    line: int = 1


@dataclass
class KeyToken:
    name: str
    obsolete: bool = False
    line: int = 1


Token = Union[StringToken, CommentToken, StructuredCommentToken, KeyToken]


@dataclass
class KeyValue:
    """A keyword together with the strings that follow it"""
    key: str
    value: str = ""
    obsolete: bool = False
    comments: Optional[Dict[str, str]] = None
    line: int = 1
