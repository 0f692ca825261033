from typing import Dict, List

from .tokens import (CommentToken, KeyToken, KeyValue, StringToken,
                     StructuredCommentToken, Token)

# comment marker -> comment category
COMMENT_TYPES = {
    ":": "reference",
    ".": "extracted",
    ",": "flag",
    "|": "previous",
}

COMMENT_ORDER = ("translator", "extracted", "reference", "flag", "previous")


def join_tokens(tokens: List[Token]) -> List[Token]:
    """
    Join multi line strings into one string token,
    and consecutive comment lines into one comment token
    """
    result = []
    last = None
    for token in tokens:
        if isinstance(token, StringToken) and isinstance(last, StringToken):
            last = StringToken(last.value + token.value, last.quote, last.line)
            result[-1] = last
        elif isinstance(token, CommentToken) and \
                isinstance(last, CommentToken):
            last = CommentToken(last.raw + "\n" + token.raw, last.line)
            result[-1] = last
        else:
            result.append(token)
            last = token
    return result


def parse_comment(raw: str) -> Dict[str, str]:
    comment = {key: [] for key in COMMENT_ORDER}

    for line in raw.split("\n"):
        marker = line[:1]
        if marker == "~":
            continue
        elif marker == ":":
            comment["reference"].append(line[1:].strip())
        elif marker in COMMENT_TYPES:
            comment[COMMENT_TYPES[marker]].append(line[1:].lstrip())
        else:
            comment["translator"].append(line.lstrip())

    return {key: "\n".join(lines) for key, lines in comment.items() if lines}


def parse_comments(tokens: List[Token]) -> List[Token]:
    """Replace raw comment tokens with their typed comment fields."""
    return [
        StructuredCommentToken(parse_comment(token.raw), token.line)
        if isinstance(token, CommentToken) else token
        for token in tokens
    ]


def pair_keys(tokens: List[Token]) -> List[KeyValue]:
    """Join every keyword with the string values following it."""
    result = []
    current = None
    for i, token in enumerate(tokens):
        if isinstance(token, KeyToken):
            current = KeyValue(token.name, obsolete=token.obsolete,
                               line=token.line)
            if i and isinstance(tokens[i - 1], StructuredCommentToken):
                current.comments = tokens[i - 1].fields or None
            result.append(current)
        elif isinstance(token, StringToken) and current is not None:
            current.value += token.value
    return result
