import re
from typing import List

# ASCII punctuation, symbols and digits
SPECIAL = r"\x21-\x2f0-9\x5b-\x60\x7b-\x7e"

LINE_BREAK_REGEX = re.compile(r".*?\\n")
WHITESPACE_REGEX = re.compile(r".*\s+")
SPECIAL_REGEX = re.compile(rf".*[{SPECIAL}]+")
NOT_SPECIAL_REGEX = re.compile(rf"[^{SPECIAL}]")
ESCAPED_LINE_REGEX = re.compile(r"(?:\\[^n]|\\$|[^\\])*(?:\\n|$)")


def ends_in_escape(line: str) -> bool:
    """True if the line ends with an incomplete backslash escape."""
    return (len(line) - len(line.rstrip("\\"))) % 2 == 1


def fold_line(text: str, max_length: int = 76) -> List[str]:
    """
    Fold an escaped PO string into lines of at most `max_length`
    characters. Lines are broken after a "\\n" escape if possible,
    otherwise after whitespace or punctuation. Joining the result
    gives back `text`.
    """
    lines = []
    length = len(text)
    pos = 0

    while pos < length:
        line = text[pos:pos + max_length]

        # never split an escape sequence, make the line longer instead
        while ends_in_escape(line) and pos + len(line) < length:
            line += text[pos + len(line)]

        match = LINE_BREAK_REGEX.match(line)
        if match:
            line = match.group(0)
        elif pos + len(line) < length:
            match = WHITESPACE_REGEX.match(line)
            if match and not match.group(0).isspace():
                line = match.group(0)
            else:
                match = SPECIAL_REGEX.match(line)
                if match and NOT_SPECIAL_REGEX.search(match.group(0)) and \
                        not ends_in_escape(match.group(0)):
                    line = match.group(0)

        lines.append(line)
        pos += len(line)

    return lines


def split_escaped_newlines(text: str) -> List[str]:
    """Split an escaped PO string after every "\\n" escape."""
    return [line for line in ESCAPED_LINE_REGEX.findall(text) if line]


def compare_msgid(left, right) -> int:
    if left.msgid < right.msgid:
        return -1
    if left.msgid > right.msgid:
        return 1
    return 0
