"""
Charset and header helpers shared by the parser and the compiler.

See https://www.gnu.org/software/gettext/manual/html_node/Header-Entry.html
"""
import codecs
import logging
import re
from typing import Dict, Optional

from .errors import CharsetError

log = logging.getLogger(__name__)

PLURAL_FORMS = "Plural-Forms"

# lower case header key -> canonical header name
HEADERS = {
    "project-id-version": "Project-Id-Version",
    "report-msgid-bugs-to": "Report-Msgid-Bugs-To",
    "pot-creation-date": "POT-Creation-Date",
    "po-revision-date": "PO-Revision-Date",
    "last-translator": "Last-Translator",
    "language-team": "Language-Team",
    "language": "Language",
    "content-type": "Content-Type",
    "content-transfer-encoding": "Content-Transfer-Encoding",
    "plural-forms": PLURAL_FORMS,
}

NPLURALS_REGEX = re.compile(r"nplurals\s*=\s*(\d+)")

# the header ends where the second msgid/msgctxt line starts
FIRST_MSGID_REGEX = re.compile(r"^\s*msgid", re.I | re.M)
NEXT_ENTRY_REGEX = re.compile(r"^\s*(msgid|msgctxt)", re.I | re.M)
CHARSET_REGEX = re.compile(
    r"[; ]charset\s*=\s*([\w-]+)(?:[\s;]|\\n)*\"\s*$", re.I | re.M)


def format_charset(charset: Optional[str] = "iso-8859-1",
                   default_charset: str = "iso-8859-1") -> str:
    """
    Normalize a charset name: utf8 -> utf-8, WIN1257 -> windows-1257,
    latin1 -> iso-8859-1, US-ASCII -> ascii
    """
    charset = str(charset or default_charset).lower()
    charset = re.sub(r"^utf[-_]?(\d+)$", r"utf-\1", charset)
    charset = re.sub(r"^win(?:dows)?[-_]?(\d+)$", r"windows-\1", charset)
    charset = re.sub(r"^latin[-_]?(\d+)$", r"iso-8859-\1", charset)
    charset = re.sub(r"^(us[-_]?)?ascii$", "ascii", charset)
    charset = re.sub(r"^charset$", default_charset, charset)
    return charset.strip()


def header_fragment(text: str) -> str:
    """
    Return the part of PO text that holds the header entry,
    or an empty string if the text has no msgid at all.
    """
    first = FIRST_MSGID_REGEX.search(text)
    if not first:
        return ""
    following = NEXT_ENTRY_REGEX.search(text, first.end())
    if not following:
        return text
    return text[:following.start()]


def detect_charset(text: str, default: str = "iso-8859-1") -> str:
    match = CHARSET_REGEX.search(header_fragment(text))
    if not match:
        return default
    charset = format_charset(match.group(1), default)
    log.debug("detected charset %s", charset)
    return charset


def parse_header(text: str = "") -> Dict[str, str]:
    """
    Parse a header block into a dict of key-value pairs.
    Known keys get their canonical casing, anything else is kept as is.
    """
    headers = {}
    for line in (text or "").split("\n"):
        key, _, value = line.partition(":")
        key = key.strip()
        if not key:
            continue
        key = HEADERS.get(key.lower(), key)
        headers[key] = value.strip()
    return headers


def generate_header(headers: Optional[Dict[str, str]] = None) -> str:
    """Join header key-value pairs back into a header block."""
    lines = [f"{key}: {value.strip()}"
             for key, value in (headers or {}).items()
             if key and value]
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def parse_nplurals(headers: Optional[Dict[str, str]],
                   fallback: int = 1) -> int:
    """Read nplurals from the Plural-Forms header."""
    plural_forms = headers.get(PLURAL_FORMS) if headers else None
    if not plural_forms:
        return fallback
    match = NPLURALS_REGEX.search(plural_forms)
    if not match:
        return fallback
    return int(match.group(1)) or fallback


def _lookup(charset: str) -> codecs.CodecInfo:
    try:
        return codecs.lookup(charset)
    except LookupError:
        raise CharsetError(f"Unknown charset \"{charset}\"") from None


def decode(data: bytes, charset: str) -> str:
    """Convert bytes in the given charset into text."""
    charset = format_charset(charset)
    return _lookup(charset).decode(data, "replace")[0]


def encode(text: str, charset: str) -> bytes:
    """
    Convert text into bytes in the given charset, characters the charset
    cannot represent are replaced with "?"
    """
    charset = format_charset(charset)
    return _lookup(charset).encode(text, "replace")[0]
