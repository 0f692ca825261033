"""
Renders a translation table back into PO text.
"""
import logging
import re
from dataclasses import replace
from email.message import Message
from functools import cmp_to_key
from typing import Dict, List, Optional

from . import charset as charsets
from .errors import CharsetError, ConfigurationError
from .helper import compare_msgid, fold_line, split_escaped_newlines
from .message import Comments, Translation, Translations, TranslationTable
from .options import CompilerOptions

log = logging.getLogger(__name__)

# comment category -> line prefix, in output order
COMMENT_PREFIXES = (
    ("translator", "# "),
    ("reference", "#: "),
    ("extracted", "#. "),
    ("flag", "#, "),
    ("previous", "#| "),
)

COMMENT_LINE_REGEX = re.compile(r"\r?\n|\r")

OBSOLETE_PREFIX = "#~ "


def prepare_headers(headers: Optional[Dict[str, str]]) -> Dict[str, str]:
    """Return a copy of the headers with canonical key casing."""
    return {charsets.HEADERS.get(key.lower(), key): value
            for key, value in (headers or {}).items()}


class Compiler:
    """
    Converts a translation table into PO formatted bytes

    The table handed in is never modified, the compiler works on a copy.
    """
    def __init__(
        self,
        table: Optional[TranslationTable],
        options: Optional[CompilerOptions] = None,
    ) -> None:
        if table is None:
            table = TranslationTable(None, {}, {})
        translations = table.translations
        self.table = replace(
            table,
            headers=prepare_headers(table.headers),
            translations=dict(translations)
            if translations is not None else None,
            obsolete=dict(table.obsolete)
            if table.obsolete is not None else None,
        )
        self.options = options or CompilerOptions()
        self.handle_charset()

    def handle_charset(self) -> None:
        """
        Work out the output charset and normalize the charset
        parameter of the Content-Type header
        """
        headers = self.table.headers
        content_type = Message()
        content_type["Content-Type"] = \
            headers.get("Content-Type") or "text/plain"
        declared = content_type.get_param("charset")
        if isinstance(declared, tuple):
            declared = declared[2]

        self.table.charset = charsets.format_charset(
            self.table.charset or declared or "utf-8")

        if declared:
            content_type.set_param(
                "charset", charsets.format_charset(declared), requote=False)
            headers["Content-Type"] = content_type["Content-Type"]

    def draw_comments(self, comments: Comments) -> str:
        lines = []
        for key, prefix in COMMENT_PREFIXES:
            if key not in comments:
                continue
            for line in COMMENT_LINE_REGEX.split(comments[key]):
                lines.append(f"{prefix}{line}")
        return self.options.eol.join(lines)

    def add_po_string(self, key: str, value: str = "",
                      obsolete: bool = False) -> str:
        """Escape, fold and quote a value, prefixed with its keyword."""
        eol = self.options.eol
        fold_length = self.options.fold_length
        if obsolete:
            key = OBSOLETE_PREFIX + key
            eol += OBSOLETE_PREFIX

        value = value or ""
        if self.options.escape_characters:
            value = value.replace("\\", "\\\\") \
                .replace("\"", "\\\"") \
                .replace("\t", "\\t") \
                .replace("\r", "\\r")
        # raw newlines would end the line in the middle of the string
        value = value.replace("\n", "\\n")

        lines = [value]
        if fold_length and fold_length > 0:
            lines = fold_line(value, fold_length)
        elif self.options.escape_characters:
            lines = split_escaped_newlines(value)

        if len(lines) < 2:
            return f"{key} \"{lines[0] if lines else ''}\""
        return f"{key} \"\"{eol}\"" + f"\"{eol}\"".join(lines) + "\""

    def draw_block(self, block: Translation, obsolete: bool = False) -> str:
        """Build the PO text of a single entry."""
        response = []

        if block.comments:
            comments = self.draw_comments(block.comments)
            if comments:
                response.append(comments)

        if block.msgctxt:
            response.append(
                self.add_po_string("msgctxt", block.msgctxt, obsolete))

        response.append(self.add_po_string("msgid", block.msgid, obsolete))

        if block.msgid_plural:
            response.append(self.add_po_string(
                "msgid_plural", block.msgid_plural, obsolete))
            for i, msgstr in enumerate(block.msgstr or [""]):
                response.append(
                    self.add_po_string(f"msgstr[{i}]", msgstr, obsolete))
        else:
            msgstr = block.msgstr[0] if block.msgstr else ""
            response.append(self.add_po_string("msgstr", msgstr, obsolete))

        return self.options.eol.join(response)

    def prepare_section(self, section: Translations) -> List[Translation]:
        """Flatten a section into a list of entries, sorted if asked to."""
        response = []
        for msgctxt, entries in section.items():
            for msgid, entry in entries.items():
                if msgctxt == "" and msgid == "":
                    continue
                response.append(entry)

        sort = self.options.sort
        if callable(sort):
            response.sort(key=cmp_to_key(sort))
        elif sort:
            response.sort(key=cmp_to_key(compare_msgid))
        return response

    def header_block(self) -> Translation:
        comments = self.table.header_comments
        carrier = (self.table.translations.get("") or {}).get("")
        if comments is None and carrier is not None:
            comments = carrier.comments
        return Translation(
            "", [charsets.generate_header(self.table.headers)],
            comments=comments)

    def compile(self) -> bytes:
        if self.table.translations is None:
            raise ConfigurationError("No translations found")

        blocks = [self.draw_block(self.header_block())]

        translations = self.prepare_section(self.table.translations)
        blocks.extend(self.draw_block(entry) for entry in translations)

        obsolete = []
        if self.table.obsolete:
            obsolete = self.prepare_section(self.table.obsolete)
            blocks.extend(self.draw_block(entry, obsolete=True)
                          for entry in obsolete)

        log.debug("compiled %d entries and %d obsolete entries as %s",
                  len(translations), len(obsolete), self.table.charset)

        eol = self.options.eol
        text = (eol + eol).join(blocks) + eol
        if self.table.charset in ("utf-8", "ascii"):
            return text.encode("utf-8")
        try:
            return charsets.encode(text, self.table.charset)
        except CharsetError:
            log.warning("unknown charset %s, writing utf-8 instead",
                        self.table.charset)
            return text.encode("utf-8")


def compile(table: TranslationTable,
            options: Optional[CompilerOptions] = None) -> bytes:
    """Compile a translation table into PO data."""
    return Compiler(table, options).compile()
