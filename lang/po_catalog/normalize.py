import logging
from typing import List

from .charset import parse_header, parse_nplurals
from .errors import DuplicateEntryError, DuplicatePluralError, PluralCountError
from .message import Translation, Translations, TranslationTable
from .tokens import KeyValue

log = logging.getLogger(__name__)


def build_entries(pairs: List[KeyValue],
                  validation: bool = False) -> List[Translation]:
    """
    Group keyword-value pairs into translation entries.

    A msgctxt is held until the next msgid, msgid starts a new entry,
    msgid_plural and every msgstr/msgstr[n] attach to the open entry.
    msgstr values are kept in the order they appear in, the index
    in msgstr[n] is not looked at.
    """
    entries = []
    entry = None
    context = None
    context_comments = None

    for pair in pairs:
        key = pair.key.lower()
        if key == "msgctxt":
            context = pair.value
            context_comments = pair.comments
            continue

        if key == "msgid":
            entry = Translation(pair.value, obsolete=pair.obsolete)
            if context:
                entry.msgctxt = context
            entry.comments = context_comments or pair.comments
            entries.append(entry)
        elif entry is None:
            # msgid_plural or msgstr without an entry to attach to
            pass
        elif key == "msgid_plural":
            if validation and entry.msgid_plural is not None:
                raise DuplicatePluralError(
                    f"Multiple msgid_plural error: entry \"{entry.msgid}\" "
                    f"in \"{entry.msgctxt or ''}\" context has multiple "
                    "msgid_plural declarations.",
                    entry.msgid, entry.msgctxt or "", pair.line)
            entry.msgid_plural = pair.value
        else:
            entry.msgstr.append(pair.value)

        if entry is not None and entry.comments is None:
            entry.comments = pair.comments
        context = None
        context_comments = None

    return entries


def validate_entry(entry: Translation, translations: Translations,
                   msgctxt: str, nplurals: int) -> None:
    """Raise if the entry is a duplicate or has a wrong number of msgstr."""
    if entry.msgid in translations.get(msgctxt, {}):
        raise DuplicateEntryError(
            f"Duplicate msgid error: entry \"{entry.msgid}\" in "
            f"\"{msgctxt}\" context has already been declared.",
            entry.msgid, msgctxt)
    if entry.msgid_plural:
        if len(entry.msgstr) != nplurals:
            raise PluralCountError(
                "Plural forms range error: Expected to find "
                f"{nplurals} forms but got {len(entry.msgstr)} for entry "
                f"\"{entry.msgid_plural}\" in \"{msgctxt}\" context.",
                nplurals, len(entry.msgstr))
    elif len(entry.msgstr) != 1:
        raise PluralCountError(
            "Translation string range error: Expected 1 msgstr "
            f"definitions associated with \"{entry.msgid}\" in "
            f"\"{msgctxt}\" context, found {len(entry.msgstr)}.",
            1, len(entry.msgstr))


def normalize(entries: List[Translation], charset: str,
              validation: bool = False) -> TranslationTable:
    """Compose a translation table from a list of entries."""
    table = TranslationTable(charset)
    nplurals = 1
    header_found = False

    for entry in entries:
        msgctxt = entry.msgctxt or ""

        if entry.obsolete:
            if table.obsolete is None:
                table.obsolete = {}
            entry.obsolete = False
            table.obsolete.setdefault(msgctxt, {})[entry.msgid] = entry
            continue

        if not header_found and not msgctxt and not entry.msgid:
            header_found = True
            if validation:
                validate_entry(entry, table.translations, msgctxt, nplurals)
            table.headers = parse_header(
                entry.msgstr[0] if entry.msgstr else "")
            table.header_comments = entry.comments
            nplurals = parse_nplurals(table.headers, nplurals)
            continue

        if validation:
            if header_found and not msgctxt and not entry.msgid:
                raise DuplicateEntryError(
                    "Duplicate msgid error: the header entry has already "
                    "been declared.", "", "")
            validate_entry(entry, table.translations, msgctxt, nplurals)

        section = table.translations.setdefault(msgctxt, {})
        if entry.msgid in section:
            log.debug("replacing duplicate entry \"%s\" in \"%s\" context",
                      entry.msgid, msgctxt)
        section[entry.msgid] = entry

    log.debug("normalized %d entries", len(entries))
    return table
