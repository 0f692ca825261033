from dataclasses import dataclass, field
from typing import Dict, List, Optional


# translator, reference, extracted, flag and previous comment lines,
# absent categories are left out of the mapping
Comments = Dict[str, str]


@dataclass
class Translation:
    msgid: str
    msgstr: List[str] = field(default_factory=list)
    msgctxt: Optional[str] = None
    msgid_plural: Optional[str] = None
    comments: Optional[Comments] = None
    obsolete: bool = False


# context -> msgid -> entry, "" is the default context
Translations = Dict[str, Dict[str, Translation]]


@dataclass
class TranslationTable:
    charset: str
    headers: Dict[str, str] = field(default_factory=dict)
    translations: Optional[Translations] = field(default_factory=dict)
    obsolete: Optional[Translations] = None
    header_comments: Optional[Comments] = None

    def get(self, msgid: str, msgctxt: str = "") -> Optional[Translation]:
        """Look up an active entry, None when it does not exist."""
        return (self.translations or {}).get(msgctxt, {}).get(msgid)

    def entries(self, obsolete: bool = False):
        """Iterate over the entries of one section in insertion order."""
        section = self.obsolete if obsolete else self.translations
        for context in (section or {}).values():
            yield from context.values()
