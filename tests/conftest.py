import pytest

SAMPLE_PO = r'''# Translation of the demo catalog.
# Copyright (C) 2024
msgid ""
msgstr ""
"Project-Id-Version: demo 1.0\n"
"Content-Type: text/plain; charset=UTF-8\n"
"Content-Transfer-Encoding: 8bit\n"
"Plural-Forms: nplurals=2; plural=(n != 1);\n"
"language: de\n"

#. Shown in the main menu
#: src/menu.c:12
msgctxt "menu"
msgid "File"
msgstr "Datei"

msgid "File"
msgstr "Akte"

#, c-format
msgid "%d apple"
msgid_plural "%d apples"
msgstr[0] "%d Apfel"
msgstr[1] "%d Äpfel"

# translator note
#| msgid "Long old text"
msgid ""
"A long text that is "
"split over lines"
msgstr "Ein langer Text, der über Zeilen geht"

msgid "Tab\tand \"quotes\""
msgstr "Tabulator\tund „Anführungszeichen“"

#~ msgid "Gone"
#~ msgstr "Weg"
'''


@pytest.fixture
def sample_text():
    return SAMPLE_PO


@pytest.fixture
def sample_po():
    return SAMPLE_PO.encode("utf-8")


@pytest.fixture
def sample_latin1():
    text = SAMPLE_PO.replace("charset=UTF-8", "charset=ISO-8859-1") \
        .replace("„Anführungszeichen“", "\\\"Anführungszeichen\\\"")
    return text.encode("iso-8859-1")
