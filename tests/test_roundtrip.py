import polib
import pytest

from po_catalog import (CompilerOptions, ParserOptions, Translation,
                        TranslationTable, compile, parse)


@pytest.mark.parametrize("fold_length", [0, 1, 5, 20, 76])
def test_sample_survives_roundtrip(sample_po, fold_length):
    table = parse(sample_po)
    output = compile(table, CompilerOptions(fold_length=fold_length))
    again = parse(output)

    assert again.charset == "utf-8"
    assert again.translations == table.translations
    assert again.obsolete == table.obsolete
    assert again.header_comments == table.header_comments
    headers = dict(table.headers)
    headers["Content-Type"] = "text/plain; charset=utf-8"
    assert again.headers == headers


def test_hand_built_table_survives_roundtrip():
    table = TranslationTable(
        "utf-8",
        {"Content-Type": "text/plain; charset=utf-8",
         "Plural-Forms": "nplurals=3; plural=(n==1 ? 0 : n==2 ? 1 : 2);"},
        {
            "": {
                "back\\slash": Translation(
                    "back\\slash", ["tab\there\r\nand there"],
                    comments={"translator": "two\nlines"}),
                "one": Translation(
                    "one", ["a", "b", "c"], msgid_plural="many",
                    comments={"flag": "fuzzy, c-format"}),
            },
            "ctx": {
                "one": Translation("one", ["uno"], msgctxt="ctx"),
            },
        },
    )
    again = parse(compile(table), ParserOptions(validation=True))
    assert again.translations == table.translations
    assert again.headers == table.headers


def test_compiled_output_is_read_by_polib(sample_po):
    po = polib.pofile(compile(parse(sample_po)).decode("utf-8"))

    assert po.metadata["Content-Type"] == "text/plain; charset=utf-8"
    assert po.metadata["Plural-Forms"] == "nplurals=2; plural=(n != 1);"

    entry = po.find("File", msgctxt="menu")
    assert entry.msgstr == "Datei"
    assert entry.comment == "Shown in the main menu"
    assert entry.occurrences == [("src/menu.c", "12")]

    assert po.find("File").msgstr == "Akte"

    entry = po.find("%d apple")
    assert entry.msgid_plural == "%d apples"
    assert entry.msgstr_plural == {0: "%d Apfel", 1: "%d Äpfel"}
    assert entry.flags == ["c-format"]

    entry = po.find("A long text that is split over lines")
    assert entry.tcomment == "translator note"
    assert entry.previous_msgid == "Long old text"

    assert po.find("Tab\tand \"quotes\"").msgstr == \
        "Tabulator\tund „Anführungszeichen“"

    obsolete = po.obsolete_entries()
    assert [(e.msgid, e.msgstr) for e in obsolete] == [("Gone", "Weg")]


def test_polib_output_is_parsed():
    po = polib.POFile()
    po.metadata = {
        "Content-Type": "text/plain; charset=UTF-8",
        "Plural-Forms": "nplurals=2; plural=(n != 1);",
    }
    po.append(polib.POEntry(
        msgid="Hello", msgstr="Hallo",
        occurrences=[("a.c", "3")], flags=["fuzzy"]))
    po.append(polib.POEntry(
        msgid="one", msgid_plural="many",
        msgstr_plural={0: "eins", 1: "viele"}))
    po.append(polib.POEntry(msgctxt="ctx", msgid="x", msgstr="y"))
    po.append(polib.POEntry(msgid="old", msgstr="alt", obsolete=True))

    table = parse(str(po).encode("utf-8"), ParserOptions(validation=True))

    assert table.charset == "utf-8"
    assert table.headers["Plural-Forms"] == "nplurals=2; plural=(n != 1);"
    assert table.get("Hello") == Translation(
        "Hello", ["Hallo"],
        comments={"reference": "a.c:3", "flag": "fuzzy"})
    assert table.get("one").msgstr == ["eins", "viele"]
    assert table.get("one").msgid_plural == "many"
    assert table.get("x", "ctx").msgstr == ["y"]
    assert table.obsolete[""]["old"].msgstr == ["alt"]
