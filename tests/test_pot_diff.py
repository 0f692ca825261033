import importlib.util
import json
import os

import pytest

from po_catalog import PoError

TOOL = os.path.join(os.path.dirname(__file__), "..", "tools", "pot_diff.py")


@pytest.fixture(scope="module")
def pot_diff():
    spec = importlib.util.spec_from_file_location("pot_diff", TOOL)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


OLD_POT = b'''msgid ""
msgstr ""
"Content-Type: text/plain; charset=UTF-8\\n"

msgid "Apple"
msgstr ""

msgctxt "fruit"
msgid "Orange"
msgstr ""

msgid "Removed"
msgstr ""
'''

NEW_POT = b'''msgid ""
msgstr ""
"Content-Type: text/plain; charset=UTF-8\\n"

msgid "Apple"
msgstr ""

msgctxt "color"
msgid "Orange"
msgstr ""

msgid "%d pear"
msgid_plural "%d pears"
msgstr[0] ""
msgstr[1] ""

#~ msgid "Removed"
#~ msgstr ""
'''


@pytest.fixture
def catalogs(tmp_path):
    old = tmp_path / "old.pot"
    new = tmp_path / "new.pot"
    old.write_bytes(OLD_POT)
    new.write_bytes(NEW_POT)
    return str(old), str(new)


def test_compare_po(pot_diff, catalogs):
    deleted, added = pot_diff.compare_po(*catalogs)
    assert deleted == [("Orange", "fruit"), ("Removed", "")]
    assert added == [("%d pear", ""), ("%d pears", ""), ("Orange", "color")]


def test_missing_file(pot_diff, tmp_path):
    with pytest.raises(PoError):
        pot_diff.read_all_messages(str(tmp_path / "missing.pot"))


def test_json_output(pot_diff, catalogs, tmp_path):
    output = tmp_path / "diff.json"
    assert pot_diff.main(["-j", str(output), *catalogs]) == 0
    assert json.loads(output.read_text(encoding="utf-8")) == {
        "deleted": ["Orange", "Removed"],
        "added": ["%d pear", "%d pears", "Orange"],
    }


def test_invalid_catalog(pot_diff, catalogs, tmp_path):
    broken = tmp_path / "broken.pot"
    broken.write_bytes(b'msgid "a"\nmsgstr "b" oops\n')
    assert pot_diff.main([catalogs[0], str(broken)]) == 1
