from po_catalog.consolidate import (join_tokens, pair_keys, parse_comment,
                                    parse_comments)
from po_catalog.tokens import (CommentToken, KeyToken, StringToken,
                               StructuredCommentToken)


def test_join_tokens():
    tokens = join_tokens([
        CommentToken(" a", 1),
        CommentToken(": b", 2),
        KeyToken("msgid", line=3),
        StringToken("", line=3),
        StringToken("x", line=4),
        StringToken("y", line=5),
        KeyToken("msgstr", line=6),
        StringToken("z", line=6),
    ])
    assert tokens == [
        CommentToken(" a\n: b", 1),
        KeyToken("msgid", line=3),
        StringToken("xy", line=3),
        KeyToken("msgstr", line=6),
        StringToken("z", line=6),
    ]


def test_join_tokens_does_not_modify_input():
    first = StringToken("a")
    join_tokens([first, StringToken("b")])
    assert first.value == "a"


def test_parse_comment_categories():
    comment = parse_comment(
        " translator\n"
        ": src/a.c:12 \n"
        ". extracted\n"
        ",  fuzzy, c-format\n"
        "| msgid \"old\"\n"
        "~")
    assert comment == {
        "translator": "translator",
        "reference": "src/a.c:12",
        "extracted": "extracted",
        "flag": "fuzzy, c-format",
        "previous": "msgid \"old\"",
    }


def test_parse_comment_multiple_lines():
    assert parse_comment(" line one\n  line two\n:a.c\n:b.c") == {
        "translator": "line one\nline two",
        "reference": "a.c\nb.c",
    }


def test_parse_comment_omits_empty_categories():
    assert parse_comment("~") == {}
    assert parse_comment(", fuzzy") == {"flag": "fuzzy"}


def test_parse_comments_replaces_comment_tokens():
    key = KeyToken("msgid")
    tokens = parse_comments([CommentToken(", fuzzy", 4), key])
    assert tokens == [StructuredCommentToken({"flag": "fuzzy"}, 4), key]


def test_pair_keys():
    pairs = pair_keys([
        StringToken("ignored"),
        StructuredCommentToken({"flag": "fuzzy"}),
        KeyToken("msgid", line=2),
        StringToken("a"),
        StringToken("b"),
        StructuredCommentToken({}),
        KeyToken("msgstr", obsolete=True, line=3),
        StructuredCommentToken({}),
        StringToken("c"),
    ])
    assert [(p.key, p.value, p.obsolete, p.comments, p.line)
            for p in pairs] == [
        ("msgid", "ab", False, {"flag": "fuzzy"}, 2),
        ("msgstr", "c", True, None, 3),
    ]


def test_pair_keys_comment_must_directly_precede_key():
    pairs = pair_keys([
        StructuredCommentToken({"translator": "x"}),
        StringToken("a"),
        KeyToken("msgid"),
    ])
    assert pairs[0].comments is None
