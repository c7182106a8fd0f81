"""Tests for the git config parser."""

import pytest

from gitconf.config.parser import GitConfigParser, parse
from gitconf.exceptions import ParseError


def test_parse_sections_and_entries():
    model = parse('[core]\n\tbare = false\n[remote "origin"]\n\turl = x\n')
    assert [(s.name, s.subsection) for s in model.sections] == [
        ("core", None),
        ("remote", "origin"),
    ]
    assert model.sections[0].entries[0].key == "bare"
    assert model.sections[0].entries[0].value == "false"
    assert model.sections[1].entries[0].value == "x"


def test_parse_empty_text():
    model = parse("")
    assert model.sections == []
    assert model.preamble == []


def test_parse_key_without_spaces_around_equals():
    model = parse("[a]\nkey=value\n")
    assert model.get("a.key") == "value"


def test_parse_bare_key():
    model = parse("[core]\n\tbare\n")
    entry = model.sections[0].entries[0]
    assert entry.value is None
    assert model.get("core.bare") == "true"


def test_parse_bare_key_with_comment():
    model = parse("[core]\n\tbare ; comment\n")
    entry = model.sections[0].entries[0]
    assert entry.value is None
    assert entry.comment == " ; comment"


def test_parse_empty_value():
    model = parse("[a]\n\tkey =\n")
    assert model.get("a.key") == ""


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("key = value", "value"),
        ("key =   padded   ", "padded"),
        ("key = hello   world", "hello   world"),
        ('key = "  quoted  "', "  quoted  "),
        ('key = "a # b"', "a # b"),
        ('key = a"b c"d', "ab cd"),
        ("key = value # comment", "value"),
        ("key = value ; comment", "value"),
        ('key = "with \\"quotes\\""', 'with "quotes"'),
        ("key = back\\\\slash", "back\\slash"),
        ("key = a\\tb", "a\tb"),
        ("key = a\\nb", "a\nb"),
        ("key = a\\bb", "a\bb"),
    ],
)
def test_parse_value_decoding(line, expected):
    model = parse(f"[a]\n\t{line}\n")
    assert model.get("a.key") == expected


def test_parse_trailing_comment_is_kept():
    model = parse("[a]\n\tkey = value  # note\n")
    assert model.sections[0].entries[0].comment == "  # note"


def test_parse_line_continuation():
    text = "[a]\n\tkey = one \\\n two\n\tnext = 1\n"
    model = parse(text)
    assert model.get("a.key") == "one  two"
    entry = model.sections[0].entries[0]
    assert entry.raw == "\tkey = one \\\n two\n"
    assert model.get("a.next") == "1"


def test_parse_continuation_inside_quotes():
    model = parse('[a]\n\tkey = "one\\\ntwo"\n')
    assert model.get("a.key") == "onetwo"


def test_parse_comments_and_blank_lines_attach_to_next_record():
    text = "# top\n\n[a]\n\t# about x\n\tx = 1\n\n[b]\n\ty = 2\n# tail\n"
    model = parse(text)
    assert model.preamble == ["# top\n", "\n"]
    assert model.sections[0].entries[0].leading == ["\t# about x\n"]
    assert model.sections[1].leading == ["\n"]
    assert model.sections[1].trailing == ["# tail\n"]


def test_parse_subsection_escapes():
    model = parse('[section "a \\"quoted\\" \\\\ name"]\n\tk = v\n')
    assert model.sections[0].subsection == 'a "quoted" \\ name'


def test_parse_legacy_subsection_is_lowercased():
    model = parse("[branch.Main]\n\tremote = origin\n")
    section = model.sections[0]
    assert section.name == "branch"
    assert section.subsection == "main"
    assert model.get("branch.main.remote") == "origin"


def test_parse_header_with_trailing_comment():
    model = parse("[core] # comment\n\tbare = true\n")
    assert model.get("core.bare") == "true"


def test_parse_keeps_original_spelling():
    model = parse("[Core]\n\tBare = true\n")
    assert model.sections[0].name == "Core"
    assert model.sections[0].entries[0].key == "Bare"
    assert model.get("core.bare") == "true"


def test_parse_crlf_text():
    model = parse("[a]\r\n\tx = 1\r\n")
    assert model.newline == "\r\n"
    assert model.get("a.x") == "1"
    assert model.sections[0].entries[0].raw == "\tx = 1\r\n"


def test_parse_byte_order_mark():
    model = parse("\ufeff[a]\n\tx = 1\n")
    assert model.preamble == ["\ufeff"]
    assert model.sections[0].name == "a"


def test_parse_without_final_newline():
    model = parse("[a]\n\tx = 1")
    entry = model.sections[0].entries[0]
    assert entry.newline == ""
    assert entry.raw == "\tx = 1"


def test_parse_form_feed_is_not_a_line_break():
    model = parse("[a]\n\tx = a\fb\n")
    assert model.get("a.x") == "a\fb"


def test_parse_entry_on_header_line():
    model = parse("[branch.foo] foo = bar\n")
    assert model.get("branch.foo.foo") == "bar"
    section = model.sections[0]
    assert section.raw == "[branch.foo] foo = bar\n"
    assert section.inline is section.entries[0]
    assert section.inline.raw is None


@pytest.mark.parametrize(
    ("text", "path", "value"),
    [
        ("[core] bare = true\n", "core.bare", "true"),
        ("[core] bare\n", "core.bare", "true"),
        ("[core]\tbare=false ; flag\n", "core.bare", "false"),
        ('[remote "origin"] url = "a b"\n', "remote.origin.url", "a b"),
        ("[a] x = 1 \\\n2\n", "a.x", "1 2"),
    ],
)
def test_parse_value_on_header_line(text, path, value):
    assert parse(text).get(path) == value


def test_header_comment_is_not_an_entry():
    model = parse("[core] # bare = true\n")
    assert model.sections[0].entries == []
    assert model.sections[0].inline is None


def test_parser_class_is_equivalent_to_function():
    text = "[a]\n\tx = 1\n"
    assert GitConfigParser(text).parse() == parse(text)


@pytest.mark.parametrize(
    ("text", "line", "reason"),
    [
        ("key = value\n", 1, "key outside of any section"),
        ("[a\n", 1, "missing ']' in section header"),
        ("[a]\n[b c]\n", 2, "subsection name must be double-quoted"),
        ('[a "sub]\n', 1, "unterminated subsection name"),
        ('[a "sub"\n', 1, "missing ']' in section header"),
        ("[a_b]\n", 1, "invalid character '_' in section name"),
        ("[]\n", 1, "empty section name"),
        ("[a] 1b\n", 1, "invalid key name"),
        ("[a]\n\tk = v\\", 2, "line continuation at end of file"),
        ("[a]\n\tk = v\\\n", 2, "line continuation at end of file"),
        ("[a]\n\t1key = v\n", 2, "invalid key name"),
        ('[a]\n\tkey = "open\n', 2, "unterminated quoted value"),
        ("[a]\n\tkey = bad\\q\n", 2, "invalid escape sequence '\\q'"),
    ],
)
def test_parse_errors(text, line, reason):
    with pytest.raises(ParseError) as exc_info:
        parse(text)
    assert exc_info.value.line == line
    assert exc_info.value.reason == reason


def test_parse_error_for_key_followed_by_junk():
    with pytest.raises(ParseError) as exc_info:
        parse("[a]\n\tkey value\n")
    assert exc_info.value.line == 2
    assert "expected '='" in exc_info.value.reason


def test_parse_error_message():
    with pytest.raises(ParseError) as exc_info:
        parse("[a]\n\tkey = \"open\n")
    assert str(exc_info.value) == (
        "Bad config for 'line 2': unterminated quoted value"
    )
