"""Tests for SCOPE/END block extraction and whole-file processing."""

import pytest

from cssscope.errors import CSSScopeError, ParseError
from cssscope.scope import ScopeBlock, find_blocks, process


# ---------------------------------------------------------------------------
# Pass-through
# ---------------------------------------------------------------------------


class TestPassThrough:
    @pytest.mark.parametrize(
        "text",
        [
            "",
            "body { margin: 0; }\n",
            "/* plain comment */\na, b { color: red; }",
            "/* END */\nstray end marker",
            "/* SCOPE */ no name",
            "unbalanced { braces",
        ],
    )
    def test_text_without_scope_unchanged(self, text):
        assert process(text) == text

    def test_surrounding_text_kept_byte_for_byte(self):
        text = "a{}\n/* SCOPE b */\nroot{x:y}\n/* END */\nc{}"
        assert process(text) == "a{}\n.b {x:y}\n\n\nc{}"


# ---------------------------------------------------------------------------
# Block rewriting
# ---------------------------------------------------------------------------


class TestProcess:
    def test_root_block(self):
        text = "/* SCOPE button */\nroot { color: red; }\n/* END */"
        assert process(text) == ".button { color: red; }\n\n"

    def test_media_block(self):
        text = "/* SCOPE card */\n@media (min-width: 600px) { root.active { color: blue; } }\n/* END */"
        out = process(text)
        assert out == "@media (min-width: 600px) {\n    .card.active { color: blue; }\n}\n\n"
        assert "\n\n}" not in out

    def test_directory_block(self):
        text = "/* SCOPE nav-items */\ndirectory.icon { x: 1; }\n/* END */"
        assert process(text) == ".nav.icon { x: 1; }\n\n"

    def test_two_blocks(self):
        text = "/* SCOPE a */ root{} /* END *//* SCOPE b */ root{} /* END */"
        assert process(text) == ".a {}\n\n.b {}\n\n"

    def test_marker_whitespace_variants(self):
        text = "/*SCOPE   tight*/ h1 { x: y; } /*   END   */"
        assert process(text) == ".tight h1 { x: y; }\n\n"

    def test_markers_removed(self):
        out = process("/* SCOPE a */ b { } /* END */")
        assert "SCOPE" not in out
        assert "END" not in out

    def test_text_after_end_not_rewritten(self):
        text = "/* SCOPE a */ b { } /* END */\nc { }"
        assert process(text) == ".a b { }\n\n\nc { }"

    def test_comment_before_selector_still_scoped(self):
        text = "/* SCOPE a */\n/* note */\nroot { x: y; }\n/* END */"
        assert process(text) == "/* note */\n.a { x: y; }\n\n"

    def test_section_comment_does_not_leak_unscoped_rule(self):
        text = "/* SCOPE card */\n/* Title */\n.title { color: red; }\nroot { x: y; }\n/* END */"
        assert process(text) == "/* Title */\n.card .title { color: red; }\n\n.card { x: y; }\n\n"

    def test_comment_inside_media_before_selector(self):
        text = "/* SCOPE m */\n@media print { /* hide */ root { display: none; } }\n/* END */"
        assert process(text) == "@media print {\n    /* hide */\n.m { display: none; }\n}\n\n"

    def test_crlf_block(self):
        text = "/* SCOPE card */\r\nroot { x: y; }\r\nroot:hover { x: z; }\r\n/* END */"
        assert process(text) == ".card { x: y; }\n\n.card:hover { x: z; }\n\n"

    def test_empty_block(self):
        assert process("x/* SCOPE a *//* END */y") == "xy"


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestErrors:
    def test_unclosed_block(self):
        with pytest.raises(ParseError, match="unclosed block"):
            process("/* SCOPE x */\nroot { color: red; }")

    def test_unclosed_block_reports_marker_position(self):
        with pytest.raises(ParseError) as info:
            process("a { }\n  /* SCOPE x */ root { }")
        assert info.value.line == 2
        assert info.value.column == 3

    def test_end_without_spaces_not_recognised(self):
        with pytest.raises(ParseError, match="unclosed block"):
            process("/* SCOPE x */ root { } /*END*/")

    def test_second_block_unclosed_fails_whole_input(self):
        text = "/* SCOPE a */ b { } /* END */\n/* SCOPE c */ d { }"
        with pytest.raises(ParseError, match="unclosed block"):
            process(text)

    def test_nested_block(self):
        text = "/* SCOPE a */\n/* SCOPE b */ root { } /* END */"
        with pytest.raises(ParseError, match="nested block") as info:
            process(text)
        assert info.value.line == 2
        assert info.value.column == 1

    def test_parse_error_is_cssscope_error(self):
        with pytest.raises(CSSScopeError):
            process("/* SCOPE x */")


# ---------------------------------------------------------------------------
# find_blocks
# ---------------------------------------------------------------------------


class TestFindBlocks:
    def test_blocks_in_order(self):
        text = "x /* SCOPE a */ p { } /* END */ y /* SCOPE b-c */ q { } /* END */ z"
        blocks = list(find_blocks(text))
        assert [b.name for b in blocks] == ["a", "b-c"]
        assert [b.prefix for b in blocks] == [".a", ".b-c"]
        assert blocks[0].body == " p { } "
        assert text[blocks[0].start:blocks[0].end] == "/* SCOPE a */ p { } /* END */"

    def test_no_blocks(self):
        assert list(find_blocks("a { }")) == []

    def test_block_is_frozen(self):
        block = ScopeBlock(name="a", body="", start=0, end=0)
        with pytest.raises(AttributeError):
            block.name = "b"  # type: ignore[misc]
