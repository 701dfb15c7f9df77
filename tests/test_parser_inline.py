"""Inline parsing tests.

Exercises ``Parser.parse_inlines`` directly: span recognizers, their
priority, lookahead on ambiguous markers, and degradation of unclosed or
malformed constructs to text.
"""

import pytest

from mdtree import ParseConfig, Parser, parse_config_context
from mdtree.parsing.inline import strip_run_tail
from mdtree.nodes import (
    Blockquote,
    CodeBlock,
    CodeInline,
    Emphasis,
    Image,
    Inline,
    Link,
    Strikethrough,
    String,
    Strong,
)


def inlines(source: str) -> list[Inline]:
    return Parser(source).parse_inlines()


class TestSpans:
    """Emphasis, strong and strikethrough."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("**abc**", Strong("abc")),
            ("__abc__", Strong("abc")),
            ("*abc*", Emphasis("abc")),
            ("_abc_", Emphasis("abc")),
            ("~~abc~~", Strikethrough("abc")),
            ("--abc--", Strikethrough("abc")),
        ],
    )
    def test_span_kinds(self, source: str, expected: Inline) -> None:
        assert inlines(source) == [expected]

    def test_span_between_text(self) -> None:
        assert inlines("a *b* c") == [String("a "), Emphasis("b"), String(" c")]

    def test_bold_then_text(self) -> None:
        assert inlines("**bold** text") == [Strong("bold"), String(" text")]

    def test_span_text_not_reparsed(self) -> None:
        assert inlines("**a [b](c) `d`**") == [Strong("a [b](c) `d`")]

    def test_unclosed_runs_to_end(self) -> None:
        assert inlines("**bold") == [Strong("bold")]
        assert inlines("x *em") == [String("x "), Emphasis("em")]
        assert inlines("~~gone") == [Strikethrough("gone")]

    def test_span_across_newline_folds(self) -> None:
        assert inlines("*a\nb*") == [Emphasis("a b")]

    def test_marker_before_space_is_text(self) -> None:
        assert inlines("2 * 3") == [String("2 * 3")]
        assert inlines("a ** b") == [String("a ** b")]

    def test_underscore_inside_word_is_text(self) -> None:
        assert inlines("snake_case_name") == [String("snake_case_name")]

    def test_single_tilde_or_dash_is_text(self) -> None:
        assert inlines("a ~ b - c") == [String("a ~ b - c")]

    def test_strikethrough_before_emphasis(self) -> None:
        """Strikethrough is tried first, so its text keeps the inner markers."""
        assert inlines("~~*x*~~") == [Strikethrough("*x*")]

    def test_dash_strikethrough_disabled(self) -> None:
        with parse_config_context(ParseConfig(dash_strikethrough=False)):
            assert inlines("--abc--") == [String("--abc--")]
            assert inlines("~~abc~~") == [Strikethrough("abc")]

    def test_strikethrough_disabled(self) -> None:
        with parse_config_context(ParseConfig(strikethrough_enabled=False)):
            assert inlines("~~abc~~") == [String("~~abc~~")]


class TestCode:
    """Inline code and fenced code inside running text."""

    def test_inline_code(self) -> None:
        assert inlines("`code`") == [CodeInline("code")]

    def test_inline_code_is_verbatim(self) -> None:
        assert inlines("`a*b* [c](d)`") == [CodeInline("a*b* [c](d)")]

    def test_unclosed_inline_code(self) -> None:
        assert inlines("run `abc") == [String("run "), CodeInline("abc")]

    def test_fenced_code_in_text(self) -> None:
        assert inlines("see ```x``` here") == [
            String("see "),
            CodeBlock("x"),
            String(" here"),
        ]


class TestLinksAndImages:
    """Links and images need the complete bracket/paren sequence."""

    def test_link(self) -> None:
        assert inlines("[Google](https://x.com/)") == [Link("Google", "https://x.com/")]

    def test_link_with_title(self) -> None:
        assert inlines('[a](http://x "Home")') == [Link("a", "http://x", "Home")]

    def test_link_with_single_quoted_title(self) -> None:
        assert inlines("[a](u 'T')") == [Link("a", "u", "T")]

    def test_image(self) -> None:
        assert inlines("![alt](http://y)") == [Image("alt", "http://y")]

    def test_image_before_link(self) -> None:
        assert inlines("![a](b)[c](d)") == [Image("a", "b"), Link("c", "d")]

    def test_link_in_text(self) -> None:
        assert inlines("go [here](u) now") == [
            String("go "),
            Link("here", "u"),
            String(" now"),
        ]

    @pytest.mark.parametrize(
        "source",
        ["[unclosed", "[a](b", "[a] (b)", "![alt", "![alt]", "Hello!", "[]"],
    )
    def test_incomplete_sequence_is_text(self, source: str) -> None:
        assert inlines(source) == [String(source)]

    def test_label_is_raw_text(self) -> None:
        assert inlines("[**a**](u)") == [Link("**a**", "u")]


class TestInlineBlockquote:
    """``>`` quotes inside inline content."""

    def test_quote_at_line_start(self) -> None:
        assert inlines("> quoted *text*") == [Blockquote((String("quoted "), Emphasis("text")))]

    def test_quote_mid_line_is_text(self) -> None:
        assert inlines("a > b") == [String("a > b")]

    def test_quote_on_continuation_line(self) -> None:
        assert inlines("a\n> b") == [String("a "), Blockquote((String("b"),))]


class TestDecliningRecognizers:
    """A recognizer that declines leaves the cursor where it was."""

    @pytest.mark.parametrize(
        ("source", "recognizer"),
        [
            ("[a](b", "_try_link"),
            ("[a] (b)", "_try_link"),
            ("[unclosed", "_try_link"),
            ("![alt", "_try_image"),
            ("!x", "_try_image"),
            ("* x", "_try_emphasis"),
            ("_", "_try_emphasis"),
            ("~ x", "_try_strikethrough"),
            ("--", "_try_strikethrough"),
            (">x", "_try_blockquote"),
            ("`x", "_try_code_block"),
        ],
    )
    def test_position_unchanged(self, source: str, recognizer: str) -> None:
        parser = Parser(source)
        assert getattr(parser, recognizer)() is None
        assert parser.cursor.position == 0

    def test_decline_mid_input(self) -> None:
        parser = Parser("ab[c](d")
        parser.cursor.advance(2)
        assert parser._try_link() is None
        assert parser.cursor.position == 2


class TestPlainText:
    """Text runs and merging."""

    def test_empty(self) -> None:
        assert inlines("") == []

    def test_plain(self) -> None:
        assert inlines("just words, nothing else") == [String("just words, nothing else")]

    def test_unicode(self) -> None:
        assert inlines("héllo *wörld* ✓") == [
            String("héllo "),
            Emphasis("wörld"),
            String(" ✓"),
        ]

    def test_adjacent_text_is_merged(self) -> None:
        """A declined trigger continues the surrounding text run."""
        assert inlines("a [b c") == [String("a [b c")]

    def test_trailing_newline_dropped(self) -> None:
        assert inlines("abc\n") == [String("abc")]

    def test_many_lines_are_one_string(self) -> None:
        lines = ["word " * 14 + "word"] * 2000
        assert inlines("\n".join(lines)) == [String(" ".join(lines))]


class TestStripRunTail:
    """Trailing whitespace removal on a pending text run."""

    def test_strips_last_piece(self) -> None:
        run = ["a ", "b \t"]
        assert strip_run_tail(run) == 2
        assert run == ["a ", "b"]

    def test_drops_whitespace_only_pieces(self) -> None:
        run = ["a ", "  ", " "]
        assert strip_run_tail(run) == 4
        assert run == ["a"]

    def test_empty_run(self) -> None:
        run: list[str] = []
        assert strip_run_tail(run) == 0
        assert run == []
