"""Property-based tests for the parser using Hypothesis.

These tests verify invariants that should hold for any input:
1. Parsing never raises and always consumes the whole source
2. Text without trigger characters comes back as a single String
3. The text held by the tree is never longer than the source
4. Parsing is deterministic, and bytes parse like the decoded str

"""

from hypothesis import given, settings
from hypothesis import strategies as st

from mdtree import BaseVisitor, Parser, from_json, parse, to_json
from mdtree.nodes import (
    TEXT_NODES,
    CodeBlock,
    CodeInline,
    Image,
    Link,
    Node,
    Paragraph,
    String,
)

# Characters that exercise every recognizer, plus ordinary text
markdown_chars = st.sampled_from(list("ab1. #*_~-`[]()!>+\n\t\"'\\") + ["  ", "é"])
markdown_text = st.lists(markdown_chars, max_size=80).map("".join)

# Text that contains no trigger character and cannot start a list item
plain_text = st.text(alphabet="abcxyzABC ,;:?éü", min_size=1, max_size=40)


class LeafTextLength(BaseVisitor[None]):
    """Sum the length of every piece of source text held by leaf nodes."""

    def __init__(self) -> None:
        self.total = 0

    def visit_default(self, node: Node) -> None:
        if isinstance(node, TEXT_NODES):
            self.total += len(node.text)

    def visit_code_inline(self, node: CodeInline) -> None:
        self.total += len(node.content)

    def visit_code_block(self, node: CodeBlock) -> None:
        self.total += len(node.content) + len(node.language or "")

    def visit_link(self, node: Link) -> None:
        self.total += len(node.label) + len(node.url) + len(node.title or "")

    def visit_image(self, node: Image) -> None:
        self.total += len(node.alt) + len(node.url) + len(node.title or "")


class TestTotality:
    """The parser accepts every string."""

    @given(source=st.text(max_size=200))
    @settings(max_examples=200)
    def test_arbitrary_text_never_raises(self, source: str) -> None:
        parser = Parser(source)
        parser.parse()
        assert parser.cursor.at_end

    @given(source=markdown_text)
    @settings(max_examples=300)
    def test_markdown_like_text_consumed(self, source: str) -> None:
        parser = Parser(source)
        parser.parse()
        assert parser.cursor.at_end

    @given(source=markdown_text)
    @settings(max_examples=200)
    def test_inline_parse_consumed(self, source: str) -> None:
        parser = Parser(source)
        parser.parse_inlines()
        assert parser.cursor.at_end


class TestPlainText:
    """Text with no trigger characters is a single String."""

    @given(text=plain_text)
    @settings(max_examples=100)
    def test_inline_plain_text_is_one_string(self, text: str) -> None:
        assert Parser(text).parse_inlines() == [String(text)]

    @given(text=plain_text.filter(lambda s: s.strip() == s))
    @settings(max_examples=100)
    def test_block_plain_text_is_one_paragraph(self, text: str) -> None:
        assert parse(text).children == (Paragraph((String(text),)),)


class TestTextContainment:
    """The tree never invents text."""

    @given(source=markdown_text)
    @settings(max_examples=300)
    def test_leaf_text_not_longer_than_source(self, source: str) -> None:
        counter = LeafTextLength()
        counter.visit(parse(source))
        assert counter.total <= len(source)


class TestDeterminism:
    """Same input, same tree."""

    @given(source=markdown_text)
    @settings(max_examples=100)
    def test_parse_twice_equal(self, source: str) -> None:
        assert parse(source) == parse(source)

    @given(source=markdown_text)
    @settings(max_examples=100)
    def test_bytes_parse_like_str(self, source: str) -> None:
        assert parse(source.encode("utf-8")) == parse(source)

    @given(source=markdown_text)
    @settings(max_examples=100)
    def test_json_round_trip(self, source: str) -> None:
        doc = parse(source)
        assert from_json(to_json(doc)) == doc
