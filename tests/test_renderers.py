"""Tests for the plain-text and tree renderers."""

from collections.abc import Sequence

from mdtree import parse
from mdtree.nodes import Document, Newline, Node, Paragraph, String, ThematicBreak
from mdtree.renderers import ASTRenderer, TextRenderer, TreeRenderer


def text(source: str) -> str:
    return TextRenderer().render(parse(source))


class TestTextRendererBlocks:
    """Block layout."""

    def test_empty_document(self) -> None:
        assert text("") == ""

    def test_heading_underlines(self) -> None:
        assert text("# Title") == "Title\n=====\n"
        assert text("## Sub") == "Sub\n---\n"
        assert text("### Deep") == "Deep\n"

    def test_paragraphs_separated_by_blank_line(self) -> None:
        assert text("one\n\ntwo") == "one\n\ntwo\n"

    def test_lists(self) -> None:
        assert text("- a\n- b") == "* a\n* b\n"
        assert text("3. x\n4. y") == "3. x\n4. y\n"

    def test_custom_bullet(self) -> None:
        assert TextRenderer(bullet="-").render(parse("- a")) == "- a\n"

    def test_consecutive_quotes_stay_together(self) -> None:
        assert text("> q1\n> q2\n\nafter") == "> q1\n> q2\n\nafter\n"

    def test_code_block_indented(self) -> None:
        assert text("```py\na\n\nb\n```") == "    a\n\n    b\n"

    def test_thematic_break(self) -> None:
        assert TextRenderer(rule_width=5).render([ThematicBreak()]) == "-----\n"

    def test_full_document(self) -> None:
        source = "# Title\n\nSome **bold** and [link](http://u)\n\n- a\n\n---"
        assert text(source) == (
            "Title\n=====\n\nSome bold and link (http://u)\n\n* a\n\n" + "-" * 40 + "\n"
        )


class TestTextRendererInlines:
    """Markers are stripped from inline content."""

    def test_spans(self) -> None:
        assert text("*a* **b** ~~c~~ `d`") == "a b c d\n"

    def test_link_same_label_and_url(self) -> None:
        assert text("[http://a](http://a)") == "http://a\n"

    def test_image(self) -> None:
        assert text("![logo](x.png)") == "[image: logo]\n"
        assert text("![](x.png)") == "[image]\n"

    def test_hard_break(self) -> None:
        assert text("a  \nb") == "a\nb\n"

    def test_accepts_node_sequence(self) -> None:
        nodes = [Paragraph((String("a"), Newline(), String("b")))]
        assert TextRenderer().render(nodes) == "a\nb\n"


class TestTreeRenderer:
    """Indented AST dump."""

    def test_heading_and_code(self) -> None:
        out = TreeRenderer().render(parse("# Hi *x*\n\n```rust\nfn\n```"))
        assert out == (
            "Heading(level=1)\n"
            "  String(text='Hi ')\n"
            "  Emphasis(text='x')\n"
            "CodeBlock(content='fn\\n', language='rust')\n"
        )

    def test_list_items(self) -> None:
        out = TreeRenderer(indent=1).render(parse("2. a\n3. b"))
        assert out == (
            "OrderedList(start=2)\n"
            " item 1\n"
            "  String(text='a')\n"
            " item 2\n"
            "  String(text='b')\n"
        )

    def test_fieldless_nodes(self) -> None:
        assert TreeRenderer().render(Document((ThematicBreak(),))) == "ThematicBreak\n"

    def test_empty(self) -> None:
        assert TreeRenderer().render([]) == ""


class TestProtocol:
    """Any object with a matching render() is an ASTRenderer."""

    def test_custom_renderer_usable(self) -> None:
        class Counter:
            def render(self, node: Document | Sequence[Node]) -> str:
                blocks = node.children if isinstance(node, Document) else node
                return str(len(blocks))

        def use(renderer: ASTRenderer) -> str:
            return renderer.render(parse("a\n\nb"))

        assert use(Counter()) == "2"
        assert use(TextRenderer()) == "a\n\nb\n"
