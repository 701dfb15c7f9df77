"""Tests for the top-level mdtree API."""

import mdtree
from mdtree import (
    Document,
    Markdown,
    ParseConfig,
    TreeRenderer,
    get_parse_config,
    parse,
    parse_blocks,
    render_text,
    render_tree,
)
from mdtree.nodes import Heading, Paragraph, String, Strikethrough


class TestParse:
    """parse() and parse_blocks()."""

    def test_parse_returns_document(self) -> None:
        doc = parse("# Hello")
        assert isinstance(doc, Document)
        assert doc.children == (Heading((String("Hello"),), 1),)

    def test_parse_blocks_returns_list(self) -> None:
        assert parse_blocks("x") == [Paragraph((String("x"),))]

    def test_empty(self) -> None:
        assert parse("") == Document(())
        assert parse_blocks("") == []

    def test_config_is_scoped_to_call(self) -> None:
        parse("x", config=ParseConfig(hard_breaks=False))
        assert get_parse_config() == ParseConfig()


class TestRenderHelpers:
    """render_text() and render_tree()."""

    def test_render_text(self) -> None:
        assert render_text(parse("**hi**")) == "hi\n"

    def test_render_tree(self) -> None:
        assert render_tree(parse("hi")) == "Paragraph\n  String(text='hi')\n"


class TestMarkdown:
    """High-level Markdown class."""

    def test_call_renders_text(self) -> None:
        assert Markdown()("Some *emphasis* here") == "Some emphasis here\n"

    def test_parse_uses_config(self) -> None:
        md = Markdown(config=ParseConfig(dash_strikethrough=False))
        assert md.parse("--x--").children == (Paragraph((String("--x--"),)),)
        assert Markdown().parse("--x--").children == (Paragraph((Strikethrough("x"),)),)

    def test_parse_many(self) -> None:
        docs = Markdown().parse_many(["# Doc 1", "# Doc 2", b"# Doc 3"])
        assert [d.children[0].level for d in docs] == [1, 1, 1]
        assert docs[2].children == (Heading((String("Doc 3"),), 1),)

    def test_parse_many_restores_config(self) -> None:
        Markdown(config=ParseConfig(hard_breaks=False)).parse_many(["a"])
        assert get_parse_config() == ParseConfig()

    def test_custom_renderer(self) -> None:
        md = Markdown(renderer=TreeRenderer())
        assert md("x") == "Paragraph\n  String(text='x')\n"
        assert md.render(md.parse("y")) == "Paragraph\n  String(text='y')\n"

    def test_config_property(self) -> None:
        config = ParseConfig(max_nesting_depth=3)
        assert Markdown(config=config).config is config
        assert Markdown().config == ParseConfig()


class TestPackage:
    """Package metadata and exports."""

    def test_version(self) -> None:
        assert mdtree.__version__ == "0.1.0"

    def test_all_names_importable(self) -> None:
        for name in mdtree.__all__:
            assert hasattr(mdtree, name), name
