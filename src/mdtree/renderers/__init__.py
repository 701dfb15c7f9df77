"""mdtree renderers.

Renderers turn the parsed node sequence into output. The parser itself only
promises the tree shape; these are the reference consumers.

Available Renderers:
- TextRenderer: plain terminal text with Markdown markers removed
- TreeRenderer: indented AST dump for debugging

"""

from mdtree.renderers.protocol import ASTRenderer
from mdtree.renderers.text import TextRenderer
from mdtree.renderers.tree import TreeRenderer

__all__ = ["ASTRenderer", "TextRenderer", "TreeRenderer"]
