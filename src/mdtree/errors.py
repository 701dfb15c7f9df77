"""Exception classes for mdtree.

Parsing itself never fails on text input: unclosed spans degrade and
malformed links fall back to plain text. The exceptions below cover the
edges around the parser (undecodable input, bad configuration, renderers
handed something that is not an mdtree node).
"""

from __future__ import annotations


class MdtreeError(Exception):
    """Base exception for all mdtree errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(MdtreeError):
    """Source could not be turned into text for parsing.

    Raised for bytes that are not valid UTF-8 and for objects that are
    neither ``str`` nor ``bytes``.
    """

    def __init__(self, message: str, offset: int | None = None) -> None:
        """Initialize parse error with an optional byte offset.

        Args:
            message: Error description
            offset: Offset in the source where decoding failed (0-indexed)
        """
        self.message = message
        self.offset = offset

        location = f"offset {offset}: " if offset is not None else ""
        super().__init__(f"{location}{message}")


class ConfigError(MdtreeError):
    """Invalid parse configuration value."""

    def __init__(self, field: str, message: str) -> None:
        """Initialize config error.

        Args:
            field: Name of the offending ParseConfig field
            message: Description of the problem
        """
        self.field = field
        super().__init__(f"Invalid '{field}': {message}")


class RenderError(MdtreeError):
    """Error during rendering.

    Raised when a renderer meets an object that is not a known AST node.
    """

    pass
