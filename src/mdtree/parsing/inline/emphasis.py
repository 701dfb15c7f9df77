"""Emphasis, strong and strikethrough recognizers for mdtree.

All three are delimited spans: an opener, raw text, and a closer that is the
same marker string as the opener (``*`` closes ``*``, ``__`` closes ``__``,
``--`` closes ``--``). The span text is not re-parsed.

Thread Safety:
All methods use instance-local state only.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mdtree.nodes import Emphasis, Strikethrough, Strong
from mdtree.parsing.dispatch import emphasis_marker, strikethrough_marker

if TYPE_CHECKING:
    from mdtree.config import ParseConfig
    from mdtree.cursor import Cursor


class EmphasisMixin:
    """Mixin for delimited span recognizers.

    Required Host Attributes:
        - _cursor: Cursor
        - _config: ParseConfig

    Required Host Methods:
        - _take_delimited(marker) -> str

    """

    _cursor: Cursor
    _config: ParseConfig

    def _try_emphasis(self) -> Emphasis | Strong | None:
        """Recognize ``*text*``, ``_text_``, ``**text**`` or ``__text__``.

        A doubled marker opens strong; a single one opens emphasis. Unclosed
        spans still produce a node holding the rest of the input.
        """
        marker = emphasis_marker(self._cursor)
        if marker is None:
            return None
        text = self._take_delimited(marker)
        if len(marker) == 2:
            return Strong(text)
        return Emphasis(text)

    def _try_strikethrough(self) -> Strikethrough | None:
        """Recognize ``~~text~~`` or ``--text--``."""
        marker = strikethrough_marker(self._cursor, self._config)
        if marker is None:
            return None
        return Strikethrough(self._take_delimited(marker))
