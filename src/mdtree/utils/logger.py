"""Namespaced loggers for mdtree.

Every module logs under the ``mdtree`` hierarchy so applications can enable
parser diagnostics with a single ``logging.getLogger("mdtree")`` call. The
library itself never installs handlers.
"""

from __future__ import annotations

import logging

_ROOT = "mdtree"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` under the ``mdtree.`` namespace.

    Names already inside the namespace (module ``__name__`` values) are used
    as is.
    """
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)


__all__ = ["get_logger"]
