"""ContextVar-based parse configuration for mdtree.

Provides context-local configuration using Python's ContextVars (PEP 567).
Config is set once by the caller and read by every parser in the context,
including the child parsers created for blockquote and list item bodies.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from mdtree.config import ParseConfig, parse_config_context
    from mdtree.parser import Parser

    with parse_config_context(ParseConfig(dash_strikethrough=False)):
        blocks = Parser("--not struck--").parse()

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields

from mdtree.errors import ConfigError


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Attributes:
        strikethrough_enabled: Recognize ~~text~~ (and --text-- when
            dash_strikethrough is also set)
        dash_strikethrough: Accept ``--`` as a strikethrough marker
        hard_breaks: Two trailing spaces or a trailing backslash before a
            newline produce a Newline node instead of a folded space
        max_nesting_depth: Deepest chain of nested parsers (blockquote and
            list item bodies); deeper content is kept as plain text

    """

    strikethrough_enabled: bool = True
    dash_strikethrough: bool = True
    hard_breaks: bool = True
    max_nesting_depth: int = 32

    def __post_init__(self) -> None:
        if self.max_nesting_depth < 1:
            raise ConfigError("max_nesting_depth", f"must be >= 1, got {self.max_nesting_depth}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "hard_breaks": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.hard_breaks
            False

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "mdtree_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (context-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context."""
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to the default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(hard_breaks=False)):
        ...     get_parse_config().hard_breaks
        False

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
]
