"""ContextVar-based parse configuration for md0.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per parse call (or per Markdown instance) and read by the
parser and lexer of that call.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and threads never observe each other's settings.

Usage:
    # Per call
    tokens = md0.parse(source, config=ParseConfig(trace_lines=True))

    # Direct parser usage (advanced)
    from md0.config import set_parse_config, reset_parse_config, ParseConfig

    set_parse_config(ParseConfig(collect_metadata=False))
    try:
        tokens = Parser(source).parse()
    finally:
        reset_parse_config()

    # Or use the context manager
    with parse_config_context(ParseConfig(collect_metadata=False)):
        tokens = Parser(source).parse()

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields

from md0.errors import ConfigError


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        trace_lines: Log every classified line at DEBUG level on the
            ``md0.lexer.core`` logger. Off by default.
        collect_metadata: Scan paragraph text for links and images. When
            False, every Paragraph carries empty metadata.

    """

    trace_lines: bool = False
    collect_metadata: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Useful for host integration where config comes from external
        sources (settings files, environment-derived dicts).

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ParseConfig attribute names.

        Returns:
            New ParseConfig instance with values from dict.

        Raises:
            ConfigError: If a known field is given a non-bool value.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "trace_lines": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.trace_lines
            True

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        for name, value in filtered.items():
            if not isinstance(value, bool):
                raise ConfigError(name, f"expected bool, got {type(value).__name__}")
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

# Thread-local configuration via ContextVar
_parse_config: ContextVar[ParseConfig] = ContextVar(
    "md0_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local).

    Returns:
        The active ParseConfig for this thread/context.

    """
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Args:
        config: ParseConfig instance to use for this context.

    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: ParseConfig to use within the context.

    Yields:
        None

    Example:
        >>> with parse_config_context(ParseConfig(collect_metadata=False)):
        ...     tokens = Parser("[a](b)").parse()
        >>> # Automatically restored to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

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
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
