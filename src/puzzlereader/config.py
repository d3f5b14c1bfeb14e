"""ContextVar-based reader configuration for puzzlereader.

Controls how required-read failures render their diagnostic preview.
Readers look the configuration up only when building an error, so the
scanning hot path never touches it.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from puzzlereader.config import ReaderConfig, reader_config_context

    with reader_config_context(ReaderConfig(preview_length=20)):
        reader.expect_integer()  # error preview shows up to 20 characters

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ReaderConfig:
    """Immutable reader configuration.

    Attributes:
        preview_length: Maximum characters shown after the failure point
        visible_whitespace: Substitute glyphs for space, tab, CR, LF and
            control characters in the preview

    """

    preview_length: int = 10
    visible_whitespace: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> ReaderConfig:
        """Create ReaderConfig from dictionary.

        Only includes keys that are valid ReaderConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ReaderConfig attribute names.

        Returns:
            New ReaderConfig instance with values from dict.

        Example:
            >>> config = ReaderConfig.from_dict({
            ...     "preview_length": 20,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.preview_length
            20

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ReaderConfig = ReaderConfig()

_reader_config: ContextVar[ReaderConfig] = ContextVar(
    "reader_config",
    default=_DEFAULT_CONFIG,
)


def get_reader_config() -> ReaderConfig:
    """Get current reader configuration (thread-local).

    Returns:
        The active ReaderConfig for this thread/context.
    """
    return _reader_config.get()


def set_reader_config(config: ReaderConfig) -> None:
    """Set reader configuration for current context.

    Args:
        config: ReaderConfig instance to use for this context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _reader_config.set(config)


def reset_reader_config() -> None:
    """Reset to default configuration."""
    _reader_config.set(_DEFAULT_CONFIG)


@contextmanager
def reader_config_context(config: ReaderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: ReaderConfig to use within the context.

    Yields:
        None

    Example:
        >>> with reader_config_context(ReaderConfig(visible_whitespace=False)):
        ...     Reader("a b").expect_integer()
        Traceback (most recent call last):
        ...
        ExpectedTokenError: Reader expected an integer at position 0; found: a b§

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _reader_config.get()
    _reader_config.set(config)
    try:
        yield
    finally:
        _reader_config.set(previous)


__all__ = [
    "ReaderConfig",
    "get_reader_config",
    "set_reader_config",
    "reset_reader_config",
    "reader_config_context",
]
