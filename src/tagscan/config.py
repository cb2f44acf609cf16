"""ContextVar-based scan configuration for tagscan.

Provides context-local configuration using Python's ContextVars (PEP 567).
A scanning session snapshots the active config when it is constructed, so
changing the config afterwards never affects a session already running.

Usage:
    from tagscan.config import ScanConfig, scan_config_context

    with scan_config_context(ScanConfig(strict=True)):
        tokens = list(tokenize(data))

"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        entity_expander: Transform applied to every finished text run to
            expand entity references. None selects ``html.unescape``.
        declaration_keyword: The only ``<!NAME ...>`` keyword accepted.
        preformatted_tag: Element whose start/end tags toggle literal mode.
        raw_text_tags: Elements whose body is read verbatim.
        layout_markers: Self-closing elements that trim following whitespace.
        pushback_capacity: Number of characters CharacterSource can hold back.
        strict: Raise MarkupSyntaxError from tokenize() on SCAN_ERROR tokens.

    """

    entity_expander: Callable[[str], str] | None = None
    declaration_keyword: str = "DOCTYPE"
    preformatted_tag: str = "PRE"
    raw_text_tags: frozenset[str] = frozenset({"SCRIPT", "STYLE"})
    layout_markers: frozenset[str] = frozenset({"BR", "HR"})
    pushback_capacity: int = 4
    strict: bool = False

    def __post_init__(self) -> None:
        if self.pushback_capacity < 4:
            raise ValueError(
                f"pushback_capacity must be at least 4, got {self.pushback_capacity}"
            )

    @classmethod
    def from_dict(cls, config_dict: dict) -> ScanConfig:
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored. Tag-name collections are upper-cased and
        frozen.

        Example:
            >>> config = ScanConfig.from_dict({"strict": True, "unknown": 1})
            >>> config.strict
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        for key in ("raw_text_tags", "layout_markers"):
            if key in filtered:
                filtered[key] = frozenset(name.upper() for name in filtered[key])
        for key in ("declaration_keyword", "preformatted_tag"):
            if key in filtered:
                filtered[key] = filtered[key].upper()
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get the scan configuration active in the current context."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context."""
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to the default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with scan_config_context(ScanConfig(strict=True)):
        ...     get_scan_config().strict
        True

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
]
