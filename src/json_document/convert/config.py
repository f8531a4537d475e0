"""ConverterConfig and UnsupportedPolicy for the generic value converter.

ConverterConfig is a frozen (immutable) dataclass holding converter settings.
UnsupportedPolicy selects what happens when a value has a shape the converter
does not recognize: raise, or substitute ``null``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto


class UnsupportedPolicy(StrEnum):
    """How the converter treats values of unrecognized shape.

    - RAISE: Raise TypeError naming the offending type.
    - NULL:  Log a warning and emit JsonNull in place of the value.
    """

    RAISE = auto()
    NULL = auto()


@dataclass(frozen=True, slots=True)
class ConverterConfig:
    """Immutable configuration for DocumentConverter.

    Attributes:
        unsupported: Policy for values of unrecognized shape.  Default RAISE.
        layout_cache_size: Maximum number of record types whose discovered
            field order is kept in the converter's LRU cache (>= 1).
    """

    unsupported: UnsupportedPolicy = UnsupportedPolicy.RAISE
    layout_cache_size: int = 256

    def __post_init__(self) -> None:
        if not isinstance(self.unsupported, UnsupportedPolicy):
            msg = f"unsupported must be an UnsupportedPolicy, got {self.unsupported!r}"
            raise ValueError(msg)
        if self.layout_cache_size < 1:
            msg = f"layout_cache_size must be >= 1, got {self.layout_cache_size}"
            raise ValueError(msg)
