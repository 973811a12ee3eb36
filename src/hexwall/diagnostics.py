"""
Collector for non-fatal warnings raised while building a wall.

Warnings are threaded explicitly through a call instead of going to a
global channel; each recorded entry is also logged.
"""

__all__ = [
    "Diagnostic",
    "Diagnostics",
]

from collections.abc import Iterator
from dataclasses import dataclass, field

from loguru import logger


@dataclass(frozen=True)
class Diagnostic:
    """A single warning about one source."""

    source: str
    message: str


@dataclass
class Diagnostics:
    """Ordered collection of warnings for one call."""

    entries: list[Diagnostic] = field(default_factory=list)

    def warn(self, source: str, message: str) -> Diagnostic:
        """Record (and log) a warning about ``source``."""
        entry = Diagnostic(source=source, message=message)
        self.entries.append(entry)
        logger.warning(message)
        return entry

    @property
    def messages(self) -> list[str]:
        return [e.message for e in self.entries]

    def for_source(self, source: str) -> list[Diagnostic]:
        """Return warnings recorded for a given source."""
        return [e for e in self.entries if e.source == source]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)
