"""Core data types and configuration for namespace resolution."""

from __future__ import annotations

from dataclasses import dataclass

NAMESPACE_SEPARATOR = "\\"
DEFAULT_EXTENSION = ".php"


@dataclass
class LoaderConfig:
    separator: str = NAMESPACE_SEPARATOR
    extension: str = DEFAULT_EXTENSION


@dataclass
class Candidate:
    """A single file path probed while resolving a name."""
    prefix: str
    directory: str
    relative: str
    path: str


@dataclass
class Resolution:
    """Outcome of a lookup. Not-found is a normal result, never an error."""
    found: bool
    path: str | None = None
    prefix: str | None = None

    def __bool__(self) -> bool:
        return self.found

