"""Namespace-prefix to base-directory registry."""

from __future__ import annotations

import logging
import os
import threading

from plug_autoloader.config import NAMESPACE_SEPARATOR

logger = logging.getLogger(__name__)

_PATH_SEPARATORS = "/" + os.sep + (os.altsep or "")


def normalize_prefix(prefix: str, separator: str = NAMESPACE_SEPARATOR) -> str:
    """Return the canonical form of a namespace prefix, e.g. 'Vendor\\Sub\\'."""
    stripped = prefix.strip(separator)
    if not stripped:
        raise ValueError(f"Namespace prefix must not be empty: {prefix!r}")
    return stripped + separator


def normalize_directory(directory: str) -> str:
    """Strip trailing path separators and append a single forward slash."""
    if not directory:
        raise ValueError("Base directory must not be empty")
    return directory.rstrip(_PATH_SEPARATORS) + "/"


class NamespaceRegistry:
    """Maps normalized namespace prefixes to ordered base-directory lists.

    Writes are serialized by a lock. Each write swaps in a fresh list, so a
    reader holding the previous list never sees it change underneath it.
    """

    def __init__(self, separator: str = NAMESPACE_SEPARATOR) -> None:
        self.separator = separator
        self.namespaces: dict[str, list[str]] = {}
        self._lock = threading.Lock()

    def register(self, prefix: str, directory: str, prepend: bool = False) -> None:
        """Associate a base directory with a namespace prefix."""
        prefix = normalize_prefix(prefix, self.separator)
        directory = normalize_directory(directory)

        with self._lock:
            existing = self.namespaces.get(prefix, [])
            if prepend:
                self.namespaces[prefix] = [directory] + existing
            else:
                self.namespaces[prefix] = existing + [directory]

        logger.debug(f"Registered {prefix} -> {directory} (prepend={prepend})")

    def directories_for(self, prefix: str) -> list[str]:
        """Get the base directories for an exact prefix, in probe order."""
        try:
            prefix = normalize_prefix(prefix, self.separator)
        except ValueError:
            return []
        return list(self.namespaces.get(prefix, []))

    def prefixes(self) -> list[str]:
        """Return registered prefixes in registration order."""
        return list(self.namespaces)

    def as_dict(self) -> dict[str, list[str]]:
        return {prefix: list(dirs) for prefix, dirs in self.namespaces.items()}

    def __contains__(self, prefix: object) -> bool:
        if not isinstance(prefix, str):
            return False
        return bool(self.directories_for(prefix))

    def __len__(self) -> int:
        return len(self.namespaces)
