"""Longest-prefix-first resolution of namespaced names to source files."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator

from plug_autoloader.config import Candidate, LoaderConfig, Resolution
from plug_autoloader.registry import NamespaceRegistry

logger = logging.getLogger(__name__)


class Resolver:
    """Resolves fully-qualified names to files using a NamespaceRegistry.

    Given 'Example\\Databases\\Querier\\Request' with the prefix
    'Example\\Databases\\Querier\\' mapped to './example/databases/querier/',
    the probed file is './example/databases/querier/Request.php'.

    The most specific registered prefix is tried first. Within a prefix,
    directories are probed in stored order. Nothing is cached, so every call
    reflects the current registry and filesystem.
    """

    def __init__(
        self,
        registry: NamespaceRegistry | None = None,
        config: LoaderConfig | None = None,
    ) -> None:
        self.config = config or LoaderConfig()
        if registry is None:
            registry = NamespaceRegistry(self.config.separator)
        self.registry = registry

    def add_namespace(self, prefix: str, directory: str, prepend: bool = False) -> None:
        """Register a base directory for a namespace prefix."""
        self.registry.register(prefix, directory, prepend)

    def relative_path(self, relative_name: str) -> str:
        """Translate a relative class identifier into a relative file path."""
        return relative_name.replace(self.config.separator, "/") + self.config.extension

    def candidates(self, name: str) -> Iterator[Candidate]:
        """Yield every file path that would be probed for a name, in order."""
        if not name:
            raise ValueError("Name to resolve must not be empty")

        sep = self.config.separator
        name = name.lstrip(sep)

        # Shrink the prefix one segment at a time, rightmost separator first
        pos = name.rfind(sep)
        while pos > 0:
            prefix = name[:pos + 1]
            relative = name[pos + 1:]
            directories = self.registry.directories_for(prefix)
            if directories and relative:
                rel_path = self.relative_path(relative)
                for directory in directories:
                    yield Candidate(
                        prefix=prefix,
                        directory=directory,
                        relative=rel_path,
                        path=directory + rel_path,
                    )
            pos = name.rfind(sep, 0, pos)

    def require_file(self, path: str) -> bool:
        """Return True if path is an existing regular file. Never raises."""
        try:
            return os.path.isfile(path)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to probe {path}: {e}")
            return False

    def resolve(self, name: str) -> Resolution:
        """Resolve a name to the first existing candidate file."""
        for candidate in self.candidates(name):
            if self.require_file(candidate.path):
                logger.debug(f"Resolved {name} -> {candidate.path}")
                return Resolution(found=True, path=candidate.path, prefix=candidate.prefix)
            logger.debug(f"No file at {candidate.path}")

        logger.debug(f"Could not resolve {name}")
        return Resolution(found=False)

    def __call__(self, name: str) -> Resolution:
        return self.resolve(name)
