"""Load namespace mappings from an autoload.json manifest."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field, replace

from plug_autoloader.config import DEFAULT_EXTENSION, NAMESPACE_SEPARATOR, LoaderConfig
from plug_autoloader.registry import NamespaceRegistry
from plug_autoloader.resolver import Resolver

logger = logging.getLogger(__name__)

MANIFEST_NAME = "autoload.json"


class ManifestError(ValueError):
    """Raised when a manifest cannot be read or is malformed."""


@dataclass
class Manifest:
    path: str
    extension: str = DEFAULT_EXTENSION
    namespaces: list[tuple[str, str]] = field(default_factory=list)

    def apply(self, registry: NamespaceRegistry) -> None:
        """Register every mapping, in file order."""
        for prefix, directory in self.namespaces:
            registry.register(prefix, directory)

    def build_resolver(self, config: LoaderConfig | None = None) -> Resolver:
        config = replace(config or LoaderConfig(), extension=self.extension)
        resolver = Resolver(config=config)
        self.apply(resolver.registry)
        return resolver


def _directory_list(prefix: str, value: object) -> list[str]:
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return list(value)
    raise ManifestError(
        f"Directories for {prefix!r} must be a string or a list of strings"
    )


def parse_manifest(data: object, base_dir: str = "", path: str = "") -> Manifest:
    """Build a Manifest from already-decoded JSON.

    Accepts either a top-level 'namespaces' object or Composer's
    'autoload' -> 'psr-4' layout. Relative directories are joined to base_dir.
    """
    if not isinstance(data, dict):
        raise ManifestError("Manifest must be a JSON object")

    mapping = data.get("namespaces")
    if mapping is None:
        autoload = data.get("autoload")
        if isinstance(autoload, dict):
            mapping = autoload.get("psr-4")
    if mapping is None:
        mapping = {}
    if not isinstance(mapping, dict):
        raise ManifestError("Namespace mapping must be a JSON object")

    extension = data.get("extension", DEFAULT_EXTENSION)
    if not isinstance(extension, str):
        raise ManifestError("'extension' must be a string")

    namespaces: list[tuple[str, str]] = []
    for prefix, value in mapping.items():
        if not prefix.strip(NAMESPACE_SEPARATOR):
            raise ManifestError(f"Empty namespace prefix in {path or 'manifest'}")
        for directory in _directory_list(prefix, value):
            # An empty directory means the manifest's own directory
            if not directory:
                directory = base_dir or "."
            elif base_dir and not os.path.isabs(directory):
                directory = os.path.join(base_dir, directory)
            namespaces.append((prefix, directory))

    return Manifest(path=path, extension=extension, namespaces=namespaces)


def load_manifest(path: str) -> Manifest:
    """Read and parse a manifest file.

    A directory path is taken to contain an autoload.json.
    """
    if os.path.isdir(path):
        path = os.path.join(path, MANIFEST_NAME)

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ManifestError(f"Failed to read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ManifestError(f"Invalid JSON in {path}: {e}") from e

    manifest = parse_manifest(data, base_dir=os.path.dirname(path), path=path)
    logger.debug(f"Loaded {len(manifest.namespaces)} mappings from {path}")
    return manifest
