"""Namespace registration bookkeeping."""

from plug_autoloader.registry.namespace_registry import (
    NamespaceRegistry,
    normalize_directory,
    normalize_prefix,
)

__all__ = ["NamespaceRegistry", "normalize_directory", "normalize_prefix"]
