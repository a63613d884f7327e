"""Plug Autoloader - PSR-4 style resolution of namespaced names to files."""

from plug_autoloader.chain import LoaderChain
from plug_autoloader.config import LoaderConfig, Resolution
from plug_autoloader.registry import NamespaceRegistry
from plug_autoloader.resolver import Resolver

__version__ = "0.1.0"
__all__ = ["LoaderChain", "LoaderConfig", "NamespaceRegistry", "Resolution", "Resolver"]
