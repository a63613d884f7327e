"""Ordered chain of lookup hooks, tried until one finds a file."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from plug_autoloader.config import Resolution

logger = logging.getLogger(__name__)

LookupHook = Callable[[str], Resolution]


class LoaderChain:
    """Explicitly owned stack of lookup hooks (e.g. Resolver instances).

    Whatever host mechanism needs lookups holds a reference to a chain;
    there is no process-wide instance.
    """

    def __init__(self) -> None:
        self.hooks: list[LookupHook] = []

    def register(self, hook: LookupHook, prepend: bool = False) -> None:
        if hook in self.hooks:
            return
        if prepend:
            self.hooks.insert(0, hook)
        else:
            self.hooks.append(hook)

    def unregister(self, hook: LookupHook) -> bool:
        """Remove a hook. Returns False if it was not registered."""
        if hook not in self.hooks:
            return False
        self.hooks.remove(hook)
        return True

    def find(self, name: str) -> Resolution:
        """Try each hook in order and return the first found result."""
        for hook in self.hooks:
            result = hook(name)
            if result:
                return result
        logger.debug(f"No hook could resolve {name}")
        return Resolution(found=False)

    def __iter__(self) -> Iterator[LookupHook]:
        return iter(list(self.hooks))

    def __len__(self) -> int:
        return len(self.hooks)
