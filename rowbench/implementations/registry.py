"""
Registry of implementations under benchmark.
"""

import logging
from typing import Dict, Iterator, List

from .base import RenderableCollection, ImplementationNotFoundError

logger = logging.getLogger(__name__)


class ImplementationRegistry:
    """
    Maps implementation names to implementation objects.
    
    A later registration under an existing name silently replaces the earlier
    one. Names keep their first registration position.
    
    Example:
        registry = ImplementationRegistry()
        registry.register(ListTableImplementation())
        impl = registry.get("In-memory list")
    """
    
    def __init__(self):
        self._implementations: Dict[str, RenderableCollection] = {}
    
    def register(self, impl: RenderableCollection) -> "ImplementationRegistry":
        """Register an implementation under its ``name``."""
        if impl.name in self._implementations:
            logger.debug(f"Replacing implementation: {impl.name}")
        self._implementations[impl.name] = impl
        return self
    
    def get(self, name: str) -> RenderableCollection:
        """
        Look up an implementation.
        
        Raises:
            ImplementationNotFoundError: If ``name`` is not registered
        """
        try:
            return self._implementations[name]
        except KeyError:
            raise ImplementationNotFoundError(name) from None
    
    def names(self) -> List[str]:
        """Registered names in registration order."""
        return list(self._implementations)
    
    def teardown(self) -> None:
        """Call ``cleanup()`` on every implementation, then forget them all."""
        for name, impl in self._implementations.items():
            logger.debug(f"Cleaning up implementation: {name}")
            impl.cleanup()
        self._implementations.clear()
    
    def __contains__(self, name: object) -> bool:
        return name in self._implementations
    
    def __len__(self) -> int:
        return len(self._implementations)
    
    def __iter__(self) -> Iterator[str]:
        return iter(self._implementations)
