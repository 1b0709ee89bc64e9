"""
Row rendering implementations package.
Each implementation satisfies the RenderableCollection interface.
"""

from .base import (
    RenderableCollection,
    BenchmarkError,
    ImplementationNotFoundError,
    UnknownOperationError,
)
from .registry import ImplementationRegistry
from .list_table import ListTableImplementation, RenderedRow
from .indexed_table import IndexedTableImplementation

# Registry of available implementations
IMPLEMENTATIONS = {
    "list": ListTableImplementation,
    "indexed": IndexedTableImplementation,
}


def get_implementation(name: str) -> RenderableCollection:
    """
    Get an implementation instance by key.

    Args:
        name: Implementation key (e.g., 'list', 'indexed')

    Returns:
        Implementation instance

    Raises:
        ValueError: If implementation is not found
    """
    impl_class = IMPLEMENTATIONS.get(name.lower())
    if not impl_class:
        available = ", ".join(IMPLEMENTATIONS.keys())
        raise ValueError(f"Unknown implementation: {name}. Available: {available}")

    return impl_class()


def list_implementations() -> list:
    """List all available implementation keys."""
    return list(IMPLEMENTATIONS.keys())


__all__ = [
    "RenderableCollection",
    "BenchmarkError",
    "ImplementationNotFoundError",
    "UnknownOperationError",
    "ImplementationRegistry",
    "ListTableImplementation",
    "IndexedTableImplementation",
    "RenderedRow",
    "get_implementation",
    "list_implementations",
    "IMPLEMENTATIONS",
]
