"""
Capability interface for row rendering implementations.
Every benchmarked implementation must satisfy this interface.
"""

from typing import List, Protocol, runtime_checkable

from ..data import RowData


@runtime_checkable
class RenderableCollection(Protocol):
    """
    Capability set shared by all rendering implementations.
    
    Implementations are not required to inherit from this class; any object
    exposing these attributes can be registered. Missing capabilities are only
    detected when the benchmark invokes them.
    
    Example:
        class MyTable:
            name = "My table"
            version = "1.0.0"
            
            async def create_rows(self, count):
                ...
    """
    
    name: str
    version: str
    
    async def create_rows(self, count: int) -> None:
        """Render ``count`` freshly generated rows, replacing existing ones."""
        ...
    
    async def replace_all(self, rows: List[RowData]) -> None:
        """Replace every rendered row with ``rows``."""
        ...
    
    async def partial_update(self, rows: List[RowData]) -> None:
        """Update labels and values of already rendered rows in place."""
        ...
    
    async def select_row(self, row_id: str) -> None:
        """Highlight a single row."""
        ...
    
    async def swap_rows(self, first_id: str, second_id: str) -> None:
        """Swap the positions of two rows."""
        ...
    
    async def remove_row(self, row_id: str) -> None:
        """Remove a single row."""
        ...
    
    async def append_rows(self, rows: List[RowData]) -> None:
        """Append ``rows`` after the existing ones."""
        ...
    
    async def clear_rows(self) -> None:
        """Remove every row."""
        ...
    
    def cleanup(self) -> None:
        """Release all resources. Must be safe on an already empty state."""
        ...


class BenchmarkError(Exception):
    """Base exception for benchmark errors."""
    pass


class ImplementationNotFoundError(BenchmarkError, KeyError):
    """Raised when an implementation name is not registered."""
    
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name
    
    def __str__(self) -> str:
        return f"Implementation not found: {self.name}"


class UnknownOperationError(BenchmarkError, ValueError):
    """Raised when a test refers to an operation outside the catalogue."""
    
    def __init__(self, operation: str):
        super().__init__(f"Unknown test operation: {operation}")
        self.operation = operation
