"""
Plain list backed table implementation.
Rows are kept in an ordered list and located by linear scan.
"""

import asyncio
from dataclasses import dataclass, field
from typing import List, Optional

from ..data import RowData, generate_row_data


@dataclass
class RenderedRow:
    """A row as presented to the user: its cells plus selection state."""
    id: str
    cells: List[str] = field(default_factory=list)
    selected: bool = False
    
    @classmethod
    def from_data(cls, row: RowData) -> "RenderedRow":
        return cls(id=row.id, cells=[row.id, row.label, str(row.value)])
    
    def update(self, row: RowData) -> None:
        self.cells[1] = row.label
        self.cells[2] = str(row.value)


class ListTableImplementation:
    """
    Table rendered into a Python list.
    
    Every lookup by id walks the list, so selection, swap and removal
    cost O(n). Serves as the baseline implementation.

    Appended rows are never merged with existing ones; id lookups act
    on the first row carrying that id.
    """
    
    name = "In-memory list"
    version = "1.0.0"
    
    def __init__(self):
        self.rows: List[RenderedRow] = []
        self.selected_id: Optional[str] = None
    
    def _find(self, row_id: str) -> int:
        for index, row in enumerate(self.rows):
            if row.id == row_id:
                return index
        return -1
    
    async def create_rows(self, count: int) -> None:
        await self.replace_all(generate_row_data(count))
    
    async def replace_all(self, rows: List[RowData]) -> None:
        await asyncio.sleep(0)
        self.rows = [RenderedRow.from_data(row) for row in rows]
        self.selected_id = None
    
    async def partial_update(self, rows: List[RowData]) -> None:
        await asyncio.sleep(0)
        for row in rows:
            index = self._find(row.id)
            if index >= 0:
                self.rows[index].update(row)
    
    async def select_row(self, row_id: str) -> None:
        await asyncio.sleep(0)
        if self.selected_id is not None:
            previous = self._find(self.selected_id)
            if previous >= 0:
                self.rows[previous].selected = False
        
        index = self._find(row_id)
        if index >= 0:
            self.rows[index].selected = True
            self.selected_id = row_id
    
    async def swap_rows(self, first_id: str, second_id: str) -> None:
        await asyncio.sleep(0)
        first = self._find(first_id)
        second = self._find(second_id)
        if first >= 0 and second >= 0:
            self.rows[first], self.rows[second] = self.rows[second], self.rows[first]
    
    async def remove_row(self, row_id: str) -> None:
        await asyncio.sleep(0)
        index = self._find(row_id)
        if index >= 0:
            del self.rows[index]
            if self.selected_id == row_id:
                self.selected_id = None
    
    async def append_rows(self, rows: List[RowData]) -> None:
        await asyncio.sleep(0)
        self.rows.extend(RenderedRow.from_data(row) for row in rows)
    
    async def clear_rows(self) -> None:
        await asyncio.sleep(0)
        self.rows = []
        self.selected_id = None
    
    def cleanup(self) -> None:
        self.rows = []
        self.selected_id = None
    
    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(rows={len(self.rows)})>"
