"""
Index backed table implementation.
Rows are kept in display order, with an id -> row index for lookups.
"""

import asyncio
from typing import Dict, List, Optional

from ..data import RowData, generate_row_data
from .list_table import RenderedRow


class IndexedTableImplementation:
    """
    Table keeping an id -> row index next to the display order.
    
    Lookups and in-place updates are O(1); swap and removal still need
    the position of the row in the display list.
    
    Appended rows are never merged with existing ones, so a table may hold
    several rows with the same id. The index points at the first of them,
    which is the row every id based operation acts on.
    """
    
    name = "Indexed table"
    version = "1.0.0"
    
    def __init__(self):
        self.rows: List[RenderedRow] = []
        self.index: Dict[str, RenderedRow] = {}
        self.selected_id: Optional[str] = None
    
    def _position(self, rendered: RenderedRow) -> int:
        for position, row in enumerate(self.rows):
            if row is rendered:
                return position
        raise LookupError(f"Row {rendered.id} missing from display order")
    
    def _reindex(self, row_id: str) -> None:
        for row in self.rows:
            if row.id == row_id:
                self.index[row_id] = row
                return
        self.index.pop(row_id, None)
    
    async def create_rows(self, count: int) -> None:
        await self.replace_all(generate_row_data(count))
    
    async def replace_all(self, rows: List[RowData]) -> None:
        await asyncio.sleep(0)
        self.rows = []
        self.index = {}
        self._add(rows)
        self.selected_id = None
    
    def _add(self, rows: List[RowData]) -> None:
        for row in rows:
            rendered = RenderedRow.from_data(row)
            self.rows.append(rendered)
            self.index.setdefault(row.id, rendered)
    
    async def partial_update(self, rows: List[RowData]) -> None:
        await asyncio.sleep(0)
        for row in rows:
            rendered = self.index.get(row.id)
            if rendered is not None:
                rendered.update(row)
    
    async def select_row(self, row_id: str) -> None:
        await asyncio.sleep(0)
        rendered = self.index.get(row_id)
        if rendered is None:
            return
        
        previous = self.index.get(self.selected_id) if self.selected_id else None
        if previous is not None:
            previous.selected = False
        rendered.selected = True
        self.selected_id = row_id
    
    async def swap_rows(self, first_id: str, second_id: str) -> None:
        await asyncio.sleep(0)
        if first_id not in self.index or second_id not in self.index:
            return
        
        first = self._position(self.index[first_id])
        second = self._position(self.index[second_id])
        self.rows[first], self.rows[second] = self.rows[second], self.rows[first]
    
    async def remove_row(self, row_id: str) -> None:
        await asyncio.sleep(0)
        rendered = self.index.get(row_id)
        if rendered is None:
            return
        
        del self.rows[self._position(rendered)]
        self._reindex(row_id)
        if self.selected_id == row_id:
            self.selected_id = None
    
    async def append_rows(self, rows: List[RowData]) -> None:
        await asyncio.sleep(0)
        self._add(rows)
    
    async def clear_rows(self) -> None:
        await asyncio.sleep(0)
        self.rows = []
        self.index = {}
        self.selected_id = None
    
    def cleanup(self) -> None:
        self.rows = []
        self.index = {}
        self.selected_id = None
    
    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(rows={len(self.rows)})>"
