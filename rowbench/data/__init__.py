"""
Row data generation package.
"""

from .generator import RowData, generate_row_data, ADJECTIVES, NOUNS

__all__ = [
    "RowData",
    "generate_row_data",
    "ADJECTIVES",
    "NOUNS",
]
