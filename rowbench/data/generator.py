"""
Synthetic row data for benchmark operations.
"""

import random
from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional


ADJECTIVES = [
    "Amazing", "Brilliant", "Creative", "Dynamic",
    "Elegant", "Fantastic", "Gorgeous", "Incredible",
]

NOUNS = [
    "Widget", "Component", "Element", "Module",
    "System", "Framework", "Library", "Package",
]


@dataclass
class RowData:
    """
    A single row rendered by an implementation.
    
    Attributes:
        id: Unique, deterministic identifier ("row-<index>")
        label: Human readable label
        value: Arbitrary integer payload
    """
    id: str
    label: str
    value: int
    
    def with_label(self, label: str) -> "RowData":
        """Return a copy carrying a different label."""
        return replace(self, label=label)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "label": self.label,
            "value": self.value,
        }


def generate_row_data(count: int, rng: Optional[random.Random] = None) -> List[RowData]:
    """
    Generate ``count`` rows with ids ``row-0`` .. ``row-(count-1)``.
    
    Args:
        count: Number of rows to generate
        rng: Random source for the value column (default: module ``random``)
        
    Returns:
        Ordered list of RowData
    """
    rng = rng or random
    return [
        RowData(
            id=f"row-{i}",
            label=f"{ADJECTIVES[i % len(ADJECTIVES)]} {NOUNS[i % len(NOUNS)]} {i}",
            value=rng.randrange(1000),
        )
        for i in range(max(count, 0))
    ]
