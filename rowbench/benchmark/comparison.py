"""
Cross-implementation comparison of suite results.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .runner import BenchmarkResult


@dataclass
class ComparisonResult:
    """
    Outcome of running one suite across several implementations.

    ``fastest``/``slowest`` rank by total duration; ``memory_efficient`` and
    ``memory_heavy`` rank by total memory delta over results that carry one.
    Empty strings mean no implementation qualified.
    """
    implementations: List[str] = field(default_factory=list)
    results: Dict[str, List["BenchmarkResult"]] = field(default_factory=dict)
    fastest: str = ""
    slowest: str = ""
    memory_efficient: str = ""
    memory_heavy: str = ""

    def total_duration(self, name: str) -> float:
        return sum(r.duration for r in self.results.get(name, []))

    def to_dict(self):
        """Convert to dictionary."""
        return {
            "implementations": list(self.implementations),
            "totals": {name: self.total_duration(name) for name in self.implementations},
            "statistics": {
                "fastest": self.fastest,
                "slowest": self.slowest,
                "memory_efficient": self.memory_efficient,
                "memory_heavy": self.memory_heavy,
            },
            "results": {
                name: [r.to_dict() for r in results]
                for name, results in self.results.items()
            },
        }


def rank_totals(totals: Iterable[Tuple[str, float]]) -> Tuple[str, str]:
    """
    Pick the names with the lowest and highest totals.

    Ties keep the name seen first.

    Returns:
        Tuple of (lowest, highest), empty strings for no input
    """
    lowest: Optional[Tuple[str, float]] = None
    highest: Optional[Tuple[str, float]] = None

    for name, total in totals:
        if lowest is None or total < lowest[1]:
            lowest = (name, total)
        if highest is None or total > highest[1]:
            highest = (name, total)

    return (lowest[0] if lowest else "", highest[0] if highest else "")


def build_comparison(results: Dict[str, List["BenchmarkResult"]]) -> ComparisonResult:
    """Rank per-implementation suite results by duration and memory."""
    comparison = ComparisonResult(
        implementations=list(results),
        results=dict(results),
    )

    comparison.fastest, comparison.slowest = rank_totals(
        (name, sum(r.duration for r in name_results))
        for name, name_results in results.items()
    )

    memory_totals = []
    for name, name_results in results.items():
        used = [r.memory_used for r in name_results if r.memory_used is not None]
        if used:
            memory_totals.append((name, sum(used)))
    comparison.memory_efficient, comparison.memory_heavy = rank_totals(memory_totals)

    return comparison
