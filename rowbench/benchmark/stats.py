"""
Summary statistics over duration samples.
"""

import statistics
from dataclasses import dataclass, asdict
from typing import Dict, Iterable


@dataclass(frozen=True)
class Statistics:
    """Summary of a sample of durations."""
    mean: float = 0.0
    median: float = 0.0
    std_dev: float = 0.0
    min: float = 0.0
    max: float = 0.0
    
    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


def calculate_statistics(values: Iterable[float]) -> Statistics:
    """
    Calculate mean, median, population standard deviation, min and max.
    
    An empty sample yields all zeros.
    
    Args:
        values: Duration samples, any iterable
        
    Returns:
        Statistics for the sample
    """
    values = list(values)
    if not values:
        return Statistics()
    
    return Statistics(
        mean=statistics.fmean(values),
        median=statistics.median(values),
        std_dev=statistics.pstdev(values),
        min=min(values),
        max=max(values),
    )
