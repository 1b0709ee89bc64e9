"""
Formatting helpers for benchmark output.
"""

from typing import Optional


def format_duration(ms: float) -> str:
    """
    Format a duration given in milliseconds.
    
    Example:
        format_duration(0.5)     -> "500.00μs"
        format_duration(12.3)    -> "12.30ms"
        format_duration(2500)    -> "2.50s"
    """
    if ms < 1:
        return f"{ms * 1000:.2f}μs"
    if ms < 1000:
        return f"{ms:.2f}ms"
    return f"{ms / 1000:.2f}s"


def format_memory(num_bytes: Optional[int]) -> str:
    """Format a byte count (or memory delta) for display. ``None`` -> "N/A"."""
    if num_bytes is None:
        return "N/A"
    
    sign = "-" if num_bytes < 0 else ""
    size = abs(num_bytes)
    if size < 1024:
        return f"{sign}{size}B"
    if size < 1024 * 1024:
        return f"{sign}{size / 1024:.2f}KB"
    if size < 1024 * 1024 * 1024:
        return f"{sign}{size / (1024 * 1024):.2f}MB"
    return f"{sign}{size / (1024 * 1024 * 1024):.2f}GB"
