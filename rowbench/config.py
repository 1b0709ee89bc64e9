"""
Configuration management for the row rendering benchmark.
Loads settings from environment variables and .env file.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file from project root
PROJECT_ROOT = Path(__file__).parent.parent
load_dotenv(PROJECT_ROOT / ".env")


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Central configuration management."""
    
    # ==========================================================================
    # Benchmark Settings
    # ==========================================================================
    ITERATIONS: int = int(os.getenv("BENCH_ITERATIONS", "3"))
    SETTLE_INTERVAL: float = float(os.getenv("BENCH_SETTLE_INTERVAL", "0.1"))  # seconds
    MEASURE_MEMORY: bool = _env_flag("BENCH_MEASURE_MEMORY", "true")
    
    # ==========================================================================
    # Row counts used by the operation catalogue
    # ==========================================================================
    DEFAULT_ROW_COUNT: int = 1000
    LARGE_ROW_COUNT: int = 10000
    APPEND_ROW_COUNT: int = 1000
