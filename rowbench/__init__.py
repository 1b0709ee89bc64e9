"""
Row rendering benchmark: measures and compares interchangeable
row rendering implementations on a fixed catalogue of operations.
"""

__version__ = "1.0.0"
