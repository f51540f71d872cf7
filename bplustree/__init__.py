"""B+ tree nodes keyed by integers, with their rebalancing operations."""

__version__ = "0.1.0"
__all__ = ["node"]