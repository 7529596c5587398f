"""Tax calculation, inclusive-price back-solving and ledger entries in integer cents."""

__version__ = "0.1.0"
__all__ = ["model", "engine", "cli"]