"""In-memory queries and aggregates over payment records."""

__version__ = "0.1.0"
