"""Personal task tracker: JSON-backed task store with a query/mutation engine and a small CLI."""

__version__ = "0.1.0"
