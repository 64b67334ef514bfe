"""Two-way converter between JSON string literals and raw text."""

__all__ = [
    "adapters",
    "codec",
    "config",
    "direction",
    "runtime",
    "sync",
]

__version__ = "0.1.0"
