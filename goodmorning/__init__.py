"""Random writing-prompt words from a SQLite store, served by a WSGI app."""

__version__ = "0.1.0"
__all__ = ["__version__"]