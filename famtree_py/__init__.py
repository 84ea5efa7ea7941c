"""Family relationship validator and report generator."""

__version__ = "0.1.0"
