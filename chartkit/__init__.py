"""Value sequences, derived chart series, matrix algebra and numeric helpers for charts."""

__version__ = "0.1.0"