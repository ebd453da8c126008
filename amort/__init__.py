# amort/__init__.py
"""Fixed-rate loan amortization schedules."""

__version__ = "0.1.0"
