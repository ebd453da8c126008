# tests/__init__.py
"""
Expose common test utilities so tests can import directly:
    from tests import make_loan, make_schedule
"""

from .utils import make_loan, make_schedule

__all__ = ["make_loan", "make_schedule"]
