"""
Database models package.
"""

from fintrack.models.record import Record

__all__ = [
    "Record",
]
