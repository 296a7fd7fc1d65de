"""
Record store package.
"""

from fintrack.store.base import RecordStore, RecordStoreError, RecordNotFoundError
from fintrack.store.sql import SQLRecordStore

__all__ = ['RecordStore', 'RecordStoreError', 'RecordNotFoundError', 'SQLRecordStore']
