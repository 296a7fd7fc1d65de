"""
Base record store interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from fintrack.schemas.record import BulkResponse, FetchParams, FetchResponse, RecordResponse


class RecordStoreError(Exception):
    """The record store reported a failed request."""


class RecordNotFoundError(LookupError):
    """No record with the requested id exists."""


class RecordStore(ABC):
    """Generic create/read/update/delete over named tables of records"""

    @abstractmethod
    def fetch_records(self, table: str, params: Optional[FetchParams] = None) -> FetchResponse:
        """
        Fetch the records of a table matching ``params``.
        Unknown tables yield an empty result.
        """
        pass

    @abstractmethod
    def get_record_by_id(
        self,
        table: str,
        record_id: int,
        fields: Optional[List[str]] = None
    ) -> RecordResponse:
        """Fetch a single record; ``data`` is None when it does not exist"""
        pass

    @abstractmethod
    def create_record(self, table: str, records: List[Dict[str, Any]]) -> BulkResponse:
        """Create records, returning one result per input record"""
        pass

    @abstractmethod
    def update_record(self, table: str, records: List[Dict[str, Any]]) -> BulkResponse:
        """
        Update records identified by their ``Id`` key.
        Only the fields present on each record are changed.
        """
        pass

    @abstractmethod
    def delete_record(self, table: str, record_ids: List[int]) -> BulkResponse:
        """Delete records by id, returning one result per id"""
        pass
