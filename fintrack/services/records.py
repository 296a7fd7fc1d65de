"""
Helpers shared by the services that map store records to domain objects.
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional

from fintrack.schemas.record import BulkResponse, FetchResponse, RecordResponse
from fintrack.store.base import RecordStoreError

logger = logging.getLogger(__name__)


def to_decimal(value: Any) -> Decimal:
    """
    Coerce a stored numeric field to Decimal.
    Missing or malformed values become 0.
    """
    if value is None or value == "" or isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, Decimal):
        return value if value.is_finite() else Decimal("0")
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError):
        logger.debug(f"Treating malformed amount {value!r} as 0")
        return Decimal("0")
    if not result.is_finite():
        logger.debug(f"Treating non-finite amount {value!r} as 0")
        return Decimal("0")
    return result


def lookup_name(value: Any) -> str:
    """Display name of a lookup field, or empty string."""
    if isinstance(value, dict):
        return value.get("Name") or ""
    return ""


def text(value: Any) -> str:
    return "" if value is None else str(value)


def checked_data(response: FetchResponse, what: str) -> List[Dict[str, Any]]:
    """Return fetched records, raising when the store reported a failure."""
    if not response.success:
        logger.error(f"Error fetching {what}: {response.message}")
        raise RecordStoreError(response.message or f"Failed to fetch {what}")
    return response.data


def checked_record(response: RecordResponse, what: str) -> Optional[Dict[str, Any]]:
    if not response.success:
        logger.error(f"Error fetching {what}: {response.message}")
        raise RecordStoreError(response.message or f"Failed to fetch {what}")
    return response.data


def first_successful(response: BulkResponse, action: str, what: str) -> Optional[Dict[str, Any]]:
    """
    Return the data of the first successful record of a bulk write.
    Per-record failures are logged; a failed request raises.
    """
    if not response.success:
        logger.error(f"Failed to {action} {what}: {response.message}")
        raise RecordStoreError(response.message or f"Failed to {action} {what}")

    failed = [r for r in response.results if not r.success]
    if failed:
        logger.warning(f"Failed to {action} {len(failed)} {what}")
        for record in failed:
            for error in record.errors:
                logger.warning(f"{error.field_label}: {error.message}")
            if record.message:
                logger.warning(record.message)

    successful = [r for r in response.results if r.success]
    if successful:
        return successful[0].data
    return None
