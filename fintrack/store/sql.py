"""
Record store backed by a SQL database.

Every table lives in the single ``records`` table, keyed by ``table_name``.
Filtering, ordering and paging run in Python over the table's records.
"""

import logging
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fintrack.models.record import Record
from fintrack.schemas.record import (
    BulkResponse,
    FetchParams,
    FetchResponse,
    GroupOperator,
    Operator,
    RecordResponse,
    RecordResult,
    SortType,
    WhereCondition,
    WhereGroup,
)
from fintrack.store.base import RecordStore

logger = logging.getLogger(__name__)

SYSTEM_FIELDS = ("Id", "CreatedOn", "ModifiedOn")


def _jsonable(value: Any) -> Any:
    """Convert values the JSON column cannot hold."""
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value


def _as_number(value: Any) -> Optional[Decimal]:
    if isinstance(value, bool) or value is None:
        return None
    try:
        number = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    return number if number.is_finite() else None


def _candidates(value: Any) -> List[Any]:
    """Lookup fields compare by either their Id or their Name."""
    if isinstance(value, dict):
        return [value.get("Id"), value.get("Name")]
    return [value]


def field_value(record: Dict[str, Any], field_name: str) -> Any:
    """Value of ``field_name``; ``lookup_c.Name`` reads one part of a lookup."""
    if field_name in record or "." not in field_name:
        return record.get(field_name)
    value: Any = record
    for part in field_name.split("."):
        if not isinstance(value, dict):
            return None
        value = value.get(part)
    return value


def _equals(left: Any, right: Any) -> bool:
    if left is None or right is None:
        return left is right
    if left == right:
        return True
    left_num, right_num = _as_number(left), _as_number(right)
    if left_num is not None and right_num is not None:
        return left_num == right_num
    return str(left) == str(right)


def _compare(left: Any, right: Any) -> Optional[int]:
    """Three-way compare, numeric when both sides are numbers. None if incomparable."""
    if left is None or right is None:
        return None
    left_num, right_num = _as_number(left), _as_number(right)
    if left_num is not None and right_num is not None:
        a, b = left_num, right_num
    else:
        a, b = str(left), str(right)
    return (a > b) - (a < b)


def _matches_value(operator: Operator, field_value: Any, value: Any) -> bool:
    candidates = _candidates(field_value)

    if operator in (Operator.equal_to, Operator.exact_match):
        return any(_equals(c, value) for c in candidates)
    if operator == Operator.not_equal_to:
        return not any(_equals(c, value) for c in candidates)
    if operator == Operator.starts_with:
        return any(c is not None and str(c).startswith(str(value)) for c in candidates)
    if operator == Operator.contains:
        needle = str(value).lower()
        return any(c is not None and needle in str(c).lower() for c in candidates)

    for c in candidates:
        result = _compare(c, value)
        if result is None:
            continue
        if operator == Operator.greater_than and result > 0:
            return True
        if operator == Operator.greater_than_or_equal_to and result >= 0:
            return True
        if operator == Operator.less_than and result < 0:
            return True
        if operator == Operator.less_than_or_equal_to and result <= 0:
            return True
    return False


def matches_condition(record: Dict[str, Any], condition: WhereCondition) -> bool:
    value = field_value(record, condition.field_name)
    if not condition.values:
        # No values to compare against; only an empty field matches
        return value in (None, "")
    if condition.operator == Operator.not_equal_to:
        return all(_matches_value(condition.operator, value, v) for v in condition.values)
    return any(_matches_value(condition.operator, value, v) for v in condition.values)


def matches_group(record: Dict[str, Any], group: WhereGroup) -> bool:
    outcomes = [matches_condition(record, c) for c in group.conditions]
    outcomes.extend(matches_group(record, g) for g in group.sub_groups)
    if not outcomes:
        return True
    if group.operator == GroupOperator.or_:
        return any(outcomes)
    return all(outcomes)


def _sort_key(value: Any):
    if isinstance(value, dict):
        value = value.get("Name")
    number = _as_number(value)
    if number is not None:
        return (0, number, "")
    return (1, Decimal(0), str(value))


def sort_records(records: List[Dict[str, Any]], field_name: str, sort_type: SortType) -> List[Dict[str, Any]]:
    """Stable sort on one field; records missing the field go last."""
    present = [r for r in records if field_value(r, field_name) is not None]
    missing = [r for r in records if field_value(r, field_name) is None]
    present.sort(key=lambda r: _sort_key(field_value(r, field_name)), reverse=sort_type == SortType.desc)
    return present + missing


def _project(record: Dict[str, Any], fields: Optional[List[str]]) -> Dict[str, Any]:
    if not fields:
        return record
    projected = {"Id": record["Id"]}
    for field in fields:
        projected[field] = record.get(field)
    return projected


class SQLRecordStore(RecordStore):
    """Record store over the ``records`` table of a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    @staticmethod
    def _to_dict(record: Record) -> Dict[str, Any]:
        data = dict(record.data or {})
        data["Id"] = record.id
        data["CreatedOn"] = record.created_on.isoformat() if record.created_on else None
        data["ModifiedOn"] = record.modified_on.isoformat() if record.modified_on else None
        return data

    def _get(self, table: str, record_id: Any) -> Optional[Record]:
        try:
            record_id = int(record_id)
        except (TypeError, ValueError):
            return None
        return self.db.query(Record).filter(
            Record.table_name == table,
            Record.id == record_id
        ).first()

    def fetch_records(self, table: str, params: Optional[FetchParams] = None) -> FetchResponse:
        params = params or FetchParams()
        try:
            rows = self.db.query(Record).filter(
                Record.table_name == table
            ).order_by(Record.id).all()
        except SQLAlchemyError as e:
            logger.error(f"Fetching records from {table} failed: {e}")
            return FetchResponse(success=False, message=str(e))

        records = [self._to_dict(r) for r in rows]
        records = [
            r for r in records
            if all(matches_condition(r, c) for c in params.where)
            and all(matches_group(r, g) for g in params.where_groups)
        ]

        # Apply the least significant ordering first
        for order in reversed(params.order_by):
            records = sort_records(records, order.field_name, order.sort_type)

        total = len(records)
        if params.paging_info:
            start = params.paging_info.offset
            records = records[start:start + params.paging_info.limit]

        return FetchResponse(
            success=True,
            data=[_project(r, params.fields) for r in records],
            total=total
        )

    def get_record_by_id(
        self,
        table: str,
        record_id: int,
        fields: Optional[List[str]] = None
    ) -> RecordResponse:
        try:
            record = self._get(table, record_id)
        except SQLAlchemyError as e:
            logger.error(f"Fetching record {record_id} from {table} failed: {e}")
            return RecordResponse(success=False, message=str(e))

        if record is None:
            return RecordResponse(success=True, data=None)
        return RecordResponse(success=True, data=_project(self._to_dict(record), fields))

    def create_record(self, table: str, records: List[Dict[str, Any]]) -> BulkResponse:
        results: List[RecordResult] = []
        created: List[Record] = []
        try:
            for payload in records:
                if not isinstance(payload, dict):
                    results.append(RecordResult(success=False, message="Record must be an object"))
                    created.append(None)
                    continue
                data = {k: _jsonable(v) for k, v in payload.items() if k not in SYSTEM_FIELDS}
                record = Record(table_name=table, data=data)
                self.db.add(record)
                created.append(record)
                results.append(RecordResult(success=True))

            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Creating records in {table} failed: {e}")
            return BulkResponse(success=False, message=str(e))

        for record, result in zip(created, results):
            if record is not None:
                self.db.refresh(record)
                result.data = self._to_dict(record)

        return BulkResponse(success=True, results=results)

    def update_record(self, table: str, records: List[Dict[str, Any]]) -> BulkResponse:
        results: List[RecordResult] = []
        updated: List[Optional[Record]] = []
        try:
            for payload in records:
                record_id = payload.get("Id") if isinstance(payload, dict) else None
                record = self._get(table, record_id) if record_id is not None else None
                if record is None:
                    results.append(RecordResult(
                        success=False,
                        message=f"Record {record_id} not found in {table}"
                    ))
                    updated.append(None)
                    continue

                data = dict(record.data or {})
                data.update({k: _jsonable(v) for k, v in payload.items() if k not in SYSTEM_FIELDS})
                # Reassign so the JSON column is flagged dirty
                record.data = data
                record.modified_on = datetime.utcnow()
                updated.append(record)
                results.append(RecordResult(success=True))

            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Updating records in {table} failed: {e}")
            return BulkResponse(success=False, message=str(e))

        for record, result in zip(updated, results):
            if record is not None:
                self.db.refresh(record)
                result.data = self._to_dict(record)

        return BulkResponse(success=True, results=results)

    def delete_record(self, table: str, record_ids: List[int]) -> BulkResponse:
        results: List[RecordResult] = []
        try:
            for record_id in record_ids:
                record = self._get(table, record_id)
                if record is None:
                    results.append(RecordResult(
                        success=False,
                        message=f"Record {record_id} not found in {table}"
                    ))
                    continue
                self.db.delete(record)
                results.append(RecordResult(success=True, data={"Id": record.id}))

            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Deleting records from {table} failed: {e}")
            return BulkResponse(success=False, message=str(e))

        return BulkResponse(success=True, results=results)
