"""
Record store query and response schemas.

Records travel as plain dicts: an integer ``Id``, a ``Name``, a ``CreatedOn``
timestamp and app fields suffixed with ``_c``. Lookup fields hold
``{"Id": ..., "Name": ...}`` or ``None``.
"""

import enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class Operator(str, enum.Enum):
    """Field comparison operators."""
    equal_to = "EqualTo"
    exact_match = "ExactMatch"
    not_equal_to = "NotEqualTo"
    starts_with = "StartsWith"
    contains = "Contains"
    greater_than = "GreaterThan"
    greater_than_or_equal_to = "GreaterThanOrEqualTo"
    less_than = "LessThan"
    less_than_or_equal_to = "LessThanOrEqualTo"


class GroupOperator(str, enum.Enum):
    """How conditions of a where group combine."""
    and_ = "AND"
    or_ = "OR"


class SortType(str, enum.Enum):
    asc = "ASC"
    desc = "DESC"


class WhereCondition(BaseModel):
    """Matches when the field compares true against any of ``values``."""
    field_name: str
    operator: Operator = Operator.equal_to
    values: List[Any] = Field(default_factory=list)


class WhereGroup(BaseModel):
    operator: GroupOperator = GroupOperator.and_
    conditions: List[WhereCondition] = Field(default_factory=list)
    sub_groups: List["WhereGroup"] = Field(default_factory=list)


WhereGroup.model_rebuild()


class OrderBy(BaseModel):
    field_name: str
    sort_type: SortType = SortType.asc


class PagingInfo(BaseModel):
    limit: int = Field(100, ge=1)
    offset: int = Field(0, ge=0)


class FetchParams(BaseModel):
    """Parameters for fetching records from a table."""
    fields: Optional[List[str]] = None
    where: List[WhereCondition] = Field(default_factory=list)
    where_groups: List[WhereGroup] = Field(default_factory=list)
    order_by: List[OrderBy] = Field(default_factory=list)
    paging_info: Optional[PagingInfo] = None


class FetchResponse(BaseModel):
    success: bool
    message: Optional[str] = None
    data: List[Dict[str, Any]] = Field(default_factory=list)
    total: int = 0


class RecordResponse(BaseModel):
    success: bool
    message: Optional[str] = None
    data: Optional[Dict[str, Any]] = None


class FieldError(BaseModel):
    field_label: str
    message: str


class RecordResult(BaseModel):
    """Outcome for a single record of a bulk write."""
    success: bool
    data: Optional[Dict[str, Any]] = None
    errors: List[FieldError] = Field(default_factory=list)
    message: Optional[str] = None


class BulkResponse(BaseModel):
    success: bool
    message: Optional[str] = None
    results: List[RecordResult] = Field(default_factory=list)
