from datetime import date, datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from errors import InvalidRecordError


class ExpenseRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(..., alias="_id", min_length=1)
    amount: float = Field(..., ge=0)
    currency: str = ""
    comment: str = ""
    # ISO 8601: 2024-03-05T08:00, 2024-03-05T08:00:00.000Z, ...+04:00
    created_at: datetime

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, v):
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("currency", "comment", mode="before")
    @classmethod
    def _blank_if_missing(cls, v):
        return "" if v is None else v

    @property
    def created_on(self) -> date:
        return self.created_at.date()


class ExpenseDraft(BaseModel):
    """Body of a create / update request."""

    amount: float = Field(..., ge=0)
    currency: str = ""
    comment: str = ""
    created_at: Optional[datetime] = None

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)


class DailyBucket(BaseModel):
    day: str  # "01".."31"
    total: float = 0.0

    @property
    def day_number(self) -> int:
        return int(self.day)


class ExpenseSummary(BaseModel):
    selected_date: date
    daily_expenses: List[ExpenseRecord] = Field(default_factory=list)
    daily_total: float = 0.0
    monthly_buckets: List[DailyBucket] = Field(default_factory=list)
    monthly_total: float = 0.0


def parse_records(payload: Any) -> List[ExpenseRecord]:
    """
    Validate the raw GET /api/expenses payload.
    Raises InvalidRecordError on the first malformed record, so callers
    never aggregate a partially valid list.
    """
    if not isinstance(payload, list):
        raise InvalidRecordError(
            f"Expected a list of expenses, got {type(payload).__name__}"
        )

    records = []
    for i, item in enumerate(payload):
        try:
            records.append(ExpenseRecord.model_validate(item))
        except ValidationError as e:
            errors = e.errors()
            first = errors[0]
            field = ".".join(str(p) for p in first.get("loc", ())) or "record"
            raise InvalidRecordError(
                f"Invalid expense at position {i} ({field}): {first.get('msg')}",
                index=i,
                details=errors,
            ) from e

    return records
