from pydantic import BaseModel, Field, ConfigDict, computed_field
from typing import List, Optional
import datetime as dt

from finance_tracker.services.catalog import resolve_icon

TYPE_PATTERN = "^(income|expense)$"


class CategorySnapshot(BaseModel):
    name: str
    icon: str
    color: str

    @computed_field
    @property
    def component(self) -> str:
        return resolve_icon(self.icon).component

    model_config = ConfigDict(from_attributes=True)


class TransactionBase(BaseModel):
    amount: float = Field(..., gt=0)
    description: Optional[str] = None
    date: dt.date
    type: str = Field(..., pattern=TYPE_PATTERN)
    category_id: str = Field(..., min_length=1)


class TransactionCreate(TransactionBase):
    # today when omitted
    date: Optional[dt.date] = None


class TransactionUpdate(TransactionBase):
    pass


class TransactionResponse(TransactionBase):
    id: str
    user_id: str
    created_at: dt.datetime
    updated_at: dt.datetime
    categories: Optional[CategorySnapshot] = None

    model_config = ConfigDict(from_attributes=True)


class TransactionGroup(BaseModel):
    label: str
    date: dt.date
    transactions: List[TransactionResponse]


class TransactionListResponse(BaseModel):
    filter_type: str
    search: str
    total_count: int
    groups: List[TransactionGroup]
