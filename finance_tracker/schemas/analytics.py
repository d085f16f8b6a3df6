from pydantic import BaseModel, ConfigDict
from typing import List, Optional
from datetime import date, datetime

from finance_tracker.schemas.transaction import TransactionResponse


class SummaryResponse(BaseModel):
    total_income: float
    total_expenses: float
    balance: float

    model_config = ConfigDict(json_schema_extra={
        "example": {"total_income": 100.0, "total_expenses": 60.0, "balance": 40.0}
    })


class IncomeExpenseShare(BaseModel):
    income_pct: float
    expense_pct: float


class WeekBucket(BaseModel):
    day: str
    date: date
    income: float
    expense: float


class CategoryBreakdownItem(BaseModel):
    category_id: Optional[str] = None
    name: str
    icon: str
    component: str
    color: str
    total: float
    share: float
    count: int


class FormattedSummary(BaseModel):
    balance: str
    total_income: str
    total_expenses: str


class DashboardResponse(BaseModel):
    summary: SummaryResponse
    formatted: FormattedSummary
    share: IncomeExpenseShare
    weekly: List[WeekBucket]
    recent_transactions: List[TransactionResponse]
    system_date: datetime
