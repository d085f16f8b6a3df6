from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from finance_tracker.api.deps import get_current_user
from finance_tracker.config import settings
from finance_tracker.core.database import get_db
from finance_tracker.models.profile import Profile
from finance_tracker.schemas.analytics import (
    CategoryBreakdownItem, DashboardResponse, SummaryResponse, WeekBucket,
)
from finance_tracker.schemas.category import (
    CategoriesByType, CategoryCreate, CategoryOptions, CategoryResponse, CategoryUpdate,
    GlobalCategoriesByType, IconOption,
)
from finance_tracker.schemas.profile import ProfileResponse
from finance_tracker.schemas.transaction import (
    TYPE_PATTERN, TransactionCreate, TransactionListResponse, TransactionResponse, TransactionUpdate,
)
from finance_tracker.services import analytics
from finance_tracker.services.catalog import COLOR_OPTIONS, IconName, resolve_icon
from finance_tracker.services.finance import FinanceService

api_router = APIRouter()

FILTER_PATTERN = "^(all|income|expense)$"


def _split_by_type(categories):
    return {
        "income": [c for c in categories if c.type == "income"],
        "expense": [c for c in categories if c.type == "expense"],
    }


@api_router.get("/profile", response_model=ProfileResponse, tags=["Profile"])
async def get_profile(user: Profile = Depends(get_current_user)):
    return user


# --- Dashboard ---

@api_router.get("/dashboard", response_model=DashboardResponse, tags=["Dashboard"])
async def get_dashboard(user: Profile = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    return await FinanceService.get_dashboard(db, user.id)


# --- Transactions ---

@api_router.get("/transactions", response_model=TransactionListResponse, tags=["Transactions"])
async def list_transactions(
        filter_type: str = Query("all", pattern=FILTER_PATTERN),
        search: str = "",
        user: Profile = Depends(get_current_user),
        db: AsyncSession = Depends(get_db),
):
    return await FinanceService.get_transaction_list(db, user.id, filter_type, search)


@api_router.post("/transactions", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED,
                 tags=["Transactions"])
async def add_transaction(trx: TransactionCreate, user: Profile = Depends(get_current_user),
                          db: AsyncSession = Depends(get_db)):
    return await FinanceService.create_transaction(db, user.id, trx)


@api_router.get("/transactions/{transaction_id}", response_model=TransactionResponse, tags=["Transactions"])
async def get_transaction(transaction_id: str, user: Profile = Depends(get_current_user),
                          db: AsyncSession = Depends(get_db)):
    result = await FinanceService.get_transaction(db, user.id, transaction_id)
    if not result:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return result


@api_router.put("/transactions/{transaction_id}", response_model=TransactionResponse, tags=["Transactions"])
async def update_transaction(transaction_id: str, trx: TransactionUpdate,
                             user: Profile = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    result = await FinanceService.update_transaction(db, user.id, transaction_id, trx)
    if not result:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return result


@api_router.delete("/transactions/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT,
                   tags=["Transactions"])
async def delete_transaction(transaction_id: str, user: Profile = Depends(get_current_user),
                             db: AsyncSession = Depends(get_db)):
    if not await FinanceService.delete_transaction(db, user.id, transaction_id):
        raise HTTPException(status_code=404, detail="Transaction not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# --- Categories ---

@api_router.get("/categories", response_model=CategoriesByType, tags=["Categories"])
async def get_categories(user: Profile = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    return _split_by_type(await FinanceService.fetch_categories_for_user(db, user.id))


@api_router.get("/categories/global", response_model=GlobalCategoriesByType, tags=["Categories"])
async def get_global_categories(user: Profile = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    return _split_by_type(await FinanceService.fetch_global_categories(db))


@api_router.get("/categories/options", response_model=CategoryOptions, tags=["Categories"])
async def get_category_options():
    return CategoryOptions(
        icons=[IconOption.model_validate(resolve_icon(icon.value)) for icon in IconName],
        colors=list(COLOR_OPTIONS),
    )


@api_router.post("/categories", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED,
                 tags=["Categories"])
async def add_category(category: CategoryCreate, user: Profile = Depends(get_current_user),
                       db: AsyncSession = Depends(get_db)):
    return await FinanceService.create_category(db, user.id, category)


@api_router.put("/categories/{category_id}", response_model=CategoryResponse, tags=["Categories"])
async def update_category(category_id: str, category: CategoryUpdate,
                          user: Profile = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    result = await FinanceService.update_category(db, user.id, category_id, category)
    if not result:
        raise HTTPException(status_code=404, detail="Category not found")
    return result


@api_router.delete("/categories/{category_id}", status_code=status.HTTP_204_NO_CONTENT, tags=["Categories"])
async def delete_category(category_id: str, user: Profile = Depends(get_current_user),
                          db: AsyncSession = Depends(get_db)):
    if not await FinanceService.delete_category(db, user.id, category_id):
        raise HTTPException(status_code=404, detail="Category not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# --- Analytics ---

@api_router.get("/analytics/summary", response_model=SummaryResponse, tags=["Analytics"])
async def get_summary(user: Profile = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    transactions = await FinanceService.fetch_transactions_for_user(db, user.id)
    return analytics.aggregate(transactions)


@api_router.get("/analytics/weekly", response_model=List[WeekBucket], tags=["Analytics"])
async def get_weekly(user: Profile = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    transactions = await FinanceService.fetch_transactions_for_user(db, user.id)
    return analytics.bucket_by_week(transactions, FinanceService.get_system_time(), settings.LOCALE)


@api_router.get("/analytics/categories", response_model=List[CategoryBreakdownItem], tags=["Analytics"])
async def get_category_breakdown(
        tx_type: str = Query("expense", alias="type", pattern=TYPE_PATTERN),
        user: Profile = Depends(get_current_user),
        db: AsyncSession = Depends(get_db),
):
    transactions = await FinanceService.fetch_transactions_for_user(db, user.id)
    return analytics.category_breakdown(transactions, tx_type, settings.LOCALE)
