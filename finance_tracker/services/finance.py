import logging
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Union

from sqlalchemy import select, desc, asc, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from finance_tracker.config import settings
from finance_tracker.core.exceptions import CategoryInUseError, CategoryMismatchError
from finance_tracker.models.category import Category, GlobalCategory
from finance_tracker.models.profile import Profile
from finance_tracker.models.transaction import Transaction
from finance_tracker.schemas.category import CategoryCreate, CategoryUpdate
from finance_tracker.schemas.transaction import (
    CategorySnapshot, TransactionCreate, TransactionResponse, TransactionUpdate,
)
from finance_tracker.services import analytics
from finance_tracker.services.formatting import format_cop

logger = logging.getLogger(__name__)

AnyCategory = Union[Category, GlobalCategory]

RECENT_TRANSACTIONS = 5


def build_category_lookup(global_categories: Iterable, user_categories: Iterable) -> dict:
    """
    Single id -> category map. Global rows go in first and user rows
    overwrite them, so a user category wins when ids collide.
    """
    lookup = {}
    for cat in global_categories:
        lookup[cat.id] = cat
    for cat in user_categories:
        lookup[cat.id] = cat
    return lookup


def attach_categories(rows: Iterable[Transaction], lookup: dict) -> List[TransactionResponse]:
    result = []
    for row in rows:
        trx = TransactionResponse.model_validate(row)
        cat = lookup.get(row.category_id)
        trx.categories = CategorySnapshot.model_validate(cat) if cat is not None else None
        result.append(trx)
    return result


class FinanceService:
    @staticmethod
    def get_system_time() -> datetime:
        return settings.MOCK_NOW or datetime.now()

    # --- profiles ---

    @staticmethod
    async def ensure_profile(db: AsyncSession, claims: dict) -> Profile:
        profile = await db.get(Profile, claims["sub"])
        if profile:
            return profile

        issued_at = claims.get("iat")
        profile = Profile(
            id=claims["sub"],
            email=claims.get("email") or "",
            full_name=(claims.get("user_metadata") or {}).get("full_name"),
            last_sign_in_at=datetime.fromtimestamp(issued_at, tz=timezone.utc) if issued_at else None,
        )
        db.add(profile)
        try:
            await db.commit()
        except IntegrityError:
            # another request for the same user inserted it first
            await db.rollback()
            return await db.get(Profile, claims["sub"])
        await db.refresh(profile)
        logger.info("Created profile for user %s", profile.id)
        return profile

    # --- categories ---

    @staticmethod
    async def fetch_global_categories(db: AsyncSession) -> List[GlobalCategory]:
        query = select(GlobalCategory).order_by(desc(GlobalCategory.type), asc(GlobalCategory.name))
        result = await db.execute(query)
        return list(result.scalars().all())

    @staticmethod
    async def fetch_categories_for_user(db: AsyncSession, user_id: str) -> List[Category]:
        query = (
            select(Category)
            .where(Category.user_id == user_id)
            .order_by(desc(Category.type), asc(Category.name))
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    @staticmethod
    async def get_category(db: AsyncSession, user_id: str, category_id: str) -> Optional[Category]:
        query = select(Category).where(Category.id == category_id, Category.user_id == user_id)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    @staticmethod
    async def resolve_category(db: AsyncSession, user_id: str, category_id: str) -> Optional[AnyCategory]:
        category = await FinanceService.get_category(db, user_id, category_id)
        if category:
            return category
        return await db.get(GlobalCategory, category_id)

    @staticmethod
    async def count_references(db: AsyncSession, user_id: str, category_id: str) -> int:
        query = select(func.count(Transaction.id)).where(
            Transaction.category_id == category_id,
            Transaction.user_id == user_id,
        )
        result = await db.execute(query)
        return result.scalar() or 0

    @staticmethod
    async def create_category(db: AsyncSession, user_id: str, data: CategoryCreate) -> Category:
        category = Category(user_id=user_id, **data.model_dump(mode="json"))
        db.add(category)
        await db.commit()
        await db.refresh(category)
        logger.info("User %s created %s category %r", user_id, category.type, category.name)
        return category

    @staticmethod
    async def update_category(db: AsyncSession, user_id: str, category_id: str,
                              data: CategoryUpdate) -> Optional[Category]:
        category = await FinanceService.get_category(db, user_id, category_id)
        if not category:
            return None

        if data.type != category.type and await FinanceService.count_references(db, user_id, category_id):
            raise CategoryMismatchError("No puedes cambiar el tipo de una categoría con transacciones asociadas")

        for field, value in data.model_dump(mode="json").items():
            setattr(category, field, value)

        await db.commit()
        await db.refresh(category)
        return category

    @staticmethod
    async def delete_category(db: AsyncSession, user_id: str, category_id: str) -> bool:
        category = await FinanceService.get_category(db, user_id, category_id)
        if not category:
            return False

        references = await FinanceService.count_references(db, user_id, category_id)
        if references:
            logger.info("Refused to delete category %s: %d transactions", category_id, references)
            raise CategoryInUseError(category_id, references)

        try:
            await db.delete(category)
            await db.commit()
        except IntegrityError:
            await db.rollback()
            logger.info("Database refused to delete category %s", category_id)
            raise CategoryInUseError(category_id)

        logger.info("User %s deleted category %s", user_id, category_id)
        return True

    # --- transactions ---

    @staticmethod
    async def fetch_transactions_for_user(db: AsyncSession, user_id: str) -> List[TransactionResponse]:
        query = (
            select(Transaction)
            .where(Transaction.user_id == user_id)
            .order_by(desc(Transaction.date), desc(Transaction.created_at))
        )
        result = await db.execute(query)
        rows = result.scalars().all()

        lookup = build_category_lookup(
            await FinanceService.fetch_global_categories(db),
            await FinanceService.fetch_categories_for_user(db, user_id),
        )
        return attach_categories(rows, lookup)

    @staticmethod
    async def _get_row(db: AsyncSession, user_id: str, transaction_id: str) -> Optional[Transaction]:
        query = select(Transaction).where(Transaction.id == transaction_id, Transaction.user_id == user_id)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    @staticmethod
    async def _with_category(db: AsyncSession, user_id: str, row: Transaction) -> TransactionResponse:
        category = await FinanceService.resolve_category(db, user_id, row.category_id)
        lookup = {category.id: category} if category else {}
        return attach_categories([row], lookup)[0]

    @staticmethod
    async def _check_category(db: AsyncSession, user_id: str, category_id: str, trx_type: str):
        category = await FinanceService.resolve_category(db, user_id, category_id)
        if category is None:
            raise CategoryMismatchError("La categoría no existe")
        if category.type != trx_type:
            raise CategoryMismatchError(
                f"La categoría '{category.name}' es de tipo {category.type}, no {trx_type}"
            )

    @staticmethod
    async def get_transaction(db: AsyncSession, user_id: str, transaction_id: str) -> Optional[TransactionResponse]:
        row = await FinanceService._get_row(db, user_id, transaction_id)
        if not row:
            return None
        return await FinanceService._with_category(db, user_id, row)

    @staticmethod
    async def create_transaction(db: AsyncSession, user_id: str, data: TransactionCreate) -> TransactionResponse:
        await FinanceService._check_category(db, user_id, data.category_id, data.type)

        values = data.model_dump()
        if values["date"] is None:
            values["date"] = FinanceService.get_system_time().date()

        row = Transaction(user_id=user_id, **values)
        db.add(row)
        await db.commit()
        await db.refresh(row)
        logger.info("User %s recorded %s of %.2f", user_id, row.type, row.amount)
        return await FinanceService._with_category(db, user_id, row)

    @staticmethod
    async def update_transaction(db: AsyncSession, user_id: str, transaction_id: str,
                                 data: TransactionUpdate) -> Optional[TransactionResponse]:
        row = await FinanceService._get_row(db, user_id, transaction_id)
        if not row:
            return None

        await FinanceService._check_category(db, user_id, data.category_id, data.type)
        for field, value in data.model_dump().items():
            setattr(row, field, value)

        await db.commit()
        await db.refresh(row)
        logger.info("User %s updated transaction %s", user_id, transaction_id)
        return await FinanceService._with_category(db, user_id, row)

    @staticmethod
    async def delete_transaction(db: AsyncSession, user_id: str, transaction_id: str) -> bool:
        row = await FinanceService._get_row(db, user_id, transaction_id)
        if not row:
            return False

        await db.delete(row)
        await db.commit()
        logger.info("User %s deleted transaction %s", user_id, transaction_id)
        return True

    # --- screens ---

    @staticmethod
    async def get_transaction_list(db: AsyncSession, user_id: str, filter_type: str = "all",
                                   search: str = "") -> dict:
        transactions = await FinanceService.fetch_transactions_for_user(db, user_id)
        filtered = analytics.filter_transactions(transactions, filter_type, search)
        grouped = analytics.group_by_date(filtered, settings.LOCALE)

        return {
            "filter_type": filter_type,
            "search": search,
            "total_count": len(filtered),
            "groups": [
                {"label": label, "date": items[0].date, "transactions": items}
                for label, items in grouped.items()
            ],
        }

    @staticmethod
    async def get_dashboard(db: AsyncSession, user_id: str) -> dict:
        now = FinanceService.get_system_time()
        transactions = await FinanceService.fetch_transactions_for_user(db, user_id)
        summary = analytics.aggregate(transactions)

        return {
            "summary": summary,
            "formatted": {key: format_cop(value) for key, value in summary.items()},
            "share": analytics.income_expense_share(summary),
            "weekly": analytics.bucket_by_week(transactions, now, settings.LOCALE),
            "recent_transactions": transactions[:RECENT_TRANSACTIONS],
            "system_date": now,
        }
