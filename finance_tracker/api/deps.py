from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from finance_tracker.core.database import get_db
from finance_tracker.core.security import get_token_claims
from finance_tracker.models.profile import Profile
from finance_tracker.services.finance import FinanceService


async def get_current_user(
        claims: dict = Depends(get_token_claims),
        db: AsyncSession = Depends(get_db),
) -> Profile:
    return await FinanceService.ensure_profile(db, claims)
