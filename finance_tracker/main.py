import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from finance_tracker.config import settings
from finance_tracker.core.database import init_db, AsyncSessionLocal
from finance_tracker.core.exceptions import FinanceError
from finance_tracker.core.logging import configure_logging
from finance_tracker.core.seed import seed_global_categories
from finance_tracker.api.router import api_router
from finance_tracker.services.finance import FinanceService

logger = logging.getLogger(__name__)

tags_metadata = [
    {
        "name": "Dashboard",
        "description": "Balance, income vs expenses, weekly activity and recent entries.",
    },
    {
        "name": "Transactions",
        "description": "Income and expense records, filtered and grouped by day.",
    },
    {
        "name": "Categories",
        "description": "Personal and shared categories.",
    },
    {
        "name": "Analytics",
        "description": "Totals, weekly buckets and category breakdowns.",
    },
    {
        "name": "Profile",
        "description": "The signed-in user.",
    },
    {
        "name": "System",
        "description": "Health checks.",
    },
]

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="""
### API documentation

Personal finance tracking: record income and expenses by category and
follow the balance on a dashboard. Every endpoint except `/health` expects
a bearer token from the auth provider.
    """,
    version=settings.VERSION,
    openapi_tags=tags_metadata,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(FinanceError)
async def finance_error_handler(request: Request, exc: FinanceError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "code": exc.code},
    )


@app.on_event("startup")
async def startup():
    configure_logging()
    await init_db()
    if settings.SEED_GLOBAL_CATEGORIES:
        async with AsyncSessionLocal() as session:
            await seed_global_categories(session)
    logger.info("%s %s started", settings.PROJECT_NAME, settings.VERSION)

app.include_router(api_router, prefix=settings.API_V1_STR)

@app.get("/health", tags=["System"])
def health():
    return {
        "status": "operational",
        "mode": "frozen_time" if settings.MOCK_NOW else "live",
        "system_time": FinanceService.get_system_time()
    }
