"""
Beer Bank Ledger: FastAPI Application.

This is the entry point for the application.
All routers are registered here.
"""

import logging

from fastapi import FastAPI

from beer_bank.config import get_settings
from beer_bank.api.health import router as health_router
from beer_bank.api.accounts import router as accounts_router
from beer_bank.api.transfers import router as transfers_router

settings = get_settings()
logging.basicConfig(level=settings.LOG_LEVEL)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Accounts, deposits, withdrawals and transfers",
    debug=settings.DEBUG,
)

# Register routers
app.include_router(health_router)
app.include_router(accounts_router)
app.include_router(transfers_router)
