"""FastAPI application entry point."""

from ddtrace import patch_all
from fastapi import FastAPI

from routes import analysis_router

patch_all()

app = FastAPI(title="FraudShield Screener")
app.include_router(analysis_router)
