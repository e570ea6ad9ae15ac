"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.routes import projection
from src.config import settings

logging.basicConfig(level=settings.log_level)

app = FastAPI(
    title="BTR Portfolio Model",
    description="Build-to-Rent Portfolio Investment Model",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(projection.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
