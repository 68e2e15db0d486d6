# src/app/main.py
from __future__ import annotations
import logging
import sys
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.app.config import settings
from src.app.deps import close_http_client
from src.app.routers.moderation import router as moderation_router
from src.app.routers.recipes import router as recipes_router

# Plain stdout logging (fine for dev and containers)
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

app = FastAPI(title="Ethiopian Recipes API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.FRONTEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(recipes_router)
app.include_router(moderation_router)


@app.on_event("shutdown")
async def shutdown() -> None:
    await close_http_client()


@app.get("/health")
def health():
    return {"ok": True}
