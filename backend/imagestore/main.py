from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from imagestore.api.v1.images import router as v1_router
from imagestore.core.config import get_settings
from imagestore.core.logging import configure_logging

settings = get_settings()
configure_logging(logging.INFO)

app = FastAPI(title=settings.app_name, version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(v1_router)

settings.images_dir.mkdir(parents=True, exist_ok=True)
app.mount(settings.resource_prefix, StaticFiles(directory=str(settings.images_dir)), name="images")


@app.get("/healthz", tags=["health"])
def healthz() -> dict[str, str]:
    return {"ok": "true"}
