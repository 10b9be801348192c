from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

BACKEND_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_RESOURCE_PREFIX = "/resource/image/audio"


def _load_dotenv() -> None:
    if os.getenv("IMAGESTORE_SKIP_DOTENV") == "1":
        return

    env_path = BACKEND_ROOT / ".env"
    if not env_path.exists():
        return

    load_dotenv(env_path, override=True)


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _parse_positive_float(value: str | None, default: float) -> float:
    if value is None:
        return default
    raw = value.strip()
    if not raw:
        return default
    try:
        parsed = float(raw)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _parse_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    return default


@dataclass(frozen=True)
class Settings:
    env: str
    app_name: str
    cors_origins: list[str]
    images_dir: Path
    resource_prefix: str
    fetch_timeout_seconds: float
    infer_extension: bool


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_dotenv()

    env = os.getenv("IMAGESTORE_ENV", "development")
    cors = os.getenv("IMAGESTORE_CORS_ORIGINS", "http://localhost:3000")
    images_dir = Path(os.getenv("IMAGESTORE_IMAGES_DIR") or BACKEND_ROOT / "images")
    resource_prefix = "/" + (os.getenv("IMAGESTORE_RESOURCE_PREFIX") or DEFAULT_RESOURCE_PREFIX).strip("/")
    fetch_timeout_seconds = max(
        1.0, _parse_positive_float(os.getenv("IMAGESTORE_FETCH_TIMEOUT_SECONDS"), default=30.0)
    )

    return Settings(
        env=env,
        app_name="Image Store API",
        cors_origins=_split_csv(cors),
        images_dir=images_dir,
        resource_prefix=resource_prefix,
        fetch_timeout_seconds=fetch_timeout_seconds,
        infer_extension=_parse_bool(os.getenv("IMAGESTORE_INFER_EXTENSION"), default=False),
    )
