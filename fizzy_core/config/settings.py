"""Application configuration settings"""

import os
from urllib.parse import quote

from dotenv import load_dotenv

load_dotenv()


def _database_url() -> str:
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    username = quote(os.getenv("DATABASE_USERNAME", "fizzy"), safe="")
    password = quote(os.getenv("DATABASE_PASSWORD", ""), safe="")
    host = os.getenv("DATABASE_HOST", "localhost")
    port = os.getenv("DATABASE_PORT", "3306")
    name = os.getenv("DATABASE_NAME", "fizzy")
    return f"mysql://{username}:{password}@{host}:{port}/{name}"


class Config:
    # Storage backend: "prisma" (MySQL through the Prisma client) or "memory"
    STORE_BACKEND = os.getenv("STORE_BACKEND", "prisma").lower()

    # Database
    DATABASE_URL = _database_url()
    DATABASE_CONNECT_TIMEOUT = int(os.getenv("DATABASE_CONNECT_TIMEOUT", "10"))

    # Fizzy web UI, used to link cards in DTOs
    FIZZY_BASE_URL = os.getenv("FIZZY_BASE_URL") or None

    # Paging
    DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", "20"))
    CARD_DETAILS_COMMENT_LIMIT = int(os.getenv("CARD_DETAILS_COMMENT_LIMIT", "5"))
    COMMENT_LIST_LIMIT = int(os.getenv("COMMENT_LIST_LIMIT", "50"))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE = os.getenv("LOG_FILE") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s [%(levelname)s] [%(correlation_id)s] %(name)s: %(message)s",
    )
