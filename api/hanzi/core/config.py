from pydantic_settings import BaseSettings
from dotenv import load_dotenv
import logging
import os
from pathlib import Path

_logger = logging.getLogger(__name__)

# Look for .env in api directory (parent of hanzi directory)
api_dir = Path(__file__).parent.parent.parent
env_path = api_dir / ".env"

if env_path.exists():
    load_dotenv(env_path, override=True)
    _logger.info(f"Loaded .env file from: {env_path}")
else:
    # Fallback to current directory
    current_env = Path(".env")
    if current_env.exists():
        load_dotenv(current_env, override=True)
        _logger.info(f"Loaded .env file from: {current_env.absolute()}")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database - hosting platforms provide DATABASE_URL (uppercase)
    database_url: str = ""

    # API
    api_v1_prefix: str = "/api/v1"

    # CORS
    cors_origins: list[str] = ["*"]

    # Catalog bounds
    catalog_size: int = 3000  # Nominal number of characters in the catalog
    max_batch_size: int = 300  # Largest range/batch a single request may ask for
    max_page_size: int = 100  # Largest page for filtered browsing
    max_search_limit: int = 100
    default_search_limit: int = 50
    max_quiz_questions: int = 50
    max_id: int = 2147483647  # Largest value an integer primary key column holds

    # User settings bounds (values outside are clamped)
    min_daily_char_count: int = 1
    max_daily_char_count: int = 50
    min_standard_mode_page_size: int = 10
    max_standard_mode_page_size: int = 100

    class Config:
        env_file = ".env"
        case_sensitive = False

    def __init__(self, **kwargs):
        # Ensure we read DATABASE_URL from environment (provided uppercase)
        if not kwargs.get("database_url"):
            kwargs["database_url"] = os.getenv("DATABASE_URL", "")
        super().__init__(**kwargs)


# Create settings instance
settings = Settings()

# Validate required DATABASE_URL
if not settings.database_url:
    raise ValueError("DATABASE_URL environment variable is required")
