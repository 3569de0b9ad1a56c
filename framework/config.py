from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # --- Basic configuration ---
    APP_NAME: str = "Product Catalog"
    APP_DESCRIPTION: str = "Product catalog service with swappable repository backends"
    APP_VERSION: str = "1.0.0"
    APP_ENV: str = "development"  # development, production, testing
    DEBUG: bool = True

    # --- Logging ---
    LOG_DIR: str = "logs"

    # --- Product repository ---
    PRODUCT_REPOSITORY: str = "mock"  # mock, http

    # Remote catalog (used when PRODUCT_REPOSITORY=http)
    PRODUCTS_API_URL: str = "https://api.example.com/products"
    PRODUCTS_API_TIMEOUT: float = 10.0
    PRODUCTS_API_TOKEN: Optional[str] = None

    # In-memory catalog: multiplier applied to the simulated latencies (0 disables)
    MOCK_LATENCY_FACTOR: float = 1.0

    # --- API route prefixes (optional, overridable in private projects) ---
    API_V1_PRODUCTS_PREFIX: str = "/api/v1/products"

    # --- Pydantic ---
    # Load env from project root .env; priority: env vars > .env > defaults
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True,
    )


# Singleton settings instance
settings = Settings()
