from pydantic_settings import BaseSettings
from typing import Optional

class Settings(BaseSettings):
    # API Settings
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Small Business Manager API"
    DEBUG: bool = True
    ALLOWED_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    # Database
    DATABASE_URL: str = "sqlite:///./business.db"
    DATABASE_SSL_MODE: Optional[str] = None

    # Database connection settings
    DATABASE_POOL_SIZE: int = 20
    DATABASE_MAX_OVERFLOW: int = 10
    DATABASE_POOL_TIMEOUT: int = 30
    DATABASE_POOL_RECYCLE: int = 1800

    # Demo principal used until real authentication exists
    DEMO_USER_ID: int = 1

    # Business plans
    DEFAULT_TEMPLATE: str = "standard"
    STRICT_CONTENT_DECODING: bool = False

    # Activity feed
    ACTIVITY_FEED_LIMIT: int = 50

    class Config:
        env_file = ".env"

    @property
    def allowed_origins(self) -> list[str]:
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]

settings = Settings()
