import os
from functools import lru_cache
from typing import List
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=True, extra="ignore")

    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "Payment Broker")
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")

    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))

    RAZORPAY_KEY_ID: str = os.getenv("RAZORPAY_KEY_ID", "")
    RAZORPAY_KEY_SECRET: str = os.getenv("RAZORPAY_KEY_SECRET", "")
    RAZORPAY_WEBHOOK_SECRET: str = os.getenv("RAZORPAY_WEBHOOK_SECRET", "")

    # Seconds to wait on a single call to Razorpay
    PROVIDER_TIMEOUT: float = float(os.getenv("PROVIDER_TIMEOUT", "10"))

    # CORS, comma separated
    BACKEND_CORS_ORIGINS: str = os.getenv("BACKEND_CORS_ORIGINS", "http://localhost:3000")

    RATE_LIMIT: str = os.getenv("RATE_LIMIT", "100/15 minutes")
    RATE_LIMIT_ENABLED: bool = os.getenv("RATE_LIMIT_ENABLED", "true").lower() in ("1", "true", "yes")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR: str = os.getenv("LOG_DIR", "logs")
    LOG_TO_FILE: bool = os.getenv("LOG_TO_FILE", "true").lower() in ("1", "true", "yes")

    @field_validator("PROVIDER_TIMEOUT")
    @classmethod
    def positive_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("PROVIDER_TIMEOUT must be positive")
        return v

    @property
    def cors_origins(self) -> List[str]:
        value = self.BACKEND_CORS_ORIGINS.strip()
        if value.startswith("["):
            import json
            return [str(o).strip() for o in json.loads(value) if str(o).strip()]
        return [o.strip() for o in value.split(",") if o.strip()]

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    @property
    def has_provider_keys(self) -> bool:
        return bool(self.RAZORPAY_KEY_ID and self.RAZORPAY_KEY_SECRET)


@lru_cache
def get_settings() -> Settings:
    return Settings()
