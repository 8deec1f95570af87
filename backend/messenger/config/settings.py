"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    # App settings
    APP_ENV: str = os.getenv("APP_ENV", "development")
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))
    CORS_ALLOW_ORIGINS = os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH: str = os.getenv("LOG_PATH", "")
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )

    # Auth
    SERVICE_AUTH_SECRET = os.getenv("SERVICE_AUTH_SECRET", "")
    SERVICE_AUTH_ISSUER = os.getenv("SERVICE_AUTH_ISSUER", "your_service_name")
    SERVICE_AUTH_AUDIENCE = os.getenv("SERVICE_AUTH_AUDIENCE", "your_service_audience")

    # Postgresql Database settings
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")
    # Upper bound for a single store call; a timeout surfaces as a retryable 503
    STORE_TIMEOUT_SECONDS: float = float(os.getenv("STORE_TIMEOUT_SECONDS", "5"))
    STORE_CONNECT_TIMEOUT_SECONDS: float = float(
        os.getenv("STORE_CONNECT_TIMEOUT_SECONDS", "10")
    )

    # Messages
    MESSAGE_BODY_MAX_LENGTH: int = int(os.getenv("MESSAGE_BODY_MAX_LENGTH", "5000"))

