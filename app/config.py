import os
from functools import lru_cache

from dotenv import load_dotenv

# Load environment variables from .env
load_dotenv()


def _flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Runtime configuration read from the environment."""

    def __init__(self, **overrides):
        self.databaseUrl = os.getenv("DATABASE_URL", "sqlite:///./carshare.db")
        self.secretKey = os.getenv("SECRET_KEY", "change-me-in-production")
        self.jwtAlgorithm = os.getenv("JWT_ALGORITHM", "HS256")
        self.accessTokenExpireMinutes = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "10080"))

        # Booking policy
        self.bookingAutoConfirm = _flag("BOOKING_AUTO_CONFIRM", True)
        self.requireIdVerification = _flag("REQUIRE_ID_VERIFICATION", True)
        self.defaultCurrency = os.getenv("DEFAULT_CURRENCY", "FCFA")

        self.logLevel = os.getenv("LOG_LEVEL", "INFO").upper()
        self.corsOrigins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

        for key, value in overrides.items():
            if not hasattr(self, key):
                raise AttributeError(f"Unknown setting: {key}")
            setattr(self, key, value)


@lru_cache()
def getSettings() -> Settings:
    return Settings()
