import os

from dotenv import load_dotenv


load_dotenv()


def _get_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_list(value: str | None, default: list[str]) -> list[str]:
    if not value:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]

APP_ENV = os.getenv("APP_ENV", "development")
DEBUG = _get_bool(os.getenv("DEBUG"), default=False)
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG else "INFO").upper()

CORS_ALLOWED_ORIGINS = _get_list(os.getenv("CORS_ALLOWED_ORIGINS"), ["http://localhost:5173"])

# Business day used for the booking wizard and the calendar grid.
BUSINESS_DAY_START = os.getenv("BUSINESS_DAY_START", "08:00")
BUSINESS_DAY_END = os.getenv("BUSINESS_DAY_END", "18:00")
SLOT_STEP_MINUTES = int(os.getenv("SLOT_STEP_MINUTES", "30"))

SESSION_DURATION_MINUTES = int(os.getenv("SESSION_DURATION_MINUTES", "30"))
MIN_CANCEL_LEAD_HOURS = int(os.getenv("MIN_CANCEL_LEAD_HOURS", "3"))
REMINDER_WINDOW_HOURS = int(os.getenv("REMINDER_WINDOW_HOURS", "24"))
MAX_NOTES_LENGTH = int(os.getenv("MAX_NOTES_LENGTH", "500"))

JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "change-me")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
JWT_EXPIRES_MINUTES = int(os.getenv("JWT_EXPIRES_MINUTES", "60"))


def validate_runtime_config() -> None:
    if APP_ENV.lower() == "production" and JWT_SECRET_KEY == "change-me":
        raise RuntimeError("JWT_SECRET_KEY must be set in production.")
    if SLOT_STEP_MINUTES <= 0:
        raise RuntimeError("SLOT_STEP_MINUTES must be a positive number of minutes.")
    if SESSION_DURATION_MINUTES <= 0:
        raise RuntimeError("SESSION_DURATION_MINUTES must be a positive number of minutes.")
