from dotenv import load_dotenv
import os

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-only-change-in-production")
    SQLALCHEMY_DATABASE_URI = os.getenv("SQLALCHEMY_DATABASE_URI", "sqlite:///prepgenie.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Test connections before use so idle drops from the hosted database are recovered
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'pool_recycle': 300,
    }

    CORS_ORIGINS = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
        if origin.strip()
    ]

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Locale used when the user's locale has no seed meals
    DEFAULT_LOCALE = os.getenv("DEFAULT_LOCALE", "en")

    # Meal plan generation policy
    PLAN_ALLOW_UNFILTERED_FALLBACK = _env_bool("PLAN_ALLOW_UNFILTERED_FALLBACK", False)
    PLAN_ALLOW_PARTIAL = _env_bool("PLAN_ALLOW_PARTIAL", False)

    SWAP_CANDIDATE_WINDOW = _env_int("SWAP_CANDIDATE_WINDOW", 10)


class DevelopmentConfig(Config):
    DEBUG = True


class ProductionConfig(Config):
    DEBUG = False


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_ENGINE_OPTIONS = {}
    PLAN_ALLOW_UNFILTERED_FALLBACK = False
    PLAN_ALLOW_PARTIAL = False
    SWAP_CANDIDATE_WINDOW = 10


config = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
    "default": DevelopmentConfig,
}


def get_config(env=None):
    """Get configuration class by name, falling back to FLASK_ENV."""
    if env is None:
        env = os.getenv("FLASK_ENV", "development")
    return config.get(env, config["default"])
