import os
from datetime import timedelta
from urllib.parse import quote_plus

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


def _database_uri():
    """
    SQLALCHEMY_DATABASE_URI wins if given, otherwise it is built from DB_*.
    Returns None when the DB_* credentials are incomplete.
    """
    explicit = os.getenv("SQLALCHEMY_DATABASE_URI")
    if explicit:
        return explicit

    user = os.getenv("DB_USER")
    password = os.getenv("DB_PASSWORD")
    name = os.getenv("DB_DATABASE")
    if not (user and password and name):
        return None

    host = os.getenv("DB_HOST", "localhost")
    port = os.getenv("DB_PORT", "5432")
    return f"postgresql+psycopg2://{quote_plus(user)}:{quote_plus(password)}@{host}:{port}/{name}"


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY") or os.getenv("JWT_SECRET_KEY")

    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}
    AUTO_CREATE_SCHEMA = _env_flag("AUTO_CREATE_SCHEMA", "1")

    # Bearer tokens
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY")
    JWT_ALGORITHM = "HS256"
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=24)

    PASSWORD_HASH_METHOD = os.getenv("PASSWORD_HASH_METHOD", "scrypt")

    # Issue ledger
    ENFORCE_SINGLE_ACTIVE_LOAN = _env_flag("ENFORCE_SINGLE_ACTIVE_LOAN")

    # Server
    PORT = int(os.getenv("PORT", "3000"))
    API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:3000")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    MAX_CONTENT_LENGTH = int(os.getenv("MAX_CONTENT_LENGTH", str(10 * 1024 * 1024)))

    # Settings production refuses to start without
    REQUIRED_SETTINGS = ("JWT_SECRET_KEY", "SQLALCHEMY_DATABASE_URI")


class DevelopmentConfig(Config):
    DEBUG = True
    # development-only placeholder, never used by Config
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY") or "dev-only-jwt-secret-key"
    SECRET_KEY = Config.SECRET_KEY or JWT_SECRET_KEY
    SQLALCHEMY_DATABASE_URI = _database_uri() or "sqlite:///library_dev.db"


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret-key"
    JWT_SECRET_KEY = "test-jwt-secret-key"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SQLALCHEMY_ENGINE_OPTIONS = {}
    AUTO_CREATE_SCHEMA = True
    PASSWORD_HASH_METHOD = "pbkdf2:sha256:1000"
    ENFORCE_SINGLE_ACTIVE_LOAN = False


CONFIGS = {
    "production": Config,
    "development": DevelopmentConfig,
    "testing": TestingConfig,
}


def config_for_env(name=None):
    name = (name or os.getenv("APP_ENV") or "production").lower()
    try:
        return CONFIGS[name]
    except KeyError:
        raise RuntimeError(f"Unknown APP_ENV '{name}', expected one of {sorted(CONFIGS)}")
