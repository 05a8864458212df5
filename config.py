# ==========================================================================================================
# -------------- Configuration file for the InvestaPro Flask backend ----------------------------------------
# ==========================================================================================================
import os
from urllib.parse import quote_plus
from dotenv import load_dotenv


if os.environ.get("FLASK_ENV") != "production":
    load_dotenv()

basedir = os.path.abspath(os.path.dirname(__file__))


def build_database_url(environ=os.environ):
    """
    Resolve the SQLAlchemy URL.
    DATABASE_URL wins; otherwise DB_HOST/DB_PORT/DB_USER/DB_PASSWORD/DB_NAME are
    assembled with DB_DRIVER; otherwise a local SQLite file is used.
    """
    url = environ.get("DATABASE_URL")

    if not url and environ.get("DB_HOST"):
        driver = environ.get("DB_DRIVER", "mysql+pymysql")
        user = quote_plus(environ.get("DB_USER", ""))
        password = quote_plus(environ.get("DB_PASSWORD", ""))
        host = environ.get("DB_HOST")
        port = environ.get("DB_PORT")
        name = environ.get("DB_NAME", "")

        credentials = user
        if password:
            credentials = f"{user}:{password}"
        netloc = f"{credentials}@{host}" if credentials else host
        if port:
            netloc = f"{netloc}:{port}"
        url = f"{driver}://{netloc}/{name}"

    if not url:
        url = f"sqlite:///{os.path.join(basedir, 'instance', 'investapro.db')}"

    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql+pg8000://", 1)

    return url


class Config:

    SECRET_KEY = os.getenv("SECRET_KEY")
    if not SECRET_KEY:
        raise ValueError("SECRET_KEY must be set")

    FLASK_ENV = os.getenv("FLASK_ENV", "production")
    DEBUG = os.getenv("DEBUG", "False").lower() in ("true", "1", "t")
    PORT = int(os.getenv("PORT", 5000))

    SQLALCHEMY_DATABASE_URI = build_database_url()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        "pool_pre_ping": True,
        "pool_recycle": 300,
    }
    CHECK_DB_ON_STARTUP = True

    TOKEN_EXPIRES_SECONDS = int(os.getenv("TOKEN_EXPIRES_SECONDS", 3600))
    BINANCE_WALLET = os.getenv("BINANCE_WALLET", "YOUR_BINANCE_WALLET_ADDRESS_HERE")

    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
    LOG_DIR = os.getenv("LOG_DIR", "logs")


class TestingConfig(Config):
    TESTING = True
    DEBUG = False
    SECRET_KEY = "test-secret-key"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SQLALCHEMY_ENGINE_OPTIONS = {}
    CHECK_DB_ON_STARTUP = False
    BINANCE_WALLET = "TEST_WALLET_ADDRESS"
