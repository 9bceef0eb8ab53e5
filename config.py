import os

from dotenv import load_dotenv

load_dotenv()


def _int(name: str, default: int) -> int:
    return int(os.environ.get(name, default))


class Config:
    # --------------------------
    # 🔹 App
    # --------------------------
    APP_NAME = os.environ.get("APP_NAME", "School Fee Ledger")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    # --------------------------
    # 🔹 Database (SQLAlchemy)
    # --------------------------
    # SQLite file for local use; point at PostgreSQL in production
    DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./school.db")

    # --------------------------
    # 🔹 Fees
    # --------------------------
    DEFAULT_MONTHLY_FEE = _int("DEFAULT_MONTHLY_FEE", 5000)
    DUE_WINDOW_DAYS = _int("DUE_WINDOW_DAYS", 5)
    RECEIPT_PREFIX = os.environ.get("RECEIPT_PREFIX", "REC")

    # --------------------------
    # 🔹 CORS (comma separated)
    # --------------------------
    CORS_ORIGINS = [
        o.strip()
        for o in os.environ.get("CORS_ORIGINS", "http://localhost:3000").split(",")
        if o.strip()
    ]

    # --------------------------
    # 🔹 Server (uvicorn)
    # --------------------------
    HOST = os.environ.get("HOST", "127.0.0.1")
    PORT = _int("PORT", 8000)
