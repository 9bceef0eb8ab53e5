import logging

import uvicorn
from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session

from config import Config
from database import engine, Base, get_db

# --- IMPORT ROUTERS (APIs) ---
from routers import students, fee_ledger

# --- IMPORT MODELS ---
from models.students import Student
from models.fee_models import MonthlyFee, StudentFeeLedger, ReceiptCounter

logging.basicConfig(
    level=Config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# --- CREATE DATABASE TABLES ---
Base.metadata.create_all(bind=engine)

app = FastAPI(title=Config.APP_NAME)

# ==========================================
# ✅ CORS MIDDLEWARE
# ==========================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- REGISTER ROUTERS ---
app.include_router(students.router)
app.include_router(fee_ledger.router)

logger.info("%s started with database %s", Config.APP_NAME, engine.url.render_as_string(hide_password=True))


@app.get("/")
def dashboard(db: Session = Depends(get_db)):
    """Headline counts for the admin dashboard."""
    return {
        "app": Config.APP_NAME,
        "total_students": db.query(Student).count(),
        "fee_records": db.query(MonthlyFee).count(),
        "payments": db.query(StudentFeeLedger).count(),
    }


def run():
    """Serve the API with uvicorn (`school-fee-ledger` console script)."""
    uvicorn.run("main:app", host=Config.HOST, port=Config.PORT, log_level=Config.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
