# backend/main.py
import logging
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

load_dotenv()

from config import settings
from database import init_db
from services.errors import PharmacyError
from utils.logging_setup import setup_logging

# Routers
from routes.drugs import router as drugs_router
from routes.batches import router as batches_router
from routes.transactions import router as transactions_router
from routes.partners import router as partners_router
from routes.finance import router as finance_router
from routes.users import router as users_router
from routes.reports import router as reports_router
from routes.logs import router as logs_router

setup_logging()
logger = logging.getLogger(__name__)

# Initialisation
init_db()

app = FastAPI(title=settings.APP_NAME, version="1.0.0")

# CORS: the local till front end plus the deployed one, if configured
origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]
if settings.FRONTEND_URL:
    origins.append(settings.FRONTEND_URL)

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PharmacyError)
async def pharmacy_error_handler(request: Request, exc: PharmacyError):
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc)
    return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})


# Router registration
app.include_router(drugs_router)
app.include_router(batches_router)
app.include_router(transactions_router)
app.include_router(partners_router)
app.include_router(finance_router)
app.include_router(users_router)
app.include_router(reports_router)
app.include_router(logs_router)


@app.get("/healthcheck")
def healthcheck():
    return {"status": "ok", "timestamp": datetime.now().isoformat()}


@app.get("/")
def read_root():
    return {"message": f"{settings.APP_NAME} is running"}
