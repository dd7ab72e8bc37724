# app/main.py
import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.db.mongo import init_db_indexes

# Routers
from app.routes.progress import router as progress_router
from app.routes.milestone import router as milestone_router

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# ---------------------------
# Build FastAPI app
# ---------------------------
fastapi_app = FastAPI(title="Quit Smoking Tracker", version="1.0.0")

_cors_origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

fastapi_app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@fastapi_app.get("/health")
async def health_check():
    return {"status": "✅ OK", "message": "Quit tracker backend is running."}

@fastapi_app.get("/")
async def root():
    return {"message": "👋 Welcome to the Quit Smoking Tracker!"}

# ---------------------------
# Routers
# ---------------------------
fastapi_app.include_router(progress_router)
fastapi_app.include_router(milestone_router)


# ---------------------------
# Startup tasks
# ---------------------------
@fastapi_app.on_event("startup")
async def on_startup():
    try:
        await init_db_indexes()
    except Exception:
        # Don't crash the app if indexes fail; just log it
        logging.exception("Index init error")

app = fastapi_app
