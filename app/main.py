from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.api.v1.api import api_router
from app.core.config import get_settings
from app.core.metrics import instrument_app
from app.core.logging import get_logger
from app.db.session import init_db
from app.utils.decorators import log_request

logger = get_logger(__name__)

settings = get_settings()
app = FastAPI(title=settings.PROJECT_NAME)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Instrument the app with Prometheus metrics
if settings.ENABLE_METRICS:
    instrument_app(app)

# Include the API router
app.include_router(api_router, prefix="/api/v1")

@app.on_event("startup")
async def startup_event():
    logger.info("Application startup")
    init_db()

@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Application shutdown")

@app.get("/")
@log_request
async def read_root():
    return {"message": f"Welcome to the {settings.PROJECT_NAME}"}
