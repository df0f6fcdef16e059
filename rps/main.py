"""
RPS (Result Processing System) - Main Application

FastAPI backend with:
- MongoDB for students, results and course listings
- Registration number generation per department and session

Run: uvicorn rps.main:app --reload
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from rps.api import api_router
from rps.core.config import get_settings
from rps.core.errors import register_exception_handlers
from rps.db.mongodb import create_mongo_client, get_database, init_mongo_indexes, test_mongo_connection
from rps.services.mongo_service import RecordStore

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="RPS Server",
    description="""
    Academic records backend.

    ## Features
    - **Students**: Registration with generated registration numbers
    - **Results**: Per-semester result submission and lookup
    - **Courses**: Subject listings per department and semester
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware (allow all)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include API routes
app.include_router(api_router, prefix="/api")


# Startup event
@app.on_event("startup")
async def startup_event():
    """Connect to MongoDB once and share the store with every request."""
    client = create_mongo_client(settings)
    app.state.mongo_client = client
    app.state.store = RecordStore(get_database(client, settings))
    try:
        init_mongo_indexes(app.state.store.db)
    except Exception as e:
        logger.warning("MongoDB index initialization failed: %s", e)
    logger.info("Connected to MongoDB database '%s'", settings.mongo_db)


@app.on_event("shutdown")
async def shutdown_event():
    client = getattr(app.state, "mongo_client", None)
    if client is not None:
        client.close()
        logger.info("MongoDB connection closed")


@app.get("/", response_class=PlainTextResponse, tags=["Health"])
async def root():
    return "Wellcome to RPS Server!"


@app.get("/health", tags=["Health"])
def health_check():
    """Detailed health check."""
    client = getattr(app.state, "mongo_client", None)
    connected = client is not None and test_mongo_connection(client)
    return {
        "status": "healthy",
        "mongodb": "connected" if connected else "disconnected"
    }
