import logging
from fastapi import FastAPI
from contextlib import asynccontextmanager
from sqlmodel import Session
from worldcup_predictor.config import API_TITLE, API_VERSION, LOG_FORMAT, LOG_LEVEL
from worldcup_predictor.database import create_db_and_tables, engine
from worldcup_predictor.seed import ensure_official_set, seed_teams

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup: create tables and reference data
    create_db_and_tables()
    with Session(engine) as db:
        seed_teams(db)
        ensure_official_set(db)
    logger.info("%s %s ready", API_TITLE, API_VERSION)
    yield


# Initialize FastAPI app
app = FastAPI(
    title=API_TITLE,
    description="Group standings, tiebreaks, third-place ranking and knockout bracket for World Cup 2026 predictions",
    version=API_VERSION,
    lifespan=lifespan
)

# Include routers
from worldcup_predictor.routers import sets, groups, knockout

app.include_router(sets.router)
app.include_router(groups.router)
app.include_router(knockout.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
