import logging
import os

from dotenv import load_dotenv

# Load environment variables from .env file before the database config reads them
load_dotenv()

from fastapi import FastAPI  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from app.database.config import engine, init_models  # noqa: E402
from app.middleware.timing import timing_middleware  # noqa: E402
from app.routes.issues import router as issues_router  # noqa: E402
from app.routes.pages import router as pages_router  # noqa: E402
from contextlib import asynccontextmanager  # noqa: E402

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: Create tables
    await init_models()

    yield

    # Shutdown: Dispose of the engine
    await engine.dispose()

app = FastAPI(title="Issue Tracker", lifespan=lifespan)

app.middleware("http")(timing_middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
        if origin.strip()
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s | %(name)s | %(message)s",
)

app.include_router(issues_router)
app.include_router(pages_router)
