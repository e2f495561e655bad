import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fixmycampus.database.config import get_database_url, init_db, make_engine, make_sessionmaker
from fixmycampus.errors import CampusError, StoreError
from fixmycampus.middleware.errors import unhandled_error_middleware
from fixmycampus.middleware.timing import timing_middleware
from fixmycampus.routes import comments_router, issues_router, solutions_router

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: Create tables
    await init_db(app.state.engine)

    yield

    # Shutdown: Dispose of the engine
    await app.state.engine.dispose()


async def campus_error_handler(request: Request, exc: CampusError) -> JSONResponse:
    if isinstance(exc, StoreError):
        # Cause was already logged with its traceback by the store
        logger.warning(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"Rejected request body for {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": "Invalid request body"})


def create_app(database_url: Optional[str] = None) -> FastAPI:
    """Build the Fix My Campus API.

    The database backend comes from ``database_url`` or, when omitted, the
    DATABASE_URL environment variable.
    """
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(levelname)s | %(name)s | %(message)s",
    )

    app = FastAPI(title="Fix My Campus", lifespan=lifespan)

    engine = make_engine(database_url or get_database_url())
    app.state.engine = engine
    app.state.sessionmaker = make_sessionmaker(engine)

    app.middleware("http")(timing_middleware)
    app.middleware("http")(unhandled_error_middleware)
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

    app.add_exception_handler(CampusError, campus_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(issues_router, prefix="/api")
    app.include_router(comments_router, prefix="/api")
    app.include_router(solutions_router, prefix="/api")

    return app


app = create_app()
