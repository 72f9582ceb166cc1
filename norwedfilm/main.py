# norwedfilm/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import SQLAlchemyError

from norwedfilm.api.api import api_router
from norwedfilm.api.endpoints.blog import feed_router
from norwedfilm.core.config import settings
from norwedfilm.core.exceptions import AppError
from norwedfilm.core.limiter import limiter
from norwedfilm.middleware import (
    app_error_handler,
    database_error_handler,
    validation_error_handler,
)

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


# Runs once when the application starts up and once on shutdown.
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Norwed Film API starting up (env={settings.ENV})")
    yield
    logger.info("Norwed Film API shutting down")


app = FastAPI(
    title="Norwed Film API",
    version="1.0.0",
    description="""
        **Norwed Film content service**

        Backend of the Norwed Film wedding photo and film studio site.

        ## Features

        * **Portfolio**: Projects and their photo and video media
        * **Blog**: Posts, moderated comments and an RSS feed
        * **Enquiries**: Contact form, newsletter and bookings
        * **Client galleries**: Password protected, with expiry
        * **CMS**: Navigation and landing page blocks

        ## Authentication

        Admin endpoints accept a session token (`Authorization: Bearer <token>`
        or the session cookie) or the admin API key (`X-Api-Key`).
        """,
    lifespan=lifespan,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_exception_handler(AppError, app_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)
app.add_exception_handler(SQLAlchemyError, database_error_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,  # Session cookie and Authorization header
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api")
app.include_router(feed_router)


@app.get("/")
def read_root():
    return {"status": "Norwed Film API is running"}
