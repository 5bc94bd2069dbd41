import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from api import responses
from api.brands import router as brands_router
from api.categories import router as categories_router
from api.health import router as health_router
from api.media import router as media_router
from api.middleware import CaseConverterMiddleware, log_requests
from config import settings
from database import init_db
from exceptions import AppError, ValidationError
from logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level, debug=settings.debug)
    await init_db()
    logger.info("%s started", settings.app_name)
    yield


app = FastAPI(
    title=settings.app_name,
    description="Product catalog API: brands, categories and media",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(CaseConverterMiddleware)
app.middleware("http")(log_requests)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s (%s)", request.method, request.url.path, exc.message, exc.description)
    return responses.error(exc.message, exc.description, exc.status_code, exc.data)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"field": ".".join(str(p) for p in err.get("loc", ())[1:]) or "body", "message": err.get("msg", "")}
        for err in exc.errors()
    ]
    return await app_error_handler(request, ValidationError("Validation failed", "The given data was invalid.", errors))


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404 and exc.detail == "Not Found":
        return responses.error("Route not found", "The requested endpoint does not exist", 404)
    return responses.error(str(exc.detail), None, exc.status_code)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("database error on %s %s", request.method, request.url.path)
    return responses.error("Database error", str(exc.__cause__ or exc), 500)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    return responses.error("An unexpected error occurred", str(exc), 500)


app.include_router(health_router)
app.include_router(brands_router)
app.include_router(categories_router)
app.include_router(media_router)
