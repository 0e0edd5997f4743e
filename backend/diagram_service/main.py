import logging

import requests
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from diagram_service.api.routes import health_router, router
from diagram_service.config import CORS_ORIGINS, LOG_LEVEL
from diagram_service.ir.errors import (
    IncompleteRecordError,
    InvalidArgumentError,
    SystemNotFoundError,
)

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="System Dependency Diagram Service",
    version="0.1.0",
)

# Middleware FIRST
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes AFTER middleware
app.include_router(health_router)
app.include_router(router)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": message})


@app.exception_handler(InvalidArgumentError)
def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
    logger.error("Invalid request %s: %s", request.url.path, exc)
    return _error(400, str(exc))


@app.exception_handler(SystemNotFoundError)
def system_not_found_handler(request: Request, exc: SystemNotFoundError):
    logger.error("Unknown system for %s: %s", request.url.path, exc)
    return _error(404, str(exc))


@app.exception_handler(IncompleteRecordError)
def incomplete_record_handler(request: Request, exc: IncompleteRecordError):
    logger.error("Incomplete catalog data for %s: %s", request.url.path, exc)
    return _error(500, str(exc))


@app.exception_handler(requests.RequestException)
def core_service_handler(request: Request, exc: requests.RequestException):
    logger.error("Core service call failed for %s: %s", request.url.path, exc)
    return _error(502, "Core service unavailable")
