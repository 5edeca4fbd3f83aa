from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.openapi.utils import get_openapi
from starlette.middleware.cors import CORSMiddleware

import settings
from rapidjobs import api_logger
from rapidjobs import dependencies
from rapidjobs.routers import main_router
from rapidjobs.routers.routes import landing_router
from rapidjobs.routers.routes import metrics_router
from rapidjobs.service.entities import HealthResponse
from rapidjobs.service.error_responses import APIErrorResponse
from rapidjobs.service.exception_handlers.exception_handlers import (
    custom_exception_handler,
)
from rapidjobs.service.exception_handlers.exception_handlers import (
    validation_exception_handler,
)
from rapidjobs.service.middleware.main_middleware import MainMiddleware

logger = api_logger.get()


@asynccontextmanager
async def lifespan(_: FastAPI):
    dependencies.init_globals()
    logger.info(f"Started, environment={settings.ENVIRONMENT}")
    yield
    logger.info("Shutdown Signal received.")


app = FastAPI(lifespan=lifespan)

app.include_router(main_router.router)
app.include_router(metrics_router.router)
app.include_router(landing_router.router)

API_TITLE = "Rapid Jobs"
API_DESCRIPTION = "Rapid Jobs landing page and waitlist API"


def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=API_TITLE,
        version="1.0.0",
        description=API_DESCRIPTION,
        routes=app.routes,
        servers=_get_servers(),
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema


def _get_servers():
    base_url = settings.API_BASE_URL
    if base_url.endswith("/"):
        base_url = base_url[:-1]
    if settings.is_production():
        return [{"url": base_url}]
    return [{"url": f"{base_url}:{settings.API_PORT}"}]


app.openapi = custom_openapi

# order of middleware matters! first middleware called is the last one added
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(MainMiddleware)

# exception handlers run AFTER the middlewares!
app.add_exception_handler(APIErrorResponse, custom_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, custom_exception_handler)


@app.get(
    "/health",
    summary="Liveness probe",
    response_model=HealthResponse,
)
def health():
    return HealthResponse(status="ok")
