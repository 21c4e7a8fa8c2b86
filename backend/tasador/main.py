import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tasador import __version__
from tasador.api import appraisal, health, listings
from tasador.core.config import Settings, get_settings
from tasador.core.errors import TasadorError
from tasador.core.logging_config import setup_logging

INVALID_REQUEST_MESSAGE = "Datos no válidos para la tasación."

setup_logging()
logger = logging.getLogger(__name__)
settings = get_settings()


def configure_cors(application: FastAPI, config: Settings) -> None:
    origins = [origin.strip() for origin in config.cors_origins.split(",") if origin.strip()]
    application.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


app = FastAPI(title=settings.app_name, version=__version__)
configure_cors(app, settings)


@app.exception_handler(TasadorError)
async def tasador_error_handler(request: Request, exc: TasadorError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected malformed request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": INVALID_REQUEST_MESSAGE})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": TasadorError.message}
    )


app.include_router(health.router)
app.include_router(listings.router)
app.include_router(appraisal.router)
