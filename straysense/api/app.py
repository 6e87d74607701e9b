import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlmodel import SQLModel

from .error import ClientError, ServerError

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    fields = sorted(
        {".".join(str(part) for part in err["loc"] if part != "body") for err in exc.errors()}
    )
    message = f"Missing or invalid fields: {', '.join(f for f in fields if f)}"
    error_dict = {"code": "VALIDATION_ERROR", "message": message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"error": error_dict}
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    # Driver messages stay in the log, never in the response
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": {"code": "INTERNAL_ERROR", "message": "Internal server error"}},
    )


def create_app(ApplicationConfig) -> FastAPI:
    from straysense.depends import create_session_factory

    engine, session_factory = create_session_factory(ApplicationConfig)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if ApplicationConfig.CREATE_TABLES_ON_STARTUP:
            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
        yield
        await engine.dispose()

    app = FastAPI(title="StraySense API", version="0.1.0", lifespan=lifespan)
    app.state.config = ApplicationConfig
    app.state.engine = engine
    app.state.session_factory = session_factory

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:

        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            started = time.perf_counter()
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)"
            )
            return response

    from straysense.api.routes import (
        admin,
        admin_animals,
        admin_shelters,
        admin_vaccines,
        adoptions,
        animals,
        auth,
        health_check,
        stray_reports,
        user,
        vaccinations,
    )

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.router, prefix=prefix, tags=["Health"])
    app.include_router(auth.router, prefix=prefix, tags=["Authentication"])
    app.include_router(user.router, prefix=prefix, tags=["User"])
    app.include_router(animals.router, prefix=prefix, tags=["Animals"])
    app.include_router(adoptions.router, prefix=prefix, tags=["Adoptions"])
    app.include_router(stray_reports.router, prefix=prefix, tags=["Stray Reports"])
    app.include_router(vaccinations.router, prefix=prefix, tags=["Vaccinations"])
    app.include_router(admin.router, prefix=prefix, tags=["Admin"])
    app.include_router(admin_animals.router, prefix=prefix, tags=["Admin"])
    app.include_router(admin_shelters.router, prefix=prefix, tags=["Admin"])
    app.include_router(admin_vaccines.router, prefix=prefix, tags=["Admin"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
