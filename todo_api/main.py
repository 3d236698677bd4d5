import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from todo_api.config import Settings, load_settings
from todo_api.database import Base, make_engine, make_session_factory
from todo_api.errors import ServiceError, Unauthenticated
from todo_api.logging_setup import setup_logging
import todo_api.models.task  # noqa: F401  (register tables on Base)
import todo_api.models.user  # noqa: F401
from todo_api.routers import admin, auth, tasks
from todo_api.schemas.response import fail
from todo_api.utils.tokens import TokenService

logger = logging.getLogger(__name__)


def _envelope(status_code, message, headers=None):
    return JSONResponse(status_code=status_code, content=fail(message).model_dump(), headers=headers)


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    return f"{field}: {first.get('msg')}" if field else first.get("msg", "Invalid request")


def create_app(settings: Settings = None) -> FastAPI:
    """Build the application; raises ConfigurationError without a signing key."""
    if settings is None:
        settings = load_settings()
    setup_logging(settings.log_level)

    engine = make_engine(settings.database_url)
    Base.metadata.create_all(bind=engine)

    app = FastAPI(title="Todo API")
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = make_session_factory(engine)
    app.state.token_service = TokenService(settings)

    app.include_router(auth.router)
    app.include_router(tasks.router)
    app.include_router(admin.router)

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthenticated) else None
        return _envelope(exc.status_code, exc.message, headers)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return _envelope(400, _validation_message(exc))

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return _envelope(exc.status_code, str(exc.detail), getattr(exc, "headers", None))

    # Generic error handler to return JSON errors for unexpected exceptions
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception("unhandled error on %s %s", request.method, request.url.path)
        return _envelope(500, "Internal server error")

    logger.info("application ready (database=%s)", engine.url.render_as_string(hide_password=True))
    return app


app = create_app()
