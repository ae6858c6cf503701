from contextlib import asynccontextmanager
from datetime import datetime, timezone
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from auth import router as auth_router
from auth import service as auth_service
from core import settings
from core.db import Database
from core.errors import AppError, StorageError
from core.log import configure_logging
from submissions import router as submissions_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    # One store per process, shared with routes through `core.db.get_db`.
    if getattr(app.state, "db", None) is None:
        app.state.db = Database(settings.database_path())
    app.state.db.init_schema()
    auth_service.seed_default_admin(app.state.db)
    logger.info(
        "Database file: %s (admin token mode: %s)",
        app.state.db.path,
        settings.admin_token_mode(),
    )
    yield


def create_app(db: Database | None = None) -> FastAPI:
    app = FastAPI(title="salary-transparency api", lifespan=lifespan)
    app.state.db = db

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        if isinstance(exc, StorageError):
            logger.error(
                "Storage failure on %s %s",
                request.method,
                request.url.path,
                exc_info=exc,
            )
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(HTTPException)
    async def http_error_handler(_: Request, exc: HTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(_: Request, __: RequestValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": "Invalid request body."})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    app.include_router(submissions_router.router, tags=["submissions"])
    app.include_router(auth_router.router, tags=["admin"])

    @app.get("/api/health")
    def health() -> dict:
        return {
            "status": "OK",
            "timestamp": datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        }

    @app.get("/")
    def root() -> dict:
        return {"message": "salary-transparency api"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=settings.host(), port=settings.port())
