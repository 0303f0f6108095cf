"""FastAPI application entry point."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.routes import customers, entries, health, locations, products, search
from .config import settings
from .exceptions import ConflictError, LedgerError, NotFoundError, StorageError, ValidationError

ERROR_STATUS = {
    ValidationError: 422,
    NotFoundError: 404,
    ConflictError: 409,
    StorageError: 503,
}


async def ledger_error_handler(request: Request, exc: LedgerError) -> JSONResponse:
    status_code = next(
        (code for error_type, code in ERROR_STATUS.items() if isinstance(exc, error_type)),
        status.HTTP_400_BAD_REQUEST,
    )
    return JSONResponse(status_code=status_code, content=exc.to_dict())


def create_app() -> FastAPI:
    app = FastAPI(title=settings.app_name)
    if settings.frontend_allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.frontend_allowed_origins),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    app.add_exception_handler(LedgerError, ledger_error_handler)

    @app.get("/")
    def root():
        return {
            "service": settings.app_name,
            "status": "running",
            "api_prefix": settings.api_prefix,
            "health": f"{settings.api_prefix}/health",
            "docs": "/docs",
        }

    app.include_router(health.router, prefix=settings.api_prefix)
    app.include_router(locations.router, prefix=settings.api_prefix)
    app.include_router(customers.router, prefix=settings.api_prefix)
    app.include_router(products.router, prefix=settings.api_prefix)
    app.include_router(entries.router, prefix=settings.api_prefix)
    app.include_router(search.router, prefix=settings.api_prefix)
    return app


app = create_app()
