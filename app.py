from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from jsontables.errors import JsonTablesError
from jsontables.repositories import AsyncDocumentStore
from jsontables.settings import Settings, get_settings
from jsontables.store import DocumentStore

logger = logging.getLogger(__name__)


def create_app(store: DocumentStore | None = None, settings: Settings | None = None) -> FastAPI:
    """
    Build the HTTP app over one document store.

    Run with: uvicorn app:create_app --factory
    """
    load_dotenv("local.env")

    settings = settings or get_settings()
    if store is None:
        opener = DocumentStore.open_or_create if settings.create_missing else DocumentStore.open
        store = opener(settings.db_path, indent=settings.indent)

    from endpoints.table_endpoints import router as tables_router

    app = FastAPI()
    app.state.settings = settings
    app.state.store = AsyncDocumentStore(store)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(JsonTablesError)
    async def jsontables_error_handler(request: Request, exc: JsonTablesError) -> JSONResponse:
        if exc.http_status >= 500:
            logger.warning("REQUEST FAILED: %s %s: %r", request.method, request.url.path, exc)
        return JSONResponse({"error": type(exc).__name__, "detail": exc.message}, status_code=exc.http_status)

    if settings.debug_log_requests:

        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            response = await call_next(request)
            logger.debug("REQUEST: %s %s -> %s", request.method, request.url.path, response.status_code)
            return response

    app.include_router(tables_router)

    return app
