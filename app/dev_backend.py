"""
In-memory backend serving the endpoints the client talks to.

For local runs and integration tests only; reviews vanish on restart.

    uvicorn app.dev_backend:app --port 8000
"""

from typing import Any, Dict, Optional
from fastapi import FastAPI, Request
from contextlib import asynccontextmanager

from app.core.catalog_service import CatalogService
from app.api.routes import search, reviews
from app.api.errors import backend_error_handler
from app.core.exceptions import BackendError


def create_app(catalog_service: Optional[CatalogService] = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "catalog_service", None) is None:
            service = CatalogService()
            service.load_data()
            app.state.catalog_service = service
        yield

    app = FastAPI(
        title="Movie Search & Reviews - Dev Backend",
        lifespan=lifespan,
    )
    # a service handed in up front is used as is, lifespan or not
    app.state.catalog_service = catalog_service

    app.include_router(search.router, prefix="/api", tags=["search"])
    app.include_router(reviews.router, prefix="/api", tags=["reviews"])
    app.add_exception_handler(BackendError, backend_error_handler)

    @app.get("/health")
    def health(request: Request) -> Dict[str, Any]:
        return request.app.state.catalog_service.health_check()

    return app


app = create_app()
