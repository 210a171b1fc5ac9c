from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from menet.api.endpoints import get_endpoints_router
from menet.cache import AnalysisCache
from menet.errors import StoreError
from menet.network_store.base import NetworkStore
from menet.warning_store.base import WarningStateStore


def create_app(
    *,
    network_store: NetworkStore,
    warning_store: WarningStateStore,
    analysis_cache: AnalysisCache | None = None,
) -> FastAPI:
    """Create FastAPI app."""
    app = FastAPI(title="M-E Net")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StoreError)
    async def store_error_handler(
        request: Request,  # noqa: ARG001
        exc: StoreError,
    ) -> JSONResponse:
        logger.error(f"Store error: {str(exc)}")
        return JSONResponse(status_code=500, content={"detail": "Storage error"})

    app.include_router(
        router=get_endpoints_router(
            network_store=network_store,
            warning_store=warning_store,
            analysis_cache=analysis_cache or AnalysisCache(),
        )
    )

    return app
