"""Application entrypoint for the CRM API."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from crm.api.v1.router import get_api_router
from crm.core.config import get_config
from crm.core.startup import bootstrap


@asynccontextmanager
async def lifespan(_app: FastAPI):
    bootstrap()
    yield


def create_app(run_bootstrap: bool = True) -> FastAPI:
    """Create the FastAPI application.

    Tests pass ``run_bootstrap=False`` and supply their own session through
    ``app.dependency_overrides``.
    """
    cfg = get_config()
    app = FastAPI(
        title=cfg.APP_NAME,
        version=cfg.APP_VERSION,
        lifespan=lifespan if run_bootstrap else None,
    )
    if cfg.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(cfg.CORS_ORIGINS),
            allow_methods=["*"],
            allow_headers=["*"],
        )
    app.include_router(get_api_router(cfg.API_PREFIX))

    @app.get("/")
    def root() -> dict:
        return {"service": cfg.APP_NAME, "version": cfg.APP_VERSION, "api_prefix": cfg.API_PREFIX}

    return app


# Expose ASGI app for `uvicorn crm.main:app`.
app = create_app()


def run() -> None:
    import uvicorn

    cfg = get_config()
    uvicorn.run("crm.main:app", host=cfg.API_HOST, port=cfg.API_PORT)


if __name__ == "__main__":
    run()
