from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from painel.core.config import settings
from painel.core.logging import api_logger, app_logger, init_app_logging
from painel.routers import dashboard, health


@asynccontextmanager
async def lifespan(app: FastAPI):
    app_logger.info(
        "Starting application",
        env=settings.ENV,
        timezone=settings.TIMEZONE or "host",
    )
    yield
    app_logger.info("Shutting down application")


def create_app() -> FastAPI:
    init_app_logging()

    # Instância principal da aplicação
    app = FastAPI(
        title=settings.APP_NAME,
        version="0.1.0",
        docs_url="/docs",           # Swagger
        redoc_url="/redoc",         # ReDoc
        openapi_url="/openapi.json", # Esquema OpenAPI
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # CORS (origens permitidas vêm do .env -> settings.CORS_ORIGINS)
    # -------------------------------------------------------------------------
    allowed_origins = settings.CORS_ORIGINS_LIST or [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]
    app_logger.info("CORS middleware added", origins=",".join(allowed_origins))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        try:
            response = await call_next(request)
        except Exception as exc:
            api_logger.error(
                "Unhandled error",
                exc=exc,
                method=request.method,
                path=request.url.path,
            )
            raise
        api_logger.info(
            "Request handled",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
        )
        return response

    # -------------------------------------------------------------------------
    # Routers
    # -------------------------------------------------------------------------
    app.include_router(health.router)
    app.include_router(dashboard.router)

    # -------------------------------------------------------------------------
    # Rota raiz para conveniência (links rápidos)
    # -------------------------------------------------------------------------
    @app.get("/")
    def root():
        return {
            "name": settings.APP_NAME,
            "env": settings.ENV,
            "docs": "/docs",
            "openapi": "/openapi.json",
            "healthz": "/healthz",
            "dashboard": "/dashboard",
        }

    return app


# Instância global para uvicorn: `uvicorn painel.main:app --reload`
app = create_app()
