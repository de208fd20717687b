import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from delfis_api.core.config import get_settings
from delfis_api.core.logging_config import configure_logging
from delfis_api.db.create_tables import create_all
from delfis_api.routers import app_user as app_user_router
from delfis_api.routers import plan as plan_router
from delfis_api.routers import streak as streak_router
from delfis_api.routers import sudoku as sudoku_router
from delfis_api.routers import theme as theme_router
from delfis_api.routers import user_role as user_role_router
from delfis_api.routers.error_handlers import register_error_handlers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(fastapi_app: FastAPI):
    """Create the SQL schema at startup."""
    create_all()
    logger.info("Tabelas verificadas/criadas.")
    yield


def create_app() -> FastAPI:
    """Factory compatível com uvicorn/gunicorn."""
    configure_logging()
    settings = get_settings()
    # Nenhuma rota consulta a flag: autenticação é responsabilidade de outro serviço.
    logger.info(f"Delfis API ({settings.app_env}); security_enabled={settings.security_enabled}")

    app = FastAPI(title="Delfis API", version="1.0.0", lifespan=lifespan)
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=sorted(settings.cors_origins),
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )
    register_error_handlers(app)

    app.include_router(user_role_router.router)
    app.include_router(plan_router.router)
    app.include_router(theme_router.router)
    app.include_router(app_user_router.router)
    app.include_router(streak_router.router)
    app.include_router(sudoku_router.router)

    @app.get("/health", tags=["monitoring"])
    def health_check():
        return {"status": "ok", "service": "delfis-api"}

    return app


app = create_app()


def main() -> None:
    uvicorn.run("delfis_api.app:app", host="0.0.0.0", port=int(os.getenv("PORT", "8000")))


if __name__ == "__main__":
    main()
