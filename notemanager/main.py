"""Entrada principal de la app FastAPI (configura middlewares, excepciones y routers)."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from pymongo.errors import PyMongoError

from notemanager.api.router import api_router
from notemanager.core.config import settings
from notemanager.core.exceptions import register_exception_handlers
from notemanager.core.logging import setup_logging
from notemanager.core.middleware import add_middlewares
from notemanager.infrastructure.db.bootstrap import ensure_collections
from notemanager.infrastructure.db.mongo import close_mongo, db_ready, init_mongo

_log = logging.getLogger("notemanager.startup")


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_mongo()
    # Garantiza colecciones/índices/categorías si hay conexión
    if db_ready():
        try:
            ensure_collections()
        except PyMongoError as e:
            # No impedir el arranque si fallan validadores/índices
            _log.warning("ensure_collections() falló: %s", e)
    else:
        _log.warning("Mongo no listo; omitiendo ensure_collections()")
    try:
        yield
    finally:
        close_mongo()


def create_app() -> FastAPI:
    setup_logging(settings.log_level)
    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    add_middlewares(app)
    register_exception_handlers(app)
    # Monta routers bajo el prefijo configurado
    app.include_router(api_router, prefix=settings.api_prefix_normalized)
    return app


app = create_app()
