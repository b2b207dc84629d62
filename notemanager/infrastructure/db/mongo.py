"""Cliente MongoDB (pymongo) compartido por el proceso.

`init_mongo()` se llama una sola vez en el arranque; repositorios y servicios
obtienen la base con `get_db()`, nunca los routers.
"""
import logging
from typing import Optional

import certifi
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from notemanager.core.config import settings

_log = logging.getLogger("notemanager.mongo")

_client: Optional[MongoClient] = None
_db: Optional[Database] = None


def _client_kwargs(uri: str) -> dict:
    kwargs = dict(serverSelectionTimeoutMS=settings.mongo_timeout_ms, uuidRepresentation="standard")
    if uri.startswith("mongodb+srv://"):
        # SRV ya implica TLS; proveemos CA bundle para robustez
        kwargs["tlsCAFile"] = certifi.where()
    elif settings.mongo_tls:
        kwargs["tls"] = True
        kwargs["tlsCAFile"] = certifi.where()
        kwargs["tlsAllowInvalidCertificates"] = settings.mongo_tls_insecure
        kwargs["tlsAllowInvalidHostnames"] = settings.mongo_tls_allow_invalid_hostnames
    return kwargs


def init_mongo() -> None:
    """
    Inicializa el cliente y valida conexión (ping).
    No tumba la app si Mongo no responde: deja la base sin inicializar y loggea.
    """
    global _client, _db
    uri = settings.mongo_uri
    try:
        client = MongoClient(uri, **_client_kwargs(uri))
        client.admin.command("ping")
    except PyMongoError as e:
        _log.warning("Mongo no accesible: %s", e)
        _client = None
        _db = None
        return
    _client = client
    _db = client[settings.mongo_db]
    _log.info("Mongo conectado (db=%s)", settings.mongo_db)


def use_database(db: Optional[Database]) -> None:
    """Fija la base a usar (p.ej. una base en memoria en tests o scripts)."""
    global _db
    _db = db


def close_mongo() -> None:
    global _client, _db
    if _client is not None:
        _client.close()
        _log.info("Mongo desconectado")
    _client = None
    _db = None


def get_db() -> Database:
    """
    Devuelve la referencia a la base de datos.
    Úsalo en repositorios/servicios, no en routers.
    """
    if _db is None:
        raise RuntimeError("Mongo no inicializado. Intenta más tarde.")
    return _db


def db_ready() -> bool:
    return _db is not None
