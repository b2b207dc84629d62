"""
Bootstrap de la base Mongo: define y aplica validadores (JSON Schema) e índices,
y siembra las categorías por defecto.
Se ejecuta al inicio de la app para asegurar colecciones mínimas y consistencia.
No tumba la app si algo falla; deja warnings en casos no críticos.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List

from pymongo.errors import PyMongoError

from notemanager.core.config import settings
from notemanager.infrastructure.db.mongo import get_db
from notemanager.repositories import category_repo

_log = logging.getLogger("notemanager.mongo.bootstrap")

# Nombres que muestra el frontend para las categorías aceptadas
DEFAULT_CATEGORIES: Dict[str, str] = {
    "1": "To Do",
    "2": "Done",
    "3": "Doing",
}

NOTE_VALIDATOR: Dict[str, Any] = {
    "bsonType": "object",
    "required": ["_id", "title", "description", "category_id"],
    "properties": {
        "_id": {"bsonType": "string", "minLength": 36, "maxLength": 36},
        "owner_id": {"bsonType": ["string", "null"]},
        "title": {"bsonType": "string", "minLength": 1},
        "description": {"bsonType": "string", "minLength": 1},
        "category_id": {"bsonType": "string"},
    },
    "additionalProperties": True,
}

CATEGORY_VALIDATOR: Dict[str, Any] = {
    "bsonType": "object",
    "required": ["_id"],
    "properties": {
        "_id": {"bsonType": "string"},
        "name": {"bsonType": ["string", "null"]},
    },
    "additionalProperties": True,
}


def _collmod_or_create(name: str, validator: Dict[str, Any] | None) -> None:
    db = get_db()
    try:
        if name not in db.list_collection_names():
            if validator:
                db.create_collection(name, validator={"$jsonSchema": validator})
            else:
                db.create_collection(name)
        elif validator:
            db.command({
                "collMod": name,
                "validator": {"$jsonSchema": validator},
                "validationLevel": "moderate",
            })
    except PyMongoError as e:
        # Algunos motores no aceptan collMod sin privilegios; seguimos sin validator estricto.
        _log.warning("No se pudo aplicar validator en '%s': %s", name, e)


def _ensure_indexes(name: str, indexes: List[Dict[str, Any]]) -> None:
    coll = get_db()[name]
    for ix in indexes:
        ix = dict(ix)
        keys = ix.pop("keys")
        try:
            coll.create_index(keys, **ix)
        except PyMongoError as e:
            _log.warning("No se pudo crear índice en '%s' (%s): %s", name, keys, e)


def seed_categories(categories: Dict[str, str] | None = None) -> List[str]:
    """Inserta las categorías que falten; nunca pisa nombres existentes.

    Devuelve los ids creados.
    """
    created: List[str] = []
    for cid, name in (categories or DEFAULT_CATEGORIES).items():
        if category_repo.ensure(cid, name):
            created.append(cid)
    if created:
        _log.info("Categorías sembradas: %s", ", ".join(created))
    return created


def ensure_collections() -> None:
    """
    Garantiza colecciones, validadores e índices mínimos.
    """
    notes = settings.note_collection_name
    _collmod_or_create(notes, NOTE_VALIDATOR)
    # title no es único: el rechazo de títulos duplicados es best-effort en el servicio
    _ensure_indexes(
        notes,
        [
            {"keys": [("title", 1)], "name": "ix_title"},
            {"keys": [("owner_id", 1)], "name": "ix_owner_id"},
        ],
    )

    _collmod_or_create(settings.category_collection_name, CATEGORY_VALIDATOR)

    if settings.seed_default_categories:
        try:
            seed_categories()
        except PyMongoError as e:
            _log.warning("No se pudieron sembrar categorías: %s", e)
