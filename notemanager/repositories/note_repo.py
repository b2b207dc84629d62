"""Repo de la colección de notas.

- El id de la nota vive en `_id` (UUID serializado como str), así Mongo
  garantiza la unicidad del identificador.
- Sin lógica de negocio: validaciones y mapeos viven en los servicios.
"""
from typing import Any, Dict, List, Optional

from pymongo.collection import Collection
from pymongo.results import DeleteResult, UpdateResult

from notemanager.core.config import settings
from notemanager.infrastructure.db.mongo import get_db


def _coll() -> Collection:
    return get_db()[settings.note_collection_name]


def find_all() -> List[Dict[str, Any]]:
    return list(_coll().find({}))


def find_by_id(note_id: str) -> Optional[Dict[str, Any]]:
    return _coll().find_one({"_id": note_id})


def find_by_title(title: str) -> Optional[Dict[str, Any]]:
    """Primera nota con exactamente ese título (sensible a mayúsculas)."""
    return _coll().find_one({"title": title})


def find_by_owner(owner_id: str) -> List[Dict[str, Any]]:
    return list(_coll().find({"owner_id": owner_id}))


def insert(doc: Dict[str, Any]) -> str:
    """Inserta el documento; propaga DuplicateKeyError si el `_id` ya existe."""
    res = _coll().insert_one(dict(doc))
    return str(res.inserted_id)


def replace(note_id: str, doc: Dict[str, Any]) -> UpdateResult:
    return _coll().replace_one({"_id": note_id}, dict(doc))


def delete(note_id: str) -> DeleteResult:
    return _coll().delete_one({"_id": note_id})
