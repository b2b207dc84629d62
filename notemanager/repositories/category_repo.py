"""Repo de la colección de categorías (`_id` = id de la categoría)."""
from typing import Any, Dict, List

from pymongo.collection import Collection
from pymongo.results import DeleteResult

from notemanager.core.config import settings
from notemanager.infrastructure.db.mongo import get_db


def _coll() -> Collection:
    return get_db()[settings.category_collection_name]


def find_all() -> List[Dict[str, Any]]:
    return list(_coll().find({}))


def insert(doc: Dict[str, Any]) -> str:
    res = _coll().insert_one(dict(doc))
    return str(res.inserted_id)


def delete(category_id: str) -> DeleteResult:
    return _coll().delete_one({"_id": category_id})


def ensure(category_id: str, name: str) -> bool:
    """Inserta la categoría sólo si no existe. Devuelve True si la creó."""
    res = _coll().update_one(
        {"_id": category_id},
        {"$setOnInsert": {"name": name}},
        upsert=True,
    )
    return res.upserted_id is not None
