"""
Mapeo entre la forma de cable (DTO) y la forma almacenada, más los
predicados de validación que comparten create y update.

Funciones puras: sin acceso a la base ni a settings.
"""
from typing import Any, Dict, Iterable, Optional
from uuid import UUID

from notemanager.api.schemas.note import CategoryIn, CategoryOut, NoteIn, NoteOut

NIL_UUID = UUID(int=0)


def _uuid_str(value: Optional[UUID]) -> Optional[str]:
    return str(value) if value is not None else None


def _parse_uuid(value: Any) -> Optional[UUID]:
    if value is None or value == "":
        return None
    return value if isinstance(value, UUID) else UUID(str(value))


def has_id(note: NoteIn) -> bool:
    return note.id is not None and note.id != NIL_UUID


def is_complete(note: NoteIn) -> bool:
    """Título y descripción no vacíos tras recortar espacios."""
    return bool((note.title or "").strip()) and bool((note.description or "").strip())


def is_valid_category(note: NoteIn, accepted: Iterable[str]) -> bool:
    return note.category_id is not None and note.category_id in tuple(accepted)


def to_document(note: NoteIn) -> Dict[str, Any]:
    return {
        "_id": _uuid_str(note.id),
        "owner_id": _uuid_str(note.owner_id),
        "title": note.title,
        "description": note.description,
        "category_id": note.category_id,
    }


def from_document(doc: Dict[str, Any]) -> NoteOut:
    return NoteOut(
        id=_parse_uuid(doc["_id"]),
        owner_id=_parse_uuid(doc.get("owner_id")),
        title=doc.get("title") or "",
        description=doc.get("description") or "",
        category_id=doc.get("category_id") or "",
    )


def to_note_out(note: NoteIn) -> NoteOut:
    """Eco de la nota recibida (ya con id asignado)."""
    return NoteOut(
        id=note.id,
        owner_id=note.owner_id,
        title=note.title or "",
        description=note.description or "",
        category_id=note.category_id or "",
    )


def category_to_document(category: CategoryIn) -> Dict[str, Any]:
    return {"_id": category.id, "name": category.name}


def category_from_document(doc: Dict[str, Any]) -> CategoryOut:
    return CategoryOut(id=str(doc["_id"]), name=doc.get("name"))
