"""
Servicio de notas: reglas de validación sobre el CRUD de los repositorios.

- Campos requeridos (título y descripción no vacíos).
- Lista blanca de categorías (constante de proceso, ver `settings.accepted_categories`).
- Títulos e ids duplicados.

Cada operación devuelve un `Result`; los routers traducen el tipo de error a HTTP.
El chequeo de título duplicado y la inserción no son atómicos: dos creaciones
concurrentes con el mismo título pueden pasar ambas (sólo el `_id` es único).
"""
import logging
from typing import Iterable, List, Optional
from uuid import UUID, uuid4

from pymongo.errors import DuplicateKeyError, WriteError

from notemanager.api.schemas.note import CategoryIn, CategoryOut, NoteIn, NoteOut
from notemanager.core.config import settings
from notemanager.repositories import category_repo, note_repo
from notemanager.services.note_mapping import (
    category_from_document,
    category_to_document,
    from_document,
    has_id,
    is_complete,
    is_valid_category,
    to_document,
    to_note_out,
)
from notemanager.services.results import Result

_log = logging.getLogger("notemanager.notes")


def _accepted(accepted: Optional[Iterable[str]]) -> tuple[str, ...]:
    return tuple(accepted) if accepted is not None else settings.accepted_categories


def _invalid_category(category_id: Optional[str], accepted: tuple[str, ...]) -> Result:
    return Result.failure(
        "invalid_category",
        f"Id {category_id or ''} is undefined. Accepted values are {','.join(accepted)}.",
    )


def _not_found(note_id: UUID) -> Result:
    return Result.failure("not_found", f"Note with id {note_id} was not found")


# --- Notas ---

def get_all() -> Result[List[NoteOut]]:
    return Result.success([from_document(d) for d in note_repo.find_all()])


def get_by_id(note_id: UUID) -> Result[NoteOut]:
    doc = note_repo.find_by_id(str(note_id))
    if doc is None:
        return _not_found(note_id)
    return Result.success(from_document(doc))


def get_by_owner(owner_id: UUID) -> Result[List[NoteOut]]:
    return Result.success([from_document(d) for d in note_repo.find_by_owner(str(owner_id))])


def create(note: NoteIn, accepted: Optional[Iterable[str]] = None) -> Result[NoteOut]:
    """Crea la nota; asigna id si no viene y devuelve la nota recibida (eco)."""
    cats = _accepted(accepted)
    if not has_id(note):
        note = note.model_copy(update={"id": uuid4()})
    if not is_complete(note):
        return Result.failure("incomplete", "Note incomplete")
    if not is_valid_category(note, cats):
        return _invalid_category(note.category_id, cats)

    if note_repo.find_by_title(note.title) is not None:
        return Result.failure("duplicate", "A note with the same title already exists")
    try:
        note_repo.insert(to_document(note))
    except DuplicateKeyError:
        return Result.failure("duplicate", "A note with the same ID already exists")

    _log.info("Nota creada id=%s category=%s", note.id, note.category_id)
    return Result.success(to_note_out(note))


def update(note_id: UUID, note: NoteIn, accepted: Optional[Iterable[str]] = None) -> Result[bool]:
    """Reemplaza la nota con id `note_id` (el id del cuerpo se ignora).

    Devuelve False cuando Mongo no confirma la escritura y la nota se inserta
    como nueva; True en cualquier otro caso.
    """
    cats = _accepted(accepted)
    note = note.model_copy(update={"id": note_id})
    if not is_valid_category(note, cats):
        return _invalid_category(note.category_id, cats)
    if not is_complete(note):
        return Result.failure("incomplete", "Note incomplete")

    doc = to_document(note)
    res = note_repo.replace(str(note_id), doc)
    # Sin acknowledge no hay conteo de modificados: se trata como cero
    if not res.acknowledged:
        note_repo.insert(doc)
        _log.info("Nota insertada vía update id=%s", note_id)
        return Result.success(False)
    return Result.success(True)


def delete(note_id: UUID) -> Result[bool]:
    res = note_repo.delete(str(note_id))
    if not res.acknowledged or res.deleted_count == 0:
        return _not_found(note_id)
    _log.info("Nota eliminada id=%s", note_id)
    return Result.success(True)


# --- Categorías ---

def get_all_categories() -> Result[List[CategoryOut]]:
    return Result.success([category_from_document(d) for d in category_repo.find_all()])


def create_category(category: CategoryIn) -> Result[CategoryOut]:
    try:
        category_repo.insert(category_to_document(category))
    except DuplicateKeyError:
        return Result.failure("failed", f"Category {category.id} already exists")
    except WriteError as e:
        return Result.failure("failed", f"Category {category.id} rejected: {e}")
    return Result.success(CategoryOut(id=category.id, name=category.name))


def delete_category(category_id: str) -> Result[bool]:
    res = category_repo.delete(category_id)
    if not res.acknowledged or res.deleted_count == 0:
        return Result.failure("failed", category_id)
    return Result.success(True)
