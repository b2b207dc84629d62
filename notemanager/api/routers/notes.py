"""
Endpoints de notas y categorías.

Los errores de dominio del servicio se traducen a status HTTP por endpoint:
no todos los endpoints usan el mismo código para el mismo tipo de error.
"""
from typing import Dict, List, TypeVar
from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, Request, Response, status

from notemanager.api.schemas.note import CategoryIn, CategoryOut, NoteIn, NoteOut
from notemanager.services import note_service
from notemanager.services.results import ErrorKind, Result

T = TypeVar("T")

router = APIRouter(prefix="/notes", tags=["Notes"])


def _unwrap(result: Result[T], statuses: Dict[ErrorKind, int], default: int = status.HTTP_400_BAD_REQUEST) -> T:
    if result.ok:
        return result.value
    err = result.error
    raise HTTPException(status_code=statuses.get(err.kind, default), detail=err.message)


@router.get("", response_model=List[NoteOut], summary="Listar notas")
def get_notes() -> List[NoteOut]:
    return _unwrap(note_service.get_all(), {})


@router.get(
    "/GetNoteById",
    name="get_note_by_id",
    response_model=NoteOut,
    summary="Obtener nota por id",
    responses={404: {"description": "Nota no encontrada"}},
)
def get_note_by_id(note_id: UUID = Query(alias="id")) -> NoteOut:
    return _unwrap(note_service.get_by_id(note_id), {"not_found": status.HTTP_404_NOT_FOUND})


@router.get("/GetNotesByOwner", response_model=List[NoteOut], summary="Listar notas de un dueño")
def get_notes_by_owner(owner_id: UUID = Query(alias="ownerId")) -> List[NoteOut]:
    return _unwrap(note_service.get_by_owner(owner_id), {})


@router.get("/GetCategories", response_model=List[CategoryOut], summary="Listar categorías")
def get_categories() -> List[CategoryOut]:
    return _unwrap(note_service.get_all_categories(), {})


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=NoteOut,
    summary="Crear nota",
    description="Crea una nota; el id se genera si no viene. Location apunta a GetNoteById.",
    responses={
        400: {"description": "Nota incompleta"},
        401: {"description": "Categoría inválida"},
        409: {"description": "Título o id duplicado"},
    },
)
def create_note(payload: NoteIn, request: Request, response: Response) -> NoteOut:
    created = _unwrap(
        note_service.create(payload),
        {
            "incomplete": status.HTTP_400_BAD_REQUEST,
            "duplicate": status.HTTP_409_CONFLICT,
            "invalid_category": status.HTTP_401_UNAUTHORIZED,
        },
    )
    response.headers["Location"] = str(
        request.url_for("get_note_by_id").include_query_params(id=str(created.id))
    )
    return created


@router.post("/AddCategory", response_model=CategoryOut, summary="Crear categoría")
def add_category(payload: CategoryIn) -> CategoryOut:
    return _unwrap(note_service.create_category(payload), {})


# Debe declararse antes de DELETE /notes/{note_id} para no chocar con esa ruta
@router.delete("/DeleteCategory", summary="Eliminar categoría")
def delete_category(category_id: str = Query(alias="id")) -> Response:
    _unwrap(note_service.delete_category(category_id), {}, default=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_200_OK)


@router.put(
    "/{note_id}",
    response_model=bool,
    summary="Actualizar nota",
    description="Devuelve false si la nota se insertó como nueva en lugar de reemplazarse.",
)
def update_note(note_id: UUID, payload: NoteIn) -> bool:
    return _unwrap(note_service.update(note_id, payload), {})


@router.delete("/{note_id}", summary="Eliminar nota", responses={404: {"description": "Nota no encontrada"}})
def delete_note(note_id: UUID) -> Response:
    _unwrap(note_service.delete(note_id), {"not_found": status.HTTP_404_NOT_FOUND})
    return Response(status_code=status.HTTP_200_OK)
