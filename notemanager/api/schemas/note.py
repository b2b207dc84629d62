"""
Esquemas Pydantic de la API de notas (forma de cable en camelCase).

Nota:    { id, ownerId, title, description, categoryId }
Categoría: { id, name }
"""
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NoteIn(_WireModel):
    """Nota recibida del cliente. Los campos de texto pueden venir vacíos;
    el servicio decide si la nota está completa."""
    id: Optional[UUID] = None
    owner_id: Optional[UUID] = None
    title: Optional[str] = None
    description: Optional[str] = None
    category_id: Optional[str] = None


class NoteOut(_WireModel):
    id: UUID
    owner_id: Optional[UUID] = None
    title: str
    description: str
    category_id: str


class CategoryIn(_WireModel):
    id: str
    name: Optional[str] = None


class CategoryOut(_WireModel):
    id: str
    name: Optional[str] = None
