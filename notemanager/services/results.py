"""
Resultados explícitos de los servicios: valor o error de dominio.

Los errores de dominio (nota incompleta, categoría inválida, duplicado, no
encontrado) no se lanzan como excepciones; los routers traducen `error.kind`
a un status HTTP. Los fallos de conexión con Mongo sí se propagan.
"""
from typing import Generic, Literal, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")

ErrorKind = Literal["incomplete", "invalid_category", "duplicate", "not_found", "failed"]


class ServiceError(BaseModel):
    kind: ErrorKind
    message: str


class Result(Generic[T]):
    __slots__ = ("value", "error")

    def __init__(self, value: Optional[T] = None, error: Optional[ServiceError] = None) -> None:
        self.value = value
        self.error = error

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "Result[T]":
        return cls(error=ServiceError(kind=kind, message=message))

    def __repr__(self) -> str:
        if self.error is not None:
            return f"Result(error={self.error.kind}: {self.error.message})"
        return f"Result(value={self.value!r})"
