"""Configuración central de la aplicación (Pydantic Settings).

- Carga variables desde .env en la raíz del proyecto.
- Agrupa ajustes por área: App, CORS, Mongo, Notas, Logging.
"""
from pathlib import Path
from typing import Tuple

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resuelve el .env ubicado en la raíz del proyecto (independiente del CWD)
ENV_FILE = Path(__file__).resolve().parents[2] / ".env"


class Settings(BaseSettings):
    """Conjunto de variables de configuración con valores por defecto razonables.

    Nota: los valores pueden sobreescribirse vía variables de entorno (.env).
    """
    # App
    app_name: str = "Note Manager API"
    api_prefix: str = ""
    log_level: str = "INFO"

    # CORS (frontend Angular en localhost)
    cors_origins: list[str] = ["http://localhost:4200", "http://127.0.0.1:4200"]
    cors_allow_any: bool = False

    # Mongo
    mongo_uri: str = Field(
        "mongodb://localhost:27017",
        validation_alias=AliasChoices("MONGO_URI", "CONNECTION_STRING"),
    )
    mongo_db: str = Field(
        "note_manager",
        validation_alias=AliasChoices("MONGO_DB", "DATABASE_NAME"),
    )
    mongo_timeout_ms: int = 15000
    # TLS sólo cuando se pide explícitamente (SRV siempre usa TLS)
    mongo_tls: bool = False
    mongo_tls_insecure: bool = False
    mongo_tls_allow_invalid_hostnames: bool = False

    # Colecciones
    note_collection_name: str = "notes"
    category_collection_name: str = "categories"

    # Categorías aceptadas para notas (lista separada por comas).
    # Es una constante de proceso: no se consulta la colección de categorías.
    accepted_category_ids: str = "1,2,3"
    seed_default_categories: bool = True

    # --- Utilidades derivadas / helpers ---
    @property
    def api_prefix_normalized(self) -> str:
        """Devuelve `api_prefix` con formato consistente.

        - Siempre inicia con '/'
        - Sin '/' final
        - Si está vacío o es solo '/', devuelve "" (FastAPI no acepta prefijos con '/' final)
        """
        pref = (self.api_prefix or "").strip()
        if not pref or pref == '/':
            return ""
        if not pref.startswith('/'):
            pref = '/' + pref
        return pref.rstrip('/')

    @property
    def accepted_categories(self) -> Tuple[str, ...]:
        """Tupla inmutable con los ids de categoría aceptados para notas."""
        return tuple(p.strip() for p in self.accepted_category_ids.split(",") if p.strip())

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # no fallar si hay variables no usadas
        populate_by_name=True,
    )


settings = Settings()
