"""
Cliente HTTP de la API de notas (lo que consume el frontend).

Refleja las llamadas del servicio de notas de la UI: listar, filtrar por
categoría, crear, actualizar y borrar. Los errores HTTP se convierten en
`NotesClientError` con el mismo mensaje que muestra la UI.
"""
import logging
from typing import Any, Dict, List, Optional

import requests


class NotesClientError(Exception):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


_log = logging.getLogger("notemanager.client")

_ERROR_MESSAGES = {
    400: "Note incomplete",
    401: "Invalid category",
    409: "Note already exists",
}

CATEGORY_NAMES = {
    "1": "To Do",
    "2": "Done",
    "3": "Doing",
}


class NotesClient:
    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 10,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        try:
            r = self.session.request(method, f"{self.base_url}{path}", timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            _log.warning("Fallo de red %s %s: %s", method, path, e)
            raise NotesClientError(f"Error: {e}") from e
        if r.status_code >= 400:
            raise NotesClientError(
                _ERROR_MESSAGES.get(r.status_code, "Client error. Try again"),
                status_code=r.status_code,
            )
        return r

    # --- Notas ---

    def get_notes(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/notes").json()

    def get_filtered_notes(self, category_id: str | None) -> List[Dict[str, Any]]:
        """Filtra en cliente por categoría; sin categoría devuelve todas."""
        notes = self.get_notes()
        if not category_id:
            return notes
        return [n for n in notes if n.get("categoryId") == category_id]

    def get_note(self, note_id: str) -> Dict[str, Any]:
        return self._request("GET", "/notes/GetNoteById", params={"id": str(note_id)}).json()

    def add_note(
        self,
        title: str,
        description: str,
        category_id: str,
        owner_id: str | None = None,
    ) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "title": title,
            "description": description,
            "categoryId": category_id,
        }
        if owner_id:
            payload["ownerId"] = str(owner_id)
        return self._request("POST", "/notes", json=payload).json()

    def update_note(self, note: Dict[str, Any]) -> bool:
        return bool(self._request("PUT", f"/notes/{note['id']}", json=note).json())

    def delete_note(self, note_id: str) -> None:
        self._request("DELETE", f"/notes/{note_id}")

    # --- Categorías ---

    def get_categories(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/notes/GetCategories").json()

    @staticmethod
    def category_name(category_id: str) -> str:
        return CATEGORY_NAMES.get(category_id, "Unknown")
