"""Siembra las categorías de notas (y opcionalmente colecciones/índices).

Uso típico:
  PYTHONPATH=. python scripts/seed_categories.py --yes
  PYTHONPATH=. python scripts/seed_categories.py --category 4=Blocked --yes
  PYTHONPATH=. python scripts/seed_categories.py --bootstrap --yes

Características:
  - Por defecto usa las categorías que muestra el frontend (To Do / Done / Doing).
  - Nunca pisa el nombre de una categoría existente.
  - Dry‑run por defecto (muestra qué se insertaría). Confirma con --yes.
"""
from __future__ import annotations

import argparse
import sys
from typing import Dict, List

from notemanager.core.config import settings
from notemanager.infrastructure.db.bootstrap import DEFAULT_CATEGORIES, ensure_collections, seed_categories
from notemanager.infrastructure.db.mongo import db_ready, init_mongo
from notemanager.repositories import category_repo


def _parse_categories(pairs: List[str]) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for p in pairs:
        cid, sep, name = p.partition("=")
        if not sep or not cid.strip():
            raise SystemExit(f"Categoría inválida '{p}': usa id=nombre")
        out[cid.strip()] = name.strip()
    return out


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--category", action="append", default=[], help="Categoría id=nombre (se puede repetir)")
    ap.add_argument("--bootstrap", action="store_true", help="Aplicar además validadores e índices")
    ap.add_argument("--yes", action="store_true", help="Confirmar y ejecutar (por defecto es dry-run)")
    args = ap.parse_args()

    categories = _parse_categories(args.category) if args.category else dict(DEFAULT_CATEGORIES)

    init_mongo()
    if not db_ready():
        print(f"Mongo no accesible en {settings.mongo_uri}", file=sys.stderr)
        sys.exit(1)

    existing = {c["_id"] for c in category_repo.find_all()}
    pending = {cid: name for cid, name in categories.items() if cid not in existing}
    print(f"Categorías a insertar en '{settings.category_collection_name}': {len(pending)}")
    for cid, name in pending.items():
        print(f"  - {cid} | {name}")

    if not args.yes:
        print("\nDry‑run. Añade --yes para ejecutar.")
        return

    if args.bootstrap:
        ensure_collections()
        print("Colecciones e índices verificados.")
    created = seed_categories(categories)
    print(f"\nListo. Insertadas: {', '.join(created) or 'ninguna'}")


if __name__ == "__main__":
    main()
