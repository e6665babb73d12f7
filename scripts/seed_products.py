"""
Crea la tabla `products` (si falta) y carga el catálogo de prueba desde data/products.csv.

Uso (desde la raíz del repo):
  python -m scripts.seed_products [ruta/al/archivo.csv]

Idempotente: los ids que ya existen no se tocan (equivale a ON CONFLICT DO NOTHING).
"""

import csv
import logging
import sys
from pathlib import Path

from sqlmodel import Session

from db import engine, init_db
from models import Product

log = logging.getLogger("uvicorn.error")

DEFAULT_CSV = Path(__file__).resolve().parent.parent / "data" / "products.csv"


def parse_row(record: dict) -> Product:
    return Product(
        id=int(record["id"]),
        name=record["name"],
        description=record["description"],
        price=float(record["price"].strip().lstrip("$")),
        stock_quantity=int(record["stock_quantity"]),
        category=record["category"],
        image_url=record["image_url"],
    )


def load_products(session: Session, csv_path: Path) -> int:
    """Inserta los productos del CSV que aún no existen. Devuelve cuántos insertó."""
    inserted = 0
    with open(csv_path, newline="", encoding="utf-8") as fh:
        for record in csv.DictReader(fh):
            product = parse_row(record)
            if session.get(Product, product.id):
                continue
            log.info("Inserting product: id=%s, name=%s, price=%s", product.id, product.name, product.price)
            session.add(product)
            inserted += 1
    session.commit()
    return inserted


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    csv_path = Path(argv[0]) if argv else DEFAULT_CSV
    init_db()
    with Session(engine) as session:
        inserted = load_products(session, csv_path)
    print(f"OK: {inserted} productos insertados desde {csv_path}")


if __name__ == "__main__":
    main()
