# ------------------------------------------------------------
# Helpers centralizados:
# - Dinero (round_price, to_minor_units)
# - Catálogo por ids (fetch_products_by_ids)
# - Líneas del carrito + total (build_cart_lines)
# - Descripción del pago para Stripe (payment_description)
# ------------------------------------------------------------

from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Tuple

from sqlmodel import Session, select

from models import Product

_ONE = Decimal(1)

# ============ Dinero ============

def _round_half_away(value: float) -> Decimal:
    # Decimal(float) es exacto: redondea el valor binario real, igual que round() de Rust.
    return Decimal(value).quantize(_ONE, rounding=ROUND_HALF_UP)

def round_price(price: float) -> float:
    """round(price * 100) / 100, con las mitades alejándose de cero."""
    return float(_round_half_away(price * 100)) / 100

def to_minor_units(amount: float) -> int:
    """Euros -> céntimos para Stripe (20.99 -> 2099). Nunca trunca."""
    return int(_round_half_away(amount * 100))

# ============ Catálogo ============

def fetch_products_by_ids(session: Session, ids: Iterable[int]) -> List[Product]:
    """SELECT ... WHERE id IN (...). Sin ids no se consulta la DB."""
    ids = sorted(set(ids))
    if not ids:
        return []
    return list(session.exec(
        select(Product).where(Product.id.in_(ids)).order_by(Product.id)
    ).all())

# ============ Carrito ============

def build_cart_lines(products: Iterable[Product], cart: Dict[int, int]) -> Tuple[List[dict], float]:
    """
    Cruza el carrito con las filas del catálogo.
    - Productos que ya no existen en el catálogo se omiten (ni línea ni total).
    - Cada subtotal se redondea a 2 decimales y el total otra vez al final.
    """
    lines = []
    for p in products:
        qty = cart.get(p.id)
        if qty is None:
            continue
        price = float(p.price or 0)
        lines.append({
            "id": p.id,
            "name": p.name,
            "price": round_price(price),
            "quantity": qty,
            "total_price_item": round_price(price * qty),
        })
    total_price = round_price(sum(line["total_price_item"] for line in lines))
    return lines, total_price

def payment_description(lines: Iterable[dict]) -> str:
    """Ej.: 'Camiseta (x2) + Taza (x1)'."""
    return " + ".join(f"{line['name']} (x{line['quantity']})" for line in lines)
