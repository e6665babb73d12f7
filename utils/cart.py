# Carrito guardado 100% en la cookie "cart" del cliente.
#
# Formato: "id:qty,id:qty"  (ej. "3:2,7:1"). El orden de los pares no importa.
# Cookie vacía o ausente = carrito vacío. El servidor no guarda nada.

import logging
import re
from typing import Dict, Optional

from fastapi import Request, Response
from itsdangerous import Signer, BadSignature

from config import (
    SECRET_KEY,
    CART_COOKIE_NAME, CART_COOKIE_MAX_AGE, CART_COOKIE_SECURE, CART_COOKIE_SIGNED,
    CART_MIN_QTY, CART_MAX_QTY, MAX_PRODUCT_ID,
)

log = logging.getLogger("uvicorn.error")  # usa el logger de Uvicorn

Cart = Dict[int, int]  # {product_id: qty}

_INT_RE = re.compile(r"[+-]?[0-9]+")


class CartDecodeError(ValueError):
    """La cookie no se pudo leer; quien llama debe tratar el carrito como vacío."""


class MalformedEntry(CartDecodeError):
    pass


class InvalidNumber(CartDecodeError):
    pass


def clamp_quantity(qty: int) -> int:
    return max(CART_MIN_QTY, min(CART_MAX_QTY, int(qty)))


def is_valid_product_id(product_id: int) -> bool:
    return 0 < product_id <= MAX_PRODUCT_ID


def _parse_int(text: str, what: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise InvalidNumber(f"Error parsing `{what}`: {text!r}")
    return int(text)


# ============ Codec ============

def decode_cart(raw: Optional[str]) -> Cart:
    """
    "3:2,7:1" -> {3: 2, 7: 1}

    Falla entera ante el primer par inválido (no recupera parcialmente).
    Si un id se repite gana la última aparición.
    """
    cart: Cart = {}
    if not raw:
        return cart
    for entry in raw.split(","):
        id_str, sep, qty_str = entry.partition(":")
        if not sep:
            raise MalformedEntry(f"Error splitting product: {entry!r}")
        product_id = _parse_int(id_str, "id")
        qty = _parse_int(qty_str, "quantity")
        if not is_valid_product_id(product_id):
            raise InvalidNumber(f"Error parsing `id`: {id_str!r}")
        cart[product_id] = clamp_quantity(qty)
    return cart


def encode_cart(cart: Cart) -> str:
    """{3: 2, 7: 1} -> "3:2,7:1" (orden no garantizado)."""
    return ",".join(f"{pid}:{qty}" for pid, qty in cart.items())


def set_quantity(cart: Cart, product_id: int, qty: int) -> Cart:
    # un id fuera de rango no se escribe: rompería el decode de todo el carrito
    if not is_valid_product_id(int(product_id)):
        return dict(cart)
    new_cart = dict(cart)
    new_cart[int(product_id)] = clamp_quantity(qty)
    return new_cart


def remove_item(cart: Cart, product_id: int) -> Cart:
    return {pid: qty for pid, qty in cart.items() if pid != int(product_id)}


# ============ Cookie ============

def _signer() -> Signer:
    return Signer(SECRET_KEY, salt="storefront:cart")


def cookie_value(cart: Cart) -> str:
    raw = encode_cart(cart)
    if CART_COOKIE_SIGNED and raw:
        return _signer().sign(raw).decode("utf-8")
    return raw


def read_cart(request: Request) -> Cart:
    """Lee la cookie del request. Si está corrupta se loggea y se devuelve {}."""
    raw = request.cookies.get(CART_COOKIE_NAME) or ""
    if not raw:
        return {}
    try:
        if CART_COOKIE_SIGNED:
            raw = _signer().unsign(raw).decode("utf-8")
        return decode_cart(raw)
    except BadSignature:
        log.warning("[cart] firma inválida en cookie %r, se ignora", raw)
    except CartDecodeError as e:
        log.warning("[cart] cookie ilegible (%s), se trata como vacía", e)
    return {}


def _set_cart_cookie(response: Response, value: str) -> None:
    response.set_cookie(
        key=CART_COOKIE_NAME,
        value=value,
        max_age=CART_COOKIE_MAX_AGE,
        path="/",
        secure=CART_COOKIE_SECURE,
        httponly=True,
        samesite="strict",
    )


def write_cart(response: Response, cart: Cart) -> None:
    _set_cart_cookie(response, cookie_value(cart))


def clear_cart(response: Response) -> None:
    _set_cart_cookie(response, "")
