# Ver/editar el carrito. El estado vive en la cookie: decode -> modificar -> encode.

import logging

from fastapi import APIRouter, Request, Depends, Form, Path
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from config import MAX_PRODUCT_ID
from db import get_session
from templates_engine import render_template, server_error
from utils.cart import read_cart, write_cart, set_quantity, remove_item
from utils.helpers import fetch_products_by_ids, build_cart_lines

log = logging.getLogger("uvicorn.error")

router = APIRouter(tags=["Cart"])


def _empty_cart(request: Request, title: str = "Cart"):
    return render_template(request, "empty_cart.html", {"title": title})


def _parse_form_qty(raw: str) -> int:
    # cantidad ausente o no numérica -> 1 (luego se acota a [1, 100])
    try:
        return int((raw or "").strip())
    except ValueError:
        return 1


# --------- Vista ---------

@router.get("/cart", response_class=HTMLResponse)
def cart_view(request: Request, session: Session = Depends(get_session)):
    cart = read_cart(request)
    if not cart:
        return _empty_cart(request)

    try:
        rows = fetch_products_by_ids(session, cart.keys())
    except SQLAlchemyError:
        log.exception("Database query error (cart)")
        return server_error()

    products, total_price = build_cart_lines(rows, cart)
    if not products:
        return _empty_cart(request)

    return render_template(request, "cart.html", {
        "title": "Cart",
        "products": products,
        "total_price": total_price,
    })


# --------- Acciones ---------

@router.post("/add_to_cart/{product_id}")
def add_to_cart(
    request: Request,
    product_id: int = Path(gt=0, le=MAX_PRODUCT_ID),
    quantity: str = Form("1"),
):
    cart = set_quantity(read_cart(request), product_id, _parse_form_qty(quantity))

    resp = RedirectResponse(url="/cart", status_code=303)
    resp.headers["HX-Redirect"] = "/cart"
    write_cart(resp, cart)
    return resp


@router.post("/remove_from_cart/{product_id}")
def remove_from_cart(request: Request, product_id: int = Path(gt=0, le=MAX_PRODUCT_ID)):
    cart = remove_item(read_cart(request), product_id)

    resp = RedirectResponse(url="/cart", status_code=303)
    resp.headers["HX-Refresh"] = "true"
    write_cart(resp, cart)
    return resp
