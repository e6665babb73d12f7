import logging

from fastapi import APIRouter, Request, Depends, HTTPException, Path
from fastapi.responses import HTMLResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from config import MAX_PRODUCT_ID
from db import get_session
from models import Product
from templates_engine import render_template, server_error
from utils.helpers import round_price

log = logging.getLogger("uvicorn.error")

router = APIRouter(prefix="", tags=["Public"])


def _product_card(p: Product) -> dict:
    return {
        "id": p.id,
        "name": p.name,
        "description": p.description or "",
        "price": round_price(p.price or 0),
        "image_url": p.image_url or "",
    }


# ---------- HOME ----------
@router.get("/", name="home", response_class=HTMLResponse)
def home(request: Request, session: Session = Depends(get_session)):
    try:
        rows = session.exec(select(Product).order_by(Product.id)).all()
    except SQLAlchemyError:
        log.exception("Database query error (home)")
        return server_error()

    return render_template(request, "index.html", {
        "title": "Ecommerce",
        "products": [_product_card(p) for p in rows],
    })


# ---------- DETALLE ----------
@router.get("/product/{product_id}", name="product_details", response_class=HTMLResponse)
def product_details(
    request: Request,
    product_id: int = Path(gt=0, le=MAX_PRODUCT_ID),
    session: Session = Depends(get_session),
):
    try:
        product = session.get(Product, product_id)
    except SQLAlchemyError:
        log.exception("Database query error (product %s)", product_id)
        return server_error()
    if not product:
        raise HTTPException(status_code=404, detail="Producto no encontrado")

    ctx = {
        "title": product.name,
        "product": {
            **_product_card(product),
            "stock_quantity": product.stock_quantity,
            "category": product.category or "",
        },
    }
    return render_template(request, "product_details.html", ctx)


# ---------- HEALTHCHECK ----------
@router.get("/status", response_class=PlainTextResponse)
def status():
    return "ok"
