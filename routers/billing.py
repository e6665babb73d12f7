import logging

import stripe
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from config import STRIPE_SECRET_KEY, STRIPE_PUBLIC_KEY, STRIPE_CURRENCY
from db import get_session
from templates_engine import render_template, server_error
from utils.cart import read_cart, clear_cart
from utils.helpers import (
    fetch_products_by_ids, build_cart_lines, payment_description, to_minor_units,
)

log = logging.getLogger("uvicorn.error")

router = APIRouter(tags=["Billing"])

# ==========================
# Config Stripe
# ==========================
stripe.api_key = STRIPE_SECRET_KEY


def _create_payment_intent(total_price: float, description: str) -> str:
    """Crea el PaymentIntent (sin confirmar) y devuelve su client_secret."""
    intent = stripe.PaymentIntent.create(
        amount=to_minor_units(total_price),
        currency=STRIPE_CURRENCY,
        description=description,
        confirm=False,
    )
    return intent.client_secret


# ==========================
# Rutas
# ==========================

@router.get("/payment", response_class=HTMLResponse)
def payment(request: Request, session: Session = Depends(get_session)):
    """
    Checkout:
    - recalcula el total en servidor con los precios de la DB
    - crea el PaymentIntent en Stripe
    - renderiza el formulario de pago con el client_secret
    """
    cart = read_cart(request)
    if not cart:
        return render_template(request, "empty_cart.html", {"title": "Payment"})

    try:
        rows = fetch_products_by_ids(session, cart.keys())
    except SQLAlchemyError:
        log.exception("Database query error (payment)")
        return server_error()

    products, total_price = build_cart_lines(rows, cart)
    if not products:
        return render_template(request, "empty_cart.html", {"title": "Payment"})

    if not stripe.api_key:
        log.error("Missing `STRIPE_SECRET_KEY` environment variable")
        return server_error()
    if not STRIPE_PUBLIC_KEY:
        log.error("Missing `STRIPE_PUBLIC_KEY` environment variable")
        return server_error()

    description = payment_description(products)
    try:
        client_secret = _create_payment_intent(total_price, description)
    except stripe.StripeError as e:
        log.error("Failed to create payment intent: %r", e)
        return server_error()
    if not client_secret:
        log.error("No client secret found in payment intent")
        return server_error()

    return render_template(request, "payment.html", {
        "title": "Ecommerce - Payment",
        "CLIENT_SECRET": client_secret,
        "STRIPE_PUBLIC_KEY": STRIPE_PUBLIC_KEY,
        "description": description,
        "total_price": total_price,
        "products": products,
    })


@router.get("/stripe-webhook", response_class=HTMLResponse)
def stripe_webhook(request: Request):
    """Página de retorno tras el pago: muestra el agradecimiento y vacía el carrito."""
    resp = render_template(request, "stripe-webhook.html", {"title": "Thank You!"})
    if resp.status_code == 200:
        clear_cart(resp)
    return resp
