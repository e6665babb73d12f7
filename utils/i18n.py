"""
utils/i18n.py

Mini-sistema de traducciones para las plantillas.

- Por ahora solo inglés ("en").
- `t(key, locale="en")` devuelve el texto; si la clave no existe, devuelve la clave.
"""

from typing import Dict

DEFAULT_LOCALE = "en"

CATALOG: Dict[str, Dict[str, str]] = {
    "en": {
        "store.title": "Ecommerce",
        "store.not_found": "Ecommerce - Not Found",
        "store.not_found_text": "The page you are looking for does not exist.",
        "store.back_home": "Back to the store",
        "product.add_to_cart": "Add to cart",
        "product.quantity": "Quantity",
        "product.stock": "In stock",
        "product.category": "Category",
        "cart.title": "Cart",
        "cart.empty": "Your cart is empty.",
        "cart.remove": "Remove",
        "cart.total": "Total",
        "cart.checkout": "Checkout",
        "payment.title": "Ecommerce - Payment",
        "payment.pay": "Pay now",
        "thanks.title": "Thank You!",
        "thanks.text": "Your payment was received. Thanks for your purchase!",
    },
}

def t(key: str, locale: str = DEFAULT_LOCALE) -> str:
    """
    - Si el idioma no existe, usa DEFAULT_LOCALE.
    - Si la clave no existe, devuelve la propia clave.

    En plantillas:
        {{ t("cart.title", locale) }}
    """
    lang_catalog = CATALOG.get(locale) or CATALOG.get(DEFAULT_LOCALE, {})
    return lang_catalog.get(key, key)
