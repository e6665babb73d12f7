import os
from dotenv import load_dotenv, find_dotenv

# Carga .env si existe (local). En producción las variables vienen del entorno.
load_dotenv(find_dotenv())

ENV = os.getenv("ENV", "local")

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./app.db")
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8080"))

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")

# Stripe (PaymentIntent en /payment)
STRIPE_SECRET_KEY = os.getenv("STRIPE_SECRET_KEY", "")
STRIPE_PUBLIC_KEY = os.getenv("STRIPE_PUBLIC_KEY", "")
STRIPE_CURRENCY = os.getenv("STRIPE_CURRENCY", "eur").lower()

# Cookie del carrito
CART_COOKIE_NAME = os.getenv("CART_COOKIE_NAME", "cart")
CART_COOKIE_MAX_AGE = int(os.getenv("CART_COOKIE_MAX_AGE", str(60 * 60 * 24 * 7)))  # 1 semana
CART_COOKIE_SECURE = os.getenv("CART_COOKIE_SECURE", "true").lower() in ("1", "true", "yes")
# Firma con itsdangerous. Apagado: el valor de la cookie es el formato "id:qty,id:qty" tal cual.
CART_COOKIE_SIGNED = os.getenv("CART_COOKIE_SIGNED", "false").lower() in ("1", "true", "yes")

# Límites de cantidad por producto
CART_MIN_QTY = 1
CART_MAX_QTY = 100

# Ids de producto: enteros positivos de 32 bits (columna INTEGER)
MAX_PRODUCT_ID = 2**31 - 1
