"""
Punto único para crear y configurar la instancia global de Jinja2Templates.

- Todos los routers usan la misma instancia: `from templates_engine import templates`.
- Helpers globales (`t`, `locale`) y el filtro `money` disponibles en TODAS las plantillas.
- `render_template(...)` convierte un error de plantilla en un 500 genérico.
"""

import logging
from pathlib import Path

from fastapi import Request
from fastapi.responses import PlainTextResponse
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from utils.i18n import t, DEFAULT_LOCALE

log = logging.getLogger("uvicorn.error")

BASE_DIR = Path(__file__).resolve().parent

# ==============
# Instancia única
# ==============
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))

# ============================
# Helpers globales para Jinja2
# ============================
templates.env.globals["t"] = t
templates.env.globals["locale"] = DEFAULT_LOCALE

# {{ product.price | money }} -> "9.99"
templates.env.filters["money"] = lambda value: f"{float(value or 0):.2f}"


def server_error() -> PlainTextResponse:
    return PlainTextResponse("Internal Server Error", status_code=500)


def render_template(request: Request, name: str, context: dict, status_code: int = 200):
    try:
        return templates.TemplateResponse(request, name, context, status_code=status_code)
    except TemplateError as e:
        log.error("Error rendering _%s_ template: %r", name, e)
        return server_error()
