from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.staticfiles import StaticFiles

from config import HOST, PORT
from db import init_db
from routers import public, cart, billing
from templates_engine import render_template

BASE_DIR = Path(__file__).resolve().parent


# --- Ciclo de vida ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()   # crea tablas una sola vez al boot
    yield


app = FastAPI(lifespan=lifespan)

# --- Static ---
app.mount(
    "/static",
    StaticFiles(directory=str(BASE_DIR / "static")),
    name="static",
)

# Comandos varios
# uvicorn main:app --reload
# python scripts/seed_products.py


# --- 404 con plantilla; el resto de errores HTTP como texto plano ---
@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return render_template(request, "404.html", {"title": "Ecommerce - Not Found"}, status_code=404)
    return Response(str(exc.detail), status_code=exc.status_code, headers=getattr(exc, "headers", None))


app.include_router(public.router)
app.include_router(cart.router)
app.include_router(billing.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=HOST, port=PORT, reload=True)
