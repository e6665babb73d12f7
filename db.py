from pathlib import Path

from sqlmodel import SQLModel, create_engine, Session
from sqlalchemy.orm import sessionmaker
from sqlalchemy.engine.url import make_url

from config import DATABASE_URL as RAW_DATABASE_URL


def _normalize_url(raw: str) -> str:
    # postgres://... (formato habitual de los hostings) -> driver psycopg2
    if raw.startswith("postgres://"):
        return raw.replace("postgres://", "postgresql+psycopg2://", 1)
    return raw


DATABASE_URL = _normalize_url(RAW_DATABASE_URL)
url = make_url(DATABASE_URL)

connect_args = {}
if url.drivername.startswith("sqlite"):
    # el catálogo se lee desde varios threads del server
    connect_args = {"check_same_thread": False}
    if url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

# Pool compartido por todas las requests; se crea una vez al importar.
engine = create_engine(DATABASE_URL, pool_pre_ping=True, connect_args=connect_args)

SessionLocal = sessionmaker(bind=engine, class_=Session, expire_on_commit=False)


def get_session():
    """Sesión por request para los handlers del catálogo, carrito y pago."""
    with SessionLocal() as session:
        yield session


def init_db(bind=None) -> None:
    """Crea la tabla `products` si falta. `bind` permite usar otro engine (tests)."""
    import models  # noqa: F401  (registra Product en el metadata)
    SQLModel.metadata.create_all(bind=bind or engine)
