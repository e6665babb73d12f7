"""Shared pytest fixtures: in-memory SQLite catalog + TestClient over the app."""
from __future__ import annotations

from http.cookies import SimpleCookie

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from db import get_session, init_db
from main import app
from models import Product


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def products(session) -> list[Product]:
    rows = [
        Product(id=3, name="Ceramic Mug", description="Stoneware mug", price=9.995,
                stock_quantity=10, category="Kitchen", image_url="/static/img/mug.jpg"),
        Product(id=7, name="Notebook", description="Dotted A5", price=1.004,
                stock_quantity=5, category="Stationery", image_url="/static/img/notebook.jpg"),
    ]
    session.add_all(rows)
    session.commit()
    return rows


@pytest.fixture
def client(engine):
    def _get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _get_session
    try:
        yield TestClient(app, follow_redirects=False)
    finally:
        app.dependency_overrides.clear()


def cart_cookie(response):
    """Parsed `cart` morsel from the response's Set-Cookie header."""
    jar = SimpleCookie()
    jar.load(response.headers["set-cookie"])
    return jar["cart"]


def cart_pairs(value: str) -> set[str]:
    return set(value.split(",")) if value else set()
