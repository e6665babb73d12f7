from pathlib import Path

from models import Product
from scripts.seed_products import DEFAULT_CSV, load_products, parse_row


def test_parse_row_strips_currency_symbol() -> None:
    product = parse_row({
        "id": "4", "name": "Notebook A5", "description": "Dotted", "price": "$7.25",
        "stock_quantity": "200", "category": "Stationery", "image_url": "/static/img/notebook.jpg",
    })
    assert product.id == 4
    assert product.price == 7.25
    assert product.stock_quantity == 200


def test_load_products_is_idempotent(session) -> None:
    first = load_products(session, DEFAULT_CSV)
    second = load_products(session, DEFAULT_CSV)

    assert first == 8
    assert second == 0
    assert session.get(Product, 1).name == "Classic T-Shirt"


def test_load_products_keeps_existing_rows(session, products, tmp_path: Path) -> None:
    csv_path = tmp_path / "products.csv"
    csv_path.write_text(
        "id,name,description,price,stock_quantity,category,image_url\n"
        "3,Other Mug,x,$1.00,1,Kitchen,/x.jpg\n"
        "9,Poster,y,$5.00,2,Home,/y.jpg\n",
        encoding="utf-8",
    )
    assert load_products(session, csv_path) == 1
    assert session.get(Product, 3).name == "Ceramic Mug"
    assert session.get(Product, 9).price == 5.0
