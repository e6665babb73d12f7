from conftest import cart_cookie, cart_pairs


def test_cart_without_cookie_renders_empty_view(client) -> None:
    resp = client.get("/cart")
    assert resp.status_code == 200
    assert "Your cart is empty." in resp.text


def test_cart_with_empty_cookie_renders_empty_view(client) -> None:
    resp = client.get("/cart", headers={"Cookie": "cart="})
    assert resp.status_code == 200
    assert "Your cart is empty." in resp.text


def test_cart_with_corrupt_cookie_renders_empty_view(client, products) -> None:
    resp = client.get("/cart", headers={"Cookie": "cart=3-2"})
    assert resp.status_code == 200
    assert "Your cart is empty." in resp.text


def test_cart_lists_lines_and_total(client, products) -> None:
    resp = client.get("/cart", headers={"Cookie": "cart=3:2,7:1"})
    assert resp.status_code == 200
    assert "Ceramic Mug" in resp.text
    assert "Notebook" in resp.text
    assert "19.99" in resp.text
    assert "20.99" in resp.text


def test_cart_skips_products_missing_from_catalog(client, products) -> None:
    resp = client.get("/cart", headers={"Cookie": "cart=3:1,999:4"})
    assert resp.status_code == 200
    assert "Ceramic Mug" in resp.text
    assert "/remove_from_cart/999" not in resp.text


def test_cart_with_only_unknown_products_is_empty(client, products) -> None:
    resp = client.get("/cart", headers={"Cookie": "cart=999:4"})
    assert "Your cart is empty." in resp.text


def test_add_to_cart_sets_cookie_and_redirects(client) -> None:
    resp = client.post("/add_to_cart/5", data={"quantity": "3"})

    assert resp.status_code == 303
    assert resp.headers["location"] == "/cart"
    assert resp.headers["hx-redirect"] == "/cart"

    morsel = cart_cookie(resp)
    assert morsel.value == "5:3"
    assert morsel["path"] == "/"
    assert morsel["httponly"] is True
    assert morsel["secure"] is True
    assert morsel["samesite"].lower() == "strict"
    assert morsel["max-age"] == "604800"


def test_add_to_cart_clamps_quantity(client) -> None:
    assert cart_cookie(client.post("/add_to_cart/5", data={"quantity": "250"})).value == "5:100"
    assert cart_cookie(client.post("/add_to_cart/5", data={"quantity": "0"})).value == "5:1"


def test_add_to_cart_defaults_quantity_to_one(client) -> None:
    assert cart_cookie(client.post("/add_to_cart/5")).value == "5:1"
    assert cart_cookie(client.post("/add_to_cart/5", data={"quantity": "lots"})).value == "5:1"


def test_add_to_cart_overwrites_existing_quantity(client) -> None:
    resp = client.post("/add_to_cart/5", data={"quantity": "7"}, headers={"Cookie": "cart=5:3,6:1"})
    assert cart_pairs(cart_cookie(resp).value) == {"5:7", "6:1"}


def test_add_to_cart_with_corrupt_cookie_starts_over(client) -> None:
    resp = client.post("/add_to_cart/5", data={"quantity": "2"}, headers={"Cookie": "cart=abc:2"})
    assert cart_cookie(resp).value == "5:2"


def test_remove_from_cart(client) -> None:
    resp = client.post("/remove_from_cart/5", headers={"Cookie": "cart=5:3,6:1"})

    assert resp.status_code == 303
    assert resp.headers["location"] == "/cart"
    assert resp.headers["hx-refresh"] == "true"
    assert cart_cookie(resp).value == "6:1"


def test_remove_missing_product_keeps_cart(client) -> None:
    resp = client.post("/remove_from_cart/99", headers={"Cookie": "cart=6:1"})
    assert cart_cookie(resp).value == "6:1"


def test_remove_last_product_leaves_empty_cookie(client) -> None:
    resp = client.post("/remove_from_cart/6", headers={"Cookie": "cart=6:1"})
    assert cart_cookie(resp).value == ""


def test_add_to_cart_rejects_non_positive_id(client) -> None:
    for path in ("/add_to_cart/0", "/add_to_cart/-3"):
        resp = client.post(path, data={"quantity": "1"}, headers={"Cookie": "cart=3:2,7:1"})
        assert resp.status_code == 422
        assert "set-cookie" not in resp.headers


def test_add_to_cart_rejects_id_beyond_32_bits(client) -> None:
    resp = client.post("/add_to_cart/2147483648", headers={"Cookie": "cart=3:2"})
    assert resp.status_code == 422
    assert "set-cookie" not in resp.headers


def test_remove_from_cart_rejects_non_positive_id(client) -> None:
    resp = client.post("/remove_from_cart/0", headers={"Cookie": "cart=3:2"})
    assert resp.status_code == 422


def test_cart_survives_after_invalid_add(client, products) -> None:
    client.post("/add_to_cart/0", headers={"Cookie": "cart=3:2,7:1"})
    resp = client.get("/cart", headers={"Cookie": "cart=3:2,7:1"})
    assert "Ceramic Mug" in resp.text
    assert "Notebook" in resp.text


def test_cart_with_oversized_id_renders_empty_view(client, products) -> None:
    resp = client.get("/cart", headers={"Cookie": "cart=99999999999999999999:1"})
    assert resp.status_code == 200
    assert "Your cart is empty." in resp.text
