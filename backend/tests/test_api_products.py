from decimal import Decimal

import pytest


@pytest.fixture
def product(client, auth_headers):
    res = client.post("/api/v1/products", json={"title": "Camiseta", "price": "12"}, headers=auth_headers)
    assert res.status_code == 201
    product = res.get_json()

    res = client.put(f"/api/v1/products/{product['id']}/variants", json={
        "options": [
            {"name": "Size", "values": ["P", "M"]},
            {"name": "Color", "values": ["Blue"]},
        ],
        "variants": [
            {"sku": "P-BL", "price": "10", "combination": {"Size": "P", "Color": "Blue"}},
            {"sku": "M-BL", "is_available": False, "combination": {"Size": "M", "Color": "Blue"}},
        ],
    }, headers=auth_headers)
    assert res.status_code == 200
    return res.get_json()


def _ids(product):
    size, color = product["options"]
    return size["id"], size["values"][0]["id"], size["values"][1]["id"], color["id"], color["values"][0]["id"]


def test_create_product_validation(client, auth_headers):
    assert client.post("/api/v1/products", json={"title": ""}, headers=auth_headers).status_code == 400
    assert client.post("/api/v1/products", json={"title": "X", "price": "-3"}, headers=auth_headers).status_code == 400
    assert client.post("/api/v1/products", json={"title": "X", "price": "NaN"}, headers=auth_headers).status_code == 400


def test_get_variants(client, auth_headers, product):
    res = client.get(f"/api/v1/products/{product['product_id']}/variants", headers=auth_headers)
    body = res.get_json()

    assert [o["name"] for o in body["options"]] == ["Size", "Color"]
    assert [v["sku"] for v in body["variants"]] == ["P-BL", "M-BL"]
    assert Decimal(body["base_price"]) == Decimal("12")
    assert Decimal(body["price_range"]["min"]) == Decimal("10")
    assert Decimal(body["price_range"]["max"]) == Decimal("12")
    assert body["price_range"]["has_range"] is True

    size_id, p_id, m_id, color_id, blue_id = _ids(body)
    assert body["selection"] == {size_id: p_id, color_id: blue_id}

    states = {s["value_id"]: s for s in body["value_states"][size_id]}
    assert states[p_id]["selected"] is True
    assert states[m_id]["disabled"] is True


def test_get_variants_of_other_user(client, other_headers, product):
    res = client.get(f"/api/v1/products/{product['product_id']}/variants", headers=other_headers)
    assert res.status_code == 404


def test_put_variants_rejects_bad_combination(client, auth_headers, product):
    res = client.put(f"/api/v1/products/{product['product_id']}/variants", json={
        "options": [{"name": "Size", "values": ["P"]}],
        "variants": [{"combination": {"Size": "G"}}],
    }, headers=auth_headers)

    assert res.status_code == 400
    assert res.get_json()["error"] == "InvariantViolation"


def test_resolve_is_public(client, product):
    size_id, p_id, m_id, color_id, blue_id = _ids(product)
    url = f"/api/v1/products/{product['product_id']}/variants/resolve"

    partial = client.post(url, json={"selection": {size_id: m_id}}).get_json()
    assert partial["match"]["sku"] == "M-BL"
    assert partial["variant"] is None

    full = client.post(url, json={"selection": {size_id: p_id, color_id: blue_id}}).get_json()
    assert full["variant"]["sku"] == "P-BL"
    assert Decimal(full["variant"]["price"]) == Decimal("10")

    assert client.post(url, json={"selection": ["bad"]}).status_code == 400
    assert client.post("/api/v1/products/missing/variants/resolve", json={}).status_code == 404


def test_update_variant_endpoint(client, auth_headers, other_headers, product):
    variant_id = product["variants"][1]["id"]

    res = client.put(f"/api/v1/variants/{variant_id}", json={"is_available": True, "price": "14.50"}, headers=auth_headers)

    assert res.status_code == 200
    assert res.get_json()["is_available"] is True
    assert Decimal(res.get_json()["price"]) == Decimal("14.50")

    res = client.put(f"/api/v1/variants/{variant_id}", json={"sku": "X"}, headers=other_headers)
    assert res.status_code == 404
