from types import SimpleNamespace

from app.core.security import create_access_token


def _product(category_id: int, **overrides) -> dict:
    payload = {
        "name": "Dune",
        "description": "Desert planet novel",
        "price": 12.5,
        "image": "dune.png",
        "stock": 4,
        "category_id": category_id,
    }
    payload.update(overrides)
    return payload


def test_create_and_read_product(client, admin_headers, category):
    created = client.post("/products", headers=admin_headers, json=_product(category["id"]))
    assert created.status_code == 201, created.text
    body = created.json()
    assert body["name"] == "Dune"
    assert body["price"] == 12.5
    assert body["stock"] == 4
    assert body["category_id"] == category["id"]

    fetched = client.get(f"/products/{body['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["category"]["name"] == "Books"

    listing = client.get("/products")
    assert [row["id"] for row in listing.json()] == [body["id"]]


def test_product_payload_is_validated(client, admin_headers, category):
    negative_price = client.post("/products", headers=admin_headers, json=_product(category["id"], price=-1))
    assert negative_price.status_code == 400
    assert negative_price.json()["errors"][0]["field"] == "price"

    negative_stock = client.post("/products", headers=admin_headers, json=_product(category["id"], stock=-2))
    assert negative_stock.status_code == 400

    missing = client.post("/products", headers=admin_headers, json={"name": "Dune"})
    assert missing.status_code == 400
    fields = {err["field"] for err in missing.json()["errors"]}
    assert {"description", "price", "stock", "category_id"} <= fields

    assert client.get("/products").json() == []


def test_unknown_category_is_rejected_by_the_store(client, admin_headers):
    resp = client.post("/products", headers=admin_headers, json=_product(404))
    assert resp.status_code == 500
    assert resp.json() == {"message": "Internal server error"}


def test_products_by_category(client, admin_headers, category):
    other = client.post("/categories", headers=admin_headers, json={"name": "Music", "description": "Records"}).json()
    client.post("/products", headers=admin_headers, json=_product(category["id"], name="Dune"))
    client.post("/products", headers=admin_headers, json=_product(other["id"], name="Abbey Road"))

    books = client.get(f"/products/category/{category['id']}")
    assert books.status_code == 200
    assert [row["name"] for row in books.json()] == ["Dune"]
    assert client.get("/products/category/999").json() == []
    assert client.get("/products/category/abc").status_code == 400


def test_update_product(client, admin_headers, category):
    product = client.post("/products", headers=admin_headers, json=_product(category["id"])).json()

    resp = client.put(f"/products/{product['id']}", headers=admin_headers, json={"stock": 0, "price": 10})
    assert resp.status_code == 200
    assert resp.json()["stock"] == 0
    assert resp.json()["price"] == 10
    assert resp.json()["name"] == "Dune"

    invalid = client.put(f"/products/{product['id']}", headers=admin_headers, json={"stock": -1})
    assert invalid.status_code == 400
    assert client.put("/products/999", headers=admin_headers, json={"stock": 1}).status_code == 404


def test_null_update_is_rejected(client, admin_headers, category):
    product = client.post("/products", headers=admin_headers, json=_product(category["id"])).json()

    for field in ("name", "description", "price", "stock", "category_id"):
        resp = client.put(f"/products/{product['id']}", headers=admin_headers, json={field: None})
        assert resp.status_code == 400, field
        assert [err["field"] for err in resp.json()["errors"]] == [field]

    cleared = client.put(f"/products/{product['id']}", headers=admin_headers, json={"image": None})
    assert cleared.status_code == 200
    assert cleared.json()["image"] is None
    assert cleared.json()["price"] == 12.5


def test_delete_product(client, admin_headers, category):
    product = client.post("/products", headers=admin_headers, json=_product(category["id"])).json()
    resp = client.delete(f"/products/{product['id']}", headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json() == {"message": "Product deleted successfully"}
    assert client.get(f"/products/{product['id']}").status_code == 404
    assert client.delete(f"/products/{product['id']}", headers=admin_headers).status_code == 404


def test_product_mutations_are_role_gated(client, category):
    payload = _product(category["id"])
    assert client.post("/products", json=payload).status_code == 401

    no_roles = SimpleNamespace(id=1, email="viewer@example.com", name="Viewer")
    headers = {"Authorization": f"Bearer {create_access_token(no_roles, ['viewer'])}"}
    assert client.post("/products", headers=headers, json=payload).status_code == 403
    assert client.delete("/products/1", headers=headers).status_code == 403


def test_bad_product_id(client):
    resp = client.get("/products/xyz")
    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid product_id"
    assert client.get("/products/12345").status_code == 404
