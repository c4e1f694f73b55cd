"""
测试 /api/products 接口
"""
from concurrent.futures import ThreadPoolExecutor

from fastapi.testclient import TestClient

from product_api.main import app

BASE = "/api/products"


def _create(client, name, price, **extra):
    response = client.post(BASE, json={"name": name, "price": price, **extra})
    assert response.status_code == 200
    return response.json()


def test_example_scenario(client):
    response = client.post(BASE, json={"name": "Laptop", "price": 1200.50})
    assert response.status_code == 200
    assert response.json() == {"id": 1, "name": "Laptop", "price": 1200.5}

    response = client.put(f"{BASE}/1", json={"name": "Laptop Pro", "price": 1500})
    assert response.status_code == 200
    assert response.json() == {"id": 1, "name": "Laptop Pro", "price": 1500.0}

    response = client.delete(f"{BASE}/1")
    assert response.status_code == 200
    assert response.text == "Product deleted successfully"
    assert response.headers["content-type"].startswith("text/plain")

    response = client.get(f"{BASE}/1")
    assert response.status_code == 404


def test_list_is_empty_initially(client):
    response = client.get(BASE)

    assert response.status_code == 200
    assert response.json() == []


def test_list_returns_created_and_not_deleted(client):
    a = _create(client, "A", 1.0)
    b = _create(client, "B", 2.0)
    c = _create(client, "C", 3.0)
    client.delete(f"{BASE}/{b['id']}")

    response = client.get(BASE)

    assert [p["id"] for p in response.json()] == [a["id"], c["id"]]


def test_get_by_id_returns_product(client):
    created = _create(client, "Mouse", 19.99)

    response = client.get(f"{BASE}/{created['id']}")

    assert response.status_code == 200
    assert response.json() == created


def test_get_by_id_missing_returns_structured_404(client):
    response = client.get(f"{BASE}/999")

    assert response.status_code == 404
    assert response.json() == {"code": 404, "data": None, "msg": "Product not found"}


def test_post_with_existing_id_overwrites(client):
    created = _create(client, "Chair", 80.0)

    response = client.post(BASE, json={"id": created["id"], "name": "Chair v2", "price": 95.0})

    assert response.json() == {"id": created["id"], "name": "Chair v2", "price": 95.0}
    assert len(client.get(BASE).json()) == 1


def test_post_without_price_stores_zero(client):
    response = client.post(BASE, json={"name": "Sticker"})

    assert response.status_code == 200
    assert response.json()["price"] == 0.0


def test_post_without_name_is_constraint_violation(client):
    response = client.post(BASE, json={"price": 10.0})

    assert response.status_code == 400
    body = response.json()
    assert body["code"] == 400
    assert body["msg"].startswith("Constraint violation")
    assert client.get(BASE).json() == []


def test_post_with_invalid_price_is_bad_request(client):
    response = client.post(BASE, json={"name": "Broken", "price": "not-a-number"})

    assert response.status_code == 400
    body = response.json()
    assert body["code"] == 400
    assert body["msg"] == "Invalid request"
    assert body["data"]


def test_put_missing_id_returns_404(client):
    response = client.put(f"{BASE}/5", json={"name": "Ghost", "price": 1.0})

    assert response.status_code == 404
    assert response.json() == {"code": 404, "data": None, "msg": "Product 5 not found"}


def test_put_ignores_id_in_body(client):
    created = _create(client, "Desk", 200.0)

    response = client.put(f"{BASE}/{created['id']}", json={"id": 77, "name": "Desk XL", "price": 250.0})

    assert response.json() == {"id": created["id"], "name": "Desk XL", "price": 250.0}


def test_delete_missing_id_returns_404(client):
    response = client.delete(f"{BASE}/3")

    assert response.status_code == 404
    assert response.json()["msg"] == "Product 3 not found"


def test_ids_are_not_reused_after_delete(client):
    first = _create(client, "One", 1.0)
    client.delete(f"{BASE}/{first['id']}")

    second = _create(client, "Two", 2.0)

    assert second["id"] > first["id"]


def test_health_check():
    with TestClient(app) as client:
        response = client.get("/")

    assert response.status_code == 200
    assert response.json()["data"]["status"] == "online"


def test_put_without_name_is_constraint_violation(client):
    created = _create(client, "Lamp", 35.0)

    response = client.put(f"{BASE}/{created['id']}", json={"price": 40.0})

    assert response.status_code == 400
    assert response.json()["msg"].startswith("Constraint violation")
    assert client.get(f"{BASE}/{created['id']}").json() == created


def test_post_with_infinite_price_is_bad_request(client):
    response = client.post(
        BASE,
        content='{"name": "Overflow", "price": 1e999}',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["msg"] == "Invalid request"
    assert body["data"][0]["loc"] == ["body", "price"]
    assert client.get(BASE).json() == []


def test_out_of_range_id_is_bad_request(client):
    too_large = "99999999999999999999"

    for response in (
        client.get(f"{BASE}/{too_large}"),
        client.put(f"{BASE}/{too_large}", json={"name": "X", "price": 1.0}),
        client.delete(f"{BASE}/{too_large}"),
    ):
        assert response.status_code == 400
        assert response.json()["msg"] == "Invalid request"


def test_post_with_out_of_range_id_is_bad_request(client):
    response = client.post(BASE, json={"id": 2 ** 63, "name": "Huge", "price": 1.0})

    assert response.status_code == 400
    assert client.get(BASE).json() == []


def test_concurrent_requests_do_not_interfere():
    def worker(n):
        statuses = []
        for i in range(25):
            kind = (n + i) % 3
            if kind == 0:
                response = client.post(BASE, json={"name": f"w{n}-{i}", "price": float(i)})
                statuses.append(("valid", response.status_code))
            elif kind == 1:
                response = client.post(BASE, json={"price": float(i)})
                statuses.append(("missing-name", response.status_code))
            else:
                response = client.get(BASE)
                statuses.append(("list", response.status_code))
        return statuses

    with TestClient(app) as client:
        with ThreadPoolExecutor(max_workers=8) as executor:
            results = [s for batch in executor.map(worker, range(8)) for s in batch]

        expected = {"valid": 200, "missing-name": 400, "list": 200}
        assert all(status == expected[kind] for kind, status in results)

        products = client.get(BASE).json()

    valid_posts = sum(1 for kind, _ in results if kind == "valid")
    assert len(products) == valid_posts
    assert len({p["id"] for p in products}) == valid_posts
