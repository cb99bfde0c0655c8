"""End-to-end tests for the /products API over an in-memory database."""

import pytest

pytestmark = pytest.mark.integration


def _hat(**overrides) -> dict:
    payload = {
        "name": "Hat",
        "description": "d",
        "price": 9.99,
        "available": True,
        "category": "CLOTHS",
    }
    payload.update(overrides)
    return payload


SEED_ROWS = [
    {"name": "Hat", "description": "A red fedora", "price": "59.95", "available": True, "category": "CLOTHS"},
    {"name": "Shoes", "description": "Blue shoes", "price": "120.50", "available": False, "category": "CLOTHS"},
    {"name": "Big Mac", "description": "1/4 lb burger", "price": "5.99", "available": True, "category": "FOOD"},
    {"name": "Sheets", "description": "Full bed sheets", "price": "87.00", "available": True, "category": "HOUSEWARES"},
]


@pytest.fixture
def seeded_client(client):
    """Reset the catalog through the API, then load the seed rows."""
    response = client.get("/products")
    assert response.status_code == 200
    for product in response.json():
        assert client.delete(f"/products/{product['id']}").status_code == 204

    for row in SEED_ROWS:
        assert client.post("/products", json=row).status_code == 201
    return client


class TestProductLifecycle:

    def test_create_read_delete_scenario(self, client):
        response = client.post("/products", json=_hat())
        assert response.status_code == 201
        product_id = response.json()["id"]
        assert response.headers["Location"].endswith(f"/products/{product_id}")
        created = response.json()

        response = client.get(f"/products/{product_id}")
        assert response.status_code == 200
        assert response.json() == created

        response = client.delete(f"/products/{product_id}")
        assert response.status_code == 204

        response = client.get(f"/products/{product_id}")
        assert response.status_code == 404
        assert "message" in response.json()

    def test_create_ignores_body_id(self, client):
        first = client.post("/products", json=_hat()).json()

        second = client.post("/products", json=_hat(id=first["id"])).json()

        assert second["id"] != first["id"]
        assert len(client.get("/products").json()) == 2

    def test_create_with_missing_fields_persists_nothing(self, client):
        response = client.post("/products", json={"name": "Hat"})

        assert response.status_code == 400
        assert client.get("/products").json() == []

    def test_update_changes_only_sent_fields(self, client):
        created = client.post("/products", json=_hat()).json()

        response = client.put(
            f"/products/{created['id']}",
            json=_hat(id=9999, description="Updated description"),
        )

        assert response.status_code == 200
        assert response.json() == created | {"description": "Updated description"}
        assert client.get(f"/products/{created['id']}").json()["description"] == (
            "Updated description"
        )
        assert client.get("/products/9999").status_code == 404

    def test_update_missing_product_returns_404(self, client):
        response = client.put("/products/77", json=_hat())

        assert response.status_code == 404
        assert response.json() == {"message": "Product with id '77' was not found."}
        assert client.get("/products").json() == []

    def test_delete_missing_product_returns_204(self, client):
        assert client.delete("/products/77").status_code == 204


class TestProductListing:

    def test_list_all(self, seeded_client):
        response = seeded_client.get("/products")

        assert response.status_code == 200
        assert [p["name"] for p in response.json()] == [row["name"] for row in SEED_ROWS]

    def test_list_by_name(self, seeded_client):
        response = seeded_client.get("/products", params={"name": "Hat"})

        assert [p["name"] for p in response.json()] == ["Hat"]

    def test_list_by_name_without_match(self, seeded_client):
        response = seeded_client.get("/products", params={"name": "Spaceship"})

        assert response.status_code == 200
        assert response.json() == []

    def test_list_by_category(self, seeded_client):
        response = seeded_client.get("/products", params={"category": "cloths"})

        assert sorted(p["name"] for p in response.json()) == ["Hat", "Shoes"]

    def test_list_by_unknown_category_returns_everything(self, seeded_client):
        response = seeded_client.get("/products", params={"category": "not-a-real-category"})

        assert response.status_code == 200
        assert len(response.json()) == len(SEED_ROWS)

    def test_list_by_availability(self, seeded_client):
        response = seeded_client.get("/products", params={"available": "false"})

        assert [p["name"] for p in response.json()] == ["Shoes"]

    def test_prices_are_json_numbers(self, seeded_client):
        response = seeded_client.get("/products", params={"name": "Sheets"})

        assert response.json()[0]["price"] == 87.0


class TestHealth:

    def test_liveness(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_readiness_checks_database(self, client):
        response = client.get("/health/ready")

        assert response.status_code == 200
        assert response.json()["checks"]["database"]["status"] == "healthy"
