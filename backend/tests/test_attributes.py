"""Attribute endpoints nested under products."""

from fastapi.testclient import TestClient


class TestCreateAttribute:
    def test_create_attribute(self, client: TestClient, product):
        response = client.post(
            f"/products/{product['id']}/attributes",
            json={"name": "color", "value": "blue"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "color"
        assert body["value"] == "blue"
        assert body["productId"] == product["id"]

    def test_duplicate_name_for_same_product_is_rejected(self, client: TestClient, product):
        url = f"/products/{product['id']}/attributes"
        assert client.post(url, json={"name": "color", "value": "blue"}).status_code == 201

        response = client.post(url, json={"name": "color", "value": "red"})

        assert response.status_code == 400
        assert "color" in response.json()["detail"]

    def test_distinct_names_both_succeed(self, client: TestClient, product):
        url = f"/products/{product['id']}/attributes"

        first = client.post(url, json={"name": "color", "value": "blue"})
        second = client.post(url, json={"name": "size", "value": "M"})

        assert first.status_code == 201
        assert second.status_code == 201

    def test_same_name_on_another_product_is_allowed(self, client: TestClient, product):
        other = client.post("/products", json={"sku": "MUG-1", "name": "Mug"}).json()

        client.post(
            f"/products/{product['id']}/attributes",
            json={"name": "color", "value": "blue"},
        )
        response = client.post(
            f"/products/{other['id']}/attributes",
            json={"name": "color", "value": "white"},
        )

        assert response.status_code == 201

    def test_blank_name_is_rejected(self, client: TestClient, product):
        response = client.post(
            f"/products/{product['id']}/attributes",
            json={"name": "  ", "value": "blue"},
        )

        assert response.status_code == 400

    def test_unknown_product_returns_404(self, client: TestClient):
        response = client.post("/products/999/attributes", json={"name": "a", "value": "b"})

        assert response.status_code == 404


class TestListAttributes:
    def test_lists_only_the_products_attributes(self, client: TestClient, product):
        other = client.post("/products", json={"sku": "MUG-1", "name": "Mug"}).json()
        url = f"/products/{product['id']}/attributes"
        client.post(url, json={"name": "color", "value": "blue"})
        client.post(url, json={"name": "size", "value": "M"})
        client.post(
            f"/products/{other['id']}/attributes",
            json={"name": "material", "value": "ceramic"},
        )

        response = client.get(url)

        assert response.status_code == 200
        assert [a["name"] for a in response.json()] == ["color", "size"]

    def test_empty_list(self, client: TestClient, product):
        response = client.get(f"/products/{product['id']}/attributes")

        assert response.status_code == 200
        assert response.json() == []
