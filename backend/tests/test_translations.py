"""Product and category translation endpoints."""

from datetime import datetime, timedelta, timezone

from fastapi.testclient import TestClient


def _translation_body(name: str = "tshirt-en", **extra):
    body = {"name": name, "description": "A cotton t-shirt", "languageCode": "en"}
    body.update(extra)
    return body


class TestProductTranslations:
    def test_missing_price_is_rejected(self, client: TestClient, product):
        response = client.post(
            f"/products/{product['id']}/translations", json=_translation_body()
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Request body must contain 'price' key"

    def test_create_with_price(self, client: TestClient, product):
        response = client.post(
            f"/products/{product['id']}/translations",
            json=_translation_body(price=19.99, priceCurrency="eur"),
        )

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "tshirt-en"
        assert body["description"] == "A cotton t-shirt"
        assert body["languageCode"] == "en"
        assert body["price"] is not None
        assert body["price"]["amount"] == 19.99
        assert body["price"]["currency"] == "EUR"
        assert body["price"]["translationName"] == "tshirt-en"
        assert body["price"]["active"] is True

    def test_currency_defaults_to_configured_value(self, client: TestClient, product):
        response = client.post(
            f"/products/{product['id']}/translations",
            json=_translation_body(price=10),
        )

        assert response.status_code == 201
        assert response.json()["price"]["currency"] == "USD"

    def test_malformed_currency_is_rejected(self, client: TestClient, product):
        response = client.post(
            f"/products/{product['id']}/translations",
            json=_translation_body(price=10, priceCurrency="EURO"),
        )

        assert response.status_code == 400
        assert "3 characters" in response.json()["detail"]

    def test_empty_currency_is_rejected(self, client: TestClient, product):
        url = f"/products/{product['id']}/translations"

        response = client.post(url, json=_translation_body(price=1, priceCurrency=""))

        assert response.status_code == 400
        assert "Found 0" in response.json()["detail"]
        assert client.get(url).json() == []

    def test_explicit_inactive_flag_is_kept(self, client: TestClient, product):
        response = client.post(
            f"/products/{product['id']}/translations",
            json=_translation_body(price=10, priceActive=False),
        )

        assert response.json()["price"]["active"] is False

    def test_past_window_is_inactive(self, client: TestClient, product):
        now = datetime.now(timezone.utc)
        response = client.post(
            f"/products/{product['id']}/translations",
            json=_translation_body(
                price=10,
                priceActiveFrom=(now - timedelta(days=30)).isoformat(),
                priceActiveTo=(now - timedelta(days=1)).isoformat(),
            ),
        )

        assert response.status_code == 201
        assert response.json()["price"]["active"] is False

    def test_duplicate_name_is_rejected(self, client: TestClient, product):
        url = f"/products/{product['id']}/translations"
        assert client.post(url, json=_translation_body(price=10)).status_code == 201

        response = client.post(url, json=_translation_body(price=12))

        assert response.status_code == 400

    def test_list_and_get(self, client: TestClient, product):
        url = f"/products/{product['id']}/translations"
        client.post(url, json=_translation_body("tshirt-en", price=10))
        client.post(url, json=_translation_body("tshirt-es", price=9, languageCode="es"))

        listed = client.get(url)
        single = client.get(f"{url}/tshirt-es")

        assert [t["name"] for t in listed.json()] == ["tshirt-en", "tshirt-es"]
        assert single.status_code == 200
        assert single.json()["languageCode"] == "es"
        assert single.json()["price"]["amount"] == 9

    def test_get_unknown_translation_returns_404(self, client: TestClient, product):
        response = client.get(f"/products/{product['id']}/translations/missing")

        assert response.status_code == 404

    def test_unknown_product_returns_404(self, client: TestClient):
        response = client.post("/products/42/translations", json=_translation_body(price=1))

        assert response.status_code == 404


class TestCategoryTranslations:
    def test_create_has_no_price(self, client: TestClient, category):
        response = client.post(
            f"/categories/{category['id']}/translations",
            json=_translation_body("apparel-en"),
        )

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "apparel-en"
        assert body["price"] is None

    def test_extraneous_price_fields_are_ignored(self, client: TestClient, category):
        response = client.post(
            f"/categories/{category['id']}/translations",
            json=_translation_body(
                "apparel-en", price=10, priceCurrency="toolong", priceActive=True
            ),
        )

        assert response.status_code == 201
        assert response.json()["price"] is None

    def test_duplicate_name_is_rejected(self, client: TestClient, category):
        url = f"/categories/{category['id']}/translations"
        client.post(url, json=_translation_body("apparel-en"))

        response = client.post(url, json=_translation_body("apparel-en"))

        assert response.status_code == 400

    def test_list(self, client: TestClient, category):
        url = f"/categories/{category['id']}/translations"
        client.post(url, json=_translation_body("apparel-en"))

        response = client.get(url)

        assert response.status_code == 200
        assert response.json() == [
            {
                "name": "apparel-en",
                "description": "A cotton t-shirt",
                "languageCode": "en",
                "price": None,
            }
        ]

    def test_deleting_category_removes_translations(self, client: TestClient, category):
        client.post(
            f"/categories/{category['id']}/translations",
            json=_translation_body("apparel-en"),
        )
        assert client.delete(f"/categories/{category['id']}").status_code == 204

        recreated = client.post("/categories", json={"name": "Apparel"}).json()
        response = client.post(
            f"/categories/{recreated['id']}/translations",
            json=_translation_body("apparel-en"),
        )

        assert response.status_code == 201
