"""Unit tests for menu and ordering API endpoints."""
import json

import pytest


class TestHealthAPI:
    """Test health endpoint."""

    def test_health(self, test_client):
        response = test_client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestMenuAPI:
    """Test menu API endpoints."""

    def test_get_menu_success(self, test_client):
        """Test GET /api/menu returns full menu."""
        response = test_client.get("/api/menu")

        assert response.status_code == 200
        data = response.json()
        assert len(data["items"]) == 10
        assert data["categories"][0] == {"id": "coffee", "label": "Кофе"}

        latte = data["items"][0]
        assert latte["name"] == "Латте"
        assert latte["sizes"] == {"200": 150, "400": 250}
        assert latte["price"] is None

    def test_get_option_choices(self, test_client):
        response = test_client.get("/api/menu/options")
        assert response.status_code == 200
        data = response.json()
        assert data["temperature"] == ["Теплый", "Холодный"]
        assert data["milk"][0] == "Обычное"
        assert data["sugar"] == ["5г", "10г", "15г"]
        assert data["juice"] == ["Апельсиновый", "Вишневый"]

    def test_get_product_fields(self, test_client):
        response = test_client.get("/api/menu/products/3")
        assert response.status_code == 200
        data = response.json()
        assert data["product"]["name"] == "Бамбл"
        assert data["fields"] == ["size", "syrup", "juice", "cinnamon", "sugar"]

    def test_get_product_not_found(self, test_client):
        response = test_client.get("/api/menu/products/999")
        assert response.status_code == 404

    def test_quote(self, test_client):
        response = test_client.post(
            "/api/quote",
            json={
                "product_id": 1,
                "options": {
                    "size": {"label": "400", "price": 250},
                    "milk": "Кокосовое",
                    "syrup": "Карамель",
                },
            },
        )
        assert response.status_code == 200
        assert response.json() == {
            "product_id": 1,
            "price": 390,
            "can_add": True,
            "alert": None,
        }

    def test_quote_uses_catalog_size_price(self, test_client):
        """A client-sent size price is replaced by the catalog one."""
        response = test_client.post(
            "/api/quote",
            json={"product_id": 1, "options": {"size": {"label": "200", "price": 1}}},
        )
        assert response.json()["price"] == 150

    def test_quote_incomplete(self, test_client):
        response = test_client.post("/api/quote", json={"product_id": 2})
        data = response.json()
        assert data["price"] == 0
        assert data["can_add"] is False
        assert data["alert"] == "Выберите объем!"

    def test_quote_unknown_size(self, test_client):
        response = test_client.post(
            "/api/quote",
            json={"product_id": 1, "options": {"size": {"label": "300", "price": 1}}},
        )
        assert response.status_code == 400

    def test_quote_field_not_offered(self, test_client):
        """Milk and syrup are rejected for food."""
        response = test_client.post(
            "/api/quote",
            json={"product_id": 4, "options": {"milk": "Козье", "syrup": "whatever"}},
        )
        assert response.status_code == 400
        assert "milk" in response.json()["detail"]

    def test_quote_unknown_choice(self, test_client):
        response = test_client.post(
            "/api/quote",
            json={"product_id": 1, "options": {"milk": "Козье"}},
        )
        assert response.status_code == 400
        assert "Козье" in response.json()["detail"]

    def test_quote_cinnamon_not_offered(self, test_client):
        response = test_client.post(
            "/api/quote", json={"product_id": 4, "options": {"cinnamon": True}}
        )
        assert response.status_code == 400


class TestSessionAPI:
    """Test the ordering flow over HTTP."""

    def _create(self, test_client, stop=None):
        params = {"stop": stop} if stop is not None else {}
        response = test_client.post("/api/sessions", params=params)
        assert response.status_code == 200
        return response.json()["session_id"]

    def test_create_session(self, test_client):
        response = test_client.post("/api/sessions", params={"stop": "1,x,3"})
        data = response.json()
        assert data["active_category"] == "coffee"
        assert data["stop_list"] == [1, 3]
        assert data["is_admin"] is False

    def test_unknown_session(self, test_client):
        response = test_client.get("/api/sessions/missing/cart")
        assert response.status_code == 404

    def test_browse(self, test_client):
        sid = self._create(test_client, stop="3")
        response = test_client.get(f"/api/sessions/{sid}/menu")
        data = response.json()
        assert data["category"] == "coffee"
        assert [card["product"]["id"] for card in data["items"]] == [1, 8]

        response = test_client.get(f"/api/sessions/{sid}/menu", params={"category": "food"})
        data = response.json()
        assert data["category"] == "food"
        assert [card["starting_price"] for card in data["items"]] == [150]

    def test_browse_unknown_category(self, test_client):
        sid = self._create(test_client)
        response = test_client.get(f"/api/sessions/{sid}/menu", params={"category": "dessert"})
        assert response.status_code == 422

    def test_full_order_flow(self, test_client):
        sid = self._create(test_client)

        response = test_client.post(f"/api/sessions/{sid}/product/2")
        assert response.status_code == 200
        assert response.json()["fields"][0] == "size"

        response = test_client.post(f"/api/sessions/{sid}/cart")
        assert response.json() == {"added": False, "item": None, "alert": "Выберите объем!"}

        for field, value in [("size", "400"), ("temperature", "Теплый"), ("syrup", "Кокос")]:
            response = test_client.post(
                f"/api/sessions/{sid}/options", json={"field": field, "value": value}
            )
            assert response.status_code == 200
        assert response.json()["price"] == 300
        assert response.json()["can_add"] is True

        response = test_client.post(f"/api/sessions/{sid}/cart")
        data = response.json()
        assert data["added"] is True
        assert data["item"]["name"] == "Айс латте 400мл"
        assert data["item"]["details"] == "[Теплый] +Кокос"

        response = test_client.post(f"/api/sessions/{sid}/checkout")
        assert response.json()["alert"] == "Укажите этаж и офис!"

        response = test_client.put(
            f"/api/sessions/{sid}/address", json={"floor": "5", "office": "512"}
        )
        assert response.json()["total"] == 300

        response = test_client.post(f"/api/sessions/{sid}/checkout")
        data = response.json()
        assert data["sent"] is True
        assert json.loads(data["payload"]) == {
            "type": "order",
            "items": [{"label": "Айс латте 400мл [Теплый] +Кокос", "amount": 30000}],
            "address": "Этаж 5, Офис 512",
        }

    def test_toggle_without_product(self, test_client):
        sid = self._create(test_client)
        response = test_client.post(
            f"/api/sessions/{sid}/options", json={"field": "milk", "value": "Овсяное"}
        )
        assert response.status_code == 409

    def test_toggle_not_applicable(self, test_client):
        sid = self._create(test_client)
        test_client.post(f"/api/sessions/{sid}/product/4")
        response = test_client.post(
            f"/api/sessions/{sid}/options", json={"field": "milk", "value": "Овсяное"}
        )
        assert response.status_code == 400

    def test_toggle_unknown_field(self, test_client):
        sid = self._create(test_client)
        test_client.post(f"/api/sessions/{sid}/product/1")
        response = test_client.post(
            f"/api/sessions/{sid}/options", json={"field": "whipped_cream", "value": "yes"}
        )
        assert response.status_code == 422

    def test_remove_and_clear_cart(self, test_client):
        sid = self._create(test_client)
        for _ in range(2):
            test_client.post(f"/api/sessions/{sid}/product/4")
            test_client.post(f"/api/sessions/{sid}/cart")

        cart = test_client.get(f"/api/sessions/{sid}/cart").json()
        assert cart["total"] == 300
        uid = cart["items"][0]["uid"]

        response = test_client.delete(f"/api/sessions/{sid}/cart/{uid}")
        assert response.json()["total"] == 150

        response = test_client.delete(f"/api/sessions/{sid}/cart/{uid}")
        assert response.status_code == 200
        assert response.json()["total"] == 150

        response = test_client.delete(f"/api/sessions/{sid}/cart")
        assert response.json() == {"items": [], "total": 0, "floor": "", "office": ""}

    def test_close_product(self, test_client):
        sid = self._create(test_client)
        test_client.post(f"/api/sessions/{sid}/product/1")
        assert test_client.delete(f"/api/sessions/{sid}/product").status_code == 200
        assert test_client.get(f"/api/sessions/{sid}/product").status_code == 409

    def test_close_session(self, test_client):
        sid = self._create(test_client)
        assert test_client.delete(f"/api/sessions/{sid}").json() == {"success": True}
        assert test_client.get(f"/api/sessions/{sid}").status_code == 404

    def test_open_stopped_product(self, test_client):
        sid = self._create(test_client, stop="4")
        response = test_client.post(f"/api/sessions/{sid}/product/4")
        assert response.status_code == 409
        assert test_client.get(f"/api/sessions/{sid}/product").status_code == 409


class TestAdminAPI:
    """Test admin endpoints."""

    def _admin_session(self, test_client):
        sid = test_client.post("/api/sessions", params={"stop": "8"}).json()["session_id"]
        response = test_client.post(
            f"/api/sessions/{sid}/admin/login", json={"password": "test-admin-pass"}
        )
        assert response.status_code == 200
        assert response.json()["alert"] == "Режим администратора включен"
        return sid

    def test_login_wrong_password(self, test_client):
        sid = test_client.post("/api/sessions").json()["session_id"]
        response = test_client.post(f"/api/sessions/{sid}/admin/login", json={"password": "nope"})
        assert response.status_code == 401

    def test_toggle_requires_admin(self, test_client):
        sid = test_client.post("/api/sessions").json()["session_id"]
        response = test_client.post(f"/api/sessions/{sid}/admin/stop-list/1")
        assert response.status_code == 403

    def test_admin_cannot_open_sheet(self, test_client):
        sid = self._admin_session(test_client)
        response = test_client.post(f"/api/sessions/{sid}/product/1")
        assert response.status_code == 409

    def test_toggle_and_sync(self, test_client):
        sid = self._admin_session(test_client)

        response = test_client.post(f"/api/sessions/{sid}/admin/stop-list/1")
        assert response.json() == {"stop_list": [8, 1]}
        response = test_client.post(f"/api/sessions/{sid}/admin/stop-list/8")
        assert response.json() == {"stop_list": [1]}

        menu = test_client.get(f"/api/sessions/{sid}/menu").json()
        assert [(c["product"]["id"], c["stopped"]) for c in menu["items"]] == [
            (1, True),
            (3, False),
            (8, False),
        ]

        response = test_client.post(f"/api/sessions/{sid}/admin/sync")
        data = response.json()
        assert data["sent"] is True
        assert json.loads(data["payload"]) == {"type": "admin_sync", "stop_list": [1]}
