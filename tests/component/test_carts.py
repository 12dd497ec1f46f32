"""
Component tests for the Carts API

Focus on the merge-on-add rule and owner-scoped clearing.
"""
import uuid

from fastapi.testclient import TestClient


class TestAddToCart:
    """
    Component Test 1: POST /carts

    A new (productId, email) pair creates a row; an existing pair has its
    quantity increased.
    """

    def test_new_pair_creates_item_and_returns_201(
        self, test_client: TestClient, cart_payload: dict
    ):
        """
        Validates:
        - 201 Created
        - response is the stored document, including `_id`
        """
        # Act
        response = test_client.post("/carts", json=cart_payload)

        # Assert
        assert response.status_code == 201
        data = response.json()
        assert "_id" in data
        for key, value in cart_payload.items():
            assert data[key] == value

    def test_existing_pair_merges_quantity(
        self, test_client: TestClient, cart_payload: dict
    ):
        """
        Validates:
        - stored quantity becomes 5 + 3
        - other stored fields keep their original values
        - still a single row for the pair
        """
        # Arrange
        created = test_client.post("/carts", json=cart_payload).json()
        second = {**cart_payload, "quantity": 3, "name": "Renamed", "price": 1}

        # Act
        test_client.post("/carts", json=second)

        # Assert
        items = test_client.get(f"/carts/{cart_payload['email']}").json()
        assert len(items) == 1
        stored = items[0]
        assert stored["_id"] == created["_id"]
        assert stored["quantity"] == 8
        assert stored["name"] == "Macbook Pro"
        assert stored["price"] == 2000

    def test_merge_responds_200_with_request_body(
        self, test_client: TestClient, cart_payload: dict
    ):
        """
        The merge response echoes the request body: it carries the quantity
        that was sent, not the merged total, and has no `_id`.
        """
        # Arrange
        test_client.post("/carts", json=cart_payload)
        second = {**cart_payload, "quantity": 2}

        # Act
        response = test_client.post("/carts", json=second)

        # Assert
        assert response.status_code == 200
        assert response.json() == second
        assert "_id" not in response.json()

    def test_same_product_for_other_owner_creates_new_item(
        self, test_client: TestClient, cart_payload: dict
    ):
        # Arrange
        test_client.post("/carts", json=cart_payload)

        # Act
        response = test_client.post(
            "/carts", json={**cart_payload, "email": "someone@else.com"}
        )

        # Assert
        assert response.status_code == 201
        assert len(test_client.get("/carts").json()) == 2

    def test_zero_quantity_is_rejected(
        self, test_client: TestClient, cart_payload: dict
    ):
        # Act
        response = test_client.post("/carts", json={**cart_payload, "quantity": 0})

        # Assert
        assert response.status_code == 500
        assert "quantity" in response.json()["message"]
        assert test_client.get("/carts").json() == []


class TestListCarts:
    """
    Component Test 2: GET /carts and GET /carts/{email}
    """

    def test_list_all_spans_owners(
        self, test_client: TestClient, cart_payload: dict
    ):
        # Arrange
        test_client.post("/carts", json=cart_payload)
        test_client.post("/carts", json={**cart_payload, "email": "b@shop.com"})

        # Act
        response = test_client.get("/carts")

        # Assert
        assert response.status_code == 200
        emails = sorted(item["email"] for item in response.json())
        assert emails == ["b@shop.com", "worapakorn@gmail.com"]

    def test_list_by_email_only_returns_owner_items(
        self, test_client: TestClient, cart_payload: dict
    ):
        # Arrange
        test_client.post("/carts", json=cart_payload)
        test_client.post("/carts", json={**cart_payload, "productId": "other-product"})
        test_client.post("/carts", json={**cart_payload, "email": "b@shop.com"})

        # Act
        response = test_client.get(f"/carts/{cart_payload['email']}")

        # Assert
        assert response.status_code == 200
        items = response.json()
        assert len(items) == 2
        assert all(item["email"] == cart_payload["email"] for item in items)

    def test_list_by_unknown_email_is_empty(self, test_client: TestClient):
        response = test_client.get("/carts/nobody@shop.com")

        assert response.status_code == 200
        assert response.json() == []


class TestUpdateAndDeleteCartItem:
    """
    Component Test 3: PUT /carts/{id} and DELETE /carts/{id}
    """

    def test_put_replaces_item(self, test_client: TestClient, cart_payload: dict):
        # Arrange
        created = test_client.post("/carts", json=cart_payload).json()
        replacement = {**cart_payload, "quantity": 1, "price": 1800}

        # Act
        response = test_client.put(f"/carts/{created['_id']}", json=replacement)

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["_id"] == created["_id"]
        assert data["quantity"] == 1
        assert data["price"] == 1800

    def test_put_missing_item_returns_404(
        self, test_client: TestClient, cart_payload: dict
    ):
        response = test_client.put(f"/carts/{uuid.uuid4()}", json=cart_payload)

        assert response.status_code == 404
        assert response.json() == {"message": "Cart not found"}

    def test_delete_returns_deleted_item(
        self, test_client: TestClient, cart_payload: dict
    ):
        # Arrange
        created = test_client.post("/carts", json=cart_payload).json()

        # Act
        response = test_client.delete(f"/carts/{created['_id']}")

        # Assert
        assert response.status_code == 200
        assert response.json() == created
        assert test_client.get("/carts").json() == []

    def test_delete_missing_item_returns_404(self, test_client: TestClient):
        response = test_client.delete(f"/carts/{uuid.uuid4()}")

        assert response.status_code == 404
        assert response.json() == {"message": "Cart not found"}


class TestClearCart:
    """
    Component Test 4: DELETE /carts/clear/{email}
    """

    def test_clear_removes_all_and_only_owner_items(
        self, test_client: TestClient, cart_payload: dict
    ):
        # Arrange
        test_client.post("/carts", json=cart_payload)
        test_client.post("/carts", json={**cart_payload, "productId": "p-2"})
        test_client.post("/carts", json={**cart_payload, "email": "keep@shop.com"})

        # Act
        response = test_client.delete(f"/carts/clear/{cart_payload['email']}")

        # Assert
        assert response.status_code == 200
        assert response.json() == {"acknowledged": True, "deletedCount": 2}

        assert test_client.get(f"/carts/{cart_payload['email']}").json() == []
        remaining = test_client.get("/carts").json()
        assert len(remaining) == 1
        assert remaining[0]["email"] == "keep@shop.com"

    def test_clear_empty_cart_returns_404(self, test_client: TestClient):
        response = test_client.delete("/carts/clear/nobody@shop.com")

        assert response.status_code == 404
        assert response.json() == {"message": "Empty cart"}

    def test_clear_twice_second_is_404(
        self, test_client: TestClient, cart_payload: dict
    ):
        # Arrange
        test_client.post("/carts", json=cart_payload)
        test_client.delete(f"/carts/clear/{cart_payload['email']}")

        # Act
        response = test_client.delete(f"/carts/clear/{cart_payload['email']}")

        # Assert
        assert response.status_code == 404
