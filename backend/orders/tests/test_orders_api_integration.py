"""
Order API integration tests.

These go through the router, serializers and the exception handler, checking
that every error kind reaches the client with its status code.
"""
import pytest
from unittest import mock

from rest_framework import status

from orders.models import Order


@pytest.mark.django_db
class TestOrderEndpoints:
    """Order create / read / delete"""

    def test_requires_authentication(self, api_client, default_statuses):
        response = api_client.get("/api/orders/")
        assert response.status_code in (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN)

    def test_create_order_defaults_user_to_requester(self, authenticated_client, staff_user, table_t1, burger):
        response = authenticated_client.post(
            "/api/orders/",
            {"table_id": table_t1.id, "items": [{"menu_item_id": burger.id, "quantity": 2}]},
            format="json",
        )

        assert response.status_code == status.HTTP_201_CREATED, response.data
        assert response.data["user_email"] == staff_user.email
        assert response.data["table_label"] == "T1"
        assert response.data["status_name"] == "NEW"
        assert response.data["items"][0]["menu_item_name"] == "Burger"
        assert response.data["items"][0]["item_price"] == "12.50"
        assert response.data["items_total"] == "25.00"

    def test_create_without_items_is_400(self, authenticated_client, default_statuses):
        response = authenticated_client.post("/api/orders/", {"items": []}, format="json")
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["code"] == "invalid_data"

    def test_unknown_menu_item_is_404(self, authenticated_client, default_statuses):
        response = authenticated_client.post(
            "/api/orders/", {"items": [{"menu_item_id": 999999}]}, format="json"
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data["code"] == "menu_item_not_found"

    def test_retrieve_and_delete(self, authenticated_client, staff_user, burger, default_statuses):
        created = authenticated_client.post(
            "/api/orders/", {"items": [{"menu_item_id": burger.id}]}, format="json"
        ).data

        response = authenticated_client.get(f"/api/orders/{created['id']}/")
        assert response.status_code == status.HTTP_200_OK
        assert response.data["table_label"] is None

        response = authenticated_client.delete(f"/api/orders/{created['id']}/")
        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Order.objects.exists()

        response = authenticated_client.get(f"/api/orders/{created['id']}/")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_list_filters(self, authenticated_client, table_t1, table_t2, burger):
        line = {"items": [{"menu_item_id": burger.id}]}
        authenticated_client.post("/api/orders/", {**line, "table_id": table_t1.id}, format="json")
        authenticated_client.post("/api/orders/", {**line, "table_id": table_t2.id}, format="json")

        response = authenticated_client.get("/api/orders/", {"table": table_t2.id})
        assert [o["table_label"] for o in response.data] == ["T2"]

        response = authenticated_client.get("/api/orders/", {"status": "NEW"})
        assert len(response.data) == 2

    def test_non_numeric_table_filter_is_400(self, authenticated_client, default_statuses):
        response = authenticated_client.get("/api/orders/", {"table": "abc"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "table" in response.data


@pytest.mark.django_db
class TestOrderLifecycleEndpoints:
    """start / pay / status / paid / open"""

    def test_start_then_pay(self, authenticated_client, table_t1):
        response = authenticated_client.post("/api/orders/start/", {"table_id": table_t1.id}, format="json")
        assert response.status_code == status.HTTP_201_CREATED
        order_id = response.data["id"]
        assert authenticated_client.get(f"/api/tables/{table_t1.id}/").data["status_name"] == "OCCUPIED"

        response = authenticated_client.get("/api/orders/open/")
        assert [o["id"] for o in response.data] == [order_id]

        response = authenticated_client.post(
            f"/api/orders/{order_id}/pay/",
            {"method": "CARD", "paid_amount": "30.00", "tip": "3.00"},
            format="json",
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.data["status_name"] == "PAID"
        assert response.data["paid_amount"] == "30.00"
        assert authenticated_client.get(f"/api/tables/{table_t1.id}/").data["status_name"] == "AVAILABLE"

        assert [o["id"] for o in authenticated_client.get("/api/orders/paid/").data] == [order_id]
        assert authenticated_client.get("/api/orders/open/").data == []

    def test_start_unknown_table_is_404(self, authenticated_client, default_statuses):
        response = authenticated_client.post("/api/orders/start/", {"table_id": 999999}, format="json")
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data["code"] == "table_not_found"

    def test_pay_unknown_order_is_404(self, authenticated_client, default_statuses):
        response = authenticated_client.post(
            "/api/orders/999999/pay/", {"method": "CASH", "paid_amount": "1.00"}, format="json"
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data["code"] == "order_not_found"

    def test_update_status(self, authenticated_client, table_t1):
        order_id = authenticated_client.post(
            "/api/orders/start/", {"table_id": table_t1.id}, format="json"
        ).data["id"]

        response = authenticated_client.patch(
            f"/api/orders/{order_id}/status/", {"status_name": "SERVED"}, format="json"
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.data["status_name"] == "SERVED"

        response = authenticated_client.patch(
            f"/api/orders/{order_id}/status/", {"status_name": "LOST"}, format="json"
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data["code"] == "status_not_found"

    def test_unexpected_failure_is_opaque_500(self, authenticated_client, default_statuses):
        authenticated_client.raise_request_exception = False
        with mock.patch(
            "orders.views.status_actions.OrderService.get_paid_orders",
            side_effect=RuntimeError("connection lost"),
        ):
            response = authenticated_client.get("/api/orders/paid/")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data == {"error": "Operation failed", "code": "operation_failed"}


@pytest.mark.django_db
class TestOrderItemEndpoints:
    """Nested /orders/{order_pk}/items/ routes"""

    def test_item_crud(self, authenticated_client, table_t1, burger, soda):
        order_id = authenticated_client.post(
            "/api/orders/", {"table_id": table_t1.id, "items": [{"menu_item_id": burger.id}]}, format="json"
        ).data["id"]

        response = authenticated_client.post(
            f"/api/orders/{order_id}/items/", {"menu_item_id": soda.id, "quantity": 2}, format="json"
        )
        assert response.status_code == status.HTTP_201_CREATED
        assert len(response.data["items"]) == 2
        soda_line = response.data["items"][1]

        response = authenticated_client.patch(
            f"/api/orders/{order_id}/items/{soda_line['id']}/", {"notes": "no ice"}, format="json"
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.data["items"][1]["notes"] == "no ice"
        assert response.data["items"][1]["quantity"] == 2

        response = authenticated_client.delete(f"/api/orders/{order_id}/items/{soda_line['id']}/")
        assert response.status_code == status.HTTP_200_OK
        assert [i["item_name"] for i in response.data["items"]] == ["Burger"]

    def test_item_of_other_order_is_400(self, authenticated_client, table_t1, table_t2, burger):
        line = {"items": [{"menu_item_id": burger.id}]}
        first = authenticated_client.post("/api/orders/", {**line, "table_id": table_t1.id}, format="json").data
        second = authenticated_client.post("/api/orders/", {**line, "table_id": table_t2.id}, format="json").data

        response = authenticated_client.delete(
            f"/api/orders/{first['id']}/items/{second['items'][0]['id']}/"
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["code"] == "invalid_data"
