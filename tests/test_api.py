from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from sellerdesk.models import Notification, Product, SellerProfile


@pytest.fixture
def api(seller):
    client = APIClient()
    client.force_authenticate(user=seller)
    return client


@pytest.mark.django_db
def test_anonymous_is_refused():
    client = APIClient()
    for url in ["/api/me/products/", "/api/me/orders/", "/api/me/contact/", "/api/notifications/"]:
        assert client.get(url).status_code in (401, 403)


def test_upload_returns_product_and_refreshed_list(api, product_post):
    response = api.post("/api/me/products/", product_post, format="json")

    assert response.status_code == 201
    body = response.json()
    assert body["ok"] is True
    assert body["product"]["original_price"] == "125.00"
    assert body["product"]["rating"] == "4.50"
    assert body["product"]["url"] == f"/product/{body['product']['id']}/"
    assert [p["name"] for p in body["products"]] == ["Wireless Earbuds"]


def test_upload_without_image_is_rejected_before_validation(api, product_post):
    product_post.pop("image")
    product_post["price"] = "not a number"

    response = api.post("/api/me/products/", product_post, format="json")

    assert response.status_code == 400
    assert response.json() == {"ok": False, "errors": {"image": ["Please upload a product image"]}}
    assert Product.objects.count() == 0


def test_upload_with_bad_numbers_lists_field_errors(api, product_post):
    product_post["stock"] = "many"

    response = api.post("/api/me/products/", product_post, format="json")

    assert response.status_code == 400
    assert "stock" in response.json()["errors"]
    assert Product.objects.count() == 0


def test_products_list_is_newest_first(api, seller, product_post):
    api.post("/api/me/products/", {**product_post, "name": "first"}, format="json")
    api.post("/api/me/products/", {**product_post, "name": "second"}, format="json")

    response = api.get("/api/me/products/")

    assert [p["name"] for p in response.json()] == ["second", "first"]


def test_orders_payload(api, make_order):
    make_order(buyer_name="Ana", minutes_ago=2, items=[{"sku": "A"}, {"sku": "B"}])
    make_order(buyer_name="Ben", status="Completed", minutes_ago=1)

    body = api.get("/api/me/orders/").json()

    assert body["type"] == "orders"
    assert body["new_order_count"] == 1
    assert [o["buyer_name"] for o in body["orders"]] == ["Ben", "Ana"]
    assert body["orders"][1]["item_count"] == 2
    assert Decimal(body["orders"][1]["total"]) == Decimal("250.00")


def test_contact_read_and_update(api, seller):
    assert api.get("/api/me/contact/").json() == {
        "facebook_url": "", "phone_number": "", "followers_count": 0,
    }

    response = api.patch(
        "/api/me/contact/",
        {"facebook_url": "www.facebook.com/shop", "phone_number": "0917"},
        format="json",
    )

    assert response.status_code == 200
    assert response.json()["facebook_url"] == "https://www.facebook.com/shop"
    assert SellerProfile.objects.get(owner=seller).phone_number == "0917"


def test_contact_update_without_profile_reports_failure(api, seller):
    SellerProfile.objects.filter(owner=seller).delete()

    response = api.patch("/api/me/contact/", {"phone_number": "0917"}, format="json")

    assert response.status_code == 503
    assert response.json()["detail"] == "Failed to update contact info"


def test_notifications_list_and_read(api, make_notification, make_order):
    n = make_notification(type=Notification.TYPE_NEW_ORDER, order=make_order(), minutes_ago=5)
    make_notification(type="promo", minutes_ago=1)

    body = api.get("/api/notifications/").json()
    assert body["unread_count"] == 2
    assert [x["icon"] for x in body["notifications"]] == ["bell", "package"]
    assert body["notifications"][1]["color"] == "orange"

    response = api.post(f"/api/notifications/{n.pk}/read/")
    assert response.json() == {"ok": True, "read": True, "redirect": "/orders/"}
    n.refresh_from_db()
    assert n.read is True


def test_notification_of_another_user_is_not_found(api, make_notification, other_seller):
    n = make_notification(owner=other_seller)

    assert api.post(f"/api/notifications/{n.pk}/read/").status_code == 404


def test_read_all(api, seller, make_notification):
    make_notification()
    make_notification()

    response = api.post("/api/notifications/read-all/")

    assert response.json() == {"ok": True, "unread": 0}
    assert Notification.objects.filter(user=seller, read=False).count() == 0


def test_token_login(client, seller):
    response = client.post(
        "/api/auth/token/",
        {"email": "seller@example.com", "password": "seller-pass-123"},
        content_type="application/json",
    )

    assert response.status_code == 200
    assert "access" in response.json()


def test_upload_rejects_price_whose_original_price_overflows(api, product_post):
    product_post.update(price="100000000", discount="99")

    response = api.post("/api/me/products/", product_post, format="json")

    assert response.status_code == 400
    assert response.json()["errors"]["price"] == ["Price is too high for this discount."]
    assert Product.objects.count() == 0
