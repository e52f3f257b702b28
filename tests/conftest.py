"""
Pytest fixtures for the seller dashboard and notifications inbox tests.
"""
from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from sellerdesk.models import User, Order, Notification


@pytest.fixture
def seller(db):
    return User.objects.create_user(
        email="seller@example.com",
        password="seller-pass-123",
        display_name="Juan's Gadgets",
    )


@pytest.fixture
def other_seller(db):
    return User.objects.create_user(email="other@example.com", password="other-pass-123")


@pytest.fixture
def seller_client(client, seller):
    client.force_login(seller)
    return client


@pytest.fixture
def make_order(seller):
    """Orders come from checkout; tests write them directly."""
    def _make(status=Order.STATUS_TO_SHIP, owner=None, minutes_ago=0, **extra):
        data = {
            "buyer_name": "Maria Santos",
            "items": [{"sku": "EL-001", "qty": 1}],
            "total": Decimal("250.00"),
        }
        data.update(extra)
        return Order.objects.create(
            seller=owner or seller,
            status=status,
            created_at=timezone.now() - timedelta(minutes=minutes_ago),
            **data,
        )
    return _make


@pytest.fixture
def make_notification(seller):
    def _make(owner=None, minutes_ago=0, **extra):
        data = {
            "type": Notification.TYPE_MESSAGE,
            "title": "New message",
            "message": "Is this still available?",
        }
        data.update(extra)
        return Notification.objects.create(
            user=owner or seller,
            created_at=timezone.now() - timedelta(minutes=minutes_ago),
            **data,
        )
    return _make


@pytest.fixture
def product_post():
    """A complete, valid upload form submission."""
    return {
        "name": "Wireless Earbuds",
        "category": "Electronics",
        "price": "100",
        "stock": "25",
        "discount": "20",
        "image": "https://images.example.com/earbuds.jpg",
        "description": "Bluetooth 5.3, 24h battery.",
    }
