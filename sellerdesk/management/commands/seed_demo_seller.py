from datetime import timedelta
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from sellerdesk.models import Notification, Order, Product, SellerFollow, SellerProfile
from sellerdesk.services.notifications import notify, T_NEW_ORDER, T_ORDER_UPDATE, T_MESSAGE, T_FOLLOW
from sellerdesk.services.products import create_product

User = get_user_model()

ORDERS = [
    {"buyer_name": "Maria Santos", "items": [{"sku": "EL-001", "qty": 1}], "total": Decimal("1299.00"), "status": Order.STATUS_TO_SHIP},
    {"buyer_name": "Jose Reyes", "items": [{"sku": "FA-014", "qty": 2}], "total": Decimal("450.50"), "status": Order.STATUS_COMPLETED},
    {"buyer_name": "Ana Cruz", "items": [{"sku": "HO-203", "qty": 1}, {"sku": "HO-204", "qty": 3}], "total": Decimal("875.00"), "status": Order.STATUS_TO_SHIP},
    {"buyer_name": "Luis Garcia", "items": [], "total": Decimal("99.99"), "status": "Cancelled"},
]


class Command(BaseCommand):
    help = "Create a demo seller with products, orders, followers and notifications."

    def add_arguments(self, parser):
        parser.add_argument("--email", default="seller@example.com")
        parser.add_argument("--password", default="seller12345")

    @transaction.atomic
    def handle(self, *args, **options):
        email = options["email"]
        seller = User.objects.filter(email=email).first()
        if seller is None:
            seller = User.objects.create_user(email=email, password=options["password"], display_name="Demo Shop")
        profile, _ = SellerProfile.objects.get_or_create(owner=seller)

        if not Product.objects.filter(seller=seller).exists():
            create_product(
                seller,
                name="Wireless Earbuds",
                category="Electronics",
                price=Decimal("999"),
                stock=25,
                discount=20,
                image="https://images.example.com/earbuds.jpg",
                description="Bluetooth 5.3, 24h battery.",
            )

        orders = list(Order.objects.filter(seller=seller).order_by("-created_at"))
        if not orders:
            now = timezone.now()
            orders = [
                Order.objects.create(seller=seller, created_at=now - timedelta(hours=i), **data)
                for i, data in enumerate(ORDERS)
            ]

        buyer = (
            User.objects.filter(email="buyer@example.com").first()
            or User.objects.create_user(email="buyer@example.com", display_name="Demo Buyer")
        )
        SellerFollow.objects.get_or_create(profile=profile, user=buyer)

        if not Notification.objects.filter(user=seller).exists():
            notify(user=seller, type=T_NEW_ORDER, title="New order", message="Maria Santos placed an order.", order=orders[0])
            notify(user=seller, type=T_ORDER_UPDATE, title="Order completed", message="Jose Reyes received the order.",
                   order=orders[1] if len(orders) > 1 else None)
            notify(user=seller, type=T_MESSAGE, title="New message", message="Is this still available?")
            notify(user=seller, type=T_FOLLOW, title="New follower", message="Demo Buyer followed your shop.")

        self.stdout.write(self.style.SUCCESS(f"Demo seller ready: {email}"))
