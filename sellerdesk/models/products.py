from decimal import Decimal

from django.conf import settings
from django.db import models
from django.utils import timezone


class Product(models.Model):
    CATEGORY_CHOICES = [
        ("Electronics", "Electronics"),
        ("Fashion", "Fashion & Apparel"),
        ("Home", "Home & Living"),
        ("Beauty", "Beauty & Personal Care"),
        ("Sports", "Sports & Outdoors"),
        ("Food", "Food & Beverages"),
    ]

    INITIAL_RATING = Decimal("4.5")

    seller = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="products",
    )
    seller_name = models.CharField(max_length=255)

    name = models.CharField(max_length=255)
    category = models.CharField(max_length=30, choices=CATEGORY_CHOICES, blank=True)
    description = models.TextField(blank=True)

    # image reference handed over by the upload widget
    image = models.CharField(max_length=500)

    price = models.DecimalField(max_digits=12, decimal_places=2)
    discount = models.PositiveSmallIntegerField(default=0)
    original_price = models.DecimalField(max_digits=12, decimal_places=2)
    stock = models.PositiveIntegerField(null=True, blank=True)

    rating = models.DecimalField(max_digits=3, decimal_places=2, default=INITIAL_RATING)
    sold = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["seller", "created_at"], name="product_seller_created_idx"),
        ]

    def __str__(self):
        return self.name

    def get_absolute_url(self):
        return settings.PRODUCT_URL_TEMPLATE.format(id=self.pk)
