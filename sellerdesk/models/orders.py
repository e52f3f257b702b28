from django.conf import settings
from django.db import models
from django.utils import timezone


class Order(models.Model):
    # status is free-form; these are the values the dashboard knows about
    STATUS_TO_SHIP = "To Ship"
    STATUS_COMPLETED = "Completed"

    seller = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="orders",
    )
    buyer_name = models.CharField(max_length=255)
    items = models.JSONField(default=list, blank=True)
    total = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    status = models.CharField(max_length=50, default=STATUS_TO_SHIP, db_index=True)

    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        indexes = [
            models.Index(fields=["seller", "created_at"], name="order_seller_created_idx"),
        ]

    def __str__(self):
        return f"order {self.pk} for {self.seller_id} ({self.status})"

    @property
    def item_count(self) -> int:
        return len(self.items or [])
