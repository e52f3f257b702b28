from django.conf import settings
from django.db import models
from django.utils import timezone


class Notification(models.Model):
    TYPE_NEW_ORDER = "new_order"
    TYPE_ORDER_UPDATE = "order_update"
    TYPE_MESSAGE = "message"
    TYPE_FOLLOW = "follow"

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="notifications",
    )

    # drives the icon in the inbox; unknown values get the default bell
    type = models.CharField(max_length=30, default=TYPE_MESSAGE, db_index=True)

    title = models.CharField(max_length=255)
    message = models.TextField(blank=True)

    # optional link target
    order = models.ForeignKey(
        "sellerdesk.Order",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="notifications",
    )

    created_at = models.DateTimeField(default=timezone.now)
    read = models.BooleanField(default=False, db_index=True)

    def __str__(self):
        return f"{self.user} - {self.type} - {self.title}"
