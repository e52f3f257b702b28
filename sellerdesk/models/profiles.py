from django.conf import settings
from django.db import models


class SellerProfile(models.Model):
    """The `users` document: contact fields and followers of one account."""

    owner = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="seller_profile",
        primary_key=True,
    )

    # CONTACT
    facebook_url = models.URLField(max_length=500, blank=True)
    phone_number = models.CharField(max_length=30, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"profile of {self.owner_id}"


class SellerFollow(models.Model):
    profile = models.ForeignKey(
        "sellerdesk.SellerProfile",
        on_delete=models.CASCADE,
        related_name="followers",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="following_sellers",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["profile", "user"], name="uniq_seller_follow")
        ]

    def __str__(self):
        return f"{self.user_id} follows seller {self.profile_id}"
