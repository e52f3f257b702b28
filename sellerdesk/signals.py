from django.db.models.signals import post_save, post_delete
from django.dispatch import receiver

from .models import Order, Notification, SellerProfile, User
from .services.live import broadcast_change


@receiver([post_save, post_delete], sender=Order)
def order_changed(sender, instance: Order, **kwargs):
    broadcast_change("orders", instance.seller_id)


@receiver([post_save, post_delete], sender=Notification)
def notification_changed(sender, instance: Notification, **kwargs):
    broadcast_change("notifications", instance.user_id)


@receiver(post_save, sender=User)
def create_seller_profile(sender, instance: User, created: bool, **kwargs):
    """
    Every account gets its profile row up front so contact settings
    have something to update.
    """
    if not created or kwargs.get("raw"):
        return
    SellerProfile.objects.get_or_create(owner=instance)
