from .models import Notification


def navbar_counters(request):
    """
    Provides counts for the top bar:
    - unread_notifications
    """
    user = getattr(request, "user", None)
    if user is None or not user.is_authenticated:
        return {}

    return {
        "unread_notifications": Notification.objects.filter(user=user, read=False).count(),
    }
