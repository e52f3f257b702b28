from django.contrib.auth.decorators import login_required
from django.http import HttpRequest, JsonResponse
from django.shortcuts import render, redirect, get_object_or_404
from django.urls import reverse
from django.views.decorators.csrf import csrf_protect
from django.views.decorators.http import require_GET, require_POST

from sellerdesk.models import Notification
from sellerdesk.services.notifications import acknowledge, acknowledge_all, destination_after_ack
from sellerdesk.services.snapshots import notification_snapshot
from sellerdesk.views.helpers import wants_json


@require_GET
@login_required
def notifications_inbox(request: HttpRequest):
    snapshot = notification_snapshot(request.user.pk)
    return render(request, "sellerdesk/notifications.html", {
        "notifications": snapshot.notifications,
        "unread_count": snapshot.unread_count,
    })


@require_POST
@login_required
@csrf_protect
def notification_open(request: HttpRequest, pk):
    """
    Acknowledge, then navigate. The read flag is stored before the response
    leaves, so the destination page never sees the notification as unread.
    """
    n = get_object_or_404(Notification, pk=pk, user=request.user)
    acknowledge(n)

    target = destination_after_ack(n, reverse("notifications"))
    if wants_json(request):
        return JsonResponse({"ok": True, "read": True, "redirect": target})
    return redirect(target)


@require_POST
@login_required
@csrf_protect
def notifications_mark_all_read(request: HttpRequest):
    acknowledge_all(request.user)
    if wants_json(request):
        return JsonResponse({"ok": True, "unread": 0})
    return redirect("notifications")
