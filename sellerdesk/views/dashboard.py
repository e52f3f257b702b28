import logging

from django.conf import settings
from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.db import DatabaseError
from django.http import HttpRequest
from django.shortcuts import render, redirect
from django.views.decorators.csrf import csrf_protect
from django.views.decorators.http import require_GET, require_POST

from sellerdesk.forms import ProductUploadForm, ContactSettingsForm, has_image, IMAGE_REQUIRED_MESSAGE
from sellerdesk.services.products import load_products, create_product
from sellerdesk.services.profiles import load_profile, update_contact
from sellerdesk.services.snapshots import order_snapshot
from sellerdesk.views.helpers import posted_values

logger = logging.getLogger(__name__)

TEMPLATE = "sellerdesk/dashboard.html"


def _dashboard_context(request: HttpRequest, *, upload_form=None, contact_form=None, show_settings=False):
    user = request.user

    # one-shot reads: failures leave empty state
    profile = load_profile(user)
    products = load_products(user)

    # first orders snapshot; the socket keeps it current afterwards
    orders = order_snapshot(user.pk)

    if contact_form is None:
        contact_form = ContactSettingsForm(initial={
            "facebook_url": profile.facebook_url,
            "phone_number": profile.phone_number,
        })

    return {
        "me": user,
        "shop_name": user.display_name or "My Shop",
        "profile": profile,
        "products": products,
        "recent_orders": orders.recent(),
        "has_orders": bool(orders.orders),
        "new_order_count": orders.new_order_count,
        "upload_form": upload_form or ProductUploadForm(initial={"discount": 0}),
        "contact_form": contact_form,
        "show_settings": show_settings,
        "orders_url": settings.ORDERS_URL,
        "currency_symbol": settings.CURRENCY_SYMBOL,
    }


@require_GET
@login_required
def seller_dashboard(request: HttpRequest):
    show_settings = request.GET.get("settings") == "1"
    return render(request, TEMPLATE, _dashboard_context(request, show_settings=show_settings))


@require_POST
@login_required
@csrf_protect
def upload_product(request: HttpRequest):
    if not has_image(request.POST):
        # keep what was typed, but don't pile field errors on top of the notice
        messages.error(request, IMAGE_REQUIRED_MESSAGE)
        form = ProductUploadForm(initial=posted_values(request.POST, ProductUploadForm.base_fields))
        return render(request, TEMPLATE, _dashboard_context(request, upload_form=form), status=400)

    form = ProductUploadForm(request.POST)
    if not form.is_valid():
        messages.error(request, "Please correct the highlighted fields.")
        return render(request, TEMPLATE, _dashboard_context(request, upload_form=form), status=400)

    try:
        create_product(request.user, **form.cleaned_data)
    except DatabaseError as e:
        logger.exception("product upload failed", extra={"seller": request.user.pk})
        messages.error(request, f"Failed to upload product: {e}")
        return render(request, TEMPLATE, _dashboard_context(request, upload_form=form))

    messages.success(request, "Product uploaded successfully!")
    # fresh GET: blank form, full product list
    return redirect("seller_dashboard")


@require_POST
@login_required
@csrf_protect
def save_contact(request: HttpRequest):
    form = ContactSettingsForm(request.POST)
    if form.is_valid():
        try:
            update_contact(request.user, **form.cleaned_data)
        except DatabaseError:
            logger.exception("contact update failed", extra={"user": request.user.pk})
        else:
            messages.success(request, "Contact info updated!")
            return redirect("seller_dashboard")

    messages.error(request, "Failed to update contact info")
    return render(request, TEMPLATE, _dashboard_context(request, contact_form=form, show_settings=True))
