import logging

from django.db import DatabaseError
from django.shortcuts import get_object_or_404
from django.urls import reverse
from drf_spectacular.utils import extend_schema, OpenApiResponse
from rest_framework import permissions, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.views import APIView

from .forms import IMAGE_REQUIRED_MESSAGE, has_image
from .models import Notification
from .serializers import (
    ProductSerializer, ProductUploadSerializer, ContactSerializer,
    order_snapshot_payload, notification_snapshot_payload,
)
from .services.notifications import acknowledge, acknowledge_all, destination_after_ack
from .services.products import load_products
from .services.profiles import load_profile, update_contact
from .services.snapshots import order_snapshot, notification_snapshot

logger = logging.getLogger(__name__)


@extend_schema(tags=["Seller"])
class MyProductsView(APIView):
    """
    GET  /api/me/products/  -> the seller's products, newest first
    POST /api/me/products/  -> upload one product
    """
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(responses={200: ProductSerializer(many=True)})
    def get(self, request):
        return Response(ProductSerializer(load_products(request.user), many=True).data)

    @extend_schema(
        request=ProductUploadSerializer,
        responses={
            201: OpenApiResponse(description="Product created; full product list returned."),
            400: OpenApiResponse(description="Validation error."),
            503: OpenApiResponse(description="Write failed."),
        },
    )
    def post(self, request):
        if not has_image(request.data):
            return Response(
                {"ok": False, "errors": {"image": [str(IMAGE_REQUIRED_MESSAGE)]}},
                status=status.HTTP_400_BAD_REQUEST,
            )

        serializer = ProductUploadSerializer(data=request.data, context={"request": request})
        if not serializer.is_valid():
            return Response({"ok": False, "errors": serializer.errors}, status=status.HTTP_400_BAD_REQUEST)

        try:
            product = serializer.save()
        except DatabaseError as e:
            logger.exception("product upload failed", extra={"seller": request.user.pk})
            return Response(
                {"ok": False, "detail": f"Failed to upload product: {e}"},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )

        return Response(
            {
                "ok": True,
                "product": ProductSerializer(product).data,
                "products": ProductSerializer(load_products(request.user), many=True).data,
            },
            status=status.HTTP_201_CREATED,
        )


@extend_schema(tags=["Seller"])
class MyOrdersView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(responses={200: OpenApiResponse(description="Orders newest first plus new_order_count.")})
    def get(self, request):
        return Response(order_snapshot_payload(order_snapshot(request.user.pk)))


@extend_schema(tags=["Seller"])
class MyContactView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(responses={200: ContactSerializer})
    def get(self, request):
        profile = load_profile(request.user)
        return Response(ContactSerializer(profile).data)

    @extend_schema(request=ContactSerializer, responses={200: ContactSerializer})
    def patch(self, request):
        serializer = ContactSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            update_contact(request.user, **serializer.validated_data)
        except DatabaseError:
            logger.exception("contact update failed", extra={"user": request.user.pk})
            return Response(
                {"ok": False, "detail": "Failed to update contact info"},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )
        return Response(ContactSerializer(load_profile(request.user)).data)


@extend_schema(tags=["Notifications"])
class NotificationViewSet(viewsets.ViewSet):
    """
    The signed-in user's notifications.
    """
    permission_classes = [permissions.IsAuthenticated]

    # ----------------------------------------
    # GET /api/notifications/
    # ----------------------------------------
    @extend_schema(
        responses={200: OpenApiResponse(description="Notifications, most recent first, plus unread_count.")},
    )
    def list(self, request):
        return Response(notification_snapshot_payload(notification_snapshot(request.user.pk)))

    # ----------------------------------------
    # POST /api/notifications/{id}/read/
    # ----------------------------------------
    @extend_schema(
        request=None,
        responses={200: OpenApiResponse(description="Notification marked as read; where to go next.")},
    )
    @action(detail=True, methods=["post"], url_path="read")
    def mark_read(self, request, pk=None):
        notification = get_object_or_404(Notification, pk=pk, user=request.user)
        acknowledge(notification)
        return Response(
            {
                "ok": True,
                "read": True,
                "redirect": destination_after_ack(notification, reverse("notifications")),
            },
            status=status.HTTP_200_OK,
        )

    # ----------------------------------------
    # POST /api/notifications/read-all/
    # ----------------------------------------
    @extend_schema(request=None, responses={200: OpenApiResponse(description="All notifications read.")})
    @action(detail=False, methods=["post"], url_path="read-all")
    def mark_all_read(self, request):
        acknowledge_all(request.user)
        return Response({"ok": True, "unread": 0}, status=status.HTTP_200_OK)
