from django.urls import path

from . import consumers

websocket_urlpatterns = [
    path("ws/seller/orders/", consumers.OrdersConsumer.as_asgi()),
    path("ws/notifications/", consumers.NotificationsConsumer.as_asgi()),
]
