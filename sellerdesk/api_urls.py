from django.urls import path, include
from rest_framework.routers import DefaultRouter
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from .api_views import MyProductsView, MyOrdersView, MyContactView, NotificationViewSet

router = DefaultRouter()
router.register(r'notifications', NotificationViewSet, basename='notifications')

urlpatterns = [
    path('', include(router.urls)),

    # seller dashboard
    path('me/products/', MyProductsView.as_view(), name='api_my_products'),
    path('me/orders/', MyOrdersView.as_view(), name='api_my_orders'),
    path('me/contact/', MyContactView.as_view(), name='api_my_contact'),

    # token issuing for API clients; credentials are checked by Django auth
    path('auth/token/', TokenObtainPairView.as_view(), name='api_token'),
    path('auth/refresh/', TokenRefreshView.as_view(), name='api_token_refresh'),
]
