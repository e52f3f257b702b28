from django.urls import path

from .views import dashboard, notifications


urlpatterns = [
    # --- Seller dashboard ---
    path('seller/', dashboard.seller_dashboard, name='seller_dashboard'),
    path('seller/products/', dashboard.upload_product, name='upload_product'),
    path('seller/contact/', dashboard.save_contact, name='save_contact'),

    # --- Notifications ---
    path('notifications/', notifications.notifications_inbox, name='notifications'),
    path('notifications/<int:pk>/read/', notifications.notification_open, name='notification_open'),
    path('notifications/read-all/', notifications.notifications_mark_all_read, name='notifications_mark_all_read'),
]
