from django.contrib import admin

from .models import User, SellerProfile, SellerFollow, Product, Order, Notification


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ("user_id", "email", "display_name", "last_login", "is_active")
    search_fields = ("email", "display_name")
    list_filter = ("is_active", "is_staff", "is_superuser")
    exclude = ("password",)


class SellerFollowInline(admin.TabularInline):
    model = SellerFollow
    extra = 0
    raw_id_fields = ("user",)


@admin.register(SellerProfile)
class SellerProfileAdmin(admin.ModelAdmin):
    list_display = ("owner", "facebook_url", "phone_number", "updated_at")
    search_fields = ("owner__email", "owner__display_name", "phone_number")
    inlines = [SellerFollowInline]


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "seller", "category", "price", "discount", "stock", "created_at")
    list_filter = ("category", "created_at")
    search_fields = ("name", "seller__email", "seller_name")
    raw_id_fields = ("seller",)


# orders are written by checkout; admin edits (e.g. status) reach the live dashboard through signals
@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ("id", "buyer_name", "seller", "total", "status", "created_at")
    list_filter = ("status", "created_at")
    search_fields = ("buyer_name", "seller__email")
    raw_id_fields = ("seller",)


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "type", "title", "read", "created_at")
    list_filter = ("type", "read", "created_at")
    search_fields = ("title", "message", "user__email")
    raw_id_fields = ("user", "order")
