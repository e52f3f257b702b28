from decimal import Decimal

from rest_framework import serializers

from .forms import IMAGE_REQUIRED_MESSAGE
from .models import Product, Order, Notification
from .services.notifications import icon_for
from .services.products import create_product, original_price_fits, PRICE_TOO_HIGH_MESSAGE
from .validators import validate_no_html
from .views.helpers import normalize_optional_url


# ---------- Products ----------
class ProductSerializer(serializers.ModelSerializer):
    url = serializers.CharField(source="get_absolute_url", read_only=True)

    class Meta:
        model = Product
        fields = [
            "id", "name", "category", "description", "image",
            "price", "discount", "original_price", "stock",
            "rating", "sold", "seller_name", "created_at", "url",
        ]
        read_only_fields = fields


class ProductUploadSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255, validators=[validate_no_html])
    category = serializers.ChoiceField(choices=Product.CATEGORY_CHOICES)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal("1"))
    stock = serializers.IntegerField(min_value=1)
    discount = serializers.IntegerField(min_value=0, max_value=99, default=0)
    image = serializers.CharField(
        max_length=500,
        error_messages={"required": IMAGE_REQUIRED_MESSAGE, "blank": IMAGE_REQUIRED_MESSAGE},
    )
    description = serializers.CharField(validators=[validate_no_html])

    def validate(self, attrs):
        if not original_price_fits(attrs["price"], attrs.get("discount", 0)):
            raise serializers.ValidationError({"price": [PRICE_TOO_HIGH_MESSAGE]})
        return attrs

    def create(self, validated_data):
        return create_product(self.context["request"].user, **validated_data)


# ---------- Orders ----------
class OrderSerializer(serializers.ModelSerializer):
    item_count = serializers.IntegerField(read_only=True)

    class Meta:
        model = Order
        fields = ["id", "buyer_name", "items", "item_count", "total", "status", "created_at"]
        read_only_fields = fields


# ---------- Notifications ----------
class NotificationSerializer(serializers.ModelSerializer):
    order_id = serializers.IntegerField(read_only=True, allow_null=True)
    icon = serializers.SerializerMethodField()
    color = serializers.SerializerMethodField()

    class Meta:
        model = Notification
        fields = ["id", "type", "title", "message", "order_id", "read", "created_at", "icon", "color"]
        read_only_fields = fields

    def get_icon(self, obj) -> str:
        return icon_for(obj.type)[0]

    def get_color(self, obj) -> str:
        return icon_for(obj.type)[1]


# ---------- Contact settings ----------
class ContactSerializer(serializers.Serializer):
    facebook_url = serializers.CharField(max_length=500, allow_blank=True, required=False, default="")
    phone_number = serializers.CharField(max_length=30, allow_blank=True, required=False, default="")
    followers_count = serializers.IntegerField(read_only=True)

    def validate_facebook_url(self, value):
        return normalize_optional_url(value)

    def validate_phone_number(self, value):
        return (value or "").strip()


# ---------- Live snapshots ----------
def order_snapshot_payload(snapshot) -> dict:
    return {
        "type": "orders",
        "orders": OrderSerializer(snapshot.orders, many=True).data,
        "new_order_count": snapshot.new_order_count,
    }


def notification_snapshot_payload(snapshot) -> dict:
    return {
        "type": "notifications",
        "notifications": NotificationSerializer(snapshot.notifications, many=True).data,
        "unread_count": snapshot.unread_count,
    }


SNAPSHOT_PAYLOADS = {
    "orders": order_snapshot_payload,
    "notifications": notification_snapshot_payload,
}
