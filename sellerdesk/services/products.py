# sellerdesk/services/products.py
from __future__ import annotations

import logging
from decimal import Decimal, ROUND_HALF_UP

from django.db import DatabaseError
from django.utils import timezone

from sellerdesk.models import Product

logger = logging.getLogger(__name__)


def compute_original_price(price: Decimal, discount: int) -> Decimal:
    """
    Pre-discount price shown struck through next to `price`.

    100 @ 20% -> 125. Rounded to a whole number half-up; with no discount
    the entered price is kept as-is.
    """
    if discount > 0:
        raw = Decimal(price) / (1 - Decimal(discount) / 100)
        return raw.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return Decimal(price)


# largest amount a price column (max_digits=12, decimal_places=2) holds
MAX_PRICE = Decimal("9999999999.99")

PRICE_TOO_HIGH_MESSAGE = "Price is too high for this discount."


def original_price_fits(price: Decimal, discount: int) -> bool:
    """A steep discount can push the pre-discount price past what the column stores."""
    return compute_original_price(price, discount) <= MAX_PRICE


def load_products(seller) -> list[Product]:
    """One-shot read of the seller's products, newest first. Empty on failure."""
    try:
        return list(Product.objects.filter(seller=seller).order_by("-created_at"))
    except DatabaseError:
        logger.exception("could not load products", extra={"seller": seller.pk})
        return []


def create_product(seller, *, name, category, price, stock, discount, image, description) -> Product:
    """
    Write a new product for `seller`. Raises DatabaseError on failure so the
    caller can surface the message and keep the form.
    """
    product = Product.objects.create(
        seller=seller,
        seller_name=seller.seller_name,
        name=name,
        category=category or "",
        price=price,
        stock=stock,
        discount=discount,
        original_price=compute_original_price(price, discount),
        image=image,
        description=description or "",
        rating=Product.INITIAL_RATING,
        sold=0,
        created_at=timezone.now(),
    )
    logger.info("product %s uploaded", product.pk, extra={"seller": seller.pk})
    return product
