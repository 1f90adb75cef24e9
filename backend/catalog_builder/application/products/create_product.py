from decimal import Decimal, InvalidOperation
from typing import Optional

from catalog_builder.extensions import db
from catalog_builder.models.product import Product
from catalog_builder.utils.audit import log_action
from catalog_builder.utils.transaction import transactional


def parse_price(value) -> Optional[Decimal]:
    if value is None or value == "":
        return None
    try:
        price = Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"Invalid price: {value!r}") from exc
    if not price.is_finite():
        raise ValueError(f"Invalid price: {value!r}")
    if price < 0:
        raise ValueError("Price cannot be negative")
    return price


def create_product(*, user_id: str, title: str, price=None) -> Product:
    if not title or not title.strip():
        raise ValueError("Title is required")

    product = Product()
    product.user_id = user_id
    product.title = title.strip()
    product.price = parse_price(price)

    with transactional():
        db.session.add(product)
        db.session.flush()

        log_action(
            actor_id=user_id,
            action="product.create",
            entity_type="product",
            entity_id=product.id,
            payload={"title": product.title},
        )

    return product
