"""
Model <-> entity mapping shared by the orders repositories.
"""

from decimal import Decimal

from backoffice.core.domain import ensure_aware, to_amount
from backoffice.domains.orders.domain.entities import DeliveryRoute, Order, OrderItem, Product
from backoffice.domains.orders.domain.value_objects import Customization, ShippingAddress
from backoffice.models.db import DeliveryRoute as DeliveryRouteModel
from backoffice.models.db import Order as OrderModel
from backoffice.models.db import OrderItem as OrderItemModel
from backoffice.models.db import Product as ProductModel


def route_to_entity(model: DeliveryRouteModel) -> DeliveryRoute:
    return DeliveryRoute(
        id=model.id,
        city=model.city,
        delivery_date=model.delivery_date,
        status=model.status,
        created_at=ensure_aware(model.created_at),
        updated_at=ensure_aware(model.updated_at),
    )


def product_to_entity(model: ProductModel) -> Product:
    return Product(
        id=model.id,
        name=model.name,
        price=to_amount(model.price),
        image=model.image,
        category_id=model.category_id,
        created_at=ensure_aware(model.created_at),
        updated_at=ensure_aware(model.updated_at),
    )


def order_item_to_entity(model: OrderItemModel) -> OrderItem:
    product = model.product
    return OrderItem(
        product_id=model.product_id,
        quantity=model.quantity,
        price_at_purchase=to_amount(model.price_at_purchase),
        customizations=[Customization.from_dict(c) for c in model.customizations or []],
        is_reviewed=bool(model.is_reviewed),
        product_name=product.name if product else None,
        product_image=product.image if product else None,
        product_price=to_amount(product.price) if product else None,
    )


def order_to_entity(model: OrderModel) -> Order:
    """Requires items (with product), user and delivery_route to be loaded."""
    user = model.user
    return Order(
        id=model.id,
        owner_id=model.user_id,
        items=[order_item_to_entity(item) for item in model.items],
        discount_percentage=Decimal(str(model.discount_percentage or 0)),
        status=model.status,
        payment_method=model.payment_method,
        coupon_code=model.coupon_code,
        delivery_route_id=model.delivery_route_id,
        delivery_date=model.delivery_date,
        shipping_address=ShippingAddress.from_dict(model.shipping_address),
        owner_name=user.name if user else None,
        owner_email=user.email if user else None,
        delivery_route=route_to_entity(model.delivery_route) if model.delivery_route else None,
        created_at=ensure_aware(model.created_at),
        updated_at=ensure_aware(model.updated_at),
    )


def order_to_model(order: Order) -> OrderModel:
    model = OrderModel(
        user_id=order.owner_id,
        subtotal=order.subtotal,
        discount=order.discount,
        discount_percentage=order.discount_percentage,
        total_price=order.total_price,
        status=order.status.value,
        payment_method=order.payment_method.value,
        coupon_code=order.coupon_code,
        delivery_route_id=order.delivery_route_id,
        delivery_date=order.delivery_date,
        shipping_address=order.shipping_address.to_dict(),
        created_at=order.created_at,
        updated_at=order.updated_at,
    )
    if order.id is not None:
        model.id = order.id
    model.items = [
        OrderItemModel(
            position=position,
            product_id=item.product_id,
            quantity=item.quantity,
            customizations=[c.to_dict() for c in item.customizations],
            price_at_purchase=item.price_at_purchase,
            is_reviewed=item.is_reviewed,
        )
        for position, item in enumerate(order.items)
    ]
    return model
