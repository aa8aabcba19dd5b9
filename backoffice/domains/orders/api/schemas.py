"""
Orders API Schemas

Pydantic schemas for request/response validation. JSON keys are camelCase.
"""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from backoffice.domains.orders.domain.entities import DeliveryRoute, Order, OrderItem, Review


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ==================== REQUESTS ====================


class CustomizationRequest(CamelModel):
    type: str
    option: str
    extra_price: float = Field(default=0, ge=0)


class OrderItemRequest(CamelModel):
    product: str
    quantity: int = Field(..., ge=1)
    selected_customizations: list[CustomizationRequest] = Field(default_factory=list)


class ShippingAddressSchema(CamelModel):
    first_name: str | None = None
    last_name: str | None = None
    street_address: str | None = None
    city: str | None = None
    postal_code: str | None = None
    phone: str | None = None
    email: str | None = None
    notes: str | None = None


class CreateOrderRequest(CamelModel):
    items: list[OrderItemRequest] = Field(..., min_length=1)
    shipping_address: ShippingAddressSchema = Field(default_factory=ShippingAddressSchema)
    payment_method: str | None = None
    coupon_code: str | None = None


class OrderStatusUpdateRequest(CamelModel):
    status: str | None = None


class RouteAssignmentRequest(CamelModel):
    """Fields are optional here; presence rules depend on the action."""

    order_id: str | None = None
    action: str | None = None
    route_id: str | None = None
    delivery_date: str | None = None


class ReviewCreateRequest(CamelModel):
    product: str
    order: str
    rating: int
    comment: str | None = None
    images: list[str] = Field(default_factory=list)


class DeliveryRouteCreateRequest(CamelModel):
    city: str = Field(..., min_length=1, max_length=100)
    delivery_date: str
    status: str = "pending"


# ==================== RESPONSES ====================


class OwnerSummary(CamelModel):
    id: str
    name: str | None = None
    email: str | None = None


class ProductSummary(CamelModel):
    id: str
    name: str | None = None
    price: float | None = None
    image: str | None = None


class CustomizationResponse(CamelModel):
    type: str
    option: str
    extra_price: float


class OrderItemResponse(CamelModel):
    product: ProductSummary
    quantity: int
    selected_customizations: list[CustomizationResponse]
    price_at_purchase: float
    is_reviewed: bool
    can_review: bool

    @classmethod
    def from_entity(cls, order: Order, item: OrderItem) -> "OrderItemResponse":
        return cls(
            product=ProductSummary(
                id=str(item.product_id),
                name=item.product_name,
                price=float(item.product_price) if item.product_price is not None else None,
                image=item.product_image,
            ),
            quantity=item.quantity,
            selected_customizations=[
                CustomizationResponse(type=c.type, option=c.option, extra_price=float(c.extra_price))
                for c in item.customizations
            ],
            price_at_purchase=float(item.price_at_purchase),
            is_reviewed=item.is_reviewed,
            can_review=order.can_review(item),
        )


class DeliveryRouteResponse(CamelModel):
    id: str
    city: str
    delivery_date: date | None = None
    status: str
    accepts_assignments: bool

    @classmethod
    def from_entity(cls, route: DeliveryRoute) -> "DeliveryRouteResponse":
        return cls(
            id=str(route.id),
            city=route.city,
            delivery_date=route.delivery_date,
            status=route.status.value,
            accepts_assignments=route.accepts_assignments(),
        )


class OrderResponse(CamelModel):
    id: str
    owner: OwnerSummary
    items: list[OrderItemResponse]
    subtotal: float
    discount: float
    discount_percentage: float
    total_price: float
    status: str
    payment_method: str
    coupon_code: str | None = None
    delivery_route: DeliveryRouteResponse | None = None
    delivery_date: date | None = None
    shipping_address: ShippingAddressSchema
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, order: Order) -> "OrderResponse":
        return cls(
            id=str(order.id),
            owner=OwnerSummary(id=str(order.owner_id), name=order.owner_name, email=order.owner_email),
            items=[OrderItemResponse.from_entity(order, item) for item in order.items],
            subtotal=float(order.subtotal),
            discount=float(order.discount),
            discount_percentage=float(order.discount_percentage),
            total_price=float(order.total_price),
            status=order.status.value,
            payment_method=order.payment_method.value,
            coupon_code=order.coupon_code,
            delivery_route=DeliveryRouteResponse.from_entity(order.delivery_route) if order.delivery_route else None,
            delivery_date=order.delivery_date,
            shipping_address=ShippingAddressSchema(**order.shipping_address.to_dict()),
            created_at=order.created_at,
            updated_at=order.updated_at,
        )


class OrderEnvelope(CamelModel):
    success: bool = True
    message: str | None = None
    order: OrderResponse


class OrderListResponse(CamelModel):
    success: bool = True
    count: int
    orders: list[OrderResponse]


class CustomerOrdersResponse(CamelModel):
    success: bool = True
    orders_without_review: list[OrderResponse]
    orders_with_review: list[OrderResponse]


class ReviewResponse(CamelModel):
    id: str
    user: str
    product: str
    order: str
    rating: int
    comment: str
    images: list[str]
    created_at: datetime

    @classmethod
    def from_entity(cls, review: Review) -> "ReviewResponse":
        return cls(
            id=str(review.id),
            user=str(review.user_id),
            product=str(review.product_id),
            order=str(review.order_id),
            rating=review.rating,
            comment=review.comment,
            images=review.images,
            created_at=review.created_at,
        )


class ReviewEnvelope(CamelModel):
    success: bool = True
    review: ReviewResponse


class DeliveryRouteListResponse(CamelModel):
    success: bool = True
    routes: list[DeliveryRouteResponse]


class DeliveryRouteEnvelope(CamelModel):
    success: bool = True
    route: DeliveryRouteResponse


class MessageResponse(CamelModel):
    success: bool = True
    message: str


class DashboardStatsResponse(BaseModel):
    success: bool = True
    data: dict[str, Any]
    timestamp: datetime
