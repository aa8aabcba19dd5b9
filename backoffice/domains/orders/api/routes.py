"""
Orders API Routes

Customer-facing endpoints: placing orders, listing them, status updates
and reviews.
"""

from fastapi import APIRouter, Depends, Query, status

from backoffice.api.dependencies import get_current_user
from backoffice.domains.orders.api.dependencies import (
    get_create_order_use_case,
    get_customer_orders_use_case,
    get_submit_review_use_case,
    get_update_order_status_use_case,
    parse_entity_id,
    parse_reference,
)
from backoffice.domains.orders.api.schemas import (
    CreateOrderRequest,
    CustomerOrdersResponse,
    OrderEnvelope,
    OrderResponse,
    OrderStatusUpdateRequest,
    ReviewCreateRequest,
    ReviewEnvelope,
    ReviewResponse,
)
from backoffice.domains.orders.application.use_cases import (
    CreateOrderUseCase,
    GetCustomerOrdersUseCase,
    SubmitReviewUseCase,
    UpdateOrderStatusUseCase,
)
from backoffice.domains.orders.application.use_cases.create_order import (
    CreateOrderRequest as CreateOrderCommand,
)
from backoffice.domains.orders.application.use_cases.create_order import OrderItemInput
from backoffice.domains.orders.application.use_cases.get_orders import GetCustomerOrdersRequest
from backoffice.domains.orders.application.use_cases.submit_review import SubmitReviewRequest
from backoffice.domains.orders.application.use_cases.update_order_status import UpdateOrderStatusRequest
from backoffice.domains.orders.domain.value_objects import CurrentUser

router = APIRouter(tags=["Orders"])


@router.post("/orders", response_model=OrderEnvelope, status_code=status.HTTP_201_CREATED)
async def create_order(
    request: CreateOrderRequest,
    user: CurrentUser = Depends(get_current_user),
    use_case: CreateOrderUseCase = Depends(get_create_order_use_case),
):
    """Place an order for the caller."""
    command = CreateOrderCommand(
        owner=user,
        items=[
            OrderItemInput(
                product_id=parse_reference(item.product, "product"),
                quantity=item.quantity,
                customizations=[c.model_dump(by_alias=True) for c in item.selected_customizations],
            )
            for item in request.items
        ],
        shipping_address=request.shipping_address.model_dump(by_alias=True),
        payment_method=request.payment_method,
        coupon_code=request.coupon_code,
    )
    result = await use_case.execute(command)
    return OrderEnvelope(order=OrderResponse.from_entity(result.order))


@router.get("/orders", response_model=CustomerOrdersResponse)
async def get_orders(
    owner: str | None = Query(default=None),
    user: CurrentUser = Depends(get_current_user),
    use_case: GetCustomerOrdersUseCase = Depends(get_customer_orders_use_case),
):
    """
    List a user's orders split by review state.

    Defaults to the caller; only admins may ask for someone else.
    """
    owner_id = parse_entity_id(owner, "User") if owner else None
    result = await use_case.execute(GetCustomerOrdersRequest(acting_user=user, owner_id=owner_id))
    return CustomerOrdersResponse(
        orders_without_review=[OrderResponse.from_entity(o) for o in result.orders_without_review],
        orders_with_review=[OrderResponse.from_entity(o) for o in result.orders_with_review],
    )


@router.patch("/orders/{order_id}", response_model=OrderEnvelope)
async def update_order_status(
    order_id: str,
    request: OrderStatusUpdateRequest,
    user: CurrentUser = Depends(get_current_user),
    use_case: UpdateOrderStatusUseCase = Depends(get_update_order_status_use_case),
):
    """Change an order's status (admin)."""
    result = await use_case.execute(
        UpdateOrderStatusRequest(
            order_id=parse_entity_id(order_id, "Order"),
            new_status=request.status,
            acting_user=user,
        )
    )
    return OrderEnvelope(
        message=f"Order status updated from {result.previous_status.value} to {result.order.status.value}",
        order=OrderResponse.from_entity(result.order),
    )


@router.post("/reviews", response_model=ReviewEnvelope, status_code=status.HTTP_201_CREATED)
async def submit_review(
    request: ReviewCreateRequest,
    user: CurrentUser = Depends(get_current_user),
    use_case: SubmitReviewUseCase = Depends(get_submit_review_use_case),
):
    """Review one product of one of the caller's delivered orders."""
    result = await use_case.execute(
        SubmitReviewRequest(
            order_id=parse_reference(request.order, "order"),
            product_id=parse_reference(request.product, "product"),
            acting_user=user,
            rating=request.rating,
            comment=request.comment,
            images=request.images,
        )
    )
    return ReviewEnvelope(review=ReviewResponse.from_entity(result.review))
