"""
Orders Admin API Routes

Back-office endpoints: order listing, delivery-route assignment,
delivery-route management and dashboard statistics.
"""


from fastapi import APIRouter, Depends, Query, status

from backoffice.api.dependencies import require_admin
from backoffice.core.domain import ValidationException
from backoffice.domains.orders.api.dependencies import (
    get_assign_delivery_route_use_case,
    get_create_delivery_route_use_case,
    get_dashboard_stats_use_case,
    get_delete_delivery_route_use_case,
    get_list_all_orders_use_case,
    get_list_delivery_routes_use_case,
    get_unassign_delivery_route_use_case,
    parse_entity_id,
)
from backoffice.domains.orders.api.schemas import (
    DashboardStatsResponse,
    DeliveryRouteCreateRequest,
    DeliveryRouteEnvelope,
    DeliveryRouteListResponse,
    DeliveryRouteResponse,
    MessageResponse,
    OrderEnvelope,
    OrderListResponse,
    OrderResponse,
    RouteAssignmentRequest,
)
from backoffice.domains.orders.application.use_cases import (
    AssignDeliveryRouteRequest,
    AssignDeliveryRouteUseCase,
    CreateDeliveryRouteRequest,
    CreateDeliveryRouteUseCase,
    DeleteDeliveryRouteUseCase,
    GetDashboardStatsUseCase,
    ListAllOrdersUseCase,
    ListDeliveryRoutesUseCase,
    UnassignDeliveryRouteUseCase,
)
from backoffice.domains.orders.domain.services import parse_delivery_date
from backoffice.domains.orders.domain.value_objects import CurrentUser


router = APIRouter(prefix="/admin", tags=["Admin"])

ACTION_ADD = "add"
ACTION_REMOVE = "remove"


@router.get("/orders", response_model=OrderListResponse)
async def list_orders(
    admin: CurrentUser = Depends(require_admin),
    use_case: ListAllOrdersUseCase = Depends(get_list_all_orders_use_case),
):
    """Every order with owner, products and delivery route populated."""
    orders = await use_case.execute(admin)
    return OrderListResponse(count=len(orders), orders=[OrderResponse.from_entity(o) for o in orders])


@router.patch("/orders", response_model=OrderEnvelope)
async def update_order_delivery_route(
    request: RouteAssignmentRequest,
    admin: CurrentUser = Depends(require_admin),
    assign_use_case: AssignDeliveryRouteUseCase = Depends(get_assign_delivery_route_use_case),
    unassign_use_case: UnassignDeliveryRouteUseCase = Depends(get_unassign_delivery_route_use_case),
):
    """
    Attach an order to a delivery route ("add") or detach it ("remove").

    "add" requires routeId and a parseable deliveryDate.
    """
    if not request.order_id or not request.action:
        raise ValidationException("orderId and action are required")

    action = request.action.strip().lower()
    if action == ACTION_ADD:
        if not request.route_id:
            raise ValidationException("routeId is required to add an order to a route", field="routeId")
        requested_date = parse_delivery_date(request.delivery_date)
        result = await assign_use_case.execute(
            AssignDeliveryRouteRequest(
                order_id=parse_entity_id(request.order_id, "Order"),
                route_id=parse_entity_id(request.route_id, "DeliveryRoute"),
                acting_user=admin,
                requested_date=requested_date,
            )
        )
        message = "Order successfully updated"
    elif action == ACTION_REMOVE:
        result = await unassign_use_case.execute(parse_entity_id(request.order_id, "Order"), admin)
        message = "Order successfully cleared"
    else:
        raise ValidationException(f"Invalid action '{request.action}', expected 'add' or 'remove'", field="action")

    return OrderEnvelope(message=message, order=OrderResponse.from_entity(result.order))


@router.get("/delivery-routes", response_model=DeliveryRouteListResponse)
async def list_delivery_routes(
    assignable: bool = Query(default=True),
    admin: CurrentUser = Depends(require_admin),
    use_case: ListDeliveryRoutesUseCase = Depends(get_list_delivery_routes_use_case),
):
    """Delivery routes; by default only those still accepting orders."""
    routes = await use_case.execute(admin, assignable_only=assignable)
    return DeliveryRouteListResponse(routes=[DeliveryRouteResponse.from_entity(r) for r in routes])


@router.post("/delivery-routes", response_model=DeliveryRouteEnvelope, status_code=status.HTTP_201_CREATED)
async def create_delivery_route(
    request: DeliveryRouteCreateRequest,
    admin: CurrentUser = Depends(require_admin),
    use_case: CreateDeliveryRouteUseCase = Depends(get_create_delivery_route_use_case),
):
    route = await use_case.execute(
        CreateDeliveryRouteRequest(
            city=request.city,
            delivery_date=request.delivery_date,
            status=request.status,
            acting_user=admin,
        )
    )
    return DeliveryRouteEnvelope(route=DeliveryRouteResponse.from_entity(route))


@router.delete("/delivery-routes/{route_id}", response_model=MessageResponse)
async def delete_delivery_route(
    route_id: str,
    admin: CurrentUser = Depends(require_admin),
    use_case: DeleteDeliveryRouteUseCase = Depends(get_delete_delivery_route_use_case),
):
    """Delete a route; its orders are detached, not deleted."""
    await use_case.execute(parse_entity_id(route_id, "DeliveryRoute"), admin)
    return MessageResponse(message="Delivery route deleted")


@router.get("/stats", response_model=DashboardStatsResponse)
async def get_dashboard_stats(
    admin: CurrentUser = Depends(require_admin),
    use_case: GetDashboardStatsUseCase = Depends(get_dashboard_stats_use_case),
):
    """Dashboard statistics, recomputed on every request."""
    result = await use_case.execute(admin)
    return DashboardStatsResponse(data=result.stats.to_dict(), timestamp=result.generated_at)
