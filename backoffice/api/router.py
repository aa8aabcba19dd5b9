from fastapi import APIRouter

from backoffice.domains.orders.api import admin_routes as orders_admin
from backoffice.domains.orders.api import routes as orders

api_router = APIRouter()

# Customer endpoints
api_router.include_router(orders.router)

# Back-office endpoints
api_router.include_router(orders_admin.router)
