from fastapi import APIRouter

from order_ledger.api.routes import dashboard, menu, order

api_router = APIRouter()
api_router.include_router(menu.router)
api_router.include_router(order.router)
api_router.include_router(dashboard.router)
