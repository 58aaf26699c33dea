from fastapi import APIRouter

from app.api.v1.endpoints import customer, order


api_router = APIRouter()

# 包含各模块的路由
api_router.include_router(customer.router, prefix="/Customer", tags=["Customer"])
api_router.include_router(order.router, prefix="/Order", tags=["Order"])
