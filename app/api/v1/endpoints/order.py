"""
订单相关API接口模块

每个接口调用 OrderRepository 的对应方法，并将 Result 转换为HTTP状态码：
查询、删除失败返回 404，新增、更新失败返回 400。
"""
import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from app.api.dependencies import get_order_repository
from app.infrastructure.response import success_response, error_response, json_response
from app.repositories import OrderRepository
from app.schemas.order import OrderCreate, OrderUpdate
from app.services.order_service import order_service

logger = logging.getLogger(__name__)

router = APIRouter()


# 获取订单列表接口
@router.get("")
def list_orders(
        customer_id: Optional[int] = Query(None, alias="customerId"),  # 按客户过滤
        date_from: Optional[datetime] = Query(None, alias="dateFrom"),  # 送达日期下限
        date_to: Optional[datetime] = Query(None, alias="dateTo"),  # 送达日期上限
        status: Optional[str] = None,  # 按订单状态过滤
        repository: OrderRepository = Depends(get_order_repository),
):
    """
    获取订单列表，支持按客户、送达日期区间、状态过滤

    Returns:
        200: 订单列表（含订单项）
        404: 查询失败
    """
    try:
        result = repository.list(customer_id, date_from, date_to, status)
        if result.is_failed:
            return json_response(error_response(msg=result.error, code=404))

        return json_response(success_response(data=[o.to_dict() for o in result.value]))
    except Exception as e:
        logger.exception("Failed to list orders")
        return json_response(error_response(msg=f"Failed to list orders: {str(e)}", code=500))


# 获取订单详情接口
@router.get("/{order_id}")
def get_order(
        order_id: int,
        repository: OrderRepository = Depends(get_order_repository),
):
    """
    根据ID获取订单

    Returns:
        200: 订单详情
        404: ID无效或订单不存在
    """
    try:
        result = repository.get_by_id(order_id)
        if result.is_failed:
            return json_response(error_response(msg=result.error, code=404))

        return json_response(success_response(data=result.value.to_dict()))
    except Exception as e:
        logger.exception(f"Failed to get order #{order_id}")
        return json_response(error_response(msg=f"Failed to get order: {str(e)}", code=500))


# 创建订单接口
@router.post("")
def create_order(
        order_data: OrderCreate,
        request: Request,
        repository: OrderRepository = Depends(get_order_repository),
):
    """
    创建新订单（含订单项）

    Returns:
        201: 新建的订单，Location 头指向订单详情地址
        400: 订单无订单项、客户不存在或保存失败
    """
    try:
        order = order_data.to_model()
        result = repository.create(order)
        if result.is_failed:
            return json_response(error_response(msg=result.error, code=400))

        location = str(request.url_for("get_order", order_id=order.id))
        return json_response(
            success_response(data=order.to_dict(), msg=result.value, code=201),
            headers={"Location": location},
        )
    except Exception as e:
        logger.exception("Failed to create order")
        return json_response(error_response(msg=f"Failed to create order: {str(e)}", code=500))


# 更新订单接口
@router.put("/{order_id}")
def update_order(
        order_id: int,
        order_data: OrderUpdate,
        repository: OrderRepository = Depends(get_order_repository),
):
    """
    整体覆盖更新订单，请求中的订单项替换原有订单项

    Returns:
        200: 更新后的订单
        400: 路径ID与请求体ID不一致、客户或订单不存在、保存失败
    """
    if order_id != order_data.id:
        return json_response(error_response(msg="The provided ID does not match the order ID.", code=400))

    try:
        result = repository.update(order_data.to_model())
        if result.is_failed:
            return json_response(error_response(msg=result.error, code=400))

        order = repository.get_by_id(order_id).value
        return json_response(success_response(data=order.to_dict(), msg=result.value))
    except Exception as e:
        logger.exception(f"Failed to update order #{order_id}")
        return json_response(error_response(msg=f"Failed to update order: {str(e)}", code=500))


# 删除订单接口
@router.delete("/{order_id}")
def delete_order(
        order_id: int,
        repository: OrderRepository = Depends(get_order_repository),
):
    """
    根据ID删除订单及其订单项

    Returns:
        200: 删除成功消息
        404: ID无效、订单不存在或删除失败
    """
    try:
        result = repository.delete(order_id)
        if result.is_failed:
            return json_response(error_response(msg=result.error, code=404))

        return json_response(success_response(data=result.value, msg=result.value))
    except Exception as e:
        logger.exception(f"Failed to delete order #{order_id}")
        return json_response(error_response(msg=f"Failed to delete order: {str(e)}", code=500))


# 取消订单接口
@router.post("/{order_id}/cancel")
def cancel_order(
        order_id: int,
        repository: OrderRepository = Depends(get_order_repository),
):
    """
    取消订单，状态改为 Cancelled

    Returns:
        200: 取消后的订单
        404: 订单不存在
        400: 订单已送达，不能取消
    """
    try:
        found = repository.get_by_id(order_id)
        if found.is_failed:
            return json_response(error_response(msg=found.error, code=404))

        try:
            order = order_service.cancel_order(found.value)
        except ValueError as e:
            return json_response(error_response(msg=str(e), code=400))

        result = repository.update(order)
        if result.is_failed:
            return json_response(error_response(msg=result.error, code=400))

        return json_response(success_response(data=order.to_dict(), msg="Order cancelled successfully."))
    except Exception as e:
        logger.exception(f"Failed to cancel order #{order_id}")
        return json_response(error_response(msg=f"Failed to cancel order: {str(e)}", code=500))
