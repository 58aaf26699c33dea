"""
客户相关API接口模块

每个接口调用 CustomerRepository 的对应方法，并将 Result 转换为HTTP状态码：
查询列表失败 500，按ID查询失败 404，新增/更新/删除失败 400。
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request

from app.api.dependencies import get_customer_repository
from app.infrastructure.response import success_response, error_response, json_response
from app.repositories import CustomerRepository
from app.schemas.customer import CustomerCreate, CustomerUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


# 获取客户列表接口
@router.get("")
def list_customers(
        id: Optional[int] = None,  # 按客户ID过滤
        name: Optional[str] = None,  # 按姓名子串过滤
        email: Optional[str] = None,  # 按邮箱子串过滤
        repository: CustomerRepository = Depends(get_customer_repository),
):
    """
    获取客户列表，支持按ID、姓名、邮箱过滤

    Returns:
        200: 客户列表
        500: 查询失败
    """
    try:
        result = repository.list(id, name, email)
        if result.is_failed:
            return json_response(error_response(msg=result.error, code=500))

        return json_response(success_response(data=[c.to_dict() for c in result.value]))
    except Exception as e:
        logger.exception("Failed to list customers")
        return json_response(error_response(msg=f"Failed to list customers: {str(e)}", code=500))


# 获取客户详情接口
@router.get("/{customer_id}")
def get_customer(
        customer_id: int,
        repository: CustomerRepository = Depends(get_customer_repository),
):
    """
    根据ID获取客户

    Returns:
        200: 客户详情
        404: ID无效或客户不存在
    """
    try:
        result = repository.get_by_id(customer_id)
        if result.is_failed:
            return json_response(error_response(msg=result.error, code=404))

        return json_response(success_response(data=result.value.to_dict()))
    except Exception as e:
        logger.exception(f"Failed to get customer #{customer_id}")
        return json_response(error_response(msg=f"Failed to get customer: {str(e)}", code=500))


# 创建客户接口
@router.post("")
def create_customer(
        customer_data: CustomerCreate,
        request: Request,
        repository: CustomerRepository = Depends(get_customer_repository),
):
    """
    创建新客户

    Returns:
        201: 新建的客户，Location 头指向客户详情地址
        400: 数据无效或保存失败
    """
    try:
        customer = customer_data.to_model()
        result = repository.create(customer)
        if result.is_failed:
            return json_response(error_response(msg=result.error, code=400))

        location = str(request.url_for("get_customer", customer_id=customer.id))
        return json_response(
            success_response(data=customer.to_dict(), msg=result.value, code=201),
            headers={"Location": location},
        )
    except Exception as e:
        logger.exception("Failed to create customer")
        return json_response(error_response(msg=f"Failed to create customer: {str(e)}", code=500))


# 更新客户接口
@router.put("")
def update_customer(
        customer_data: CustomerUpdate,
        repository: CustomerRepository = Depends(get_customer_repository),
):
    """
    整体覆盖更新客户

    Returns:
        200: 更新后的客户
        400: 数据无效、客户不存在或保存失败
    """
    try:
        result = repository.update(customer_data.to_model())
        if result.is_failed:
            return json_response(error_response(msg=result.error, code=400))

        customer = repository.get_by_id(customer_data.id).value
        return json_response(success_response(data=customer.to_dict(), msg=result.value))
    except Exception as e:
        logger.exception(f"Failed to update customer #{customer_data.id}")
        return json_response(error_response(msg=f"Failed to update customer: {str(e)}", code=500))


# 删除客户接口
@router.delete("")
def delete_customer(
        id: int,  # 待删除的客户ID，通过查询参数传入
        repository: CustomerRepository = Depends(get_customer_repository),
):
    """
    根据ID删除客户（同时删除其订单）

    Returns:
        200: 删除成功消息
        400: ID无效、客户不存在或删除失败
    """
    try:
        result = repository.delete(id)
        if result.is_failed:
            return json_response(error_response(msg=result.error, code=400))

        return json_response(success_response(data=result.value, msg=result.value))
    except Exception as e:
        logger.exception(f"Failed to delete customer #{id}")
        return json_response(error_response(msg=f"Failed to delete customer: {str(e)}", code=500))
